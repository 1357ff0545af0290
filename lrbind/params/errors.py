"""
Consistent Error Message Formatting for Parameter Validation.

Error Message Format
--------------------
All error messages follow this structure:
- Parameter name in single quotes: 'param_name'
- Clear description of the problem
- Current value if relevant: got <value>

Examples:
- "'Exposure' min must be <= max 5, got 10"
- "'Tint' is already registered"
- "Unknown parameter 'Exposur'. Did you mean 'Exposure'?"
"""

from typing import Any, List, Optional


def format_param(name: str) -> str:
    """Format a parameter name for error messages."""
    return f"'{name}'"


def format_value(value: Any) -> str:
    """Format a value for error messages."""
    if isinstance(value, str):
        return f"'{value}'"
    return str(value)


def empty_name_error(index: int) -> str:
    return f"Parameter #{index} has an empty name"


def name_type_error(index: int, got: Any) -> str:
    return f"Parameter #{index} name must be a string, got {got!r}"


def duplicate_error(param: str) -> str:
    return f"{format_param(param)} is already registered"


def type_error(param: str, field: str, expected_type: str, got: Any) -> str:
    """
    Create a type mismatch error message.

    Args:
        param: Parameter name
        field: Offending field of the parameter (e.g. 'min')
        expected_type: Expected type description
        got: Actual value received

    Returns:
        Formatted error message.
    """
    return f"{format_param(param)} {field} must be {expected_type}, got {format_value(got)}"


def range_error(param: str, min_value: Any, max_value: Any) -> str:
    return f"{format_param(param)} min must be <= max {format_value(max_value)}, got {format_value(min_value)}"


def binding_error(param: str, got: Any) -> str:
    return f"{format_param(param)} has an invalid binding, got {got!r}"


def unknown_param_error(param: str, suggestions: Optional[List[str]] = None) -> str:
    """
    Create an error message for an unknown parameter with suggestions.

    Args:
        param: The unknown parameter name.
        suggestions: Optional list of similar valid parameter names.

    Returns:
        Formatted error message with "Did you mean?" if suggestions available.
    """
    base_msg = f"Unknown parameter {format_param(param)}"
    if suggestions:
        if len(suggestions) == 1:
            return f"{base_msg}. Did you mean {format_param(suggestions[0])}?"
        quoted = [format_param(s) for s in suggestions]
        return f"{base_msg}. Did you mean one of: {', '.join(quoted)}?"
    return base_msg
