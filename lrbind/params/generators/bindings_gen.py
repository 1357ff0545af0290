"""
Lua Binding Generator.

Generates the develop-parameter entries of the plug-in's settings table from
the parameter registry. Each parameter becomes one block:

      Exposure = {
        min = -5,
        max = 5,
        setter = setDevelopParam,
        getter = get2012DevelopParam,
      },

Blocks are produced in registry order and are byte-identical across runs.
The text is meant to be pasted (or spliced) into a larger Lua table, so by
default no enclosing table is emitted.
"""

from typing import Iterable, Iterator, Optional, TextIO, Union

from ...common import ValidationError, SinkError
from ...state import AccessorConfig
from ..schema import ParamDef, GenericBinding, VersionedBinding
from ..errors import binding_error, type_error


INDENT = "  "


def format_bound(param_name: str, field: str, value: Union[int, float]) -> str:
    """
    Canonical, locale-independent text for a numeric bound.

    ints use str(), floats use repr() which is the shortest text that parses
    back to the same float (0.5 -> "0.5", 1e-07 -> "1e-07").
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(type_error(param_name, field, "an int or float", value))
    if isinstance(value, int):
        return str(value)
    return repr(value)


def select_getter(param: ParamDef, accessors: AccessorConfig) -> str:
    """Pick the getter reference for a parameter from its binding variant."""
    binding = param.binding

    if isinstance(binding, VersionedBinding):
        if not isinstance(binding.alias, str) or len(binding.alias) == 0:
            raise ValidationError(binding_error(param.name, binding))
        return accessors.versioned_getter

    if isinstance(binding, GenericBinding):
        return accessors.generic_getter

    raise ValidationError(binding_error(param.name, binding))


def generate_binding_block(param: ParamDef, accessors: AccessorConfig = None) -> str:
    """
    Generate the binding block for a single parameter.

    Raises:
        ValidationError: If the parameter is structurally invalid (bad name,
            non-numeric bound, unknown binding or empty alias).
    """
    if accessors is None:
        accessors = AccessorConfig()

    if not isinstance(param.name, str) or len(param.name) == 0:
        raise ValidationError(f"Cannot generate a binding for a parameter with an empty name, got {param.name!r}")

    getter = select_getter(param, accessors)

    lines = [
        f'{INDENT}{param.name} = {{',
        f'{INDENT * 2}min = {format_bound(param.name, "min", param.min)},',
        f'{INDENT * 2}max = {format_bound(param.name, "max", param.max)},',
        f'{INDENT * 2}setter = {accessors.setter},',
        f'{INDENT * 2}getter = {getter},',
        f'{INDENT}}},',
    ]

    return '\n'.join(lines) + '\n'


def iter_binding_blocks(params: Iterable[ParamDef], accessors: AccessorConfig = None) -> Iterator[str]:
    """Yield one binding block per parameter, in iteration order."""
    if accessors is None:
        accessors = AccessorConfig()

    for param in params:
        yield generate_binding_block(param, accessors)


def render_bindings(params: Iterable[ParamDef], accessors: AccessorConfig = None,
                    table: Optional[str] = None) -> str:
    """
    Generate the bindings for all parameters as a single string.

    Args:
        params: The parameter registry (or any ordered iterable of ParamDef)
        accessors: Setter/getter references, defaults to AccessorConfig()
        table: If given, wrap the blocks in "<table> = {" ... "}"

    Returns:
        Lua source text. Empty string for an empty registry without a table.
    """
    content = ''.join(iter_binding_blocks(params, accessors))

    if table is None:
        return content

    return f'{table} = {{\n{content}}}\n'


def write_bindings(params: Iterable[ParamDef], sink: TextIO, accessors: AccessorConfig = None,
                   table: Optional[str] = None) -> None:
    """
    Write the bindings for all parameters to a text sink.

    All blocks are generated before anything is written, so a parameter that
    fails to generate leaves the sink untouched.

    Raises:
        ValidationError: If a parameter is structurally invalid.
        SinkError: If the sink cannot accept the text.
    """
    content = render_bindings(params, accessors, table)

    try:
        sink.write(content)
    except (OSError, ValueError) as exc:
        raise SinkError(f"Failed to write bindings: {exc}") from exc
