"""
Parameter Documentation Generator.

Generates a markdown reference of all develop parameters: bounds, category
and the getter each one is bound to.
"""

import re
from typing import Iterable, List

from ...state import AccessorConfig
from ..schema import ParamDef
from .bindings_gen import format_bound, select_getter


def _escape_cell(s: str) -> str:
    """Escape text so it stays inside one markdown table cell or list item."""
    return s.replace('|', '\\|').replace('`', '\\`').replace('\n', ' ')


def _code(s: str, in_table: bool = True) -> str:
    """
    Wrap text in a code span that survives backticks and pipes in the text.

    The fence is one backtick longer than the longest run inside the text.
    Backslashes are literal in code spans, so the only escape is the pipe,
    and only inside a table row.
    """
    fence = '`' * (max((len(run) for run in re.findall('`+', s)), default=0) + 1)
    pad = ' ' if s.startswith('`') or s.endswith('`') else ''
    body = s.replace('\n', ' ')
    if in_table:
        body = body.replace('|', '\\|')
    return f'{fence}{pad}{body}{pad}{fence}'


def generate_param_docs(params: Iterable[ParamDef], accessors: AccessorConfig = None) -> str:
    """
    Generate markdown documentation for the given parameters.

    Args:
        params: The parameter registry (or any ordered iterable of ParamDef)
        accessors: Setter/getter references, defaults to AccessorConfig()

    Returns:
        Markdown document as a string
    """
    if accessors is None:
        accessors = AccessorConfig()

    params = list(params)
    versioned = sum(1 for param in params if param.is_versioned)

    lines: List[str] = [
        '# Develop Parameters',
        '',
        '> AUTO-GENERATED from the lrbind.params registry - Do not edit manually.',
        '',
        f'{len(params)} parameters ({versioned} versioned). '
        f'All parameters are written with `{accessors.setter}`.',
        '',
        '| Parameter | Category | Min | Max | Getter | Setting |',
        '|-----------|----------|-----|-----|--------|---------|',
    ]

    for param in params:
        lines.append('| ' + ' | '.join([
            _code(param.name),
            _escape_cell(param.category),
            format_bound(param.name, "min", param.min),
            format_bound(param.name, "max", param.max),
            _code(select_getter(param, accessors)),
            _code(param.alias) if param.is_versioned else '',
        ]) + ' |')

    described = [param for param in params if param.description]
    if described:
        lines.append('')
        lines.append('## Notes')
        lines.append('')
        for param in described:
            lines.append(f'- {_code(param.name, in_table=False)}: {_escape_cell(param.description)}')

    lines.append('')
    return '\n'.join(lines)
