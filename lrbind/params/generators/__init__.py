"""
Code Generators for the Parameter Registry.

This package contains generators that produce text from the parameter registry:
- bindings_gen: Generate the Lua develop-parameter binding blocks
- docs_gen: Generate parameter documentation
"""

from .bindings_gen import (
    generate_binding_block,
    iter_binding_blocks,
    render_bindings,
    write_bindings,
)
from .docs_gen import generate_param_docs

__all__ = [
    'generate_binding_block',
    'iter_binding_blocks',
    'render_bindings',
    'write_bindings',
    'generate_param_docs',
]
