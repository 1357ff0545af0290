"""
Develop Parameter Schema Package.

Single source of truth for the develop parameters exposed by the Lightroom
plug-in's settings table.

Import Order
------------
1. REGISTRY is imported first (empty at this point)
2. Schema classes (ParamDef, GenericBinding, VersionedBinding)
3. definitions module is imported LAST to populate and freeze REGISTRY

After initialization, REGISTRY.is_frozen is True and any attempt to
register new parameters will raise RegistryFrozenError.
"""

from .registry import REGISTRY, ParamRegistry, RegistryFrozenError
from .schema import ParamDef, GenericBinding, VersionedBinding

# IMPORTANT: This import populates REGISTRY with all parameter definitions
# and freezes it. It must come after REGISTRY is imported and must not be removed.
from . import definitions  # noqa: F401  pylint: disable=unused-import

__all__ = [
    'REGISTRY', 'ParamRegistry', 'RegistryFrozenError',
    'ParamDef', 'GenericBinding', 'VersionedBinding',
]
