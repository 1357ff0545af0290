"""
Parameter Registry.

Central storage for develop parameter definitions. The registry keeps
parameters in registration order, which is also the order in which bindings
are generated.

Usage
-----
The global REGISTRY instance is populated by importing the definitions module:

    from lrbind.params import REGISTRY

    param = REGISTRY.get('Exposure')
    for param in REGISTRY:
        ...

Standalone registries (e.g. in tests) are built with from_params(), which
validates every entry and returns a frozen registry:

    reg = ParamRegistry.from_params([ParamDef.make("Texture", -100, 100)])

Thread Safety
-------------
The registry is populated once and frozen. After freezing, it is safe to read
from multiple threads.
"""

import math
from typing import Dict, Iterable, Iterator, List, Mapping, Any
from types import MappingProxyType

from ..common import ValidationError
from .schema import ParamDef, GenericBinding, VersionedBinding
from .suggest import suggest_similar
from .errors import (
    empty_name_error,
    name_type_error,
    duplicate_error,
    type_error,
    range_error,
    binding_error,
    unknown_param_error,
)


class RegistryFrozenError(RuntimeError):
    """Raised when attempting to modify a frozen registry."""


def _is_bound_value(value: Any) -> bool:
    # bool is an int subclass but never a meaningful bound
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # ints are exact at any magnitude, only floats can be inf or nan
    return not isinstance(value, float) or math.isfinite(value)


class ParamRegistry:
    """
    Ordered registry of develop parameters.

    Attributes:
        _params: Insertion-ordered dict mapping names to ParamDef instances.
        _frozen: Whether the registry has been frozen (immutable).
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._params: Dict[str, ParamDef] = {}
        self._frozen: bool = False
        self._params_proxy: Mapping[str, ParamDef] = None

    @staticmethod
    def from_params(params: Iterable[ParamDef]) -> "ParamRegistry":
        """
        Build a frozen registry from an ordered sequence of parameters.

        Raises:
            ValidationError: On the first parameter that violates an invariant.
        """
        registry = ParamRegistry()
        for param in params:
            registry.register(param)
        registry.freeze()
        return registry

    def freeze(self) -> None:
        """
        Freeze the registry, preventing further modifications.

        This method is idempotent (safe to call multiple times).
        """
        if not self._frozen:
            self._frozen = True
            self._params_proxy = MappingProxyType(self._params)

    @property
    def is_frozen(self) -> bool:
        """Return True if the registry has been frozen."""
        return self._frozen

    def register(self, param: ParamDef) -> None:
        """
        Register a parameter definition at the end of the registry.

        Args:
            param: The parameter definition to register.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
            ValidationError: If the name is not a string, is empty or is already
                registered, if a bound is not an int or finite float, if min > max, or if the
                binding is not a GenericBinding/VersionedBinding.
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register '{param.name}': registry is frozen. "
                "All parameters must be registered before the registry is frozen."
            )

        if not isinstance(param.name, str):
            raise ValidationError(name_type_error(len(self._params) + 1, param.name))

        if len(param.name) == 0:
            raise ValidationError(empty_name_error(len(self._params) + 1))

        if param.name in self._params:
            raise ValidationError(duplicate_error(param.name))

        for field, value in (("min", param.min), ("max", param.max)):
            if not _is_bound_value(value):
                raise ValidationError(type_error(param.name, field, "an int or finite float", value))

        if param.min > param.max:
            raise ValidationError(range_error(param.name, param.min, param.max))

        if not isinstance(param.binding, (GenericBinding, VersionedBinding)):
            raise ValidationError(binding_error(param.name, param.binding))

        self._params[param.name] = param

    @property
    def all_params(self) -> Mapping[str, ParamDef]:
        """
        Get all registered parameters, in registration order.

        If the registry is frozen, returns a read-only view.
        """
        if self._frozen and self._params_proxy is not None:
            return self._params_proxy
        return self._params

    def __iter__(self) -> Iterator[ParamDef]:
        return iter(self._params.values())

    def __len__(self) -> int:
        return len(self._params)

    def __contains__(self, name: str) -> bool:
        return name in self._params

    def get(self, name: str) -> ParamDef:
        """
        Look up a parameter by name.

        Raises:
            KeyError: If no such parameter exists. The message carries
                "did you mean?" suggestions when there are close matches.
        """
        if name not in self._params:
            raise KeyError(unknown_param_error(name, suggest_similar(name, self._params.keys())))
        return self._params[name]

    def names(self) -> List[str]:
        return list(self._params.keys())

    def get_params_by_category(self, category: str) -> Dict[str, ParamDef]:
        """
        Get parameters with a specific category, keeping registration order.

        Args:
            category: The category tag (e.g., "develop").

        Returns:
            Dictionary mapping parameter names to their definitions.
        """
        return {name: param for name, param in self._params.items() if param.category == category}

    def get_all_categories(self) -> List[str]:
        """
        Get all categories used in the registry, in order of first use.
        """
        return list(dict.fromkeys(param.category for param in self._params.values()))

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about the registered parameters."""
        versioned = sum(1 for param in self._params.values() if param.is_versioned)

        return {
            "total_params": len(self._params),
            "versioned": versioned,
            "generic": len(self._params) - versioned,
            "by_category": {
                category: len(self.get_params_by_category(category))
                for category in self.get_all_categories()
            },
        }


# Global registry instance - populated when definitions module is imported
REGISTRY = ParamRegistry()
