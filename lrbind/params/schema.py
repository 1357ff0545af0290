"""
Parameter Schema Definitions.

This module defines the dataclasses describing a develop parameter:
- ParamDef: A single named, bounded parameter (name, category, bounds, binding)
- GenericBinding / VersionedBinding: Which getter the host uses to read it

A parameter is either read through the generic getter, or through the
versioned getter under an alternate setting name (e.g. Lightroom's
"Exposure2012" process-version setting for the "Exposure" slider). The
binding is a two-variant choice rather than a nullable alias so that every
consumer dispatches over exactly these two cases.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from ..common import ValidationError


DEFAULT_CATEGORY = "develop"


@dataclass(frozen=True)
class GenericBinding:
    """Parameter is read with the generic getter under its own name."""

    @property
    def alias(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class VersionedBinding:
    """
    Parameter is read with the versioned getter.

    Attributes:
        alias: Versioned setting name used by the host (e.g. "Exposure2012")
    """
    alias: str

    def __post_init__(self):
        if not isinstance(self.alias, str) or len(self.alias) == 0:
            raise ValidationError(f"Versioned binding alias must be a non-empty string, got {self.alias!r}")


Binding = Union[GenericBinding, VersionedBinding]


@dataclass(frozen=True)
class ParamDef:
    """
    Definition of a single develop parameter.

    Bounds describe the legal value domain consumed by the host at runtime;
    they are carried into the generated bindings and never enforced here.
    Invariants (non-empty unique name, min <= max) are checked when the
    parameter is registered, see ParamRegistry.register().

    Attributes:
        name: Parameter name as exposed by the host (e.g. "Exposure")
        min: Minimum bound (int or float)
        max: Maximum bound (int or float)
        binding: GenericBinding() or VersionedBinding(alias)
        category: Grouping tag (e.g. "develop")
        description: Human-readable description for docs
    """
    name: str
    min: Union[int, float]
    max: Union[int, float]
    binding: Binding = field(default_factory=GenericBinding)
    category: str = DEFAULT_CATEGORY
    description: str = ""

    @staticmethod
    def make(name: str, min: Union[int, float], max: Union[int, float],  # pylint: disable=redefined-builtin
             alias: Optional[str] = None, category: str = DEFAULT_CATEGORY,
             description: str = "") -> "ParamDef":
        """
        Build a ParamDef from an optional alias.

        An absent alias (None) selects GenericBinding; any other value selects
        VersionedBinding, which rejects an empty alias.
        """
        binding = GenericBinding() if alias is None else VersionedBinding(alias)
        return ParamDef(name=name, min=min, max=max, binding=binding,
                        category=category, description=description)

    @property
    def alias(self) -> Optional[str]:
        return self.binding.alias

    @property
    def is_versioned(self) -> bool:
        return isinstance(self.binding, VersionedBinding)
