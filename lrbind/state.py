import typing, dataclasses

import fastjsonschema

from .common import ConfigError, file_load_yaml


# Lua identifiers, optionally dotted (e.g. "LrDevelopController.setValue")
_LUA_IDENTIFIER = r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$"

ACCESSOR_CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "setter":           {"type": "string", "pattern": _LUA_IDENTIFIER},
        "generic_getter":   {"type": "string", "pattern": _LUA_IDENTIFIER},
        "versioned_getter": {"type": "string", "pattern": _LUA_IDENTIFIER},
    },
    "additionalProperties": False,
}

_validate_accessor_config = fastjsonschema.compile(ACCESSOR_CONFIG_SCHEMA)


@dataclasses.dataclass(frozen=True)
class AccessorConfig:
    """
    Accessor references written into every binding block.

    There is exactly one setter for the whole registry. The getter is picked
    per parameter: versioned_getter for parameters bound to a versioned
    setting name, generic_getter for everything else.
    """
    setter:           str = "setDevelopParam"
    generic_getter:   str = "getDevelopParam"
    versioned_getter: str = "get2012DevelopParam"

    @staticmethod
    def from_dict(d: dict):
        """ Create an AccessorConfig from a (partial) dictionary with the same
            keys as the fields of AccessorConfig. Missing keys keep their
            defaults. """
        if d is None:
            d = {}

        try:
            _validate_accessor_config(d)
        except fastjsonschema.JsonSchemaValueException as exc:
            raise ConfigError(f"Invalid accessor configuration: {exc.message}") from exc

        return AccessorConfig(**d)

    @staticmethod
    def from_file(filepath: str):
        return AccessorConfig.from_dict(file_load_yaml(filepath))

    def items(self) -> typing.Iterable[typing.Tuple[str, typing.Any]]:
        return dataclasses.asdict(self).items()

    def __str__(self) -> str:
        """ Returns a string like "setter=setDevelopParam & generic_getter=getDevelopParam" """
        return ' & '.join(f"{k}={v}" for k, v in self.items())


gARG: dict = {}

def ARG(arg: str, dflt = None) -> typing.Any:
    # pylint: disable=global-variable-not-assigned
    global gARG
    if arg in gARG:
        return gARG[arg]
    if dflt is not None:
        return dflt

    raise KeyError(f"{arg} is not an argument.")
