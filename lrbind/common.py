import os, yaml

from rich.markup import escape

from .printer import cons


class LRBindException(Exception):
    pass


class ValidationError(LRBindException, ValueError):
    """A parameter descriptor violates a registry invariant."""


class SinkError(LRBindException, IOError):
    """The output sink refused the generated text."""


class ConfigError(LRBindException):
    pass


def file_write(filepath: str, content: str, if_different: bool = False):
    try:
        if if_different and os.path.isfile(filepath):
            try:
                with open(filepath, "r", encoding="utf-8") as f:
                    if f.read() == content:
                        return
            except UnicodeDecodeError:
                # Undecodable contents can't match; overwrite them
                pass

        with open(filepath, "w", encoding="utf-8") as f:
            f.write(content)
    except IOError as exc:
        raise SinkError(f'Failed to write to "{filepath}": {exc}') from exc


def file_read(filepath: str):
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return f.read()
    except (IOError, UnicodeDecodeError) as exc:
        raise LRBindException(f'Failed to read from "{filepath}": {exc}') from exc


def file_load_yaml(filepath: str):
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except (IOError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f'Failed to load YAML from "{filepath}": {exc}') from exc


def print_error(exc: Exception) -> None:
    cons.reset()
    cons.print(f"""\

[bold red]Error[/bold red]: {escape(str(exc))}
""", force=True)
