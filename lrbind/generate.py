"""
Generate Lua bindings and documentation from the parameter registry.

Run `lrbind generate -o <file>` after modifying params/definitions.py and
`lrbind generate -o <file> --check` in CI to catch stale output.
"""

import sys
from pathlib import Path

from .printer import cons
from .common import LRBindException, SinkError, file_read, file_write
from .state import ARG, AccessorConfig
from .params import REGISTRY
from .params.generators import render_bindings, write_bindings, generate_param_docs


def _check_or_write(path: Path, content: str, check_mode: bool) -> bool:
    """Check if file is up to date or write new content. Returns True on success."""
    if check_mode:
        if not path.exists():
            cons.print(f"[red]ERROR:[/red] {path} does not exist")
            return False
        if file_read(str(path)) != content:
            cons.print(f"[red]ERROR:[/red] {path} is out of date")
            cons.print("[yellow]Run lrbind generate to update[/yellow]")
            return False
        cons.print(f"[green]OK[/green] {path.name} is up to date")
    else:
        file_write(str(path), content, if_different=True)
        cons.print(f"[green]Generated[/green] {path}")
    return True


def _load_accessors() -> AccessorConfig:
    config_path = ARG("config")
    if config_path is None:
        return AccessorConfig()

    accessors = AccessorConfig.from_file(config_path)
    cons.print(f"[dim]Accessors: {accessors}[/dim]")
    return accessors


def generate():
    """Render the registry as Lua bindings (or markdown docs)."""
    accessors = _load_accessors()
    output    = ARG("output")
    docs_mode = ARG("docs")

    if output is None:
        if docs_mode:
            try:
                sys.stdout.write(generate_param_docs(REGISTRY, accessors))
            except (OSError, ValueError) as exc:
                raise SinkError(f"Failed to write documentation: {exc}") from exc
        else:
            write_bindings(REGISTRY, sys.stdout, accessors, ARG("table"))
        return

    if docs_mode:
        content = generate_param_docs(REGISTRY, accessors)
    else:
        content = render_bindings(REGISTRY, accessors, ARG("table"))

    if not _check_or_write(Path(output), content, ARG("check")):
        raise LRBindException(f'"{output}" does not match the parameter registry')

    stats = REGISTRY.get_stats()
    cons.print(f"[dim]{stats['total_params']} parameters, {stats['versioned']} versioned[/dim]")
