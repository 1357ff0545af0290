"""
Parameter Search and Discovery Command.

Provides CLI access to search and explore the registered develop parameters.
"""

from rich.markup import escape

from .state import ARG
from .printer import cons
from .params.suggest import suggest_similar, format_suggestion


def params():
    """Execute the params command based on CLI arguments."""
    from .params import REGISTRY  # pylint: disable=import-outside-toplevel

    query    = ARG("query")
    category = ARG("category")

    if ARG("count"):
        _show_statistics(REGISTRY)
        return

    matches = _search_params(REGISTRY, query, category)

    if not matches:
        cons.print(f"[yellow]No parameters found matching '{query or ''}'[/yellow]")
        if query:
            suggestion = format_suggestion(suggest_similar(query, REGISTRY.names()))
            if suggestion:
                cons.print(f"[dim]{suggestion}[/dim]")
        return

    _print_params(matches)


def _search_params(registry, query, category):
    """Return parameters whose name contains query (case-insensitive), in registry order."""
    results = []
    for param in registry:
        if category is not None and param.category != category:
            continue
        if query is not None and query.lower() not in param.name.lower():
            continue
        results.append(param)
    return results


def _print_params(matches):
    width = max(len(param.name) for param in matches)

    for param in matches:
        binding = f"[magenta]{param.alias}[/magenta]" if param.is_versioned else "[dim]generic[/dim]"
        bounds  = escape(f"[{param.min}, {param.max}]")
        cons.print(f"  [bold]{param.name.ljust(width)}[/bold]  {param.category:<10} {bounds}  {binding}")

    cons.print()
    cons.print(f"[dim]{len(matches)} parameter(s)[/dim]")


def _show_statistics(registry):
    stats = registry.get_stats()

    cons.print("[bold]Parameter Registry Statistics:[/bold]")
    cons.indent()
    cons.print(f"Total parameters: {stats['total_params']}")
    cons.print(f"Versioned:        {stats['versioned']}")
    cons.print(f"Generic:          {stats['generic']}")
    for category, count in stats["by_category"].items():
        cons.print(f"Category {category}: {count}")
    cons.unindent()
