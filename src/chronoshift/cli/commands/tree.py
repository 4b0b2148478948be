"""CLI command to display all commands in a hierarchical tree."""

from __future__ import annotations

from dataclasses import dataclass, field

import click
import typer
from rich.console import Console
from typer.main import get_command

from ...global_config import PACKAGE_NAME
from ..base import get_logger

logger = get_logger(__name__)

# Preferred listing order for top-level groups; others follow alphabetically
PREFERRED_ORDER = ["calc", "tz"]

_LEVEL_COLORS = ["cyan", "yellow", "blue", "green"]


@dataclass
class CommandNode:
    """Represents a command or command group in the CLI tree."""

    name: str
    help_text: str | None = None
    is_group: bool = False
    options: list[str] = field(default_factory=list)
    children: list[CommandNode] = field(default_factory=list)


def _extract_options(click_cmd: click.Command) -> list[str]:
    """Return one display string per option, e.g. "--unit TEXT"."""
    options = []
    for param in click_cmd.params:
        if not isinstance(param, click.Option) or not param.opts:
            continue
        name = ", ".join(param.opts)
        if param.is_flag:
            options.append(name)
        elif isinstance(param.type, click.types.IntParamType):
            options.append(f"{name} N")
        else:
            options.append(f"{name} TEXT")
    return options


def _build_node(click_cmd: click.Command, name: str) -> CommandNode:
    """Convert a Click command/group into a CommandNode recursively."""
    is_group = isinstance(click_cmd, click.Group)
    node = CommandNode(
        name=name,
        help_text=click_cmd.get_short_help_str() or None,
        is_group=is_group,
        options=[] if is_group else _extract_options(click_cmd),
    )
    if is_group:
        for sub_name, sub_cmd in click_cmd.commands.items():
            node.children.append(_build_node(sub_cmd, sub_name))

        def sort_key(child: CommandNode) -> tuple[int, str]:
            if child.name in PREFERRED_ORDER:
                return (PREFERRED_ORDER.index(child.name), child.name)
            return (len(PREFERRED_ORDER), child.name)

        node.children.sort(key=sort_key)
    return node


def walk_typer_app(typer_app: typer.Typer, name: str | None = None) -> CommandNode:
    """Walk a Typer app and build a command tree."""
    resolved = name or typer_app.info.name or PACKAGE_NAME
    return _build_node(get_command(typer_app), resolved)


def filter_tree(node: CommandNode, filter_verb: str | None = None) -> CommandNode | None:
    """Keep only branches that lead to a command or group named filter_verb.

    Args:
        node: Root node of the tree to filter.
        filter_verb: Command or group name to keep (e.g., "tz", "diff").

    Returns:
        Filtered CommandNode, or None if nothing below node matches.
    """
    if not filter_verb or node.name == filter_verb:
        return node

    node.children = [
        child
        for child in (filter_tree(c, filter_verb) for c in node.children)
        if child is not None
    ]
    return node if node.children else None


def render_tree(
    node: CommandNode,
    console: Console,
    *,
    verbose: bool = False,
    indent: int = 0,
) -> None:
    """Render a command tree using Rich with indentation and colors.

    Groups are bold; color depends on depth. In verbose mode each command's
    help text and options are shown as well.
    """
    prefix = "  " * indent
    color = _LEVEL_COLORS[min(indent, len(_LEVEL_COLORS) - 1)]
    if node.is_group:
        color = f"bold {color}"

    label = f"{prefix}[{color}]{node.name}[/{color}]"
    if verbose and node.help_text:
        label += f" [dim]— {node.help_text}[/dim]"
    console.print(label)

    if verbose and node.options:
        option_part = " ".join(f"[dim]\\[{opt}][/dim]" for opt in node.options)
        console.print(f"{prefix}  {option_part}")

    for child in node.children:
        render_tree(child, console, verbose=verbose, indent=indent + 1)


def tree_command(
    typer_app: typer.Typer,
    filter_verb: str | None = None,
    verbose: bool = False,
) -> None:
    """Main entry point for the tree command.

    Displays all CLI commands in a hierarchical tree format. By default shows
    command names only; verbose adds descriptions and options.

    Args:
        typer_app: Root Typer application to introspect.
        filter_verb: Optional command/group name to filter by (e.g., "tz").
        verbose: If True, show help text and options.
    """
    console = Console()
    root = filter_tree(walk_typer_app(typer_app), filter_verb)
    if root is None:
        console.print("[yellow]No commands match the specified filter.[/yellow]")
        return
    logger.debug("Rendering command tree (filter=%s)", filter_verb)
    render_tree(root, console, verbose=verbose)
