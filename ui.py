from __future__ import annotations

import io
import logging
from collections import Counter
from typing import Optional, Sequence, TYPE_CHECKING

import config
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from models import Item

if TYPE_CHECKING:
    from catalog import Catalog

# Global Rich console instance
console = Console()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger to print through Rich.

    Thin wrapper over logging.basicConfig, so it does nothing when the root
    logger already has handlers.

    Args:
        level: Log level name; defaults to config.LOG_LEVEL
    """
    logging.basicConfig(
        level=level or config.LOG_LEVEL,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def build_tree(catalog: Catalog, label: str = config.ROOT_LABEL) -> Tree:
    """Build a Rich tree: a node's own item names first, then each branch."""
    tree = Tree(Text(label, style="bold"), guide_style="dim")
    _fill_tree(tree, catalog)
    return tree


def _fill_tree(node: Tree, catalog: Catalog) -> None:
    for item in catalog.items:
        node.add(Text(item.name))
    for name, branch in catalog.branches.items():
        _fill_tree(node.add(Text(name, style="bold")), branch)


def format_catalog(catalog: Catalog, label: str = config.ROOT_LABEL) -> str:
    """Render a catalog tree to plain text (no colour, no markup)."""
    buffer = io.StringIO()
    plain_console = Console(file=buffer, color_system=None, width=200, legacy_windows=False)
    plain_console.print(build_tree(catalog, label))
    return buffer.getvalue().rstrip("\n")


def render_catalog(catalog: Catalog, label: str = config.ROOT_LABEL) -> None:
    console.print(build_tree(catalog, label))


def render_rewards(rewards: Sequence[Item], title: str = "REWARDS") -> None:
    """Print a reward list as a table of item names and how many dropped."""
    counts = Counter(reward.name for reward in rewards)

    table = Table(title=title, show_edge=False, padding=(0, 1))
    table.add_column("Item", style="bold")
    table.add_column("Count", justify="right")
    for name, count in counts.items():
        table.add_row(name, str(count))
    if not counts:
        table.add_row("—", "0", style="dim")

    console.print(table)
