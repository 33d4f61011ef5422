"""Shared utility functions for the NEXUS CLI.

Provides the filesystem helpers used by the generators and the reconciler,
the slug helper used by the templates, and Rich-based console output.
Filesystem helpers are synchronous; async callers run them through
``asyncio.to_thread``.
"""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

console = Console()

# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The resolved ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


def read_text_or_none(path: str | Path) -> str | None:
    """Return the UTF-8 text of *path*, or ``None`` if nothing exists there.

    Bytes that are not valid UTF-8 are replaced rather than raising, so a
    binary blob at a text path reads as (corrupted) text.  Any other
    ``OSError`` (permissions, a directory in the way, ...) propagates.
    """
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return None


def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories as needed."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")
    return file_path


def is_within(root: Path, candidate: Path) -> bool:
    """Return ``True`` if *candidate* resolves to a location inside *root*."""
    try:
        candidate.resolve().relative_to(root.resolve())
    except ValueError:
        return False
    return True


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def slugify(name: str) -> str:
    """Convert an arbitrary project name to a safe folder/package name.

    Examples::

        slugify("Todo List App") -> "todo-list-app"
        slugify("  My_App (v2)  ") -> "my_app-v2"
    """
    result = re.sub(r"[^a-zA-Z0-9_-]", "-", name.strip().lower())
    result = re.sub(r"-+", "-", result)
    return result.strip("-")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(version: str) -> None:
    """Print the CLI banner rule."""
    console.print()
    console.print(
        Rule(f"[bold bright_cyan] NEXUS CLI v{version} [/bold bright_cyan]", style="bright_cyan")
    )
    console.print()


def print_file_list(title: str, paths: list[str] | tuple[str, ...], marker: str, style: str) -> None:
    """Print a titled list of relative paths, one per line."""
    console.print(f"[bold {style}]{title}[/bold {style}]")
    for path in paths:
        console.print(f"   [{style}]{marker}[/{style}] {escape(path)}")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_info(message: str) -> None:
    console.print(escape(message))
