"""Shared utility functions for create-mcp-server.

Provides the Rich console used for all user-facing output, a handful of
coloured print helpers, and async file-system helpers that push blocking
``pathlib`` calls off the event loop.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console()


# ---------------------------------------------------------------------------
# JSON / text I/O
# ---------------------------------------------------------------------------


def dump_json(data: dict[str, Any] | list[Any]) -> str:
    """Serialise data as 2-space indented JSON with a trailing newline.

    Key order is preserved.
    """
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


async def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path* as UTF-8 and return the path.

    The write itself is performed in a thread-pool executor.  Parent
    directories are *not* created; callers lay out the tree first so that a
    missing directory surfaces as an error.
    """
    file_path = Path(path)
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, file_path.write_text, content, "utf-8")
    return file_path


async def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The directory as a ``Path``.
    """
    dir_path = Path(path)
    await asyncio.to_thread(dir_path.mkdir, parents=True, exist_ok=True)
    return dir_path


async def path_exists(path: str | Path) -> bool:
    """Return ``True`` if anything (file, directory, link) exists at *path*."""
    return await asyncio.to_thread(Path(path).exists)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_info(message: str) -> None:
    """Print a blue informational message."""
    console.print(f"[blue]{escape(message)}[/blue]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_next_steps(steps: list[str], title: str = "Next steps:") -> None:
    """Print a yellow header followed by numbered, indented steps.

    Args:
        steps: Shell commands or instructions, in order.
        title: Header line shown above the steps.
    """
    console.print()
    console.print(f"[yellow]{escape(title)}[/yellow]")
    for index, step in enumerate(steps, 1):
        console.print(f"[white]  {index}. {escape(step)}[/white]")
