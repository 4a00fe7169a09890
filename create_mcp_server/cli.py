"""Command-line entry point for create-mcp-server.

Usage::

    create-mcp-server weather --directory ~/code
    create-mcp-server                  # prompts for name and directory
    python -m create_mcp_server weather
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from jinja2 import TemplateError
from rich.prompt import Prompt

from create_mcp_server import __version__
from create_mcp_server.config import Config
from create_mcp_server.scaffolder import ProjectGenerator, ProjectSpec, ScaffoldError
from create_mcp_server.utils import (
    console,
    path_exists,
    print_error,
    print_info,
    print_next_steps,
    print_success,
    print_warning,
)

PROG = "create-mcp-server"


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser(config: Config) -> argparse.ArgumentParser:
    """Build the argument parser; *config* supplies option defaults."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="CLI tool to create new MCP server projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {PROG} weather\n"
            f"  {PROG} weather --directory ~/code\n"
            f"  {PROG}            (interactive)\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Name of the MCP server (prompted for when omitted)",
    )
    parser.add_argument(
        "-d", "--directory",
        default=str(config.directory),
        help=f"Target directory (default: {config.directory})",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        default=config.no_color,
        help="Disable coloured output",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


# ---------------------------------------------------------------------------
# Interactive mode
# ---------------------------------------------------------------------------


def prompt_for_values(default_directory: str = ".") -> tuple[str, str] | None:
    """Ask for the server name and target directory.

    Returns:
        ``(name, directory)``, or ``None`` if the user cancelled with
        Ctrl+C / Ctrl+D or left a value empty.
    """
    try:
        name = ""
        while not name:
            name = Prompt.ask("What is the name of your MCP server?", console=console)
            if not name:
                print_error("Name is required")
        directory = Prompt.ask(
            "Where would you like to create it?",
            default=default_directory,
            console=console,
        )
    except (KeyboardInterrupt, EOFError):
        return None

    if not name or not directory:
        return None
    return name, directory


# ---------------------------------------------------------------------------
# Project creation
# ---------------------------------------------------------------------------


async def create_mcp_server(name: str, directory: str, config: Config) -> int:
    """Scaffold *name* under *directory* and report the outcome.

    Returns:
        The process exit code: 0 on success, 1 if the target directory
        already exists or generation failed.
    """
    spec = ProjectSpec.from_directory(name, directory)
    target_dir = spec.target_dir

    print_info(f"Creating new MCP server: {name}")

    if await path_exists(target_dir):
        print_error(f"Directory {target_dir} already exists!")
        return 1

    try:
        await ProjectGenerator(spec).generate()
    except (ScaffoldError, TemplateError, OSError) as exc:
        print_error(f"Error creating project: {exc}")
        return 1

    console.print()
    print_success("MCP server created successfully! 🎉")
    print_next_steps(_next_steps(name, target_dir, config.package_manager))
    return 0


def _next_steps(name: str, target_dir: Path, package_manager: str) -> list[str]:
    """Commands a user runs to get the new server going."""
    cd_target = name if target_dir.parent == Path.cwd().resolve() else str(target_dir)
    run = f"{package_manager} run" if package_manager == "npm" else package_manager
    return [
        f"cd {cd_target}",
        f"{package_manager} install",
        f"{run} dev",
    ]


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-mcp-server``."""
    config = Config.from_env()
    args = build_parser(config).parse_args(argv)

    config = config.model_copy(
        update={"directory": Path(args.directory), "no_color": args.no_color}
    )
    if config.no_color:
        console.no_color = True

    if not args.name:
        values = prompt_for_values(str(config.directory))
        if values is None:
            console.print()
            print_warning("Operation cancelled")
            sys.exit(0)
        name, directory = values
    else:
        name, directory = args.name, str(config.directory)

    exit_code = asyncio.run(create_mcp_server(name, directory, config))
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
