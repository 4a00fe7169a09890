"""Shared pytest fixtures for the create-mcp-server test suite.

Provides reusable fixtures for:
- Output directories and project specs under ``tmp_path``
- A clean environment (no ``CREATE_MCP_SERVER_*`` / ``NO_COLOR`` leakage)
- Scripted answers for the interactive prompts
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from create_mcp_server.scaffolder import ProjectSpec
from create_mcp_server.utils import console


# The seven paths a successful run creates under the project root.
EXPECTED_PROJECT_PATHS: frozenset[str] = frozenset({
    "src",
    "src/tools",
    "package.json",
    "tsconfig.json",
    "src/index.ts",
    "src/tools/my-first-tool.ts",
    "README.md",
})


def _relative_tree(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*")}


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip environment variables that change CLI defaults."""
    for var in (
        "CREATE_MCP_SERVER_DIRECTORY",
        "CREATE_MCP_SERVER_PACKAGE_MANAGER",
        "NO_COLOR",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_console() -> Iterator[None]:
    """Undo ``--no-color`` toggles between tests."""
    original = console.no_color
    yield
    console.no_color = original


# ---------------------------------------------------------------------------
# Paths & specs
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory that receives generated projects."""
    out = tmp_path / "output"
    out.mkdir()
    return out


@pytest.fixture
def weather_spec(output_dir: Path) -> ProjectSpec:
    """Spec for a project called ``weather`` that does not exist yet."""
    return ProjectSpec.from_directory("weather", output_dir)


# ---------------------------------------------------------------------------
# Interactive prompts
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_prompt() -> Iterator[MagicMock]:
    """Patch ``Prompt.ask`` as seen by the CLI.

    Set ``side_effect`` to a list of answers (or an exception) per test.
    """
    with patch("create_mcp_server.cli.Prompt.ask") as ask:
        yield ask


# ---------------------------------------------------------------------------
# Tree inspection
# ---------------------------------------------------------------------------

@pytest.fixture
def expected_paths() -> frozenset[str]:
    """The seven paths a successful run creates under the project root."""
    return EXPECTED_PROJECT_PATHS


@pytest.fixture
def tree_of() -> Callable[[Path], set[str]]:
    """Return a function listing every path under a root, relative to it."""
    return _relative_tree
