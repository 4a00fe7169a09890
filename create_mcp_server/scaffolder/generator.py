"""Main scaffolding orchestrator.

Takes a ``ProjectSpec`` and generates a TypeScript MCP server project: a
``package.json`` manifest, a ``tsconfig.json``, a stdio server entry point,
one example tool, and a README.

The sequence is fixed and unconditional.  It is not atomic: if a write fails
partway through, the files already written stay on disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from create_mcp_server.utils import dump_json, ensure_dir, write_text

from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Generated project constants
# ---------------------------------------------------------------------------

PROJECT_VERSION = "1.0.0"
EXAMPLE_TOOL_NAME = "my-first-tool"

PROJECT_DIRECTORIES: tuple[str, ...] = ("src", "src/tools")

DEPENDENCIES: dict[str, str] = {
    "@modelcontextprotocol/sdk": "^1.2.0",
    "zod": "^3.22.4",
}

DEV_DEPENDENCIES: dict[str, str] = {
    "@types/node": "^20.11.24",
    "tsx": "^4.19.3",
    "typescript": "^5.3.3",
}

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2022",
        "module": "Node16",
        "moduleResolution": "Node16",
        "outDir": "./dist",
        "rootDir": "./src",
        "strict": True,
        "esModuleInterop": True,
        "skipLibCheck": True,
        "forceConsistentCasingInFileNames": True,
    },
    "include": ["src/**/*"],
    "exclude": ["node_modules"],
}

# (template, output path relative to the project root)
TEMPLATE_FILES: tuple[tuple[str, str], ...] = (
    ("src/index.ts.j2", "src/index.ts"),
    (f"src/tools/{EXAMPLE_TOOL_NAME}.ts.j2", f"src/tools/{EXAMPLE_TOOL_NAME}.ts"),
    ("README.md.j2", "README.md"),
)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Raised when the project tree cannot be written to disk."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class ProjectSpec(BaseModel):
    """Pydantic model describing the project to scaffold."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Project name, embedded verbatim")
    target_dir: Path = Field(..., description="Project root; must not exist yet")

    @classmethod
    def from_directory(cls, name: str, directory: str | Path) -> "ProjectSpec":
        """Build a spec whose root is ``<directory>/<name>``, resolved to an absolute path."""
        return cls(name=name, target_dir=(Path(directory) / name).resolve())


@dataclass(frozen=True)
class GeneratedArtifact:
    """A single rendered file, addressed relative to the project root."""

    relative_path: str
    content: str


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Scaffolds an MCP server project from a ``ProjectSpec``.

    The generated tree is::

        <target_dir>/
            package.json
            tsconfig.json
            README.md
            src/
                index.ts
                tools/
                    my-first-tool.ts
    """

    def __init__(self, spec: ProjectSpec, renderer: TemplateRenderer | None = None) -> None:
        self.spec = spec
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def generate(self) -> Path:
        """Generate the complete project structure.

        Returns:
            Path to the generated project root.

        Raises:
            ScaffoldError: If any directory or file cannot be created.  Files
                written before the failure are left in place.
        """
        root = self.spec.target_dir
        artifacts = self.render_artifacts()

        try:
            await ensure_dir(root)
            for directory in PROJECT_DIRECTORIES:
                await ensure_dir(root / directory)

            for artifact in artifacts:
                await write_text(root / artifact.relative_path, artifact.content)
        except OSError as exc:
            failed = exc.filename if exc.filename is not None else root
            raise ScaffoldError(
                f"Failed to scaffold {self.spec.name!r} at {root}: {exc}", path=failed
            ) from exc

        return root

    def render_artifacts(self) -> list[GeneratedArtifact]:
        """Render every file of the project, in write order, without touching disk."""
        context = self._build_context()
        artifacts = [
            GeneratedArtifact("package.json", dump_json(build_package_manifest(self.spec.name))),
            GeneratedArtifact("tsconfig.json", dump_json(TSCONFIG)),
        ]
        for template_name, output_name in TEMPLATE_FILES:
            artifacts.append(
                GeneratedArtifact(output_name, self.renderer.render(template_name, context))
            )
        return artifacts

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the project spec."""
        return {
            "project_name": self.spec.name,
            "version": PROJECT_VERSION,
            "tool_name": EXAMPLE_TOOL_NAME,
        }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def build_package_manifest(name: str) -> dict[str, Any]:
    """Return the ``package.json`` contents for a project called *name*."""
    return {
        "name": name,
        "version": PROJECT_VERSION,
        "description": f"{name} MCP server",
        "type": "module",
        "main": "dist/index.js",
        "scripts": {
            "build": "tsc",
            "start": "node dist/index.js",
            "dev": "tsx watch src/index.ts",
        },
        "dependencies": dict(DEPENDENCIES),
        "devDependencies": dict(DEV_DEPENDENCIES),
    }


async def create_project(name: str, target_dir: str | Path) -> Path:
    """Scaffold a project called *name* rooted at *target_dir*.

    Thin convenience wrapper over :class:`ProjectGenerator`.
    """
    spec = ProjectSpec(name=name, target_dir=Path(target_dir))
    return await ProjectGenerator(spec).generate()
