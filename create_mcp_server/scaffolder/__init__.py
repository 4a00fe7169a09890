"""create-mcp-server scaffolder -- generates MCP server project trees.

Takes a ``ProjectSpec`` (a name plus a not-yet-existing target directory)
and writes a ready-to-install TypeScript MCP server project.

Quick usage::

    from create_mcp_server.scaffolder import ProjectGenerator, ProjectSpec

    spec = ProjectSpec.from_directory("weather", "/tmp")
    project_path = await ProjectGenerator(spec).generate()
"""

from create_mcp_server.scaffolder.generator import (
    GeneratedArtifact,
    ProjectGenerator,
    ProjectSpec,
    ScaffoldError,
    create_project,
)
from create_mcp_server.scaffolder.templates import TemplateRenderer

__all__ = [
    "GeneratedArtifact",
    "ProjectGenerator",
    "ProjectSpec",
    "ScaffoldError",
    "TemplateRenderer",
    "create_project",
]
