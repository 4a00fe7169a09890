"""create-mcp-server configuration.

Typed runtime settings for the CLI.  Values come from defaults, then from
environment variables via :meth:`Config.from_env`, and finally from
command-line flags, which the CLI applies with ``model_copy(update=...)``.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global create-mcp-server configuration.

    Instances are created once by the CLI entry point and passed to the
    pieces that need them.  Nothing here is persisted between runs.
    """

    directory: Path = Field(
        default=Path("."),
        description="Parent directory that receives the new project folder",
    )
    package_manager: str = Field(
        default="yarn",
        min_length=1,
        description="Package manager named in the printed next steps",
    )
    no_color: bool = Field(default=False, description="Disable coloured console output")

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CREATE_MCP_SERVER_DIRECTORY, CREATE_MCP_SERVER_PACKAGE_MANAGER,
            NO_COLOR (any non-empty value disables colour).
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("CREATE_MCP_SERVER_DIRECTORY"):
            kwargs["directory"] = Path(os.environ["CREATE_MCP_SERVER_DIRECTORY"])
        if os.environ.get("CREATE_MCP_SERVER_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["CREATE_MCP_SERVER_PACKAGE_MANAGER"]
        if os.environ.get("NO_COLOR"):
            kwargs["no_color"] = True
        return cls(**kwargs)
