"""create-mcp-server -- scaffold new Model Context Protocol server projects."""

__version__ = "1.0.0"
