"""Allow ``python -m create_mcp_server``."""

from create_mcp_server.cli import main

if __name__ == "__main__":
    main()
