"""CLI entry point: python -m locidle.mcp"""

from __future__ import annotations

import logging
import sys


def main() -> None:
    # stdout carries the MCP protocol; logs go to stderr
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)

    from locidle.mcp.server import create_server

    server = create_server()
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
