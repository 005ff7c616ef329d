"""Entry point for the TailGrids MCP Server."""

import logging

from tailgrids_mcp.server import build_server, main as run_main

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# FastMCP hosting expects a top-level server object named
# mcp/server/app. We export mcp and alias app for compatibility.
mcp = build_server()
app = mcp

if __name__ == "__main__":
    run_main(mcp)
