"""FastMCP server exposing TailGrids component tools."""

import logging

import anyio
from fastmcp import FastMCP

from .config import CategoryTable, McpConfig, load_categories
from .provider import TailGridsProvider
from .tools import ToolRegistry

logger = logging.getLogger(__name__)

INSTRUCTIONS = """
This server provides structured access to the TailGrids UI component library.
Use these tools to look up components, categories and documentation.

Available tools:
- getTailGridsComponents: List every TailGrids component with its category
- getTailGridsCategories: List component categories and their components
- getTailGridsDocs: Fetch the TailGrids documentation page
- searchTailGridsDocs: Check whether the documentation mentions a topic
- get<Category>: Usage, features and formats for every component in a category
"""


def create_server(config: McpConfig) -> FastMCP:
    """Create an MCP server with no tools registered yet."""
    return FastMCP(
        config.project_name, version=config.version, instructions=INSTRUCTIONS
    )


def create_registry(config: McpConfig, categories: CategoryTable) -> ToolRegistry:
    provider = TailGridsProvider(config, categories)
    return ToolRegistry(provider, categories)


def register_tools(server: FastMCP, registry: ToolRegistry) -> bool:
    """Register every tool, keeping whatever made it in if registration fails."""
    try:
        registry.register(server)
        return True
    except Exception as e:
        logger.error(f"Error registering tools: {e}")
        logger.warning("MCP server running with limited functionality")
        return False


def build_server(
    config: McpConfig | None = None, categories: CategoryTable | None = None
) -> FastMCP:
    """Create a server with every fixed and per-category tool registered."""
    config = config or McpConfig()
    categories = load_categories() if categories is None else categories
    server = create_server(config)
    register_tools(server, create_registry(config, categories))
    return server


async def start_server(server: FastMCP, registry: ToolRegistry | None = None) -> None:
    """Register all tools, then serve over stdio.

    Pass no registry for a server whose tools are already registered. If
    registration fails the server is started anyway with whatever tools
    made it in. If the transport cannot be connected either, the process
    exits with status 1.
    """
    try:
        if registry is not None:
            registry.register(server)
        await server.run_async(transport="stdio")
    except Exception as e:
        logger.error(f"Error starting MCP server: {e}")

        # Try to start the server anyway with basic functionality
        try:
            logger.warning("MCP server started with limited functionality")
            await server.run_async(transport="stdio")
        except Exception as connection_error:
            logger.error(f"Failed to connect to transport: {connection_error}")
            raise SystemExit(1) from connection_error


def main(server: FastMCP | None = None):
    """Main entry point for the MCP server.

    Args:
        server: Server with tools already registered (e.g., from build_server).
            When omitted, one is created and its tools registered here.
    """
    # Log to stderr; stdout carries the MCP stream
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    registry = None
    if server is None:
        config = McpConfig()
        server = create_server(config)
        registry = create_registry(config, load_categories())

    logger.info(f"Starting {server.name} (stdio)")
    anyio.run(start_server, server, registry)


if __name__ == "__main__":
    main()
