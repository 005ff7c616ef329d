"""Tool registry: maps MCP tool names to provider calls and response envelopes."""

import json
import logging
from typing import Annotated, Any, Awaitable, Callable, NamedTuple

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from mcp.types import TextContent
from pydantic import BaseModel, ConfigDict, Field

from .config import CATEGORY_TOOL_PREFIX, CategoryTable
from .provider import TailGridsProvider

logger = logging.getLogger(__name__)


class ToolResponse(BaseModel):
    """Protocol response envelope: text content plus an error flag."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content: list[TextContent]
    is_error: bool = Field(default=False, alias="isError")

    @property
    def text(self) -> str:
        return "\n".join(item.text for item in self.content)

    @classmethod
    def success(cls, payload: Any) -> "ToolResponse":
        return cls(
            content=[TextContent(type="text", text=json.dumps(payload, indent=2))]
        )

    @classmethod
    def failure(cls, message: str) -> "ToolResponse":
        return cls(content=[TextContent(type="text", text=message)], is_error=True)


class ToolSpec(NamedTuple):
    name: str
    description: str
    handler: Callable[..., Awaitable[ToolResponse]]
    takes_query: bool = False


def category_tool_name(category: str) -> str:
    return f"{CATEGORY_TOOL_PREFIX}{category}"


class ToolRegistry:
    """Builds the tool catalogue for a provider and a category table.

    Every handler returns a ToolResponse; exceptions raised by the provider
    are turned into error envelopes here and never reach the protocol layer.
    """

    def __init__(self, provider: TailGridsProvider, categories: CategoryTable):
        self.provider = provider
        self.categories = categories

    async def get_components(self) -> ToolResponse:
        logger.info("Listing TailGrids components")
        try:
            components = self.provider.list_components()
            if components.errors:
                logger.warning(f"Dropped {len(components.errors)} invalid components")
            return ToolResponse.success([c.to_payload() for c in components.items])
        except Exception as e:
            logger.error(f"List components error: {e}")
            return ToolResponse.failure("Failed to fetch TailGrids components")

    async def get_docs(self) -> ToolResponse:
        logger.info("Fetching TailGrids docs")
        try:
            docs = await self.provider.fetch_docs()
            if not docs.ok:
                return ToolResponse.failure("Failed to fetch TailGrids documentation")
            return ToolResponse.success(docs.page.to_payload())
        except Exception as e:
            logger.error(f"Get docs error: {e}")
            return ToolResponse.failure("Failed to fetch TailGrids documentation")

    async def get_categories(self) -> ToolResponse:
        logger.info("Listing TailGrids categories")
        try:
            categories = self.provider.list_categories()
            return ToolResponse.success([c.to_payload() for c in categories])
        except Exception as e:
            logger.error(f"List categories error: {e}")
            return ToolResponse.failure("Failed to fetch TailGrids categories")

    async def search_docs(self, query: str) -> ToolResponse:
        logger.info(f"Searching docs: {query}")
        failure = f'Failed to search TailGrids documentation for "{query}"'
        try:
            outcome = await self.provider.search_docs(query)
            if not outcome.ok:
                return ToolResponse.failure(failure)
            return ToolResponse.success(outcome.result.to_payload())
        except Exception as e:
            logger.error(f"Search error: {e}")
            return ToolResponse.failure(failure)

    async def get_category(self, category: str) -> ToolResponse:
        logger.info(f"Getting {category} components")
        try:
            details = self.provider.fetch_category_details(category)
            for error in details.errors:
                logger.warning(f"Skipped {error.name} in {category}: {error.message}")
            return ToolResponse.success([d.to_payload() for d in details.items])
        except Exception as e:
            logger.error(f"Get {category} components error: {e}")
            message = f"Error processing TailGrids {category} components"
            if str(e):
                message += f": {e}"
            return ToolResponse.failure(message)

    def _category_handler(self, category: str) -> Callable[[], Awaitable[ToolResponse]]:
        async def handler() -> ToolResponse:
            return await self.get_category(category)

        return handler

    def fixed_tools(self) -> list[ToolSpec]:
        return [
            ToolSpec(
                "getTailGridsComponents",
                "Provides a comprehensive list of all TailGrids UI components organized by category.",
                self.get_components,
            ),
            ToolSpec(
                "getTailGridsDocs",
                "Fetches TailGrids documentation content for installation and usage guides.",
                self.get_docs,
            ),
            ToolSpec(
                "getTailGridsCategories",
                "Lists all available TailGrids component categories and their contents.",
                self.get_categories,
            ),
            ToolSpec(
                "searchTailGridsDocs",
                "Search TailGrids documentation for specific topics or components.",
                self.search_docs,
                takes_query=True,
            ),
        ]

    def category_tools(self) -> list[ToolSpec]:
        """One tool per category, in table order."""
        specs = []
        for category, components in self.categories.items():
            names = ", ".join(components)
            specs.append(
                ToolSpec(
                    category_tool_name(category),
                    f"Provides TailGrids {category} components: {names}. "
                    "Shows usage instructions, features, and available formats.",
                    self._category_handler(category),
                )
            )
        return specs

    def specs(self) -> list[ToolSpec]:
        return self.fixed_tools() + self.category_tools()

    def register(self, server: FastMCP, specs: list[ToolSpec] | None = None) -> list[str]:
        """Register tools on a FastMCP server.

        Args:
            server: Server to register on
            specs: Tools to register (default: every fixed and category tool)

        Returns:
            Names of the registered tools, in registration order
        """
        registered = []
        for spec in self.specs() if specs is None else specs:
            server.tool(name=spec.name, description=spec.description)(_as_tool(spec))
            registered.append(spec.name)
        logger.info(f"Registered {len(registered)} tools")
        return registered

    async def dispatch(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResponse:
        """Invoke a tool by name and return its envelope."""
        for spec in self.specs():
            if spec.name == name:
                if spec.takes_query:
                    query = (arguments or {}).get("query")
                    if not isinstance(query, str):
                        return ToolResponse.failure(f"{name} requires a string \"query\" argument")
                    return await spec.handler(query)
                return await spec.handler()
        return ToolResponse.failure(f"Unknown tool: {name}")


def _as_tool(spec: ToolSpec) -> Callable[..., Awaitable[str]]:
    """Adapt an envelope handler to FastMCP: text on success, ToolError on failure."""
    handler = spec.handler
    if spec.takes_query:

        async def search_tool(
            query: Annotated[str, Field(description="Search query for TailGrids documentation")],
        ) -> str:
            return _unwrap(await handler(query))

        return search_tool

    async def tool() -> str:
        return _unwrap(await handler())

    return tool


def _unwrap(response: ToolResponse) -> str:
    if response.is_error:
        raise ToolError(response.text)
    return response.text
