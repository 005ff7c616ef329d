"""Assemble TailGrids payloads from the category table and the docs site."""

import logging

import httpx
from pydantic import ValidationError

from .config import CategoryTable, McpConfig
from .errors import FetchError, NetworkError, TailGridsError
from .models import (
    Category,
    Component,
    ComponentDetail,
    DocsResult,
    DocumentationPage,
    ItemError,
    PartialResult,
    SearchOutcome,
    SearchResult,
    validate,
)

logger = logging.getLogger(__name__)

COMPONENT_TYPE = "tailgrids:component"

COMPONENT_FEATURES = (
    "Tailwind CSS based",
    "Responsive design",
    "Dark mode support",
    "Customizable styling",
    "Copy-paste ready",
)
COMPONENT_FORMATS = ("HTML", "React", "Vue", "Figma")

_REQUEST_TIMEOUT = 30.0


class TailGridsProvider:
    """Data access for the MCP tools.

    Args:
        config: Fixed site configuration
        categories: Category name -> component names table
        client: Optional shared HTTP client. When omitted, each fetch opens
            its own short-lived client.
    """

    def __init__(
        self,
        config: McpConfig,
        categories: CategoryTable,
        client: httpx.AsyncClient | None = None,
    ):
        self.config = config
        self.categories = categories
        self._client = client

    async def _get(self, url: str) -> httpx.Response:
        try:
            if self._client is not None:
                return await self._client.get(url)
            async with httpx.AsyncClient(
                timeout=_REQUEST_TIMEOUT, follow_redirects=True
            ) as client:
                return await client.get(url)
        except httpx.RequestError as e:
            raise NetworkError(f"Request to {url} failed: {e}", url=url) from e

    async def fetch_docs(self) -> DocsResult:
        """Fetch the TailGrids documentation page.

        Returns:
            DocsResult holding the page, or the error message if the fetch
            failed. Fetch errors are logged, never raised.
        """
        url = self.config.docs_url
        try:
            response = await self._get(url)
            if not response.is_success:
                raise FetchError(response.status_code, response.reason_phrase, url=url)
        except TailGridsError as e:
            logger.error(f"Error fetching TailGrids docs: {e}")
            return DocsResult(error=f"Failed to fetch TailGrids docs: {e}")

        page = DocumentationPage(
            name="tailgrids-docs",
            description=(
                "TailGrids Documentation - Comprehensive guide for using "
                "TailGrids components"
            ),
            content=response.text,
            url=url,
        )
        return DocsResult(page=page)

    def _component_candidate(self, name: str, category: str) -> dict:
        return {
            "name": name,
            "type": COMPONENT_TYPE,
            "description": f"{name} component from TailGrids {category} category",
            "category": category,
            "url": f"{self.config.components_url}/{category.lower()}/{name}",
        }

    def list_components(self) -> PartialResult[Component]:
        """List every component in the category table.

        Candidates that fail validation are dropped into ``errors``; the rest
        of the batch is still returned.
        """
        items: list[Component] = []
        errors: list[ItemError] = []

        for category, names in self.categories.items():
            for name in names:
                try:
                    items.append(
                        validate(Component, self._component_candidate(name, category))
                    )
                except ValidationError as e:
                    logger.error(f"Dropping invalid component {name}: {e}")
                    errors.append(ItemError(name=name, category=category, message=str(e)))

        return PartialResult[Component](items=items, errors=errors)

    def fetch_component_detail(
        self, component_name: str, category: str | None = None
    ) -> ComponentDetail:
        """Describe one component from static templates.

        TailGrids has no component API, so nothing is fetched here.

        Raises:
            pydantic.ValidationError: if the synthesized data does not match
                the ComponentDetail shape
        """
        info = {
            "name": component_name,
            "type": COMPONENT_TYPE,
            "category": category or "unknown",
            "description": f"{component_name} component from TailGrids",
            "usage": (
                f"Visit {self.config.components_url} to find and copy the "
                f"{component_name} component code"
            ),
            "installation": (
                "TailGrids components are copy-paste ready. Simply copy the "
                "HTML/React/Vue code from the TailGrids website."
            ),
            "features": list(COMPONENT_FEATURES),
            "formats": list(COMPONENT_FORMATS),
            "url": self.config.components_url,
        }
        try:
            return validate(ComponentDetail, info)
        except ValidationError as e:
            logger.error(f"Error building component {component_name}: {e}")
            raise

    def fetch_category_details(self, category: str) -> PartialResult[ComponentDetail]:
        """Describe every component of a category, one at a time.

        A failure on one component is logged and recorded; the remaining
        components are still processed.

        Raises:
            KeyError: if the category is not in the table
        """
        items: list[ComponentDetail] = []
        errors: list[ItemError] = []

        for name in self.categories[category]:
            try:
                detail = self.fetch_component_detail(name, category)
                items.append(validate(ComponentDetail, detail))
            except Exception as e:
                logger.error(f"Error processing component {name}: {e}")
                errors.append(ItemError(name=name, category=category, message=str(e)))

        return PartialResult[ComponentDetail](items=items, errors=errors)

    def list_categories(self) -> list[Category]:
        """One Category per table entry, in table order."""
        return [
            Category(
                name=name,
                description=f"{name} category containing {len(components)} component types",
                components=list(components),
                url=f"{self.config.components_url}#{name.lower()}",
            )
            for name, components in self.categories.items()
        ]

    async def search_docs(self, query: str) -> SearchOutcome:
        """Case-insensitive substring search over the documentation page.

        An empty query is contained in any page, so it is always found.
        """
        docs = await self.fetch_docs()
        if not docs.ok:
            return SearchOutcome(error=docs.error)

        page = docs.page
        if query.lower() in page.content.lower():
            result = SearchResult(
                query=query,
                found=True,
                description=f'Documentation content related to "{query}"',
                url=page.url,
                suggestion=f'Visit {page.url} for complete documentation on "{query}"',
            )
        else:
            result = SearchResult(
                query=query,
                found=False,
                description=f'No specific documentation found for "{query}"',
                url=page.url,
                suggestion=f"Visit {page.url} to browse all available documentation",
            )
        return SearchOutcome(result=result)
