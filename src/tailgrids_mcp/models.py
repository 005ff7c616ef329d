"""Pydantic shapes for MCP tool outputs, plus the shape validator."""

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Shape(BaseModel):
    """Base for tool output shapes: strict (no coercion) and immutable."""

    model_config = ConfigDict(strict=True, frozen=True)

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict without unset optional fields."""
        return self.model_dump(exclude_none=True)


class Component(Shape):
    """A TailGrids UI component entry."""

    name: str = Field(description="Component name (e.g., 'Buttons')")
    type: str = Field(description="Component type tag (e.g., 'tailgrids:component')")
    description: str | None = Field(default=None, description="Brief description")
    category: str | None = Field(default=None, description="Owning category")
    url: str | None = Field(default=None, description="URL of the component page")


class ComponentDetail(Component):
    """Descriptive metadata for one component."""

    description: str = Field(description="Brief description")
    category: str = Field(description="Owning category")
    usage: str = Field(description="How to get the component code")
    installation: str = Field(description="Installation notes")
    features: list[str] = Field(description="Feature highlights")
    formats: list[str] = Field(description="Available formats (HTML, React, ...)")
    url: str = Field(description="URL of the component listing")


class Category(Shape):
    """A named grouping of components."""

    name: str = Field(description="Category name")
    type: Literal["tailgrids:category"] = "tailgrids:category"
    description: str = Field(description="Category summary")
    components: list[str] = Field(description="Component names, in table order")
    url: str = Field(description="URL of the category section")


class DocumentationPage(Shape):
    """A fetched documentation page; content is the raw page body."""

    name: str
    type: Literal["documentation"] = "documentation"
    description: str
    content: str
    url: str


class SearchResult(Shape):
    """Outcome of a substring search over the documentation page."""

    query: str
    found: bool
    description: str
    url: str
    suggestion: str


SHAPES: dict[str, type[Shape]] = {
    "component": Component,
    "component-detail": ComponentDetail,
    "category": Category,
    "documentation": DocumentationPage,
    "search-result": SearchResult,
}

ShapeT = TypeVar("ShapeT", bound=Shape)


def validate(shape: type[ShapeT] | str, candidate: Any) -> ShapeT:
    """Check a candidate value against a declared shape.

    Args:
        shape: Shape class, or its registered name (e.g., "component")
        candidate: Mapping (or model instance) to check

    Returns:
        The validated, immutable model

    Raises:
        pydantic.ValidationError: listing every field that violates the shape
        KeyError: if the shape name is not registered
    """
    model = SHAPES[shape] if isinstance(shape, str) else shape
    if isinstance(candidate, BaseModel):
        candidate = candidate.model_dump()
    return model.model_validate(candidate, strict=True)


class ItemError(BaseModel):
    """Why one item was left out of a batch."""

    model_config = ConfigDict(frozen=True)

    name: str
    category: str | None = None
    message: str


class PartialResult(BaseModel, Generic[T]):
    """Items that survived a batch, alongside the ones that were dropped."""

    model_config = ConfigDict(frozen=True)

    items: list[T] = Field(default_factory=list)
    errors: list[ItemError] = Field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.errors


class DocsResult(BaseModel):
    """Either a fetched page or the reason the fetch failed."""

    model_config = ConfigDict(frozen=True)

    page: DocumentationPage | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.page is not None


class SearchOutcome(BaseModel):
    """Either a search result or the reason the docs were unavailable."""

    model_config = ConfigDict(frozen=True)

    result: SearchResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.result is not None
