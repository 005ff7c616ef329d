"""Fixed configuration bundle and the static category table."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

import yaml
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

# Category table shipped with the package
DEFAULT_CATEGORIES_PATH = Path(__file__).parent / "categories.yaml"

CategoryTable = Mapping[str, tuple[str, ...]]

# Category tools are named <prefix><Category> and must not shadow a fixed tool
CATEGORY_TOOL_PREFIX = "get"
FIXED_TOOL_NAMES = (
    "getTailGridsComponents",
    "getTailGridsDocs",
    "getTailGridsCategories",
    "searchTailGridsDocs",
)


class McpConfig(BaseModel):
    """General configuration for the MCP service."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(default="tailgrids-mcp-server")
    version: str = Field(default="1.0.0")
    base_url: str = Field(default="https://tailgrids.com")
    docs_url: str = Field(default="https://tailgrids.com/docs")
    # TailGrids has no registry API, so the component listing page doubles as one
    components_url: str = Field(default="https://tailgrids.com/components")


def parse_categories(text: str) -> CategoryTable:
    """Parse a YAML category table into a read-only mapping.

    Args:
        text: YAML document mapping category names to lists of component names

    Returns:
        Read-only mapping of category name to a tuple of component names,
        in document order
    """
    try:
        raw = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid category table: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError("Category table must be a mapping of category -> components")

    table: dict[str, tuple[str, ...]] = {}
    for category, components in raw.items():
        if not isinstance(category, str) or not category.isidentifier():
            raise ValueError(f"Invalid category name: {category!r}")
        if f"{CATEGORY_TOOL_PREFIX}{category}" in FIXED_TOOL_NAMES:
            raise ValueError(f"Category {category} clashes with a built-in tool name")
        if not isinstance(components, list) or not all(
            isinstance(name, str) for name in components
        ):
            raise ValueError(f"Category {category} must list component names")
        table[category] = tuple(components)

    return MappingProxyType(table)


def load_categories(path: Path = DEFAULT_CATEGORIES_PATH) -> CategoryTable:
    """Load the category table from a YAML file."""
    text = path.read_text(encoding="utf-8")
    categories = parse_categories(text)
    logger.info(f"Loaded {len(categories)} component categories")
    return categories
