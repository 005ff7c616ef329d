"""Tests for configuration and category table loading."""

import pytest
from pydantic import ValidationError

from tailgrids_mcp.config import McpConfig, load_categories, parse_categories


def test_default_config_urls():
    config = McpConfig()
    assert config.base_url == "https://tailgrids.com"
    assert config.docs_url == "https://tailgrids.com/docs"
    assert config.components_url == "https://tailgrids.com/components"


def test_config_is_frozen():
    config = McpConfig()
    with pytest.raises(ValidationError):
        config.docs_url = "https://example.com"


def test_parse_categories_keeps_order():
    table = parse_categories(
        """
        Buttons:
          - DefaultButton
          - OutlineButton
        Alerts:
          - Alert
        """
    )
    assert list(table) == ["Buttons", "Alerts"]
    assert table["Buttons"] == ("DefaultButton", "OutlineButton")


def test_parsed_table_is_read_only():
    table = parse_categories("Buttons: [DefaultButton]")
    with pytest.raises(TypeError):
        table["Alerts"] = ("Alert",)


def test_parse_empty_document():
    assert dict(parse_categories("")) == {}


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list",
        "Buttons: DefaultButton",
        "Buttons: [1, 2]",
        "'Not A Name': [Alert]",
        "Buttons: [unclosed",
    ],
)
def test_parse_rejects_malformed_tables(text):
    with pytest.raises(ValueError):
        parse_categories(text)


def test_packaged_table_loads():
    table = load_categories()
    assert table
    for category, components in table.items():
        assert category.isidentifier()
        assert components
        assert all(isinstance(name, str) for name in components)


def test_load_categories_from_path(tmp_path):
    path = tmp_path / "categories.yaml"
    path.write_text("Cards:\n  - SimpleCard\n", encoding="utf-8")
    assert dict(load_categories(path)) == {"Cards": ("SimpleCard",)}


@pytest.mark.parametrize(
    "category", ["TailGridsDocs", "TailGridsComponents", "TailGridsCategories"]
)
def test_parse_rejects_categories_shadowing_fixed_tools(category):
    with pytest.raises(ValueError, match="clashes"):
        parse_categories(f"{category}: [Alert]")
