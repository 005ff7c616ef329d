"""Tests for the output shapes and the shape validator."""

import pytest
from pydantic import ValidationError

from tailgrids_mcp.models import (
    Category,
    Component,
    ComponentDetail,
    DocumentationPage,
    PartialResult,
    SearchResult,
    validate,
)

DETAIL = {
    "name": "DefaultButton",
    "type": "tailgrids:component",
    "category": "Buttons",
    "description": "DefaultButton component from TailGrids",
    "usage": "Copy the code",
    "installation": "Copy-paste ready",
    "features": ["Responsive design"],
    "formats": ["HTML", "React"],
    "url": "https://tailgrids.com/components",
}


def test_component_with_required_fields_only():
    component = validate(Component, {"name": "Alert", "type": "tailgrids:component"})
    assert component.name == "Alert"
    assert component.to_payload() == {"name": "Alert", "type": "tailgrids:component"}


def test_validate_by_shape_name():
    assert isinstance(validate("component-detail", DETAIL), ComponentDetail)


def test_unknown_shape_name():
    with pytest.raises(KeyError):
        validate("widget", {})


@pytest.mark.parametrize("missing", ["name", "type"])
def test_component_missing_required_field(missing):
    candidate = {"name": "Alert", "type": "tailgrids:component"}
    del candidate[missing]
    with pytest.raises(ValidationError) as exc_info:
        validate(Component, candidate)
    assert exc_info.value.errors()[0]["loc"] == (missing,)


def test_validation_error_lists_every_bad_field():
    with pytest.raises(ValidationError) as exc_info:
        validate(Component, {"description": 3})
    locations = {error["loc"] for error in exc_info.value.errors()}
    assert locations == {("name",), ("type",), ("description",)}


def test_no_coercion():
    with pytest.raises(ValidationError):
        validate(SearchResult, {
            "query": "button",
            "found": "true",
            "description": "d",
            "url": "u",
            "suggestion": "s",
        })


def test_component_detail_requires_url_and_category():
    for field in ("url", "category", "usage", "formats"):
        candidate = {k: v for k, v in DETAIL.items() if k != field}
        with pytest.raises(ValidationError):
            validate(ComponentDetail, candidate)


def test_features_must_be_strings():
    with pytest.raises(ValidationError):
        validate(ComponentDetail, {**DETAIL, "features": ["ok", 1]})


def test_category_type_tag_is_fixed():
    with pytest.raises(ValidationError):
        validate(Category, {
            "name": "Buttons",
            "type": "category",
            "description": "d",
            "components": [],
            "url": "u",
        })


def test_documentation_page_defaults_type():
    page = DocumentationPage(name="docs", description="d", content="<html/>", url="u")
    assert page.to_payload()["type"] == "documentation"


def test_shapes_are_immutable():
    component = validate(Component, {"name": "Alert", "type": "tailgrids:component"})
    with pytest.raises(ValidationError):
        component.name = "Badge"


def test_validate_accepts_model_instances():
    detail = validate(ComponentDetail, DETAIL)
    assert validate(ComponentDetail, detail) == detail


def test_partial_result_completeness():
    assert PartialResult[Component]().complete
    result = PartialResult[Component](
        errors=[{"name": "Alert", "category": "Alerts", "message": "bad"}]
    )
    assert not result.complete
    assert result.errors[0].name == "Alert"
