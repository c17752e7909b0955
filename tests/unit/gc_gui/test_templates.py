"""Tests for action template resolution."""

from __future__ import annotations

import pytest

from gc_common.errors import TemplateResolutionError
from gc_gui.utils.templates import TemplateRenderer, has_placeholders, lookup


pytestmark = pytest.mark.unit_ui

ROW = {
    "id": 7,
    "title": "Home Page",
    "is_active": False,
    "customer": {"email": "a@example.com"},
    "tags": ["cms", "home"],
}


class TestTemplateRenderer:
    """Tests for TemplateRenderer."""

    def test_substitutes_embedded_placeholders(self) -> None:
        renderer = TemplateRenderer()
        assert renderer.render("/cms/page/edit/id/${ $.id }/", ROW) == "/cms/page/edit/id/7/"

    def test_accepts_bare_and_nested_paths(self) -> None:
        renderer = TemplateRenderer()
        assert renderer.render("Mail ${customer.email}", ROW) == "Mail a@example.com"
        assert renderer.render("${ $.tags.1 }!", ROW) == "home!"

    def test_whole_placeholder_keeps_raw_value(self) -> None:
        renderer = TemplateRenderer()
        assert renderer.render("${ $.is_active }", ROW) is False
        assert renderer.render("${ $.id }", ROW) == 7

    def test_plain_text_is_returned_as_is(self) -> None:
        renderer = TemplateRenderer(strict=True)
        text = "  Delete $ {id} page  "
        assert renderer.render(text, ROW) is text

    def test_walks_nested_structures(self) -> None:
        renderer = TemplateRenderer()
        template = {
            "label": "Delete",
            "confirm": {"title": "Delete ${ $.title }", "message": "Sure?"},
            "extra": ["${ $.id }", 3],
        }
        assert renderer.render(template, ROW) == {
            "label": "Delete",
            "confirm": {"title": "Delete Home Page", "message": "Sure?"},
            "extra": [7, 3],
        }

    def test_leaves_callables_and_scalars_alone(self) -> None:
        def callback(*_args):
            return None

        renderer = TemplateRenderer()
        rendered = renderer.render({"callback": callback, "hidden": True, "n": 1}, ROW)
        assert rendered["callback"] is callback
        assert rendered["hidden"] is True

    def test_does_not_mutate_template(self) -> None:
        template = {"confirm": {"title": "${ $.title }"}}
        TemplateRenderer().render(template, ROW)
        assert template == {"confirm": {"title": "${ $.title }"}}

    def test_missing_field_renders_empty(self) -> None:
        renderer = TemplateRenderer()
        assert renderer.render("/edit/${ $.missing }", ROW) == "/edit/"
        assert renderer.render("${ $.missing }", ROW) is None

    def test_strict_mode_raises(self) -> None:
        renderer = TemplateRenderer(strict=True)
        with pytest.raises(TemplateResolutionError) as exc_info:
            renderer.render("/edit/${ $.missing }", ROW)
        assert "missing" in str(exc_info.value)
        assert "id" in exc_info.value.context["fields"]


def test_lookup_handles_sequences_and_root() -> None:
    assert lookup(ROW, "$.tags.0") == "cms"
    assert lookup(ROW, "$") is ROW


def test_has_placeholders() -> None:
    assert has_placeholders("x ${ $.id }")
    assert not has_placeholders("plain text")
