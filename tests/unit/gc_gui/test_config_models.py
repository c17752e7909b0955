"""Tests for column configuration and grid documents."""

from __future__ import annotations

from pathlib import Path

import pytest

from gc_common.errors import ConfigurationError
from gc_gui.models.config import ActionsColumnConfig, GridDocument, validate_action_template


pytestmark = pytest.mark.unit_ui


class TestValidateActionTemplate:
    """Tests for validate_action_template."""

    def test_returns_copy(self) -> None:
        template = {"label": "Edit", "href": "/e/${ $.id }"}
        result = validate_action_template("edit", template)
        assert result == template
        assert result is not template

    def test_rejects_non_mapping(self) -> None:
        with pytest.raises(ConfigurationError):
            validate_action_template("edit", "not-a-dict")

    def test_rejects_incomplete_callback_reference(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            validate_action_template("view", {"callback": {"target": "open"}})
        assert exc_info.value.context["index"] == "view"

    def test_accepts_callable_callback(self) -> None:
        result = validate_action_template("view", {"callback": print})
        assert result["callback"] is print


class TestActionsColumnConfig:
    """Tests for ActionsColumnConfig."""

    def test_defaults(self) -> None:
        config = ActionsColumnConfig()
        assert config.index == "actions"
        assert config.index_field == "id"
        assert config.provider_timeout_seconds == 5.0
        assert config.strict_templates is False
        assert config.actions == {}

    def test_from_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GC_PROVIDER_TIMEOUT", "1.5")
        monkeypatch.setenv("GC_STRICT_TEMPLATES", "true")
        config = ActionsColumnConfig.from_env(index="page_actions")
        assert config.index == "page_actions"
        assert config.provider_timeout_seconds == 1.5
        assert config.strict_templates is True

    def test_invalid_confirm_is_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            ActionsColumnConfig(actions={"delete": {"confirm": {"title": ["x"]}}})


class TestGridDocument:
    """Tests for GridDocument.load."""

    def test_load_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GC_PROVIDER_TIMEOUT", raising=False)
        monkeypatch.delenv("GC_STRICT_TEMPLATES", raising=False)
        path = tmp_path / "grid.yaml"
        path.write_text(
            """
column:
  index: idx
  actions:
    view: {label: View, href: "/v/${ $.id }"}
rows:
  - {id: 1, title: Home, idx: {edit: {href: /e/1}}}
  - {id: 2, title: About}
actions:
  delete:
    label: Delete
    confirm: {title: "Sure?", message: m}
"""
        )
        document = GridDocument.load(path)

        assert document.column.index == "idx"
        assert len(document.rows) == 2
        assert set(document.catalog) == {"view", "delete"}
        assert document.field_names == ["id", "title"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            GridDocument.load(tmp_path / "nope.yaml")

    def test_top_level_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "grid.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            GridDocument.load(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "grid.yaml"
        path.write_text("rows: [unclosed\n")
        with pytest.raises(ConfigurationError, match="YAML"):
            GridDocument.load(path)

    def test_invalid_rows(self, tmp_path: Path) -> None:
        path = tmp_path / "grid.yaml"
        path.write_text("rows: 5\n")
        with pytest.raises(ConfigurationError, match="Invalid grid file"):
            GridDocument.load(path)
