"""Tests for the formatter configuration system."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from apa_references.config.loader import clear_cache, get_config, load_config
from apa_references.config.models import FormatterConfig
from apa_references.domain.errors import ConfigurationError
from apa_references.domain.models.enums import DateFormat, Language


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _fresh_cache():
    """Ensure a clean config cache for every test."""
    clear_cache()
    yield
    clear_cache()


# ---------------------------------------------------------------------------
# Default config loading
# ---------------------------------------------------------------------------


class TestDefaultConfig:
    """Tests for loading the built-in apa7_default.json."""

    def test_loads_without_error(self):
        cfg = load_config()
        assert isinstance(cfg, FormatterConfig)

    def test_matches_model_defaults(self):
        assert load_config() == FormatterConfig()

    def test_values(self):
        cfg = load_config()
        assert cfg.default_language is Language.PT
        assert cfg.date_format is DateFormat.FULL
        assert cfg.include_doi
        assert cfg.include_url
        assert not cfg.include_access_date
        assert cfg.strict_validation
        assert cfg.et_al.min_authors == 3
        assert not cfg.et_al.on_first_citation

    def test_config_is_frozen(self):
        cfg = load_config()
        with pytest.raises(ValidationError):
            cfg.include_doi = False


# ---------------------------------------------------------------------------
# Custom config files
# ---------------------------------------------------------------------------


class TestCustomConfig:
    """Tests for loading custom JSON config files."""

    def test_partial_file(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"idiomaPadrao": "en", "usarEtAl": {"primeiraVez": True}}))

        cfg = load_config(path)
        assert cfg.default_language is Language.EN
        assert cfg.et_al.on_first_citation
        # Defaults still applied
        assert cfg.et_al.min_authors == 3
        assert cfg.include_doi

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            load_config(Path("/nonexistent/config.json"))

    def test_invalid_json_raises_error(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("not json {{{")
        with pytest.raises(ConfigurationError):
            load_config(bad)

    def test_non_object_root(self, tmp_path):
        bad = tmp_path / "list.json"
        bad.write_text("[1, 2]")
        with pytest.raises(ConfigurationError):
            load_config(bad)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "typo.json"
        path.write_text(json.dumps({"incluirDoi": False}))
        with pytest.raises(ValidationError):
            load_config(path)

    def test_invalid_date_format(self, tmp_path):
        path = tmp_path / "bad_date.json"
        path.write_text(json.dumps({"formatoData": "dia"}))
        with pytest.raises(ValidationError):
            load_config(path)


# ---------------------------------------------------------------------------
# Merging overrides
# ---------------------------------------------------------------------------


class TestMerged:
    def test_no_overrides_returns_same_instance(self):
        cfg = FormatterConfig()
        assert cfg.merged({}) is cfg

    def test_merge_does_not_mutate(self):
        cfg = FormatterConfig()
        other = cfg.merged({"incluirURL": False})
        assert cfg.include_url
        assert not other.include_url

    def test_none_values_keep_defaults(self):
        cfg = FormatterConfig().merged({"idiomaPadrao": None, "incluirDOI": None})
        assert cfg == FormatterConfig()

    def test_nested_none_keeps_threshold(self):
        cfg = FormatterConfig().merged(
            {"usarEtAl": {"apartirDeQuantosAutores": None, "primeiraVez": True}}
        )
        assert cfg.et_al.min_authors == 3
        assert cfg.et_al.on_first_citation

    def test_nested_field_names(self):
        cfg = FormatterConfig().merged({"et_al": {"min_authors": 4}})
        assert cfg.et_al.min_authors == 4
        assert not cfg.et_al.on_first_citation


# ---------------------------------------------------------------------------
# Caching
# ---------------------------------------------------------------------------


class TestCaching:
    """Tests for the config caching mechanism."""

    def test_returns_same_instance(self):
        a = load_config()
        b = get_config()
        assert a is b

    def test_cache_cleared(self):
        a = load_config()
        clear_cache()
        b = load_config()
        # New object after clear
        assert a is not b
        # But content identical
        assert a == b
