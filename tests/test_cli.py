"""Tests for the apa-refs command line interface."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from apa_references.config.loader import clear_cache
from apa_references.presentation.cli.app import app

runner = CliRunner()


BOOK = {
    "tipo": "livro",
    "autores": [{"nome": "Ana", "sobrenome": "Lima"}],
    "ano": "2018",
    "titulo": "Didática",
    "editora": "Cortez",
}


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def refs_file(tmp_path):
    path = tmp_path / "refs.json"
    path.write_text(json.dumps({"referencias": [BOOK]}), encoding="utf-8")
    return path


class TestFormatCommand:
    def test_json_output(self, refs_file):
        result = runner.invoke(app, ["format", str(refs_file), "--json"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload[0]["referenciaCompleta"] == "Lima, A. (2018). *Didática*. Cortez."
        assert payload[0]["citacaoParentetica"] == "(Lima, 2018)"

    def test_panel_output(self, refs_file):
        result = runner.invoke(app, ["format", str(refs_file)])
        assert result.exit_code == 0, result.output
        assert "Lima, A. (2018)" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["format", str(tmp_path / "nope.json")])
        assert result.exit_code == 1

    def test_strict_failure(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({**BOOK, "editora": ""}), encoding="utf-8")
        result = runner.invoke(app, ["format", str(path)])
        assert result.exit_code == 1
        assert "MissingRequiredField" in result.output

    def test_lenient_flag(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({**BOOK, "editora": ""}), encoding="utf-8")
        result = runner.invoke(app, ["format", str(path), "--lenient", "--json"])
        assert result.exit_code == 0, result.output
        assert '"valida": false' in result.output
        assert "Lima, A. (2018). *Didática*." in result.output

    def test_unknown_type(self, tmp_path):
        path = tmp_path / "unknown.json"
        path.write_text(json.dumps([{"tipo": "foo", "titulo": "X"}]), encoding="utf-8")
        result = runner.invoke(app, ["format", str(path)])
        assert result.exit_code == 1
        assert "foo" in result.output

    def test_custom_config(self, tmp_path):
        refs = tmp_path / "refs.json"
        refs.write_text(json.dumps([{**BOOK, "doi": "10.1/x"}]), encoding="utf-8")
        cfg = tmp_path / "cfg.json"
        cfg.write_text(json.dumps({"incluirDOI": False}), encoding="utf-8")
        result = runner.invoke(app, ["format", str(refs), "--config", str(cfg), "--json"])
        assert result.exit_code == 0, result.output
        assert "doi.org" not in json.loads(result.output)[0]["referenciaCompleta"]


class TestValidateCommand:
    def test_valid_file(self, refs_file):
        result = runner.invoke(app, ["validate", str(refs_file)])
        assert result.exit_code == 0, result.output

    def test_invalid_reference_exits_non_zero(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{**BOOK, "titulo": ""}]), encoding="utf-8")
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1


class TestConfigCommands:
    def test_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0, result.output
        assert "idiomaPadrao" in result.output

    def test_init_copies_default(self, tmp_path):
        dest = tmp_path / "apa7_config.json"
        result = runner.invoke(app, ["config", "init", "--output", str(dest)])
        assert result.exit_code == 0, result.output
        assert json.loads(dest.read_text(encoding="utf-8"))["usarEtAl"]["apartirDeQuantosAutores"] == 3

    def test_validate_good_file(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"idiomaPadrao": "es"}), encoding="utf-8")
        result = runner.invoke(app, ["config", "validate", str(path)])
        assert result.exit_code == 0, result.output

    def test_validate_bad_file(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"idiomaPadrao": "fr"}), encoding="utf-8")
        result = runner.invoke(app, ["config", "validate", str(path)])
        assert result.exit_code == 1
