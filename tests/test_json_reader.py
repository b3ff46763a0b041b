"""Tests for reading reference records from JSON files."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from apa_references.application.error_messages import format_validation_errors, friendly_error
from apa_references.domain.errors import UnsupportedReferenceTypeError
from apa_references.domain.models.reference import BookReference, ThesisReference
from apa_references.infrastructure import JsonReferenceReader

BOOK = {"tipo": "livro", "ano": "2018", "titulo": "Didática", "editora": "Cortez"}
THESIS = {"tipo": "dissertacao", "ano": "2020", "titulo": "Redes", "instituicao": "UFPE"}


@pytest.fixture
def reader():
    return JsonReferenceReader()


def _write(tmp_path, data) -> Path:
    path = tmp_path / "refs.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestJsonReferenceReader:
    def test_single_object(self, reader, tmp_path):
        refs = reader.load(_write(tmp_path, BOOK))
        assert len(refs) == 1
        assert isinstance(refs[0], BookReference)

    def test_list(self, reader, tmp_path):
        refs = reader.load(_write(tmp_path, [BOOK, THESIS]))
        assert [type(r) for r in refs] == [BookReference, ThesisReference]
        assert refs[1].ref_type == "dissertacao"

    @pytest.mark.parametrize("key", ["referencias", "references"])
    def test_wrapped_list(self, reader, tmp_path, key):
        refs = reader.load(_write(tmp_path, {key: [BOOK]}))
        assert refs[0].title == "Didática"

    def test_missing_file(self, reader, tmp_path):
        with pytest.raises(FileNotFoundError):
            reader.load(tmp_path / "missing.json")

    def test_unexpected_layout(self, reader, tmp_path):
        with pytest.raises(ValueError):
            reader.load(_write(tmp_path, [1, 2]))

    def test_unknown_type(self, reader, tmp_path):
        with pytest.raises(UnsupportedReferenceTypeError):
            reader.load(_write(tmp_path, [{"tipo": "mapa"}]))

    def test_author_without_surname(self, reader, tmp_path):
        with pytest.raises(ValidationError):
            reader.load(_write(tmp_path, [{**BOOK, "autores": [{"nome": "Ana"}]}]))


class TestErrorMessages:
    def test_known_mapping(self):
        assert friendly_error("sobrenome", "missing") == "Todo autor precisa de sobrenome."
        assert friendly_error("sobrenome", "missing", lang="en") == "Every author needs a surname."

    def test_fallback(self):
        assert friendly_error("x", "weird", fallback="raw") == "raw"
        assert friendly_error("x", "weird") == "Validation error on field 'x'."

    def test_format_validation_errors_prefixes_path(self):
        with pytest.raises(ValidationError) as exc_info:
            BookReference.model_validate({**BOOK, "autores": [{"nome": "Ana"}]})
        messages = format_validation_errors(exc_info.value.errors())
        assert messages == ["autores.0.sobrenome: Todo autor precisa de sobrenome."]
