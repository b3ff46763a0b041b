"""Output value objects produced by a formatting call.

All models are frozen: a result is created fresh per call and never
mutated afterwards. Serialisation by alias yields the camelCase keys
(``referenciaCompleta``, ``valida``...) expected by JSON consumers.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from apa_references.domain.models.enums import Language, ReferenceType


class _ResultModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ValidationResult(_ResultModel):
    """Diagnostics for one reference record."""

    is_valid: bool = Field(..., alias="valida")
    is_complete: bool = Field(..., alias="completa")
    missing_required: list[str] = Field(default_factory=list, alias="camposObrigatoriosFaltantes")
    missing_optional: list[str] = Field(default_factory=list, alias="camposOpcionaisFaltantes")
    warnings: list[str] = Field(default_factory=list, alias="avisos")
    errors: list[str] = Field(default_factory=list, alias="erros")


class ReferenceMetadata(_ResultModel):
    """Summary flags derived from the input record."""

    has_doi: bool = Field(..., alias="temDOI")
    has_url: bool = Field(..., alias="temURL")
    has_isbn: bool = Field(False, alias="temISBN")
    has_issn: bool = Field(False, alias="temISSN")
    author_count: int = Field(..., alias="quantidadeAutores")
    has_corporate_author: bool = Field(..., alias="contemAutorCorporativo")
    edition: Optional[str] = Field(None, alias="edicao")
    language: Language = Field(..., alias="idioma")


class FormattedReference(_ResultModel):
    """Bundle returned by :meth:`APAFormatter.format`."""

    full_reference: str = Field(..., alias="referenciaCompleta")
    narrative_citation: str = Field(..., alias="citacaoNarrativa")
    parenthetical_citation: str = Field(..., alias="citacaoParentetica")
    detected_type: ReferenceType = Field(..., alias="tipoDetectado")
    validation: ValidationResult = Field(..., alias="validacao")
    metadata: ReferenceMetadata = Field(..., alias="metadados")
