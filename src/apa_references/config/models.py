"""Pydantic models for the reference formatter configuration.

A ``FormatterConfig`` is immutable: overrides are merged with the
defaults once, when a formatter is constructed, never per call. Keys are
accepted both as Python field names and as the camelCase names used in
JSON configuration files (``idiomaPadrao``, ``usarEtAl``...).
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from apa_references.domain.models.enums import DateFormat, Language


class _ConfigModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")


class EtAlConfig(_ConfigModel):
    """When in-text citations collapse authors to ``et al.``."""

    min_authors: int = Field(
        default=3,
        ge=1,
        alias="apartirDeQuantosAutores",
        description="Author count at or above which citations collapse.",
    )
    on_first_citation: bool = Field(
        default=False,
        alias="primeiraVez",
        description="Collapse already on the first citation of a work.",
    )


class FormatterConfig(_ConfigModel):
    """Settings held by one formatter instance."""

    default_language: Language = Field(default=Language.PT, alias="idiomaPadrao")
    date_format: DateFormat = Field(default=DateFormat.FULL, alias="formatoData")
    include_doi: bool = Field(default=True, alias="incluirDOI")
    include_url: bool = Field(default=True, alias="incluirURL")
    include_access_date: bool = Field(default=False, alias="incluirDataAcesso")
    strict_validation: bool = Field(default=True, alias="validacaoEstrita")
    et_al: EtAlConfig = Field(default_factory=EtAlConfig, alias="usarEtAl")

    def merged(self, overrides: Optional[Mapping[str, Any]] = None) -> FormatterConfig:
        """Return a new config with *overrides* applied on top of this one.

        Nested ``usarEtAl`` overrides are merged key by key, so passing
        only ``{"usarEtAl": {"primeiraVez": True}}`` keeps the threshold.
        Options given as ``None`` keep their current value.
        """
        overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        if not overrides:
            return self
        data = self.model_dump(by_alias=True)
        for key, value in _to_aliases(FormatterConfig, overrides).items():
            if key == "usarEtAl" and isinstance(value, Mapping):
                nested = {k: v for k, v in value.items() if v is not None}
                data[key] = {**data[key], **_to_aliases(EtAlConfig, nested)}
            else:
                data[key] = value
        return FormatterConfig.model_validate(data)


def _to_aliases(model: type[BaseModel], values: Mapping[str, Any]) -> dict[str, Any]:
    """Rename Python field names in *values* to their aliases."""
    aliases = {name: info.alias or name for name, info in model.model_fields.items()}
    return {aliases.get(key, key): value for key, value in values.items()}
