"""APA 7 formatter facade — the public entry point of the engine.

Wires the validator, the per-type renderer, the citation generator and
the metadata extractor around one immutable :class:`FormatterConfig`.
Every call is a pure function of its input: nothing is cached between
calls, so one instance can be shared across threads.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from apa_references.config.models import FormatterConfig
from apa_references.domain.errors import MissingRequiredFieldError
from apa_references.domain.formatting.citations import CitationGenerator
from apa_references.domain.formatting.metadata import extract_metadata
from apa_references.domain.formatting.references import ReferenceRenderer
from apa_references.domain.formatting.validation import validate
from apa_references.domain.models.enums import ReferenceType
from apa_references.domain.models.reference import ReferenceBase, parse_reference
from apa_references.domain.models.results import FormattedReference, ValidationResult
from apa_references.domain.rules.messages import message

logger = logging.getLogger(__name__)

ReferenceInput = Union[ReferenceBase, Mapping[str, Any]]


class APAFormatter:
    """Format reference records into APA 7 entries and citations.

    Usage::

        formatter = APAFormatter(validacaoEstrita=False)
        result = formatter.format({"tipo": "livro", "titulo": "...", ...})
        print(result.full_reference)

    Args:
        config: Base configuration (defaults to :class:`FormatterConfig`).
        **overrides: Option overrides merged on top of *config*, by
            camelCase name (``incluirDOI``) or field name (``include_doi``).
    """

    def __init__(self, config: Optional[FormatterConfig] = None, **overrides: Any) -> None:
        self._config = (config or FormatterConfig()).merged(overrides)
        self._renderer = ReferenceRenderer(self._config)
        self._citations = CitationGenerator(self._config)

    @classmethod
    def from_overrides(cls, overrides: Optional[Mapping[str, Any]] = None) -> APAFormatter:
        """Build a formatter from a partial options mapping."""
        return cls(**dict(overrides or {}))

    @property
    def config(self) -> FormatterConfig:
        return self._config

    @property
    def citations(self) -> CitationGenerator:
        return self._citations

    # -- operations ----------------------------------------------------------

    def validate(self, reference: ReferenceInput) -> ValidationResult:
        """Validate *reference* with messages in the default language."""
        ref = self._coerce(reference)
        return validate(ref, self._config.default_language.value)

    def format(self, reference: ReferenceInput) -> FormattedReference:
        """Format *reference* into its full entry, citations and diagnostics.

        Raises:
            MissingRequiredFieldError: In strict mode, when a required field
                is absent.
            UnsupportedReferenceTypeError: When the kind tag is unknown.
        """
        ref = self._coerce(reference)
        validation = self.validate(ref)

        if not validation.is_valid:
            if self._config.strict_validation:
                field = validation.missing_required[0] if validation.missing_required else "campo desconhecido"
                raise MissingRequiredFieldError(
                    field,
                    message("missing_field", self._config.default_language.value, field=field),
                )
            logger.warning(
                "Formatting incomplete %s reference %r: missing %s",
                ref.ref_type,
                ref.title,
                ", ".join(validation.missing_required),
            )

        full_reference = self._renderer.render(ref)

        return FormattedReference(
            referenciaCompleta=full_reference,
            citacaoNarrativa=self._citations.narrative(ref),
            citacaoParentetica=self._citations.parenthetical(ref),
            tipoDetectado=ReferenceType(ref.ref_type),
            validacao=validation,
            metadados=extract_metadata(ref, self._config.default_language),
        )

    # -- helpers -------------------------------------------------------------

    @staticmethod
    def _coerce(reference: ReferenceInput) -> ReferenceBase:
        if isinstance(reference, ReferenceBase):
            return reference
        return parse_reference(reference)
