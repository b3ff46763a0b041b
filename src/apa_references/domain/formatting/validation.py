"""Required-field validation for APA 7 reference records.

The validator never raises: every problem is reported through the
returned :class:`ValidationResult`. Field names in the result use the
camelCase JSON names (``titulo``, ``periodico``...) so callers can map
them back to their input.
"""

from __future__ import annotations

from typing import Any, Optional

from apa_references.domain.models.enums import ReferenceType
from apa_references.domain.models.reference import ReferenceBase, SocialMediaReference
from apa_references.domain.models.results import ValidationResult
from apa_references.domain.rules.constants import SOCIAL_MEDIA_MAX_WORDS
from apa_references.domain.rules.messages import message

# (attribute, JSON name) pairs per variant
_REQUIRED_FIELDS: dict[ReferenceType, tuple[tuple[str, str], ...]] = {
    ReferenceType.ARTICLE: (("periodical", "periodico"), ("volume", "volume"), ("pages", "paginas")),
    ReferenceType.BOOK: (("publisher", "editora"),),
    ReferenceType.CHAPTER: (
        ("editors", "editores"),
        ("book_title", "tituloLivro"),
        ("publisher", "editora"),
        ("pages", "paginas"),
    ),
    ReferenceType.WEBSITE: (("site_name", "nomeSite"),),
    ReferenceType.THESIS: (("institution", "instituicao"),),
    ReferenceType.DISSERTATION: (("institution", "instituicao"),),
    ReferenceType.NEWSPAPER: (("newspaper_name", "nomeJornal"), ("publication_date", "dataPublicacao")),
    ReferenceType.VIDEO: (("platform", "plataforma"), ("publication_date", "dataPublicacao")),
    ReferenceType.PODCAST: (
        ("host", "apresentador"),
        ("podcast_name", "nomePodcast"),
        ("publication_date", "dataPublicacao"),
    ),
    ReferenceType.CONFERENCE: (
        ("conference_name", "nomeConferencia"),
        ("location", "local"),
        ("start_date", "dataInicio"),
        ("presentation_type", "tipoApresentacao"),
    ),
    ReferenceType.REPORT: (("institution", "instituicao"),),
    ReferenceType.LAW: (("law_number", "numeroLei"),),
    ReferenceType.SOCIAL_MEDIA: (
        ("platform", "plataforma"),
        ("username", "username"),
        ("content", "conteudo"),
        ("post_type", "tipoPost"),
    ),
}

_OPTIONAL_FIELDS: dict[ReferenceType, tuple[tuple[str, str], ...]] = {
    ReferenceType.ARTICLE: (("issue", "numero"), ("issn", "issn")),
    ReferenceType.BOOK: (("edition", "edicao"), ("place", "local"), ("isbn", "isbn")),
    ReferenceType.CHAPTER: (("edition", "edicao"), ("isbn", "isbn")),
    ReferenceType.WEBSITE: (("publication_date", "dataPublicacao"),),
    ReferenceType.THESIS: (("work_type", "tipoTrabalho"), ("repository", "repositorio")),
    ReferenceType.DISSERTATION: (("work_type", "tipoTrabalho"), ("repository", "repositorio")),
    ReferenceType.NEWSPAPER: (("pages", "paginas"),),
    ReferenceType.VIDEO: (("channel", "canal"), ("duration", "duracao")),
    ReferenceType.PODCAST: (("episode_number", "numeroEpisodio"), ("producer", "produtora")),
    ReferenceType.CONFERENCE: (("end_date", "dataFim"),),
    ReferenceType.REPORT: (("report_number", "numeroRelatorio"), ("publisher", "editora")),
    ReferenceType.LAW: (("section", "secao"),),
    ReferenceType.SOCIAL_MEDIA: (),
}


def is_blank(value: Any) -> bool:
    """True for ``None``, whitespace-only strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return not value
    return False


def validate(reference: ReferenceBase, lang: str = "pt") -> ValidationResult:
    """Check universal and variant-specific requirements of *reference*.

    Args:
        reference: The record to check.
        lang: Language of the produced messages (``pt``, ``en``, ``es``).

    Returns:
        ``valida`` is true iff there are no errors; ``completa`` is true
        iff no required field is missing and there are no warnings.
    """
    missing_required: list[str] = []
    missing_optional: list[str] = []
    warnings: list[str] = []
    errors: list[str] = []

    # -- universal requirements ---------------------------------------------
    if is_blank(reference.title):
        missing_required.append("titulo")
        errors.append(message("missing_title", lang))
    if is_blank(reference.year):
        missing_required.append("ano")
        errors.append(message("missing_year", lang))

    if not reference.authors and reference.corporate_author is None:
        warnings.append(message("no_author", lang))
    elif reference.authors and reference.corporate_author is not None:
        warnings.append(message("corporate_precedence", lang))

    if reference.url and not reference.url.startswith(("http://", "https://")):
        warnings.append(message("url_scheme", lang))

    # -- variant requirements -----------------------------------------------
    try:
        kind: Optional[ReferenceType] = ReferenceType(reference.ref_type)
    except ValueError:
        # unknown tags are reported by the dispatcher
        kind = None
    for attr, name in _REQUIRED_FIELDS.get(kind, ()):
        if is_blank(getattr(reference, attr, None)):
            missing_required.append(name)
            errors.append(message("missing_field", lang, field=name))
    for attr, name in _OPTIONAL_FIELDS.get(kind, ()):
        if is_blank(getattr(reference, attr, None)):
            missing_optional.append(name)

    if kind is ReferenceType.ARTICLE and not reference.doi and not reference.url:
        warnings.append(message("doi_or_url", lang))

    if (
        isinstance(reference, SocialMediaReference)
        and len(reference.content.split()) > SOCIAL_MEDIA_MAX_WORDS
    ):
        warnings.append(message("content_too_long", lang, limit=SOCIAL_MEDIA_MAX_WORDS))

    return ValidationResult(
        valida=not errors,
        completa=not missing_required and not warnings,
        camposObrigatoriosFaltantes=missing_required,
        camposOpcionaisFaltantes=missing_optional,
        avisos=warnings,
        erros=errors,
    )
