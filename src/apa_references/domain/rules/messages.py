"""Localised validator and formatter messages (pt, en, es)."""

from __future__ import annotations

from typing import Any

# Maps message key → {lang: template}
_MESSAGES: dict[str, dict[str, str]] = {
    "missing_title": {
        "pt": "Título é obrigatório",
        "en": "Title is required",
        "es": "El título es obligatorio",
    },
    "missing_year": {
        "pt": "Ano é obrigatório",
        "en": "Year is required",
        "es": "El año es obligatorio",
    },
    "missing_field": {
        "pt": "Campo obrigatório ausente: {field}",
        "en": "Missing required field: {field}",
        "es": "Falta el campo obligatorio: {field}",
    },
    "no_author": {
        "pt": "Nenhum autor especificado - usar título como identificador",
        "en": "No author given - the title is used as the citation key",
        "es": "Ningún autor especificado - se usa el título como identificador",
    },
    "url_scheme": {
        "pt": "URL deve começar com http:// ou https://",
        "en": "URL must start with http:// or https://",
        "es": "La URL debe comenzar con http:// o https://",
    },
    "doi_or_url": {
        "pt": "DOI ou URL recomendado para artigos",
        "en": "A DOI or URL is recommended for articles",
        "es": "Se recomienda DOI o URL para artículos",
    },
    "corporate_precedence": {
        "pt": "Autores individuais ignorados: o autor corporativo tem precedência",
        "en": "Individual authors ignored: the corporate author takes precedence",
        "es": "Autores individuales ignorados: el autor corporativo tiene precedencia",
    },
    "content_too_long": {
        "pt": "Conteúdo da postagem excede {limit} palavras e será truncado",
        "en": "Post content exceeds {limit} words and will be truncated",
        "es": "El contenido de la publicación supera {limit} palabras y será truncado",
    },
    "unsupported_type": {
        "pt": "Tipo de referência não suportado: {value}",
        "en": "Unsupported reference type: {value}",
        "es": "Tipo de referencia no soportado: {value}",
    },
}


def message(key: str, lang: str = "pt", **params: Any) -> str:
    """Return the localised message *key*, formatted with *params*.

    Falls back to Portuguese when *lang* has no translation.
    """
    templates = _MESSAGES[key]
    template = templates.get(lang, templates["pt"])
    return template.format(**params)
