"""User-friendly error messages for Pydantic validation errors.

Belongs to the Application layer — translates Pydantic machine errors
raised while reading reference records into localised messages
(Portuguese, English, Spanish).
"""

from __future__ import annotations

from typing import Any

# Maps (field, pydantic error_type) → message
_PYDANTIC_ERROR_MAP: dict[tuple[str, str], dict[str, str]] = {
    ("dataAcesso", "date_from_datetime_parsing"): {
        "pt": "Data de acesso inválida. Use AAAA-MM-DD (ex.: 2024-03-05).",
        "en": "Invalid access date. Use YYYY-MM-DD (e.g., 2024-03-05).",
        "es": "Fecha de acceso inválida. Use AAAA-MM-DD (ej., 2024-03-05).",
    },
    ("idioma", "enum"): {
        "pt": "Idioma inválido. Opções: pt, en, es.",
        "en": "Invalid language. Options: pt, en, es.",
        "es": "Idioma inválido. Opciones: pt, en, es.",
    },
    ("sobrenome", "missing"): {
        "pt": "Todo autor precisa de sobrenome.",
        "en": "Every author needs a surname.",
        "es": "Todo autor necesita apellido.",
    },
    ("nomeCompleto", "missing"): {
        "pt": "O autor corporativo precisa de nome completo.",
        "en": "The corporate author needs a full name.",
        "es": "El autor corporativo necesita nombre completo.",
    },
}


def friendly_error(
    field: str,
    error_type: str,
    lang: str = "pt",
    fallback: str | None = None,
) -> str:
    """Return a user-friendly message for a Pydantic validation error.

    Args:
        field: The (alias) name of the field that failed validation.
        error_type: The Pydantic error type string (e.g., ``missing``).
        lang: Language code (``pt``, ``en`` or ``es``).
        fallback: Fallback message if no mapping exists.
    """
    messages = _PYDANTIC_ERROR_MAP.get((field, error_type))
    if messages:
        return messages.get(lang, messages["pt"])
    return fallback or f"Validation error on field '{field}'."


def format_validation_errors(
    errors: list[dict[str, Any]],
    lang: str = "pt",
) -> list[str]:
    """Convert a list of Pydantic error dicts to user-friendly messages.

    Args:
        errors: Output of ``ValidationError.errors()``.
        lang: Language code.

    Returns:
        List of user-friendly error strings, prefixed with the field path.
    """
    result: list[str] = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", [])]
        field = loc[-1] if loc else ""
        msg = friendly_error(field, err.get("type", ""), lang, fallback=err.get("msg"))
        path = ".".join(loc)
        result.append(f"{path}: {msg}" if path else msg)
    return result
