"""Date rendering for retrieval statements."""

from __future__ import annotations

from datetime import date

from apa_references.domain.models.enums import DateFormat, Language
from apa_references.domain.rules.constants import MONTHS_EN, MONTHS_PT


def format_date(value: date, date_format: DateFormat, language: Language) -> str:
    """Render *value* in the given mode.

    English uses ``March 5, 2024``; every other language uses the
    Portuguese table, ``5 de março de 2024``.

    >>> format_date(date(2024, 3, 5), DateFormat.YEAR_MONTH, Language.EN)
    'March 2024'
    """
    if date_format is DateFormat.YEAR:
        return str(value.year)

    if language is Language.EN:
        month = MONTHS_EN[value.month]
        if date_format is DateFormat.YEAR_MONTH:
            return f"{month} {value.year}"
        return f"{month} {value.day}, {value.year}"

    month = MONTHS_PT[value.month]
    if date_format is DateFormat.YEAR_MONTH:
        return f"{month} de {value.year}"
    return f"{value.day} de {month} de {value.year}"
