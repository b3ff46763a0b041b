"""Enumerations for APA 7 reference formatting."""

from enum import Enum


class ReferenceType(str, Enum):
    """Kind tags of the supported APA 7 reference variants.

    ``THESIS`` and ``DISSERTATION`` are two tags of the same variant.
    """

    ARTICLE = "artigo"
    BOOK = "livro"
    CHAPTER = "capitulo"
    WEBSITE = "website"
    THESIS = "tese"
    DISSERTATION = "dissertacao"
    NEWSPAPER = "jornal"
    VIDEO = "video"
    PODCAST = "podcast"
    CONFERENCE = "conferencia"
    REPORT = "relatorio"
    LAW = "lei"
    SOCIAL_MEDIA = "midia-social"


class CitationType(str, Enum):
    """In-text citation styles."""

    PARENTHETICAL = "parentetica"  # (Author, Year)
    NARRATIVE = "narrativa"  # Author (Year)


class Language(str, Enum):
    """Languages a reference (or the formatter default) can declare."""

    PT = "pt"
    EN = "en"
    ES = "es"


class DateFormat(str, Enum):
    """How dates such as the access date are rendered."""

    FULL = "completo"  # 5 de março de 2024
    YEAR_MONTH = "ano-mes"  # março de 2024
    YEAR = "ano"  # 2024
