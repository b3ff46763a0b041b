"""APA 7 formatting constants — pure domain values.

These are the immutable values used when assembling reference strings.
They have NO dependency on configuration files or external libraries.
"""

from apa_references.domain.models.enums import Language

DOI_RESOLVER = "https://doi.org/"

# More than this many authors → first 19, ellipsis, last (APA 7 §9.8)
MAX_LISTED_AUTHORS = 20
TRUNCATED_AUTHOR_HEAD = 19
AUTHOR_ELLIPSIS = "..."

# Words kept lowercase by title case unless they open a title or subtitle
MINOR_WORDS = frozenset(
    {"a", "an", "the", "and", "but", "or", "for", "nor", "on", "at", "to", "by", "of", "in", "with", "as"}
)

# Social media posts quote at most this many words of content
SOCIAL_MEDIA_MAX_WORDS = 20

# Citation key built from a title when there is no author
TITLE_KEY_WORDS = 3

ABBREVIATIONS: dict[str, str] = {
    "ed": "ed.",
    "editor": "Ed.",
    "editors": "Eds.",
    "edition_ordinal": "ª",
    "pages": "pp.",
    "et_al": "et al.",
    "episode": "Nº",
    "section": "§",
    "host": "Host",
    "in": "In",
}

DESCRIPTORS: dict[str, str] = {
    "video": "Vídeo",
    "podcast": "Episódio de podcast",
}

# Citation conjunctions: narrative uses the running-text word
NARRATIVE_AND = "e"
PARENTHETICAL_AND = "&"

# ---------------------------------------------------------------------------
# Month tables (the only two locales rendered)
# ---------------------------------------------------------------------------

MONTHS_PT: dict[int, str] = {
    1: "janeiro",
    2: "fevereiro",
    3: "março",
    4: "abril",
    5: "maio",
    6: "junho",
    7: "julho",
    8: "agosto",
    9: "setembro",
    10: "outubro",
    11: "novembro",
    12: "dezembro",
}

MONTHS_EN: dict[int, str] = {
    1: "January",
    2: "February",
    3: "March",
    4: "April",
    5: "May",
    6: "June",
    7: "July",
    8: "August",
    9: "September",
    10: "October",
    11: "November",
    12: "December",
}

# "Recuperado em <date>, de <url>" / "Retrieved <date>, from <url>"
RETRIEVAL_PHRASES: dict[Language, tuple[str, str]] = {
    Language.PT: ("Recuperado em", "de"),
    Language.EN: ("Retrieved", "from"),
    Language.ES: ("Recuperado el", "de"),
}

THESIS_LABELS: dict[Language, dict[str, str]] = {
    Language.PT: {"tese": "Tese de doutorado", "dissertacao": "Dissertação de mestrado"},
    Language.EN: {"tese": "Doctoral dissertation", "dissertacao": "Master's thesis"},
    Language.ES: {"tese": "Tesis doctoral", "dissertacao": "Tesis de maestría"},
}

REPORT_LABELS: dict[Language, str] = {
    Language.PT: "Relatório nº",
    Language.EN: "Report No.",
    Language.ES: "Informe n.º",
}
