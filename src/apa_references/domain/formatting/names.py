"""Author and editor list formatting (APA 7 §9.8 – §9.12)."""

from __future__ import annotations

from typing import Optional, Sequence

from apa_references.domain.models.reference import Author, CorporateAuthor
from apa_references.domain.rules.constants import (
    ABBREVIATIONS,
    AUTHOR_ELLIPSIS,
    MAX_LISTED_AUTHORS,
    TRUNCATED_AUTHOR_HEAD,
)


def _join_with_ampersand(items: list[str]) -> str:
    """``X`` / ``X, & Y`` / ``X, Y, & Z``."""
    if len(items) == 1:
        return items[0]
    return f"{', '.join(items[:-1])}, & {items[-1]}"


def _terminate(text: str) -> str:
    """Close an element with a period unless it already ends with one."""
    return text if text.endswith(".") else f"{text}."


def inverted_name(author: Author) -> str:
    """Reference-list form: ``'Silva, J. M.'``."""
    return f"{author.last_name}, {author.initials}"


def author_element(
    authors: Sequence[Author],
    corporate_author: Optional[CorporateAuthor] = None,
) -> str:
    """The author list without its closing period.

    A corporate author wins over the individual list. Up to 20 authors are
    all listed; beyond that the first 19 are followed by an ellipsis and
    the final author. Returns ``""`` when there is nobody to list.
    """
    if corporate_author is not None:
        return corporate_author.full_name
    if not authors:
        return ""

    if len(authors) <= MAX_LISTED_AUTHORS:
        rendered = [inverted_name(a) for a in authors]
    else:
        rendered = [inverted_name(a) for a in authors[:TRUNCATED_AUTHOR_HEAD]]
        rendered.append(AUTHOR_ELLIPSIS)
        rendered.append(inverted_name(authors[-1]))
    return _join_with_ampersand(rendered)


def format_authors(
    authors: Sequence[Author],
    corporate_author: Optional[CorporateAuthor] = None,
) -> str:
    """Format the author element of a reference entry.

    Returns ``""`` when there is nobody to list, in which case the caller
    keys the entry by title.

    >>> format_authors([Author(nome="João", sobrenome="Silva")])
    'Silva, J.'
    """
    element = author_element(authors, corporate_author)
    return _terminate(element) if element else ""


def format_editors(editors: Sequence[Author]) -> str:
    """Format the editors of an edited book: ``'A. Souza & B. Lima (Eds.),'``."""
    if not editors:
        return ""
    rendered = [f"{e.initials} {e.last_name}" for e in editors]
    suffix = ABBREVIATIONS["editor"] if len(editors) == 1 else ABBREVIATIONS["editors"]
    if len(rendered) == 2:
        joined = f"{rendered[0]} & {rendered[1]}"
    else:
        joined = _join_with_ampersand(rendered)
    return f"{joined} ({suffix}),"
