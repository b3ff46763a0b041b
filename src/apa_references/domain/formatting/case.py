"""Sentence-case and title-case converters for APA 7 titles."""

from __future__ import annotations

import re

from apa_references.domain.rules.constants import MINOR_WORDS, TITLE_KEY_WORDS

# A word ending with one of these forces the next word to be capitalized
_BREAK_PUNCTUATION = re.compile(r"[:.?!]$")


def capitalize_first(text: str) -> str:
    """Uppercase the first character and lowercase the rest."""
    return text[:1].upper() + text[1:].lower()


def sentence_case(text: str) -> str:
    """Apply APA sentence case (APA 7 §6.17).

    Each colon-delimited part (title, subtitle) gets its first character
    capitalized and the rest lowercased; parts are rejoined with ``": "``.

    >>> sentence_case("THE EFFECTS OF NOISE: A STUDY")
    'The effects of noise: A study'
    """
    if not text:
        return ""
    parts = [part.strip() for part in text.split(":")]
    return ": ".join(capitalize_first(part) for part in parts)


def title_case(text: str) -> str:
    """Apply a simplified APA title case (APA 7 §6.17).

    Splits on single spaces. The first word and any word following one
    that ends in ``:``, ``.``, ``?`` or ``!`` is capitalized; minor words
    are lowercased; every other word is capitalized. Punctuation inside
    a word is not handled.
    """
    if not text:
        return ""
    words = text.split(" ")
    result: list[str] = []
    for index, word in enumerate(words):
        if index == 0 or _BREAK_PUNCTUATION.search(words[index - 1]):
            result.append(capitalize_first(word))
        elif word.lower() in MINOR_WORDS:
            result.append(word.lower())
        else:
            result.append(capitalize_first(word))
    return " ".join(result)


def abbreviate_title(title: str, max_words: int = TITLE_KEY_WORDS) -> str:
    """Return the first *max_words* words, with ``...`` if truncated."""
    words = title.split()
    short = " ".join(words[:max_words])
    return f"{short}..." if len(words) > max_words else short
