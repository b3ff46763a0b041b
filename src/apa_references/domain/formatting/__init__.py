"""Reference formatting engine — pure functions over domain models."""

from apa_references.domain.formatting.case import abbreviate_title, sentence_case, title_case
from apa_references.domain.formatting.citations import CitationGenerator
from apa_references.domain.formatting.metadata import extract_metadata
from apa_references.domain.formatting.names import author_element, format_authors, format_editors
from apa_references.domain.formatting.references import ReferenceRenderer
from apa_references.domain.formatting.validation import validate

__all__ = [
    "CitationGenerator",
    "ReferenceRenderer",
    "abbreviate_title",
    "author_element",
    "extract_metadata",
    "format_authors",
    "format_editors",
    "sentence_case",
    "title_case",
    "validate",
]
