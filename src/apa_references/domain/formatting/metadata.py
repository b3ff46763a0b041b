"""Summary flags derived from a reference record."""

from __future__ import annotations

from apa_references.domain.models.enums import Language
from apa_references.domain.models.reference import ReferenceBase
from apa_references.domain.models.results import ReferenceMetadata


def extract_metadata(reference: ReferenceBase, default_language: Language) -> ReferenceMetadata:
    """Derive DOI/URL/ISBN/ISSN presence, author counts and language."""
    return ReferenceMetadata(
        temDOI=bool(reference.doi),
        temURL=bool(reference.url),
        temISBN=bool(getattr(reference, "isbn", None)),
        temISSN=bool(getattr(reference, "issn", None)),
        quantidadeAutores=len(reference.authors),
        contemAutorCorporativo=reference.corporate_author is not None,
        edicao=getattr(reference, "edition", None),
        idioma=reference.language or default_language,
    )
