"""Narrative and parenthetical in-text citations (APA 7 §8.17)."""

from __future__ import annotations

from apa_references.config.models import FormatterConfig
from apa_references.domain.formatting.case import abbreviate_title
from apa_references.domain.models.enums import CitationType
from apa_references.domain.models.reference import ReferenceBase
from apa_references.domain.rules.constants import (
    ABBREVIATIONS,
    NARRATIVE_AND,
    PARENTHETICAL_AND,
)


class CitationGenerator:
    """Build short-form citations from a reference record.

    The generator is stateless: it cannot know whether a call is the first
    citation of a work in a document. Callers that track citation history
    pass ``first_citation=True`` for the first one; by default every call
    is treated as a subsequent citation, which collapses at the threshold.
    With ``first_citation=True`` the authors collapse only when
    ``primeiraVez`` is enabled; otherwise the first citation lists them all.
    """

    def __init__(self, config: FormatterConfig) -> None:
        self._config = config

    def should_use_et_al(self, author_count: int, first_citation: bool = False) -> bool:
        """Decide whether *author_count* authors collapse to ``et al.``."""
        if author_count < self._config.et_al.min_authors:
            return False
        if first_citation:
            return self._config.et_al.on_first_citation
        return True

    def author_element(
        self,
        ref: ReferenceBase,
        citation_type: CitationType,
        first_citation: bool = False,
    ) -> str:
        """The part of the citation that names the author(s)."""
        if ref.corporate_author is not None:
            return ref.corporate_author.full_name
        if not ref.authors:
            return f'"{abbreviate_title(ref.title)}"'

        surnames = [a.last_name for a in ref.authors]
        if self.should_use_et_al(len(surnames), first_citation):
            return f"{surnames[0]} {ABBREVIATIONS['et_al']}"
        if len(surnames) == 1:
            return surnames[0]

        conjunction = NARRATIVE_AND if citation_type is CitationType.NARRATIVE else PARENTHETICAL_AND
        if len(surnames) == 2:
            return f"{surnames[0]} {conjunction} {surnames[1]}"
        return f"{', '.join(surnames[:-1])} {conjunction} {surnames[-1]}"

    def narrative(self, ref: ReferenceBase, first_citation: bool = False) -> str:
        """``Silva (2020)``.

        Corporate authors and title keys are named without the year.
        """
        author = self.author_element(ref, CitationType.NARRATIVE, first_citation)
        if ref.corporate_author is not None or not ref.authors:
            return author
        return f"{author} ({ref.year})"

    def parenthetical(self, ref: ReferenceBase, first_citation: bool = False) -> str:
        """``(Silva & Santos, 2020)``."""
        author = self.author_element(ref, CitationType.PARENTHETICAL, first_citation)
        return f"({author}, {ref.year})"

    def cite(
        self,
        ref: ReferenceBase,
        citation_type: CitationType = CitationType.PARENTHETICAL,
        first_citation: bool = False,
    ) -> str:
        """Format the in-text citation of the requested type."""
        if citation_type is CitationType.NARRATIVE:
            return self.narrative(ref, first_citation)
        return self.parenthetical(ref, first_citation)
