"""Per-type APA 7 reference-list formatters.

Each formatter assembles an ordered list of segments which are joined
with single spaces. Italics are marked with ``*...*``; the document
integration layer turns the markers into real formatting.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from apa_references.config.models import FormatterConfig
from apa_references.domain.errors import UnsupportedReferenceTypeError
from apa_references.domain.formatting.case import sentence_case, title_case
from apa_references.domain.formatting.dates import format_date
from apa_references.domain.formatting.names import author_element, format_authors, format_editors
from apa_references.domain.models.enums import Language, ReferenceType
from apa_references.domain.models.reference import (
    ArticleReference,
    BookReference,
    ChapterReference,
    ConferenceReference,
    LawReference,
    NewspaperReference,
    PodcastReference,
    ReferenceBase,
    ReportReference,
    SocialMediaReference,
    ThesisReference,
    VideoReference,
    WebsiteReference,
)
from apa_references.domain.rules.constants import (
    ABBREVIATIONS,
    DESCRIPTORS,
    DOI_RESOLVER,
    REPORT_LABELS,
    RETRIEVAL_PHRASES,
    SOCIAL_MEDIA_MAX_WORDS,
    THESIS_LABELS,
)
from apa_references.domain.rules.messages import message

logger = logging.getLogger(__name__)


def _period(text: str) -> str:
    """Terminate *text* with a period unless it already ends in punctuation."""
    return text if text.endswith((".", "?", "!")) else f"{text}."


def _edition_label(edition: Optional[str]) -> str:
    """``'2'`` → ``'2ª ed.'``; first editions are never annotated."""
    if not edition or edition.strip() == "1":
        return ""
    edition = edition.strip()
    ordinal = f"{edition}{ABBREVIATIONS['edition_ordinal']}" if edition.isdigit() else edition
    return f"{ordinal} {ABBREVIATIONS['ed']}"


class ReferenceRenderer:
    """Render the full reference-list entry of any reference variant.

    Usage::

        renderer = ReferenceRenderer(FormatterConfig())
        text = renderer.render(reference)
    """

    def __init__(self, config: FormatterConfig) -> None:
        self._config = config
        self._formatters: dict[ReferenceType, Callable[[ReferenceBase], str]] = {
            ReferenceType.ARTICLE: self._fmt_article,
            ReferenceType.BOOK: self._fmt_book,
            ReferenceType.CHAPTER: self._fmt_chapter,
            ReferenceType.WEBSITE: self._fmt_website,
            ReferenceType.THESIS: self._fmt_thesis,
            ReferenceType.DISSERTATION: self._fmt_thesis,
            ReferenceType.NEWSPAPER: self._fmt_newspaper,
            ReferenceType.VIDEO: self._fmt_video,
            ReferenceType.PODCAST: self._fmt_podcast,
            ReferenceType.CONFERENCE: self._fmt_conference,
            ReferenceType.REPORT: self._fmt_report,
            ReferenceType.LAW: self._fmt_law,
            ReferenceType.SOCIAL_MEDIA: self._fmt_social_media,
        }
        uncovered = set(ReferenceType) - set(self._formatters)
        if uncovered:
            raise RuntimeError(f"No formatter registered for: {sorted(t.value for t in uncovered)}")

    # -- main dispatch -------------------------------------------------------

    def render(self, reference: ReferenceBase) -> str:
        """Return the complete APA 7 reference string for *reference*.

        Raises:
            UnsupportedReferenceTypeError: If the kind tag is unknown.
        """
        try:
            kind = ReferenceType(reference.ref_type)
        except ValueError:
            raise UnsupportedReferenceTypeError(
                "tipo", message("unsupported_type", value=reference.ref_type)
            ) from None
        logger.debug("Rendering %s reference %r", kind.value, reference.title)
        return self._formatters[kind](reference)

    # -- helpers -------------------------------------------------------------

    def language_of(self, reference: ReferenceBase) -> Language:
        """Explicit record language, else the configured default."""
        return reference.language or self._config.default_language

    def _author_year_parts(self, ref: ReferenceBase, date_text: Optional[str] = None) -> list[str]:
        """Build the common ``Author. (Year).`` prefix."""
        parts: list[str] = []
        author_str = format_authors(ref.authors, ref.corporate_author)
        if author_str:
            parts.append(author_str)
        parts.append(f"({date_text or ref.year}).")
        return parts

    def _link_parts(self, ref: ReferenceBase) -> list[str]:
        """DOI link, or URL (optionally preceded by a retrieval statement)."""
        if self._config.include_doi and ref.doi:
            return [f"{DOI_RESOLVER}{ref.doi}"]
        if not (self._config.include_url and ref.url):
            return []
        if self._config.include_access_date and ref.access_date:
            language = self.language_of(ref)
            retrieved, from_word = RETRIEVAL_PHRASES[language]
            when = format_date(ref.access_date, self._config.date_format, language)
            return [f"{retrieved} {when}, {from_word}", ref.url]
        return [ref.url]

    def _container_name(self, ref: ReferenceBase, name: str) -> str:
        """Periodical names are title-cased for English-language records."""
        if self.language_of(ref) is Language.EN:
            return title_case(name)
        return name

    # -- per-type formatters -------------------------------------------------

    def _fmt_article(self, ref: ArticleReference) -> str:
        """Journal article — APA 7 §10.1."""
        parts = self._author_year_parts(ref)
        parts.append(_period(sentence_case(ref.title)))
        source_str = f"*{self._container_name(ref, ref.periodical)}*"
        if ref.volume:
            source_str += f", *{ref.volume}*"
            if ref.issue:
                source_str += f"({ref.issue})"
        if ref.pages:
            source_str += f", {ref.pages}"
        parts.append(f"{source_str}.")
        parts.extend(self._link_parts(ref))
        return " ".join(parts)

    def _fmt_book(self, ref: BookReference) -> str:
        """Book — APA 7 §10.2."""
        parts = self._author_year_parts(ref)
        title = sentence_case(ref.title)
        edition = _edition_label(ref.edition)
        parts.append(f"*{title}* ({edition})." if edition else f"*{title}*.")
        if ref.publisher:
            parts.append(_period(ref.publisher))
        parts.extend(self._link_parts(ref))
        return " ".join(parts)

    def _fmt_chapter(self, ref: ChapterReference) -> str:
        """Book chapter — APA 7 §10.3."""
        parts = self._author_year_parts(ref)
        parts.append(_period(sentence_case(ref.title)))
        editors = format_editors(ref.editors)
        parts.append(f"{ABBREVIATIONS['in']} {editors}" if editors else ABBREVIATIONS["in"])

        desc_parts: list[str] = []
        edition = _edition_label(ref.edition)
        if edition:
            desc_parts.append(edition)
        if ref.pages:
            desc_parts.append(f"{ABBREVIATIONS['pages']} {ref.pages}")
        book_title = f"*{sentence_case(ref.book_title)}*"
        if desc_parts:
            parts.append(f"{book_title} ({', '.join(desc_parts)}).")
        else:
            parts.append(f"{book_title}.")

        if ref.publisher:
            parts.append(_period(ref.publisher))
        parts.extend(self._link_parts(ref))
        return " ".join(parts)

    def _fmt_website(self, ref: WebsiteReference) -> str:
        """Webpage on a website — APA 7 §10.16.

        The site name is dropped when it repeats the corporate author.
        """
        parts = self._author_year_parts(ref, ref.publication_date)
        parts.append(f"*{sentence_case(ref.title)}*.")
        corporate = ref.corporate_author
        redundant = corporate is not None and corporate.full_name.strip() == ref.site_name.strip()
        if ref.site_name and not redundant:
            parts.append(_period(ref.site_name))
        parts.extend(self._link_parts(ref))
        return " ".join(parts)

    def _fmt_thesis(self, ref: ThesisReference) -> str:
        """Doctoral thesis / master's dissertation — APA 7 §10.6."""
        parts = self._author_year_parts(ref)
        work_type = ref.work_type or THESIS_LABELS[self.language_of(ref)][ref.ref_type]
        parts.append(f"*{sentence_case(ref.title)}*")
        if ref.institution:
            parts.append(f"[{work_type}, {ref.institution}].")
        else:
            parts.append(f"[{work_type}].")
        if ref.repository:
            parts.append(_period(ref.repository))
        parts.extend(self._link_parts(ref))
        return " ".join(parts)

    def _fmt_newspaper(self, ref: NewspaperReference) -> str:
        """Newspaper article — APA 7 §10.1 (periodical variant)."""
        parts = self._author_year_parts(ref, ref.publication_date)
        parts.append(_period(sentence_case(ref.title)))
        source_str = f"*{self._container_name(ref, ref.newspaper_name)}*"
        if ref.pages:
            source_str += f", {ref.pages}"
        parts.append(f"{source_str}.")
        parts.extend(self._link_parts(ref))
        return " ".join(parts)

    def _fmt_video(self, ref: VideoReference) -> str:
        """Online video — APA 7 §10.12. The channel stands in for a missing author."""
        parts: list[str] = []
        author_str = format_authors(ref.authors, ref.corporate_author)
        if author_str:
            parts.append(author_str)
        elif ref.channel:
            parts.append(_period(ref.channel))
        parts.append(f"({ref.publication_date or ref.year}).")
        parts.append(f"*{sentence_case(ref.title)}*")
        parts.append(f"[{DESCRIPTORS['video']}].")
        if ref.platform:
            parts.append(_period(ref.platform))
        parts.extend(self._link_parts(ref))
        return " ".join(parts)

    def _fmt_podcast(self, ref: PodcastReference) -> str:
        """Podcast episode — APA 7 §10.13."""
        parts: list[str] = []
        if ref.host:
            parts.append(f"{ref.host} ({ABBREVIATIONS['host']}).")
        parts.append(f"({ref.publication_date or ref.year}).")
        parts.append(sentence_case(ref.title))
        if ref.episode_number:
            parts.append(f"({ABBREVIATIONS['episode']} {ref.episode_number})")
        parts.append(f"[{DESCRIPTORS['podcast']}].")
        parts.append(f"{ABBREVIATIONS['in']} *{ref.podcast_name}*.")
        if ref.producer:
            parts.append(_period(ref.producer))
        parts.extend(self._link_parts(ref))
        return " ".join(parts)

    def _fmt_conference(self, ref: ConferenceReference) -> str:
        """Conference presentation — APA 7 §10.5."""
        if ref.start_date and ref.end_date:
            when = f"{ref.start_date}–{ref.end_date}"
        else:
            when = ref.start_date
        parts = self._author_year_parts(ref, when)
        title = f"*{sentence_case(ref.title)}*"
        if ref.presentation_type:
            parts.append(f"{title} [{ref.presentation_type}].")
        else:
            parts.append(f"{title}.")
        location_parts = [p for p in (ref.conference_name, ref.location) if p]
        if location_parts:
            parts.append(_period(", ".join(location_parts)))
        parts.extend(self._link_parts(ref))
        return " ".join(parts)

    def _fmt_report(self, ref: ReportReference) -> str:
        """Report / technical document — APA 7 §10.4.

        The institution is dropped when it is also the corporate author.
        """
        parts = self._author_year_parts(ref)
        title = f"*{sentence_case(ref.title)}*"
        if ref.report_number:
            label = REPORT_LABELS[self.language_of(ref)]
            parts.append(f"{title} ({label} {ref.report_number}).")
        else:
            parts.append(f"{title}.")
        corporate = ref.corporate_author
        if ref.institution and not (corporate and corporate.full_name.strip() == ref.institution.strip()):
            parts.append(_period(ref.institution))
        if ref.publisher:
            parts.append(_period(ref.publisher))
        parts.extend(self._link_parts(ref))
        return " ".join(parts)

    def _fmt_law(self, ref: LawReference) -> str:
        """Statute — APA 7 §11.5. Legal references have no author element."""
        head = f"{ref.title}, {ref.law_number}" if ref.law_number else ref.title
        if ref.section:
            head += f", {ABBREVIATIONS['section']} {ref.section}"
        parts = [head, f"({ref.year})."]
        parts.extend(self._link_parts(ref))
        return " ".join(parts)

    def _fmt_social_media(self, ref: SocialMediaReference) -> str:
        """Social media post — APA 7 §10.15."""
        parts: list[str] = []
        handle = ref.username.strip()
        if handle and not handle.startswith("@"):
            handle = f"@{handle}"
        element = author_element(ref.authors, ref.corporate_author)
        if element and handle:
            parts.append(f"{element} [{handle}].")
        elif element:
            parts.append(format_authors(ref.authors, ref.corporate_author))
        elif handle:
            parts.append(f"{handle}.")
        parts.append(f"({ref.year}).")
        words = ref.content.split()
        content = " ".join(words[:SOCIAL_MEDIA_MAX_WORDS])
        if ref.post_type:
            parts.append(f"{content} [{ref.post_type}].")
        else:
            parts.append(_period(content))
        if ref.platform:
            parts.append(_period(ref.platform))
        parts.extend(self._link_parts(ref))
        return " ".join(parts)
