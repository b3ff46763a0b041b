"""Reference-related domain models for APA 7.

Contains Author, CorporateAuthor and the twelve reference variants.
These are Pydantic models (pragmatic choice for input validation).

Field names are English; the camelCase Portuguese keys used by JSON
input (``tipo``, ``autores``, ``sobrenome``...) are accepted as aliases.
Variant-specific fields default to empty values so that lenient
formatting can still render incomplete records. Requiredness is checked
by :mod:`apa_references.domain.formatting.validation`, not here.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from apa_references.domain.errors import UnsupportedReferenceTypeError
from apa_references.domain.models.enums import Language, ReferenceType
from apa_references.domain.rules.messages import message


class _RecordModel(BaseModel):
    """Immutable input record that accepts field names and aliases."""

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        coerce_numbers_to_str=True,
    )


# ---------------------------------------------------------------------------
# Authors
# ---------------------------------------------------------------------------


class Author(_RecordModel):
    """Individual author (or editor) of a work."""

    first_name: str = Field("", alias="nome")
    last_name: str = Field(..., alias="sobrenome")
    middle_initial: Optional[str] = Field(None, alias="inicialMeio")

    @field_validator("middle_initial", mode="before")
    @classmethod
    def _strip_initial(cls, v: Any) -> Any:
        """Accept ``"M."`` as well as ``"M"``."""
        if isinstance(v, str):
            v = v.strip().rstrip(".")
            return v or None
        return v

    @property
    def initials(self) -> str:
        """Return ``'J.'`` or ``'J. M.'``."""
        initial = f"{self.first_name.strip()[:1]}."
        if self.middle_initial:
            return f"{initial} {self.middle_initial}."
        return initial


class CorporateAuthor(_RecordModel):
    """Corporate/organizational author (APA 7 §9.11).

    Group authors are NOT inverted. E.g.:
    - World Health Organization. (2020).
    - Instituto Brasileiro de Geografia e Estatística. (2022).
    """

    full_name: str = Field(..., alias="nomeCompleto")
    acronym: Optional[str] = Field(None, alias="sigla")


# ---------------------------------------------------------------------------
# Reference variants
# ---------------------------------------------------------------------------


class ReferenceBase(_RecordModel):
    """Fields shared by every reference variant."""

    ref_type: str = Field(..., alias="tipo")
    authors: list[Author] = Field(default_factory=list, alias="autores")
    corporate_author: Optional[CorporateAuthor] = Field(None, alias="autorCorporativo")
    year: str = Field("", alias="ano", description="Year or 's.d.'/'n.d.'")
    title: str = Field("", alias="titulo")
    doi: Optional[str] = None
    url: Optional[str] = None
    access_date: Optional[date] = Field(None, alias="dataAcesso")
    language: Optional[Language] = Field(None, alias="idioma")

    @field_validator("doi", mode="before")
    @classmethod
    def _strip_doi_prefix(cls, v: Any) -> Any:
        """Keep the raw DOI value, dropping a resolver prefix if pasted."""
        if isinstance(v, str):
            v = v.strip()
            for prefix in ("https://doi.org/", "http://doi.org/", "https://dx.doi.org/", "doi:"):
                if v.lower().startswith(prefix):
                    v = v[len(prefix) :]
                    break
            return v or None
        return v

    @property
    def kind(self) -> ReferenceType:
        """The kind tag as a :class:`ReferenceType`."""
        return ReferenceType(self.ref_type)


class ArticleReference(ReferenceBase):
    """Journal article — APA 7 §10.1."""

    ref_type: Literal["artigo"] = Field("artigo", alias="tipo")
    periodical: str = Field("", alias="periodico")
    volume: str = ""
    issue: Optional[str] = Field(None, alias="numero")
    pages: str = Field("", alias="paginas")
    issn: Optional[str] = None


class BookReference(ReferenceBase):
    """Authored book — APA 7 §10.2."""

    ref_type: Literal["livro"] = Field("livro", alias="tipo")
    publisher: str = Field("", alias="editora")
    edition: Optional[str] = Field(None, alias="edicao")
    place: Optional[str] = Field(None, alias="local")
    isbn: Optional[str] = None


class ChapterReference(ReferenceBase):
    """Chapter in an edited book — APA 7 §10.3."""

    ref_type: Literal["capitulo"] = Field("capitulo", alias="tipo")
    editors: list[Author] = Field(default_factory=list, alias="editores")
    book_title: str = Field("", alias="tituloLivro")
    publisher: str = Field("", alias="editora")
    pages: str = Field("", alias="paginas")
    edition: Optional[str] = Field(None, alias="edicao")
    isbn: Optional[str] = None


class WebsiteReference(ReferenceBase):
    """Webpage on a website — APA 7 §10.16."""

    ref_type: Literal["website"] = Field("website", alias="tipo")
    site_name: str = Field("", alias="nomeSite")
    publication_date: Optional[str] = Field(None, alias="dataPublicacao")


class ThesisReference(ReferenceBase):
    """Doctoral thesis or master's dissertation — APA 7 §10.6."""

    ref_type: Literal["tese", "dissertacao"] = Field("tese", alias="tipo")
    institution: str = Field("", alias="instituicao")
    work_type: Optional[str] = Field(None, alias="tipoTrabalho")
    repository: Optional[str] = Field(None, alias="repositorio")


class NewspaperReference(ReferenceBase):
    """Newspaper article — APA 7 §10.1 (periodical variant)."""

    ref_type: Literal["jornal"] = Field("jornal", alias="tipo")
    newspaper_name: str = Field("", alias="nomeJornal")
    publication_date: str = Field("", alias="dataPublicacao", description="YYYY, Mês DD")
    pages: Optional[str] = Field(None, alias="paginas")


class VideoReference(ReferenceBase):
    """Online video — APA 7 §10.12."""

    ref_type: Literal["video"] = Field("video", alias="tipo")
    platform: str = Field("", alias="plataforma")
    channel: Optional[str] = Field(None, alias="canal")
    duration: Optional[str] = Field(None, alias="duracao")
    publication_date: str = Field("", alias="dataPublicacao")


class PodcastReference(ReferenceBase):
    """Podcast episode — APA 7 §10.13."""

    ref_type: Literal["podcast"] = Field("podcast", alias="tipo")
    host: str = Field("", alias="apresentador")
    episode_number: Optional[str] = Field(None, alias="numeroEpisodio")
    podcast_name: str = Field("", alias="nomePodcast")
    producer: Optional[str] = Field(None, alias="produtora")
    publication_date: str = Field("", alias="dataPublicacao")


class ConferenceReference(ReferenceBase):
    """Conference presentation — APA 7 §10.5."""

    ref_type: Literal["conferencia"] = Field("conferencia", alias="tipo")
    conference_name: str = Field("", alias="nomeConferencia")
    location: str = Field("", alias="local", description="City, Country")
    start_date: str = Field("", alias="dataInicio")
    end_date: Optional[str] = Field(None, alias="dataFim")
    presentation_type: str = Field("", alias="tipoApresentacao")


class ReportReference(ReferenceBase):
    """Report / technical document — APA 7 §10.4."""

    ref_type: Literal["relatorio"] = Field("relatorio", alias="tipo")
    report_number: Optional[str] = Field(None, alias="numeroRelatorio")
    institution: str = Field("", alias="instituicao")
    publisher: Optional[str] = Field(None, alias="editora")


class LawReference(ReferenceBase):
    """Statute or law — APA 7 §11."""

    ref_type: Literal["lei"] = Field("lei", alias="tipo")
    law_number: str = Field("", alias="numeroLei")
    section: Optional[str] = Field(None, alias="secao")


class SocialMediaReference(ReferenceBase):
    """Social media post — APA 7 §10.15."""

    ref_type: Literal["midia-social"] = Field("midia-social", alias="tipo")
    platform: str = Field("", alias="plataforma")
    username: str = ""
    content: str = Field("", alias="conteudo", description="First 20 words of the post")
    post_type: str = Field("", alias="tipoPost")


Reference = Union[
    ArticleReference,
    BookReference,
    ChapterReference,
    WebsiteReference,
    ThesisReference,
    NewspaperReference,
    VideoReference,
    PodcastReference,
    ConferenceReference,
    ReportReference,
    LawReference,
    SocialMediaReference,
]

REFERENCE_CLASSES: dict[ReferenceType, type[ReferenceBase]] = {
    ReferenceType.ARTICLE: ArticleReference,
    ReferenceType.BOOK: BookReference,
    ReferenceType.CHAPTER: ChapterReference,
    ReferenceType.WEBSITE: WebsiteReference,
    ReferenceType.THESIS: ThesisReference,
    ReferenceType.DISSERTATION: ThesisReference,
    ReferenceType.NEWSPAPER: NewspaperReference,
    ReferenceType.VIDEO: VideoReference,
    ReferenceType.PODCAST: PodcastReference,
    ReferenceType.CONFERENCE: ConferenceReference,
    ReferenceType.REPORT: ReportReference,
    ReferenceType.LAW: LawReference,
    ReferenceType.SOCIAL_MEDIA: SocialMediaReference,
}


def parse_reference(data: Mapping[str, Any]) -> ReferenceBase:
    """Classify a raw mapping by its kind tag and validate it.

    Raises:
        UnsupportedReferenceTypeError: If ``tipo`` is missing or unknown.
        pydantic.ValidationError: If the record does not match its variant.
    """
    tag = data.get("tipo", data.get("ref_type"))
    try:
        kind = ReferenceType(tag)
    except ValueError:
        raise UnsupportedReferenceTypeError(
            "tipo", message("unsupported_type", value=tag)
        ) from None
    return REFERENCE_CLASSES[kind].model_validate(dict(data))
