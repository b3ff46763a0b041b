"""Domain models — public API.

Provides convenient imports for the most commonly used domain entities.
"""

from apa_references.domain.models.enums import (
    CitationType,
    DateFormat,
    Language,
    ReferenceType,
)
from apa_references.domain.models.reference import (
    REFERENCE_CLASSES,
    ArticleReference,
    Author,
    BookReference,
    ChapterReference,
    ConferenceReference,
    CorporateAuthor,
    LawReference,
    NewspaperReference,
    PodcastReference,
    Reference,
    ReferenceBase,
    ReportReference,
    SocialMediaReference,
    ThesisReference,
    VideoReference,
    WebsiteReference,
    parse_reference,
)
from apa_references.domain.models.results import (
    FormattedReference,
    ReferenceMetadata,
    ValidationResult,
)

__all__ = [
    # Enums
    "CitationType",
    "DateFormat",
    "Language",
    "ReferenceType",
    # Authors
    "Author",
    "CorporateAuthor",
    # References
    "REFERENCE_CLASSES",
    "ArticleReference",
    "BookReference",
    "ChapterReference",
    "ConferenceReference",
    "LawReference",
    "NewspaperReference",
    "PodcastReference",
    "Reference",
    "ReferenceBase",
    "ReportReference",
    "SocialMediaReference",
    "ThesisReference",
    "VideoReference",
    "WebsiteReference",
    "parse_reference",
    # Results
    "FormattedReference",
    "ReferenceMetadata",
    "ValidationResult",
]
