"""APA 7 reference formatting engine.

Formats structured reference records (articles, books, chapters,
websites, theses...) into APA 7th-edition reference-list entries and
narrative/parenthetical in-text citations.
"""

from apa_references.config.models import EtAlConfig, FormatterConfig
from apa_references.domain.errors import (
    APAFormatterError,
    APAFormattingError,
    ConfigurationError,
    ErrorKind,
    MissingRequiredFieldError,
    UnsupportedReferenceTypeError,
)
from apa_references.domain.models import (
    Author,
    CorporateAuthor,
    FormattedReference,
    ReferenceMetadata,
    ReferenceType,
    ValidationResult,
    parse_reference,
)
from apa_references.formatter import APAFormatter

__version__ = "1.0.0"

__all__ = [
    "APAFormatter",
    "APAFormatterError",
    "APAFormattingError",
    "Author",
    "ConfigurationError",
    "CorporateAuthor",
    "ErrorKind",
    "EtAlConfig",
    "FormattedReference",
    "FormatterConfig",
    "MissingRequiredFieldError",
    "ReferenceMetadata",
    "ReferenceType",
    "UnsupportedReferenceTypeError",
    "ValidationResult",
    "parse_reference",
]
