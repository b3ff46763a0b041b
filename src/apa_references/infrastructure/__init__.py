"""Infrastructure adapters.

Concrete implementations of domain ports.
"""

from apa_references.infrastructure.json_reader import JsonReferenceReader

__all__ = ["JsonReferenceReader"]
