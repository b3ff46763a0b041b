"""Port: Reference source — read reference records for formatting."""

from abc import ABC, abstractmethod
from pathlib import Path

from apa_references.domain.models.reference import ReferenceBase


class ReferenceSourcePort(ABC):
    """Contract for loading reference records from storage."""

    @abstractmethod
    def load(self, path: Path) -> list[ReferenceBase]:
        """Load the reference records stored at the given path."""
        ...
