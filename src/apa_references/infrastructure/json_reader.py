"""JSON reader — implements ReferenceSourcePort using JSON files.

Accepts a single reference object, a list of them, or an object with a
``referencias``/``references`` list.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from apa_references.domain.models.reference import ReferenceBase, parse_reference
from apa_references.domain.ports.reference_source import ReferenceSourcePort

logger = logging.getLogger(__name__)


class JsonReferenceReader(ReferenceSourcePort):
    """Read reference records from JSON files."""

    def load(self, path: Path) -> list[ReferenceBase]:
        """Load and classify the references in the JSON file at *path*.

        Raises:
            FileNotFoundError: If *path* does not exist.
            ValueError: If the JSON layout is not recognised.
            UnsupportedReferenceTypeError: If a record has an unknown ``tipo``.
            pydantic.ValidationError: If a record does not match its variant.
        """
        if not path.exists():
            raise FileNotFoundError(f"Reference file not found: {path}")
        data = json.loads(path.read_text(encoding="utf-8"))

        if isinstance(data, dict):
            for key in ("referencias", "references"):
                if isinstance(data.get(key), list):
                    data = data[key]
                    break
            else:
                data = [data]
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise ValueError(f"Unexpected JSON format in {path}")

        references = [parse_reference(item) for item in data]
        logger.debug("Loaded %d reference(s) from %s", len(references), path)
        return references
