"""Descriptor Loader — reads descriptors from a JSON file or the built-in catalogue.

Invariants:
    - Returned lists always pass validate_descriptors()
    - File/parse failures → DescriptorSourceError; contract violations → InvalidDescriptorError
    - File order is preserved (it is the card order)

Design Decisions:
    - Whole-file JSON array, no streaming: catalogues are a handful of entries
    - Schema failures report the offending position so the file can be fixed
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from app.core.descriptor import Descriptor
from app.core.descriptor_catalog import DATA_STRUCTURE_DATA, validate_descriptors
from app.core.errors import (
    DescriptorSourceError, ErrorContext, InvalidDescriptorError,
)
from app.schemas.descriptor import DescriptorRecord

logger = logging.getLogger(__name__)


def load_descriptors(path: str | Path) -> list[Descriptor]:
    """Parse and validate a JSON array of descriptor objects."""
    source = str(path)
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise DescriptorSourceError(e.strerror or str(e), source) from e
    except json.JSONDecodeError as e:
        raise DescriptorSourceError(f"invalid JSON ({e.msg})", source) from e

    if not isinstance(raw, list):
        raise DescriptorSourceError("expected a JSON array of descriptors", source)

    descriptors = [_parse_record(item, position) for position, item in enumerate(raw)]
    validate_descriptors(descriptors)
    logger.info(
        f"Loaded {len(descriptors)} descriptors from {source}",
        extra={"source": source, "descriptor_count": len(descriptors)},
    )
    return descriptors


def load_configured_descriptors(path: str | None) -> list[Descriptor]:
    """Descriptors from path when set, else the built-in catalogue."""
    if path is None:
        descriptors = list(DATA_STRUCTURE_DATA)
        validate_descriptors(descriptors)
        return descriptors
    return load_descriptors(path)


def _parse_record(item: object, position: int) -> Descriptor:
    try:
        record = DescriptorRecord.model_validate(item)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"]) or "descriptor"
        raise InvalidDescriptorError(
            f"Descriptor at position {position} is invalid: {field}: {first['msg']}",
            field,
            ErrorContext(debug_info={"position": position}),
        ) from e
    return record.to_descriptor()
