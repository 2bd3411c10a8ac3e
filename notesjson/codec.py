"""
JSON codec for note exports.

The file is a bare array of ``{"title", "content", "timestamp"}`` objects with
no envelope and no version field. Both directions go through a pydantic
TypeAdapter so that encode and decode agree on one schema.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .exceptions import DecodeError
from .models import NoteDTO

LOGGER = logging.getLogger(__name__)

_ADAPTER: TypeAdapter[List[NoteDTO]] = TypeAdapter(List[NoteDTO])


def encode_notes(dtos: Iterable[NoteDTO], indent: Optional[int] = 2) -> bytes:
    """Serialize DTOs to UTF-8 JSON. ``indent=None`` gives compact output."""
    items = list(dtos)
    data = _ADAPTER.dump_json(items, indent=indent)
    LOGGER.debug("notes.codec.encode count=%d bytes=%d", len(items), len(data))
    return data


def decode_notes(data: Union[bytes, bytearray, str]) -> List[NoteDTO]:
    """Parse an export file. Raises DecodeError on bad JSON, shape or timestamps."""
    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"Notes file is not UTF-8 text: {exc}", errors=[str(exc)]) from exc
    try:
        dtos = _ADAPTER.validate_json(data)
    except PydanticValidationError as exc:
        errors = exc.errors(include_url=False)
        first = errors[0] if errors else {}
        loc = ".".join(str(p) for p in first.get("loc", ())) or "<root>"
        LOGGER.warning("notes.codec.decode_failed errors=%d at=%s", len(errors), loc)
        raise DecodeError(
            f"Invalid notes file at {loc}: {first.get('msg', 'invalid data')}",
            errors=errors,
        ) from exc
    LOGGER.debug("notes.codec.decode count=%d", len(dtos))
    return dtos
