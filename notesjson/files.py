"""
File capability used by the exchange engine.

Reads hand back raw bytes and writes take raw bytes; anything the OS
refuses surfaces as FileAccessError with the offending path.
"""

from __future__ import annotations

import logging
import os
import uuid
from datetime import datetime
from pathlib import Path
from typing import Union

from .exceptions import FileAccessError
from .models import format_timestamp

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, Path]


def export_filename(now: datetime, prefix: str = "notes") -> str:
    """``notes-2025-09-13T10-15-30Z.json``; colons are not portable in filenames."""
    return f"{prefix}-{format_timestamp(now).replace(':', '-')}.json"


def read_bytes(path: PathLike) -> bytes:
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise FileAccessError(
            f"Unable to read {path}: {exc.strerror or exc}", path=str(path)
        ) from exc
    LOGGER.debug("notes.files.read path=%s bytes=%d", path, len(data))
    return data


def write_bytes_atomic(path: PathLike, data: bytes) -> Path:
    """
    Write via a temp file in the same directory, fsync, then replace() into
    place, so a crash never leaves a truncated export behind.
    """
    path = Path(path)
    tmp_path = path.parent / f".{path.name}.tmp-{uuid.uuid4().hex}"
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp_path, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except OSError as exc:
        raise FileAccessError(
            f"Unable to write {path}: {exc.strerror or exc}", path=str(path)
        ) from exc
    finally:
        if tmp_path.exists():
            tmp_path.unlink()
    LOGGER.debug("notes.files.write path=%s bytes=%d", path, len(data))
    return path
