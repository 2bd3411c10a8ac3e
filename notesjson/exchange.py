"""
Export and import workflows.

Export:  store.list() -> to_dto -> encode_notes -> bytes
Import:  bytes -> decode_notes -> (delete_all if REPLACE) -> insert loop

Merge imports skip a DTO whose ``title|timestamp`` key matches a note that
was in the store before the import started. The key set is built once and is
not updated during the loop, so duplicates inside one file are all inserted.

Imports are not transactional. A replace import clears the store first; if an
insert then fails, the notes inserted so far stay committed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Set, Union

from .codec import decode_notes, encode_notes
from .config import NotesConfig
from .exceptions import NoNotesError
from .files import export_filename, read_bytes, write_bytes_atomic
from .models import dedup_key, from_dto, to_dtos
from .store import NoteStore, utc_now

LOGGER = logging.getLogger(__name__)


class ImportMode(str, Enum):
    REPLACE = "replace"
    MERGE = "merge"


@dataclass(frozen=True)
class ImportSummary:
    imported_count: int
    total_count: int
    mode: ImportMode = ImportMode.MERGE

    @property
    def skipped_count(self) -> int:
        return self.total_count - self.imported_count


class NoteExchange:
    """Moves notes between a store and the portable JSON format."""

    def __init__(self, store: NoteStore, config: Optional[NotesConfig] = None):
        self.store = store
        self.config = config or NotesConfig()

    # ------------------------------------------------------------------ export

    def export(self) -> bytes:
        """Encode every note, newest first. Raises NoNotesError on an empty store."""
        notes = self.store.list()
        if not notes:
            raise NoNotesError("No notes available to export")
        data = encode_notes(to_dtos(notes), indent=self.config.indent)
        LOGGER.info("notes.export count=%d bytes=%d", len(notes), len(data))
        return data

    def export_to_directory(self, directory: Optional[Union[str, Path]] = None) -> Path:
        """Export into ``directory`` (default: the configured export dir) and return the file path."""
        data = self.export()
        target = Path(directory) if directory else self.config.exports
        path = target / export_filename(utc_now(), prefix=self.config.filename_prefix)
        write_bytes_atomic(path, data)
        LOGGER.info("notes.export.file path=%s", path)
        return path

    # ------------------------------------------------------------------ import

    def import_notes(
        self, data: Union[bytes, str], mode: ImportMode = ImportMode.MERGE
    ) -> ImportSummary:
        mode = ImportMode(mode)
        dtos = decode_notes(data)
        if not dtos:
            raise NoNotesError("No notes found in the selected file")

        existing: Set[str] = set()
        if mode is ImportMode.REPLACE:
            self.store.delete_all()
        else:
            existing = {dedup_key(n.title, n.timestamp) for n in self.store.list()}

        imported = 0
        for dto in dtos:
            if mode is ImportMode.MERGE and dedup_key(dto.title, dto.timestamp) in existing:
                LOGGER.debug("notes.import.skip title=%r", dto.title)
                continue
            new = from_dto(dto)
            self.store.create(new.title, new.content, timestamp=new.timestamp)
            imported += 1

        summary = ImportSummary(imported_count=imported, total_count=len(dtos), mode=mode)
        LOGGER.info(
            "notes.import mode=%s imported=%d total=%d",
            mode.value,
            summary.imported_count,
            summary.total_count,
        )
        return summary

    def import_file(
        self, path: Union[str, Path], mode: ImportMode = ImportMode.MERGE
    ) -> ImportSummary:
        return self.import_notes(read_bytes(path), mode=mode)
