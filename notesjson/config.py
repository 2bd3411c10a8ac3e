"""
Runtime configuration for the notes store and exports.

All fields have defaults; ``from_env`` lets the CLI (or a test) redirect the
database and export directory without touching code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_DATA_DIR = Path(os.path.expanduser("~/.config/notesjson"))


@dataclass(frozen=True)
class NotesConfig:
    data_dir: Path = DEFAULT_DATA_DIR

    # None means "inside data_dir"
    db_path: Optional[Path] = None
    export_dir: Optional[Path] = None

    # JSON indentation for exports; None writes compact JSON
    indent: Optional[int] = 2

    filename_prefix: str = "notes"

    @property
    def database(self) -> Path:
        return self.db_path or self.data_dir / "notes.db"

    @property
    def exports(self) -> Path:
        return self.export_dir or self.data_dir / "exports"

    @classmethod
    def from_env(cls) -> "NotesConfig":
        """
        NOTESJSON_HOME        data directory (default ~/.config/notesjson)
        NOTESJSON_DB          database file
        NOTESJSON_EXPORT_DIR  directory for export files
        NOTESJSON_INDENT      JSON indent; 0 or "none" for compact output
        """
        home = os.getenv("NOTESJSON_HOME")
        db = os.getenv("NOTESJSON_DB")
        export_dir = os.getenv("NOTESJSON_EXPORT_DIR")
        return cls(
            data_dir=Path(os.path.expanduser(home)) if home else DEFAULT_DATA_DIR,
            db_path=Path(os.path.expanduser(db)) if db else None,
            export_dir=Path(os.path.expanduser(export_dir)) if export_dir else None,
            indent=_parse_indent(os.getenv("NOTESJSON_INDENT"), default=2),
        )


def _parse_indent(raw: Optional[str], default: Optional[int]) -> Optional[int]:
    if raw is None or not raw.strip():
        return default
    raw = raw.strip().lower()
    if raw in {"0", "none", "compact"}:
        return None
    try:
        return max(int(raw), 0) or None
    except ValueError:
        return default
