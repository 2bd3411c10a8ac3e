"""Tests for the file capability and configuration."""

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from notesjson.config import DEFAULT_DATA_DIR, NotesConfig
from notesjson.exceptions import FileAccessError
from notesjson.files import export_filename, read_bytes, write_bytes_atomic
from notesjson.models._base import _env_extra_mode

from .helpers import T0


class FilesTest(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.root = Path(self.tmp.name)

    def test_export_filename(self):
        self.assertEqual(export_filename(T0), "notes-2025-09-13T10-15-30Z.json")
        self.assertEqual(export_filename(T0, prefix="backup"), "backup-2025-09-13T10-15-30Z.json")

    def test_write_creates_parents_and_leaves_no_temp_files(self):
        target = self.root / "a" / "b" / "out.json"
        self.assertEqual(write_bytes_atomic(target, b"[]"), target)
        self.assertEqual(read_bytes(target), b"[]")
        self.assertEqual(os.listdir(target.parent), ["out.json"])

    def test_write_overwrites_existing_file(self):
        target = self.root / "out.json"
        write_bytes_atomic(target, b"first")
        write_bytes_atomic(target, b"second")
        self.assertEqual(target.read_bytes(), b"second")

    def test_read_missing_file(self):
        with self.assertRaises(FileAccessError) as ctx:
            read_bytes(self.root / "nope.json")
        self.assertEqual(ctx.exception.path, str(self.root / "nope.json"))

    def test_read_directory_is_an_access_error(self):
        with self.assertRaises(FileAccessError):
            read_bytes(self.root)

    def test_write_into_a_file_path_is_an_access_error(self):
        blocker = self.root / "blocker"
        blocker.write_bytes(b"")
        with self.assertRaises(FileAccessError):
            write_bytes_atomic(blocker / "out.json", b"[]")


class ConfigTest(unittest.TestCase):
    def test_defaults(self):
        config = NotesConfig()
        self.assertEqual(config.data_dir, DEFAULT_DATA_DIR)
        self.assertEqual(config.database, DEFAULT_DATA_DIR / "notes.db")
        self.assertEqual(config.exports, DEFAULT_DATA_DIR / "exports")
        self.assertEqual(config.indent, 2)

    def test_from_env(self):
        env = {
            "NOTESJSON_HOME": "/tmp/nj-home",
            "NOTESJSON_EXPORT_DIR": "/tmp/nj-out",
            "NOTESJSON_INDENT": "none",
        }
        with patch.dict(os.environ, env, clear=False):
            os.environ.pop("NOTESJSON_DB", None)
            config = NotesConfig.from_env()
        self.assertEqual(config.database, Path("/tmp/nj-home/notes.db"))
        self.assertEqual(config.exports, Path("/tmp/nj-out"))
        self.assertIsNone(config.indent)

    def test_from_env_db_and_bad_indent(self):
        env = {"NOTESJSON_DB": "/tmp/custom.db", "NOTESJSON_INDENT": "wide"}
        with patch.dict(os.environ, env, clear=False):
            config = NotesConfig.from_env()
        self.assertEqual(config.database, Path("/tmp/custom.db"))
        self.assertEqual(config.indent, 2)


class ExtraModeTest(unittest.TestCase):
    def test_extra_mode_from_env(self):
        cases = {
            "forbid": "forbid",
            "ALLOW": "allow",
            "strict": "forbid",
            "off": "ignore",
            "garbage": "ignore",
        }
        for raw, expected in cases.items():
            with self.subTest(raw=raw):
                with patch.dict(os.environ, {"NOTESJSON_EXTRA": raw}):
                    self.assertEqual(_env_extra_mode(), expected)


if __name__ == "__main__":
    unittest.main()
