"""Tests for the note entity, DTO mapping and dedup keys."""

import unittest
from datetime import datetime, timedelta, timezone

from pydantic import ValidationError as PydanticValidationError

from notesjson.models import (
    NewNote,
    Note,
    NoteDTO,
    clean_input,
    dedup_key,
    format_timestamp,
    from_dto,
    parse_timestamp,
    to_dto,
)

from .helpers import T0


class NoteTest(unittest.TestCase):
    def test_display_title_falls_back_to_untitled(self):
        note = Note(id="n1", title="", content=None, timestamp=T0)
        self.assertEqual(note.display_title, "Untitled")
        self.assertFalse(note.has_content)

    def test_has_content(self):
        note = Note(id="n1", title="A", content="body", timestamp=T0)
        self.assertEqual(note.display_title, "A")
        self.assertTrue(note.has_content)

    def test_formatted_timestamp_is_human_readable(self):
        note = Note(id="n1", title="A", content=None, timestamp=T0)
        self.assertIn("2025", note.formatted_timestamp)

    def test_formatted_timestamp_at_the_edge_of_the_calendar(self):
        for ts in (
            datetime(1, 1, 1, tzinfo=timezone.utc),
            datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc),
        ):
            with self.subTest(timestamp=ts):
                note = Note(id="1", title="A", content=None, timestamp=ts)
                self.assertIsInstance(note.formatted_timestamp, str)

    def test_clean_input_trims_and_drops_empty_content(self):
        self.assertEqual(clean_input("  Title \n", "   "), ("Title", None))
        self.assertEqual(clean_input("T", " body "), ("T", "body"))
        self.assertEqual(clean_input("T", None), ("T", None))


class DtoMappingTest(unittest.TestCase):
    def test_to_dto_drops_id_and_fills_missing_content(self):
        note = Note(id="abc", title="Shopping List", content=None, timestamp=T0)
        dto = to_dto(note)
        self.assertEqual(dto.title, "Shopping List")
        self.assertEqual(dto.content, "")
        self.assertEqual(dto.timestamp, T0)
        self.assertNotIn("id", dto.model_dump())

    def test_to_dto_serializes_iso_timestamp(self):
        note = Note(id="abc", title="A", content="x", timestamp=T0)
        self.assertEqual(
            to_dto(note).model_dump(),
            {"title": "A", "content": "x", "timestamp": "2025-09-13T10:15:30Z"},
        )

    def test_from_dto_is_a_new_note_request(self):
        dto = NoteDTO(title="A", content="x", timestamp="2025-09-13T10:15:30Z")
        new = from_dto(dto)
        self.assertIsInstance(new, NewNote)
        self.assertEqual(new, NewNote(title="A", content="x", timestamp=T0))

    def test_dto_is_immutable_and_hashable(self):
        dto = NoteDTO(title="A", content="x", timestamp=T0)
        with self.assertRaises(PydanticValidationError):
            dto.title = "B"
        self.assertEqual(len({dto, NoteDTO(title="A", content="x", timestamp=T0)}), 1)


class TimestampTest(unittest.TestCase):
    def test_format_uses_utc_designator_and_whole_seconds(self):
        dt = datetime(2025, 9, 13, 12, 15, 30, 999999, tzinfo=timezone(timedelta(hours=2)))
        self.assertEqual(format_timestamp(dt), "2025-09-13T10:15:30Z")

    def test_parse_accepts_offsets_and_fractional_seconds(self):
        self.assertEqual(parse_timestamp("2025-09-13T10:15:30Z"), T0)
        self.assertEqual(parse_timestamp("2025-09-13T12:15:30+02:00"), T0)
        self.assertEqual(parse_timestamp("2025-09-13T10:15:30.250Z"), T0)
        self.assertEqual(parse_timestamp("2025-09-13T10:15:30.5Z"), T0)
        self.assertEqual(parse_timestamp("2025-09-13T10:15:30.1234567+00:00"), T0)

    def test_format_zero_pads_years_below_1000(self):
        dt = datetime(999, 1, 1, tzinfo=timezone.utc)
        self.assertEqual(format_timestamp(dt), "0999-01-01T00:00:00Z")
        self.assertEqual(parse_timestamp(format_timestamp(dt)), dt)

    def test_parse_treats_naive_as_utc(self):
        self.assertEqual(parse_timestamp("2025-09-13T10:15:30"), T0)

    def test_parse_rejects_non_timestamps(self):
        bad_values = (
            "yesterday",
            "2025-09-13",
            "2025-13-40T10:00:00Z",
            "0001-01-01T00:00:00+01:00",
            "9999-12-31T23:59:59-01:00",
            1757758530,
            None,
        )
        for bad in bad_values:
            with self.subTest(value=bad):
                with self.assertRaises(ValueError):
                    parse_timestamp(bad)


class DedupKeyTest(unittest.TestCase):
    def test_key_is_title_pipe_iso_timestamp(self):
        self.assertEqual(dedup_key("A", T0), "A|2025-09-13T10:15:30Z")

    def test_key_ignores_sub_second_and_timezone_differences(self):
        shifted = (T0 + timedelta(microseconds=500)).astimezone(timezone(timedelta(hours=-5)))
        self.assertEqual(dedup_key("A", shifted), dedup_key("A", T0))

    def test_key_distinguishes_titles(self):
        self.assertNotEqual(dedup_key("A", T0), dedup_key("a", T0))


if __name__ == "__main__":
    unittest.main()
