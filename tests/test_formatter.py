"""
Tests for formatter module.

This module tests text, JSON and highlighted rendering of match records.
"""

import base64
import json

from rich.console import Console

from rgsearch.formatter import _char_spans, format_result, format_text, render_highlight_console, to_json_bytes
from rgsearch.types import MatchRecord, OutputFormat, SubMatch


class TestFormatter:
    """Test output formatting functionality."""

    def create_sample_records(self) -> list[MatchRecord]:
        return [
            MatchRecord(
                path="src/a.py",
                line_number=3,
                absolute_offset=20,
                lines="def hello():\n",
                submatches=[SubMatch(text="hello", start=4, end=9)],
            ),
            MatchRecord(
                path="src/a.py",
                line_number=9,
                absolute_offset=80,
                lines="    hello()\n",
                submatches=[SubMatch(text="hello", start=4, end=9)],
            ),
            MatchRecord(
                path="src/b.py",
                line_number=None,
                absolute_offset=0,
                lines="# héllo hello\n",
                submatches=[SubMatch(text="hello", start=9, end=14)],
            ),
        ]

    def test_to_json_bytes(self):
        data = json.loads(to_json_bytes(self.create_sample_records()))
        assert data["stats"] == {"files_matched": 2, "items": 3}
        first = data["items"][0]
        assert first["path"] == "src/a.py"
        assert first["line_number"] == 3
        assert first["line"] == "def hello():"
        assert first["submatches"] == [{"text": "hello", "start": 4, "end": 9}]

    def test_format_text_groups_by_path(self):
        out = format_text(self.create_sample_records())
        lines = out.splitlines()
        assert lines[0] == "src/a.py"
        assert lines[1] == "     3 | def hello():"
        assert lines[2] == "     9 |     hello()"
        assert "src/b.py" in lines
        assert lines[-1] == "# files_matched=2 items=3"

    def test_format_text_highlight_uses_char_offsets(self):
        out = format_text(self.create_sample_records(), highlight=True)
        assert "def [[hello]]():" in out
        # byte offset 9 lands after the two-byte "é"
        assert "# héllo [[hello]]" in out

    def test_format_result_dispatch(self):
        records = self.create_sample_records()
        assert json.loads(format_result(records, OutputFormat.JSON))["stats"]["items"] == 3
        assert "[[hello]]" in format_result(records, OutputFormat.HIGHLIGHT)
        assert "[[hello]]" not in format_result(records, OutputFormat.TEXT)

    def test_empty(self):
        assert format_text([]) == "# files_matched=0 items=0"
        assert json.loads(to_json_bytes([]))["items"] == []

    def test_render_highlight_console(self):
        console = Console(record=True, width=120, color_system=None)
        render_highlight_console(self.create_sample_records(), console=console)
        text = console.export_text()
        assert "src/a.py" in text
        assert "3 | def hello():" in text
        assert "files_matched=2 items=3" in text

    def test_highlight_after_invalid_utf8_byte(self):
        record = {
            "type": "match",
            "data": {
                "path": {"text": "bin.dat"},
                "lines": {"bytes": base64.b64encode(b"\xffhello\n").decode()},
                "line_number": 1,
                "absolute_offset": 0,
                "submatches": [{"match": {"text": "hello"}, "start": 1, "end": 6}],
            },
        }
        out = format_text([MatchRecord.from_event(record)], highlight=True)
        assert "�[[hello]]" in out

        line = MatchRecord.from_event(record)
        assert [line.line_text[a:b] for a, b in _char_spans(line)] == ["hello"]
