from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

import orjson
from rich.console import Console
from rich.text import Text

from .types import MatchRecord, OutputFormat
from .utils import byte_span_to_char_span, highlight_spans


def _char_spans(rec: MatchRecord) -> List[Tuple[int, int]]:
    raw = rec.line_bytes or rec.lines
    return [byte_span_to_char_span(raw, sm.start, sm.end) for sm in rec.submatches]


def _group_by_path(records: Sequence[MatchRecord]) -> Dict[str, List[MatchRecord]]:
    grouped: Dict[str, List[MatchRecord]] = {}
    for rec in records:
        grouped.setdefault(rec.path, []).append(rec)
    return grouped


def to_json_bytes(records: Sequence[MatchRecord]) -> bytes:
    payload = {
        "items": [
            {
                "path": rec.path,
                "line_number": rec.line_number,
                "absolute_offset": rec.absolute_offset,
                "line": rec.line_text,
                "submatches": [
                    {"text": sm.text, "start": sm.start, "end": sm.end} for sm in rec.submatches
                ],
            }
            for rec in records
        ],
        "stats": {
            "files_matched": len({rec.path for rec in records}),
            "items": len(records),
        },
    }
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2)


def format_text(records: Sequence[MatchRecord], highlight: bool = False) -> str:
    out: List[str] = []
    for path, recs in _group_by_path(records).items():
        out.append(path)
        for rec in recs:
            content = rec.line_text
            if highlight:
                content = highlight_spans(content, _char_spans(rec), marker_left="[[", marker_right="]]")
            ln = "" if rec.line_number is None else rec.line_number
            out.append(f"{ln:>6} | {content}")
        out.append("")
    out.append(f"# files_matched={len({rec.path for rec in records})} items={len(records)}")
    return "\n".join(out)


def render_highlight_console(records: Sequence[MatchRecord], console: Console | None = None) -> None:
    console = console or Console()
    for path, recs in _group_by_path(records).items():
        console.print(Text(path, style="bold magenta"))
        for rec in recs:
            line = Text(rec.line_text)
            for a, b in _char_spans(rec):
                line.stylize("bold red", a, b)
            ln = "" if rec.line_number is None else str(rec.line_number)
            console.print(Text(f"{ln:>6} | ", style="green") + line)
        console.print()
    console.print(f"[dim]files_matched={len({rec.path for rec in records})} items={len(records)}[/dim]")


def format_result(records: Sequence[MatchRecord], fmt: OutputFormat) -> str:
    if fmt == OutputFormat.JSON:
        return to_json_bytes(records).decode("utf-8")
    if fmt == OutputFormat.HIGHLIGHT:
        # For non-interactive environments, fall back to text with simple markers
        return format_text(records, highlight=True)
    return format_text(records, highlight=False)
