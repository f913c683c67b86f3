from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .utils import arbitrary_data_bytes, decode_arbitrary_data


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    HIGHLIGHT = "highlight"


class EventType(str, Enum):
    """Discriminant of one ripgrep JSON Lines record."""

    BEGIN = "begin"
    END = "end"
    MATCH = "match"
    CONTEXT = "context"
    SUMMARY = "summary"


@dataclass(frozen=True, slots=True)
class SearchSpec:
    pattern: str
    root_path: str
    executable_path: str = "rg"


@dataclass(slots=True)
class MatchEvent:
    type: str
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "MatchEvent":
        return cls(type=record.get("type", ""), data=record.get("data") or {})

    @property
    def is_match(self) -> bool:
        return self.type == EventType.MATCH.value


@dataclass(slots=True)
class SubMatch:
    # start/end are byte offsets into MatchRecord.lines
    text: str
    start: int
    end: int


@dataclass(slots=True)
class MatchRecord:
    path: str
    line_number: Optional[int]
    absolute_offset: int
    lines: str
    submatches: List[SubMatch] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)
    # undecoded bytes of `lines`; submatch offsets index into these
    line_bytes: bytes = field(default=b"", repr=False)

    @classmethod
    def from_event(cls, record: Dict[str, Any]) -> "MatchRecord":
        """Build a record from one parsed ``{"type": "match", "data": ...}`` line."""
        data = record.get("data") or {}
        submatches = [
            SubMatch(
                text=decode_arbitrary_data(sm.get("match")),
                start=int(sm.get("start", 0)),
                end=int(sm.get("end", 0)),
            )
            for sm in data.get("submatches") or []
        ]
        return cls(
            path=decode_arbitrary_data(data.get("path")),
            line_number=data.get("line_number"),
            absolute_offset=int(data.get("absolute_offset") or 0),
            lines=decode_arbitrary_data(data.get("lines")),
            submatches=submatches,
            raw=record,
            line_bytes=arbitrary_data_bytes(data.get("lines")),
        )

    @property
    def line_text(self) -> str:
        """Matched line without its trailing line terminator."""
        return self.lines.rstrip("\r\n")
