"""
Helpers shared by the option accumulator, the decoder and the formatter.

Functions:
    quote_value: Wrap a token value in double quotes for the POSIX shell
    decode_arbitrary_data: Read ripgrep's ``{"text": ...}`` / ``{"bytes": ...}`` objects
    arbitrary_data_bytes: Raw bytes behind the same objects
    byte_span_to_char_span: Map a byte offset span onto a decoded line
    highlight_spans: Mark spans in a line of plain text
"""

from __future__ import annotations

import base64
import codecs
from typing import Any

# characters that keep their meaning inside double quotes in sh
_DQUOTE_SPECIAL = ("\\", '"', "$", "`")


def quote_value(value: Any) -> str:
    """
    Double-quote a value so the shell passes it to ripgrep unchanged.

    Backslash, double quote, dollar and backtick are escaped; everything else
    (globs, braces, spaces, pipes) is literal inside double quotes.

    Example:
        >>> quote_value("*.py")
        '"*.py"'
        >>> quote_value('say "hi"')
        '"say \\\\"hi\\\\""'
    """
    text = str(value)
    for ch in _DQUOTE_SPECIAL:
        text = text.replace(ch, "\\" + ch)
    return f'"{text}"'


def decode_arbitrary_data(obj: Any) -> str:
    """
    Decode ripgrep's "arbitrary data" object into text.

    ripgrep emits ``{"text": "..."}`` for valid UTF-8 and
    ``{"bytes": "<base64>"}`` otherwise. Undecodable bytes are replaced.
    """
    if not obj:
        return ""
    if isinstance(obj, str):
        return obj
    if "text" in obj:
        return obj["text"]
    if "bytes" in obj:
        return base64.b64decode(obj["bytes"]).decode("utf-8", errors="replace")
    return ""


def arbitrary_data_bytes(obj: Any) -> bytes:
    """Bytes ripgrep actually read for an arbitrary data object."""
    if not obj:
        return b""
    if isinstance(obj, str):
        return obj.encode("utf-8")
    if "text" in obj:
        return obj["text"].encode("utf-8")
    if "bytes" in obj:
        return base64.b64decode(obj["bytes"])
    return b""


def _decoded_len(raw: bytes) -> int:
    # an incomplete trailing sequence is held back instead of replaced
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    return len(decoder.decode(raw, final=False))


def byte_span_to_char_span(line: str | bytes, start: int, end: int) -> tuple[int, int]:
    """
    Convert a UTF-8 byte offset span within ``line`` to character offsets.

    Pass the original bytes for lines that arrived base64-encoded: offsets
    are then counted against the same ``errors="replace"`` decoding that
    produced the text, so invalid bytes occupy one U+FFFD each.

    Example:
        >>> byte_span_to_char_span(b"\\xffhello", 1, 6)
        (1, 6)
    """
    raw = line.encode("utf-8") if isinstance(line, str) else line
    return _decoded_len(raw[:start]), _decoded_len(raw[:end])


def highlight_spans(
    line: str, spans: list[tuple[int, int]], marker_left: str = "[", marker_right: str = "]"
) -> str:
    """Lightweight span highlighting for plain text output."""
    if not spans:
        return line
    # Ensure non-overlapping and sorted
    spans = sorted(spans, key=lambda x: x[0])
    out: list[str] = []
    last = 0
    for a, b in spans:
        a = max(0, min(len(line), a))
        b = max(0, min(len(line), b))
        if a < last:
            a = last
        if b < a:
            continue
        out.append(line[last:a])
        out.append(marker_left)
        out.append(line[a:b])
        out.append(marker_right)
        last = b
    out.append(line[last:])
    return "".join(out)
