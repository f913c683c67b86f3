from __future__ import annotations

import base64

import pytest

from rgsearch.utils import (
    arbitrary_data_bytes,
    byte_span_to_char_span,
    decode_arbitrary_data,
    highlight_spans,
    quote_value,
)


class TestQuoteValue:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("*.py", '"*.py"'),
            ("he[l]{2}o", '"he[l]{2}o"'),
            ("a b|c;d", '"a b|c;d"'),
            ("", '""'),
            (42, '"42"'),
        ],
    )
    def test_literal_inside_double_quotes(self, value, expected: str) -> None:
        assert quote_value(value) == expected

    def test_escapes_shell_specials(self) -> None:
        assert quote_value('say "hi"') == '"say \\"hi\\""'
        assert quote_value("$HOME") == '"\\$HOME"'
        assert quote_value("`id`") == '"\\`id\\`"'
        assert quote_value("\\w+") == '"\\\\w+"'


class TestDecodeArbitraryData:
    def test_text(self) -> None:
        assert decode_arbitrary_data({"text": "abc"}) == "abc"

    def test_bytes(self) -> None:
        payload = base64.b64encode("naïve".encode("utf-8")).decode()
        assert decode_arbitrary_data({"bytes": payload}) == "naïve"

    @pytest.mark.parametrize("obj", [None, {}, {"other": 1}])
    def test_missing(self, obj) -> None:
        assert decode_arbitrary_data(obj) == ""

    def test_raw_bytes(self) -> None:
        payload = base64.b64encode(b"\xffhello").decode()
        assert arbitrary_data_bytes({"bytes": payload}) == b"\xffhello"
        assert arbitrary_data_bytes({"text": "naïve"}) == "naïve".encode("utf-8")
        assert arbitrary_data_bytes(None) == b""


class TestByteSpans:
    def test_ascii(self) -> None:
        assert byte_span_to_char_span("well hello", 5, 10) == (5, 10)

    def test_multibyte_prefix(self) -> None:
        line = "héllo wörld"
        # "wörld" starts at byte 7 and ends at byte 13
        assert byte_span_to_char_span(line, 7, 13) == (6, 11)

    def test_invalid_byte_counts_as_one_replacement(self) -> None:
        # decodes to "\ufffdhello"; "hello" is bytes 1..6
        assert byte_span_to_char_span(b"\xffhello", 1, 6) == (1, 6)

    def test_span_ending_inside_a_character(self) -> None:
        assert byte_span_to_char_span("é!".encode("utf-8"), 0, 1) == (0, 0)


class TestHighlightSpans:
    def test_no_spans(self) -> None:
        assert highlight_spans("abc", []) == "abc"

    def test_multiple_spans(self) -> None:
        assert highlight_spans("hello hello", [(6, 11), (0, 5)]) == "[hello] [hello]"

    def test_overlapping_and_out_of_range(self) -> None:
        assert highlight_spans("abcdef", [(1, 3), (2, 99)], "<", ">") == "a<bc><def>"
