"""
Shared test fixtures and utilities for rgsearch tests.

ripgrep output used by the unit tests is canned JSON Lines / text; tests that
need the real executable use the ``rg_available`` skip marker.
"""

import shutil
import subprocess
from pathlib import Path

import pytest

from rgsearch import configure_logging

# Test data constants
FIXTURE_PATH = "/tmp/fixtures/greeting.txt"

BEGIN_LINE = '{"type":"begin","data":{"path":{"text":"/tmp/fixtures/greeting.txt"}}}'
MATCH_LINE = (
    '{"type":"match","data":{"path":{"text":"/tmp/fixtures/greeting.txt"},'
    '"lines":{"text":"well hello there\\n"},"line_number":3,"absolute_offset":14,'
    '"submatches":[{"match":{"text":"hello"},"start":5,"end":10}]}}'
)
CONTEXT_LINE = (
    '{"type":"context","data":{"path":{"text":"/tmp/fixtures/greeting.txt"},'
    '"lines":{"text":"second\\n"},"line_number":2,"absolute_offset":6,"submatches":[]}}'
)
SECOND_MATCH_LINE = (
    '{"type":"match","data":{"path":{"text":"/tmp/fixtures/other.txt"},'
    '"lines":{"text":"hello hello\\n"},"line_number":1,"absolute_offset":0,'
    '"submatches":[{"match":{"text":"hello"},"start":0,"end":5},'
    '{"match":{"text":"hello"},"start":6,"end":11}]}}'
)
END_LINE = (
    '{"type":"end","data":{"path":{"text":"/tmp/fixtures/greeting.txt"},"binary_offset":null,'
    '"stats":{"elapsed":{"secs":0,"nanos":1,"human":"0.000001s"},"searches":1,'
    '"searches_with_match":1,"bytes_searched":31,"bytes_printed":250,'
    '"matched_lines":1,"matches":1}}}'
)
SUMMARY_LINE = (
    '{"data":{"elapsed_total":{"human":"0.002s","nanos":2000000,"secs":0},'
    '"stats":{"bytes_printed":0,"bytes_searched":31,"elapsed":{"human":"0.000s","nanos":1,"secs":0},'
    '"matched_lines":0,"matches":0,"searches":1,"searches_with_match":0}},"type":"summary"}'
)


def json_lines(*lines: str) -> bytes:
    return ("\n".join(lines) + "\n").encode("utf-8")


SAMPLE_JSON_OUTPUT = json_lines(BEGIN_LINE, CONTEXT_LINE, MATCH_LINE, END_LINE, SUMMARY_LINE)
SAMPLE_TWO_FILE_OUTPUT = json_lines(
    BEGIN_LINE, MATCH_LINE, END_LINE, SECOND_MATCH_LINE, SUMMARY_LINE
)
NO_MATCH_JSON_OUTPUT = json_lines(SUMMARY_LINE)


def completed(
    stdout: bytes = b"", stderr: bytes = b"", returncode: int = 0, args: str = "rg"
) -> subprocess.CompletedProcess:
    """Build a CompletedProcess as ``subprocess.run`` returns it."""
    return subprocess.CompletedProcess(args=args, returncode=returncode, stdout=stdout, stderr=stderr)


rg_available = pytest.mark.skipif(shutil.which("rg") is None, reason="ripgrep (rg) not installed")


@pytest.fixture(autouse=True)
def quiet_logger():
    """Fresh global logger per test; records still propagate to caplog."""
    configure_logging(enable_console=False)
    yield


@pytest.fixture
def fixtures_dir(tmp_path: Path) -> Path:
    """Directory with one file matching ``he[l]{2}o`` on line 3."""
    root = tmp_path / "fixtures"
    root.mkdir()
    (root / "greeting.txt").write_text("first\nsecond\nwell hello there\nlast\n", encoding="utf-8")
    (root / "notes.md").write_text("# Notes\nnothing to see\n", encoding="utf-8")
    return root


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    root = tmp_path / "empty"
    root.mkdir()
    (root / "plain.txt").write_text("no greetings here\n", encoding="utf-8")
    return root


def run_shell(command: str) -> str:
    """Run a manually assembled command line the way a user would."""
    proc = subprocess.run(command, shell=True, capture_output=True)
    return proc.stdout.decode("utf-8")
