#!/usr/bin/env python3
"""
Example 01: Basic search

Demonstrates:
- Chaining options onto a RipGrep instance
- Plain text output with as_string()
- Structured output with json() + as_object()
- The informational type_list() mode
"""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path

from rgsearch import RipGrep

# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------


def section(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}\n")


def make_fixtures(root: Path) -> Path:
    fixtures = root / "fixtures"
    fixtures.mkdir()
    (fixtures / "greeting.txt").write_text("first\nsecond\nwell hello there\nlast\n", encoding="utf-8")
    (fixtures / "app.py").write_text("def hello():\n    return 'hello'\n", encoding="utf-8")
    return fixtures


def demo_text(fixtures: Path) -> None:
    section("1. Plain text")
    rg = RipGrep("he[l]{2}o", str(fixtures)).with_filename().line_number().sort("path").run()
    print(f"  $ {rg.command_line}")
    print(rg.as_string())


def demo_objects(fixtures: Path) -> None:
    section("2. Match records")
    rg = RipGrep("hello", str(fixtures)).glob("*.py").json().run()
    for rec in rg.as_object():
        spans = ", ".join(f"{sm.start}-{sm.end}" for sm in rec.submatches)
        print(f"  {rec.path}:{rec.line_number}: {rec.line_text!r} (bytes {spans})")


def demo_type_list() -> None:
    section("3. Informational mode")
    rg = RipGrep("unused", "unused").type_list().run()
    print(f"  $ {rg.command_line}")
    print("\n".join(rg.as_string().splitlines()[:5]))


def main() -> int:
    with tempfile.TemporaryDirectory() as tmp:
        fixtures = make_fixtures(Path(tmp))
        demo_text(fixtures)
        demo_objects(fixtures)
        demo_type_list()
    return 0


if __name__ == "__main__":
    sys.exit(main())
