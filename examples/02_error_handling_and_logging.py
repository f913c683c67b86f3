#!/usr/bin/env python3
"""
Example 02: Error handling & logging

Demonstrates:
- Debug logging of executed command lines
- Process failures: empty output plus a diagnostic on last_error
- Collecting failures from several runs into one report
- InvalidStateError when a JSON view is used without json()
"""

from __future__ import annotations

import sys

from rgsearch import InvalidStateError, RipGrep, configure_logging
from rgsearch.error_handling import ErrorCollector, create_error_report
from rgsearch.logging_config import LogFormat, LogLevel


def main() -> int:
    configure_logging(level=LogLevel.DEBUG, format_type=LogFormat.STRUCTURED)

    collector = ErrorCollector()
    bad = RipGrep("TODO", ".", error_collector=collector).sort("sideways").run()
    print(f"output={bad.as_string()!r} returncode={bad.returncode}")
    if bad.last_error:
        print(f"category={bad.last_error.category.value} suggestions={bad.last_error.suggestions}")

    RipGrep("TODO", "/definitely/missing", error_collector=collector).run()
    print(create_error_report(collector))

    plain = RipGrep("TODO", ".").max_count(1).run()
    try:
        plain.as_object()
    except InvalidStateError as e:
        print(f"InvalidStateError: {e.message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
