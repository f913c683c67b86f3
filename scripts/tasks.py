#!/usr/bin/env python3
"""
Task runner for the rgsearch project.

Usage:
    python scripts/tasks.py <command> [options]

Commands:
    lint           Run ruff + black + mypy
    format         Auto-format code (black + ruff --fix)
    test           Run tests, optionally filtered by marker
    doctor         Report which ripgrep executable rgsearch would run
    clean          Remove build/cache artifacts
"""

from __future__ import annotations

import argparse
import os
import shutil
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

CLEAN_DIRS = ["build", "dist", ".pytest_cache", ".mypy_cache", ".ruff_cache", "htmlcov"]


def _color(code: str, text: str) -> str:
    if os.environ.get("NO_COLOR") or not sys.stdout.isatty():
        return text
    return f"\033[{code}m{text}\033[0m"


def info(msg: str) -> None:
    print(f"{_color('0;34', 'INFO')}  {msg}")


def success(msg: str) -> None:
    print(f"{_color('0;32', 'OK')}    {msg}")


def error(msg: str) -> None:
    print(f"{_color('0;31', 'ERR')}   {msg}", file=sys.stderr)


def run(cmd: list[str], check: bool = True) -> subprocess.CompletedProcess[str]:
    info(f"Running: {' '.join(cmd)}")
    return subprocess.run(cmd, cwd=PROJECT_ROOT, check=check, text=True)


def cmd_lint(args: argparse.Namespace) -> None:
    failed = False
    checks = [["ruff", "check", "."], ["black", "--check", "."]]
    if not args.skip_mypy:
        checks.append(["mypy", "src/rgsearch"])
    for tool in checks:
        if run([sys.executable, "-m", *tool], check=False).returncode != 0:
            error(f"{tool[0]} failed")
            failed = True
    if failed:
        sys.exit(1)
    success("All linting checks passed")


def cmd_format(args: argparse.Namespace) -> None:
    run([sys.executable, "-m", "black", "."])
    run([sys.executable, "-m", "ruff", "check", ".", "--fix"])
    success("Code formatted")


def cmd_test(args: argparse.Namespace) -> None:
    cmd = [sys.executable, "-m", "pytest"]
    if args.markers:
        cmd.extend(["-m", args.markers])
    if args.keyword:
        cmd.extend(["-k", args.keyword])
    if args.verbose:
        cmd.append("-v")
    result = run(cmd, check=False)
    if result.returncode != 0:
        error("Tests failed")
        sys.exit(result.returncode)
    success("Tests passed")


def cmd_doctor(args: argparse.Namespace) -> None:
    sys.path.insert(0, str(PROJECT_ROOT / "src"))
    from rgsearch import RipGrep, RipGrepConfig

    cfg = RipGrepConfig.from_env()
    resolved = cfg.resolve_executable()
    if resolved is None:
        error(f"{cfg.executable!r} not found on PATH; integration tests will be skipped")
        sys.exit(1)
    info(f"ripgrep executable: {resolved}")

    rg = RipGrep("", "", config=cfg).pcre2_version().run()
    if rg.last_error is not None:
        info("PCRE2: not available")
    else:
        info(f"PCRE2: {rg.as_string().strip()}")
    success("ripgrep is usable")


def cmd_clean(args: argparse.Namespace) -> None:
    for dirname in CLEAN_DIRS:
        p = PROJECT_ROOT / dirname
        if p.exists():
            shutil.rmtree(p)
            info(f"  Removed {dirname}/")
    for pycache in PROJECT_ROOT.rglob("__pycache__"):
        shutil.rmtree(pycache, ignore_errors=True)
    for egg in (PROJECT_ROOT / "src").glob("*.egg-info"):
        shutil.rmtree(egg)
    success("Clean complete")


COMMANDS = {
    "lint": cmd_lint,
    "format": cmd_format,
    "test": cmd_test,
    "doctor": cmd_doctor,
    "clean": cmd_clean,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tasks.py", description="rgsearch task runner")
    subparsers = parser.add_subparsers(dest="command")

    p = subparsers.add_parser("lint", help="Run ruff + black + mypy")
    p.add_argument("--skip-mypy", action="store_true", help="Skip mypy type checking")

    subparsers.add_parser("format", help="Auto-format code")

    p = subparsers.add_parser("test", help="Run tests")
    p.add_argument("-m", "--markers", help="Pytest marker expression, e.g. 'not integration'")
    p.add_argument("-k", "--keyword", help="Pytest keyword expression")
    p.add_argument("-v", "--verbose", action="store_true")

    subparsers.add_parser("doctor", help="Check the ripgrep installation")
    subparsers.add_parser("clean", help="Remove build/cache artifacts")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        sys.exit(0)
    try:
        COMMANDS[args.command](args)
    except subprocess.CalledProcessError as e:
        error(f"Command failed with exit code {e.returncode}")
        sys.exit(e.returncode)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
