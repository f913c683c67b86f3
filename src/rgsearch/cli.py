"""
Command-line interface for rgsearch.

Example Usage:
    Plain ripgrep output:
        $ rgsearch find "def main" src --ignore-case --context 2

    Structured output:
        $ rgsearch find "TODO" . --glob "*.py" --format json
        $ rgsearch find "he[l]{2}o" /tmp/fixtures --format highlight
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from . import __version__
from .api import RipGrep
from .config import RipGrepConfig
from .error_handling import SearchError
from .formatter import format_result, render_highlight_console
from .logging_config import enable_debug_logging
from .types import OutputFormat


@click.group()
@click.version_option(__version__, prog_name="rgsearch")
def cli() -> None:
    """rgsearch - chainable ripgrep runner with structured results"""
    pass


@cli.command("find")
@click.argument("pattern")
@click.argument("path", default=".")
@click.option("--rg-path", default=None, help="ripgrep executable (default: $RGSEARCH_RG_PATH or rg)")
@click.option("-i", "--ignore-case", is_flag=True, default=False, help="Case insensitive search")
@click.option("-S", "--smart-case", is_flag=True, default=False, help="Smart case search")
@click.option("-F", "--fixed-strings", is_flag=True, default=False, help="Treat the pattern as a literal")
@click.option("-w", "--word-regexp", is_flag=True, default=False, help="Match whole words only")
@click.option("--hidden", is_flag=True, default=False, help="Search hidden files")
@click.option("-g", "--glob", "globs", multiple=True, help="Include/exclude glob, may be repeated")
@click.option("-t", "--type", "types", multiple=True, help="Only search files of this type")
@click.option("-C", "--context", type=int, default=None, help="Context lines around matches")
@click.option("-m", "--max-count", type=int, default=None, help="Max matching lines per file")
@click.option("--max-depth", type=int, default=None, help="Max directory depth")
@click.option(
    "--format",
    "fmt",
    type=click.Choice([e.value for e in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format",
)
@click.option("--debug", is_flag=True, default=False, help="Log the executed command")
def find_cmd(
    pattern: str,
    path: str,
    rg_path: Optional[str],
    ignore_case: bool,
    smart_case: bool,
    fixed_strings: bool,
    word_regexp: bool,
    hidden: bool,
    globs: tuple[str, ...],
    types: tuple[str, ...],
    context: Optional[int],
    max_count: Optional[int],
    max_depth: Optional[int],
    fmt: str,
    debug: bool,
) -> None:
    """Execute a search with ripgrep."""
    if debug:
        enable_debug_logging()

    try:
        cfg = RipGrepConfig.from_env()
    except SearchError as e:
        raise click.UsageError(e.message) from e

    rg = RipGrep(pattern, path, rg_path=rg_path, config=cfg)
    if ignore_case:
        rg.ignore_case()
    if smart_case:
        rg.smart_case()
    if fixed_strings:
        rg.fixed_strings()
    if word_regexp:
        rg.word_regexp()
    if hidden:
        rg.hidden()
    for g in globs:
        rg.glob(g)
    for t in types:
        rg.type(t)
    if context is not None:
        rg.context(context)
    if max_count is not None:
        rg.max_count(max_count)
    if max_depth is not None:
        rg.max_depth(max_depth)

    output = OutputFormat(fmt)
    if output == OutputFormat.TEXT:
        rg.line_number().with_filename().run()
        sys.stdout.write(rg.as_string())
    else:
        rg.json().run()
        records = rg.as_object()
        if output == OutputFormat.HIGHLIGHT and sys.stdout.isatty():
            render_highlight_console(records)
        else:
            sys.stdout.write(format_result(records, output))
            sys.stdout.write("\n")

    if rg.last_error is not None:
        sys.exit(2)


def main() -> None:
    cli(prog_name="rgsearch")


if __name__ == "__main__":
    main()
