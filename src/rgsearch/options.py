"""
Option accumulator for ripgrep command lines.

``SearchOptions`` holds the ordered token list of the command under
construction. Every option method appends exactly one token (the flag,
optionally followed by its value) and returns the instance so calls chain::

    RipGrep("TODO", "src").ignore_case().glob("*.py").max_count(5).run()

Values are passed through without validation; ripgrep rejects bad values
when the command runs. Free-text values are double-quoted for the shell,
numeric and enumerated values are not. Tokens are never removed, so
conflicting flags are all emitted and ripgrep's own precedence applies.
"""

from __future__ import annotations

from typing import List, Optional, Self

from .utils import quote_value


class SearchOptions:
    """Builder holding the executable, pattern, root path and option tokens."""

    def __init__(self, pattern: str, path: str, rg_path: str = "rg") -> None:
        self.rg_path = rg_path
        # None means the informational mode cleared it
        self.pattern: Optional[str] = pattern
        self.path: Optional[str] = path
        self.json_enabled = False
        self._tokens: List[str] = [rg_path]

    @property
    def tokens(self) -> List[str]:
        """Copy of the token list accumulated so far."""
        return list(self._tokens)

    def _target_tokens(self) -> List[str]:
        out: List[str] = []
        if self.pattern is not None:
            out.append(quote_value(self.pattern))
        if self.path:
            out.append(self.path)
        return out

    def _add(self, flag: str, value: object = None, quote: bool = False) -> Self:
        if value is None:
            self._tokens.append(flag)
        elif quote:
            self._tokens.append(f"{flag} {quote_value(value)}")
        else:
            self._tokens.append(f"{flag} {value}")
        return self

    def _clear_target(self) -> None:
        self.pattern = None
        self.path = None

    # -- context ----------------------------------------------------------

    def after_context(self, num: int) -> Self:
        """Show NUM lines after each match."""
        return self._add("--after-context", num)

    def before_context(self, num: int) -> Self:
        """Show NUM lines before each match."""
        return self._add("--before-context", num)

    def context(self, num: int) -> Self:
        """Show NUM lines before and after each match."""
        return self._add("--context", num)

    def context_separator(self, separator: str) -> Self:
        return self._add("--context-separator", separator, quote=True)

    def passthru(self) -> Self:
        """Print both matching and non-matching lines."""
        return self._add("--passthru")

    # -- regex engine -----------------------------------------------------

    def auto_hybrid_regex(self) -> Self:
        return self._add("--auto-hybrid-regex")

    def pcre2(self) -> Self:
        return self._add("--pcre2")

    def no_pcre2_unicode(self) -> Self:
        return self._add("--no-pcre2-unicode")

    def pcre2_version(self) -> Self:
        """
        Print the PCRE2 version ripgrep was built with.

        This mode takes no search target, so the pattern and root path are
        dropped from the final command line.
        """
        self._clear_target()
        return self._add("--pcre2-version")

    def dfa_size_limit(self, num_suffix: str) -> Self:
        """Upper size limit of the regex DFA, e.g. ``"10M"``."""
        return self._add("--dfa-size-limit", num_suffix, quote=True)

    def regex_size_limit(self, num_suffix: str) -> Self:
        return self._add("--regex-size-limit", num_suffix, quote=True)

    def regexp(self, pattern: str) -> Self:
        """Add a pattern; use it for patterns beginning with a dash."""
        return self._add("--regexp", pattern, quote=True)

    def file(self, pattern_file: str) -> Self:
        """Read patterns from a file, one per line."""
        return self._add("--file", pattern_file, quote=True)

    def fixed_strings(self) -> Self:
        """Treat the pattern as a literal string."""
        return self._add("--fixed-strings")

    def multiline(self) -> Self:
        return self._add("--multiline")

    def multiline_dotall(self) -> Self:
        return self._add("--multiline-dotall")

    def crlf(self) -> Self:
        return self._add("--crlf")

    def null_data(self) -> Self:
        return self._add("--null-data")

    # -- case and matching ------------------------------------------------

    def case_sensitive(self) -> Self:
        return self._add("--case-sensitive")

    def ignore_case(self) -> Self:
        return self._add("--ignore-case")

    def smart_case(self) -> Self:
        """Search case insensitively if the pattern is all lowercase."""
        return self._add("--smart-case")

    def invert_match(self) -> Self:
        return self._add("--invert-match")

    def line_regexp(self) -> Self:
        """Only show matches surrounded by line boundaries."""
        return self._add("--line-regexp")

    def word_regexp(self) -> Self:
        """Only show matches surrounded by word boundaries."""
        return self._add("--word-regexp")

    def max_count(self, num: int) -> Self:
        """Limit the number of matching lines per file."""
        return self._add("--max-count", num)

    # -- file selection ---------------------------------------------------

    def binary(self) -> Self:
        return self._add("--binary")

    def text(self) -> Self:
        """Search binary files as if they were text."""
        return self._add("--text")

    def follow(self) -> Self:
        """Follow symbolic links."""
        return self._add("--follow")

    def glob(self, pattern: str) -> Self:
        """Include or exclude files matching the glob (``!`` excludes)."""
        return self._add("--glob", pattern, quote=True)

    def iglob(self, pattern: str) -> Self:
        """Case insensitive ``glob``."""
        return self._add("--iglob", pattern, quote=True)

    def hidden(self) -> Self:
        """Search hidden files and directories."""
        return self._add("--hidden")

    def ignore_file(self, path: str) -> Self:
        return self._add("--ignore-file", path, quote=True)

    def ignore_file_case_insensitive(self) -> Self:
        return self._add("--ignore-file-case-insensitive")

    def max_depth(self, num: int) -> Self:
        """Limit the depth of directory traversal."""
        return self._add("--max-depth", num)

    def max_filesize(self, num_suffix: str) -> Self:
        """Ignore files larger than NUM, e.g. ``"50K"``."""
        return self._add("--max-filesize", num_suffix, quote=True)

    def no_config(self) -> Self:
        return self._add("--no-config")

    def no_ignore(self) -> Self:
        return self._add("--no-ignore")

    def no_ignore_dot(self) -> Self:
        return self._add("--no-ignore-dot")

    def no_ignore_global(self) -> Self:
        return self._add("--no-ignore-global")

    def no_ignore_messages(self) -> Self:
        return self._add("--no-ignore-messages")

    def no_ignore_parent(self) -> Self:
        return self._add("--no-ignore-parent")

    def no_ignore_vcs(self) -> Self:
        return self._add("--no-ignore-vcs")

    def one_file_system(self) -> Self:
        return self._add("--one-file-system")

    def search_zip(self) -> Self:
        """Search inside compressed files."""
        return self._add("--search-zip")

    def pre(self, command: str) -> Self:
        """Preprocess each file with COMMAND before searching."""
        return self._add("--pre", command, quote=True)

    def pre_glob(self, glob: str) -> Self:
        return self._add("--pre-glob", glob, quote=True)

    def type(self, file_type: str) -> Self:
        """Only search files of the given type, e.g. ``"py"``."""
        return self._add("--type", file_type, quote=True)

    def type_not(self, file_type: str) -> Self:
        return self._add("--type-not", file_type, quote=True)

    def type_add(self, type_spec: str) -> Self:
        """Add a file type definition, e.g. ``"web:*.{html,css,js}"``."""
        return self._add("--type-add", type_spec, quote=True)

    def type_clear(self, file_type: str) -> Self:
        return self._add("--type-clear", file_type, quote=True)

    def type_list(self) -> Self:
        """
        List the supported file types.

        Like ``pcre2_version`` this mode takes no search target.
        """
        self._clear_target()
        return self._add("--type-list")

    def unrestricted(self) -> Self:
        return self._add("--unrestricted")

    def encoding(self, encoding: str) -> Self:
        return self._add("--encoding", encoding, quote=True)

    def mmap(self) -> Self:
        return self._add("--mmap")

    def no_mmap(self) -> Self:
        return self._add("--no-mmap")

    def threads(self, num: int) -> Self:
        return self._add("--threads", num)

    # -- output -----------------------------------------------------------

    def json(self) -> Self:
        """
        Print results as JSON Lines.

        Required by ``as_json()`` and ``as_object()``.
        """
        self.json_enabled = True
        return self._add("--json")

    def block_buffered(self) -> Self:
        return self._add("--block-buffered")

    def line_buffered(self) -> Self:
        return self._add("--line-buffered")

    def byte_offset(self) -> Self:
        """Print the 0-based byte offset before each output line."""
        return self._add("--byte-offset")

    def color(self, when: str) -> Self:
        """One of ``never``, ``auto``, ``always`` or ``ansi``."""
        return self._add("--color", when)

    def colors(self, color_spec: str) -> Self:
        """Color settings such as ``"match:fg:magenta"``."""
        return self._add("--colors", color_spec, quote=True)

    def column(self) -> Self:
        return self._add("--column")

    def count(self) -> Self:
        """Show the number of matching lines per file."""
        return self._add("--count")

    def count_matches(self) -> Self:
        return self._add("--count-matches")

    def debug(self) -> Self:
        return self._add("--debug")

    def files(self) -> Self:
        """Print the files that would be searched instead of searching."""
        return self._add("--files")

    def files_with_matches(self) -> Self:
        return self._add("--files-with-matches")

    def files_without_match(self) -> Self:
        return self._add("--files-without-match")

    def heading(self) -> Self:
        return self._add("--heading")

    def no_heading(self) -> Self:
        return self._add("--no-heading")

    def line_number(self) -> Self:
        return self._add("--line-number")

    def no_line_number(self) -> Self:
        return self._add("--no-line-number")

    def with_filename(self) -> Self:
        return self._add("--with-filename")

    def no_filename(self) -> Self:
        return self._add("--no-filename")

    def max_columns(self, num: int) -> Self:
        """Omit lines longer than NUM bytes."""
        return self._add("--max-columns", num)

    def max_columns_preview(self) -> Self:
        return self._add("--max-columns-preview")

    def no_messages(self) -> Self:
        return self._add("--no-messages")

    def null_separator(self) -> Self:
        """Follow every printed file path with a NUL byte (``--null``)."""
        return self._add("--null")

    def only_matching(self) -> Self:
        return self._add("--only-matching")

    def path_separator(self, separator: str) -> Self:
        return self._add("--path-separator", separator, quote=True)

    def pretty(self) -> Self:
        return self._add("--pretty")

    def quiet_mode(self) -> Self:
        """Print nothing; the exit status reports whether a match was found (``--quiet``)."""
        return self._add("--quiet")

    def replace(self, text: str) -> Self:
        """Replace every match with TEXT in the output."""
        return self._add("--replace", text, quote=True)

    def sort(self, by: str) -> Self:
        """Sort results ascending by ``path``, ``modified``, ``accessed``, ``created`` or ``none``."""
        return self._add("--sort", by)

    def sortr(self, by: str) -> Self:
        """Descending ``sort``."""
        return self._add("--sortr", by)

    def stats(self) -> Self:
        return self._add("--stats")

    def trim(self) -> Self:
        return self._add("--trim")

    def vimgrep(self) -> Self:
        """Print every match on its own line with line and column numbers."""
        return self._add("--vimgrep")
