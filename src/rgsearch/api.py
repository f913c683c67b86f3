from __future__ import annotations

import subprocess
import time
from typing import Any, Dict, List, Optional, Self, Tuple

import orjson

from .config import RipGrepConfig
from .error_handling import ErrorCollector, ErrorInfo, InvalidStateError, handle_process_error
from .logging_config import get_logger
from .options import SearchOptions
from .types import EventType, MatchEvent, MatchRecord, SearchSpec

# ripgrep's exit status when the search ran but found nothing
NO_MATCH_STATUS = 1


class RipGrep(SearchOptions):
    """
    Build a ripgrep command, run it once, and decode its output.

    Example:
        >>> rg = RipGrep("he[l]{2}o", "/tmp/fixtures").with_filename().line_number().run()
        >>> print(rg.as_string())

        >>> rg = RipGrep("TODO", "src").json().run()
        >>> for rec in rg.as_object():
        ...     print(rec.path, rec.line_number, rec.line_text)

    Without ``config`` a plain ``RipGrepConfig()`` is used and the
    ``RGSEARCH_*`` environment variables are ignored; pass
    ``config=RipGrepConfig.from_env()`` to honour them, as the CLI does.
    """

    def __init__(
        self,
        pattern: str,
        path: str,
        rg_path: Optional[str] = None,
        config: Optional[RipGrepConfig] = None,
        error_collector: Optional[ErrorCollector] = None,
    ) -> None:
        self.cfg = config or RipGrepConfig()
        self.spec = SearchSpec(pattern=pattern, root_path=path, executable_path=rg_path or self.cfg.executable)
        super().__init__(pattern, path, self.spec.executable_path)
        self.error_collector = error_collector
        self.output = ""
        self.returncode: Optional[int] = None
        self.stderr = ""
        self.last_error: Optional[ErrorInfo] = None
        self.ran = False

    @property
    def command_line(self) -> str:
        """The command line ``run()`` executes (or executed)."""
        if self.ran:
            return " ".join(self._tokens)
        return " ".join(self._tokens + self._target_tokens())

    def run(self) -> Self:
        """
        Append the pattern and root path, execute the command and keep stdout.

        Must be the last builder call. Process failures are logged and
        recorded on ``last_error``; the output is then left empty and nothing
        is raised.
        """
        logger = get_logger()
        self._tokens.extend(self._target_tokens())
        self.ran = True
        command = " ".join(self._tokens)

        logger.log_command_start(command)
        t0 = time.perf_counter()
        try:
            proc = subprocess.run(
                command,
                shell=True,
                capture_output=True,
                cwd=self.cfg.cwd,
                timeout=self.cfg.timeout,
            )
            self.returncode = proc.returncode
            self.stderr = proc.stderr.decode(self.cfg.encoding, errors="replace")
            if proc.returncode != 0 and not (proc.returncode == NO_MATCH_STATUS and not proc.stderr):
                raise subprocess.CalledProcessError(
                    proc.returncode, command, output=proc.stdout, stderr=proc.stderr
                )
            self.output = proc.stdout.decode(self.cfg.encoding, errors=self.cfg.errors)
        except (OSError, subprocess.SubprocessError, UnicodeError, LookupError) as e:
            self.output = ""
            self.last_error = handle_process_error(command, e, self.error_collector, logger)
            return self

        logger.log_command_complete(
            command, proc.returncode, len(proc.stdout), (time.perf_counter() - t0) * 1000.0
        )
        return self

    def as_string(self) -> str:
        """Captured stdout, unmodified."""
        return self.output

    def _require_json(self) -> None:
        if not self.json_enabled:
            raise InvalidStateError(
                "The output is not in JSON Lines format; call json() before run()",
                context={"command": self.command_line},
            )

    def _parsed_lines(self) -> List[Tuple[str, Dict[str, Any]]]:
        # orjson.JSONDecodeError propagates on malformed lines
        # only \n ends a record; U+2028, U+0085 and friends may appear raw inside strings
        text = self.output.strip(" \t\r\n")
        if not text:
            return []
        lines = [line.removesuffix("\r") for line in text.split("\n")]
        return [(line, orjson.loads(line)) for line in lines]

    def _match_lines(self) -> List[Tuple[str, Dict[str, Any]]]:
        return [
            (line, record)
            for line, record in self._parsed_lines()
            if record.get("type") == EventType.MATCH.value
        ]

    def as_json(self) -> List[str]:
        """
        Source text of every ``match`` record, in output order.

        Raises:
            InvalidStateError: ``json()`` was not called
            orjson.JSONDecodeError: a line of output is not valid JSON
        """
        self._require_json()
        return [line for line, _ in self._match_lines()]

    def as_object(self) -> List[MatchRecord]:
        """
        Parsed ``match`` records, in output order.

        Retains exactly the lines ``as_json()`` retains.
        """
        self._require_json()
        return [MatchRecord.from_event(record) for _, record in self._match_lines()]

    def as_events(self) -> List[MatchEvent]:
        """Every JSON Lines record, including ``begin``, ``end`` and ``summary``."""
        self._require_json()
        return [MatchEvent.from_dict(record) for _, record in self._parsed_lines()]
