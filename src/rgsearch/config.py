"""
Configuration module for rgsearch.

``RipGrepConfig`` controls how the assembled command line is executed and how
its output is decoded. Search options themselves are not configuration; they
are accumulated on the ``RipGrep`` instance.

Environment variables read by ``RipGrepConfig.from_env()``:
    RGSEARCH_RG_PATH: ripgrep executable (default: ``rg`` on PATH)
    RGSEARCH_ENCODING: encoding of ripgrep's stdout (default: utf-8)
    RGSEARCH_TIMEOUT: timeout in seconds (default: none)

They are not applied implicitly: ``RipGrep(...)`` without ``config`` runs with
``RipGrepConfig()`` defaults. Pass ``config=RipGrepConfig.from_env()`` to use
them; the ``rgsearch`` CLI does this.

Example:
    >>> from rgsearch import RipGrep, RipGrepConfig
    >>> cfg = RipGrepConfig(executable="/usr/local/bin/rg", timeout=30)
    >>> rg = RipGrep("TODO", "src", config=cfg).line_number().run()
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from .error_handling import ConfigurationError

DEFAULT_EXECUTABLE = "rg"


@dataclass(slots=True)
class RipGrepConfig:
    executable: str = DEFAULT_EXECUTABLE
    encoding: str = "utf-8"
    errors: str = "replace"  # codec error handler for stdout
    cwd: Path | None = None
    timeout: float | None = None  # None = wait forever

    @classmethod
    def from_env(cls) -> "RipGrepConfig":
        """Build a config from ``RGSEARCH_*`` environment variables."""
        timeout: float | None = None
        raw_timeout = os.environ.get("RGSEARCH_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ConfigurationError(
                    f"RGSEARCH_TIMEOUT must be a number, got {raw_timeout!r}",
                    context={"RGSEARCH_TIMEOUT": raw_timeout},
                ) from e
            if timeout <= 0:
                raise ConfigurationError(
                    f"RGSEARCH_TIMEOUT must be positive, got {raw_timeout!r}",
                    context={"RGSEARCH_TIMEOUT": raw_timeout},
                )

        return cls(
            executable=os.environ.get("RGSEARCH_RG_PATH") or DEFAULT_EXECUTABLE,
            encoding=os.environ.get("RGSEARCH_ENCODING") or "utf-8",
            timeout=timeout,
        )

    def resolve_executable(self) -> str | None:
        """Absolute path of the executable as the shell would find it, or None."""
        return shutil.which(self.executable)
