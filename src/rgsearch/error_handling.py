"""
Error handling and reporting for rgsearch.

Two kinds of failure exist. Failures of the ripgrep process itself (spawn
errors, nonzero exit, timeouts) are recovered inside ``RipGrep.run()``: they
are logged, recorded as ``ErrorInfo`` and leave an empty result. Misuse of
the decoding views and malformed ripgrep output are raised to the caller.

Classes:
    ErrorSeverity: Error severity levels (LOW, MEDIUM, HIGH, CRITICAL)
    ErrorCategory: Error classification categories
    ErrorInfo: Detailed error information container
    SearchError: Base exception class for rgsearch errors
    InvalidStateError: Decoding view used in the wrong output mode
    ProcessError: Failed ripgrep execution
    ConfigurationError: Invalid configuration values
    ErrorCollector: Batch error collection

Functions:
    handle_process_error: Classify, record and log a process failure
    create_error_report: Generate a human-readable error report

Example:
    >>> from rgsearch import RipGrep
    >>> from rgsearch.error_handling import InvalidStateError
    >>> rg = RipGrep("TODO", "src").run()
    >>> try:
    ...     rg.as_object()
    ... except InvalidStateError as e:
    ...     print(e.suggestions[0])
    Call json() before run()
"""

from __future__ import annotations

import subprocess
import sys
import time
import traceback
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    PROCESS = "process"
    NOT_FOUND = "not_found"
    PERMISSION = "permission"
    ENCODING = "encoding"
    PARSING = "parsing"
    TIMEOUT = "timeout"
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


@dataclass
class ErrorInfo:
    """Detailed error information."""

    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    command: str | None = None
    returncode: int | None = None
    stderr: str | None = None
    exception_type: str | None = None
    traceback_str: str | None = None
    timestamp: float = field(default_factory=time.time)
    context: dict[str, Any] = field(default_factory=dict)
    suggestions: list[str] = field(default_factory=list)


class SearchError(Exception):
    """Base exception for search-related errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.suggestions: list[str] = suggestions or []
        self.context: dict[str, Any] = context or {}
        self.timestamp: float = time.time()


class InvalidStateError(SearchError):
    """A decoding view was called on output that is not in the expected format."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.HIGH,
            suggestions=[
                "Call json() before run()",
                "Use as_string() for plain text output",
            ],
            context=context,
        )


class ProcessError(SearchError):
    """The ripgrep process could not be started or exited with an error."""

    def __init__(
        self,
        message: str,
        command: str,
        returncode: int | None = None,
        stderr: str = "",
        category: ErrorCategory = ErrorCategory.PROCESS,
        context: dict[str, Any] | None = None,
    ) -> None:
        merged_context: dict[str, Any] = {}
        if context:
            merged_context.update(context)
        merged_context["command"] = command
        merged_context["returncode"] = returncode

        suggestions = ["Check the options passed to ripgrep", "Run the command manually to inspect stderr"]
        if category == ErrorCategory.NOT_FOUND:
            suggestions = ["Install ripgrep", "Pass rg_path or set RGSEARCH_RG_PATH"]
        elif category == ErrorCategory.TIMEOUT:
            suggestions = ["Increase RipGrepConfig.timeout", "Narrow the search path"]

        super().__init__(
            message,
            category=category,
            severity=ErrorSeverity.HIGH,
            suggestions=suggestions,
            context=merged_context,
        )
        self.command: str = command
        self.returncode: int | None = returncode
        self.stderr: str = stderr


class ConfigurationError(SearchError):
    """Configuration-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            suggestions=[
                "Check RGSEARCH_* environment variables",
                "Use default configuration",
            ],
            context=context,
        )


class ErrorCollector:
    """Collects errors across several ripgrep runs."""

    def __init__(self, max_errors: int = 100) -> None:
        self.max_errors = max_errors
        self.errors: list[ErrorInfo] = []
        self.error_counts: dict[ErrorCategory, int] = {}

    def add_error_info(self, error_info: ErrorInfo) -> None:
        """Add an already built ``ErrorInfo``."""
        if len(self.errors) < self.max_errors:
            self.errors.append(error_info)
        self.error_counts[error_info.category] = self.error_counts.get(error_info.category, 0) + 1

    def add_error(self, exception: Exception, context: dict[str, Any] | None = None) -> ErrorInfo:
        """Convert an exception to ``ErrorInfo`` and add it."""
        error_info = to_error_info(exception, context=context)
        self.add_error_info(error_info)
        return error_info

    def get_errors_by_category(self, category: ErrorCategory) -> list[ErrorInfo]:
        """Get all errors of a specific category."""
        return [error for error in self.errors if error.category == category]

    def get_errors_by_severity(self, severity: ErrorSeverity) -> list[ErrorInfo]:
        """Get all errors of a specific severity."""
        return [error for error in self.errors if error.severity == severity]

    def get_summary(self) -> dict[str, Any]:
        """Get error summary statistics."""
        return {
            "total_errors": len(self.errors),
            "by_category": {cat.value: count for cat, count in self.error_counts.items()},
            "by_severity": {
                severity.value: len(self.get_errors_by_severity(severity))
                for severity in ErrorSeverity
            },
        }

    def clear(self) -> None:
        """Clear all collected errors."""
        self.errors.clear()
        self.error_counts.clear()


def to_error_info(exception: Exception, context: dict[str, Any] | None = None) -> ErrorInfo:
    """Build an ``ErrorInfo`` from any exception."""
    if isinstance(exception, SearchError):
        category = exception.category
        severity = exception.severity
        suggestions = exception.suggestions
        merged_context = {**exception.context, **(context or {})}
    else:
        category = ErrorCategory.UNKNOWN
        severity = ErrorSeverity.MEDIUM
        suggestions = []
        merged_context = context or {}

    return ErrorInfo(
        category=category,
        severity=severity,
        message=str(exception),
        command=getattr(exception, "command", None),
        returncode=getattr(exception, "returncode", None),
        stderr=getattr(exception, "stderr", None),
        exception_type=type(exception).__name__,
        traceback_str=traceback.format_exc() if sys.exc_info()[0] else None,
        context=merged_context,
        suggestions=list(suggestions),
    )


def _decode(data: bytes | str | None) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


def handle_process_error(
    command: str,
    exception: Exception,
    error_collector: ErrorCollector | None = None,
    logger: Any | None = None,
) -> ErrorInfo:
    """
    Handle a failed ripgrep execution with classification and logging.

    Args:
        command: The command line that was executed
        exception: The exception raised while running it
        error_collector: Optional error collector to add the error to
        logger: Optional logger to log the error

    Returns:
        The ``ErrorInfo`` describing the failure
    """
    error: ProcessError
    if isinstance(exception, subprocess.CalledProcessError):
        stderr = _decode(exception.stderr).strip()
        error = ProcessError(
            f"ripgrep exited with status {exception.returncode}: {stderr or 'no stderr output'}",
            command,
            returncode=exception.returncode,
            stderr=stderr,
        )
    elif isinstance(exception, subprocess.TimeoutExpired):
        error = ProcessError(
            f"ripgrep timed out after {exception.timeout}s",
            command,
            stderr=_decode(exception.stderr).strip(),
            category=ErrorCategory.TIMEOUT,
        )
    elif isinstance(exception, FileNotFoundError):
        error = ProcessError(
            f"Cannot start ripgrep: {exception}", command, category=ErrorCategory.NOT_FOUND
        )
    elif isinstance(exception, PermissionError):
        error = ProcessError(
            f"Permission denied starting ripgrep: {exception}",
            command,
            category=ErrorCategory.PERMISSION,
        )
    elif isinstance(exception, (UnicodeError, LookupError)):
        error = ProcessError(
            f"Cannot decode ripgrep output: {exception}", command, category=ErrorCategory.ENCODING
        )
    else:
        error = ProcessError(f"Unexpected error running ripgrep: {exception}", command)

    error_info = to_error_info(error)
    error_info.exception_type = type(exception).__name__

    if error_collector:
        error_collector.add_error_info(error_info)

    if logger:
        logger.log_process_failure(command, error.message, stderr=error.stderr)

    return error_info


def create_error_report(error_collector: ErrorCollector) -> str:
    """Create a human-readable error report."""
    if not error_collector.errors:
        return "No errors occurred during the search operation."

    summary = error_collector.get_summary()

    report = ["Search Error Report", "=" * 50, ""]

    report.append(f"Total errors: {summary['total_errors']}")
    report.append("")

    report.append("Errors by category:")
    for category, count in summary["by_category"].items():
        report.append(f"  {category}: {count}")
    report.append("")

    report.append("Errors:")
    for error in error_collector.errors:
        report.append(f"  - {error.message}")
        if error.command:
            report.append(f"    Command: {error.command}")
        if error.suggestions:
            report.append(f"    Suggestions: {', '.join(error.suggestions)}")

    return "\n".join(report)
