"""
rgsearch: chainable ripgrep command builder with structured results.

The package assembles a ripgrep command line from chained option calls, runs
it once, and decodes the captured output as plain text, as the JSON Lines of
every match record, or as parsed ``MatchRecord`` objects.

Main Classes:
    RipGrep: Option builder, executor and result decoder
    RipGrepConfig: Executable, decoding and timeout settings
    MatchRecord: One decoded ``match`` record (path, line number, spans, line text)

Core Modules:
    options: One chainable method per ripgrep flag
    api: ``run()`` and the decoding views
    types: Core data types and enumerations
    error_handling: Exceptions and process failure diagnostics
    logging_config: Logging setup
    formatter: Text, JSON and highlighted rendering of match records
    cli: Command-line interface

Example Usage:
    Plain text:
        >>> from rgsearch import RipGrep
        >>> rg = RipGrep("he[l]{2}o", "/tmp/fixtures").with_filename().line_number().run()
        >>> print(rg.as_string())

    Structured results:
        >>> rg = RipGrep("TODO", "src").json().glob("*.py").run()
        >>> for rec in rg.as_object():
        ...     print(f"{rec.path}:{rec.line_number}: {rec.line_text}")

    CLI usage:
        $ rgsearch find "TODO" src --glob "*.py" --format json

Process failures never raise: the output is empty and the diagnostic is
logged and kept on ``RipGrep.last_error``. Calling ``as_json()`` or
``as_object()`` without ``json()`` raises ``InvalidStateError``.
"""

# Package metadata
__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "Chainable ripgrep command builder with structured results"

from .api import RipGrep
from .config import RipGrepConfig
from .error_handling import (
    ConfigurationError,
    ErrorInfo,
    InvalidStateError,
    ProcessError,
    SearchError,
)
from .logging_config import configure_logging, disable_logging, enable_debug_logging, get_logger
from .options import SearchOptions
from .types import EventType, MatchEvent, MatchRecord, OutputFormat, SearchSpec, SubMatch

# Public API
__all__ = [
    # Main classes
    "RipGrep",
    "RipGrepConfig",
    "SearchOptions",
    # Data types
    "EventType",
    "MatchEvent",
    "MatchRecord",
    "OutputFormat",
    "SearchSpec",
    "SubMatch",
    # Logging and configuration
    "configure_logging",
    "get_logger",
    "enable_debug_logging",
    "disable_logging",
    # Exception classes
    "SearchError",
    "InvalidStateError",
    "ProcessError",
    "ConfigurationError",
    "ErrorInfo",
    # Package metadata
    "__version__",
    "__license__",
    "__description__",
]
