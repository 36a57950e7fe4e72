"""emlanalyzer package initialisation."""

from importlib import metadata

from .analyzer import EmlAnalyzer
from .config import AnalyzerOptions, ConfigError
from .message import MessageParseError
from .types import Report


def _discover_version() -> str:
    """Return the installed package version, falling back to dev marker."""
    try:
        return metadata.version("emlanalyzer")
    except metadata.PackageNotFoundError:  # pragma: no cover - occurs in editable installs
        return "0.0.0"


__all__ = [
    "AnalyzerOptions",
    "ConfigError",
    "EmlAnalyzer",
    "MessageParseError",
    "Report",
    "__version__",
]
__version__ = _discover_version()
