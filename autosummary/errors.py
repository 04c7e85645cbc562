"""Custom exceptions for auto-summary."""


class AutoSummaryError(Exception):
    """Base exception for auto-summary operations."""


class ScanError(AutoSummaryError):
    """Error while walking the book source tree."""


class PersistenceError(AutoSummaryError):
    """SUMMARY.md could not be read or written."""


class ConfigurationTriggeredError(AutoSummaryError):
    """Failure requested through the preprocessor configuration."""


class ProtocolError(AutoSummaryError):
    """Malformed input received from mdBook."""
