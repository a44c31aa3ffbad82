"""Error types raised by the calendar sync pipeline.

Every step fails fast with one of these; nothing is retried or rolled back.
"""
from __future__ import annotations


class CalendarSyncError(RuntimeError):
    """Base class for all pipeline failures."""


class ConfigError(CalendarSyncError):
    """A required environment variable is missing or blank."""


class NetworkError(CalendarSyncError):
    """An HTTP fetch of the landing page or the PDF did not succeed."""


class ExternalApiError(CalendarSyncError):
    """The generative model or the task tracker rejected a request."""


class ParseError(CalendarSyncError):
    """A schema file, model response or cached artifact is not valid."""


class NotFoundError(CalendarSyncError):
    """No calendar link could be found on the landing page."""
