"""Exception types for repofeed.

Errors published on the error channel are tagged by class so a consumer
can tell a failed walk apart from a single unreadable file.
"""

from __future__ import annotations

from typing import Optional


class RepofeedError(Exception):
    """Base class for all repofeed errors."""


class ConfigurationError(RepofeedError):
    """Raised synchronously when the producer cannot be configured."""


class TraversalError(RepofeedError):
    """The directory walk hit an unrecoverable filesystem error."""

    def __init__(self, path: Optional[str], message: str):
        super().__init__(message)
        self.path = path


class ReadError(RepofeedError):
    """A single candidate file could not be read."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path
