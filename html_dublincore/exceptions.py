"""
Custom exceptions for the Dublin Core extractor.

Error philosophy:
  - InvalidHTMLError    → FAIL HARD: nothing to scan, construction stops.
  - UnknownElementError → FAIL HARD: lookup asked for a name outside the vocabulary.
  - TokenizerError      → FAIL HARD: every parser backend rejected the document.

Malformed DC meta tags are NOT exceptions. They are collected as plain
diagnostic strings on the DublinCore object and the scan carries on.
"""

from typing import Optional


class DublinCoreError(Exception):
    """Base exception for all Dublin Core extractor errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidHTMLError(DublinCoreError, ValueError):
    """Raised when DublinCore() is given empty or non-string HTML."""
    pass


class UnknownElementError(DublinCoreError, ValueError):
    """
    Raised when a lookup names something that is not a Dublin Core element.

    Lookups that simply find nothing never raise; they return an empty
    list or a placeholder Element instead.
    """

    def __init__(self, name: str, details: Optional[dict] = None):
        super().__init__(f"invalid Dublin Core element: {name!r}", details)
        self.name = name


class TokenizerError(DublinCoreError):
    """Raised when no parser backend could build a tree from the HTML."""

    def __init__(self, message: str, backends: list[str], details: Optional[dict] = None):
        super().__init__(message, details)
        self.backends = backends  # backends tried, in order
