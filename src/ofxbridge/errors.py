"""Exception types raised while loading and parsing OFX documents."""

from __future__ import annotations


class OfxError(Exception):
    """Base class for every failure surfaced by ``ofxbridge``."""


class SourceNotFoundError(OfxError, FileNotFoundError):
    """Raised when an OFX source path does not exist."""


class MarkupParseError(OfxError, ValueError):
    """Raised when the normalized markup is still not well-formed."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(f'Failed to parse OFX: {"; ".join(self.errors)}')


class MissingBlockError(OfxError, ValueError):
    """Raised when a mandatory OFX aggregate is absent from the tree."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f'Required OFX block missing: {path}')


class DateFormatError(OfxError, ValueError):
    """Raised when a date field matches none of the supported notations."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f'Failed to parse OFX date: {text!r}')


class AccountSelectionError(OfxError, LookupError):
    """Raised when no single bank account can be selected for a request."""
