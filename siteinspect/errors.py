# siteinspect/errors.py

from __future__ import annotations


class AnalyzerError(Exception):
    """Base class for analysis failures."""


class MissingInput(AnalyzerError, ValueError):
    """Caller omitted the url / content field."""


class InvalidUrl(AnalyzerError, ValueError):
    """The normalized URL has no usable scheme or host."""


class FetchFailed(AnalyzerError):
    """Network, DNS or timeout error while downloading the page."""

    def __init__(self, url: str, cause: BaseException):
        super().__init__(f"Could not fetch {url}: {cause}")
        self.url = url
        self.cause = cause


class ParseFailed(AnalyzerError):
    """The HTML parser gave up on the downloaded document."""
