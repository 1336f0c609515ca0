"""Error types raised while exporting issues.

Every error is fatal. The originating exception is attached with
``raise ... from exc`` so the CLI can print the full cause chain.
"""

from pathlib import Path


class ExportError(Exception):
    """Base class for all export failures."""


class ArgumentError(ExportError):
    """Malformed query string or invalid argument value."""


class AuthError(ExportError):
    """Missing or unusable GitHub token."""


class RequestFailed(ExportError):
    """GitHub answered with a non-success status, or the request never completed.

    Attributes:
        body: Raw response body text, surfaced to the user verbatim
        status_code: HTTP status code, None when no response was received
    """

    def __init__(self, body: str, status_code: int | None = None):
        self.body = body
        self.status_code = status_code
        super().__init__(f"request failed: '{body}'")


class MalformedResponse(ExportError):
    """Response body could not be decoded into the expected record shape."""

    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        super().__init__(f"Could not parse response from server ({endpoint})")


class DirectoryError(ExportError):
    """Output directory could not be created."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Could not create output directory {path}")


class WriteFailed(ExportError):
    """Rendered markdown could not be written to disk."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Could not write {path}")


class TemplateError(ExportError):
    """Markdown template failed to load or render."""


def iter_causes(error: BaseException) -> list[BaseException]:
    """Return the explicit ``__cause__`` chain of an error, outermost first."""
    causes = []
    current = error.__cause__
    while current is not None:
        causes.append(current)
        current = current.__cause__
    return causes
