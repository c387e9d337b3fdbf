"""Exception hierarchy for the Spring starter client.

Every failure is terminal for the current run. Each exception records the
phase it happened in so the CLI can tell the user *where* things went wrong.
"""

from __future__ import annotations

from pathlib import Path


PHASE_NAMES: dict[str, str] = {
    "catalog": "catalog fetch",
    "request": "request assembly",
    "download": "project download",
    "extract": "archive extraction",
}


class StarterError(Exception):
    """Base class for all errors raised while generating a project."""

    phase: str = "unknown"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @property
    def phase_name(self) -> str:
        return PHASE_NAMES.get(self.phase, self.phase)


class CatalogUnavailable(StarterError):
    """The catalog endpoint could not be reached or answered with a non-200 status."""

    phase = "catalog"


class CatalogMalformed(StarterError):
    """The catalog body is not JSON or does not have the expected nested shape."""

    phase = "catalog"


class EncodingFailure(StarterError):
    """A configuration field could not be encoded into the request URL."""

    phase = "request"

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        super().__init__(f"Cannot encode field '{field}': {reason}")


class DownloadFailed(StarterError):
    """The generation request failed or the archive could not be saved."""

    phase = "download"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ExtractionFailed(StarterError):
    """The downloaded archive could not be unpacked.

    The archive itself is left on disk so it can be extracted by hand.
    """

    phase = "extract"

    def __init__(self, message: str, archive_path: Path) -> None:
        self.archive_path = archive_path
        super().__init__(message)


class TransportError(Exception):
    """Raised by a transport when a request does not produce a 200 response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
