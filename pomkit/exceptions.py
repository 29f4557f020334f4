"""Exceptions raised by the page-object framework."""


class PomkitError(Exception):
    """Base exception for all framework failures."""


class WrongPageError(PomkitError):
    """A page object landed somewhere its marker element is missing."""

    def __init__(self, page: str, url: str, marker: object) -> None:
        self.page = page
        self.url = url
        self.marker = marker
        super().__init__(f"{page} expected marker {marker} at {url}, but it was not found")


class SessionAcquisitionError(PomkitError):
    """Browser session could not be started."""


class SessionStateError(PomkitError):
    """Session handle used outside its acquire/release window."""


class ScreenshotError(PomkitError):
    """Failure screenshot could not be written."""
