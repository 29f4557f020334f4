"""pomkit - page-object test framework for Selenium WebDriver."""

from .core.config import Settings, get_settings
from .exceptions import (
    PomkitError,
    ScreenshotError,
    SessionAcquisitionError,
    SessionStateError,
    WrongPageError,
)
from .lifecycle import SessionLifecycle, SessionState

__version__ = "0.1.0"

__all__ = [
    "PomkitError",
    "ScreenshotError",
    "SessionAcquisitionError",
    "SessionLifecycle",
    "SessionState",
    "SessionStateError",
    "Settings",
    "WrongPageError",
    "get_settings",
]
