"""Per-test browser session lifecycle.

A ``SessionLifecycle`` owns exactly one WebDriver session for one test:
it is acquired before the test body runs and released after it, on every
exit path. When the test failed, a screenshot is captured before the
session is quit; a screenshot failure is logged and never replaces the
original test failure.

Usage::

    with SessionLifecycle(settings, "tests/test_login.py::test_valid") as driver:
        login = LoginPage(driver, settings)
        ...
"""

import hashlib
import re
from enum import Enum
from pathlib import Path
from types import TracebackType
from typing import Callable

from selenium.webdriver.remote.webdriver import WebDriver

from pomkit.automation.browser import BrowserFactory
from pomkit.core.config import Settings
from pomkit.exceptions import ScreenshotError, SessionStateError
from pomkit.monitoring.logger import get_logger, log_session_event

logger = get_logger(__name__)

DriverFactory = Callable[[Settings, str | None], WebDriver]

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]+")


class SessionState(str, Enum):
    """Lifecycle states of one test's session."""

    NOT_STARTED = "not_started"
    ACQUIRED = "acquired"
    RELEASED = "released"


def screenshot_name(test_id: str) -> str:
    """Build a deterministic file name from a fully qualified test name.

    Args:
        test_id: Test node id, e.g. ``tests/test_login.py::test_valid[chrome]``

    Returns:
        File name ending in ``.png``
    """
    slug = _UNSAFE_CHARS.sub("_", test_id).strip("_") or "test"
    # Distinct node ids can share a slug, e.g. test[a/b] and test[a_b]
    digest = hashlib.sha1(test_id.encode("utf-8")).hexdigest()[:8]
    return f"{slug}-{digest}.png"


class SessionLifecycle:
    """Acquires and releases one browser session for one test."""

    def __init__(
        self,
        settings: Settings,
        test_id: str,
        factory: DriverFactory = BrowserFactory.create,
    ) -> None:
        """Initialize the lifecycle.

        Args:
            settings: Resolved settings
            test_id: Fully qualified test name
            factory: Callable creating a WebDriver from settings and test name
        """
        self.settings = settings
        self.test_id = test_id
        self._factory = factory
        self._driver: WebDriver | None = None
        self.state = SessionState.NOT_STARTED
        self.screenshot_path: Path | None = None

    @property
    def driver(self) -> WebDriver:
        """Get the live WebDriver.

        Raises:
            SessionStateError: Before acquire() or after release()
        """
        if self.state != SessionState.ACQUIRED or self._driver is None:
            raise SessionStateError(
                f"No live session for {self.test_id} (state={self.state.value})"
            )
        return self._driver

    def acquire(self) -> WebDriver:
        """Start the browser session.

        Returns:
            WebDriver instance

        Raises:
            SessionStateError: If a session was already acquired for this test
            SessionAcquisitionError: If the browser could not be started
        """
        if self.state != SessionState.NOT_STARTED:
            raise SessionStateError(
                f"Session for {self.test_id} already {self.state.value}"
            )

        self._driver = self._factory(self.settings, self.test_id)
        self.state = SessionState.ACQUIRED
        log_session_event(self.test_id, "acquired", self._driver.session_id)
        return self._driver

    def release(self, failed: bool = False) -> None:
        """Release the browser session.

        Args:
            failed: Whether the test failed; triggers a screenshot first
        """
        if self.state != SessionState.ACQUIRED:
            return

        driver = self._driver
        session_id = driver.session_id
        try:
            if failed:
                try:
                    self.screenshot_path = self.capture_screenshot()
                except ScreenshotError as e:
                    logger.error(f"Failure screenshot not saved for {self.test_id}: {e}")
        finally:
            self._driver = None
            self.state = SessionState.RELEASED
            try:
                driver.quit()
            except Exception as e:
                logger.error(f"Error closing browser: {e}")
            log_session_event(self.test_id, "released", session_id, failed=failed)

    def capture_screenshot(self) -> Path:
        """Save a screenshot of the live session under the screenshots dir.

        Returns:
            Path of the written file

        Raises:
            ScreenshotError: If the screenshot could not be written
        """
        path = self.settings.screenshots_dir / screenshot_name(self.test_id)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if not self.driver.save_screenshot(str(path)):
                raise ScreenshotError(f"Driver refused to write {path}")
        except ScreenshotError:
            raise
        except Exception as e:
            raise ScreenshotError(str(e)) from e

        log_session_event(self.test_id, "screenshot", self.driver.session_id, path=str(path))
        return path

    def __enter__(self) -> WebDriver:
        return self.acquire()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.release(failed=exc_type is not None)
