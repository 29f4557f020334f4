"""Base page object.

Each page class binds one page's locators and behaviour behind
intention-revealing methods. Constructing a page navigates to it and
checks that the page's ``marker`` element is present; a missing marker
raises ``WrongPageError`` right away, so a test never interacts with or
asserts on a page it did not land on.

State queries on pages return booleans and never raise for missing
elements. The landing check is the only assertion a page makes.
"""

from __future__ import annotations

from urllib.parse import urlparse

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.remote.webdriver import WebDriver

from pomkit.automation.actions import Actions
from pomkit.automation.locators import Locator
from pomkit.core.config import Settings
from pomkit.exceptions import WrongPageError
from pomkit.monitoring.logger import get_logger

logger = get_logger(__name__)


def resolve_url(base_url: str, path: str | None) -> str:
    """Resolve the navigation target for a page.

    Absolute URLs are returned unchanged; anything else is appended to
    ``base_url`` as-is.
    """
    if not path:
        return base_url
    parsed = urlparse(path)
    if parsed.scheme and parsed.netloc:
        return path
    return base_url + path


class BasePage:
    """Abstract base for all page objects."""

    # Subclasses override with the page-specific path segment and marker.
    path: str = ""
    marker: Locator | None = None

    def __init__(self, driver: WebDriver, settings: Settings, path: str | None = None) -> None:
        self.driver = driver
        self.settings = settings
        self.actions = Actions(driver, settings)
        self.url = resolve_url(settings.base_url, self.path if path is None else path)

        self.actions.visit(self.url)
        self.verify_page()

    def verify_page(self, timeout: float | None = None) -> None:
        """Check that the marker element is present.

        Raises:
            WrongPageError: If the marker is absent within timeout
        """
        if self.marker is None:
            return
        try:
            self.actions.wait_for(self.marker, "present", timeout)
        except TimeoutException as e:
            logger.warning(f"{type(self).__name__} marker {self.marker} missing at {self.url}")
            raise WrongPageError(type(self).__name__, self.url, self.marker) from e

    @property
    def title(self) -> str:
        return self.driver.title

    @property
    def current_url(self) -> str:
        return self.driver.current_url
