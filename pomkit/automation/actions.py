"""Element interactions and waits for page objects."""

from contextlib import contextmanager
from typing import Generator

from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
)
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.select import Select
from selenium.webdriver.support.ui import WebDriverWait

from pomkit.automation.locators import Locator
from pomkit.core.config import Settings
from pomkit.monitoring.logger import get_logger

logger = get_logger(__name__)

WAIT_CONDITIONS = {
    "present": EC.presence_of_element_located,
    "visible": EC.visibility_of_element_located,
    "clickable": EC.element_to_be_clickable,
    "invisible": EC.invisibility_of_element_located,
}


class Actions:
    """Synchronous interactions against one WebDriver session.

    Actions that need an element let Selenium's not-found errors propagate.
    State queries (``is_*`` and ``wait_until_*``) answer False instead.
    """

    def __init__(self, driver: WebDriver, settings: Settings) -> None:
        """Initialize actions.

        Args:
            driver: Live WebDriver session
            settings: Resolved settings (for default wait timeout)
        """
        self.driver = driver
        self._default_timeout = settings.explicit_wait

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def visit(self, url: str) -> None:
        logger.debug(f"Navigating to: {url}")
        self.driver.get(url)

    @property
    def current_url(self) -> str:
        return self.driver.current_url

    def wait_for_page_load(self, timeout: float | None = None) -> bool:
        """Wait for document.readyState to reach complete.

        Returns:
            True if page loaded before the timeout
        """
        if timeout is None:
            timeout = self._default_timeout
        try:
            WebDriverWait(self.driver, timeout).until(
                lambda d: d.execute_script("return document.readyState") == "complete"
            )
            return True
        except TimeoutException:
            logger.warning("Page load timeout")
            return False

    # ------------------------------------------------------------------
    # Lookup and waits
    # ------------------------------------------------------------------

    def find(self, locator: Locator) -> WebElement:
        return self.driver.find_element(*locator)

    def find_all(self, locator: Locator) -> list[WebElement]:
        return self.driver.find_elements(*locator)

    def wait_for(
        self,
        locator: Locator,
        condition: str = "visible",
        timeout: float | None = None,
    ) -> WebElement | bool:
        """Wait for element to be present/visible/clickable/invisible.

        Args:
            locator: Element locator
            condition: Wait condition (present, visible, clickable, invisible)
            timeout: Wait timeout in seconds

        Returns:
            WebElement when found (True for ``invisible``)

        Raises:
            ValueError: If the condition is unknown
            TimeoutException: If the condition is not met within timeout
        """
        if condition not in WAIT_CONDITIONS:
            raise ValueError(f"Unknown wait condition: {condition}")

        if timeout is None:
            timeout = self._default_timeout
        wait = WebDriverWait(self.driver, timeout)
        return wait.until(
            WAIT_CONDITIONS[condition](locator.as_tuple()),
            message=f"{locator} not {condition} after {timeout}s",
        )

    # ------------------------------------------------------------------
    # Interactions
    # ------------------------------------------------------------------

    def click(self, locator: Locator) -> None:
        self.find(locator).click()
        logger.debug(f"Clicked {locator}")

    def type(self, locator: Locator, text: str, clear: bool = True) -> None:
        """Send keys to an input field.

        Args:
            locator: Input locator
            text: Text to type
            clear: Clear existing text first
        """
        element = self.find(locator)
        if clear:
            element.clear()
        element.send_keys(text)
        logger.debug(f"Typed into {locator} (length={len(text)})")

    def submit(self, locator: Locator) -> None:
        self.find(locator).submit()

    def text_of(self, locator: Locator) -> str:
        return self.find(locator).text.strip()

    def attribute_of(self, locator: Locator, attribute: str) -> str | None:
        return self.find(locator).get_attribute(attribute)

    def select(self, locator: Locator, select_by: str = "text", select_value: str = "") -> None:
        """Select option from dropdown.

        Args:
            locator: Select element locator
            select_by: Selection method (value, text, index)
            select_value: Value to select

        Raises:
            ValueError: If select_by is unknown
        """
        if select_by not in ("value", "text", "index"):
            raise ValueError(f"Invalid select_by: {select_by}")

        select = Select(self.find(locator))

        if select_by == "value":
            select.select_by_value(select_value)
        elif select_by == "text":
            select.select_by_visible_text(select_value)
        else:
            select.select_by_index(int(select_value))

        logger.debug(f"Selected dropdown option: {select_value}")

    def hover(self, locator: Locator) -> None:
        ActionChains(self.driver).move_to_element(self.find(locator)).perform()

    # ------------------------------------------------------------------
    # State queries
    # ------------------------------------------------------------------

    def is_displayed(self, locator: Locator) -> bool:
        """Check if element is displayed right now.

        Returns:
            False when the element is absent, stale or hidden
        """
        try:
            return self.find(locator).is_displayed()
        except (NoSuchElementException, StaleElementReferenceException):
            logger.debug(f"Element not displayed: {locator}")
            return False

    def is_present(self, locator: Locator) -> bool:
        return len(self.find_all(locator)) > 0

    def wait_until_displayed(self, locator: Locator, timeout: float | None = None) -> bool:
        """Wait for an element to become visible.

        Returns:
            True if visible within timeout, False otherwise
        """
        try:
            self.wait_for(locator, "visible", timeout)
            return True
        except TimeoutException:
            logger.debug(f"Element not displayed within timeout: {locator}")
            return False

    # ------------------------------------------------------------------
    # Cookies
    # ------------------------------------------------------------------

    def get_cookie(self, name: str) -> dict | None:
        return self.driver.get_cookie(name)

    def add_cookie(self, name: str, value: str, **extra) -> None:
        self.driver.add_cookie({"name": name, "value": value, **extra})

    def delete_cookies(self) -> None:
        self.driver.delete_all_cookies()

    # ------------------------------------------------------------------
    # Frames and windows
    # ------------------------------------------------------------------

    def switch_to_frame(self, frame: Locator | str) -> None:
        """Switch into an iframe.

        Args:
            frame: Locator of the iframe element, or its name/id
        """
        target = self.find(frame) if isinstance(frame, Locator) else frame
        self.driver.switch_to.frame(target)
        logger.debug(f"Switched to frame {frame}")

    def switch_to_default_content(self) -> None:
        self.driver.switch_to.default_content()

    @contextmanager
    def inside_frame(self, frame: Locator | str) -> Generator[None, None, None]:
        """Run a block inside an iframe, switching back afterwards."""
        self.switch_to_frame(frame)
        try:
            yield
        finally:
            self.switch_to_default_content()

    def switch_to_window(self, window_handle: str | None = None) -> None:
        """Switch to window/tab.

        Args:
            window_handle: Window handle (None for last opened)
        """
        if window_handle is None:
            window_handle = self.driver.window_handles[-1]
        self.driver.switch_to.window(window_handle)
