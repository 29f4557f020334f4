"""Selenium browser factory."""

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.firefox.service import Service as FirefoxService
from selenium.webdriver.remote.webdriver import WebDriver
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager
from webdriver_manager.microsoft import EdgeChromiumDriverManager

from pomkit.core.config import BrowserType, Host, Settings
from pomkit.exceptions import SessionAcquisitionError
from pomkit.monitoring.logger import get_logger

logger = get_logger(__name__)

BrowserOptions = ChromeOptions | FirefoxOptions | EdgeOptions


class BrowserFactory:
    """Factory for creating Selenium WebDriver instances."""

    @staticmethod
    def _get_chrome_options(headless: bool = True) -> ChromeOptions:
        """Configure Chrome options.

        Args:
            headless: Run in headless mode

        Returns:
            Configured ChromeOptions
        """
        options = ChromeOptions()

        if headless:
            options.add_argument("--headless=new")

        # Performance and stability
        options.add_argument("--no-sandbox")
        options.add_argument("--disable-dev-shm-usage")
        options.add_argument("--disable-gpu")
        options.add_argument("--disable-extensions")
        options.add_argument("--disable-notifications")
        options.add_argument("--window-size=1920,1080")
        options.add_argument("--log-level=3")

        return options

    @staticmethod
    def _get_firefox_options(headless: bool = True) -> FirefoxOptions:
        """Configure Firefox options.

        Args:
            headless: Run in headless mode

        Returns:
            Configured FirefoxOptions
        """
        options = FirefoxOptions()

        if headless:
            options.add_argument("--headless")

        options.add_argument("--width=1920")
        options.add_argument("--height=1080")
        options.set_preference("dom.webnotifications.enabled", False)

        return options

    @staticmethod
    def _get_edge_options(headless: bool = True) -> EdgeOptions:
        """Configure Edge options.

        Args:
            headless: Run in headless mode

        Returns:
            Configured EdgeOptions
        """
        options = EdgeOptions()

        if headless:
            options.add_argument("--headless=new")

        options.add_argument("--no-sandbox")
        options.add_argument("--disable-dev-shm-usage")
        options.add_argument("--disable-gpu")
        options.add_argument("--window-size=1920,1080")

        return options

    @classmethod
    def options_for(cls, settings: Settings, test_name: str | None = None) -> BrowserOptions:
        """Build browser options (and remote capabilities) from settings.

        Args:
            settings: Resolved settings
            test_name: Test name reported to Sauce Labs

        Returns:
            Options for the selected browser
        """
        browser_type = settings.browser_name
        headless = settings.headless and not settings.is_remote

        if browser_type == BrowserType.CHROME:
            options = cls._get_chrome_options(headless)
        elif browser_type == BrowserType.FIREFOX:
            options = cls._get_firefox_options(headless)
        elif browser_type == BrowserType.EDGE:
            options = cls._get_edge_options(headless)
        else:
            raise ValueError(f"Unsupported browser type: {browser_type}")

        if settings.is_remote:
            options.browser_version = settings.browser_version
            options.platform_name = settings.platform_name
            if settings.selenium_host == Host.SAUCELABS:
                sauce_options = {"username": settings.sauce_username}
                if test_name:
                    sauce_options["name"] = test_name
                options.set_capability("sauce:options", sauce_options)

        return options

    @classmethod
    def create(cls, settings: Settings, test_name: str | None = None) -> WebDriver:
        """Create a new WebDriver instance.

        Args:
            settings: Resolved settings
            test_name: Test name reported to remote grids

        Returns:
            Configured WebDriver instance

        Raises:
            SessionAcquisitionError: If the browser could not be started
        """
        browser_type = settings.browser_name
        options = cls.options_for(settings, test_name)

        logger.info(
            f"Creating browser | type={browser_type.value} | host={settings.selenium_host.value}"
        )

        try:
            if settings.is_remote:
                driver = webdriver.Remote(
                    command_executor=settings.remote_endpoint, options=options
                )
            elif browser_type == BrowserType.CHROME:
                service = ChromeService(ChromeDriverManager().install())
                driver = webdriver.Chrome(service=service, options=options)
            elif browser_type == BrowserType.FIREFOX:
                service = FirefoxService(GeckoDriverManager().install())
                driver = webdriver.Firefox(service=service, options=options)
            else:
                service = EdgeService(EdgeChromiumDriverManager().install())
                driver = webdriver.Edge(service=service, options=options)
        except Exception as e:
            raise SessionAcquisitionError(
                f"Could not start {browser_type.value} on {settings.selenium_host.value}: {e}"
            ) from e

        try:
            driver.set_page_load_timeout(settings.page_load_timeout)
            driver.implicitly_wait(settings.implicit_wait)
        except Exception as e:
            try:
                driver.quit()
            except Exception as quit_error:
                logger.warning(f"Failed to quit half-configured browser: {quit_error}")
            raise SessionAcquisitionError(
                f"Could not configure {browser_type.value} timeouts: {e}"
            ) from e

        logger.info(f"Browser created successfully | session_id={driver.session_id}")
        return driver
