"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from typing import Callable
from unittest.mock import MagicMock

import pytest
from selenium.common.exceptions import NoSuchElementException

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pomkit.automation.locators import Locator  # noqa: E402
from pomkit.core.config import Settings  # noqa: E402


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings with short waits and output under tmp_path."""
    return Settings(
        _env_file=None,
        base_url="http://example.test",
        explicit_wait=0.05,
        screenshots_dir=tmp_path / "screenshots",
        results_dir=tmp_path / "results",
        logs_dir=tmp_path / "logs",
        ci=False,
    )


def make_fake_driver(elements: dict[Locator, MagicMock] | None = None) -> MagicMock:
    """Build a fake WebDriver serving only the given elements.

    Looking up any other locator raises NoSuchElementException, like a page
    where the element is absent.
    """
    page: dict[tuple[str, str], MagicMock] = {
        locator.as_tuple(): element for locator, element in (elements or {}).items()
    }

    driver = MagicMock()
    driver.session_id = "session-123"
    driver.page = page
    driver.save_screenshot.return_value = True

    def find_element(by, value):
        try:
            return page[(by, value)]
        except KeyError:
            raise NoSuchElementException(f"{by}={value}") from None

    def find_elements(by, value):
        return [page[(by, value)]] if (by, value) in page else []

    driver.find_element.side_effect = find_element
    driver.find_elements.side_effect = find_elements
    return driver


@pytest.fixture
def fake_driver() -> Callable[..., MagicMock]:
    """Factory for fake drivers: ``fake_driver({locator: element})``."""
    return make_fake_driver


@pytest.fixture
def element() -> Callable[..., MagicMock]:
    """Factory for visible fake elements."""

    def _element(text: str = "", displayed: bool = True, tag_name: str = "div") -> MagicMock:
        el = MagicMock()
        el.text = text
        el.tag_name = tag_name
        el.is_displayed.return_value = displayed
        el.is_enabled.return_value = True
        return el

    return _element
