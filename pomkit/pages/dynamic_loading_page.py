"""Dynamic loading page object."""

from __future__ import annotations

from pomkit.automation.locators import Locator

from .base import BasePage, resolve_url


class DynamicLoadingPage(BasePage):
    """Page object for the dynamically loaded element examples.

    Example 1 reveals an element that is hidden on the page; example 2
    renders one that does not exist until loading finishes.
    """

    path = "/dynamic_loading"
    marker = Locator.css("#content .example", "Dynamic loading examples")

    _START_BUTTON = Locator.css("#start button")
    _FINISH_TEXT = Locator.id("finish")

    def load_example(self, example_number: str | int) -> None:
        """Open one example and start loading it."""
        self.actions.visit(resolve_url(self.settings.base_url, f"{self.path}/{example_number}"))
        self.actions.wait_for(self._START_BUTTON, "clickable")
        self.actions.click(self._START_BUTTON)

    def finish_text_present(self, timeout: float | None = None) -> bool:
        return self.actions.wait_until_displayed(self._FINISH_TEXT, timeout)
