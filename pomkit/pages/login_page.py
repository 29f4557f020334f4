"""Login page object."""

from __future__ import annotations

from pomkit.automation.locators import Locator

from .base import BasePage


class LoginPage(BasePage):
    """Page object for the form authentication screen."""

    path = "/login"
    marker = Locator.id("login", "Login form")

    # Locator constants
    _USERNAME = Locator.id("username")
    _PASSWORD = Locator.id("password")
    _SUBMIT = Locator.css("button[type='submit']")
    _SUCCESS_MESSAGE = Locator.css(".flash.success")
    _FAILURE_MESSAGE = Locator.css(".flash.error")

    def with_credentials(self, username: str, password: str) -> None:
        """Fill both fields and submit."""
        self.actions.type(self._USERNAME, username)
        self.actions.type(self._PASSWORD, password)
        self.actions.click(self._SUBMIT)

    def success_message_present(self) -> bool:
        return self.actions.is_displayed(self._SUCCESS_MESSAGE)

    def failure_message_present(self) -> bool:
        return self.actions.is_displayed(self._FAILURE_MESSAGE)
