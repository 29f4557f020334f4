"""Rich text editor iframe page object."""

from __future__ import annotations

from pomkit.automation.locators import Locator

from .base import BasePage


class IFramePage(BasePage):
    """Page object for the WYSIWYG editor embedded in an iframe."""

    path = "/iframe"
    marker = Locator.id("mce_0_ifr", "Editor iframe")

    _EDITOR_BODY = Locator.id("tinymce")
    _HEADING = Locator.tag("h3")

    def editor_text(self) -> str:
        """Read the editor body from inside the frame."""
        with self.actions.inside_frame(self.marker):
            return self.actions.text_of(self._EDITOR_BODY)

    def heading_text(self) -> str:
        return self.actions.text_of(self._HEADING)
