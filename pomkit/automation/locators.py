"""Element locators."""

from dataclasses import dataclass, field
from typing import Any, Iterator

from selenium.webdriver.common.by import By

BY_MAP = {
    "css": By.CSS_SELECTOR,
    "xpath": By.XPATH,
    "id": By.ID,
    "class": By.CLASS_NAME,
    "name": By.NAME,
    "tag": By.TAG_NAME,
    "link_text": By.LINK_TEXT,
    "partial_link_text": By.PARTIAL_LINK_TEXT,
}


@dataclass(frozen=True)
class Locator:
    """A (strategy, value) pair identifying one element on a page."""

    by: str
    value: str
    description: str = field(default="", compare=False)

    def as_tuple(self) -> tuple[str, str]:
        """Get the (by, value) tuple Selenium expects.

        Returns:
            Locator tuple
        """
        return (self.by, self.value)

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_tuple())

    def __str__(self) -> str:
        return f"{self.by}={self.value}"

    @classmethod
    def id(cls, element_id: str, description: str = "") -> "Locator":
        return cls(By.ID, element_id, description)

    @classmethod
    def css(cls, selector: str, description: str = "") -> "Locator":
        return cls(By.CSS_SELECTOR, selector, description)

    @classmethod
    def xpath(cls, selector: str, description: str = "") -> "Locator":
        return cls(By.XPATH, selector, description)

    @classmethod
    def name(cls, element_name: str, description: str = "") -> "Locator":
        return cls(By.NAME, element_name, description)

    @classmethod
    def class_name(cls, class_name: str, description: str = "") -> "Locator":
        return cls(By.CLASS_NAME, class_name, description)

    @classmethod
    def link_text(cls, text: str, description: str = "") -> "Locator":
        return cls(By.LINK_TEXT, text, description)

    @classmethod
    def tag(cls, tag_name: str, description: str = "") -> "Locator":
        return cls(By.TAG_NAME, tag_name, description)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Locator":
        """Create locator from dictionary.

        Args:
            data: Dictionary with ``type`` (css, id, xpath, ...) and ``value``

        Returns:
            Locator instance

        Raises:
            ValueError: If the strategy type is unknown
        """
        by_type = data.get("type", "css")
        if by_type not in BY_MAP:
            raise ValueError(f"Unknown locator type: {by_type}")
        return cls(BY_MAP[by_type], data["value"], data.get("description", ""))
