"""Locators: what to search for, independent of where.

    context.find_element(By.id("login_button"))
    context.find_elements(By.partial_text("Sign"))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, field_validator

from finder.models import InvalidLocatorError, LocatorKind, Node

if TYPE_CHECKING:
    from finder.search.context import SearchContext


class Locator(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: LocatorKind
    value: str

    # Bad input raises InvalidLocatorError rather than ValidationError,
    # whichever constructor is used.

    @field_validator("kind", mode="before")
    @classmethod
    def _check_kind(cls, kind: object) -> LocatorKind:
        try:
            return LocatorKind(kind)
        except ValueError:
            raise InvalidLocatorError(f"Unknown locator kind: {kind!r}") from None

    @field_validator("value", mode="before")
    @classmethod
    def _check_value(cls, value: object) -> str:
        if value is None:
            raise InvalidLocatorError("Locator value is required")
        if not isinstance(value, str):
            raise InvalidLocatorError(f"Locator value must be a string, got {type(value).__name__}")
        return value

    @classmethod
    def from_kind(cls, kind: LocatorKind | str, value: str | None) -> Locator:
        return cls(kind=kind, value=value)

    def find_element(self, context: SearchContext) -> Node:
        if self.kind == LocatorKind.ID:
            return context.find_element_by_id(self.value)
        if self.kind == LocatorKind.TEXT:
            return context.find_element_by_text(self.value)
        return context.find_element_by_partial_text(self.value)

    def find_elements(self, context: SearchContext) -> list[Node]:
        if self.kind == LocatorKind.ID:
            return context.find_elements_by_id(self.value)
        if self.kind == LocatorKind.TEXT:
            return context.find_elements_by_text(self.value)
        return context.find_elements_by_partial_text(self.value)

    def __str__(self) -> str:
        return f"By.{self.kind.value}: {self.value}"


class By:
    """Locator constructors."""

    @staticmethod
    def id(value: str) -> Locator:
        return Locator.from_kind(LocatorKind.ID, value)

    @staticmethod
    def text(value: str) -> Locator:
        return Locator.from_kind(LocatorKind.TEXT, value)

    @staticmethod
    def partial_text(value: str) -> Locator:
        return Locator.from_kind(LocatorKind.PARTIAL_TEXT, value)
