# envsettings/ui/state.py
"""
Binding and parameter types for the settings panel.

The panel never owns the values it edits. Each control gets a Binding,
an explicit getter/setter pair, and writes the user's changes back through it.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, Sequence, TypeVar

from envsettings.models.types import ColorScheme, ContentSizeCategory, LayoutDirection
from envsettings.services.exceptions import InvalidLocaleError

# Module logger
logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

Observer = Callable[[T], None]
Unsubscribe = Callable[[], None]


class _ValueCell(Generic[T]):
    """Storage behind Binding.constant(); notifies observers on change."""

    def __init__(self, value: T):
        self._value = value
        self._observers: list[Observer] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        if value == self._value:
            return
        self._value = value
        logger.debug("Binding value changed: %r", value)
        for observer in list(self._observers):
            observer(value)

    def subscribe(self, observer: Observer) -> Unsubscribe:
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe


class Binding(Generic[T]):
    """
    Two-way connection to an externally owned value.

    Reads return the owner's current value, writes go back to the owner and
    observers are called whenever the owner's value changes.
    """

    def __init__(
        self,
        getter: Callable[[], T],
        setter: Callable[[T], None],
        subscribe: Optional[Callable[[Observer], Unsubscribe]] = None,
    ):
        self._getter = getter
        self._setter = setter
        self._subscribe = subscribe

    @classmethod
    def constant(cls, value: T) -> "Binding[T]":
        """Binding backed by its own value cell"""
        cell = _ValueCell(value)
        return cls(cell.get, cell.set, cell.subscribe)

    def get(self) -> T:
        return self._getter()

    def set(self, value: T) -> None:
        self._setter(value)

    @property
    def value(self) -> T:
        return self.get()

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    def observe(self, callback: Observer) -> Unsubscribe:
        """Call callback with the new value after each change.

        Returns a function that removes the observer.
        """
        if self._subscribe is None:
            return lambda: None
        return self._subscribe(callback)

    def map(
        self,
        to_value: Callable[[T], U],
        from_value: Callable[[U], T],
    ) -> "Binding[U]":
        """Derived binding converting values in both directions"""
        source = self

        def subscribe(callback: Observer) -> Unsubscribe:
            return source.observe(lambda v: callback(to_value(v)))

        return Binding(
            lambda: to_value(source.get()),
            lambda v: source.set(from_value(v)),
            subscribe,
        )


class ScreenshotPhase(Enum):
    """Screenshot action states"""
    IDLE = "idle"
    HIDING = "hiding"          # Panel hidden, waiting for the hide to render
    CAPTURING = "capturing"
    RESTORING = "restoring"    # Haptic feedback, then panel shown again


@dataclass
class SettingsParams:
    """
    Values edited by the settings panel.

    locales is the list of locale identifiers offered by the picker;
    the other fields are bindings to values owned by the caller.
    """
    locales: Sequence[str]
    locale: Binding[str]
    color_scheme: Binding[ColorScheme]
    text_size: Binding[ContentSizeCategory]
    layout_direction: Binding[LayoutDirection]
    accessibility_enabled: Binding[bool]

    def __post_init__(self):
        self.locales = list(self.locales)
        if not self.locales:
            raise InvalidLocaleError(self.locale.get(), self.locales)
        if self.locale.get() not in self.locales:
            raise InvalidLocaleError(self.locale.get(), self.locales)

    @classmethod
    def preview(cls) -> "SettingsParams":
        """Sample parameters for previews and demos"""
        return cls(
            locales=["en", "ru", "fr"],
            locale=Binding.constant("en"),
            color_scheme=Binding.constant(ColorScheme.DARK),
            text_size=Binding.constant(ContentSizeCategory.MEDIUM),
            layout_direction=Binding.constant(LayoutDirection.LEFT_TO_RIGHT),
            accessibility_enabled=Binding.constant(False),
        )
