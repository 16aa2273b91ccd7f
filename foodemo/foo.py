"""Foo instances, their settings and styles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Style(Enum):
    """The style of a foo. The default style is ``STANDARD``."""

    STANDARD = "standard"
    BAR = "bar"


class FooError(Exception):
    """Raised when working with a foo goes wrong."""

    def __init__(self, message: str = "Invalid foo") -> None:
        super().__init__(message)


@dataclass
class Settings:
    """The settings available to configure a foo."""

    style: Style = Style.STANDARD


@dataclass
class _FooState:
    id: int | None = None
    settings: Settings = field(default_factory=Settings)


class Foo:
    """An instance of a foo.

    ``id`` is the unique id of the foo, or ``None`` if it is new and unsaved.
    """

    def __init__(self, id: int | None = None, settings: Settings | None = None) -> None:
        self.id = id
        self._settings = settings if settings is not None else Settings()

    @property
    def settings(self) -> Settings:
        """The foo's settings."""
        return self._settings

    def __repr__(self) -> str:
        return f"Foo(id={self.id!r}, settings={self._settings!r})"