"""Client-side persistence.

The browser keeps two values across reloads: the backend-issued cart id and
the dark theme flag. Both live in the signed, permanent Flask session cookie.
"""

from __future__ import annotations

from typing import MutableMapping, Any

from flask import session

CART_ID_KEY = "cart_id"
THEME_KEY = "delicassy_dark"


class ClientStore:
    """Key/value adapter over the session (or any mapping in tests)."""

    def __init__(self, backing: MutableMapping[str, Any] | None = None) -> None:
        self._backing = backing

    @property
    def data(self) -> MutableMapping[str, Any]:
        return self._backing if self._backing is not None else session

    def get_cart_id(self) -> str | None:
        value = self.data.get(CART_ID_KEY)
        return str(value) if value else None

    def set_cart_id(self, cart_id: str) -> None:
        self.data[CART_ID_KEY] = str(cart_id)

    def get_theme_flag(self) -> bool:
        return self.data.get(THEME_KEY) == "1"

    def set_theme_flag(self, enabled: bool) -> None:
        if enabled:
            self.data[THEME_KEY] = "1"
        else:
            self.data.pop(THEME_KEY, None)


class AppSettings:
    """Process-wide UI preferences handed to the shell.

    Loaded from storage once per request and written back on every change.
    """

    def __init__(self, dark: bool = False) -> None:
        self.dark = dark

    @classmethod
    def load(cls, store: ClientStore) -> "AppSettings":
        return cls(dark=store.get_theme_flag())

    @property
    def theme_class(self) -> str:
        return "dark" if self.dark else ""

    def toggle(self, store: ClientStore) -> bool:
        self.dark = not self.dark
        store.set_theme_flag(self.dark)
        return self.dark
