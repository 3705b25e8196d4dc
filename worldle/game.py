"""The state of the game being played."""

from __future__ import annotations

import threading
from collections.abc import Callable

from worldle.silhouettes import fetch_silhouette, get_random_country
from worldle.territories import format_territory_name


class GameNotInitializedError(Exception):
    """Raised when the game is queried before one has been started."""

    def __init__(self, message: str = "game not initialized") -> None:
        super().__init__(message)


class GameState:
    """The current answer and its silhouette, safe to share between threads."""

    def __init__(
        self,
        pick_country: Callable[[], str] | None = None,
        fetch_image: Callable[[str], bytes] | None = None,
    ) -> None:
        self._pick_country = pick_country or get_random_country
        self._fetch_image = fetch_image or fetch_silhouette
        self._lock = threading.Lock()
        self._country = ""
        self._image: bytes | None = None

    def start_new_game(self) -> None:
        """Choose a new territory and load its silhouette."""
        with self._lock:
            country = self._pick_country()
            image = self._fetch_image(country)
            self._country = format_territory_name(country)
            self._image = image

    def current_silhouette(self) -> bytes:
        """The silhouette of the current answer."""
        with self._lock:
            if self._image is None:
                raise GameNotInitializedError()
            return self._image

    def country(self) -> str:
        """The current answer in display form, or an empty string before a game."""
        with self._lock:
            return self._country