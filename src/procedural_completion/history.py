"""Back/forward history of description pages.

Browser semantics: pushing a page after going back discards the
abandoned forward branch.
"""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

# Called with (can_go_back, can_go_forward) after every state change
NavStateListener = Callable[[bool, bool], None]


class HistoryNavigator:
    """Ordered list of shown pages plus a cursor at the displayed one.

    ``position`` is -1 exactly when no page has been shown; otherwise it
    indexes the displayed page.
    """

    def __init__(self, on_change: NavStateListener | None = None):
        self._pages: list[str] = []
        self._position = -1
        self.on_change = on_change

    def __len__(self) -> int:
        return len(self._pages)

    @property
    def pages(self) -> tuple[str, ...]:
        return tuple(self._pages)

    @property
    def position(self) -> int:
        return self._position

    @property
    def current(self) -> str | None:
        """The displayed page, or None when the history is empty."""
        if self._position < 0:
            return None
        return self._pages[self._position]

    @property
    def can_go_back(self) -> bool:
        return self._position > 0

    @property
    def can_go_forward(self) -> bool:
        return self._position > -1 and self._position < len(self._pages) - 1

    def push(self, page: str) -> None:
        """Show ``page`` after the current one, dropping any forward pages."""
        self._position += 1
        if self._position < len(self._pages):
            self._pages[self._position] = page
            del self._pages[self._position + 1:]
        else:
            self._pages.append(page)
        self._notify()

    def back(self) -> str | None:
        """Move to the previous page and return it; None if already at the first."""
        if not self.can_go_back:
            return None
        self._position -= 1
        self._notify()
        return self._pages[self._position]

    def forward(self) -> str | None:
        """Move to the next page and return it; None if already at the last."""
        if not self.can_go_forward:
            return None
        self._position += 1
        self._notify()
        return self._pages[self._position]

    def reset(self) -> None:
        self._pages.clear()
        self._position = -1
        self._notify()

    def _notify(self) -> None:
        logger.debug(
            "History at %d/%d (back=%s, forward=%s)",
            self._position, len(self._pages), self.can_go_back, self.can_go_forward,
        )
        if self.on_change is not None:
            self.on_change(self.can_go_back, self.can_go_forward)
