"""Non-visual state of a description window.

The host window renders whatever page these methods return and wires
its back/forward buttons to ``can_go_back``/``can_go_forward`` (or to the
navigator's ``on_change`` callback).
"""

from __future__ import annotations

import logging
import re

from procedural_completion.history import HistoryNavigator, NavStateListener
from procedural_completion.models import CompletionRecord
from procedural_completion.provider import ProceduralCompletionProvider

logger = logging.getLogger(__name__)

_URL_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def is_url(target: str) -> bool:
    """Whether a link target is an external URL rather than a record name."""
    return bool(_URL_RE.match(target))


class DescriptionSession:
    """Pages shown for one description window, with back/forward history."""

    def __init__(
        self,
        provider: ProceduralCompletionProvider,
        on_change: NavStateListener | None = None,
    ):
        self.provider = provider
        self.history = HistoryNavigator(on_change)

    @property
    def current(self) -> str | None:
        return self.history.current

    @property
    def can_go_back(self) -> bool:
        return self.history.can_go_back

    @property
    def can_go_forward(self) -> bool:
        return self.history.can_go_forward

    def show(self, record: CompletionRecord | None, add_to_history: bool = False) -> str:
        """Display ``record`` and return its page.

        A fresh lookup (``add_to_history=False``) starts a new history with
        this page as the only entry.
        """
        page = self.provider.summary_for(record)
        if not add_to_history:
            self.history.reset()
        self.history.push(page)
        return page

    def follow_link(self, target: str) -> str | None:
        """Follow a link in the displayed page.

        Record-name targets resolve against the provider's catalog and are
        appended to the history. URLs are left to the host; returns None.
        """
        if is_url(target):
            logger.debug("Leaving external link %s to the host", target)
            return None
        record = self.provider.completion_by_name(target)
        if record is None:
            logger.debug("Link target %r not in catalog", target)
        return self.show(record, add_to_history=True)

    def back(self) -> str | None:
        return self.history.back()

    def forward(self) -> str | None:
        return self.history.forward()

    def hide(self) -> None:
        """Window hidden: forget the history."""
        self.history.reset()
