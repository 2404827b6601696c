"""Match navigation and auto-scroll state.

The viewport follows one of two things: the end of the document while it is
streaming in, or the selected search match. Opening search or finishing
generation hands control from the first to the second.
"""

from __future__ import annotations

from enum import Enum


class ScrollMode(Enum):
    """What the viewport is tracking."""

    STREAMING = "streaming"  # follow newly appended text
    IDLE = "idle"  # generation complete or search active


class MatchNavigator:
    """Circular cursor over the current match set.

    ``index`` stays in ``[-1, total - 1]``; -1 means no active match and is
    only possible when there are no matches or no query.
    """

    def __init__(self) -> None:
        self.total = 0
        self.index = -1

    def reset(self, total: int, *, query_active: bool) -> int:
        """Point at the first match of a freshly computed match set."""
        self.total = total
        self.index = 0 if query_active and total > 0 else -1
        return self.index

    def next(self) -> int:
        """Advance to the following match, wrapping at the end."""
        if self.total:
            self.index = (self.index + 1) % self.total
        return self.index

    def previous(self) -> int:
        """Step back to the preceding match, wrapping at the start."""
        if self.total:
            self.index = (self.index - 1 + self.total) % self.total
        return self.index


class AutoScrollController:
    """Decides whether an append should scroll the viewport to the end."""

    def __init__(self) -> None:
        self.mode = ScrollMode.IDLE
        self.search_open = False

    def start(self) -> None:
        self.mode = ScrollMode.STREAMING
        self.search_open = False

    def complete(self) -> None:
        self.mode = ScrollMode.IDLE

    def open_search(self) -> None:
        self.search_open = True
        self.mode = ScrollMode.IDLE

    def close_search(self) -> None:
        self.search_open = False

    def on_append(self) -> bool:
        """Return True when newly appended text should be scrolled into view."""
        return self.mode is ScrollMode.STREAMING and not self.search_open
