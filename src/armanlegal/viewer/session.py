"""Viewer session: the single owner of document, search and render state.

Every mutator runs one complete update cycle (index -> inject -> render)
before returning, so ``matches`` and ``markup`` always describe the same
text, query and current index. Views read the session; only the producer
(via ``append``/``finish``/``fail``) and user actions mutate it.
"""

from __future__ import annotations

import logging
from uuid import uuid4
from typing import TYPE_CHECKING

from armanlegal.errors import ProducerError
from armanlegal.viewer.highlight import match_element_id
from armanlegal.viewer.navigator import AutoScrollController, MatchNavigator, ScrollMode
from armanlegal.viewer.render import render_document
from armanlegal.viewer.search import find_matches, match_counter_label

if TYPE_CHECKING:
    from armanlegal.locale import ViewerLocale
    from armanlegal.viewer.search import Match

logger = logging.getLogger(__name__)


class ViewerSession:
    """State for one document viewer.

    Attributes:
        locale: Language and direction record supplied by the caller.
        session_key: Unique per session; names its export directory.
        generation_id: Incremented on every new request; async export
            results tagged with an older id are discarded.
    """

    def __init__(self, locale: ViewerLocale) -> None:
        self.locale = locale
        self.session_key = uuid4().hex
        self.generation_id = 0
        self._text = ""
        self._in_progress = False
        self._error: ProducerError | None = None
        self._query = ""
        self._matches: tuple[Match, ...] = ()
        self._markup = ""
        self._navigator = MatchNavigator()
        self._scroll = AutoScrollController()
        self._exports_in_flight: set[str] = set()

    # -- read-only views -----------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    @property
    def query(self) -> str:
        return self._query

    @property
    def matches(self) -> tuple[Match, ...]:
        return self._matches

    @property
    def current_index(self) -> int:
        return self._navigator.index

    @property
    def markup(self) -> str:
        """Rendered document, or empty while a producer error is shown."""
        if self._error is not None:
            return ""
        return self._markup

    @property
    def error(self) -> str | None:
        return str(self._error) if self._error is not None else None

    @property
    def is_streaming(self) -> bool:
        return self._in_progress

    @property
    def is_complete(self) -> bool:
        return not self._in_progress and bool(self._text) and self._error is None

    @property
    def search_open(self) -> bool:
        return self._scroll.search_open

    @property
    def scroll_mode(self) -> ScrollMode:
        return self._scroll.mode

    @property
    def counter_label(self) -> str:
        return match_counter_label(self.current_index, len(self._matches))

    @property
    def current_element_id(self) -> str | None:
        """DOM id of the active match, or None when there is none."""
        if self.current_index < 0:
            return None
        return match_element_id(self.current_index)

    # -- producer side -------------------------------------------------------

    def begin_generation(self) -> None:
        """Reset for a new request and start following appended text."""
        self.generation_id += 1
        self._text = ""
        self._in_progress = True
        self._error = None
        self._query = ""
        self._exports_in_flight.clear()
        self._scroll.start()
        self._update(query_changed=True)
        logger.debug("Generation %d started", self.generation_id)

    def append(self, chunk: str) -> bool:
        """Append streamed text.

        Returns:
            True when the view should scroll to the end.

        Raises:
            RuntimeError: If the document is already frozen.
        """
        if not self._in_progress:
            raise RuntimeError("Cannot append to a completed document")
        if not chunk:
            return False
        self._text += chunk
        self._update(query_changed=False)
        return self._scroll.on_append()

    def finish(self) -> None:
        """Freeze the document; the producer signalled completion."""
        self._in_progress = False
        self._scroll.complete()
        logger.debug(
            "Generation %d complete (%d chars)", self.generation_id, len(self._text)
        )

    def fail(self, message: str) -> None:
        """Record a producer error, ending this generation attempt."""
        self._in_progress = False
        self._error = ProducerError(message)
        self._scroll.complete()
        logger.warning("Generation %d failed: %s", self.generation_id, message)

    # -- search --------------------------------------------------------------

    def open_search(self) -> None:
        self._scroll.open_search()

    def close_search(self) -> None:
        self._scroll.close_search()

    def toggle_search(self) -> bool:
        """Toggle the search panel; returns the new visibility."""
        if self._scroll.search_open:
            self.close_search()
        else:
            self.open_search()
        return self._scroll.search_open

    def set_query(self, query: str) -> str | None:
        """Replace the search query.

        Returns:
            DOM id of the match to scroll to, or None.
        """
        query = query or ""
        if query == self._query:
            return self.current_element_id
        self._query = query
        self._update(query_changed=True)
        return self.current_element_id

    def next_match(self) -> str | None:
        if not self._matches:
            return None
        self._navigator.next()
        self._rerender()
        return self.current_element_id

    def previous_match(self) -> str | None:
        if not self._matches:
            return None
        self._navigator.previous()
        self._rerender()
        return self.current_element_id

    # -- export bookkeeping --------------------------------------------------

    def try_begin_export(self, target: str) -> bool:
        """Mark *target* in flight; False if it is already running."""
        if target in self._exports_in_flight:
            return False
        self._exports_in_flight.add(target)
        return True

    def end_export(self, target: str) -> None:
        self._exports_in_flight.discard(target)

    def export_in_flight(self, target: str) -> bool:
        return target in self._exports_in_flight

    def is_current(self, generation_id: int) -> bool:
        return generation_id == self.generation_id

    # -- update cycle --------------------------------------------------------

    def _update(self, *, query_changed: bool) -> None:
        self._matches = find_matches(self._text, self._query)
        total = len(self._matches)
        previous = self._navigator.index
        self._navigator.reset(total, query_active=bool(self._query))
        # Text only grows, so earlier matches keep their positions.
        if not query_changed and 0 <= previous < total:
            self._navigator.index = previous
        self._rerender()

    def _rerender(self) -> None:
        self._markup = render_document(
            self._text, self._matches, self._navigator.index
        )
