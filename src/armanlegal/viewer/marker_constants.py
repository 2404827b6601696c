"""Marker format for search-match highlighting.

Markers are spliced into the raw document text at match offsets before
markdown rendering. They are built from private-use code points, so the
renderer treats them as ordinary text and never reads them as syntax.
After rendering they are replaced with ``<mark>`` elements.

Format: open{index}sep ... close around each match.

A document may itself contain private-use characters. ``markers_for``
picks a marker triple the text does not contain, so those characters pass
through untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

_PRIVATE_USE_FIRST = 0xE000
_PRIVATE_USE_LAST = 0xF8FF


@dataclass(frozen=True)
class MarkerSet:
    """Three distinct code points forming one marker alphabet."""

    open: str
    sep: str
    close: str

    def open_marker(self, index: int) -> str:
        return f"{self.open}{index}{self.sep}"

    @property
    def open_pattern(self) -> re.Pattern[str]:
        """Opening marker; group 1 is the match index."""
        return re.compile(re.escape(self.open) + r"(\d+)" + re.escape(self.sep))

    @property
    def any_pattern(self) -> re.Pattern[str]:
        """Any marker fragment, opening or closing."""
        return re.compile(
            re.escape(self.open)
            + r"\d+"
            + re.escape(self.sep)
            + "|"
            + re.escape(self.close)
        )

    @property
    def encoded_pattern(self) -> re.Pattern[str]:
        """Percent-encoded form produced when a marker lands in a link target."""
        open_, sep, close = (
            re.escape(quote(ch, safe="")) for ch in (self.open, self.sep, self.close)
        )
        return re.compile(rf"{open_}\d+{sep}|{close}", re.IGNORECASE)


DEFAULT_MARKERS = MarkerSet("\ue000", "\ue001", "\ue002")

MARK_OPEN = DEFAULT_MARKERS.open
MARK_SEP = DEFAULT_MARKERS.sep
MARK_CLOSE = DEFAULT_MARKERS.close


def markers_for(text: str) -> MarkerSet:
    """Return the first marker set none of whose code points occur in *text*.

    Raises:
        LookupError: If the text uses every private-use triple.
    """
    for first in range(_PRIVATE_USE_FIRST, _PRIVATE_USE_LAST - 1, 3):
        chars = (chr(first), chr(first + 1), chr(first + 2))
        if not any(ch in text for ch in chars):
            return MarkerSet(*chars)
    raise LookupError("No free private-use marker set for this text")
