"""Search-match highlight injection.

Two halves around the renderer:

1. ``inject_match_markers`` splices marker code points into the raw text
   around each match. Surrounding text is copied segment by segment, so
   every character outside the markers is preserved exactly.
2. ``replace_markers`` turns the markers that survived rendering into
   ``<mark>`` elements with a stable id per match.

The renderer knows nothing about either step.

Known limitation: markers are placed by raw character offset, without
parsing document structure first. A match inside a link target ends up
percent-encoded in an ``href`` and is stripped, so that match has no
scroll target. A match straddling markdown syntax (e.g. ``**bold`` ) may
produce a ``<mark>`` that crosses element boundaries.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from armanlegal.viewer.marker_constants import DEFAULT_MARKERS, MarkerSet

if TYPE_CHECKING:
    from collections.abc import Sequence

    from armanlegal.viewer.search import Match

logger = logging.getLogger(__name__)

CURRENT_MATCH_CLASS = "current-match"

# Splits rendered HTML into tags and text; text content is always escaped
# by the renderer, so a literal "<" never appears outside a tag.
_TAG_SPLIT = re.compile(r"(<[^>]*>)")


def match_element_id(index: int) -> str:
    """DOM id of the ``<mark>`` wrapping match *index*."""
    return f"search-match-{index}"


def inject_match_markers(
    text: str, matches: Sequence[Match], markers: MarkerSet = DEFAULT_MARKERS
) -> str:
    """Wrap every match span in *text* with opening and closing markers.

    Args:
        text: Raw document text.
        matches: Sorted, non-overlapping matches into *text*.
        markers: Marker alphabet; must not occur in *text*.

    Returns:
        *text* unchanged when there are no matches, otherwise the text with
        markers spliced in.
    """
    if not matches:
        return text

    parts: list[str] = []
    last = 0
    for index, match in enumerate(matches):
        parts.append(text[last : match.offset])
        parts.append(markers.open_marker(index))
        parts.append(text[match.offset : match.end])
        parts.append(markers.close)
        last = match.end
    parts.append(text[last:])
    return "".join(parts)


def _mark_open_tag(index: int, current_index: int) -> str:
    css_class = CURRENT_MATCH_CLASS if index == current_index else ""
    return f'<mark id="{match_element_id(index)}" class="{css_class}">'


def replace_markers(
    markup: str, current_index: int, markers: MarkerSet = DEFAULT_MARKERS
) -> str:
    """Replace rendered markers with ``<mark>`` elements.

    Markers inside tags (attribute values, link targets) cannot become
    elements; they are removed so no private-use characters leak into the
    page.

    Args:
        markup: HTML produced by rendering marker-injected text.
        current_index: Index of the active match, or -1.
        markers: The alphabet used by ``inject_match_markers``.

    Returns:
        HTML with ``<mark id="search-match-N">`` around each match.
    """
    any_marker = markers.any_pattern
    encoded_marker = markers.encoded_pattern
    open_marker = markers.open_pattern
    out: list[str] = []
    stripped = 0
    for segment in _TAG_SPLIT.split(markup):
        if not segment:
            continue
        if segment.startswith("<"):
            cleaned, n_plain = any_marker.subn("", segment)
            cleaned, n_encoded = encoded_marker.subn("", cleaned)
            stripped += n_plain + n_encoded
            out.append(cleaned)
            continue
        segment = open_marker.sub(
            lambda m: _mark_open_tag(int(m.group(1)), current_index), segment
        )
        out.append(segment.replace(markers.close, "</mark>"))
    if stripped:
        logger.debug("Stripped %d highlight markers from tag context", stripped)
    return "".join(out)
