"""Streaming document viewer with literal in-document search.

Pipeline per update: find_matches -> inject_match_markers ->
render_markdown -> replace_markers.
"""

from armanlegal.viewer.highlight import (
    inject_match_markers,
    match_element_id,
    replace_markers,
)
from armanlegal.viewer.navigator import AutoScrollController, MatchNavigator, ScrollMode
from armanlegal.viewer.render import raw_text_markup, render_document, render_markdown
from armanlegal.viewer.search import Match, find_matches, match_counter_label
from armanlegal.viewer.session import ViewerSession
from armanlegal.viewer.stream import consume_stream

__all__ = [
    "AutoScrollController",
    "Match",
    "MatchNavigator",
    "ScrollMode",
    "ViewerSession",
    "consume_stream",
    "find_matches",
    "inject_match_markers",
    "match_counter_label",
    "match_element_id",
    "raw_text_markup",
    "render_document",
    "render_markdown",
    "replace_markers",
]
