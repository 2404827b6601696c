"""Markdown to display markup.

``render_markdown`` is the single text-to-HTML conversion used by both the
live viewer and the export template. The viewer calls it on
marker-injected text; export calls it on the original text.
"""

from __future__ import annotations

import html
import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from markdown_it import MarkdownIt

from armanlegal.errors import RenderConversionError
from armanlegal.viewer.highlight import inject_match_markers, replace_markers
from armanlegal.viewer.marker_constants import markers_for

if TYPE_CHECKING:
    from collections.abc import Sequence

    from armanlegal.viewer.search import Match

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _parser() -> MarkdownIt:
    # Raw HTML is disabled: generated text is data, never markup.
    return (
        MarkdownIt("commonmark", {"html": False})
        .enable("table")
        .enable("strikethrough")
    )


def render_markdown(text: str) -> str:
    """Convert markdown text to HTML.

    Raises:
        RenderConversionError: If the markdown cannot be rendered.
    """
    if not text:
        return ""
    try:
        return _parser().render(text)
    except Exception as exc:
        raise RenderConversionError(f"Markdown rendering failed: {exc}") from exc


def raw_text_markup(text: str) -> str:
    """Escaped raw text, used when structured rendering fails."""
    return f'<pre class="raw-document">{html.escape(text)}</pre>'


def render_document(
    text: str,
    matches: Sequence[Match] = (),
    current_index: int = -1,
) -> str:
    """Render document text with search matches highlighted.

    With no matches the result is exactly ``render_markdown(text)``.
    Never raises: a rendering failure falls back to the raw, unannotated
    text.

    Args:
        text: Document text.
        matches: Sorted, non-overlapping matches into *text*.
        current_index: Index of the active match, or -1.

    Returns:
        Display HTML.
    """
    try:
        if not matches:
            return render_markdown(text)
        markers = markers_for(text)
        annotated = inject_match_markers(text, matches, markers)
        return replace_markers(render_markdown(annotated), current_index, markers)
    except (RenderConversionError, LookupError):
        logger.warning(
            "Falling back to raw text (%d chars, %d matches)",
            len(text),
            len(matches),
            exc_info=True,
        )
        return raw_text_markup(text)
