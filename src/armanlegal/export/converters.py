"""Synchronous export targets: clipboard, files, print and message sharing.

Each function only builds the payload; performing the side effect
(clipboard write, download, window open, URI launch) is left to the page.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from armanlegal.export.template import ExportDocument
    from armanlegal.locale import ViewerLocale

logger = logging.getLogger(__name__)

MARKDOWN_FILENAME = "document.md"
DOCX_FILENAME = "document.docx"
HTML_FILENAME = "document.html"

MARKDOWN_MEDIA_TYPE = "text/markdown;charset=utf-8"
DOCX_MEDIA_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)
HTML_MEDIA_TYPE = "text/html;charset=utf-8"

# Many mail clients and browsers truncate or refuse longer URIs. Logged,
# not enforced.
SHARE_URL_SOFT_LIMIT = 2000

_SEPARATOR = "\n\n---\n\n"


@dataclass(frozen=True)
class ExportFile:
    """A file ready for download."""

    content: bytes
    filename: str
    media_type: str


def clipboard_text(text: str) -> str:
    """Clipboard copy is the raw document text, no template."""
    return text


def markdown_file(text: str) -> ExportFile:
    """The document text verbatim as a markdown file."""
    return ExportFile(
        content=text.encode("utf-8"),
        filename=MARKDOWN_FILENAME,
        media_type=MARKDOWN_MEDIA_TYPE,
    )


def html_file(document: ExportDocument) -> ExportFile:
    """The full templated document as a standalone HTML file."""
    return ExportFile(
        content=document.html.encode("utf-8"),
        filename=HTML_FILENAME,
        media_type=HTML_MEDIA_TYPE,
    )


def print_script(document: ExportDocument) -> str:
    """JavaScript that prints *document* from a new window.

    The script evaluates to ``true`` once the window is open and
    ``false`` when it was blocked. The print dialog is deferred so the
    result is returned before ``print()`` blocks the page.
    """
    payload = json.dumps(document.html)
    return (
        "(() => {"
        "  const w = window.open('', '_blank');"
        "  if (!w) { return false; }"
        f"  w.document.write({payload});"
        "  w.document.close();"
        "  setTimeout(() => { w.focus(); w.print(); }, 0);"
        "  return true;"
        "})()"
    )


def _check_length(channel: str, url: str) -> str:
    if len(url) > SHARE_URL_SOFT_LIMIT:
        logger.warning(
            "%s share URL is %d chars (soft limit %d); client may truncate it",
            channel,
            len(url),
            SHARE_URL_SOFT_LIMIT,
        )
    return url


def email_share_url(text: str, locale: ViewerLocale) -> str:
    """``mailto:`` URI with the document title as subject."""
    subject = locale.label("docTitle")
    body = f"{locale.label('sharePrefix')}{_SEPARATOR}{text}"
    url = f"mailto:?subject={quote(subject, safe='')}&body={quote(body, safe='')}"
    return _check_length("email", url)


def whatsapp_share_url(text: str, locale: ViewerLocale) -> str:
    """WhatsApp click-to-chat URL without a fixed recipient."""
    message = f"{locale.label('docTitle')}{_SEPARATOR}{text}"
    return _check_length("whatsapp", f"https://wa.me/?text={quote(message, safe='')}")


def support_share_url(text: str, locale: ViewerLocale, phone: str) -> str:
    """WhatsApp URL that sends the document to the support number."""
    message = f"{locale.label('supportPrefix')}{_SEPARATOR}{text}"
    digits = "".join(ch for ch in phone if ch.isdigit())
    return _check_length(
        "support", f"https://wa.me/{digits}?text={quote(message, safe='')}"
    )
