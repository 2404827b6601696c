"""Export menu handlers for the document viewer.

Each handler performs one export target's side effect. Failures are
reported with a notification and logged; they never propagate into the
viewer, so the document and the remaining targets stay usable.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from nicegui import ui

from armanlegal.errors import ExportConversionError
from armanlegal.export.converters import (
    DOCX_FILENAME,
    DOCX_MEDIA_TYPE,
    clipboard_text,
    email_share_url,
    html_file,
    markdown_file,
    print_script,
    support_share_url,
    whatsapp_share_url,
)
from armanlegal.export.docx import (
    DOCX_TARGET,
    DocxFailed,
    convert_html_to_docx,
    get_export_dir,
)
from armanlegal.export.template import ExportDocument, build_export_document

if TYPE_CHECKING:
    from collections.abc import Callable

    from armanlegal.config import ExportConfig
    from armanlegal.export.converters import ExportFile
    from armanlegal.viewer.session import ViewerSession

logger = logging.getLogger(__name__)


def _notify_failure(error: ExportConversionError) -> None:
    """Show a dismissible export error."""
    ui.notify(
        error.message,
        type="negative",
        close_button=True,
        timeout=10000,
    )


def _download(file: ExportFile) -> None:
    ui.download.content(file.content, file.filename, media_type=file.media_type)


def _export_document(
    session: ViewerSession, config: ExportConfig
) -> ExportDocument | None:
    """Build the export template, notifying on failure."""
    try:
        return build_export_document(
            session.text, session.locale, brand_name=config.brand_name
        )
    except ExportConversionError as e:
        _notify_failure(e)
        return None


def copy_to_clipboard(session: ViewerSession) -> None:
    """Copy the raw document text."""
    ui.clipboard.write(clipboard_text(session.text))
    ui.notify(session.locale.label("copied"), type="positive")


def download_markdown(session: ViewerSession) -> None:
    """Download the document text verbatim as ``document.md``."""
    _download(markdown_file(session.text))


def download_html(session: ViewerSession, config: ExportConfig) -> None:
    """Download the templated document as ``document.html``."""
    document = _export_document(session, config)
    if document is not None:
        _download(html_file(document))


async def download_docx(
    session: ViewerSession,
    config: ExportConfig,
    on_busy_change: Callable[[bool], None] | None = None,
) -> None:
    """Convert the templated document to Word and download it.

    Only one conversion per session runs at a time; the menu entry is
    disabled through *on_busy_change* while it is in flight. A result that
    arrives after the viewer was reset for a new document is dropped.
    """
    if not session.try_begin_export(DOCX_TARGET):
        logger.debug("Docx export already in flight; ignoring request")
        return
    generation_id = session.generation_id
    if on_busy_change is not None:
        on_busy_change(True)

    notification = ui.notification(
        message="Generating Word document...",
        spinner=True,
        timeout=None,
        type="ongoing",
    )
    # Force UI update before starting async work
    await asyncio.sleep(0)

    try:
        document = _export_document(session, config)
        if document is None:
            return
        result = await convert_html_to_docx(
            document.html,
            get_export_dir(session.session_key, config.export_dir),
            pandoc_path=config.pandoc_path,
            reference_doc=config.reference_docx,
            filename=DOCX_FILENAME,
        )
        if not session.is_current(generation_id):
            logger.debug("Dropping docx result for stale generation %d", generation_id)
            return
        if isinstance(result, DocxFailed):
            _notify_failure(result.error)
            return
        ui.download.file(result.path, DOCX_FILENAME, media_type=DOCX_MEDIA_TYPE)
    except Exception:
        logger.exception("Unexpected failure during docx export")
        _notify_failure(
            ExportConversionError(DOCX_TARGET, "Word export failed. Please try again.")
        )
    finally:
        notification.dismiss()
        if session.is_current(generation_id):
            session.end_export(DOCX_TARGET)
            if on_busy_change is not None:
                on_busy_change(False)


async def print_document(session: ViewerSession, config: ExportConfig) -> None:
    """Open the templated document in a new window and print it.

    A blocked popup is logged, never raised.
    """
    document = _export_document(session, config)
    if document is None:
        return
    try:
        opened = await ui.run_javascript(print_script(document), timeout=5.0)
    except TimeoutError:
        logger.debug("Print: browser busy with the print dialog, result not awaited")
        return
    except OSError as exc:
        logger.warning("Print: no response from browser (%s)", type(exc).__name__)
        return
    if not opened:
        logger.warning("Print: new window could not be opened (popup blocked?)")


def share_email(session: ViewerSession) -> None:
    ui.navigate.to(email_share_url(session.text, session.locale))


def share_whatsapp(session: ViewerSession) -> None:
    ui.navigate.to(whatsapp_share_url(session.text, session.locale), new_tab=True)


def send_to_support(session: ViewerSession, config: ExportConfig) -> None:
    url = support_share_url(session.text, session.locale, config.support_phone)
    ui.navigate.to(url, new_tab=True)
