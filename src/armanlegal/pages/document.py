"""Document drafting page.

A prompt box on top of the document viewer. Pressing generate starts a
new generation in the page's ``ViewerSession`` and streams Claude's
output into it.

Route: /
"""

from __future__ import annotations

import logging
from functools import partial

from nicegui import ui

from armanlegal.config import get_settings
from armanlegal.export.docx import remove_export_dir
from armanlegal.llm.client import DocumentDrafter
from armanlegal.locale import ViewerLocale
from armanlegal.pages.layout import page_layout
from armanlegal.pages.viewer import DocumentViewer
from armanlegal.viewer import ViewerSession, consume_stream

logger = logging.getLogger(__name__)


@ui.page("/")
async def document_page() -> None:
    """Prompt form and live document viewer."""
    await ui.context.client.connected()

    settings = get_settings()
    locale = ViewerLocale.for_language(settings.viewer.language)
    session = ViewerSession(locale)
    ui.context.client.on_disconnect(
        partial(remove_export_dir, session.session_key, settings.export.export_dir)
    )

    async def generate() -> None:
        prompt = (prompt_input.value or "").strip()
        if not prompt:
            return

        generate_button.disable()
        session.begin_generation()
        viewer.refresh()
        try:
            try:
                drafter = DocumentDrafter(
                    model=settings.llm.model,
                    max_tokens=settings.llm.max_tokens,
                    system_prompt=settings.llm.system_prompt,
                )
            except ValueError as e:
                session.fail(str(e))
                viewer.refresh()
                return
            completed = await consume_stream(
                session, drafter.stream_document(prompt), viewer.on_stream_update
            )
            logger.info(
                "Generation %d finished (completed=%s)",
                session.generation_id,
                completed,
            )
        finally:
            generate_button.enable()

    with page_layout(locale):
        with ui.card().classes("w-full mb-4"):
            prompt_input = (
                ui.textarea(placeholder="Describe the document you need...")
                .classes("w-full")
                .props("outlined autogrow")
            )
            generate_button = ui.button(
                "Generate", icon="auto_awesome", on_click=generate
            ).props("color=primary")

        viewer = DocumentViewer(session, settings.export)
