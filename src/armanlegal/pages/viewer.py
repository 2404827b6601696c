"""Document viewer component.

Displays one ``ViewerSession``: title bar, search bar, export menu and the
rendered document page. All state lives in the session; this module only
reflects it into NiceGUI elements and forwards user actions.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from functools import partial
from typing import TYPE_CHECKING, Any

from nicegui import ui

from armanlegal.errors import ScrollTargetMissing
from armanlegal.export.docx import DOCX_TARGET
from armanlegal.export.template import PAGE_STYLES, build_header_html
from armanlegal.pages import export_actions

if TYPE_CHECKING:
    from nicegui.elements.scroll_area import ScrollArea

    from armanlegal.config import ExportConfig
    from armanlegal.viewer.session import ViewerSession

logger = logging.getLogger(__name__)

_VIEWER_CSS = """
    .viewer-titlebar { background: rgba(0, 34, 121, 0.5); color: white; }
    .viewer-searchbar { background: rgba(0, 34, 121, 0.8); }
    .viewer-scroll { height: 70vh; background: rgba(0, 34, 121, 0.3); }
    .document-page .document-body pre.raw-document { white-space: pre-wrap; }
"""


def _scroll_into_view_js(element_id: str) -> str:
    target = json.dumps(element_id)
    return (
        "(() => {"
        f"  const el = document.getElementById({target});"
        "  if (!el) { return false; }"
        "  el.scrollIntoView({behavior: 'smooth', block: 'center'});"
        "  return true;"
        "})()"
    )


class DocumentViewer:
    """NiceGUI view over a ``ViewerSession``."""

    def __init__(self, session: ViewerSession, export_config: ExportConfig) -> None:
        self.session = session
        self.export_config = export_config
        self._scroll_area: ScrollArea | None = None
        self._docx_item: Any = None
        self._shown_index = -1
        self._build()
        self.refresh()

    # -- construction --------------------------------------------------------

    def _build(self) -> None:
        locale = self.session.locale
        label = locale.label
        ui.add_css(PAGE_STYLES + _VIEWER_CSS)

        with ui.column().classes("w-full gap-0").props(f"dir={locale.direction}"):
            with ui.row().classes(
                "w-full items-center justify-between p-4 viewer-titlebar"
            ):
                with ui.row().classes("items-center gap-2"):
                    self._done_icon = ui.icon("check_circle", color="green-4")
                    ui.label(label("title")).classes("text-lg font-semibold")
                with ui.row().classes("items-center gap-2"):
                    self._search_button = (
                        ui.button(icon="search", on_click=self._toggle_search)
                        .props("flat dense round color=white")
                        .tooltip("Search document")
                    )
                    with ui.button(label("export"), icon="expand_more").props(
                        "dense no-caps"
                    ) as self._export_button:
                        self._build_export_menu()

            with ui.row().classes(
                "w-full items-center gap-2 p-2 viewer-searchbar"
            ) as self._search_bar:
                self._search_input = (
                    ui.input(placeholder=label("search"), on_change=self._on_query)
                    .props("dense outlined dark")
                    .classes("flex-grow")
                )
                self._counter = ui.label("0 / 0").classes(
                    "text-xs text-grey-4 w-20 text-center"
                )
                self._prev_button = ui.button(
                    icon="chevron_left", on_click=self._on_previous
                ).props("flat dense round color=white")
                self._next_button = ui.button(
                    icon="chevron_right", on_click=self._on_next
                ).props("flat dense round color=white")
                ui.button(icon="close", on_click=self._close_search).props(
                    "flat dense round color=white"
                )

            with ui.scroll_area().classes("w-full viewer-scroll") as self._scroll_area:
                with ui.element("div").classes("document-page"):
                    self._header = ui.html("", sanitize=False)
                    with ui.element("div").classes("document-body"):
                        self._error_box = ui.label("").classes(
                            "text-red-500 p-4 border border-red-300 rounded-md"
                        )
                        self._body = ui.html("", sanitize=False).classes(
                            "max-w-none"
                        )
                        with ui.row().classes(
                            "items-center justify-center pt-4"
                        ) as self._spinner_row:
                            ui.spinner("dots", size="sm")
                            ui.label(label("generating")).classes("text-grey-6")
                        with ui.column().classes(
                            "w-full items-center text-grey-6 py-16"
                        ) as self._placeholder:
                            ui.icon("description", size="48px")
                            ui.label(label("placeholder1")).classes(
                                "text-sm font-semibold"
                            )
                            ui.label(label("placeholder2")).classes("text-sm")

    def _build_export_menu(self) -> None:
        label = self.session.locale.label
        session = self.session
        config = self.export_config
        with ui.menu():
            ui.menu_item(label("copy"), partial(export_actions.copy_to_clipboard, session))
            ui.menu_item(
                label("downloadMD"), partial(export_actions.download_markdown, session)
            )
            self._docx_item = ui.menu_item(label("downloadDOCX"), self._on_docx)
            ui.menu_item(
                label("downloadHTML"),
                partial(export_actions.download_html, session, config),
            )
            ui.menu_item(
                label("printPDF"), partial(export_actions.print_document, session, config)
            )
            ui.separator()
            ui.menu_item(
                label("sendToSupport"),
                partial(export_actions.send_to_support, session, config),
            ).classes("text-green-6 font-semibold")
            ui.menu_item(
                label("shareWhatsApp"), partial(export_actions.share_whatsapp, session)
            )
            ui.menu_item(label("shareEmail"), partial(export_actions.share_email, session))

    def _header_html(self) -> str:
        return build_header_html(
            self.session.locale, self.export_config.brand_name, date.today()
        )

    # -- state reflection ----------------------------------------------------

    def refresh(self) -> None:
        """Reflect the whole session into the view."""
        session = self.session
        complete = session.is_complete

        self._done_icon.set_visibility(complete)
        self._export_button.set_visibility(complete)
        self._search_bar.set_visibility(session.search_open)
        if (self._search_input.value or "") != session.query:
            self._search_input.set_value(session.query)
        self._header.set_content(self._header_html() if complete else "")
        self._header.set_visibility(complete)

        self._error_box.set_text(session.error or "")
        self._error_box.set_visibility(session.error is not None)
        self._spinner_row.set_visibility(session.is_streaming)
        self._placeholder.set_visibility(
            not session.is_streaming and not session.text and session.error is None
        )
        self._set_docx_busy(session.export_in_flight(DOCX_TARGET))
        self.refresh_body()

    def refresh_body(self) -> None:
        """Update the rendered document, match counter and search toggle."""
        session = self.session
        self._search_button.set_visibility(
            bool(session.text) and session.error is None
        )
        self._body.set_content(session.markup)
        has_matches = bool(session.matches)
        self._counter.set_text(session.counter_label)
        self._prev_button.set_enabled(has_matches)
        self._next_button.set_enabled(has_matches)
        self._shown_index = session.current_index

    async def on_stream_update(self, scroll_to_end: bool) -> None:
        """Producer callback: refresh, then follow the end or the new match."""
        previous_index = self._shown_index
        if self.session.is_streaming:
            self.refresh_body()
        else:
            self.refresh()
        if self._shown_index >= 0 and self._shown_index != previous_index:
            await self.scroll_to_match(self.session.current_element_id)
        elif scroll_to_end:
            self.scroll_to_end()

    def scroll_to_end(self) -> None:
        if self._scroll_area is not None:
            self._scroll_area.scroll_to(percent=1.0)

    async def scroll_to_match(self, element_id: str | None) -> None:
        """Center the match element in view; a missing element is ignored."""
        if element_id is None:
            return
        try:
            found = await ui.run_javascript(
                _scroll_into_view_js(element_id), timeout=2.0
            )
        except (TimeoutError, OSError) as exc:
            logger.debug("Scroll to %s: no browser response (%s)", element_id, exc)
            return
        if not found:
            logger.debug("%s", ScrollTargetMissing(element_id))

    def _set_docx_busy(self, busy: bool) -> None:
        if self._docx_item is None:
            return
        if busy:
            self._docx_item.props("disable")
        else:
            self._docx_item.props(remove="disable")

    # -- user actions --------------------------------------------------------

    def _toggle_search(self) -> None:
        visible = self.session.toggle_search()
        self.refresh()
        if visible:
            self._search_input.run_method("focus")

    def _close_search(self) -> None:
        self.session.close_search()
        self.refresh()

    async def _on_query(self, e: Any) -> None:
        element_id = self.session.set_query(e.value or "")
        self.refresh_body()
        await self.scroll_to_match(element_id)

    async def _on_next(self) -> None:
        element_id = self.session.next_match()
        self.refresh_body()
        await self.scroll_to_match(element_id)

    async def _on_previous(self) -> None:
        element_id = self.session.previous_match()
        self.refresh_body()
        await self.scroll_to_match(element_id)

    async def _on_docx(self) -> None:
        await export_actions.download_docx(
            self.session, self.export_config, on_busy_change=self._set_docx_busy
        )
