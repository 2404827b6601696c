"""Tests for the document viewer component.

Note: Rendering and scrolling need a browser and are covered by manual
testing. These unit tests verify the module structure, the scroll script,
and how session state is reflected into a mocked ``ui``.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock, call, patch

import pytest

from tests.unit.conftest import CONTRACT_TEXT

if TYPE_CHECKING:
    from collections.abc import Iterator

    from armanlegal.config import ExportConfig
    from armanlegal.viewer import ViewerSession


@pytest.fixture
def mock_ui() -> Iterator[MagicMock]:
    with patch("armanlegal.pages.viewer.ui") as ui:
        ui.run_javascript = AsyncMock(return_value=True)
        yield ui


class TestDocumentViewerStructure:
    def test_import_from_module(self) -> None:
        from armanlegal.pages.viewer import DocumentViewer

        assert callable(DocumentViewer)

    def test_scroll_to_match_is_async(self) -> None:
        from armanlegal.pages.viewer import DocumentViewer

        assert inspect.iscoroutinefunction(DocumentViewer.scroll_to_match)

    def test_stream_callback_signature(self) -> None:
        from armanlegal.pages.viewer import DocumentViewer

        params = list(inspect.signature(DocumentViewer.on_stream_update).parameters)
        assert params == ["self", "scroll_to_end"]

    def test_stream_callback_is_async(self) -> None:
        from armanlegal.pages.viewer import DocumentViewer

        assert inspect.iscoroutinefunction(DocumentViewer.on_stream_update)


class TestScrollScript:
    """JavaScript that centres a match element."""

    def test_targets_element_by_id(self) -> None:
        from armanlegal.pages.viewer import _scroll_into_view_js

        script = _scroll_into_view_js("search-match-3")
        assert 'document.getElementById("search-match-3")' in script
        assert "block: 'center'" in script

    def test_missing_element_returns_false(self) -> None:
        from armanlegal.pages.viewer import _scroll_into_view_js

        script = _scroll_into_view_js("search-match-0")
        assert "if (!el) { return false; }" in script

    def test_id_is_quoted(self) -> None:
        from armanlegal.pages.viewer import _scroll_into_view_js

        script = _scroll_into_view_js('x"); alert(1); ("')
        assert 'getElementById("x\\"); alert(1); (\\"")' in script


class TestPagesPackage:
    def test_document_page_registered(self) -> None:
        from armanlegal.pages import document

        assert inspect.iscoroutinefunction(document.document_page)


class TestStreamingView:
    """Session changes during streaming reach the view."""

    @pytest.mark.asyncio
    async def test_search_button_shown_while_streaming(
        self,
        session: ViewerSession,
        export_config: ExportConfig,
        mock_ui: MagicMock,
    ) -> None:
        from armanlegal.pages.viewer import DocumentViewer

        session.begin_generation()
        viewer = DocumentViewer(session, export_config)
        assert viewer._search_button.set_visibility.call_args == call(False)

        await viewer.on_stream_update(session.append("Contract Term: 12 months"))

        assert session.is_streaming
        assert viewer._search_button.set_visibility.call_args == call(True)

    @pytest.mark.asyncio
    async def test_follows_end_with_search_closed(
        self,
        session: ViewerSession,
        export_config: ExportConfig,
        mock_ui: MagicMock,
    ) -> None:
        from armanlegal.pages.viewer import DocumentViewer

        session.begin_generation()
        viewer = DocumentViewer(session, export_config)

        await viewer.on_stream_update(session.append(CONTRACT_TEXT))

        viewer._scroll_area.scroll_to.assert_called_once_with(percent=1.0)
        mock_ui.run_javascript.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_first_match_from_append_is_scrolled_to(
        self,
        session: ViewerSession,
        export_config: ExportConfig,
        mock_ui: MagicMock,
    ) -> None:
        from armanlegal.pages.viewer import DocumentViewer

        session.begin_generation()
        viewer = DocumentViewer(session, export_config)
        session.open_search()
        session.set_query("12 months")
        viewer.refresh()

        await viewer.on_stream_update(session.append(CONTRACT_TEXT))

        assert session.current_index == 0
        mock_ui.run_javascript.assert_awaited_once()
        script = mock_ui.run_javascript.await_args.args[0]
        assert '"search-match-0"' in script
        viewer._scroll_area.scroll_to.assert_not_called()

    @pytest.mark.asyncio
    async def test_unchanged_match_is_not_scrolled_again(
        self,
        session: ViewerSession,
        export_config: ExportConfig,
        mock_ui: MagicMock,
    ) -> None:
        from armanlegal.pages.viewer import DocumentViewer

        session.begin_generation()
        viewer = DocumentViewer(session, export_config)
        session.open_search()
        session.set_query("12 months")
        await viewer.on_stream_update(session.append(CONTRACT_TEXT))

        await viewer.on_stream_update(session.append("\n\nSigned."))

        mock_ui.run_javascript.assert_awaited_once()


class TestSearchInputSync:
    """The search box shows the session's query."""

    def test_new_generation_clears_search_box(
        self,
        session: ViewerSession,
        export_config: ExportConfig,
        mock_ui: MagicMock,
    ) -> None:
        from armanlegal.pages.viewer import DocumentViewer

        session.begin_generation()
        session.append(CONTRACT_TEXT)
        session.finish()
        viewer = DocumentViewer(session, export_config)
        session.set_query("term")
        viewer._search_input.value = "term"

        session.begin_generation()
        viewer.refresh()

        assert session.query == ""
        viewer._search_input.set_value.assert_called_with("")

    def test_matching_search_box_is_left_alone(
        self,
        session: ViewerSession,
        export_config: ExportConfig,
        mock_ui: MagicMock,
    ) -> None:
        from armanlegal.pages.viewer import DocumentViewer

        session.begin_generation()
        viewer = DocumentViewer(session, export_config)
        viewer._search_input.value = ""
        viewer._search_input.set_value.reset_mock()

        viewer.refresh()

        viewer._search_input.set_value.assert_not_called()
