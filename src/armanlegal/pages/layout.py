"""Shared page chrome for Arman Legal."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

from nicegui import ui

if TYPE_CHECKING:
    from collections.abc import Iterator

    from armanlegal.locale import ViewerLocale


@contextmanager
def page_layout(locale: ViewerLocale, title: str = "Arman Legal") -> Iterator[None]:
    """Context manager for the page header and padded content area.

    Usage:
        @ui.page("/")
        async def page():
            with page_layout(locale):
                ui.label("Page content here")

    Args:
        locale: Sets the page language and text direction.
        title: Title shown in the header.

    Yields:
        Context for page content.
    """
    ui.query("body").props(f"dir={locale.direction} lang={locale.language}")

    with ui.header().classes("bg-primary items-center q-py-xs"):
        ui.icon("gavel").classes("text-white q-ml-sm")
        ui.label(title).classes("text-h6 text-white q-ml-sm")

    with ui.element("div").classes("q-pa-md w-full max-w-5xl mx-auto"):
        yield
