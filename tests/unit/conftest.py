"""Shared fixtures for unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from armanlegal.config import ExportConfig
from armanlegal.locale import ViewerLocale
from armanlegal.viewer import ViewerSession

# Two-paragraph contract used across viewer and export tests.
CONTRACT_TEXT = "Contract Term: 12 months\n\nThe term is 12 months."


@pytest.fixture
def en_locale() -> ViewerLocale:
    return ViewerLocale.for_language("en")


@pytest.fixture
def fa_locale() -> ViewerLocale:
    return ViewerLocale.for_language("fa")


@pytest.fixture
def session(en_locale: ViewerLocale) -> ViewerSession:
    """Fresh viewer session with nothing generated yet."""
    return ViewerSession(en_locale)


@pytest.fixture
def completed_session(en_locale: ViewerLocale) -> ViewerSession:
    """Session holding the finished contract document."""
    sess = ViewerSession(en_locale)
    sess.begin_generation()
    sess.append(CONTRACT_TEXT)
    sess.finish()
    return sess


@pytest.fixture
def export_config(tmp_path: Path) -> ExportConfig:
    return ExportConfig(
        brand_name="Arman AI", pandoc_path="pandoc", export_dir=tmp_path / "exports"
    )
