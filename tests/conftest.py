"""Shared pytest fixtures for Arman Legal tests."""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

import pytest
from dotenv import load_dotenv

from armanlegal.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Generator

load_dotenv()


# =============================================================================
# External tool markers
# =============================================================================


def _has_pandoc() -> bool:
    return shutil.which("pandoc") is not None


requires_pandoc = pytest.mark.skipif(not _has_pandoc(), reason="Pandoc not installed")


# =============================================================================
# Settings isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None]:
    """Drop the cached Settings so env changes in one test never leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
