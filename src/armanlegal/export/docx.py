"""Word (.docx) export via Pandoc.

The encoder is an external program, so the conversion is the one export
step that suspends. It reports its outcome as a ``DocxResult`` instead of
raising: callers match on ``DocxConverted`` / ``DocxFailed``.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from armanlegal.errors import ExportConversionError

logger = logging.getLogger(__name__)

DOCX_TARGET = "docx"

_UNAVAILABLE_MESSAGE = (
    "Word export is not available on this server. "
    "Please download the HTML or Markdown version instead."
)
_FAILED_MESSAGE = "Word export failed. Please try again."


@dataclass(frozen=True)
class DocxConverted:
    """Successful conversion."""

    path: Path


@dataclass(frozen=True)
class DocxFailed:
    """Conversion failed with a user-facing error."""

    error: ExportConversionError


DocxResult: TypeAlias = DocxConverted | DocxFailed


def pandoc_available(pandoc_path: str = "pandoc") -> bool:
    """Check that the Pandoc executable can be found."""
    return shutil.which(pandoc_path) is not None


def _failed(message: str) -> DocxFailed:
    return DocxFailed(ExportConversionError(DOCX_TARGET, message))


def _export_dir_path(session_key: str, base_dir: Path | None) -> Path:
    base = base_dir if base_dir is not None else Path(tempfile.gettempdir())
    return base / f"armanlegal_export_{session_key}"


def get_export_dir(session_key: str, base_dir: Path | None = None) -> Path:
    """Get or create a session's export directory, clearing earlier exports.

    Each viewer session owns one directory; a new export replaces the
    previous one.

    Args:
        session_key: Unique key of the viewer session.
        base_dir: Parent directory. Defaults to the system temp dir.

    Returns:
        Path to the empty export directory.
    """
    export_dir = _export_dir_path(session_key, base_dir)
    if export_dir.exists():
        shutil.rmtree(export_dir)
    export_dir.mkdir(parents=True)
    return export_dir


def remove_export_dir(session_key: str, base_dir: Path | None = None) -> None:
    """Delete a session's export directory, if any."""
    export_dir = _export_dir_path(session_key, base_dir)
    if export_dir.exists():
        shutil.rmtree(export_dir)
        logger.debug("Removed export dir %s", export_dir)


async def convert_html_to_docx(
    html: str,
    output_dir: Path,
    *,
    pandoc_path: str = "pandoc",
    reference_doc: Path | None = None,
    filename: str = "document.docx",
) -> DocxResult:
    """Convert a standalone HTML document to .docx with Pandoc.

    Args:
        html: Templated export HTML.
        output_dir: Existing directory for the output file, usually from
            ``get_export_dir``.
        pandoc_path: Pandoc executable name or path.
        reference_doc: Optional .docx whose styles and margins Pandoc copies.
        filename: Output file name.

    Returns:
        ``DocxConverted`` with the output path, or ``DocxFailed``.
    """
    if not pandoc_available(pandoc_path):
        logger.warning("Pandoc not found at %r; docx export unavailable", pandoc_path)
        return _failed(_UNAVAILABLE_MESSAGE)

    output_path = output_dir / filename

    cmd = [pandoc_path, "-f", "html", "-t", "docx", "-o", str(output_path)]
    if reference_doc is not None:
        cmd.extend(["--reference-doc", str(reference_doc)])

    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        _, stderr_bytes = await proc.communicate(input=html.encode("utf-8"))
    except OSError:
        logger.exception("Could not start Pandoc for docx export")
        return _failed(_UNAVAILABLE_MESSAGE)

    if proc.returncode != 0:
        logger.error(
            "Pandoc docx export failed (exit %s): %s",
            proc.returncode,
            stderr_bytes.decode(errors="replace").strip(),
        )
        return _failed(_FAILED_MESSAGE)

    if not output_path.exists() or output_path.stat().st_size == 0:
        logger.error("Pandoc reported success but %s is missing or empty", output_path)
        return _failed(_FAILED_MESSAGE)

    logger.debug("Docx written to %s", output_path)
    return DocxConverted(output_path)
