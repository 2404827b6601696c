"""Arman Legal - AI-drafted legal documents, viewed, searched and exported.

Streams a generated document into a live viewer with literal in-document
search, then exports the finished text as markdown, Word, HTML, print or
a prefilled message.
"""

import logging
import os
import subprocess
from logging.handlers import RotatingFileHandler
from pathlib import Path

__version__ = "0.1.0"

# Chatty third-party loggers: per-token parser and HTTP debug output.
_QUIET_LOGGERS = ("markdown_it", "anthropic", "httpx", "httpcore")


def get_git_commit() -> str:
    """Get the short git commit hash, or 'unknown' if not in a git repo."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True,
            text=True,
            check=True,
            timeout=5,
        )
        return result.stdout.strip()
    except (
        subprocess.CalledProcessError,
        FileNotFoundError,
        subprocess.TimeoutExpired,
    ):
        return "unknown"


def get_version_string() -> str:
    """Get version string with git commit for dev builds.

    Outside a git checkout (an installed release) the bare version is used.
    """
    commit = get_git_commit()
    if commit == "unknown":
        return __version__
    return f"{__version__}+{commit}"


def _setup_logging(log_dir: Path, console_level: str = "INFO") -> None:
    """Configure logging to both console and rotating file.

    Our own modules log at DEBUG to the file. Markdown parsing and the
    Anthropic HTTP stack are held at WARNING.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"armanlegal.{os.getpid()}.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # File handler - detailed logging with rotation (10MB, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)

    # Console handler - less verbose
    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level.upper())
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.info("Logging configured. Log file: %s", log_file.absolute())


def main() -> None:
    """Entry point for the Arman Legal application."""
    from nicegui import ui

    from armanlegal.config import get_settings

    settings = get_settings()
    _setup_logging(settings.app.log_dir, settings.app.console_log_level)

    import armanlegal.pages  # noqa: F401 - registers routes

    port = settings.app.port
    storage_secret = settings.app.storage_secret.get_secret_value()

    print(f"Arman Legal v{get_version_string()}")
    print(f"Starting application on http://0.0.0.0:{port}")

    reload = os.environ.get("ARMANLEGAL_RELOAD", "1" if settings.app.reload else "0")
    ui.run(
        host="0.0.0.0",  # nosec B104
        port=port,
        reload=reload != "0",
        storage_secret=storage_secret,
        title="Arman Legal",
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
