"""Error taxonomy for the document viewer and export engine.

Producer errors are terminal for a generation attempt. Render, export and
scroll errors are local: retrying the same action is always safe.
"""

from __future__ import annotations


class ArmanLegalError(Exception):
    """Base class for viewer and export errors."""


class ProducerError(ArmanLegalError):
    """The text producer failed; the message is shown in place of the body."""


class RenderConversionError(ArmanLegalError):
    """Markdown could not be converted to display markup."""


class ExportConversionError(ArmanLegalError):
    """A single export target failed.

    The message is meant for the user and never carries a traceback.
    """

    def __init__(self, target: str, message: str) -> None:
        self.target = target
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class ScrollTargetMissing(ArmanLegalError):
    """The element to scroll to has not been rendered yet."""

    def __init__(self, element_id: str) -> None:
        self.element_id = element_id
        super().__init__(f"Scroll target not present: {element_id}")
