"""Feed a producer's chunk stream into a viewer session."""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

from armanlegal.errors import ProducerError

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, Awaitable, Callable

    from armanlegal.viewer.session import ViewerSession

logger = logging.getLogger(__name__)

STREAM_FAILED_MESSAGE = "Document generation was interrupted. Please try again."


async def _notify(
    on_update: Callable[[bool], Awaitable[None] | None], scroll: bool
) -> None:
    result = on_update(scroll)
    if inspect.isawaitable(result):
        await result


async def consume_stream(
    session: ViewerSession,
    chunks: AsyncIterable[str],
    on_update: Callable[[bool], Awaitable[None] | None],
) -> bool:
    """Append streamed chunks to *session* until the producer finishes.

    The caller must have called ``session.begin_generation()``. If another
    generation starts while this one is streaming, the remaining chunks are
    dropped and the newer generation is left untouched.

    Args:
        session: The viewer session to fill.
        chunks: Text chunks from the producer.
        on_update: Called after every state change with ``True`` when the
            view should scroll to the end. May be a coroutine function.

    Returns:
        True when the document completed, False on producer error or when
        superseded.
    """
    generation_id = session.generation_id
    try:
        async for chunk in chunks:
            if not session.is_current(generation_id):
                logger.debug("Generation %d superseded; dropping stream", generation_id)
                return False
            await _notify(on_update, session.append(chunk))
    except ProducerError as e:
        if session.is_current(generation_id):
            session.fail(str(e))
            await _notify(on_update, False)
        return False
    except Exception:
        logger.exception("Generation %d: stream broke unexpectedly", generation_id)
        if session.is_current(generation_id):
            session.fail(STREAM_FAILED_MESSAGE)
            await _notify(on_update, False)
        return False

    if not session.is_current(generation_id):
        return False
    session.finish()
    await _notify(on_update, False)
    return True
