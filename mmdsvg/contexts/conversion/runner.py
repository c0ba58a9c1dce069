"""
Conversion run orchestration.

Owns the "one start, many renders, one stop" contract: the session is
started once, handed to the batch driver or the watch loop, and stopped in
a finally block on every exit path (success, interruption, error).
"""

import threading
from typing import List, Optional, Protocol

from mmdsvg.contexts.conversion.batch import render_all
from mmdsvg.contexts.conversion.watcher import WATCH_INTERVAL_S, watch_and_render
from mmdsvg.contexts.intake.inputs import RenderPair


class Session(Protocol):
    """Lifecycle contract of a render session (see RenderSession)."""

    def start(self): ...

    def render(self, source: str) -> str: ...

    def stop(self) -> None: ...


def run(
    pairs: List[RenderPair],
    session: Session,
    watch: bool = False,
    interval: float = WATCH_INTERVAL_S,
    stop_event: Optional[threading.Event] = None,
) -> None:
    """
    Render pairs once, or render and keep watching them.

    Args:
        pairs: Resolved input/output pairs, in command-line order
        session: Unstarted render session; this function owns its lifecycle
        watch: Re-render on change until interrupted
        interval: Seconds between watch ticks
        stop_event: Optional event ending the watch loop (signals also set it)

    Raises:
        RenderingError: Session setup or a render call failed
        DocumentIOError: A document could not be read, written or stat'ed
    """
    try:
        session.start()
        if watch:
            watch_and_render(pairs, session, interval=interval, stop_event=stop_event)
        else:
            render_all(pairs, session)
    finally:
        session.stop()
