"""
Conversion Context

Responsibilities:
- Renders every input once (batch pass)
- Polls inputs and re-renders changed ones (watch loop)
- Guarantees the render session is stopped exactly once per run

Owns: Document I/O, WatchState, run orchestration
Never: Talks to the browser except through RenderSession.render()
"""

from mmdsvg.contexts.conversion.batch import render_all, render_pair
from mmdsvg.contexts.conversion.exceptions import DocumentIOError
from mmdsvg.contexts.conversion.runner import run
from mmdsvg.contexts.conversion.watcher import (
    WATCH_INTERVAL_S,
    WatchState,
    Watcher,
    watch_and_render,
)

__all__ = [
    "DocumentIOError",
    "WATCH_INTERVAL_S",
    "WatchState",
    "Watcher",
    "render_all",
    "render_pair",
    "run",
    "watch_and_render",
]
