"""
Watch Loop

Keeps SVG outputs in sync with their sources by polling modification times.

States:
    init      render every pair once, recording each source's mtime
    watching  every WATCH_INTERVAL_S, re-render pairs whose mtime is
              strictly newer than the recorded one
    done      stop event set (SIGINT/SIGTERM or Watcher.stop()); no new
              render is started, an in-flight one is allowed to finish

The wait between ticks is a single Event.wait(interval): it returns early
when the stop event is set. Signal handlers only raise a flag, which is
noticed when the current wait ends, at most one interval later.
Edits faster than the interval are not coalesced or replayed: a tick
observes whatever mtime the file has at that moment.
"""

import os
import signal
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from mmdsvg.contexts.conversion.batch import Renderer, render_pair
from mmdsvg.contexts.conversion.exceptions import DocumentIOError
from mmdsvg.contexts.conversion.logger import (
    _log_debug,
    log_change_detected,
    log_watch_done,
    log_watching,
)
from mmdsvg.contexts.intake.inputs import RenderPair

WATCH_INTERVAL_S = 0.25
WATCH_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class WatchState:
    """
    Last observed modification time (ns) per source path.

    Recorded values never decrease: a file once seen as modified is never
    "un-modified" by an older timestamp.
    """

    def __init__(self):
        self._mtimes: Dict[Path, int] = {}

    def get(self, path: Path) -> Optional[int]:
        return self._mtimes.get(Path(path))

    def record(self, path: Path, mtime_ns: int) -> None:
        path = Path(path)
        previous = self._mtimes.get(path)
        if previous is None or mtime_ns > previous:
            self._mtimes[path] = mtime_ns

    def is_newer(self, path: Path, mtime_ns: int) -> bool:
        """True if mtime_ns is strictly after the recorded time (or nothing is recorded)."""
        previous = self.get(path)
        return previous is None or mtime_ns > previous

    def as_dict(self) -> Dict[Path, int]:
        return dict(self._mtimes)

    def __contains__(self, path) -> bool:
        return Path(path) in self._mtimes

    def __len__(self) -> int:
        return len(self._mtimes)


def modification_time(path: Path) -> int:
    """
    Get a file's modification time in nanoseconds.

    Raises:
        DocumentIOError: If the file cannot be stat'ed (e.g., it was removed)
    """
    try:
        return os.stat(path).st_mtime_ns
    except OSError as e:
        raise DocumentIOError("stat", path, e) from e


@contextmanager
def interrupt_handler(on_interrupt: Callable[[int], None]) -> Iterator[None]:
    """
    Call on_interrupt(signum) on SIGINT/SIGTERM for the duration of the block.

    on_interrupt runs inside the signal handler, so it must not take locks
    (no logging, no Event.set()). Previous handlers are restored on exit.
    Outside the main thread signal handlers cannot be installed, and the
    block runs unchanged.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _handle(signum, frame):
        on_interrupt(signum)

    previous = {sig: signal.signal(sig, _handle) for sig in WATCH_SIGNALS}
    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


class Watcher:
    """
    Poll-and-render loop over a fixed list of pairs.

    Attributes:
        pairs: RenderPairs, in command-line order (the order of every tick)
        session: Started render session shared by every render
        interval: Seconds between ticks
        stop_event: Set to leave the loop
        interrupted: True once SIGINT/SIGTERM was received during run()
        state: Last observed mtimes
    """

    def __init__(
        self,
        pairs: Iterable[RenderPair],
        session: Renderer,
        interval: float = WATCH_INTERVAL_S,
        stop_event: Optional[threading.Event] = None,
    ):
        self.pairs = list(pairs)
        self.session = session
        self.interval = interval
        self.stop_event = stop_event if stop_event is not None else threading.Event()
        self.state = WatchState()
        self.interrupted = False

    def initial_pass(self) -> None:
        """Render every pair once and record baseline mtimes."""
        for pair in self.pairs:
            if self.stopping:
                break
            # Stat before reading so an edit made during the render is seen next tick
            mtime = modification_time(pair.source_path)
            render_pair(pair, self.session)
            self.state.record(pair.source_path, mtime)

    def tick(self) -> List[RenderPair]:
        """
        Re-render every pair whose source changed since it was last rendered.

        Returns:
            Pairs rendered in this tick, in order
        """
        rendered = []
        for pair in self.pairs:
            if self.stopping:
                break

            mtime = modification_time(pair.source_path)
            if not self.state.is_newer(pair.source_path, mtime):
                continue

            log_change_detected(pair.source_path, self.state.get(pair.source_path), mtime)
            render_pair(pair, self.session)
            self.state.record(pair.source_path, mtime)
            rendered.append(pair)

        return rendered

    @property
    def stopping(self) -> bool:
        return self.interrupted or self.stop_event.is_set()

    def _interrupt(self, signum: int) -> None:
        # Runs in the signal handler: a plain assignment, no locks
        self.interrupted = True

    def run(self) -> None:
        """Initial pass, then tick until the stop event is set or a signal arrives."""
        ticks = 0
        with interrupt_handler(self._interrupt):
            self.initial_pass()
            if not self.stopping:
                log_watching(len(self.pairs), self.interval)

            while not self.stopping:
                if self.stop_event.wait(self.interval) or self.interrupted:
                    break
                self.tick()
                ticks += 1

        if self.interrupted:
            self.stop_event.set()

        _log_debug(f"stopped after {ticks} tick(s)")
        log_watch_done()

    def stop(self) -> None:
        self.stop_event.set()


def watch_and_render(
    pairs: Iterable[RenderPair],
    session: Renderer,
    interval: float = WATCH_INTERVAL_S,
    stop_event: Optional[threading.Event] = None,
) -> WatchState:
    """
    Render all pairs, then re-render on change until interrupted.

    Returns:
        Final WatchState
    """
    watcher = Watcher(pairs, session, interval=interval, stop_event=stop_event)
    watcher.run()
    return watcher.state
