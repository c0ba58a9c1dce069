"""
Batch Driver

Renders RenderPairs strictly one after another through a single started
session. The browser connection does not support concurrent calls, so
there is no parallelism across pairs.
"""

from pathlib import Path
from typing import Iterable, Protocol

from mmdsvg.contexts.conversion.exceptions import DocumentIOError
from mmdsvg.contexts.conversion.logger import log_rendered
from mmdsvg.contexts.intake.inputs import RenderPair


class Renderer(Protocol):
    """Anything with a blocking render(source) -> svg call (e.g., RenderSession)."""

    def render(self, source: str) -> str: ...


def read_document(path: Path) -> str:
    """Read a MermaidJS document as UTF-8 text."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentIOError("read", path, e) from e


def write_output(path: Path, svg: str) -> None:
    """Write SVG text, creating or overwriting the file."""
    try:
        Path(path).write_text(svg, encoding="utf-8")
    except OSError as e:
        raise DocumentIOError("write", path, e) from e


def render_pair(pair: RenderPair, session: Renderer) -> None:
    """
    Read, render and write one document.

    Args:
        pair: Source and output paths
        session: Started render session

    Raises:
        DocumentIOError: If the source cannot be read or the output written
        RenderingError: If the render call fails
    """
    source = read_document(pair.source_path)
    svg = session.render(source)
    write_output(pair.output_path, svg)
    log_rendered(pair.output_path)


def render_all(pairs: Iterable[RenderPair], session: Renderer) -> None:
    """Render every pair once, in order. The first failure stops the batch."""
    for pair in pairs:
        render_pair(pair, session)
