"""
Input Set Resolution

Turns command-line paths into (source, output) pairs. All inputs are
validated before any pair is produced so that a bad argument never leaves
a partially rendered batch behind.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

DOCUMENT_SUFFIX = ".mmd"
OUTPUT_SUFFIX = ".svg"

PathLike = Union[str, Path]


class InputPathError(ValueError):
    """Raised when an input path is not a MermaidJS document."""

    pass


@dataclass(frozen=True)
class RenderPair:
    """
    One document to render and where its SVG goes.

    Attributes:
        source_path: Path to the .mmd document
        output_path: Path the rendered .svg is written to
    """

    source_path: Path
    output_path: Path


def validate_input(path: PathLike) -> Path:
    """
    Check that path names a MermaidJS document.

    Args:
        path: Command-line input path

    Returns:
        The path as a Path

    Raises:
        InputPathError: If the path does not end with .mmd
    """
    if not str(path).endswith(DOCUMENT_SUFFIX):
        raise InputPathError(
            f"got input MermaidJS document {path}; expected it to end with {DOCUMENT_SUFFIX}"
        )
    return Path(path)


def output_path(path: PathLike, outdir: Optional[PathLike] = None) -> Path:
    """
    Compute the SVG path for a document.

    Examples:
        >>> output_path("dir/name.mmd")
        PosixPath('dir/name.svg')
        >>> output_path("dir/name.mmd", outdir="out")
        PosixPath('out/name.svg')
    """
    path = Path(path)
    # Trim the suffix from the name itself: Path.stem keeps a bare ".mmd" whole
    name = path.name
    if name.endswith(DOCUMENT_SUFFIX):
        name = name[: -len(DOCUMENT_SUFFIX)]
    name += OUTPUT_SUFFIX

    if outdir is None:
        return path.with_name(name)
    return Path(outdir) / name


def resolve_pairs(paths: Iterable[PathLike], outdir: Optional[PathLike] = None) -> List[RenderPair]:
    """
    Validate inputs and pair each with its output path.

    Command-line order is preserved and duplicates are kept. The output
    directory is created (with parents) when given.

    Args:
        paths: Input document paths, in command-line order
        outdir: Optional directory receiving every output

    Returns:
        List of RenderPair, one per input

    Raises:
        InputPathError: If any input is not a .mmd document
    """
    sources = [validate_input(path) for path in paths]

    if outdir is not None:
        Path(outdir).mkdir(parents=True, exist_ok=True)

    return [RenderPair(source_path=src, output_path=output_path(src, outdir)) for src in sources]
