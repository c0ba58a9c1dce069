"""
MermaidJS to SVG CLI

Renders MermaidJS documents (.mmd) to SVG files with the same name (or into
--outdir), using one headless Chrome instance for the whole run.

Examples:\n

    mermaid-svg diagram.mmd                        # Writes diagram.svg

    mermaid-svg -l a.mmd b.mmd                     # Log progress to stderr

    mermaid-svg -w -l docs/*.mmd                   # Re-render on change until Ctrl-C

    mermaid-svg -o build/svg docs/*.mmd            # Write into build/svg/

    mermaid-svg -t dark -c mermaid.yaml a.mmd      # Theme and MermaidJS config
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from typing_extensions import Annotated

from mmdsvg.contexts.conversion import DocumentIOError, run
from mmdsvg.contexts.intake import InputPathError, resolve_pairs
from mmdsvg.contexts.rendering import RenderingError, RenderSession, build_initialize_config
from mmdsvg.utils.logger import fatal, setup_logger

EXIT_FATAL = 1

app = typer.Typer(
    help="Render MermaidJS documents (.mmd) to SVG with a headless browser",
    add_completion=False,
)


def build_session(initialize_config: Dict[str, Any]) -> RenderSession:
    """Create the (unstarted) render session for this run."""
    return RenderSession(initialize_config=initialize_config)


@app.command()
def main(
    inputs: Annotated[
        List[Path],
        typer.Argument(help="MermaidJS documents to render (must end with .mmd)"),
    ],
    log: Annotated[
        bool,
        typer.Option("--log", "-l", help="Turn on logging (stderr)"),
    ] = False,
    watch: Annotated[
        bool,
        typer.Option("--watch", "-w", help="Watch files and re-render on change"),
    ] = False,
    outdir: Annotated[
        Optional[Path],
        typer.Option(
            "--outdir",
            "-o",
            help="Write every SVG into this directory instead of next to its source",
            file_okay=False,
        ),
    ] = None,
    theme: Annotated[
        Optional[str],
        typer.Option("--theme", "-t", help="MermaidJS theme (default: 'default')"),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="YAML file with mermaid.initialize() options",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log session and watch details (implies --log)"),
    ] = False,
):
    """
    Render each INPUT.mmd to INPUT.svg.

    Any error stops the whole run with exit code 1. In watch mode, Ctrl-C
    (or SIGTERM) ends the run cleanly with exit code 0.
    """
    setup_logger(enabled=log or verbose, level="DEBUG" if verbose else "INFO")

    try:
        pairs = resolve_pairs(inputs, outdir=outdir)
    except InputPathError as e:
        fatal(str(e))
        raise typer.Exit(code=EXIT_FATAL)
    except OSError as e:
        fatal(f"couldn't create output directory {outdir}: {e}")
        raise typer.Exit(code=EXIT_FATAL)

    try:
        initialize_config = build_initialize_config(config_path=config, theme=theme)
    except Exception as e:
        fatal(f"couldn't load MermaidJS config {config}: {e}")
        raise typer.Exit(code=EXIT_FATAL)

    try:
        run(pairs, build_session(initialize_config), watch=watch)
    except (RenderingError, DocumentIOError) as e:
        fatal(str(e))
        raise typer.Exit(code=EXIT_FATAL)


if __name__ == "__main__":
    app()
