"""
Intake Context

Responsibilities:
- Validates that every input is a MermaidJS document (.mmd)
- Computes the SVG output path for each input

Owns: RenderPair construction
Never: Reads document content or talks to the browser
"""

from mmdsvg.contexts.intake.inputs import (
    DOCUMENT_SUFFIX,
    OUTPUT_SUFFIX,
    InputPathError,
    RenderPair,
    output_path,
    resolve_pairs,
    validate_input,
)

__all__ = [
    "DOCUMENT_SUFFIX",
    "OUTPUT_SUFFIX",
    "InputPathError",
    "RenderPair",
    "output_path",
    "resolve_pairs",
    "validate_input",
]
