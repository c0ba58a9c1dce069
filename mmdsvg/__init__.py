"""
mmdsvg - Batch MermaidJS to SVG converter

Renders MermaidJS documents (.mmd) to SVG files using one headless Chrome
instance for the whole run, optionally re-rendering on change.

Architecture:
- Intake Context: Input validation and output path computation
- Rendering Context: Headless browser session hosting MermaidJS
- Conversion Context: Batch pass and watch loop orchestration
"""

__version__ = "0.1.0"
