"""
MermaidJS Configuration

Builds the object passed to mermaid.initialize() and locates the MermaidJS
bundle loaded into the browser.

Initialization objects are layered (later overrides earlier):
    1. Defaults: theme "default", startOnLoad false
    2. Optional YAML file (--config), loaded with OmegaConf
    3. Explicit overrides (e.g., --theme)

startOnLoad is always forced to false: diagrams are rendered explicitly,
one call per document, never by MermaidJS scanning the page on load.

Examples:
    >>> build_initialize_config(theme="dark")
    {'theme': 'dark', 'startOnLoad': False}

    # mermaid.yaml:
    #   theme: forest
    #   flowchart:
    #     curve: basis
    >>> build_initialize_config(config_path=Path("mermaid.yaml"))
    {'theme': 'forest', 'startOnLoad': False, 'flowchart': {'curve': 'basis'}}
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import requests
from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
MERMAID_JS_PATH = os.getenv("MERMAID_JS_PATH")
MERMAID_JS_URL = os.getenv(
    "MERMAID_JS_URL", "https://cdn.jsdelivr.net/npm/mermaid@10/dist/mermaid.min.js"
)

DEFAULT_THEME = "default"
DOWNLOAD_TIMEOUT_S = 30

DEFAULT_INITIALIZE_CONFIG = {
    "theme": DEFAULT_THEME,
    "startOnLoad": False,
}


def build_initialize_config(
    config_path: Optional[Path] = None,
    theme: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the mermaid.initialize() object.

    Args:
        config_path: Optional YAML file with MermaidJS configuration keys
        theme: Optional theme name overriding defaults and the YAML file

    Returns:
        Plain dict ready to be JSON-encoded

    Raises:
        ValueError: If the YAML file does not contain a mapping
    """
    merged = OmegaConf.create(DEFAULT_INITIALIZE_CONFIG)

    if config_path is not None:
        loaded = OmegaConf.load(config_path)
        if not OmegaConf.is_dict(loaded):
            raise ValueError(f"MermaidJS config must be a mapping: {config_path}")
        merged = OmegaConf.merge(merged, loaded)

    if theme:
        merged.theme = theme

    merged.startOnLoad = False

    return OmegaConf.to_container(merged, resolve=True)


def read_mermaid_source(path: Optional[str] = None, url: Optional[str] = None) -> str:
    """
    Get the MermaidJS bundle source.

    Uses the local file when MERMAID_JS_PATH (or path) is set, otherwise
    downloads the bundle from MERMAID_JS_URL (or url).

    Args:
        path: Local mermaid.min.js (default: MERMAID_JS_PATH env)
        url: Download location (default: MERMAID_JS_URL env)

    Returns:
        JavaScript source text

    Raises:
        OSError: If the local file cannot be read
        requests.RequestException: If the download fails
    """
    path = path or MERMAID_JS_PATH
    if path:
        return Path(path).read_text(encoding="utf-8")

    response = requests.get(url or MERMAID_JS_URL, timeout=DOWNLOAD_TIMEOUT_S)
    response.raise_for_status()
    return response.text
