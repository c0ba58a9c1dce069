"""
JavaScript sources and call-expression building.

Document text is only ever placed into a call expression as a JSON string
literal. The encoding is ASCII-only and additionally escapes the characters
that can terminate a surrounding <script> block or a JavaScript line, so no
document content can change the shape of the call.
"""

import json
from typing import Any

RENDER_HELPER_NAME = "renderSVG"

# Registered once per session; Render() calls it with the document source.
# Assigned to globalThis because WebDriver runs scripts inside a function body.
EXTRAS_JS_SOURCE = """
globalThis.renderSVG = async function (src) {
    const { svg } = await mermaid.render('mermaid', src);
    return svg;
};
"""

# Characters escaped on top of json.dumps(ensure_ascii=True)
_EXTRA_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
}


def js_literal(value: Any) -> str:
    """
    Encode value as a JavaScript literal.

    Args:
        value: Any JSON-serializable value (str, dict, list, number, bool, None)

    Returns:
        JSON text safe to splice into a JavaScript expression

    Examples:
        >>> js_literal('graph TD; A-->B')
        '"graph TD; A--\\\\u003eB"'
        >>> js_literal({"theme": "default", "startOnLoad": False})
        '{"theme": "default", "startOnLoad": false}'
    """
    # ensure_ascii also covers U+2028 and U+2029, which end lines in older JS engines
    encoded = json.dumps(value, ensure_ascii=True)
    for char, escape in _EXTRA_ESCAPES.items():
        encoded = encoded.replace(char, escape)
    return encoded


def call_expression(function_name: str, argument: Any) -> str:
    """Build 'function_name(<literal>)' with argument encoded by js_literal."""
    return f"{function_name}({js_literal(argument)})"


def render_expression(source: str) -> str:
    """Build the expression that renders one MermaidJS document."""
    return call_expression(RENDER_HELPER_NAME, source)


def initialize_expression(config: dict) -> str:
    """Build the mermaid.initialize(...) call for an initialization object."""
    return call_expression("mermaid.initialize", config)
