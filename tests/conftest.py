"""Shared fakes for render session and engine tests."""

import json

import pytest
from loguru import logger
from selenium.common.exceptions import WebDriverException

from mmdsvg.contexts.rendering.exceptions import RenderError, SessionStateError
from mmdsvg.utils.logger import setup_logger

RENDER_PREFIX = "renderSVG("


class FakeEngine:
    """
    In-memory stand-in for ChromeEngine.

    Records every call. renderSVG(...) calls echo the decoded document
    source wrapped in <svg> tags. fail_on names one call to fail with a
    WebDriverException: 'load_mermaid', 'initialize', 'load_extras' or 'render'.
    error replaces the default exception raised there.
    """

    def __init__(self, fail_on=None, render_result=None, error=None):
        self.fail_on = fail_on
        self.error = error
        self.render_result = render_result
        self.loads = []
        self.evaluations = []
        self.closed = 0

    def load(self, script):
        step = "load_mermaid" if not self.loads else "load_extras"
        self.loads.append(script)
        if self.fail_on == step:
            raise self.error or WebDriverException(f"{step} failed")

    def evaluate(self, expression):
        self.evaluations.append(expression)
        if expression.startswith("mermaid.initialize("):
            if self.fail_on == "initialize":
                raise self.error or WebDriverException("initialize failed")
            return None
        if expression.startswith(RENDER_PREFIX):
            if self.fail_on == "render":
                raise self.error or WebDriverException("render failed")
            if self.render_result is not None:
                return self.render_result
            source = json.loads(expression[len(RENDER_PREFIX) : -1])
            return f"<svg>{source}</svg>"
        raise AssertionError(f"unexpected expression: {expression}")

    def close(self):
        self.closed += 1


class FakeSession:
    """
    Stand-in for RenderSession tracking lifecycle calls.

    render() echoes its input as '<svg>source</svg>'. Set fail_start or
    fail_render_on (a source string) to raise the matching error.
    """

    def __init__(self, fail_start=None, fail_render_on=None, on_render=None):
        self.fail_start = fail_start
        self.fail_render_on = fail_render_on
        self.on_render = on_render
        self.start_calls = 0
        self.stop_calls = 0
        self.rendered = []
        self.started = False

    def start(self):
        self.start_calls += 1
        if self.fail_start is not None:
            raise self.fail_start
        self.started = True
        return self

    def render(self, source):
        if not self.started or self.stop_calls:
            raise SessionStateError("render outside an active session")
        if source == self.fail_render_on:
            raise RenderError("couldn't render: boom")
        self.rendered.append(source)
        if self.on_render is not None:
            self.on_render(source)
        return f"<svg>{source}</svg>"

    def stop(self):
        self.stop_calls += 1
        self.started = False


@pytest.fixture
def make_engine():
    """Factory for FakeEngine (keyword arguments as in FakeEngine)."""
    return FakeEngine


@pytest.fixture
def make_session():
    """Factory for FakeSession (keyword arguments as in FakeSession)."""
    return FakeSession


@pytest.fixture
def make_document(tmp_path):
    """Create a .mmd file with the given content; returns its path."""

    def _make(name, content="graph TD; A-->B"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _make


@pytest.fixture
def captured_logs():
    """Collect log messages emitted through loguru during a test."""
    messages = []
    sink_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    try:
        logger.remove(sink_id)
    except ValueError:
        # setup_logger() inside the test already removed every sink
        pass


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added during a test (e.g., stderr of a finished CliRunner invocation)."""
    yield
    setup_logger(enabled=False)
