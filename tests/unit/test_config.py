"""Unit tests for MermaidJS initialization config and bundle loading."""

import pytest
import requests

from mmdsvg.contexts.rendering import config as rendering_config
from mmdsvg.contexts.rendering.config import build_initialize_config, read_mermaid_source


@pytest.mark.unit
def test_default_initialize_config():
    assert build_initialize_config() == {"theme": "default", "startOnLoad": False}


@pytest.mark.unit
def test_theme_override():
    assert build_initialize_config(theme="dark")["theme"] == "dark"


@pytest.mark.unit
def test_yaml_config_merges_over_defaults(tmp_path):
    """YAML keys are added, theme from YAML wins over default, --theme wins over YAML."""
    config_file = tmp_path / "mermaid.yaml"
    config_file.write_text("theme: forest\nflowchart:\n  curve: basis\n")

    from_yaml = build_initialize_config(config_path=config_file)
    assert from_yaml == {"theme": "forest", "startOnLoad": False, "flowchart": {"curve": "basis"}}

    overridden = build_initialize_config(config_path=config_file, theme="neutral")
    assert overridden["theme"] == "neutral"


@pytest.mark.unit
def test_start_on_load_is_always_false(tmp_path):
    """Rendering is driven per call, so startOnLoad cannot be switched on."""
    config_file = tmp_path / "mermaid.yaml"
    config_file.write_text("startOnLoad: true\n")

    assert build_initialize_config(config_path=config_file)["startOnLoad"] is False


@pytest.mark.unit
def test_non_mapping_yaml_is_rejected(tmp_path):
    config_file = tmp_path / "mermaid.yaml"
    config_file.write_text("- theme\n- dark\n")

    with pytest.raises(ValueError, match="must be a mapping"):
        build_initialize_config(config_path=config_file)


@pytest.mark.unit
def test_read_mermaid_source_prefers_local_file(tmp_path, monkeypatch):
    bundle = tmp_path / "mermaid.min.js"
    bundle.write_text("globalThis.mermaid = {};")

    def _no_download(*args, **kwargs):
        raise AssertionError("should not download when a local bundle is configured")

    monkeypatch.setattr(rendering_config.requests, "get", _no_download)

    assert read_mermaid_source(path=str(bundle)) == "globalThis.mermaid = {};"


@pytest.mark.unit
def test_read_mermaid_source_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_mermaid_source(path=str(tmp_path / "missing.js"))


@pytest.mark.unit
def test_read_mermaid_source_downloads_when_no_local_file(monkeypatch):
    """Without a local bundle the configured URL is fetched."""
    requested = []

    class _Response:
        text = "globalThis.mermaid = {};"

        def raise_for_status(self):
            pass

    def _get(url, timeout):
        requested.append(url)
        return _Response()

    monkeypatch.setattr(rendering_config, "MERMAID_JS_PATH", None)
    monkeypatch.setattr(rendering_config.requests, "get", _get)

    source = read_mermaid_source(url="https://example.invalid/mermaid.min.js")

    assert source == "globalThis.mermaid = {};"
    assert requested == ["https://example.invalid/mermaid.min.js"]


@pytest.mark.unit
def test_read_mermaid_source_download_failure(monkeypatch):
    class _Response:
        text = "Not Found"

        def raise_for_status(self):
            raise requests.HTTPError("404 Client Error")

    monkeypatch.setattr(rendering_config, "MERMAID_JS_PATH", None)
    monkeypatch.setattr(rendering_config.requests, "get", lambda url, timeout: _Response())

    with pytest.raises(requests.RequestException):
        read_mermaid_source(url="https://example.invalid/mermaid.min.js")
