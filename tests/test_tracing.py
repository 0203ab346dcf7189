"""Tests for the optional MLflow tracing integration."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

import text_digest_mcp.tracing as mod


def _make_config(**overrides):
    """Build a mock ServerConfig with tracing-enabled defaults."""
    defaults = {
        "tracing_enabled": True,
        "mlflow_tracking_uri": "http://127.0.0.1:5001",
        "mlflow_experiment_name": "text-digest-mcp",
    }
    defaults.update(overrides)
    cfg = MagicMock()
    for k, v in defaults.items():
        setattr(cfg, k, v)
    return cfg


@pytest.fixture()
def mock_mlflow(monkeypatch):
    """Pretend mlflow is installed and hand back the stand-in module."""
    fake = MagicMock()
    monkeypatch.setattr(mod, "_HAS_MLFLOW", True)
    monkeypatch.setattr(mod, "mlflow", fake, raising=False)
    return fake


# ---------------------------------------------------------------------------
# is_enabled()
# ---------------------------------------------------------------------------


class TestIsEnabled:
    """``tracing.is_enabled()`` respects import availability and config."""

    def test_true_when_installed_and_enabled(self, mock_mlflow):
        with patch("text_digest_mcp.config.get_config", return_value=_make_config()):
            assert mod.is_enabled() is True

    def test_false_when_not_installed(self, monkeypatch):
        monkeypatch.setattr(mod, "_HAS_MLFLOW", False)
        assert mod.is_enabled() is False

    def test_false_when_config_disabled(self, mock_mlflow):
        cfg = _make_config(tracing_enabled=False)
        with patch("text_digest_mcp.config.get_config", return_value=cfg):
            assert mod.is_enabled() is False


# ---------------------------------------------------------------------------
# trace()
# ---------------------------------------------------------------------------


class TestTraceDecorator:
    def test_identity_when_disabled(self, monkeypatch):
        monkeypatch.setattr(mod, "_HAS_MLFLOW", False)

        def fn():
            return 1

        assert mod.trace(fn) is fn
        assert mod.trace(name="x", span_type="TOOL")(fn) is fn

    def test_delegates_to_mlflow_when_enabled(self, mock_mlflow):
        def fn():
            return 1

        with patch("text_digest_mcp.config.get_config", return_value=_make_config()):
            mod.trace(fn, name="summarize", span_type="TOOL")

        mock_mlflow.trace.assert_called_once_with(
            fn, name="summarize", span_type="TOOL", attributes=None
        )


# ---------------------------------------------------------------------------
# setup() / shutdown()
# ---------------------------------------------------------------------------


class TestSetup:
    """``tracing.setup()`` configures MLflow when enabled."""

    def test_configures_tracking(self, mock_mlflow):
        cfg = _make_config(
            mlflow_tracking_uri="http://my-server:5000",
            mlflow_experiment_name="custom-experiment",
        )
        with patch("text_digest_mcp.config.get_config", return_value=cfg):
            mod.setup()

        mock_mlflow.set_tracking_uri.assert_called_once_with("http://my-server:5000")
        mock_mlflow.set_experiment.assert_called_once_with("custom-experiment")

    def test_noop_when_disabled(self, mock_mlflow, monkeypatch):
        monkeypatch.setattr(mod, "_HAS_MLFLOW", False)
        mod.setup()
        mock_mlflow.set_tracking_uri.assert_not_called()

    def test_swallows_exceptions(self, mock_mlflow):
        mock_mlflow.set_experiment.side_effect = Exception("connection refused")
        with patch("text_digest_mcp.config.get_config", return_value=_make_config()):
            mod.setup()  # should not raise


class TestShutdown:
    """``tracing.shutdown()`` flushes async traces."""

    def test_flushes(self, mock_mlflow):
        with patch("text_digest_mcp.config.get_config", return_value=_make_config()):
            mod.shutdown()
        mock_mlflow.flush_trace_async_logging.assert_called_once()

    def test_noop_when_disabled(self, mock_mlflow, monkeypatch):
        monkeypatch.setattr(mod, "_HAS_MLFLOW", False)
        mod.shutdown()
        mock_mlflow.flush_trace_async_logging.assert_not_called()


# ---------------------------------------------------------------------------
# _resolve_tracing_enabled()
# ---------------------------------------------------------------------------


class TestResolveTracingEnabled:
    """``_resolve_tracing_enabled()`` derives tracing state from env vars."""

    @pytest.mark.parametrize(("flag", "uri", "expected"), [
        ("", "http://127.0.0.1:5001", True),
        ("", "", False),
        ("false", "http://127.0.0.1:5001", False),
        ("False", "http://127.0.0.1:5001", False),
        ("true", "", False),
    ])
    def test_resolution(self, flag, uri, expected):
        from text_digest_mcp.config import _resolve_tracing_enabled

        assert _resolve_tracing_enabled(flag, uri) is expected
