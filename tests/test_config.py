"""Tests for wren.config — AppConfig frozen dataclass."""

import pytest

from wren.app import App
from wren.config import AppConfig


class TestAppConfig:
    def test_defaults(self) -> None:
        cfg = AppConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 8000
        assert cfg.debug is False
        assert cfg.reload_include == ()
        assert cfg.reload_dirs == ()
        assert cfg.workers == 0

    def test_override(self) -> None:
        cfg = AppConfig(host="0.0.0.0", port=3000, debug=True)

        assert cfg.host == "0.0.0.0"
        assert cfg.port == 3000
        assert cfg.debug is True

    def test_frozen(self) -> None:
        cfg = AppConfig()

        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]

    def test_app_default_config(self) -> None:
        assert App().config == AppConfig()

    def test_app_keeps_config(self) -> None:
        cfg = AppConfig(port=3000)
        assert App(cfg).config is cfg
