"""Tests for switchyard.config — AppConfig."""

import dataclasses

import pytest

from switchyard.config import AppConfig


class TestAppConfig:
    def test_defaults(self) -> None:
        config = AppConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 8000
        assert config.debug is False
        assert config.default_content_type == "text/plain; charset=utf-8"

    def test_frozen(self) -> None:
        config = AppConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.port = 9000  # type: ignore[misc]

    def test_effective_log_level(self) -> None:
        assert AppConfig(log_level="warning").effective_log_level == "warning"
        assert AppConfig(debug=True, log_level="warning").effective_log_level == "debug"

    @pytest.mark.parametrize(
        ("debug", "reload", "expected"),
        [(False, False, False), (True, False, True), (False, True, True), (True, True, True)],
    )
    def test_effective_reload(self, debug: bool, reload: bool, expected: bool) -> None:
        assert AppConfig(debug=debug, reload=reload).effective_reload is expected
