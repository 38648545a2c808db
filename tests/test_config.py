from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    settings = AppSettings()

    assert settings.http_timeout_seconds == 5.0
    assert settings.output_dir == Path("downloads")
    assert settings.log_level == "WARNING"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MEOW_HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("MEOW_LOG_LEVEL", "debug")

    settings = AppSettings()

    assert settings.http_timeout_seconds == 2.5
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("name, value", [("MEOW_HTTP_TIMEOUT_SECONDS", "0"), ("MEOW_LOG_LEVEL", "loud")])
def test_invalid_values_rejected(monkeypatch, tmp_path, name, value):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        AppSettings()
