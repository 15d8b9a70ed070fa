from __future__ import annotations

import pydantic
import pytest

from core import config
from core.config import AppSettings


def test_defaults(settings):
    assert settings.invalid_statuses == [422]
    assert settings.irregular_plurals == {}
    assert settings.namespace == ""
    assert settings.log_format == "console"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ACTIVE_MODEL_HOST", "https://api.example.com/")
    monkeypatch.setenv("ACTIVE_MODEL_NAMESPACE", "/api/v1/")
    monkeypatch.setenv("ACTIVE_MODEL_INVALID_STATUSES", "[422, 400]")
    monkeypatch.setenv("ACTIVE_MODEL_IRREGULAR_PLURALS", '{"formula": "formulae"}')
    monkeypatch.setenv("ACTIVE_MODEL_UNCOUNTABLE_WORDS", '["advice"]')

    settings = AppSettings(_env_file=None)

    assert settings.host == "https://api.example.com"
    assert settings.namespace == "api/v1"
    assert settings.invalid_statuses == [422, 400]
    assert settings.irregular_plurals == {"formula": "formulae"}
    assert settings.uncountable_words == ["advice"]


@pytest.mark.parametrize("statuses", [[42], []])
def test_rejects_bad_statuses(statuses):
    with pytest.raises(pydantic.ValidationError):
        AppSettings(_env_file=None, invalid_statuses=statuses)


def test_rejects_unknown_log_format():
    with pytest.raises(pydantic.ValidationError):
        AppSettings(_env_file=None, log_format="xml")


def test_user_env_file_follows_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr(config.sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert config.get_user_env_file() == tmp_path / "active-model-adapter" / ".env"


def test_user_env_file_is_read(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ACTIVE_MODEL_NAMESPACE=api/v2\n", encoding="utf-8")
    monkeypatch.delenv("ACTIVE_MODEL_NAMESPACE", raising=False)

    assert AppSettings(_env_file=str(env_file)).namespace == "api/v2"
