import logging

import pytest

from casewright import CaseStyle, InvalidStyleError
from casewright.config import LOG_LEVEL_ENV, STYLE_ENV, Settings, load_settings


def test_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "missing.env"))
    assert settings == Settings()
    assert settings.default_style is None
    assert settings.log_level == logging.WARNING


def test_values_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(STYLE_ENV, "kebab-case")
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    settings = load_settings(str(tmp_path / "missing.env"))
    assert settings.default_style is CaseStyle.KEBAB
    assert settings.log_level == logging.DEBUG


def test_values_from_env_file(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(f"{STYLE_ENV}=camel\n{LOG_LEVEL_ENV}=INFO\n")
    settings = load_settings(str(env_file))
    assert settings.default_style is CaseStyle.CAMEL
    assert settings.log_level == logging.INFO


def test_environment_overrides_env_file(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(f"{STYLE_ENV}=camel\n")
    monkeypatch.setenv(STYLE_ENV, "dot")
    assert load_settings(str(env_file)).default_style is CaseStyle.DOT


def test_invalid_style_fails_loudly(monkeypatch, tmp_path):
    monkeypatch.setenv(STYLE_ENV, "wavy")
    with pytest.raises(InvalidStyleError):
        load_settings(str(tmp_path / "missing.env"))


def test_invalid_log_level(monkeypatch, tmp_path):
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    with pytest.raises(ValueError):
        load_settings(str(tmp_path / "missing.env"))
