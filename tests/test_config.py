import pytest

from csrgen.common.config import load_settings
from csrgen.common.errors import ArgumentError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("CSRGEN_KEY_SIZE", "CSRGEN_TEMPLATE", "CSRGEN_OUTPUT_ROOT", "CSRGEN_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.key_size == 2048
    assert settings.template_path == "template.yaml"
    assert settings.output_root == "."
    assert settings.log_level == "INFO"


def test_env_and_overrides(monkeypatch):
    monkeypatch.setenv("CSRGEN_KEY_SIZE", "4096")
    monkeypatch.setenv("CSRGEN_LOG_LEVEL", "warning")
    settings = load_settings(template_path="other.yaml")
    assert settings.key_size == 4096
    assert settings.log_level == "WARNING"
    assert settings.template_path == "other.yaml"
    assert load_settings(key_size=1024).key_size == 1024


@pytest.mark.parametrize("value", ["-5", "0", "lots"])
def test_invalid_key_size(monkeypatch, value):
    monkeypatch.setenv("CSRGEN_KEY_SIZE", value)
    with pytest.raises(ArgumentError, match="key_size"):
        load_settings()


def test_invalid_key_size_override():
    with pytest.raises(ArgumentError, match="key_size"):
        load_settings(key_size=0)


@pytest.mark.parametrize("value", ["LOUD", "basic_format", "notset"])
def test_invalid_log_level(monkeypatch, value):
    monkeypatch.setenv("CSRGEN_LOG_LEVEL", value)
    with pytest.raises(ArgumentError, match="log_level"):
        load_settings()
