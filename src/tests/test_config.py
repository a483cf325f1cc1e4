"""
Test loading configuration from environment variables
"""

import logging
import os

from pydantic import ValidationError
import pytest

from restdocs_testclient.config import Config
from restdocs_testclient.config_loader import get_config, get_config_from_env_vars, set_config

logger = logging.getLogger("tests")


@pytest.fixture(autouse=True)
def fixture_reset_config():
    yield
    set_config(None)


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in ["RESTDOCS_OUTPUT_DIR", "RESTDOCS_AUTOSAVE", "RESTDOCS_DEFAULT_CHARSET", "RESTDOCS_TEXT_CONTENT_TYPES"]:
        monkeypatch.delenv(name, raising=False)

    config = Config()

    assert config.output_dir == ".restdocs"
    assert config.autosave is True
    assert config.default_charset == "utf-8"
    assert config.text_content_types == ["application/json", "application/text"]


def test_load_from_env_vars(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("RESTDOCS_OUTPUT_DIR", "build/docs")
    monkeypatch.setenv("RESTDOCS_AUTOSAVE", "false")
    monkeypatch.setenv("RESTDOCS_DEFAULT_CHARSET", "latin-1")
    monkeypatch.setenv("RESTDOCS_TEXT_CONTENT_TYPES", '["Application/HAL+JSON"]')

    config = get_config_from_env_vars(logger)

    assert config.output_dir == os.path.abspath("build/docs")
    assert config.autosave is False
    assert config.default_charset == "latin-1"
    assert config.text_content_types == ["application/hal+json"]


def test_invalid_charset(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("RESTDOCS_DEFAULT_CHARSET", "not-a-charset")

    with pytest.raises(ValidationError):
        Config()


def test_get_config_before_set_raises():
    with pytest.raises(ValueError, match="Config not set"):
        get_config()


def test_set_config():
    config = Config(RESTDOCS_OUTPUT_DIR="docs")

    set_config(config)

    assert get_config() is config
