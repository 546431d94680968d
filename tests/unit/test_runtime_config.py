"""
Tests for runtime configuration loading.
"""

import pytest

from requester.config import HttpConfig, RuntimeConfig
from requester.http import RequestOption


pytestmark = pytest.mark.unit


def test_defaults():
    config = RuntimeConfig()

    assert config.http.connect_timeout == 10
    assert config.http.ssl_verify is True
    assert config.logging.level == "INFO"


def test_default_config_emits_no_options():
    assert HttpConfig().to_request_options() == {}


def test_to_request_options():
    config = HttpConfig(
        connect_timeout=2,
        timeout=30,
        follow_redirects=False,
        ca_bundle="/tmp/ca.pem",
        proxy="http://proxy:3128",
    )

    assert config.to_request_options() == {
        RequestOption.CONNECT_TIMEOUT: 2,
        RequestOption.TIMEOUT: 30,
        RequestOption.FOLLOW_REDIRECTS: False,
        RequestOption.CA_BUNDLE: "/tmp/ca.pem",
        RequestOption.PROXY: "http://proxy:3128",
    }


def test_from_dict_partial():
    config = RuntimeConfig.from_dict({"http": {"ssl_verify": False}})

    assert config.http.ssl_verify is False
    assert config.http.connect_timeout == 10
    assert config.logging.level == "INFO"


def test_from_dict_unknown_key():
    with pytest.raises(TypeError):
        RuntimeConfig.from_dict({"http": {"retries": 3}})


def test_from_env(monkeypatch):
    monkeypatch.setenv("REQUESTER_CONNECT_TIMEOUT", "2.5")
    monkeypatch.setenv("REQUESTER_SSL_VERIFY", "false")
    monkeypatch.setenv("REQUESTER_HTTP_PROXY", "http://proxy:3128")
    monkeypatch.setenv("REQUESTER_LOG_LEVEL", "DEBUG")

    config = RuntimeConfig.from_env()

    assert config.http.connect_timeout == 2.5
    assert config.http.ssl_verify is False
    assert config.http.proxy == "http://proxy:3128"
    assert config.logging.level == "DEBUG"


def test_with_env_overrides_keeps_file_values(monkeypatch):
    monkeypatch.setenv("REQUESTER_FOLLOW_REDIRECTS", "false")
    base = RuntimeConfig.from_dict({"http": {"timeout": 15}})

    config = base.with_env_overrides()

    assert config.http.timeout == 15
    assert config.http.follow_redirects is False
    assert base.http.follow_redirects is None


def test_with_env_overrides_noop():
    base = RuntimeConfig()

    assert base.with_env_overrides() is base


def test_from_yaml(tmp_path):
    path = tmp_path / "requester.yaml"
    path.write_text("http:\n  connect_timeout: 3\nlogging:\n  level: WARNING\n")

    config = RuntimeConfig.from_yaml(path)

    assert config.http.connect_timeout == 3
    assert config.logging.level == "WARNING"


def test_from_yaml_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        RuntimeConfig.from_yaml(tmp_path / "missing.yaml")


def test_to_dict_roundtrip():
    config = RuntimeConfig.from_dict({"http": {"proxy": "http://p:1"}, "extra": {"k": "v"}})

    assert RuntimeConfig.from_dict(config.to_dict()) == config
