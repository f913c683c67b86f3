from __future__ import annotations

from unittest.mock import patch

import pytest

from rgsearch import RipGrep
from rgsearch.config import RipGrepConfig
from rgsearch.error_handling import ConfigurationError


def test_defaults() -> None:
    cfg = RipGrepConfig()
    assert cfg.executable == "rg"
    assert cfg.encoding == "utf-8"
    assert cfg.errors == "replace"
    assert cfg.cwd is None
    assert cfg.timeout is None


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("RGSEARCH_RG_PATH", "RGSEARCH_ENCODING", "RGSEARCH_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    assert RipGrepConfig.from_env() == RipGrepConfig()


def test_from_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RGSEARCH_RG_PATH", "/opt/rg/bin/rg")
    monkeypatch.setenv("RGSEARCH_ENCODING", "latin-1")
    monkeypatch.setenv("RGSEARCH_TIMEOUT", "2.5")
    cfg = RipGrepConfig.from_env()
    assert cfg.executable == "/opt/rg/bin/rg"
    assert cfg.encoding == "latin-1"
    assert cfg.timeout == 2.5


@pytest.mark.parametrize("value", ["soon", "0", "-3"])
def test_from_env_bad_timeout(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("RGSEARCH_TIMEOUT", value)
    with pytest.raises(ConfigurationError) as exc_info:
        RipGrepConfig.from_env()
    assert exc_info.value.context["RGSEARCH_TIMEOUT"] == value


def test_resolve_executable() -> None:
    with patch("rgsearch.config.shutil.which", return_value="/usr/bin/rg") as which:
        assert RipGrepConfig().resolve_executable() == "/usr/bin/rg"
    which.assert_called_once_with("rg")

    with patch("rgsearch.config.shutil.which", return_value=None):
        assert RipGrepConfig(executable="nope").resolve_executable() is None


def test_environment_applies_only_through_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RGSEARCH_RG_PATH", "/opt/rg/bin/rg")
    monkeypatch.setenv("RGSEARCH_TIMEOUT", "2.5")

    plain = RipGrep("hello", "src")
    assert plain.tokens[0] == "rg"
    assert plain.cfg.timeout is None

    from_env = RipGrep("hello", "src", config=RipGrepConfig.from_env())
    assert from_env.tokens[0] == "/opt/rg/bin/rg"
    assert from_env.cfg.timeout == 2.5
