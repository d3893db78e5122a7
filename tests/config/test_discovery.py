"""Tests for config file discovery."""

from pathlib import Path

import pytest

from isbnctl.config.discovery import CONFIG_ENV_VAR, locate_config


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestLocateConfig:
    def test_in_start_dir(self, tmp_path: Path) -> None:
        toml = tmp_path / "isbnctl.toml"
        toml.write_text("")
        assert locate_config(start=tmp_path) == toml.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        toml = tmp_path / "isbnctl.toml"
        toml.write_text("")
        nested = tmp_path / "x" / "y"
        nested.mkdir(parents=True)
        assert locate_config(start=nested) == toml.resolve()

    def test_nothing_found(self, tmp_path: Path) -> None:
        assert locate_config(start=tmp_path) is None

    def test_env_var_beats_walk_up(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "isbnctl.toml").write_text("")
        custom = tmp_path / "elsewhere.toml"
        custom.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        assert locate_config(start=tmp_path) == custom

    def test_explicit_beats_env_var(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.toml"))
        explicit = tmp_path / "explicit.toml"
        assert locate_config(str(explicit), start=tmp_path) == explicit

    def test_missing_override_is_still_returned(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        missing = tmp_path / "missing.toml"
        monkeypatch.setenv(CONFIG_ENV_VAR, str(missing))
        assert locate_config(start=tmp_path) == missing
