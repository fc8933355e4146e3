"""Tests for config discovery and loading."""

from pathlib import Path

import pytest

from xtaskops.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config, load_config
from xtaskops.config.models import XtaskConfig


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[ci]\nnightly = true\n")
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[ci]\nnightly = true\n")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("[powerset]\ndepth = 3\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path) == config_file

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_loads_from_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(
            "[ci]\nnightly = true\nclippy_max = false\n"
            "[powerset]\nexclude_no_default_features = true\n"
        )
        cfg = load_config(config_file)
        assert cfg.ci.nightly is True
        assert cfg.ci.clippy_max is False
        assert cfg.powerset.exclude_no_default_features is True
        assert cfg.powerset.depth == 2

    def test_defaults_without_file(self, tmp_path: Path) -> None:
        assert load_config(cwd=tmp_path) == XtaskConfig()
