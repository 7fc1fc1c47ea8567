"""Tests for FinderConfig and the user config file."""

from __future__ import annotations

import json

import pytest

import finder.config as config_module
from finder.config import FinderConfig, read_user_config


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(config_module, "USER_CONFIG_FILE", path)
    return path


class TestReadUserConfig:
    def test_missing(self, config_file):
        assert read_user_config() == {}

    def test_valid(self, config_file):
        config_file.write_text(json.dumps({"timeout": 3}))
        assert read_user_config() == {"timeout": 3}

    def test_invalid_json(self, config_file):
        config_file.write_text("{oops")
        assert read_user_config() == {}

    def test_not_an_object(self, config_file):
        config_file.write_text("[1]")
        assert read_user_config() == {}


class TestFinderConfig:
    def test_defaults(self, config_file):
        config = FinderConfig.from_user_config()
        assert config.timeout == 10.0
        assert config.poll_interval == 0.5
        assert config.resources_file is None

    def test_file_values(self, config_file):
        config_file.write_text(json.dumps({"timeout": 2, "poll_interval": 0.1, "unknown": 1}))
        config = FinderConfig.from_user_config()
        assert config.timeout == 2
        assert config.poll_interval == 0.1

    def test_overrides_win(self, config_file):
        config_file.write_text(json.dumps({"timeout": 2}))
        config = FinderConfig.from_user_config(timeout=7, poll_interval=None)
        assert config.timeout == 7
        assert config.poll_interval == 0.5

    def test_make_wait(self):
        wait = FinderConfig(timeout=3, poll_interval=0.25).make_wait()
        assert wait.timeout == 3
        assert wait.poll_interval == 0.25

    def test_make_resolver_without_resources(self):
        assert FinderConfig().make_resolver().resolve("title") is None

    def test_make_resolver_with_resources(self, tmp_path):
        path = tmp_path / "r.json"
        path.write_text(json.dumps({"id": {"title": 16908310}}))
        resolver = FinderConfig(resources_file=str(path)).make_resolver()
        assert resolver.resolve("title") == 16908310

    def test_make_resolver_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            FinderConfig(resources_file=str(tmp_path / "nope.json")).make_resolver()
