"""Tests for config.py: BlogConfig, JSON loading and saving, env overrides."""

import json
from pathlib import Path

import pytest

from mdpost.config import (
    DEFAULT_COMMIT_MESSAGE,
    BlogConfig,
    default_config_path,
    load_config,
    save_config,
)
from mdpost.errors import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Remove env vars that apply_env_vars reads so tests see file values."""
    for key in (
        "MDPOST_CONFIG", "MDPOST_AUTHOR", "MDPOST_EMAIL",
        "MDPOST_PROJECT_PATH", "MDPOST_POST_SUBDIR", "MDPOST_REMOTE",
    ):
        monkeypatch.delenv(key, raising=False)


class TestBlogConfig:
    def test_defaults(self):
        cfg = BlogConfig(author="Ada", project_path="/blog")
        assert cfg.email == ""
        assert cfg.post_subdir == ""
        assert cfg.remote == "origin"
        assert cfg.commit_message == DEFAULT_COMMIT_MESSAGE

    def test_accepts_on_disk_keys(self):
        cfg = BlogConfig.model_validate(
            {"author": "Ada", "email": "a@x.io", "projPath": "/blog", "postSubDir": "posts"}
        )
        assert cfg.project_path == "/blog"
        assert cfg.post_subdir == "posts"

    def test_post_dir(self, tmp_path: Path):
        cfg = BlogConfig(author="Ada", project_path=str(tmp_path), post_subdir="posts")
        assert cfg.post_dir == (tmp_path / "posts").resolve()


class TestDefaultPath:
    def test_home_location(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert default_config_path() == tmp_path / ".blog" / ".config.json"

    def test_env_override(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("MDPOST_CONFIG", str(tmp_path / "cfg.json"))
        assert default_config_path() == tmp_path / "cfg.json"


class TestLoadSave:
    def test_missing_file_returns_none(self, tmp_path: Path):
        assert load_config(tmp_path / "missing.json") is None

    def test_round_trip_uses_on_disk_keys(self, tmp_path: Path):
        path = tmp_path / ".blog" / ".config.json"
        cfg = BlogConfig(author="Ada", email="a@x.io", project_path="/blog", post_subdir="posts")
        save_config(cfg, path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["author"] == "Ada"
        assert data["projPath"] == "/blog"
        assert data["postSubDir"] == "posts"
        assert load_config(path) == cfg

    def test_corrupt_json_raises(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_missing_required_field_raises(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"email": "a@x.io"}), encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)


class TestEnvOverrides:
    def test_env_vars_override_file(self, monkeypatch, tmp_path: Path):
        path = tmp_path / "config.json"
        save_config(BlogConfig(author="Ada", project_path="/blog"), path)
        monkeypatch.setenv("MDPOST_AUTHOR", "Grace")
        monkeypatch.setenv("MDPOST_REMOTE", "upstream")

        cfg = load_config(path)
        assert cfg.author == "Grace"
        assert cfg.remote == "upstream"
        assert cfg.project_path == "/blog"
