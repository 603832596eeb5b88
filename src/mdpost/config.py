"""Persisted configuration loaded from a JSON file and env vars.

Loading order: JSON file -> env vars. The file lives at
``~/.blog/.config.json`` unless ``MDPOST_CONFIG`` or ``--config`` points
elsewhere. A missing file is not an error: the CLI runs first-time setup
and saves the result.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mdpost.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MDPOST_CONFIG"
CONFIG_DIRNAME = ".blog"
CONFIG_FILENAME = ".config.json"
DEFAULT_COMMIT_MESSAGE = "feat(blog): add new post"


class BlogConfig(BaseModel):
    """Author identity and blog repository location."""

    model_config = ConfigDict(populate_by_name=True)

    author: str
    email: str = ""
    project_path: str = Field(alias="projPath")
    post_subdir: str = Field(default="", alias="postSubDir")
    remote: str = "origin"
    commit_message: str = DEFAULT_COMMIT_MESSAGE

    @property
    def repo_dir(self) -> Path:
        """Blog repository root with ``~`` expanded and symlinks resolved."""
        return Path(self.project_path).expanduser().resolve()

    @property
    def post_dir(self) -> Path:
        """Directory that receives generated posts."""
        return (self.repo_dir / self.post_subdir).resolve()


def default_config_path() -> Path:
    """Return the config path, honouring ``MDPOST_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / CONFIG_DIRNAME / CONFIG_FILENAME


def load_config(path: Path) -> BlogConfig | None:
    """Load configuration from a JSON file.

    Args:
        path: Location of the config file.

    Returns:
        The loaded config with env var overrides applied, or None if the
        file does not exist.

    Raises:
        ConfigError: If the file exists but is unreadable or invalid.
    """
    if not path.exists():
        logger.info("No config file found at %s", path)
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        config = BlogConfig.model_validate(data)
    except (OSError, ValueError) as exc:
        # ValidationError and JSONDecodeError are both ValueErrors
        raise ConfigError(f"Invalid config at {path}: {exc}") from exc

    logger.info("Loaded config from %s", path)
    return apply_env_vars(config)


def save_config(config: BlogConfig, path: Path) -> None:
    """Write configuration as JSON using the on-disk key names."""
    try:
        path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
        path.write_text(
            config.model_dump_json(indent=2, by_alias=True) + "\n",
            encoding="utf-8",
        )
    except OSError as exc:
        raise ConfigError(f"Cannot write config to {path}: {exc}") from exc
    logger.info("Wrote preferences to %s", path)


def apply_env_vars(config: BlogConfig) -> BlogConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump()

    env_mapping: dict[str, str] = {
        "MDPOST_AUTHOR": "author",
        "MDPOST_EMAIL": "email",
        "MDPOST_PROJECT_PATH": "project_path",
        "MDPOST_POST_SUBDIR": "post_subdir",
        "MDPOST_REMOTE": "remote",
    }

    for env_var, field in env_mapping.items():
        value = os.environ.get(env_var)
        if value is not None:
            data[field] = value

    try:
        return BlogConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config override: {exc}") from exc
