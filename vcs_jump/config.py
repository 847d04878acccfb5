"""User configuration for vcs-jump.

Settings live in ~/.vcs-jump/config.yaml, or in the file named by the
VCS_JUMP_CONFIG environment variable. Every key is optional:

    editor: "gvim -f"      # overrides the VCS and environment editors
    default_editor: vim    # looked up on PATH as a last resort
    quickfix_flag: "-q"    # editor flag that loads the jump list file
    open_list_arg: "+copen"  # extra argument for the default editor
    keep_staging_file: false
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from vcs_jump.exceptions import ConfigError


CONFIG_ENV_VAR = "VCS_JUMP_CONFIG"

_CONFIG_DIR = Path.home() / ".vcs-jump"


class JumpConfig(BaseModel):
    """Editor hand-off settings."""

    editor: Optional[str] = None
    default_editor: str = "vim"
    quickfix_flag: str = "-q"
    open_list_arg: Optional[str] = "+copen"
    keep_staging_file: bool = False

    @field_validator("editor")
    @classmethod
    def blank_editor_is_unset(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("default_editor", "quickfix_flag")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


def get_config_file_path() -> Path:
    """Get path to the user config file.

    Returns:
        $VCS_JUMP_CONFIG if set, otherwise ~/.vcs-jump/config.yaml
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return _CONFIG_DIR / "config.yaml"


def load_config(config_file: Optional[Path] = None) -> JumpConfig:
    """Load the user configuration.

    Args:
        config_file: Explicit file to read (defaults to get_config_file_path()).

    Returns:
        JumpConfig. Defaults when the file doesn't exist.

    Raises:
        ConfigError: If the file can't be read, parsed or validated.
    """
    if config_file is None:
        config_file = get_config_file_path()

    if not config_file.exists():
        return JumpConfig()

    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config in {config_file}: expected a mapping")

    try:
        return JumpConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_file}: {e}")
