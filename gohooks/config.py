import os
from typing import List, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator, model_validator

from gohooks import logger
from gohooks.utils import GoHooksConfigError

DEFAULT_CONFIG_NAME = ".gohooks.yaml"


class ToolsConfig(BaseModel):
    git: str = "git"
    gofmt: str = "gofmt"
    go: str = "go"
    golint: str = "golint"
    shellcheck: str = "shellcheck"


class HooksConfig(BaseModel):
    subject_max_length: int = 50
    commit_types: List[str] = ["fix", "feat", "refactor", "test", "docs", "perf", "style", "chore"]
    scope_min_length: int = 2
    scope_max_length: int = 20
    label_width: int = 70
    go_extension: str = ".go"
    shell_extension: str = ".sh"
    shellcheck_format: str = "gcc"
    tools: ToolsConfig = ToolsConfig()

    @field_validator("commit_types")
    @classmethod
    def commit_types_not_empty(cls, value):
        if not value:
            raise ValueError("at least one commit type is required")
        return value

    @model_validator(mode="after")
    def scope_bounds_ordered(self):
        if self.scope_max_length < self.scope_min_length:
            raise ValueError("scope_max_length can't be smaller than scope_min_length")
        return self


def load_config(config_path: str) -> HooksConfig:
    try:
        with open(config_path) as config_file:
            config_data = yaml.load(config_file, Loader=yaml.SafeLoader)
    except OSError as ex:
        raise GoHooksConfigError(f"Cannot read config [{config_path}]: {ex}")
    except yaml.YAMLError as ex:
        raise GoHooksConfigError(f"Incorrect yaml in config [{config_path}]: {ex}")

    if config_data is None:
        config_data = {}
    if not isinstance(config_data, dict):
        raise GoHooksConfigError(f"Config [{config_path}] must be a mapping.")

    try:
        return HooksConfig(**config_data)
    except ValidationError as ex:
        raise GoHooksConfigError(f"Incorrect config [{config_path}]:\n{ex}")


def find_config(config_path: Optional[str], repo_root: Optional[str]) -> HooksConfig:
    """Explicit path first, then .gohooks.yaml in the repository root, then defaults."""
    if config_path is not None:
        if not os.path.isfile(config_path):
            raise GoHooksConfigError(f"Config [{config_path}] does not exist.")
        logger.debug(f"Config: {config_path}")
        return load_config(config_path)

    if repo_root is not None:
        default_path = os.path.join(repo_root, DEFAULT_CONFIG_NAME)
        if os.path.isfile(default_path):
            logger.debug(f"Config: {default_path}")
            return load_config(default_path)

    logger.debug("Config: defaults")
    return HooksConfig()
