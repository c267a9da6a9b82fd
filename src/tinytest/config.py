from __future__ import annotations

from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_CONFIG_NAME = "tinytest.yaml"


class RunConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    paths: list[str] = ["tests"]
    patterns: list[str] = ["test_*.py", "*_test.py"]
    color: bool | None = None
    log_file: str | None = None
    verbose: bool = False

    @field_validator("paths")
    @classmethod
    def expand_path_variables(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("paths must not be empty")
        expanded = []
        for path in v:
            try:
                expanded.append(expandvars(path, nounset=True))
            except Exception as e:
                raise ValueError(f"cannot expand path '{path}': {e}") from e
        return expanded

    @field_validator("patterns")
    @classmethod
    def patterns_must_not_be_empty(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("patterns must not be empty")
        return v


def load_config(path: Path) -> RunConfig:
    """Load and validate a run config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    config = RunConfig(**raw)

    # Resolve relative paths relative to config file location
    config.paths = [
        p if Path(p).is_absolute() else str((config_dir / p).resolve())
        for p in config.paths
    ]
    if config.log_file and not Path(config.log_file).is_absolute():
        config.log_file = str((config_dir / config.log_file).resolve())

    return config
