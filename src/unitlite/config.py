from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict

OutputFormat = Literal["tap", "gtest", "plain"]

DEFAULT_TIME_LIMIT_MS = 500


class RunConfig(BaseModel):
    """Settings for a test run, loadable from YAML."""

    model_config = ConfigDict(extra="forbid")

    # None keeps the limit the test module's Registry was built with
    default_time_limit_ms: int | None = None
    format: OutputFormat = "tap"
    diagnostics_before_results: bool = True
    junit: str | None = None
    ignore_debugger: bool = False


def _expand(value: Any) -> Any:
    if isinstance(value, str):
        return expandvars(value, nounset=True)
    if isinstance(value, dict):
        return {k: _expand(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand(v) for v in value]
    return value


def load_config(path: Path) -> RunConfig:
    """Load and validate a run config from a YAML file.

    String values may reference ${VAR} or ${VAR:-default}; a reference to an
    unset variable without a default raises ValueError.
    """
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    try:
        raw = _expand(raw)
    except Exception as e:
        raise ValueError(f"{path}: {e}") from e

    config = RunConfig(**raw)

    # Resolve a relative junit path against the config file location
    if config.junit is not None and not Path(config.junit).is_absolute():
        config.junit = str((config_dir / config.junit).resolve())

    return config
