"""
--------------------------------------------------------------------------------
<varmotif project>
varmotif/config.py

Scan configuration schema and YAML loader.

Example (either flat or nested under `scan:`):

    scan:
      engine: numpy
      strands: both
      case: fold
      workers: 4
      chunk_size: 8192
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

log = logging.getLogger(__name__)


class ScanConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    engine: Literal["python", "numpy"] = "python"
    strands: Literal["forward", "both"] = "forward"
    case: Literal["strict", "fold"] = Field(
        default="strict", description="Letter-case policy for text input; folding is never implicit"
    )
    workers: int = Field(default=1, ge=1)
    chunk_size: int = Field(default=4096, ge=1)


def load_config(path: Path | str) -> ScanConfig:
    cfg_path = Path(path).resolve()
    try:
        raw = yaml.safe_load(cfg_path.read_text()) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config {cfg_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed YAML in {cfg_path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Config root must be a mapping, got {type(raw).__name__}")
    if "scan" in raw:
        if set(raw) != {"scan"}:
            raise ConfigError(f"Unexpected top-level keys next to 'scan': {sorted(set(raw) - {'scan'})}")
        raw = raw["scan"] or {}
    try:
        cfg = ScanConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid scan config: {e}") from e
    log.debug("Loaded scan config from %s: %s", cfg_path, cfg.model_dump())
    return cfg
