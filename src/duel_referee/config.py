# Area: Shared
"""
duel_referee.config — Referee configuration
===========================================

Validated configuration for a referee run. Values come from, in
increasing priority:

    1. Model defaults
    2. A JSON config file (optional)
    3. Environment variables (a ``.env`` file in the working directory
       is loaded first)
    4. Command-line flags (applied by the CLI)

Example config.json:

    {
        "iters": 20,
        "timeout_ms": 500,
        "dilemma": {"both_defect": 1, "betrayal_reward": 10, "both_cooperate": 5},
        "tug_of_war": {"energy": 100}
    }
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

# Environment variable → config key
ENV_MAPPINGS = {
    "DUEL_REFEREE_ITERS": "iters",
    "DUEL_REFEREE_TIMEOUT_MS": "timeout_ms",
    "DUEL_REFEREE_LOG_FILE": "log_file",
    "DUEL_REFEREE_VERBOSE": "verbose",
}


class DilemmaConfig(BaseModel):
    """Payoff matrix of the iterated Prisoner's Dilemma."""
    model_config = ConfigDict(extra="forbid")

    both_defect: int = 1
    betrayal_reward: int = 10     # defector's payoff; the cooperator gets 0
    both_cooperate: int = 5


class TugOfWarConfig(BaseModel):
    """Starting energy of each Tug of War player."""
    model_config = ConfigDict(extra="forbid")

    energy: int = Field(default=100, ge=0)


class RefereeConfig(BaseModel):
    """Full configuration of one referee run."""
    model_config = ConfigDict(extra="forbid")

    iters: int = Field(default=10, ge=0)
    timeout_ms: int = Field(default=200, gt=0)
    verbose: bool = False
    log_file: Optional[str] = None
    dilemma: DilemmaConfig = Field(default_factory=DilemmaConfig)
    tug_of_war: TugOfWarConfig = Field(default_factory=TugOfWarConfig)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0


def load_config(
    config_path: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> RefereeConfig:
    """
    Load and validate configuration from file and environment.

    Parameters
    ----------
    config_path : str, optional
        Path to a JSON config file. Missing file is an error.
    env : Mapping, optional
        Environment to read overrides from. Defaults to os.environ
        after loading ``.env``.

    Raises
    ------
    ConfigError
        If the file cannot be read or any value is invalid.
    """
    data: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_path} must contain a JSON object")

    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in env:
            data[config_key] = env[env_key]

    return build_config(data)


def build_config(data: Dict[str, Any]) -> RefereeConfig:
    """Validate a raw dict into a RefereeConfig."""
    try:
        return RefereeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
