from dataclasses import dataclass

import numpy as np
import yaml

from .errors import ConfigError
from .status import MAX_ENERGY, MAX_GAS, MAX_HUNGER, CardinalDirection, Status


@dataclass
class SimConfig:
    rng_seed: int


@dataclass
class BatchConfig:
    n_runs: int
    max_turns: int
    output_dir: str


# -------------------------
# helpers
# -------------------------

def load_config(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def build_rng(seed: int):
    return np.random.default_rng(int(seed))


def _bounded(section: dict, key: str, default: int, upper: int) -> int:
    try:
        value = int(section.get(key, default))
    except (TypeError, ValueError):
        raise ConfigError(f"status.{key} must be an integer, got {section.get(key)!r}")
    if not 0 <= value <= upper:
        raise ConfigError(f"status.{key}={value} is outside [0, {upper}]")
    return value


def make_sim_cfg(cfg_yaml) -> SimConfig:
    s = cfg_yaml.get("sim") or {}
    return SimConfig(rng_seed=int(s.get("rng_seed", 0)))


def make_status(cfg_yaml) -> Status:
    """Initial status from the `status` section, defaults for anything missing."""
    s = cfg_yaml.get("status") or {}
    heading = str(s.get("heading", "NORTH")).upper()
    try:
        heading = CardinalDirection[heading]
    except KeyError:
        raise ConfigError(f"Unknown heading: {heading}")
    return Status(
        energy=_bounded(s, "energy", MAX_ENERGY, MAX_ENERGY),
        gas=_bounded(s, "gas", MAX_GAS, MAX_GAS),
        hunger=_bounded(s, "hunger", 0, MAX_HUNGER),
        heading=heading,
    )


def make_batch_cfg(cfg_yaml) -> BatchConfig:
    b = cfg_yaml.get("batch") or {}
    cfg = BatchConfig(
        n_runs=int(b.get("n_runs", 10)),
        max_turns=int(b.get("max_turns", 200)),
        output_dir=str(b.get("output_dir", "data/batch")),
    )
    if cfg.n_runs < 1 or cfg.max_turns < 1:
        raise ConfigError("batch.n_runs and batch.max_turns must be positive")
    return cfg
