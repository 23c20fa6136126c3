# backend/config.py

import os
from dataclasses import dataclass
from typing import Optional

import yaml

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "game_config.yaml")
DEFAULT_PROFILE = "classic"

# Rows and columns are typed as single letters a-z
MAX_SIDE = 26


@dataclass(frozen=True)
class GameConfig:
    rows: int = 26
    cols: int = 26
    mine_divisor: int = 8
    seed: Optional[int] = None

    def __post_init__(self):
        for name in ("rows", "cols"):
            value = getattr(self, name)
            if not 1 <= value <= MAX_SIDE:
                raise ValueError(f"{name} must be between 1 and {MAX_SIDE}, got {value}")
        if self.mine_divisor < 1:
            raise ValueError(f"mine_divisor must be at least 1, got {self.mine_divisor}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")
        if self.mine_count >= self.total_cells:
            raise ValueError(
                f"{self.mine_count} mines leaves no safe cell on a "
                f"{self.rows}x{self.cols} board"
            )

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def mine_count(self) -> int:
        return self.total_cells // self.mine_divisor

    @classmethod
    def from_dict(cls, data: dict) -> "GameConfig":
        return cls(
            rows=int(data.get("rows", cls.rows)),
            cols=int(data.get("cols", cls.cols)),
            mine_divisor=int(data.get("mine_divisor", cls.mine_divisor)),
            seed=data.get("seed"),
        )


def load_profiles(config_path: str = DEFAULT_CONFIG_PATH) -> dict:
    with open(config_path, "r") as f:
        all_configs = yaml.safe_load(f) or {}
    if not isinstance(all_configs, dict):
        raise ValueError(f"{config_path} must map profile names to settings")
    return all_configs


def load_config(
    profile: str = DEFAULT_PROFILE,
    config_path: str = DEFAULT_CONFIG_PATH,
    **overrides,
) -> GameConfig:
    """
    Read one named profile from a YAML file and apply keyword overrides
    (rows, cols, mine_divisor, seed). None-valued overrides are ignored.
    """
    all_configs = load_profiles(config_path)
    if profile not in all_configs:
        raise KeyError(
            f"Unknown profile '{profile}'. Available: {', '.join(sorted(all_configs))}"
        )
    base = dict(all_configs[profile] or {})
    base.update({k: v for k, v in overrides.items() if v is not None})
    return GameConfig.from_dict(base)
