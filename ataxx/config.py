# ataxx/config.py
import logging
import os
import tomllib
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    depth: int = 4
    seed: Optional[int] = None  # None leaves the AI players unseeded


@dataclass
class UIConfig:
    engine_name: str = "Ataxx"
    red_player: str = "manual"  # "manual" or "auto"
    blue_player: str = "auto"
    legend: bool = True  # label rows and columns in board dumps


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        # only keys that already exist on the dataclasses are taken
        for section in ("search", "ui"):
            if section in raw:
                target = getattr(cfg, section)
                for k, v in raw[section].items():
                    if hasattr(target, k):
                        setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = raw["log_level"]
        return cfg


def apply_env_overrides(cfg: Config) -> Config:
    # allow env override of depth for quick debugging
    override_depth = os.environ.get("ATAXX_SEARCH_DEPTH")
    if override_depth:
        try:
            cfg.search.depth = int(override_depth)
        except ValueError:
            logger.warning("ignoring ATAXX_SEARCH_DEPTH=%r: not an integer", override_depth)
    return cfg


# single globally importable config instance
CONFIG = apply_env_overrides(
    Config.load_from_toml(os.environ.get("ATAXX_CONFIG_TOML", "config.toml")))
