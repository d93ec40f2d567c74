"""Launcher configuration for NetSpawner."""

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

from .constants import CONFIG_FILENAME, NET_DIR_PREFIX, TESTNETS_SOURCE_DIR
from .exceptions import ConfigError

__all__ = ["Config", "load_config", "parse_nodes_count"]

logger = logging.getLogger(__name__)

NET_MODE_PATTERN = re.compile(r"^[A-Za-z0-9]+_(\d+)V$")


def parse_nodes_count(net_mode: str) -> int:
    """
    Extract the validator count from a network mode like ``TESTNET_21V``.

    Raises:
        ConfigError: If the mode does not end in ``_<N>V`` with N > 0
    """
    match = NET_MODE_PATTERN.match(net_mode)
    if match is None or int(match.group(1)) == 0:
        raise ConfigError(f"Invalid netMode {net_mode!r}, expected e.g. TESTNET_5V")
    return int(match.group(1))


@dataclass(frozen=True)
class Config:
    """Launcher settings read from ``config.json``."""

    core_path: str
    net_mode: str
    home: Path

    @classmethod
    def from_dict(cls, data: Dict[str, Any], home: Path) -> "Config":
        try:
            core_path = data["corePath"]
            net_mode = data["netMode"]
        except KeyError as e:
            raise ConfigError(f"Missing config key: {e.args[0]}") from e

        if not isinstance(core_path, str) or not core_path:
            raise ConfigError("corePath must be a non-empty string")
        if not isinstance(net_mode, str):
            raise ConfigError("netMode must be a string")

        parse_nodes_count(net_mode)
        return cls(core_path=core_path, net_mode=net_mode, home=home)

    @property
    def nodes_count(self) -> int:
        return parse_nodes_count(self.net_mode)

    @property
    def network_dir(self) -> Path:
        """Root of all node directories, e.g. ``<home>/XTESTNET_5V``."""
        return self.home / f"{NET_DIR_PREFIX}{self.net_mode}"

    @property
    def source_dir(self) -> Path:
        """Template files for this network mode."""
        return self.home.joinpath(*TESTNETS_SOURCE_DIR, self.net_mode)


def load_config(home: Union[str, Path] = ".") -> Config:
    """
    Load ``config.json`` from the launcher home directory.

    Raises:
        ConfigError: If the file is missing, not JSON, or incomplete
    """
    home = Path(home).resolve()
    path = home / CONFIG_FILENAME

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must hold a JSON object")

    config = Config.from_dict(data, home)
    logger.debug("Loaded config from %s: netMode=%s", path, config.net_mode)
    return config
