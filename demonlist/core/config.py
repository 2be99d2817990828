from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_CONFIG_PATH = Path.home() / ".demonlist" / "config.yaml"


@dataclass
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    dark: bool = False


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """Read settings from YAML, then apply environment overrides.

    The file defaults to ~/.demonlist/config.yaml (or $DEMONLIST_CONFIG). A
    missing file is not an error; an unreadable one is logged and ignored.
    ``DEMONLIST_DATA_DIR`` and ``DEMONLIST_DARK=1`` win over the file.
    """
    if config_path is None:
        env_path = os.environ.get("DEMONLIST_CONFIG")
        config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

    settings = Settings()
    raw = _read_config(config_path)
    if raw.get("data_dir"):
        settings.data_dir = Path(str(raw["data_dir"])).expanduser()
    if "dark" in raw:
        settings.dark = bool(raw["dark"])

    env_data_dir = os.environ.get("DEMONLIST_DATA_DIR")
    if env_data_dir:
        settings.data_dir = Path(env_data_dir).expanduser()
    if os.environ.get("DEMONLIST_DARK") == "1":
        settings.dark = True
    return settings


def _read_config(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Could not load settings from %s: %s", path, e)
        return {}
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        logger.warning("Ignoring %s: expected a mapping at the top level", path)
        return {}
    return raw
