from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

USER_CONFIG_PATH = Path.home() / ".trackboard_config.yaml"
DEFAULT_DATA_FILE = "roadmap.yaml"


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    if not data:
        if USER_CONFIG_PATH.exists():
            USER_CONFIG_PATH.unlink()
        return
    USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    USER_CONFIG_PATH.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def _set_value(key: str, value: Optional[str]) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data[key] = value
    else:
        data.pop(key, None)
    _save_config(data)


def get_user_lang() -> str:
    return str(_load_config().get("lang", "") or "").strip()


def set_user_lang(value: str) -> None:
    _set_value("lang", value)


def get_user_theme() -> str:
    return str(_load_config().get("theme", "") or "").strip()


def set_user_theme(value: str) -> None:
    _set_value("theme", value)


def get_data_path() -> Path:
    """Data file: $TRACKBOARD_DATA, then the user config, then ./roadmap.yaml."""
    env_path = os.getenv("TRACKBOARD_DATA")
    if env_path:
        return Path(env_path).expanduser()
    configured = str(_load_config().get("data_path", "") or "").strip()
    if configured:
        return Path(configured).expanduser()
    return Path.cwd() / DEFAULT_DATA_FILE


def set_data_path(value: str) -> None:
    _set_value("data_path", value)
