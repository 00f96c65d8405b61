# -*- coding: utf-8 -*-
"""
photo_meta 配置：从 photo_meta.json 加载/保存。
路径可由环境变量 PHOTO_META_CONFIG 覆盖，否则使用用户可写的配置目录。
"""
from __future__ import annotations

import json
import os
import sys
from typing import Any

from photo_meta.log import get_logger

_log = get_logger("exif_io.config")

CONFIG_FILENAME = "photo_meta.json"

DEFAULT_SETTINGS: dict[str, Any] = {
    "exiftool_path": "",  # 为空表示自动定位
    "thumbnail_max_size": 512,
    "thumbnail_quality": 70,
    "keyword_limit": 5,
}


def _user_config_dir() -> str:
    if sys.platform == "win32":
        base = (
            os.environ.get("APPDATA")
            or os.environ.get("LOCALAPPDATA")
            or os.path.join(os.path.expanduser("~"), "AppData", "Roaming")
        )
        return os.path.join(base, "PhotoMeta")
    if sys.platform == "darwin":
        return os.path.join(os.path.expanduser("~"), "Library", "Application Support", "PhotoMeta")
    return os.path.join(
        os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config"),
        "PhotoMeta",
    )


def get_settings_path() -> str:
    override = os.environ.get("PHOTO_META_CONFIG", "").strip()
    if override:
        return override
    return os.path.join(_user_config_dir(), CONFIG_FILENAME)


def _read_json(path: str) -> dict:
    if not os.path.isfile(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        _log.warning("ignoring unreadable settings file %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def load_settings(path: str | None = None) -> dict[str, Any]:
    """读取配置：以 DEFAULT_SETTINGS 为底，只合并已知键；文件缺失或损坏时返回默认值。"""
    settings = dict(DEFAULT_SETTINGS)
    data = _read_json(path or get_settings_path())
    for k in DEFAULT_SETTINGS:
        if k in data:
            settings[k] = data[k]
    return settings


def save_setting(key: str, value: Any, path: str | None = None) -> None:
    """将单个配置键写入配置文件（先读全量再合并后写回）。"""
    if key not in DEFAULT_SETTINGS:
        raise KeyError(f"unknown setting: {key}")
    target = path or get_settings_path()
    data = _read_json(target)
    data[key] = value
    parent = os.path.dirname(target)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(target, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def int_setting(settings: dict[str, Any], key: str) -> int:
    """读取整数配置；值无法转换时记录警告并回退到 DEFAULT_SETTINGS。"""
    value = settings.get(key, DEFAULT_SETTINGS[key])
    try:
        return int(value)
    except (TypeError, ValueError):
        _log.warning("invalid value for setting %s: %r, using default", key, value)
        return int(DEFAULT_SETTINGS[key])
