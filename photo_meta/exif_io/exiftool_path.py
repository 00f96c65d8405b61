# -*- coding: utf-8 -*-
"""
按平台定位 exiftool 可执行文件。
优先：配置指定路径 → 应用目录 → 应用目录/resources → 系统 PATH（裸名，运行时解析）。
"""
from __future__ import annotations

import os
import subprocess
import sys

from photo_meta.log import get_logger

_log = get_logger("exif_io.exiftool_path")

RESOURCES_DIR_NAME = "resources"


def get_exiftool_executable_name() -> str:
    """Windows 使用 exiftool.exe，其它平台为 exiftool。"""
    return "exiftool.exe" if sys.platform.startswith("win") else "exiftool"


def _app_dir() -> str:
    """运行中应用可执行文件所在目录；打包态为 sys.executable，开发态为入口脚本。"""
    if getattr(sys, "frozen", False):
        exe = sys.executable
    else:
        exe = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    return os.path.dirname(os.path.abspath(exe))


def get_exiftool_path(override: str | None = None) -> str:
    """
    返回应尝试的 exiftool 路径，总是有值。

    前两级只做存在性检查；最后回退到裸名 "exiftool"，由子进程启动时按 PATH 解析，
    找不到的情况要到 spawn 失败才会暴露。
    """
    p = str(override or "").strip()
    if p and os.path.isfile(p):
        return p
    if p:
        _log.warning("configured exiftool path does not exist, ignoring: %s", p)

    name = get_exiftool_executable_name()
    base = _app_dir()
    for candidate in (
        os.path.join(base, name),
        os.path.join(base, RESOURCES_DIR_NAME, name),
    ):
        if os.path.isfile(candidate):
            return candidate
    return name


def get_exiftool_version(path: str | None = None, timeout: float = 3) -> str | None:
    """
    轻量健康检查：运行 `exiftool -ver` 并返回版本号；不可用时返回 None。
    仅供诊断面板使用，读写流程本身不设超时。
    """
    exe = path or get_exiftool_path()
    try:
        cp = subprocess.run(
            [exe, "-ver"],
            check=False,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        _log.debug("exiftool probe failed for %s: %s", exe, e)
        return None
    if cp.returncode != 0:
        return None
    version_text = (cp.stdout or "").strip()
    return version_text or None
