# -*- coding: utf-8 -*-
"""photo_meta.log – minimal logging for diagnostics (file + stderr).

Usage::
    from photo_meta.log import get_logger
    log = get_logger("exif_io.writer")
    log.info("embedding into %s", path)
    log.debug("command: %s", cmd)
"""
from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

APP_NAME = "PhotoMeta"


def _default_log_file() -> str | None:
    """打包后的桌面应用默认写入用户日志目录；开发态只输出到 stderr。"""
    override = os.environ.get("PHOTO_META_LOG_FILE", "").strip()
    if override:
        return override
    if not getattr(sys, "frozen", False):
        return None

    if sys.platform == "win32":
        base = (
            os.environ.get("LOCALAPPDATA")
            or os.environ.get("APPDATA")
            or str(Path.home() / "AppData" / "Local")
        )
        log_dir = Path(base) / APP_NAME / "logs"
    elif sys.platform == "darwin":
        log_dir = Path.home() / "Library" / "Logs" / APP_NAME
    else:
        log_dir = Path(os.environ.get("XDG_STATE_HOME") or (Path.home() / ".local" / "state")) / APP_NAME

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None
    return str(log_dir / "photo_meta.log")


LOG_FILE: str | None = _default_log_file()
LOG_LEVEL: str = os.environ.get("PHOTO_META_LOG_LEVEL", "INFO").upper()  # DEBUG | INFO | WARNING | ERROR

_LEVEL_ORDER = {"DEBUG": 0, "INFO": 1, "WARNING": 2, "ERROR": 3}


def set_log_level(level: str) -> None:
    """运行时调整全局日志级别（未知级别抛 ValueError）。"""
    global LOG_LEVEL
    lvl = str(level or "").upper()
    if lvl not in _LEVEL_ORDER:
        raise ValueError(f"unknown log level: {level!r}")
    LOG_LEVEL = lvl


def _level_ok(level: str) -> bool:
    return _LEVEL_ORDER.get(level.upper(), 0) >= _LEVEL_ORDER.get(LOG_LEVEL.upper(), 0)


def format_line(level: str, name: str, msg: str, *args: Any) -> str:
    text = msg % args if args else msg
    return f"{datetime.now().strftime('%Y-%m-%d %H:%M:%S')} {level} {name} {text}"


class _Logger:
    def __init__(self, name: str) -> None:
        self._name = name
        self._file: TextIO | None = None
        if LOG_FILE:
            try:
                self._file = open(LOG_FILE, "a", encoding="utf-8")  # noqa: SIM115
            except OSError:
                pass

    @property
    def name(self) -> str:
        return self._name

    def _write(self, level: str, msg: str, *args: Any) -> None:
        if not _level_ok(level):
            return
        line = format_line(level, self._name, msg, *args) + "\n"
        if self._file:
            try:
                self._file.write(line)
                self._file.flush()
            except OSError:
                pass
        # windowed builds may run without a usable stderr
        err = sys.stderr
        if err is None or not hasattr(err, "write"):
            return
        try:
            err.write(line)
            err.flush()
        except OSError:
            pass

    def debug(self, msg: str, *args: Any) -> None:
        self._write("DEBUG", msg, *args)

    def info(self, msg: str, *args: Any) -> None:
        self._write("INFO", msg, *args)

    def warning(self, msg: str, *args: Any) -> None:
        self._write("WARNING", msg, *args)

    def error(self, msg: str, *args: Any) -> None:
        self._write("ERROR", msg, *args)


_LOGGERS: dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    """按名称复用 logger，避免每个模块重复打开日志文件。"""
    logger = _LOGGERS.get(name)
    if logger is None:
        logger = _Logger(name)
        _LOGGERS[name] = logger
    return logger


def get_log_file_path() -> str | None:
    return LOG_FILE
