# -*- coding: utf-8 -*-
"""
元数据读取：exiftool -json -n 全量读取，再把 XMP/IPTC/EXIF/PNG/MWG 中同义的字段归一为
标题、描述、关键词三项。
"""
from __future__ import annotations

import json
from typing import Any

from photo_meta.exif_io.errors import MetadataParseError, MetadataReadError
from photo_meta.exif_io.exiftool_path import get_exiftool_path
from photo_meta.exif_io.models import ExifData
from photo_meta.exif_io.writer import run_exiftool, validate_file
from photo_meta.log import get_logger

_log = get_logger("exif_io.reader")

# -n：输出原始值，不做人类可读转换
READ_ARGS = ["-json", "-n"]

# 各规范字段的候选键，按优先级排列；命中第一个存在的键即停止。
TITLE_KEYS: tuple[str, ...] = (
    "XMP:Title",
    "Title",
    "IPTC:ObjectName",
    "ObjectName",
    "EXIF:ImageDescription",
    "ImageDescription",
    "PNG:Title",
    "MWG:Title",
)
DESCRIPTION_KEYS: tuple[str, ...] = (
    "XMP:Description",
    "Description",
    "IPTC:Caption-Abstract",
    "Caption-Abstract",
    "CaptionAbstract",
    "EXIF:ImageDescription",
    "ImageDescription",
    "PNG:Description",
    "MWG:Description",
)
KEYWORD_KEYS: tuple[str, ...] = (
    "XMP:Subject",
    "Subject",
    "IPTC:Keywords",
    "Keywords",
    "XMP-dc:Subject",
    "dc:Subject",
)


def _first_present(record: dict[str, Any], keys: tuple[str, ...]) -> tuple[bool, Any]:
    """返回 (是否命中, 值)。只看键是否存在，不看值是否为空。"""
    for key in keys:
        if key in record:
            return True, record[key]
    return False, None


def _text_value(record: dict[str, Any], keys: tuple[str, ...]) -> str | None:
    found, value = _first_present(record, keys)
    if found and isinstance(value, str):
        return value
    return None


def _keywords_value(record: dict[str, Any]) -> str | None:
    found, value = _first_present(record, KEYWORD_KEYS)
    if not found:
        return None
    if isinstance(value, list):
        items = [v for v in value if isinstance(v, str)]
        return ", ".join(items) if items else None
    if isinstance(value, str):
        return value
    return None


def parse_exiftool_json(stdout: str) -> dict[str, Any] | None:
    """
    解析 exiftool -json 输出并取第一条记录。

    - 非法 JSON 抛 MetadataParseError；
    - 空数组或顶层不是数组返回 None；
    - 第一项不是对象时返回空字典（所有字段视为缺失）。
    """
    try:
        payload = json.loads(stdout)
    except ValueError as e:
        raise MetadataParseError(f"Failed to parse ExifTool output: {e}") from e
    if not isinstance(payload, list) or not payload:
        return None
    first = payload[0]
    return first if isinstance(first, dict) else {}


def normalize_metadata(file_path: str, record: dict[str, Any] | None) -> ExifData:
    if not record:
        return ExifData(file_path=file_path)
    return ExifData(
        file_path=file_path,
        title=_text_value(record, TITLE_KEYS),
        description=_text_value(record, DESCRIPTION_KEYS),
        keywords=_keywords_value(record),
    )


def read_exif_metadata(file_path: str, exiftool_path: str | None = None) -> ExifData:
    """
    读取单个文件的标题/描述/关键词。

    文件无效、exiftool 无法启动或退出码非 0 时抛 MetadataReadError；
    输出无法解析时抛 MetadataParseError。字段缺失是正常情况，对应值为 None。
    """
    invalid = validate_file(file_path)
    if invalid is not None:
        raise MetadataReadError(invalid.message)

    exe = exiftool_path or get_exiftool_path()
    out = run_exiftool([exe, *READ_ARGS, file_path])
    if out.error is not None:
        if out.not_found:
            raise MetadataReadError(f"ExifTool not found. Tried path: {exe!r}")
        raise MetadataReadError(f"Failed to execute ExifTool: {out.os_error}")
    if out.returncode != 0:
        raise MetadataReadError(f"ExifTool failed: {out.stderr}")

    _log.debug("exiftool JSON output for %s: %s", file_path, out.stdout)
    data = normalize_metadata(file_path, parse_exiftool_json(out.stdout))
    _log.debug(
        "parsed metadata - title: %r, description: %r, keywords: %r",
        data.title,
        data.description,
        data.keywords,
    )
    return data
