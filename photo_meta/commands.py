# -*- coding: utf-8 -*-
"""
GUI 壳层调用的入口：嵌入/读取元数据（单个与批量）、缩略图、关键词建议与 exiftool 状态查询。

    from photo_meta.commands import embed_metadata, read_metadata
    result = embed_metadata({"file_path": path, "title": "Sunset"})
    record = read_metadata(path)
"""
from __future__ import annotations

import os
from typing import Any, Callable, Iterable

from photo_meta.exif_io.config import int_setting, load_settings
from photo_meta.exif_io.errors import ExifToolError
from photo_meta.exif_io.exiftool_path import get_exiftool_path, get_exiftool_version
from photo_meta.exif_io.models import (
    BulkEmbedResult,
    BulkProgress,
    EmbedMetadataRequest,
    EmbedMetadataResult,
    ExifData,
)
from photo_meta.exif_io.reader import read_exif_metadata
from photo_meta.exif_io.writer import (
    NO_METADATA_MESSAGE,
    build_exiftool_command,
    execute_exiftool,
    has_metadata,
    validate_file,
)
from photo_meta.keywords import extract_keywords_from_title
from photo_meta.log import get_logger
from photo_meta.thumbnail import generate_thumbnail

_log = get_logger("commands")

ProgressCallback = Callable[[BulkProgress], None]


def _resolve_exiftool_path() -> str:
    return get_exiftool_path(load_settings().get("exiftool_path") or None)


def _as_request(request: EmbedMetadataRequest | dict[str, Any]) -> EmbedMetadataRequest:
    if isinstance(request, EmbedMetadataRequest):
        return request
    return EmbedMetadataRequest.from_dict(request)


def embed_metadata(request: EmbedMetadataRequest | dict[str, Any]) -> EmbedMetadataResult:
    """将标题/描述/关键词写入文件。预期内的失败都体现在返回值的 success/message 中。"""
    req = _as_request(request)

    invalid = validate_file(req.file_path)
    if invalid is not None:
        _log.warning("%s", invalid.message)
        return invalid

    if not has_metadata(req):
        return EmbedMetadataResult(success=True, message=NO_METADATA_MESSAGE, file_path=req.file_path)

    exiftool_path = _resolve_exiftool_path()
    cmd = build_exiftool_command(exiftool_path, req)
    return execute_exiftool(cmd, req, exiftool_path)


def read_metadata(file_path: str) -> ExifData:
    """读取归一化元数据；失败时抛 MetadataReadError（解析失败为其子类 MetadataParseError）。"""
    return read_exif_metadata(file_path, _resolve_exiftool_path())


def _notify(on_progress: ProgressCallback | None, progress: BulkProgress) -> None:
    if on_progress is not None:
        on_progress(progress)


def embed_metadata_bulk(
    requests: Iterable[EmbedMetadataRequest | dict[str, Any]],
    on_progress: ProgressCallback | None = None,
) -> BulkEmbedResult:
    """逐个写入，按结果分到 successful / failed。不并发、不重试。"""
    items = [_as_request(r) for r in requests]
    total = len(items)
    result = BulkEmbedResult(total_processed=total)
    for i, req in enumerate(items):
        _notify(on_progress, BulkProgress(i, total, os.path.basename(req.file_path), "writing"))
        res = embed_metadata(req)
        (result.successful if res.success else result.failed).append(res)
    _notify(on_progress, BulkProgress(total, total, "", "complete"))
    _log.info("bulk embed finished: %d ok, %d failed", len(result.successful), len(result.failed))
    return result


def read_metadata_bulk(
    paths: Iterable[str],
    on_progress: ProgressCallback | None = None,
) -> dict[str, ExifData]:
    """逐个读取；读取失败的文件对应空记录，错误写入日志。"""
    path_list = list(paths)
    total = len(path_list)
    out: dict[str, ExifData] = {}
    for i, path in enumerate(path_list):
        _notify(on_progress, BulkProgress(i, total, os.path.basename(path), "reading"))
        try:
            out[path] = read_metadata(path)
        except ExifToolError as e:
            _log.error("failed to read %s: %s", path, e)
            out[path] = ExifData(file_path=path)
    _notify(on_progress, BulkProgress(total, total, "", "complete"))
    return out


def exiftool_status() -> dict[str, Any]:
    path = _resolve_exiftool_path()
    version = get_exiftool_version(path)
    return {"path": path, "version": version, "available": version is not None}


def make_thumbnail(data_url: str) -> str:
    """按配置的尺寸与质量生成 JPEG data URL 缩略图；失败抛 ThumbnailError。"""
    settings = load_settings()
    return generate_thumbnail(
        data_url,
        max_size=int_setting(settings, "thumbnail_max_size"),
        quality=int_setting(settings, "thumbnail_quality"),
    )


def suggest_keywords(title: str | None) -> list[str]:
    return extract_keywords_from_title(title, limit=int_setting(load_settings(), "keyword_limit"))
