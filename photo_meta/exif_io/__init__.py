# -*- coding: utf-8 -*-
"""
exif_io：exiftool 路径定位、元数据写入（参数构造 + 子进程执行）与读取归一化。
exiftool 可随应用放在可执行文件旁、resources 子目录，或安装到系统 PATH。
"""
from __future__ import annotations

from photo_meta.exif_io.config import DEFAULT_SETTINGS, get_settings_path, int_setting, load_settings, save_setting
from photo_meta.exif_io.errors import ExifToolError, MetadataParseError, MetadataReadError
from photo_meta.exif_io.exiftool_path import (
    get_exiftool_executable_name,
    get_exiftool_path,
    get_exiftool_version,
)
from photo_meta.exif_io.models import (
    BulkEmbedResult,
    BulkProgress,
    EmbedMetadataRequest,
    EmbedMetadataResult,
    ExifData,
)
from photo_meta.exif_io.reader import (
    READ_ARGS,
    normalize_metadata,
    parse_exiftool_json,
    read_exif_metadata,
)
from photo_meta.exif_io.writer import (
    ExifToolOutput,
    build_exiftool_args,
    build_exiftool_command,
    execute_exiftool,
    has_metadata,
    run_exiftool,
    split_keywords,
    validate_file,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "get_settings_path",
    "int_setting",
    "load_settings",
    "save_setting",
    "ExifToolError",
    "MetadataReadError",
    "MetadataParseError",
    "get_exiftool_executable_name",
    "get_exiftool_path",
    "get_exiftool_version",
    "BulkEmbedResult",
    "BulkProgress",
    "EmbedMetadataRequest",
    "EmbedMetadataResult",
    "ExifData",
    "READ_ARGS",
    "normalize_metadata",
    "parse_exiftool_json",
    "read_exif_metadata",
    "ExifToolOutput",
    "build_exiftool_args",
    "build_exiftool_command",
    "execute_exiftool",
    "has_metadata",
    "run_exiftool",
    "split_keywords",
    "validate_file",
]
