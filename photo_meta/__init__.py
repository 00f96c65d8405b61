# -*- coding: utf-8 -*-
"""
photo_meta：桌面照片管理应用的后端子库，负责通过 exiftool 读写标题/描述/关键词，
以及通过 Pillow 生成预览缩略图。

用法:
    from photo_meta import embed_metadata, read_metadata
    from photo_meta.exif_io import get_exiftool_path
"""

from photo_meta.commands import (
    embed_metadata,
    embed_metadata_bulk,
    exiftool_status,
    make_thumbnail,
    read_metadata,
    read_metadata_bulk,
    suggest_keywords,
)
from photo_meta.exif_io import (
    BulkEmbedResult,
    BulkProgress,
    EmbedMetadataRequest,
    EmbedMetadataResult,
    ExifData,
    ExifToolError,
    MetadataParseError,
    MetadataReadError,
)
from photo_meta.thumbnail import ThumbnailError

__all__ = [
    "embed_metadata",
    "embed_metadata_bulk",
    "exiftool_status",
    "make_thumbnail",
    "read_metadata",
    "read_metadata_bulk",
    "suggest_keywords",
    "BulkEmbedResult",
    "BulkProgress",
    "EmbedMetadataRequest",
    "EmbedMetadataResult",
    "ExifData",
    "ExifToolError",
    "MetadataParseError",
    "MetadataReadError",
    "ThumbnailError",
]
