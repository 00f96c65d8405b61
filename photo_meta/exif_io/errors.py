# -*- coding: utf-8 -*-
"""
exif_io 异常：仅用于读路径与非预期情况；写路径的预期失败以 EmbedMetadataResult 返回。
"""
from __future__ import annotations


class ExifToolError(RuntimeError):
    """exiftool 调用相关错误的基类。"""


class MetadataReadError(ExifToolError):
    """读取元数据失败（文件无效、exiftool 缺失或退出码非 0），消息可直接展示给用户。"""


class MetadataParseError(MetadataReadError):
    """exiftool 输出不是合法 JSON，属于外部工具违约。"""
