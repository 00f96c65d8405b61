# -*- coding: utf-8 -*-
"""
预览缩略图：解码 data URL / 读取文件，交给 Pillow 缩放并编码为 JPEG data URL。
"""
from __future__ import annotations

import base64
import binascii
import io
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from photo_meta.exif_io.writer import validate_file
from photo_meta.log import get_logger

_log = get_logger("thumbnail")

DEFAULT_MAX_SIZE = 512
DEFAULT_QUALITY = 70


class ThumbnailError(RuntimeError):
    """缩略图生成失败，消息可直接展示给用户。"""


def decode_data_url(data_url: str) -> tuple[str, bytes]:
    """解析 data:<mime>;base64,<data>，返回 (mime, bytes)。"""
    if not data_url or not data_url.startswith("data:"):
        raise ThumbnailError("Invalid data URL format")
    header, sep, payload = data_url.partition(",")
    if not sep:
        raise ThumbnailError("Invalid data URL: missing comma")
    mime = header[len("data:"):].split(";", 1)[0] or "application/octet-stream"
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ThumbnailError(f"Failed to decode base64: {e}") from e
    return mime, data


def _encode_thumbnail(image: Image.Image, max_size: int, quality: int) -> str:
    image = ImageOps.exif_transpose(image)
    # thumbnail() 只缩小不放大，保持宽高比
    image.thumbnail((max_size, max_size))
    if image.mode != "RGB":
        image = image.convert("RGB")
    buf = io.BytesIO()
    image.save(buf, format="JPEG", quality=quality, progressive=True)
    return "data:image/jpeg;base64," + base64.b64encode(buf.getvalue()).decode("ascii")


def _thumbnail_from_bytes(data: bytes, max_size: int, quality: int) -> str:
    try:
        with Image.open(io.BytesIO(data)) as image:
            image.load()
            return _encode_thumbnail(image, max_size, quality)
    except (UnidentifiedImageError, OSError) as e:
        raise ThumbnailError(f"Failed to load image: {e}") from e


def generate_thumbnail(
    data_url: str,
    max_size: int = DEFAULT_MAX_SIZE,
    quality: int = DEFAULT_QUALITY,
) -> str:
    """将图片 data URL 缩放到 max_size 以内，返回 JPEG data URL。"""
    mime, data = decode_data_url(data_url)
    _log.debug("thumbnail input: %s, %d bytes", mime, len(data))
    return _thumbnail_from_bytes(data, max_size, quality)


def generate_thumbnail_from_file(
    path: str | Path,
    max_size: int = DEFAULT_MAX_SIZE,
    quality: int = DEFAULT_QUALITY,
) -> str:
    file_path = str(path)
    invalid = validate_file(file_path)
    if invalid is not None:
        raise ThumbnailError(invalid.message)
    return _thumbnail_from_bytes(Path(file_path).read_bytes(), max_size, quality)
