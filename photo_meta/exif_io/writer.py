# -*- coding: utf-8 -*-
"""
元数据写入：文件校验、exiftool 参数构造、子进程执行。
预期内的失败（文件缺失、exiftool 未找到、退出码非 0）全部以 EmbedMetadataResult 返回，不抛异常。
"""
from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass

from photo_meta.exif_io.models import EmbedMetadataRequest, EmbedMetadataResult
from photo_meta.log import get_logger

_log = get_logger("exif_io.writer")

OVERWRITE_ORIGINAL_FLAG = "-overwrite_original"
NO_METADATA_MESSAGE = "No metadata provided to embed"
SUCCESS_MESSAGE = "Metadata successfully embedded"

# 每个逻辑字段写入的标签；EXIF:ImageDescription 同时出现在标题与描述中，
# 两者都提供时描述在后，exiftool 以最后一次赋值为准。
TITLE_TAGS = ("XMP:Title", "IPTC:ObjectName", "EXIF:ImageDescription")
DESCRIPTION_TAGS = ("XMP:Description", "EXIF:ImageDescription", "IPTC:Caption-Abstract")
KEYWORD_LIST_TAG = "XMP:Subject"
KEYWORD_TEXT_TAG = "IPTC:Keywords"


@dataclass
class ExifToolOutput:
    """一次 exiftool 调用的原始结果；error 非空表示进程未能启动。"""

    returncode: int | None
    stdout: str = ""
    stderr: str = ""
    error: str | None = None
    os_error: str | None = None
    not_found: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and self.returncode == 0


def validate_file(file_path: str) -> EmbedMetadataResult | None:
    """路径存在且为普通文件时返回 None，否则返回失败结果。"""
    if not os.path.exists(file_path):
        return EmbedMetadataResult(
            success=False,
            message=f"File does not exist: {file_path}",
            file_path=file_path,
        )
    if not os.path.isfile(file_path):
        return EmbedMetadataResult(
            success=False,
            message=f"Path is not a file: {file_path}",
            file_path=file_path,
        )
    return None


def has_metadata(request: EmbedMetadataRequest) -> bool:
    """只看字段是否存在；空白字符串也算已提供。"""
    return request.title is not None or request.description is not None or request.keywords is not None


def split_keywords(text: str | None) -> list[str]:
    if not text:
        return []
    return [k.strip() for k in text.split(",") if k.strip()]


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def build_exiftool_args(request: EmbedMetadataRequest) -> list[str]:
    """按请求生成 exiftool 参数，最后两项固定为 -overwrite_original 与文件路径。"""
    args: list[str] = []

    if not _is_blank(request.title):
        args.extend(f"-{tag}={request.title}" for tag in TITLE_TAGS)

    if not _is_blank(request.description):
        args.extend(f"-{tag}={request.description}" for tag in DESCRIPTION_TAGS)

    if not _is_blank(request.keywords):
        keyword_list = split_keywords(request.keywords)
        if keyword_list:
            # XMP:Subject 为列表字段，每个关键词一条；IPTC:Keywords 保留原始字符串
            args.extend(f"-{KEYWORD_LIST_TAG}={k}" for k in keyword_list)
            args.append(f"-{KEYWORD_TEXT_TAG}={request.keywords}")

    args.append(OVERWRITE_ORIGINAL_FLAG)
    args.append(request.file_path)
    return args


def build_exiftool_command(exiftool_path: str, request: EmbedMetadataRequest) -> list[str]:
    return [exiftool_path, *build_exiftool_args(request)]


def run_exiftool(command: list[str]) -> ExifToolOutput:
    """
    启动 exiftool 并等待结束（不设超时）。读写两条路径共用。
    command[0] 为可执行文件路径；启动失败时返回带 error 的结果而不是抛异常。
    """
    exiftool_path = command[0]
    _log.debug("running: %s", command)
    try:
        cp = subprocess.run(
            command,
            check=False,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError as e:
        return ExifToolOutput(
            returncode=None,
            error=(
                f"Failed to execute exiftool: {e} - ExifTool not found. "
                "Please install ExifTool or ensure it's bundled with the application. "
                f"Tried path: {exiftool_path!r}"
            ),
            os_error=str(e),
            not_found=True,
        )
    except OSError as e:
        return ExifToolOutput(returncode=None, error=f"Failed to execute exiftool: {e}", os_error=str(e))
    except ValueError as e:
        # 参数中含 NUL 字符时 subprocess 拒绝启动
        return ExifToolOutput(returncode=None, error=f"Failed to execute exiftool: {e}", os_error=str(e))
    _log.debug("exiftool exited with %s", cp.returncode)
    return ExifToolOutput(returncode=cp.returncode, stdout=cp.stdout or "", stderr=cp.stderr or "")


def execute_exiftool(
    command: list[str],
    request: EmbedMetadataRequest,
    exiftool_path: str,
) -> EmbedMetadataResult:
    """执行写入命令并把退出码/stderr 转成 EmbedMetadataResult。"""
    out = run_exiftool(command)
    if out.error is not None:
        _log.error("%s", out.error)
        return EmbedMetadataResult(success=False, message=out.error, file_path=request.file_path)

    # 消息中保留完整 stderr；仅用去空白后的结果判断是否为空
    stderr = out.stderr
    if out.returncode == 0:
        # exiftool 成功时也可能输出警告（如文件格式不支持某些标签）
        message = SUCCESS_MESSAGE
        if stderr.strip():
            message += f" Warning: {stderr}"
            _log.warning("exiftool warning for %s: %s", request.file_path, stderr)
        else:
            _log.info("metadata embedded: %s", request.file_path)
        return EmbedMetadataResult(success=True, message=message, file_path=request.file_path)

    _log.error("exiftool (%s) failed on %s with code %s", exiftool_path, request.file_path, out.returncode)
    return EmbedMetadataResult(
        success=False,
        message=f"Failed to embed metadata. Exit code: {out.returncode}. Stderr: {stderr}",
        file_path=request.file_path,
    )
