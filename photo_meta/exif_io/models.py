# -*- coding: utf-8 -*-
"""
元数据请求/结果的数据结构。与 GUI 壳层之间以 dict（JSON）交换，键名使用 snake_case。
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


def _optional_str(value: Any, name: str) -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise TypeError(f"'{name}' must be a string, got {type(value).__name__}")


def _optional_keywords(value: Any) -> str | None:
    """关键词也接受字符串列表，按 ", " 拼接。"""
    if isinstance(value, (list, tuple)):
        if not all(isinstance(k, str) for k in value):
            raise TypeError("'keywords' list must contain only strings")
        return ", ".join(value)
    return _optional_str(value, "keywords")


@dataclass
class EmbedMetadataRequest:
    file_path: str
    title: str | None = None
    description: str | None = None
    keywords: str | None = None  # 逗号分隔

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmbedMetadataRequest":
        if not isinstance(data, dict):
            raise TypeError(f"request must be a dict, got {type(data).__name__}")
        file_path = data.get("file_path")
        if not file_path:
            raise ValueError("request is missing 'file_path'")
        return cls(
            file_path=str(file_path),
            title=_optional_str(data.get("title"), "title"),
            description=_optional_str(data.get("description"), "description"),
            keywords=_optional_keywords(data.get("keywords")),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class EmbedMetadataResult:
    success: bool
    message: str
    file_path: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ExifData:
    """单个文件归一化后的标题/描述/关键词。"""

    file_path: str
    title: str | None = None
    description: str | None = None
    keywords: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.title is None and self.description is None and self.keywords is None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class BulkProgress:
    completed: int
    total: int
    current_file: str
    status: str  # "reading" | "writing" | "complete"


@dataclass
class BulkEmbedResult:
    successful: list[EmbedMetadataResult] = field(default_factory=list)
    failed: list[EmbedMetadataResult] = field(default_factory=list)
    total_processed: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "successful": [r.to_dict() for r in self.successful],
            "failed": [r.to_dict() for r in self.failed],
            "total_processed": self.total_processed,
        }
