# -*- coding: utf-8 -*-
"""关键词辅助：从标题提取候选关键词、合并多组逗号分隔关键词。"""
from __future__ import annotations

import re

from photo_meta.exif_io.writer import split_keywords

STOP_WORDS: frozenset[str] = frozenset(
    """
    a about above after again against all am an and any are aren't as at be because been
    before being below between both but by can cannot could couldn't did didn't do does
    doesn't doing don't down during each few for from further had hadn't has hasn't have
    haven't having he he'd he'll he's her here here's hers herself him himself his how how's
    i i'd i'll i'm i've if in into is isn't it it's its itself let's me more most mustn't my
    myself no nor not of off on once only or other ought our ours ourselves out over own same
    shan't she she'd she'll she's should shouldn't so some such than that that's the their
    theirs them themselves then there there's these they they'd they'll they're they've this
    those through to too under until up very was wasn't we we'd we'll we're we've were weren't
    what what's when when's where where's which while who who's whom why why's with won't
    would wouldn't you you'd you'll you're you've your yours yourself yourselves
    """.split()
)

_NON_WORD = re.compile(r"[^\w\s]")


def extract_keywords_from_title(title: str | None, limit: int = 5) -> list[str]:
    """小写化并去掉标点后按空白切分，过滤停用词与长度不超过 2 的词，去重保序。"""
    if not title:
        return []
    words = _NON_WORD.sub("", title.lower()).split()
    keywords: list[str] = []
    for word in words:
        if len(word) > 2 and word not in STOP_WORDS and word not in keywords:
            keywords.append(word)
    return keywords[:limit]


def merge_keywords(*texts: str | None) -> str:
    # 大小写不敏感去重，保留第一次出现的写法
    seen: set[str] = set()
    merged: list[str] = []
    for text in texts:
        for kw in split_keywords(text):
            key = kw.casefold()
            if key in seen:
                continue
            seen.add(key)
            merged.append(kw)
    return ", ".join(merged)
