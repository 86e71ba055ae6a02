# -*- coding: utf-8 -*-
"""标点规范：半角 ↔ 全角 — 纯函数，无 UI 依赖

只处理下表 10 个符号，引号方向交给 core.quotes，避免重复替换。
"""

from types import MappingProxyType
from typing import Mapping

# ── 半角 → 全角（唯一数据源）──────────────────────────────────
HALF_TO_FULL: Mapping[str, str] = MappingProxyType({
    ',': '，',
    '.': '。',
    ';': '；',
    ':': '：',
    '!': '！',
    '?': '？',
    '(': '（',
    ')': '）',
    '[': '【',
    ']': '】',
})

# 全角 → 半角：由上表键值对调得到，两表永远一致
FULL_TO_HALF: Mapping[str, str] = MappingProxyType(
    {full: half for half, full in HALF_TO_FULL.items()})


def map_punctuation(text: str, table: Mapping[str, str]) -> str:
    """逐字符替换：在 table 中的字符换成对应值，其余原样保留。"""
    return ''.join(table.get(ch, ch) for ch in text)


def to_fullwidth(text: str) -> str:
    return map_punctuation(text, HALF_TO_FULL)


def to_halfwidth(text: str) -> str:
    return map_punctuation(text, FULL_TO_HALF)
