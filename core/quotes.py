# -*- coding: utf-8 -*-
"""引号转换 — ASCII / 弯引号 ↔ 直角引号（「」『』）

按出现顺序交替配对：第 1 个算开引号，第 2 个算闭引号，如此往复。
不根据字符本身判断开闭，也不修复不成对的引号；
奇数个引号时最后一个保持为开引号，例如 '"a"b"c"' → '「a」b「c」'。

双引号与单引号各自独立扫描、各自计数，互不影响。
"""

from typing import FrozenSet

# ── 字符集 ────────────────────────────────────────────────────
DOUBLE_TARGETS: FrozenSet[str] = frozenset('"“”')   # " “ ”
SINGLE_TARGETS: FrozenSet[str] = frozenset("'‘’")   # ' ‘ ’

CORNER_DOUBLE = ('「', '」')
CORNER_SINGLE = ('『', '』')

# 所有引号类字符，字形转换时需原样保留
QUOTE_CHARS: FrozenSet[str] = (DOUBLE_TARGETS | SINGLE_TARGETS
                               | frozenset(CORNER_DOUBLE + CORNER_SINGLE))


def _pair_quotes(text: str, targets: FrozenSet[str],
                 opener: str, closer: str) -> str:
    """单次从左到右扫描，命中 targets 时按开闭状态输出 opener / closer。

    开闭状态每次调用都从"开"开始，不跨调用保留。
    """
    out = []
    is_open = True
    for ch in text:
        if ch in targets:
            out.append(opener if is_open else closer)
            is_open = not is_open
        else:
            out.append(ch)
    return ''.join(out)


# ── ASCII / 弯引号 → 直角引号 ─────────────────────────────────
def to_corner_quotes(text: str) -> str:
    """" “ ” → 「 」"""
    return _pair_quotes(text, DOUBLE_TARGETS, *CORNER_DOUBLE)


def to_corner_single_quotes(text: str) -> str:
    """' ‘ ’ → 『 』"""
    return _pair_quotes(text, SINGLE_TARGETS, *CORNER_SINGLE)


# ── 直角引号 → ASCII ──────────────────────────────────────────
def to_ascii_double_quotes(text: str) -> str:
    """「 」 → \""""
    return _pair_quotes(text, frozenset(CORNER_DOUBLE), '"', '"')


def to_ascii_single_quotes(text: str) -> str:
    """『 』 → '"""
    return _pair_quotes(text, frozenset(CORNER_SINGLE), "'", "'")


# ── 组合：先双引号，再单引号 ──────────────────────────────────
def to_corner_style(text: str) -> str:
    return to_corner_single_quotes(to_corner_quotes(text))


def to_ascii_style(text: str) -> str:
    return to_ascii_single_quotes(to_ascii_double_quotes(text))
