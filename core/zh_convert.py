# -*- coding: utf-8 -*-
"""中文简繁转换引擎 — 纯函数，无 UI 依赖

流程（两个方向各一套）:
    简 → 繁: zhconv(zh-tw) → 半角转全角 → 引号转「」『』
    繁 → 简: zhconv(zh-cn) → 全角转半角 → 引号转 " '

字形转换交给 zhconv，本模块只负责标点与引号的规范化。
转换器可以注入（任意 str -> str 的可调用对象），便于测试。
"""

import logging
import re
from typing import Callable, Optional

from .punctuation import to_fullwidth, to_halfwidth
from .quotes import QUOTE_CHARS, to_ascii_style, to_corner_style

HAS_ZHCONV = False
try:
    import zhconv as _zhconv
    HAS_ZHCONV = True
except ImportError:
    pass

logger = logging.getLogger(__name__)

ScriptConverter = Callable[[str], str]

TO_TRADITIONAL = 'to_traditional'
TO_SIMPLIFIED = 'to_simplified'

# 固定：大陆简体 ↔ 台湾繁体
LOCALE_MAP = {
    TO_TRADITIONAL: 'zh-tw',
    TO_SIMPLIFIED:  'zh-cn',
}


# zhconv 的 zh-cn / zh-tw 词典会改写引号（「」→ “” 等），
# 因此按引号切段，只把引号之间的文字交给 zhconv
_QUOTE_SPLIT = re.compile(
    '([' + re.escape(''.join(sorted(QUOTE_CHARS))) + '])')


def zhconv_converter(locale: str) -> ScriptConverter:
    """返回把文本转换到 locale 的 zhconv 转换函数，引号字符原样保留"""
    if locale not in LOCALE_MAP.values():
        raise ValueError(f"不支持的目标地区: {locale}")

    def convert(text: str) -> str:
        if not HAS_ZHCONV:
            raise RuntimeError("需要安装 zhconv:\npip install zhconv")
        return ''.join(
            part if not part or part in QUOTE_CHARS
            else _zhconv.convert(part, locale)
            for part in _QUOTE_SPLIT.split(text))

    return convert


def _run_converter(converter: ScriptConverter, text: str) -> str:
    """调用转换器并检查其返回值类型。

    这里校验的是转换器自身的约定，而不是用户输入：任何 str 输入都合法。
    """
    result = converter(text)
    if not isinstance(result, str):
        raise TypeError(
            f"转换器应返回 str，实际为 {type(result).__name__}")
    return result


def convert_to_traditional(text: str,
                           converter: Optional[ScriptConverter] = None) -> str:
    """简体 → 繁体，并统一为全角标点与直角引号"""
    if converter is None:
        converter = zhconv_converter(LOCALE_MAP[TO_TRADITIONAL])
    converted = _run_converter(converter, text)
    result = to_corner_style(to_fullwidth(converted))
    logger.debug("to_traditional: %d -> %d chars", len(text), len(result))
    return result


def convert_to_simplified(text: str,
                          converter: Optional[ScriptConverter] = None) -> str:
    """繁体 → 简体，并统一为半角标点与 ASCII 引号"""
    if converter is None:
        converter = zhconv_converter(LOCALE_MAP[TO_SIMPLIFIED])
    converted = _run_converter(converter, text)
    result = to_ascii_style(to_halfwidth(converted))
    logger.debug("to_simplified: %d -> %d chars", len(text), len(result))
    return result


_PIPELINES = {
    TO_TRADITIONAL: convert_to_traditional,
    TO_SIMPLIFIED:  convert_to_simplified,
}


def convert_zh(text, direction=TO_TRADITIONAL, converter=None):
    """按方向转换文本"""
    pipeline = _PIPELINES.get(direction)
    if pipeline is None:
        raise ValueError(f"不支持的转换方向: {direction}")
    return pipeline(text, converter)
