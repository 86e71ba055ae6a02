"""使用真实 zhconv 词典的端到端测试"""

import pytest

pytest.importorskip("zhconv")

from core.zh_convert import convert_to_traditional, convert_to_simplified  # noqa: E402


def test_simplified_to_traditional():
    out = convert_to_traditional('说话,请进!')
    assert out == '說話，請進！'


def test_traditional_to_simplified():
    out = convert_to_simplified('說話，請進！')
    assert out == '说话,请进!'


def test_end_to_end_corner_quotes_become_ascii():
    assert convert_to_simplified('他說：「你好，世界！」') == '他说:"你好,世界!"'


def test_single_corner_quotes_become_ascii():
    assert convert_to_simplified('『甲』') == "'甲'"


def test_curly_quotes_become_corner_quotes():
    assert convert_to_traditional('“你好”') == '「你好」'
    assert convert_to_traditional('‘说’') == '『說』'


def test_empty_input():
    assert convert_to_traditional('') == ''
    assert convert_to_simplified('') == ''
