import pytest

from core.quotes import (
    to_corner_quotes, to_corner_single_quotes,
    to_ascii_double_quotes, to_ascii_single_quotes,
    to_corner_style, to_ascii_style,
)


def test_corner_quotes_alternate():
    assert to_corner_quotes('"a"') == '「a」'
    assert to_corner_quotes('"a" and "b"') == '「a」 and 「b」'


def test_odd_count_leaves_dangling_opener():
    assert to_corner_quotes('"a"b"c"') == '「a」b「c」'
    assert to_corner_quotes('"a"b"') == '「a」b「'


def test_curly_quotes_are_paired_by_position():
    assert to_corner_quotes('“a”') == '「a」'
    # 方向不看字符本身，只看出现顺序
    assert to_corner_quotes('”a“') == '「a」'
    assert to_corner_quotes('"a”') == '「a」'


def test_corner_single_quotes():
    assert to_corner_single_quotes("'a' ‘b’") == '『a』 『b』'


@pytest.mark.parametrize("func,mark,expected", [
    (to_corner_quotes, '"', '「'),
    (to_corner_single_quotes, "'", '『'),
    (to_ascii_double_quotes, '」', '"'),
    (to_ascii_single_quotes, '』', "'"),
])
def test_parity_resets_each_call(func, mark, expected):
    # 上一次调用以"开"结束，下一次仍从"开"开始
    assert func(mark) == expected
    assert func(mark) == expected


def test_three_quotes_split_across_calls():
    assert to_corner_quotes('"a"b"') + to_corner_quotes('c"') == '「a」b「c「'


def test_ascii_double_quotes_ignore_parity_for_output():
    assert to_ascii_double_quotes('「a」') == '"a"'
    assert to_ascii_double_quotes('」a「') == '"a"'
    assert to_ascii_double_quotes('「「「') == '"""'


def test_ascii_single_quotes():
    assert to_ascii_single_quotes('『a』') == "'a'"


def test_double_and_single_passes_are_independent():
    # 单引号不影响双引号的开闭计数
    text = '"a \'b\' c"'
    assert to_corner_style(text) == '「a 『b』 c」'
    text = '\'x "y" z\''
    assert to_corner_style(text) == '『x 「y」 z』'


def test_round_trip_on_balanced_input():
    text = '"hello" and \'world\''
    corner = to_corner_single_quotes(to_corner_quotes(text))
    assert corner == '「hello」 and 『world』'
    assert to_ascii_single_quotes(to_ascii_double_quotes(corner)) == text


def test_round_trip_normalizes_curly_to_straight():
    text = '“hello” and ‘world’'
    assert to_ascii_style(to_corner_style(text)) == '"hello" and \'world\''


def test_non_target_passthrough():
    text = '你好，世界！ abc (1) 【2】'
    assert to_corner_style(text) == text
    assert to_ascii_style(text) == text


def test_corner_pass_ignores_corner_brackets():
    assert to_corner_quotes('「a」') == '「a」'
    assert to_ascii_double_quotes('"a"') == '"a"'


def test_empty_string():
    assert to_corner_style('') == ''
    assert to_ascii_style('') == ''
