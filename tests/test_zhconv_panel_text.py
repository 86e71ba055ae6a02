"""界面文案检查（只导入模块，不创建窗口）"""

import pytest

pytest.importorskip("PyQt5.QtWidgets")

from core.zh_convert import TO_TRADITIONAL, TO_SIMPLIFIED  # noqa: E402
from ui.panels.zhconv_panel import EMPTY_INPUT_MSG  # noqa: E402


def test_empty_input_messages_use_simplified_script():
    assert EMPTY_INPUT_MSG == {
        TO_TRADITIONAL: "请输入简体中文文本",
        TO_SIMPLIFIED:  "请输入繁体中文文本",
    }
    for msg in EMPTY_INPUT_MSG.values():
        assert '體' not in msg and '請' not in msg and '輸' not in msg
