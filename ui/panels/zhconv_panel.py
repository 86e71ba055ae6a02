# -*- coding: utf-8 -*-
"""中文简繁转换面板 — 左简右繁，双向转换、交换、复制、清空"""

import logging

from PyQt5.QtWidgets import (
    QWidget, QHBoxLayout, QVBoxLayout, QPushButton, QLabel, QFrame,
    QApplication,
)

from core.zh_convert import (
    convert_zh, HAS_ZHCONV, TO_TRADITIONAL, TO_SIMPLIFIED,
)
from ui.toast import Toast
from .script_panel import ScriptPanel

logger = logging.getLogger(__name__)

EMPTY_INPUT_MSG = {
    TO_TRADITIONAL: "请输入简体中文文本",
    TO_SIMPLIFIED:  "请输入繁体中文文本",
}

USAGE = [
    '在左侧输入简体中文，点击"转换为繁体"按钮即可转换',
    '在右侧输入繁体中文，点击"转换为简体"按钮即可转换',
    "点击复制按钮可将文本复制到剪贴板",
    "点击清空按钮可清空对应区域的文本",
    '点击"交换文本"可将左右两侧的文本互换',
]


class ZhconvPanel(QWidget):

    def __init__(self, parent=None):
        super().__init__(parent)
        self._build_ui()
        self._toast = Toast(self)

    # ── 整体布局 ──────────────────────────────────────────────
    def _build_ui(self):
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 16)
        root.setSpacing(12)

        if not HAS_ZHCONV:
            warn = QLabel("⚠ 未安装 zhconv，请运行: pip install zhconv")
            warn.setStyleSheet("color:red;font-size:11px")
            root.addWidget(warn)

        row = QHBoxLayout()
        row.setSpacing(16)
        self.simplified = ScriptPanel(
            "简体中文", "#0078d4", "请输入简体中文...", "转换为繁体 →")
        self.traditional = ScriptPanel(
            "繁體中文", "#4b53bc", "請輸入繁體中文...", "← 转换为简体")
        row.addWidget(self.simplified)
        row.addWidget(self.traditional)
        root.addLayout(row, stretch=1)

        self.simplified.convert_requested.connect(self.convert_to_traditional)
        self.traditional.convert_requested.connect(self.convert_to_simplified)
        self.simplified.copy_requested.connect(
            lambda: self._copy(self.simplified, "简体文本"))
        self.traditional.copy_requested.connect(
            lambda: self._copy(self.traditional, "繁體文本"))

        # 底部操作按钮
        btn_row = QHBoxLayout()
        btn_row.addStretch()
        swap_btn = QPushButton("⇄ 交换文本")
        swap_btn.setFixedHeight(32)
        swap_btn.clicked.connect(self.swap)
        btn_row.addWidget(swap_btn)
        clear_btn = QPushButton("清空全部")
        clear_btn.setFixedHeight(32)
        clear_btn.clicked.connect(self.clear_all)
        btn_row.addWidget(clear_btn)
        btn_row.addStretch()
        root.addLayout(btn_row)

        root.addWidget(self._build_usage())

    def _build_usage(self):
        card = QFrame()
        card.setObjectName("usageCard")
        card.setStyleSheet(
            "#usageCard{background:rgba(255,255,255,0.5); "
            "border:1px solid #dfe2e8; border-radius:10px;}")
        lay = QVBoxLayout(card)
        lay.setContentsMargins(16, 12, 16, 12)
        title = QLabel("使用说明")
        title.setStyleSheet("font-weight:bold; border:none;")
        lay.addWidget(title)
        for line in USAGE:
            lbl = QLabel(f"• {line}")
            lbl.setStyleSheet("color:#6b7a8d; border:none;")
            lay.addWidget(lbl)
        return card

    # ── 转换 ──────────────────────────────────────────────────
    def convert_to_traditional(self):
        self._convert(self.simplified, self.traditional,
                      TO_TRADITIONAL, EMPTY_INPUT_MSG[TO_TRADITIONAL])

    def convert_to_simplified(self):
        self._convert(self.traditional, self.simplified,
                      TO_SIMPLIFIED, EMPTY_INPUT_MSG[TO_SIMPLIFIED])

    def _convert(self, src, dst, direction, empty_msg):
        text = src.text()
        if not text.strip():
            self._toast.error(empty_msg)
            return
        try:
            result = convert_zh(text, direction)
        except Exception as e:
            logger.exception("conversion %s failed", direction)
            self._toast.error(f"转换失败: {type(e).__name__}")
            return
        dst.set_text(result)
        self._toast.success("转换成功")

    # ── 其他操作 ──────────────────────────────────────────────
    def _copy(self, panel, label):
        t = panel.text()
        if not t.strip():
            self._toast.error("没有可复制的内容")
            return
        QApplication.clipboard().setText(t)
        self._toast.success(f"{label}已复制到剪贴板")

    def swap(self):
        s, t = self.simplified.text(), self.traditional.text()
        if not s.strip() and not t.strip():
            self._toast.error("请先输入文本")
            return
        self.simplified.set_text(t)
        self.traditional.set_text(s)

    def clear_all(self):
        self.simplified.clear()
        self.traditional.clear()
        self._toast.success("已清空所有内容")
