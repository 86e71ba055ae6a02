# -*- coding: utf-8 -*-
"""单侧文本面板 — 标题 / 复制 / 清空 / 文本框 / 转换按钮"""

from PyQt5.QtWidgets import (
    QFrame, QVBoxLayout, QHBoxLayout, QTextEdit,
    QPushButton, QLabel, QShortcut
)
from PyQt5.QtGui import QFont, QKeySequence
from PyQt5.QtCore import pyqtSignal


class ScriptPanel(QFrame):
    """一个可编辑的文本缓冲区。

    信号:
        convert_requested  — 点击转换按钮或 Ctrl+Return
        copy_requested     — 点击复制
    """
    convert_requested = pyqtSignal()
    copy_requested = pyqtSignal()

    def __init__(self, title, color, placeholder, convert_label, parent=None):
        super().__init__(parent)
        self.setObjectName("scriptPanel")
        self._mono = QFont("Consolas", 11)
        self._mono.setStyleHint(QFont.Monospace)
        self._build_ui(title, color, placeholder, convert_label)

    # ── 骨架搭建 ────────────────────────────────────────────
    def _build_ui(self, title, color, placeholder, convert_label):
        self.setStyleSheet(
            "#scriptPanel{background:#ffffff; "
            "border:1px solid #dfe2e8; border-radius:10px;}")
        root = QVBoxLayout(self)
        root.setContentsMargins(16, 14, 16, 14)
        root.setSpacing(8)

        # 标题行
        hdr = QHBoxLayout()
        t = QLabel(title)
        t.setStyleSheet(
            f"font-size:16px; font-weight:bold; color:{color}; border:none;")
        hdr.addWidget(t)
        hdr.addStretch()
        self._char_label = QLabel("")
        self._char_label.setStyleSheet("color:#6b7a8d; border:none;")
        hdr.addWidget(self._char_label)
        self._copy_btn = QPushButton("复制")
        self._copy_btn.setFixedWidth(60)
        self._copy_btn.clicked.connect(lambda: self.copy_requested.emit())
        hdr.addWidget(self._copy_btn)
        self._clear_btn = QPushButton("清空")
        self._clear_btn.setFixedWidth(60)
        self._clear_btn.clicked.connect(self.clear)
        hdr.addWidget(self._clear_btn)
        root.addLayout(hdr)

        self.text_area = QTextEdit()
        self.text_area.setFont(self._mono)
        self.text_area.setAcceptRichText(False)
        self.text_area.setPlaceholderText(placeholder)
        self.text_area.setMinimumHeight(300)
        self.text_area.textChanged.connect(self._update_char_count)
        root.addWidget(self.text_area, stretch=1)

        self._convert_btn = QPushButton(convert_label)
        self._convert_btn.setFixedHeight(36)
        self._convert_btn.setStyleSheet(
            f"QPushButton{{background:{color};color:#fff;font-weight:bold;"
            f"font-size:13px;border-radius:4px;padding:0 22px}}"
            f"QPushButton:pressed{{background:#005a9e}}")
        self._convert_btn.clicked.connect(lambda: self.convert_requested.emit())
        root.addWidget(self._convert_btn)

        QShortcut(QKeySequence("Ctrl+Return"), self.text_area,
                  self.convert_requested.emit)

    # ── 缓冲区读写 ──────────────────────────────────────────
    def text(self) -> str:
        return self.text_area.toPlainText()

    def set_text(self, text: str):
        self.text_area.setPlainText(text)

    def clear(self):
        self.text_area.clear()

    def _update_char_count(self):
        t = self.text()
        self._char_label.setText(f"{len(t)} 字符" if t else "")
