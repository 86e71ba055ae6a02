# -*- coding: utf-8 -*-
"""主窗口 — 标题区 + 简繁转换面板

布局:
    ┌──────────────────────────────────────────┐
    │          中文繁简转换工具 (标题区)          │
    ├────────────────────┬─────────────────────┤
    │  简体中文           │  繁體中文            │
    ├────────────────────┴─────────────────────┤
    │  交换文本 / 清空全部 · 使用说明             │
    └──────────────────────────────────────────┘
"""

from PyQt5.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import Qt

from .panels.zhconv_panel import ZhconvPanel

APP_TITLE = "中文繁简转换工具"
APP_SUBTITLE = "支持简体中文与繁体中文互相转换"


class MainWindow(QMainWindow):

    def __init__(self):
        super().__init__()
        self._setup_window()
        self._build_ui()

    # ── 窗口属性 ─────────────────────────────────────────────
    def _setup_window(self):
        self.setWindowTitle(APP_TITLE)
        self.resize(1100, 760)
        self.setMinimumSize(820, 600)

    # ── 整体布局 ─────────────────────────────────────────────
    def _build_ui(self):
        central = QWidget()
        central.setObjectName("contentArea")
        central.setStyleSheet("#contentArea{background:#f0f2f5;}")
        root = QVBoxLayout(central)
        root.setContentsMargins(0, 20, 0, 0)
        root.setSpacing(2)

        title = QLabel(APP_TITLE)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(
            "font-size:28px; font-weight:bold; color:#0078d4; "
            "background:transparent;")
        root.addWidget(title)

        sub = QLabel(APP_SUBTITLE)
        sub.setAlignment(Qt.AlignCenter)
        sub.setStyleSheet(
            "font-size:14px; color:#6b7a8d; background:transparent;")
        root.addWidget(sub)

        self.panel = ZhconvPanel()
        root.addWidget(self.panel, stretch=1)
        self.setCentralWidget(central)
