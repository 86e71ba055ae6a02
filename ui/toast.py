# -*- coding: utf-8 -*-
"""轻提示 — 浮在父窗口底部中央，数秒后自动隐藏"""

from PyQt5.QtWidgets import QLabel
from PyQt5.QtCore import Qt, QTimer

_STYLE = {
    'success': "background:#107c10;",
    'error':   "background:#d13438;",
}


class Toast(QLabel):
    DURATION_MS = 2000

    def __init__(self, parent):
        super().__init__(parent)
        self.setAlignment(Qt.AlignCenter)
        self.setAttribute(Qt.WA_TransparentForMouseEvents)
        self.hide()
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.hide)

    def success(self, msg: str):
        self._show(msg, 'success')

    def error(self, msg: str):
        self._show(msg, 'error')

    def _show(self, msg, kind):
        self.setText(msg)
        self.setStyleSheet(
            f"QLabel{{{_STYLE[kind]}color:#fff;font-size:13px;"
            f"border-radius:6px;padding:8px 18px;}}")
        self.adjustSize()
        p = self.parentWidget()
        self.move((p.width() - self.width()) // 2,
                  p.height() - self.height() - 36)
        self.raise_()
        self.show()
        self._timer.start(self.DURATION_MS)
