#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""中文繁简转换工具  入口

用法:
    python main.py                     # 启动界面
    python main.py --log-level DEBUG   # 输出转换调试日志
"""

import sys
import argparse
import logging
from PyQt5.QtWidgets import QApplication
from PyQt5.QtGui import QFont, QPalette, QColor
from PyQt5.QtCore import Qt

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="中文繁简转换工具")
    parser.add_argument("--log-level", default="WARNING",
                        choices=LOG_LEVELS, type=str.upper,
                        help="日志级别 (默认 WARNING)")
    return parser.parse_known_args(argv)


def main():
    args, qt_argv = parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # High-DPI 支持
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    app = QApplication(sys.argv[:1] + qt_argv)
    app.setStyle('Fusion')

    # ── 全局字体: 中英文兼顾 ──────────────────────────────
    font = QFont("Microsoft YaHei UI", 11)
    font.setStyleHint(QFont.SansSerif)
    app.setFont(font)

    # ── Fusion 调色板微调 ─────────────────────────────────
    palette = QPalette()
    palette.setColor(QPalette.Window,          QColor("#f0f2f5"))
    palette.setColor(QPalette.WindowText,      QColor("#1e2433"))
    palette.setColor(QPalette.Base,            QColor("#ffffff"))
    palette.setColor(QPalette.Text,            QColor("#1e2433"))
    palette.setColor(QPalette.Button,          QColor("#e8eaed"))
    palette.setColor(QPalette.ButtonText,      QColor("#1e2433"))
    palette.setColor(QPalette.Highlight,       QColor("#0078d4"))
    palette.setColor(QPalette.HighlightedText, QColor("#ffffff"))
    app.setPalette(palette)

    from ui.main_window import MainWindow
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == '__main__':
    main()
