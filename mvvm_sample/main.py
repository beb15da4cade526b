#!/usr/bin/env python3
"""
MVVM Sample - Main Entry Point
반응형 데이터 바인딩 MVVM 예제
"""

import os
import sys

# UTF-8 locale 설정 (Qt 경고 방지)
if sys.platform != "win32":  # Windows가 아닌 경우에만
    os.environ["LC_ALL"] = "en_US.UTF-8"
    os.environ["LANG"] = "en_US.UTF-8"

import qdarkstyle
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication

from mvvm_sample.config import APP_NAME, ORGANIZATION_NAME, WINDOW_TITLE
from mvvm_sample.ui.main_window import MainWindow
from mvvm_sample.utils.logger import logger


def initialize_application(argv=None):
    """애플리케이션 초기화"""
    # High DPI 설정 (PySide6에서는 기본으로 활성화됨)
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(ORGANIZATION_NAME)
    app.setApplicationDisplayName(WINDOW_TITLE)

    # 다크 테마 적용
    app.setStyleSheet(qdarkstyle.load_stylesheet(qt_api="pyside6"))

    return app


def main():
    """메인 함수"""
    app = initialize_application()
    logger.info("애플리케이션 시작")

    window = MainWindow()
    window.show()

    exit_code = app.exec()
    logger.info(f"애플리케이션 종료 (코드: {exit_code})")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
