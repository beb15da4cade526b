"""
메인 윈도우 UI
"""
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QLabel, QLineEdit, QMainWindow, QMessageBox,
    QPushButton, QVBoxLayout, QWidget
)

from mvvm_sample.config import WINDOW_TITLE
from mvvm_sample.core.reactive import DisposeBag, SignalObservable, bind_to
from mvvm_sample.models.random_model import RandomModelProtocol
from mvvm_sample.ui.viewmodels.number_viewmodel import NumberViewModel
from mvvm_sample.utils.logger import logger


class MainWindow(QMainWindow):
    """메인 윈도우 클래스 (MVVM 패턴 적용)

    위젯 이벤트를 ViewModel 스트림으로 전달하고,
    ViewModel의 현재 값을 라벨과 텍스트 필드에 표시합니다.
    """

    def __init__(self, model: Optional[RandomModelProtocol] = None):
        super().__init__()

        self._dispose_bag = DisposeBag()

        # UI 구성 (ViewModel이 텍스트 필드 스트림을 사용하므로 먼저 생성)
        self.setup_ui()

        # ViewModel 초기화
        self.vm = NumberViewModel(
            text_observable=SignalObservable(self.text_field.textEdited),
            model=model,
        )

        self.bind_viewmodel()

        # ViewModel이 해제되면 윈도우 바인딩도 함께 해제
        self.vm.disposed.connect(self._on_viewmodel_disposed)

    def setup_ui(self):
        """UI 초기화"""
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(320, 180)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        layout = QVBoxLayout(central_widget)

        self.label = QLabel()
        self.label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.label)

        self.text_field = QLineEdit()
        self.text_field.setPlaceholderText("숫자 입력")
        layout.addWidget(self.text_field)

        self.button = QPushButton("난수 생성")
        layout.addWidget(self.button)

    def bind_viewmodel(self):
        """ViewModel 바인딩"""
        self._dispose_bag.insert(
            # ViewModel → 라벨
            bind_to(self.vm.number_relay, self.label.setText),
            # ViewModel → 텍스트 필드
            bind_to(self.vm.number_relay, self.update_text_field),
            # 버튼 → ViewModel
            bind_to(SignalObservable(self.button.clicked), self.vm.button_subject.on_next),
            # ViewModel 오류 → 메시지 박스
            bind_to(SignalObservable(self.vm.error_occurred), self.show_error),
        )

    def update_text_field(self, value: str):
        """텍스트 필드 UI 업데이트

        입력 중 커서 위치가 초기화되지 않도록 값이 다를 때만 갱신합니다.
        """
        if self.text_field.text() != value:
            self.text_field.setText(value)

    def show_error(self, message):
        """오류 메시지 표시"""
        QMessageBox.critical(self, "오류", message)

    def dispose_bindings(self):
        """ViewModel 구독 해제 (윈도우 바인딩은 disposed 시그널로 해제)"""
        self.vm.dispose()

    def _on_viewmodel_disposed(self):
        """윈도우 바인딩 해제"""
        self._dispose_bag.dispose()
        logger.info("메인 윈도우 바인딩 해제")

    def closeEvent(self, event):
        """윈도우 닫힘 시 구독 해제"""
        self.dispose_bindings()
        super().closeEvent(event)
