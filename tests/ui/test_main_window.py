"""
MainWindow (View) 바인딩 테스트
"""

from unittest.mock import patch

import pytest
from PySide6.QtCore import Qt

from mvvm_sample.ui.main_window import MainWindow


@pytest.fixture
def window(qtbot, stub_model):
    """스텁 모델을 주입한 메인 윈도우"""
    win = MainWindow(model=stub_model)
    qtbot.addWidget(win)
    win.show()
    yield win
    win.dispose_bindings()


class TestMainWindow:
    """메인 윈도우 테스트"""

    def test_initial_render(self, window):
        """초기값 "0"이 라벨과 텍스트 필드에 표시"""
        assert window.label.text() == "0"
        assert window.text_field.text() == "0"

    def test_typing_updates_label(self, window, qtbot):
        """입력한 값이 라벨에 즉시 반영"""
        window.text_field.clear()

        qtbot.keyClicks(window.text_field, "42")

        assert window.label.text() == "42"
        assert window.text_field.text() == "42"
        assert window.vm.current_value == "42"

    def test_clearing_field_keeps_value(self, window, qtbot):
        """필드를 비워도 현재 값은 유지"""
        window.text_field.clear()
        qtbot.keyClicks(window.text_field, "5")

        window.text_field.selectAll()
        qtbot.keyClick(window.text_field, Qt.Key_Backspace)

        assert window.text_field.text() == ""
        assert window.label.text() == "5"
        assert window.vm.current_value == "5"

    def test_button_click_updates_label_and_field(self, window, qtbot, stub_model):
        """버튼 클릭 시 생성 값이 라벨과 텍스트 필드 모두에 반영"""
        qtbot.mouseClick(window.button, Qt.LeftButton)

        assert stub_model.calls == [(1, 100)]
        assert window.label.text() == "7"
        assert window.text_field.text() == "7"

    def test_programmatic_set_does_not_feed_back(self, window, qtbot, stub_model):
        """생성 값의 필드 반영이 다시 입력으로 전달되지 않음"""
        received = []
        window.vm.number_relay.subscribe(on_next=received.append)

        qtbot.mouseClick(window.button, Qt.LeftButton)

        assert received == ["0", "7"]

    def test_model_error_shows_message(self, window, make_failing_model, qtbot):
        """ViewModel 오류 시 메시지 박스 표시"""
        window.vm.model = make_failing_model(ValueError("empty range"))

        with patch("mvvm_sample.ui.main_window.QMessageBox.critical") as critical:
            qtbot.mouseClick(window.button, Qt.LeftButton)

        critical.assert_called_once()
        assert critical.call_args[0][2] == "empty range"
        assert window.label.text() == "0"

    def test_close_disposes_viewmodel(self, window):
        """윈도우 닫힘 시 ViewModel 구독 해제"""
        window.close()

        assert window.vm.is_disposed is True

    def test_no_updates_after_dispose(self, window, qtbot):
        """해제 이후 위젯 이벤트가 반영되지 않음"""
        window.dispose_bindings()

        qtbot.mouseClick(window.button, Qt.LeftButton)
        window.text_field.clear()
        qtbot.keyClicks(window.text_field, "99")

        assert window.vm.current_value == "0"
        assert window.label.text() == "0"

    def test_dispose_bindings_twice(self, window):
        """두 번 해제해도 예외 없음"""
        window.dispose_bindings()
        window.dispose_bindings()
        assert window.vm.is_disposed is True

    def test_viewmodel_dispose_releases_window_bindings(self, window):
        """ViewModel 해제 시 라벨 바인딩도 해제"""
        window.vm.dispose()

        window.vm.number_relay.accept("55")

        assert window.label.text() == "0"
        assert window.text_field.text() == "0"
