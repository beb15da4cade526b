"""
BaseViewModel 테스트
"""

from unittest.mock import Mock

import pytest

from mvvm_sample.core.reactive import Disposable
from mvvm_sample.ui.viewmodels.base_viewmodel import BaseViewModel


class TestBaseViewModel:
    """BaseViewModel 기본 동작 테스트"""

    @pytest.fixture
    def viewmodel(self, qtbot):
        """BaseViewModel 픽스처"""
        return BaseViewModel()

    def test_initial_state(self, viewmodel):
        """초기 상태 확인"""
        assert viewmodel.error_message is None
        assert viewmodel.is_disposed is False

    def test_handle_error_emits_signal(self, viewmodel, qtbot):
        """오류 처리 시 시그널 발행 확인"""
        # Given: 테스트 오류 생성
        test_error = RuntimeError("Test error message")

        # When: 오류 처리
        with qtbot.waitSignal(viewmodel.error_occurred, timeout=1000) as blocker:
            viewmodel.handle_error(test_error)

        # Then: 시그널 발행 및 메시지 저장 확인
        assert blocker.args == ["Test error message"]
        assert viewmodel.error_message == "Test error message"

    def test_clear_error(self, viewmodel):
        """오류 메시지 초기화 확인"""
        # Given: 오류 메시지가 설정된 상태
        viewmodel.handle_error(RuntimeError("Some error"))
        assert viewmodel.error_message is not None

        # When: 오류 초기화
        viewmodel.clear_error()

        # Then: 오류 메시지가 None
        assert viewmodel.error_message is None

    def test_dispose_releases_subscriptions(self, viewmodel, qtbot):
        """dispose 시 등록된 구독 해제 및 시그널 발행 확인"""
        # Given: 구독 두 개 등록
        actions = [Mock(), Mock()]
        viewmodel.add_subscription(*[Disposable(action) for action in actions])

        # When: 해제
        with qtbot.waitSignal(viewmodel.disposed, timeout=1000):
            viewmodel.dispose()

        # Then: 모든 구독 해제
        for action in actions:
            action.assert_called_once()
        assert viewmodel.is_disposed is True

    def test_dispose_twice_emits_once(self, viewmodel):
        """두 번 해제해도 시그널은 한 번만 발행"""
        emitted = []
        viewmodel.disposed.connect(lambda: emitted.append(True))

        viewmodel.dispose()
        viewmodel.dispose()

        assert emitted == [True]

    def test_add_subscription_after_dispose(self, viewmodel):
        """해제 이후 등록한 구독은 즉시 해제"""
        viewmodel.dispose()
        action = Mock()

        viewmodel.add_subscription(Disposable(action))

        action.assert_called_once()
