"""
ViewModel 베이스 클래스

모든 ViewModel의 공통 기능을 제공합니다:
- 오류 처리 및 시그널
- 구독 수명 관리 (DisposeBag)
"""

from typing import Optional

from PySide6.QtCore import QObject, Signal

from mvvm_sample.core.reactive import Disposable, DisposeBag
from mvvm_sample.utils.logger import logger


class BaseViewModel(QObject):
    """ViewModel 베이스 클래스

    Qt 시그널을 통해 UI 업데이트를 알리고,
    구독은 DisposeBag에 모아 dispose() 시 한 번에 해제합니다.
    """

    # 공통 시그널
    error_occurred = Signal(str)  # 오류 발생 (메시지)
    disposed = Signal()  # 구독 해제 완료

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._error_message: Optional[str] = None
        self._dispose_bag = DisposeBag()

    @property
    def error_message(self) -> Optional[str]:
        """마지막 오류 메시지"""
        return self._error_message

    @property
    def is_disposed(self) -> bool:
        """구독 해제 여부"""
        return self._dispose_bag.is_disposed

    def handle_error(self, error: Exception):
        """오류 처리 및 시그널 발행

        Args:
            error: 발생한 예외
        """
        error_msg = str(error)
        self._error_message = error_msg
        logger.error(f"{type(self).__name__} 오류: {error_msg}")
        self.error_occurred.emit(error_msg)

    def clear_error(self):
        """오류 메시지 초기화"""
        self._error_message = None

    def add_subscription(self, *disposables: Disposable):
        """ViewModel 수명에 묶인 구독 등록"""
        self._dispose_bag.insert(*disposables)

    def dispose(self):
        """모든 구독 해제

        여러 번 호출해도 안전하며, 시그널은 처음 한 번만 발행됩니다.
        """
        if self.is_disposed:
            return

        self._dispose_bag.dispose()
        logger.debug(f"{type(self).__name__} 구독 해제")
        self.disposed.emit()
