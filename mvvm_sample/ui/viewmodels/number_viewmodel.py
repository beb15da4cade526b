"""
MainWindow를 위한 ViewModel

텍스트 입력과 버튼 탭 두 이벤트 스트림을 받아
라벨과 텍스트 필드에 표시할 현재 값 하나를 관리합니다.
"""

from typing import Optional

from PySide6.QtCore import QObject

from mvvm_sample.config import INITIAL_VALUE, RANDOM_MAX, RANDOM_MIN
from mvvm_sample.core.reactive import BehaviorRelay, Observable, PublishSubject
from mvvm_sample.models.random_model import RandomModel, RandomModelProtocol
from mvvm_sample.utils.logger import logger

from .base_viewmodel import BaseViewModel


class NumberViewModel(BaseViewModel):
    """숫자 표시 ViewModel

    - number_relay: 현재 값 스트림 (초기값 "0", 최신 값 재전달)
    - button_subject: View가 버튼 탭을 전달하는 입력 스트림

    두 구독은 서로 독립적이며 마지막으로 기록한 값이 현재 값이 됩니다.
    """

    def __init__(
        self,
        text_observable: Observable,
        model: Optional[RandomModelProtocol] = None,
        button_observable: Optional[Observable] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)

        # 모델 인스턴스 (테스트 시 스텁 주입 가능)
        self.model = model or RandomModel()

        # UI에 표시할 데이터는 스트림으로 보관
        self.number_relay = BehaviorRelay(INITIAL_VALUE, parent=self)
        self.button_subject = PublishSubject(parent=self)

        self.add_subscription(
            text_observable.subscribe(
                on_next=self._on_text_input,
                on_error=self._on_text_error,
                on_completed=self._on_text_completed,
            ),
            self.button_subject.subscribe(on_next=self._on_button_tap),
        )

        if button_observable is not None:
            self.add_subscription(
                button_observable.subscribe(on_next=self.button_subject.on_next)
            )

    @property
    def current_value(self) -> str:
        """현재 값"""
        return self.number_relay.value

    # --- 텍스트 입력 ---

    def _on_text_input(self, num_text: Optional[str]):
        """텍스트 필드 입력 처리

        값이 없거나 빈 문자열이면 현재 값을 갱신하지 않습니다.
        """
        if self.is_disposed:
            return
        if num_text is None or num_text == "":
            logger.debug("빈 입력 무시")
            return

        self.number_relay.accept(num_text)

    def _on_text_error(self, error: Exception):
        """텍스트 입력 스트림 오류 (이후 입력 경로의 갱신 중단)"""
        logger.warning(f"텍스트 입력 스트림 오류: {error}")

    def _on_text_completed(self):
        """텍스트 입력 스트림 완료 (이후 입력 경로의 갱신 중단)"""
        logger.info("텍스트 입력 스트림 완료")

    # --- 버튼 탭 ---

    def tap(self):
        """버튼 탭 전달 (button_subject.on_next의 별칭)"""
        self.button_subject.on_next(None)

    def _on_button_tap(self, _=None):
        """버튼 탭 처리: 모델에서 난수를 받아 현재 값으로 설정"""
        if self.is_disposed:
            return

        try:
            subscription = self.model.generate_random_int(RANDOM_MIN, RANDOM_MAX).subscribe(
                on_next=self._on_generated,
                on_error=self.handle_error,
            )
        except Exception as e:
            logger.error("난수 생성 실패", exc_info=True)
            self.handle_error(e)
            return

        # 즉시 완료되지 않은 모델 스트림은 ViewModel 해제 시 함께 해제
        if not subscription.is_disposed:
            self.add_subscription(subscription)

    def _on_generated(self, num: int):
        """생성된 난수를 현재 값으로 설정"""
        if self.is_disposed:
            return
        self.number_relay.accept(str(num))
