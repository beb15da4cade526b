"""
난수 생성 모델

UI와 무관한 비즈니스 로직을 정의합니다.
ViewModel은 RandomModelProtocol에만 의존하므로 테스트 시
결정적인 스텁 모델을 주입할 수 있습니다.
"""

import random
from typing import Optional, Protocol, runtime_checkable

from mvvm_sample.core.reactive import Just, Observable
from mvvm_sample.utils.logger import logger


@runtime_checkable
class RandomModelProtocol(Protocol):
    """난수 생성 기능 인터페이스"""

    def generate_random_int(self, x: int, y: int) -> Observable:
        """x 이상 y 이하의 정수 하나를 발행하는 Observable 반환"""
        ...


class RandomModel:
    """난수 생성 모델"""

    def __init__(self, rng: Optional[random.Random] = None):
        # 시드가 고정된 Random 인스턴스 주입 가능
        self._rng = rng or random.Random()

    def generate_random_int(self, x: int, y: int) -> Observable:
        """난수 생성

        Args:
            x: 최솟값
            y: 최댓값

        Returns:
            x 이상 y 이하의 정수를 발행하는 Observable

        Raises:
            ValueError: x가 y보다 큰 경우
        """
        num = self._rng.randint(x, y)
        logger.debug(f"난수 생성: {num} (범위 {x}~{y})")
        return Just(num)
