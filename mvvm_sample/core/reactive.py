"""
반응형 스트림 기본 요소

Qt 시그널 위에 구독/해제 어휘를 얹어 ViewModel과 View 사이의
데이터 바인딩을 구성합니다.
- Disposable / DisposeBag: 구독 해제 관리
- Observable: 구독 가능한 스트림 인터페이스
- Just: 단일 값을 즉시 발행하고 완료되는 스트림
- SignalObservable: Qt 시그널을 Observable로 변환
- PublishSubject: 최신 값을 보관하지 않는 멀티캐스트 스트림
- BehaviorRelay: 최신 값을 보관하고 새 구독자에게 재전달하는 스트림
"""

from abc import ABC, ABCMeta, abstractmethod
from typing import Any, Callable, List, Optional

from PySide6.QtCore import QObject, Signal

from mvvm_sample.utils.logger import logger

OnNext = Callable[[Any], None]
OnError = Callable[[Exception], None]
OnCompleted = Callable[[], None]


class Disposable:
    """구독 해제 핸들

    dispose()는 여러 번 호출되어도 해제 동작을 한 번만 실행합니다.
    """

    def __init__(self, action: Optional[Callable[[], None]] = None):
        self._action = action
        self._is_disposed = False

    @property
    def is_disposed(self) -> bool:
        """해제 여부"""
        return self._is_disposed

    def dispose(self):
        """구독 해제"""
        if self._is_disposed:
            return
        self._is_disposed = True

        action, self._action = self._action, None
        if action is not None:
            action()

    @classmethod
    def disposed(cls) -> "Disposable":
        """이미 해제된 핸들 생성"""
        disposable = cls()
        disposable.dispose()
        return disposable


class DisposeBag:
    """Disposable 묶음 컨테이너

    소유 컴포넌트가 종료될 때 dispose()를 호출하면 담긴 모든 구독이
    한 번씩 해제됩니다. 해제된 이후에 추가된 항목은 즉시 해제됩니다.

    Examples:
        >>> bag = DisposeBag()
        >>> bag.insert(relay.subscribe(label.setText))
        >>> bag.dispose()
    """

    def __init__(self):
        self._disposables: List[Disposable] = []
        self._is_disposed = False

    def insert(self, *disposables: Disposable):
        """Disposable 추가

        Args:
            disposables: 보관할 Disposable 목록
        """
        if self._is_disposed:
            for disposable in disposables:
                disposable.dispose()
            return

        self._disposables.extend(disposables)

    def dispose(self):
        """보관 중인 모든 Disposable 해제"""
        self._is_disposed = True

        disposables, self._disposables = self._disposables, []
        for disposable in disposables:
            disposable.dispose()

    @property
    def is_disposed(self) -> bool:
        """해제 여부"""
        return self._is_disposed

    def __len__(self) -> int:
        return len(self._disposables)


def _disconnect(signal, slot: Callable):
    """시그널 연결 해제

    발신 객체가 이미 파괴된 경우의 예외는 로그만 남깁니다.
    """
    try:
        signal.disconnect(slot)
    except (RuntimeError, TypeError) as e:
        logger.debug(f"시그널 연결 해제 생략: {e}")


class Observable(ABC):
    """구독 가능한 스트림 인터페이스"""

    @abstractmethod
    def subscribe(
        self,
        on_next: Optional[OnNext] = None,
        on_error: Optional[OnError] = None,
        on_completed: Optional[OnCompleted] = None,
    ) -> Disposable:
        """스트림 구독

        Args:
            on_next: 값 발행 시 호출
            on_error: 오류 발생 시 호출
            on_completed: 완료 시 호출

        Returns:
            구독 해제 핸들
        """

    def as_observable(self) -> "Observable":
        """읽기 전용 Observable로 반환"""
        return self


class Just(Observable):
    """단일 값을 구독 즉시 발행하고 완료되는 스트림"""

    def __init__(self, value: Any):
        self.value = value

    def subscribe(self, on_next=None, on_error=None, on_completed=None) -> Disposable:
        if on_next is not None:
            on_next(self.value)
        if on_completed is not None:
            on_completed()
        return Disposable.disposed()

    def __repr__(self) -> str:
        return f"Just({self.value!r})"


class SignalObservable(Observable):
    """Qt 시그널을 Observable로 변환

    구독 시 시그널에 연결하고, 해제 시 연결을 끊습니다.
    시그널 인자가 없으면 None을, 있으면 첫 번째 인자를 발행합니다.

    Examples:
        >>> text_observable = SignalObservable(line_edit.textEdited)
        >>> tap_observable = SignalObservable(button.clicked)
    """

    def __init__(self, signal):
        self._signal = signal

    def subscribe(self, on_next=None, on_error=None, on_completed=None) -> Disposable:
        if on_next is None:
            return Disposable.disposed()

        def slot(*args):
            on_next(args[0] if args else None)

        self._signal.connect(slot)
        return Disposable(lambda: _disconnect(self._signal, slot))


class QObjectABCMeta(type(QObject), ABCMeta):
    """QObject와 ABC를 동시에 상속하기 위한 메타클래스"""

    pass


class PublishSubject(QObject, Observable, metaclass=QObjectABCMeta):
    """최신 값을 보관하지 않는 멀티캐스트 스트림

    오류 또는 완료 이후에는 종료 상태가 되어 더 이상 값을 발행하지 않으며,
    이후 구독자는 종료 이벤트를 즉시 전달받습니다.
    """

    item_emitted = Signal(object)  # 발행 값
    error_raised = Signal(object)  # 오류 (Exception)
    completed = Signal()  # 완료

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._error: Optional[Exception] = None
        self._is_completed = False

    @property
    def is_terminated(self) -> bool:
        """오류 또는 완료로 종료되었는지 여부"""
        return self._is_completed or self._error is not None

    def on_next(self, value: Any = None):
        """값 발행"""
        if self.is_terminated:
            return
        self.item_emitted.emit(value)

    def on_error(self, error: Exception):
        """오류 발행 및 종료"""
        if self.is_terminated:
            return
        self._error = error
        self.error_raised.emit(error)

    def on_completed(self):
        """완료 발행 및 종료"""
        if self.is_terminated:
            return
        self._is_completed = True
        self.completed.emit()

    def subscribe(self, on_next=None, on_error=None, on_completed=None) -> Disposable:
        if self._error is not None:
            if on_error is not None:
                on_error(self._error)
            return Disposable.disposed()
        if self._is_completed:
            if on_completed is not None:
                on_completed()
            return Disposable.disposed()

        connections = []
        if on_next is not None:
            def next_slot(value):
                on_next(value)
            self.item_emitted.connect(next_slot)
            connections.append((self.item_emitted, next_slot))
        if on_error is not None:
            def error_slot(error):
                on_error(error)
            self.error_raised.connect(error_slot)
            connections.append((self.error_raised, error_slot))
        if on_completed is not None:
            def completed_slot():
                on_completed()
            self.completed.connect(completed_slot)
            connections.append((self.completed, completed_slot))

        def disconnect_all():
            for signal, slot in connections:
                _disconnect(signal, slot)

        return Disposable(disconnect_all)


class BehaviorRelay(QObject, Observable, metaclass=QObjectABCMeta):
    """최신 값을 보관하는 멀티캐스트 스트림

    새 구독자는 구독 즉시 현재 값을 전달받습니다.
    Relay는 오류나 완료로 종료되지 않습니다.
    """

    value_changed = Signal(object)  # 새 값

    def __init__(self, value: Any, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._value = value

    @property
    def value(self) -> Any:
        """현재 값"""
        return self._value

    def accept(self, value: Any):
        """새 값 저장 및 발행"""
        self._value = value
        self.value_changed.emit(value)

    def subscribe(self, on_next=None, on_error=None, on_completed=None) -> Disposable:
        if on_next is None:
            return Disposable.disposed()

        def slot(value):
            on_next(value)

        on_next(self._value)
        self.value_changed.connect(slot)
        return Disposable(lambda: _disconnect(self.value_changed, slot))


def bind_to(observable: Observable, setter: OnNext) -> Disposable:
    """단방향 바인딩 (observable → setter)

    Args:
        observable: 원본 스트림
        setter: 값을 반영할 호출 가능 객체 (예: QLabel.setText)

    Returns:
        바인딩 해제 핸들
    """
    return observable.subscribe(on_next=setter)
