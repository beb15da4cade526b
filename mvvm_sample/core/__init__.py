# Core module

from .reactive import (
    BehaviorRelay,
    Disposable,
    DisposeBag,
    Just,
    Observable,
    PublishSubject,
    SignalObservable,
    bind_to,
)

__all__ = [
    # Disposal
    'Disposable',
    'DisposeBag',
    # Streams
    'Observable',
    'Just',
    'SignalObservable',
    'PublishSubject',
    'BehaviorRelay',
    'bind_to',
]
