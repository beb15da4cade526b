"""
pytest 설정 및 공통 픽스처
"""

import os
import tempfile
from pathlib import Path

import pytest

from mvvm_sample.utils.app_paths import AppPaths

# 디스플레이가 없는 환경에서도 위젯 테스트 실행
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# 로거가 생성하는 로그 파일을 임시 디렉토리로 보냄 (로거 import 전에 설정)
TEST_APP_ROOT = Path(tempfile.mkdtemp(prefix="mvvm_sample_test_"))
AppPaths.set_custom_root(TEST_APP_ROOT)

from mvvm_sample.core.reactive import Just, PublishSubject  # noqa: E402


class StubRandomModel:
    """결정적인 값을 순서대로 반환하는 스텁 모델"""

    def __init__(self, *values: int):
        self.values = list(values)
        self.calls = []

    def generate_random_int(self, x: int, y: int):
        self.calls.append((x, y))
        return Just(self.values.pop(0))


class FailingRandomModel:
    """항상 예외를 발생시키는 스텁 모델"""

    def __init__(self, error: Exception):
        self.error = error

    def generate_random_int(self, x: int, y: int):
        raise self.error


class StreamRandomModel:
    """값을 나중에 발행하는 스트림을 반환하는 스텁 모델"""

    def __init__(self):
        self.subject = PublishSubject()

    def generate_random_int(self, x: int, y: int):
        return self.subject


@pytest.fixture(autouse=True)
def restore_app_paths():
    """각 테스트 후 AppPaths를 테스트 루트로 원복"""
    yield
    AppPaths.set_custom_root(TEST_APP_ROOT)


@pytest.fixture
def app_root():
    """테스트용 애플리케이션 루트 디렉토리"""
    return TEST_APP_ROOT


@pytest.fixture
def stub_model():
    """기본 스텁 모델 (7, 100 순서로 반환)"""
    return StubRandomModel(7, 100)


@pytest.fixture
def text_subject(qtbot):
    """텍스트 입력 스트림 픽스처"""
    return PublishSubject()


@pytest.fixture
def make_stub_model():
    """값을 지정해 스텁 모델을 생성하는 팩토리"""
    return StubRandomModel


@pytest.fixture
def make_failing_model():
    """예외를 지정해 실패 모델을 생성하는 팩토리"""
    return FailingRandomModel


@pytest.fixture
def stream_model(qtbot):
    """나중에 값을 발행하는 스트림 모델"""
    return StreamRandomModel()
