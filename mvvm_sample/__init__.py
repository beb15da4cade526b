"""
MVVM Sample
PySide6 시그널 기반 반응형 데이터 바인딩 MVVM 예제
"""

__version__ = "0.1.0"
