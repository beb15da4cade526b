"""애플리케이션 경로 관리 유틸리티

로그 파일이 저장될 경로를 중앙집중화하여 관리합니다.
테스트 환경에서는 커스텀 루트 경로를 주입할 수 있습니다.
"""
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QStandardPaths


class AppPaths:
    """애플리케이션 경로 중앙 관리 클래스

    경로를 클래스 변수에 캐싱하며, 테스트 환경에서
    커스텀 루트 경로를 주입할 수 있습니다.

    Examples:
        >>> from mvvm_sample.utils.app_paths import AppPaths
        >>> logs_dir = AppPaths.get_logs_dir()

        # 테스트 환경
        >>> AppPaths.set_custom_root(Path("/tmp/test"))
        >>> AppPaths.get_app_data_dir()  # /tmp/test
        >>> AppPaths.set_custom_root(None)  # 원복
    """

    # 클래스 변수: 경로 캐싱
    _app_data_dir: Optional[Path] = None
    _logs_dir: Optional[Path] = None

    # 설정: 커스텀 루트 디렉토리 (테스트용)
    _custom_root: Optional[Path] = None

    # QStandardPaths를 사용할 수 없을 때의 홈 디렉토리 하위 폴더
    FALLBACK_DIR_NAME = ".mvvm_sample"

    @classmethod
    def set_custom_root(cls, root: Optional[Path]):
        """커스텀 루트 디렉토리 설정 (테스트용)

        Args:
            root: 커스텀 루트 경로. None이면 기본 경로 사용
        """
        cls._custom_root = root
        cls._reset_cache()

    @classmethod
    def _reset_cache(cls):
        """경로 캐시 초기화"""
        cls._app_data_dir = None
        cls._logs_dir = None

    @classmethod
    def get_app_data_dir(cls) -> Path:
        """애플리케이션 데이터 디렉토리

        플랫폼별 표준 경로를 반환하며, 디렉토리가 없으면 자동 생성합니다.

        Returns:
            애플리케이션 데이터 디렉토리 경로

        Examples:
            - macOS: ~/Library/Application Support/MVVMSample
            - Windows: C:\\Users\\username\\AppData\\Local\\MVVMSample
            - Linux: ~/.local/share/MVVMSample
        """
        if cls._app_data_dir is None:
            if cls._custom_root:
                cls._app_data_dir = Path(cls._custom_root)
            else:
                app_data = QStandardPaths.writableLocation(
                    QStandardPaths.AppDataLocation
                )
                if not app_data:
                    # QStandardPaths가 빈 문자열 반환 시 fallback
                    app_data = str(Path.home() / cls.FALLBACK_DIR_NAME)
                cls._app_data_dir = Path(app_data)

            cls._app_data_dir.mkdir(parents=True, exist_ok=True)

        return cls._app_data_dir

    @classmethod
    def get_logs_dir(cls) -> Path:
        """로그 디렉토리

        Returns:
            로그 파일 디렉토리 경로
        """
        if cls._logs_dir is None:
            cls._logs_dir = cls.get_app_data_dir() / "logs"
            cls._logs_dir.mkdir(parents=True, exist_ok=True)

        return cls._logs_dir

    @classmethod
    def get_log_file(cls, filename: str) -> Path:
        """로그 파일 경로

        Args:
            filename: 로그 파일 이름

        Returns:
            로그 파일 전체 경로
        """
        return cls.get_logs_dir() / filename
