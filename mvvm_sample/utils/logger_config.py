"""로거 설정 및 핸들러 팩토리

logging 핸들러 생성과 로거 설정을 중앙집중화합니다.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from mvvm_sample.config import LOG_FILENAME_PATTERN

from .app_paths import AppPaths


class LoggerConfig:
    """로거 설정 관리 클래스

    핸들러 팩토리 메서드와 로거 설정 유틸리티를 제공합니다.

    Examples:
        >>> from mvvm_sample.utils.logger_config import LoggerConfig
        >>> handler = LoggerConfig.create_file_handler()
        >>> logger = LoggerConfig.setup_logger('MyLogger', [handler])
    """

    DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    DEFAULT_LEVEL = logging.DEBUG

    @staticmethod
    def create_file_handler(
        log_dir: Optional[Path] = None,
        filename_pattern: str = LOG_FILENAME_PATTERN,
        level: int = logging.DEBUG,
        encoding: str = "utf-8",
    ) -> logging.FileHandler:
        """파일 핸들러 생성

        Args:
            log_dir: 로그 디렉토리. None이면 AppPaths에서 가져옴
            filename_pattern: 파일명 패턴. {date}는 YYYYMMDD로 치환됨
            level: 로그 레벨
            encoding: 파일 인코딩

        Returns:
            설정된 파일 핸들러
        """
        filename = filename_pattern.format(date=datetime.now().strftime("%Y%m%d"))

        if log_dir is None:
            log_file = AppPaths.get_log_file(filename)
        else:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file = log_dir / filename

        handler = logging.FileHandler(log_file, encoding=encoding)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LoggerConfig.DEFAULT_FORMAT))
        return handler

    @staticmethod
    def setup_logger(
        name: str,
        handlers: list[logging.Handler],
        level: int = logging.DEBUG,
        clear_existing: bool = True,
    ) -> logging.Logger:
        """로거 설정

        Args:
            name: 로거 이름
            handlers: 핸들러 리스트
            level: 로거 레벨
            clear_existing: 기존 핸들러 제거 여부 (중복 방지)

        Returns:
            설정된 로거
        """
        logger = logging.getLogger(name)
        logger.setLevel(level)

        if clear_existing:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()

        for handler in handlers:
            logger.addHandler(handler)

        # 부모 로거로 전파 방지 (중복 로그 방지)
        logger.propagate = False

        return logger
