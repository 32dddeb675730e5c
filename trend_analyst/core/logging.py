"""
로깅 설정 모듈.

프로젝트 전체에서 사용하는 로깅 설정을 제공합니다.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union


# 로그 포맷
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# 로그 레벨 매핑
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# 기본 로그 디렉토리
DEFAULT_LOG_DIR = Path("logs")

# WARNING 이상만 남길 외부 라이브러리
NOISY_LOGGERS = ("httpx", "httpcore", "openai", "langchain", "langchain_openai")


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    log_dir: Optional[Union[str, Path]] = None,
) -> None:
    """
    로깅 설정 초기화.

    Args:
        level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: 로그 파일명 (None이면 파일 로깅 비활성화, 설정의 LOG_FILE)
        log_dir: 로그 디렉토리 경로 (설정의 LOG_DIR, 기본 logs/)
    """
    log_level = LOG_LEVELS.get(level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # 기존 핸들러 제거 (Streamlit 재실행 시 중복 방지)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_dir or DEFAULT_LOG_DIR) / log_file
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    모듈별 로거 반환.

    Args:
        name: 로거 이름 (보통 __name__ 사용)

    Returns:
        logging.Logger 인스턴스
    """
    return logging.getLogger(name)


def log_exception(logger: logging.Logger, error: Exception, context: str = "") -> None:
    """
    예외를 스택 트레이스와 함께 로깅.

    Args:
        logger: 로거 인스턴스
        error: 예외 객체
        context: 컨텍스트 설명
    """
    prefix = f"{context}: " if context else ""
    logger.error("%s%s: %s", prefix, type(error).__name__, error, exc_info=error)
