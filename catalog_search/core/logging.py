"""로깅 설정

패키지 루트 로거("catalog_search")에 핸들러를 한 번만 붙이고,
각 모듈은 get_logger(__name__)로 하위 로거를 사용합니다.
"""
import logging
import os
import sys
from typing import Optional

from catalog_search.core.config import settings


ROOT_LOGGER_NAME = "catalog_search"

# Production 환경에서는 DEBUG 로그 비활성화
IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"

_PRODUCTION_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
_DEVELOPMENT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"


def _resolve_level(level_name: str, production: bool) -> int:
    level_name = (level_name or "INFO").upper()
    if production and level_name == "DEBUG":
        level_name = "INFO"
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level_name: Optional[str] = None, production: bool = IS_PRODUCTION) -> logging.Logger:
    """패키지 루트 로거 초기화

    Args:
        level_name: 로그 레벨 (기본: settings.log_level)
        production: 운영 포맷 사용 여부

    Returns:
        logging.Logger: "catalog_search" 로거
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = _resolve_level(level_name or settings.log_level, production)
    root.setLevel(level)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt=_PRODUCTION_FORMAT if production else _DEVELOPMENT_FORMAT,
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(handler)

    for handler in root.handlers:
        handler.setLevel(level)

    return root


def get_logger(name: str) -> logging.Logger:
    """모듈용 하위 로거 ("catalog_search.*" 밖의 이름은 루트 아래로 붙임)"""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


logger = setup_logging()


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """사용자 입력(검색어 등)을 로그에 남기기 전에 정리

    Args:
        value: 로깅할 문자열
        max_length: 최대 길이

    Returns:
        개행 제거 및 길이 제한된 문자열
    """
    if not value:
        return "[empty]"

    # 로그 라인 위조 방지
    result = value.replace("\r", " ").replace("\n", " ")

    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
