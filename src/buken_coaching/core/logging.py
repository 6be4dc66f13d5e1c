"""
Logging setup.

모든 모듈은 logger = logging.getLogger(__name__) 사용.
진입점(app/main.py)에서 한 번만 setup_logging 호출.
"""

import logging

from buken_coaching.domain.errors import ConfigError, ErrorCodes

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str) -> int:
    """레벨 이름 → logging 상수. 모르는 이름이면 ConfigError."""
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ConfigError(ErrorCodes.CONFIG_INVALID, key="logging.level", value=level)
    return resolved


def setup_logging(level: str = "INFO") -> None:
    """루트 로거 설정."""
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        force=True,
    )


def uvicorn_log_level(level: str) -> str:
    """uvicorn --log-level 값으로 변환 (WARN → warning, DEBUG 미만 → trace)."""
    value = resolve_level(level)
    if value < logging.DEBUG:
        return "trace"
    return logging.getLevelName(value).lower()
