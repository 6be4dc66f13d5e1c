"""
Configuration: default.yaml + 환경변수(.env) → Settings.

우선순위 (뒤가 이김):
1. 코드 기본값 (domain/constants.py)
2. default.yaml
3. 환경변수 BUKEN_* (.env 포함)
4. CLI 플래그 (app/main.py)
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from buken_coaching.domain.constants import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_TITLE,
    ENV_CONFIG,
    ENV_HOST,
    ENV_LOG_LEVEL,
    ENV_PORT,
    ENV_TITLE,
    PROJECT_ROOT,
)
from buken_coaching.domain.errors import ConfigError, ErrorCodes

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """서버 설정."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    title: str = DEFAULT_TITLE
    log_level: str = DEFAULT_LOG_LEVEL
    theme: dict[str, Any] = field(default_factory=dict)


# =============================================================================
# Loading
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드. 파일이 없으면 빈 dict."""
    if config_path is None:
        config_path = PROJECT_ROOT / DEFAULT_CONFIG_FILENAME

    if not config_path.exists():
        logger.debug(f"Config file not found, using defaults: {config_path}")
        return {}

    with open(config_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(
                ErrorCodes.CONFIG_INVALID, path=str(config_path), cause=str(e)
            ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            ErrorCodes.CONFIG_INVALID, path=str(config_path), reason="not a mapping"
        )
    return data


def parse_port(value: Any, key: str) -> int:
    """포트 값 검증 (1..65535)."""
    if isinstance(value, bool):
        raise ConfigError(ErrorCodes.CONFIG_INVALID, key=key, value=value)
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ConfigError(ErrorCodes.CONFIG_INVALID, key=key, value=value) from None

    if not 1 <= port <= 65535:
        raise ConfigError(ErrorCodes.CONFIG_INVALID, key=key, value=value)
    return port


def _section(config: dict, name: str) -> dict:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(ErrorCodes.CONFIG_INVALID, key=name, reason="not a mapping")
    return section


def load_settings(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """
    Settings 생성.

    Args:
        config_path: YAML 경로 (None이면 BUKEN_CONFIG, 그것도 없으면 프로젝트 루트 default.yaml)
        environ: 환경변수 매핑 (None이면 .env 로드 후 os.environ)

    Returns:
        Settings

    Raises:
        ConfigError: 잘못된 설정값
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    if config_path is None and environ.get(ENV_CONFIG):
        config_path = Path(environ[ENV_CONFIG])

    config = load_config(config_path)
    server = _section(config, "server")
    site = _section(config, "site")
    logging_section = _section(config, "logging")

    settings = Settings(
        host=str(server.get("host", DEFAULT_HOST)),
        port=parse_port(server.get("port", DEFAULT_PORT), "server.port"),
        title=str(site.get("title", DEFAULT_TITLE)),
        log_level=str(logging_section.get("level", DEFAULT_LOG_LEVEL)).upper(),
        theme=_section(config, "theme"),
    )

    # 환경변수 오버라이드
    if environ.get(ENV_HOST):
        settings.host = environ[ENV_HOST]
    if environ.get(ENV_PORT):
        settings.port = parse_port(environ[ENV_PORT], ENV_PORT)
    if environ.get(ENV_TITLE):
        settings.title = environ[ENV_TITLE]
    if environ.get(ENV_LOG_LEVEL):
        settings.log_level = environ[ENV_LOG_LEVEL].upper()

    return settings
