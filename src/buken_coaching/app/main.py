"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run buken-coaching --reload
- 프로덕션: uv run buken-coaching  (기본 :3000)
- 직접: uv run uvicorn --factory buken_coaching.app.main:create_app_from_env --port 3000
"""

import argparse
import logging
import os
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from dotenv import find_dotenv, load_dotenv
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from buken_coaching import __version__
from buken_coaching.app.routes import pages
from buken_coaching.core.config import Settings, load_settings, parse_port
from buken_coaching.core.logging import setup_logging, uvicorn_log_level
from buken_coaching.domain.constants import (
    ENV_CONFIG,
    ENV_HOST,
    ENV_LOG_LEVEL,
    ENV_PORT,
    ENV_TITLE,
    STARTUP_MESSAGE,
    STATIC_DIR,
)
from buken_coaching.domain.errors import BukenError
from buken_coaching.web.components import base_layout
from buken_coaching.web.theme import load_theme

logger = logging.getLogger(__name__)

APP_FACTORY_PATH = "buken_coaching.app.main:create_app_from_env"


# =============================================================================
# App Factory
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """애플리케이션 생명주기 로그."""
    settings: Settings = app.state.settings
    logger.info(f"Serving '{settings.title}' on http://{settings.host}:{settings.port}")

    yield

    logger.info("Shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    FastAPI 앱 생성.

    등록 순서가 곧 매칭 순서:
    1. /static (mount)
    2. /health
    3. / 및 그 외 전체 경로 → base layout 페이지
    """
    if settings is None:
        settings = load_settings()

    theme = load_theme(settings.theme)

    app = FastAPI(
        title="Buken Coaching",
        description="Buken coaching site",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.theme = theme

    # Static files (CSS)
    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    component = base_layout(settings.title, theme)
    app.include_router(pages.build_router(component), tags=["Pages"])

    return app


def create_app_from_env() -> FastAPI:
    """
    uvicorn --factory 용: 환경변수(.env)와 설정 파일에서 앱 생성.

    --reload 자식 프로세스도 이 경로로 로깅 설정까지 마친다.
    """
    settings = load_settings()
    setup_logging(settings.log_level)
    return create_app(settings)


# =============================================================================
# CLI Entry Point
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buken-coaching",
        description="Serve the Buken coaching site",
    )
    parser.add_argument("--host", help="바인드 주소 (기본: 0.0.0.0)")
    parser.add_argument("--port", help="포트 (기본: 3000)")
    parser.add_argument("--config", type=Path, help="설정 파일 경로 (기본: default.yaml)")
    parser.add_argument("--log-level", help="로그 레벨 (DEBUG, INFO, ...)")
    parser.add_argument("--reload", action="store_true", help="코드 변경 시 자동 재시작")
    return parser


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """CLI 플래그가 설정보다 우선."""
    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = parse_port(args.port, "--port")
    if args.log_level:
        settings.log_level = args.log_level.upper()
    return settings


def export_settings(settings: Settings, config_path: Path | None = None) -> None:
    """
    --reload 용: 자식 프로세스의 create_app_from_env 가 같은 설정을 읽도록 환경변수로 전달.
    """
    os.environ[ENV_HOST] = settings.host
    os.environ[ENV_PORT] = str(settings.port)
    os.environ[ENV_TITLE] = settings.title
    os.environ[ENV_LOG_LEVEL] = settings.log_level
    if config_path is not None:
        os.environ[ENV_CONFIG] = str(config_path.resolve())


def cli_environ(args: argparse.Namespace) -> dict[str, str]:
    """
    .env 를 반영한 환경변수 사본에서 CLI 플래그가 덮어쓸 키를 뺀다.

    잘못된 BUKEN_PORT 라도 --port 가 있으면 검증 대상이 아니다.
    """
    load_dotenv(find_dotenv(usecwd=True))
    environ = dict(os.environ)
    if args.host:
        environ.pop(ENV_HOST, None)
    if args.port:
        environ.pop(ENV_PORT, None)
    if args.log_level:
        environ.pop(ENV_LOG_LEVEL, None)
    return environ


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config, environ=cli_environ(args))
        settings = apply_cli_overrides(settings, args)
        setup_logging(settings.log_level)
    except BukenError as e:
        logging.basicConfig()
        logger.error(f"Invalid configuration: {e}")
        return 2

    print(STARTUP_MESSAGE.format(port=settings.port), flush=True)

    if args.reload:
        export_settings(settings, args.config)
        uvicorn.run(
            APP_FACTORY_PATH,
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level=uvicorn_log_level(settings.log_level),
            reload=True,
        )
    else:
        uvicorn.run(
            create_app(settings),
            host=settings.host,
            port=settings.port,
            log_level=uvicorn_log_level(settings.log_level),
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
