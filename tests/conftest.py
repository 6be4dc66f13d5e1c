"""
Pytest fixtures for the site server tests.

- 경로/설정 fixture
- TestClient fixture
- live_server: uvicorn을 백그라운드 스레드에서 실행
"""

import asyncio
import socket
import threading
import time
from collections.abc import Generator
from pathlib import Path

import httpx
import pytest
import uvicorn
import yaml
from fastapi.testclient import TestClient

from buken_coaching.app.main import create_app
from buken_coaching.core.config import Settings

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """테스트용 설정 (default.yaml / 환경변수와 무관)."""
    return Settings(host="127.0.0.1", port=3000, title="Hello Main")


@pytest.fixture
def write_config(tmp_path: Path):
    """dict → 임시 YAML 파일."""

    def _write(data: dict | str, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """FastAPI TestClient."""
    with TestClient(create_app(test_settings)) as client:
        yield client


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture(scope="session")
def live_server() -> Generator[str, None, None]:
    """
    FastAPI 앱을 백그라운드에서 실행하는 fixture.

    Returns:
        서버 URL (예: "http://127.0.0.1:54321")
    """
    host = "127.0.0.1"
    port = _free_port()
    app = create_app(Settings(host=host, port=port, title="Hello Main"))

    # 별도 스레드에서 서버 실행
    config = uvicorn.Config(app, host=host, port=port, log_level="error")
    server = uvicorn.Server(config)

    def run_server() -> None:
        asyncio.run(server.serve())

    thread = threading.Thread(target=run_server, daemon=True)
    thread.start()

    # 서버가 준비될 때까지 대기
    base_url = f"http://{host}:{port}"
    max_attempts = 50
    for _ in range(max_attempts):
        try:
            response = httpx.get(f"{base_url}/health", timeout=1.0)
            if response.status_code == 200:
                break
        except httpx.HTTPError:
            pass
        time.sleep(0.1)
    else:
        raise RuntimeError("Failed to start test server")

    yield base_url

    # 서버 종료
    server.should_exit = True
    thread.join(timeout=5)
