"""
Domain Constants: 서버 전역 상수.

기본 포트, 페이지 제목, 경로 상수 등.
"""

from pathlib import Path

# =============================================================================
# Server Defaults
# =============================================================================

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_TITLE = "Hello Main"
DEFAULT_LOG_LEVEL = "INFO"

# 시작 메시지 (stdout 그대로 출력)
STARTUP_MESSAGE = "Listening on port :{port}"

# =============================================================================
# Paths
# =============================================================================
# src/buken_coaching/
# ├── app/templates/   # Jinja2 HTML
# └── app/static/      # CSS

PACKAGE_ROOT = Path(__file__).parent.parent
PROJECT_ROOT = PACKAGE_ROOT.parent.parent
TEMPLATES_DIR = PACKAGE_ROOT / "app" / "templates"
STATIC_DIR = PACKAGE_ROOT / "app" / "static"
DEFAULT_CONFIG_FILENAME = "default.yaml"

BASE_LAYOUT_TEMPLATE = "base_layout.html"

# =============================================================================
# Environment Overrides
# =============================================================================

ENV_HOST = "BUKEN_HOST"
ENV_PORT = "BUKEN_PORT"
ENV_TITLE = "BUKEN_TITLE"
ENV_LOG_LEVEL = "BUKEN_LOG_LEVEL"
ENV_CONFIG = "BUKEN_CONFIG"

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
RENDER_FAILED_BODY = "failed to render template"
