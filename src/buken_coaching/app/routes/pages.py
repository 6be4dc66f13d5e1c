"""
Page Routes: 사이트 페이지 (HTML).

- / → base layout (메서드 무관)
- /<anything> → 같은 페이지 ("/" 는 하위 경로 전체를 받음)

/health, /static 은 main.py 에서 먼저 등록되므로 여기서 가로채지 않는다.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from buken_coaching.domain.constants import TEMPLATES_DIR
from buken_coaching.web.components import Component, component_handler

# Jinja2 템플릿 설정
jinja_templates = Jinja2Templates(directory=TEMPLATES_DIR)

# 메서드 검사 없이 모두 페이지로 응답
PAGE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def build_router(component: Component) -> APIRouter:
    """컴포넌트를 "/" 이하 전체 경로에 등록한 라우터."""
    router = APIRouter()
    endpoint = component_handler(component, jinja_templates.env)

    router.add_api_route(
        "/",
        endpoint,
        methods=PAGE_METHODS,
        response_class=HTMLResponse,
        include_in_schema=False,
    )
    router.add_api_route(
        "/{path:path}",
        endpoint,
        methods=PAGE_METHODS,
        response_class=HTMLResponse,
        include_in_schema=False,
    )
    return router
