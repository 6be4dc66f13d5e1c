"""
Page components: Jinja2 템플릿 + 컨텍스트 = 렌더 가능한 HTML 조각.

- Component: 템플릿 이름과 컨텍스트를 묶은 불변 값
- base_layout(): 사이트 공통 레이아웃 (title → <title>, <h1>)
- component_handler(): 컴포넌트를 매 요청마다 렌더링하는 엔드포인트
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

import jinja2
from fastapi import Request
from fastapi.responses import PlainTextResponse, Response

from buken_coaching.domain.constants import (
    BASE_LAYOUT_TEMPLATE,
    HTML_CONTENT_TYPE,
    RENDER_FAILED_BODY,
)
from buken_coaching.domain.errors import ErrorCodes, PageRenderError
from buken_coaching.web.theme import Theme

logger = logging.getLogger(__name__)

Endpoint = Callable[[Request], Awaitable[Response]]


@dataclass(frozen=True)
class Component:
    """렌더 가능한 템플릿 컴포넌트."""
    template_name: str
    context: dict[str, Any] = field(default_factory=dict)

    def render(self, env: jinja2.Environment) -> str:
        """
        HTML 렌더링.

        Raises:
            PageRenderError: 템플릿 없음(TEMPLATE_NOT_FOUND), 렌더 중 오류(RENDER_FAILED)
        """
        try:
            template = env.get_template(self.template_name)
        except jinja2.TemplateNotFound as e:
            raise PageRenderError(
                ErrorCodes.TEMPLATE_NOT_FOUND, template=self.template_name
            ) from e

        try:
            return template.render(**self.context)
        except jinja2.TemplateError as e:
            raise PageRenderError(
                ErrorCodes.RENDER_FAILED, template=self.template_name, cause=str(e)
            ) from e


def base_layout(title: str, theme: Theme | None = None) -> Component:
    """사이트 기본 레이아웃."""
    return Component(
        template_name=BASE_LAYOUT_TEMPLATE,
        context={"title": title, "theme": theme or Theme()},
    )


def component_handler(
    component: Component,
    env: jinja2.Environment,
    status_code: int = 200,
) -> Endpoint:
    """
    컴포넌트를 서빙하는 엔드포인트 생성.

    - 성공: text/html; charset=utf-8
    - 렌더 실패: 500 + "failed to render template" (원인은 로그에만)
    - HEAD 응답 본문은 서버(uvicorn)가 제거
    """

    async def handle(request: Request) -> Response:
        try:
            body = component.render(env)
        except PageRenderError as e:
            logger.error(f"{request.method} {request.url.path}: {e}", exc_info=True)
            return PlainTextResponse(RENDER_FAILED_BODY, status_code=500)
        return Response(content=body, status_code=status_code, media_type=HTML_CONTENT_TYPE)

    return handle
