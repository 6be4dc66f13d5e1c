"""
Error definitions for the site server.

규칙:
- 조용한 실패 금지 → 설정 오류는 ConfigError로 명시적 실패
- 렌더 실패 → PageRenderError (핸들러에서 500으로 변환)
"""

from typing import Any


class BukenError(Exception):
    """
    서버 전역 에러 베이스.

    Usage:
        raise ConfigError(ErrorCodes.CONFIG_INVALID, key="server.port", value="abc")
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


class ConfigError(BukenError):
    """default.yaml / 환경변수 / CLI 값이 잘못된 경우."""


class PageRenderError(BukenError):
    """컴포넌트 템플릿 렌더링 실패."""


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Config ===
    CONFIG_INVALID = "CONFIG_INVALID"

    # === Render ===
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    RENDER_FAILED = "RENDER_FAILED"
