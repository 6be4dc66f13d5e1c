"""
Site theme: 색상 팔레트와 폰트.

tailwind.config.js 의 theme.extend 값과 동일하게 유지:
- colors: main, secondary, accent (DEFAULT/dark)
- fontFamily: sans, serif, display

레이아웃 템플릿은 이 값을 CSS custom property(--color-*, --font-*)로 주입한다.
색상은 hex, 폰트 이름은 영숫자+공백만 허용 (<style> 블록에 그대로 출력됨).
"""

import re
from dataclasses import dataclass, replace
from typing import Any
from urllib.parse import quote_plus

from buken_coaching.domain.errors import ConfigError, ErrorCodes

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
FONT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 ]*$")
GOOGLE_FONTS_BASE = "https://fonts.googleapis.com/css2"

COLOR_KEYS = ("main", "secondary", "accent", "accent_dark")
FONT_KEYS = ("sans", "serif", "display")


@dataclass(frozen=True)
class FontFamily:
    """폰트 패밀리 (웹폰트 이름 + generic fallback)."""
    name: str
    fallback: str

    def css(self) -> str:
        return f'"{self.name}", {self.fallback}'


@dataclass(frozen=True)
class Theme:
    """사이트 테마."""
    main: str = "#227447"
    secondary: str = "#252525"
    accent: str = "#fbbf24"
    accent_dark: str = "#f59e0b"
    sans: FontFamily = FontFamily("Montserrat", "sans-serif")
    serif: FontFamily = FontFamily("Roboto Slab", "serif")
    display: FontFamily = FontFamily("Oswald", "sans-serif")

    def css_variables(self) -> dict[str, str]:
        """템플릿 :root 블록에 들어갈 CSS 변수."""
        variables = {
            f"--color-{key.replace('_', '-')}": getattr(self, key)
            for key in COLOR_KEYS
        }
        for key in FONT_KEYS:
            variables[f"--font-{key}"] = getattr(self, key).css()
        return variables

    def google_fonts_url(self) -> str:
        """
        테마 폰트를 한 번에 불러오는 Google Fonts URL.

        같은 패밀리가 여러 역할에 쓰이면 한 번만 포함.
        """
        families: list[str] = []
        for key in FONT_KEYS:
            name = getattr(self, key).name
            if name not in families:
                families.append(name)

        query = "&".join(f"family={quote_plus(name)}" for name in families)
        return f"{GOOGLE_FONTS_BASE}?{query}&display=swap"


def load_theme(overrides: dict[str, Any] | None = None) -> Theme:
    """
    설정의 theme 섹션을 기본 테마에 덮어쓴다.

    Args:
        overrides: {"colors": {...}, "fonts": {...}}

    Returns:
        Theme

    Raises:
        ConfigError: 알 수 없는 키, 잘못된 hex 색상
    """
    theme = Theme()
    if not overrides:
        return theme

    unknown = set(overrides) - {"colors", "fonts"}
    if unknown:
        raise ConfigError(ErrorCodes.CONFIG_INVALID, key="theme", unknown=sorted(unknown))

    changes: dict[str, Any] = {}

    for key, value in (overrides.get("colors") or {}).items():
        if key not in COLOR_KEYS:
            raise ConfigError(ErrorCodes.CONFIG_INVALID, key=f"theme.colors.{key}")
        if not isinstance(value, str) or not HEX_COLOR_PATTERN.match(value):
            raise ConfigError(
                ErrorCodes.CONFIG_INVALID, key=f"theme.colors.{key}", value=value
            )
        changes[key] = value

    for key, value in (overrides.get("fonts") or {}).items():
        if key not in FONT_KEYS:
            raise ConfigError(ErrorCodes.CONFIG_INVALID, key=f"theme.fonts.{key}")
        if not isinstance(value, str) or not FONT_NAME_PATTERN.match(value.strip()):
            raise ConfigError(
                ErrorCodes.CONFIG_INVALID, key=f"theme.fonts.{key}", value=value
            )
        # fallback은 기본값 유지
        changes[key] = FontFamily(value.strip(), getattr(theme, key).fallback)

    return replace(theme, **changes)
