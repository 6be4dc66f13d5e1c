"""
Web layer: 페이지 컴포넌트와 테마.

주의: 폴더 구분
- src/buken_coaching/web/ → 코드 (components.py, theme.py)
- src/buken_coaching/app/templates/ → Jinja2 HTML
"""

from .components import Component, base_layout, component_handler
from .theme import FontFamily, Theme, load_theme

__all__ = [
    "Component",
    "base_layout",
    "component_handler",
    "FontFamily",
    "Theme",
    "load_theme",
]
