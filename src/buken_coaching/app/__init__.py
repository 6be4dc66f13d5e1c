"""
App layer: HTTP 서버 (FastAPI + Jinja2).

주의: 폴더 구분
- src/buken_coaching/app/templates/ → Jinja2 HTML
- src/buken_coaching/app/static/ → CSS
"""
