"""
FastAPI Routes.

페이지 라우트 (HTML)
"""

from . import pages

__all__ = ["pages"]
