"""
Domain layer: 에러, 상수.
"""

from .errors import BukenError, ConfigError, ErrorCodes, PageRenderError

__all__ = [
    "BukenError",
    "ConfigError",
    "PageRenderError",
    "ErrorCodes",
]
