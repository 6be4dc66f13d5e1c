"""
Core layer: 설정, 로깅.
"""

from .config import Settings, load_config, load_settings
from .logging import setup_logging

__all__ = [
    "Settings",
    "load_config",
    "load_settings",
    "setup_logging",
]
