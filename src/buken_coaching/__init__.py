"""buken-coaching: 코칭 사이트 웹 서버."""

__version__ = "0.1.0"
