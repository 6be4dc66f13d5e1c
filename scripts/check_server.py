#!/usr/bin/env python
"""
서버 스모크 체크 스크립트.

실행 중인 서버에 /health 와 / 를 요청해서 결과 요약.

실행:
    uv run python scripts/check_server.py
    uv run python scripts/check_server.py --url http://localhost:3000 --title "Hello Main"
"""

import argparse
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass

import httpx
from dotenv import load_dotenv

DEFAULT_PORT = "3000"
DEFAULT_TIMEOUT = 5.0


@dataclass
class CheckResult:
    """단일 체크 결과."""
    name: str
    passed: bool
    detail: str = ""


def check_health(client: httpx.Client) -> CheckResult:
    """GET /health → {"status": "ok"}."""
    try:
        response = client.get("/health")
    except httpx.HTTPError as e:
        return CheckResult("health", False, f"{type(e).__name__}: {e}")

    if response.status_code != 200:
        return CheckResult("health", False, f"status={response.status_code}")
    try:
        body = response.json()
    except ValueError:
        return CheckResult("health", False, "response is not JSON")
    if body.get("status") != "ok":
        return CheckResult("health", False, f"body={body}")
    return CheckResult("health", True, "ok")


def check_page(client: httpx.Client, expected_title: str | None = None) -> CheckResult:
    """GET / → text/html, 필요하면 <title> 확인."""
    try:
        response = client.get("/")
    except httpx.HTTPError as e:
        return CheckResult("page", False, f"{type(e).__name__}: {e}")

    if response.status_code != 200:
        return CheckResult("page", False, f"status={response.status_code}")
    content_type = response.headers.get("content-type", "")
    if "text/html" not in content_type:
        return CheckResult("page", False, f"content-type={content_type}")
    if expected_title and f"<title>{expected_title}</title>" not in response.text:
        return CheckResult("page", False, f"title '{expected_title}' not found")
    return CheckResult("page", True, f"{len(response.content)} bytes")


def run_checks(
    base_url: str,
    expected_title: str | None = None,
    transport: httpx.BaseTransport | None = None,
) -> list[CheckResult]:
    """모든 체크 실행."""
    with httpx.Client(
        base_url=base_url, timeout=DEFAULT_TIMEOUT, transport=transport
    ) as client:
        return [
            check_health(client),
            check_page(client, expected_title),
        ]


def main(argv: Sequence[str] | None = None) -> int:
    # .env 파일 로드 (BUKEN_PORT)
    load_dotenv()
    default_url = f"http://localhost:{os.environ.get('BUKEN_PORT', DEFAULT_PORT)}"

    parser = argparse.ArgumentParser(description="서버 스모크 체크")
    parser.add_argument("--url", default=default_url, help=f"서버 주소 (기본: {default_url})")
    parser.add_argument("--title", help="페이지 <title> 기대값")
    args = parser.parse_args(argv)

    print(f"🚀 서버 체크: {args.url}")
    print("=" * 60)

    results = run_checks(args.url, args.title)

    for result in results:
        status = "✅ PASS" if result.passed else "❌ FAIL"
        print(f"  {result.name}: {status} {result.detail}")

    print("=" * 60)
    all_passed = all(result.passed for result in results)
    if all_passed:
        print("🎉 모든 체크 통과!")
    else:
        print("⚠️ 일부 체크 실패. 서버가 실행 중인지 확인하세요.")

    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
