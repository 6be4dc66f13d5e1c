"""
E2E 테스트용 Playwright 설정.

설정 항목:
- 기본 타임아웃: 30초
- 뷰포트: 1280x720
- 실패 시 디버깅 정보 저장: 스크린샷 (.png), HTML 덤프 (.html), 콘솔 로그 (.log)
"""

from datetime import datetime
from pathlib import Path
from collections.abc import Generator
from typing import TYPE_CHECKING

import pytest

# Playwright는 선택적 의존성 - 설치되어 있을 때만 import
try:
    import playwright.sync_api  # noqa: F401

    PLAYWRIGHT_AVAILABLE = True
except ImportError:
    PLAYWRIGHT_AVAILABLE = False

if TYPE_CHECKING:
    from playwright.sync_api import Browser, BrowserContext, Page

# =============================================================================
# 상수
# =============================================================================

ARTIFACTS_DIR = Path(__file__).parent / "artifacts"

# =============================================================================
# Playwright 기본 설정 (Playwright가 설치된 경우에만 활성화)
# =============================================================================

if PLAYWRIGHT_AVAILABLE:

    @pytest.fixture(scope="session")
    def browser_context_args(browser_context_args: dict) -> dict:
        """브라우저 컨텍스트 설정."""
        return {
            **browser_context_args,
            "viewport": {"width": 1280, "height": 720},
        }

    @pytest.fixture
    def context(
        browser: "Browser", browser_context_args: dict
    ) -> "Generator[BrowserContext, None, None]":
        """브라우저 컨텍스트 생성."""
        context = browser.new_context(**browser_context_args)
        yield context
        context.close()

    @pytest.fixture
    def page(context: "BrowserContext") -> "Generator[Page, None, None]":
        """페이지 fixture with 타임아웃 + 콘솔 로그 수집."""
        page = context.new_page()
        page.set_default_timeout(30000)
        page.set_default_navigation_timeout(30000)

        # 콘솔 로그 수집
        console_logs: list[str] = []
        page.on("console", lambda msg: console_logs.append(f"[{msg.type}] {msg.text}"))
        page.on("pageerror", lambda err: console_logs.append(f"[PAGE_ERROR] {err}"))

        # 테스트에서 접근 가능하도록 저장
        page._console_logs = console_logs  # type: ignore[attr-defined]

        yield page

        page.close()


# =============================================================================
# 실패 시 디버깅 정보 저장
# =============================================================================


def _generate_artifact_name(item_name: str) -> str:
    """고유한 artifact 파일명 생성 (테스트명 + 타임스탬프)."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    # 테스트 파라미터 제거 (예: test_foo[chromium] -> test_foo)
    clean_name = item_name.split("[")[0]
    return f"{clean_name}_{timestamp}"


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """테스트 실패 시 디버깅 정보 저장."""
    outcome = yield
    rep = outcome.get_result()

    if rep.when != "call" or not rep.failed:
        return

    page = item.funcargs.get("page")
    if not page:
        return

    ARTIFACTS_DIR.mkdir(exist_ok=True)
    base_name = _generate_artifact_name(item.name)

    try:
        screenshot_path = ARTIFACTS_DIR / f"{base_name}.png"
        page.screenshot(path=str(screenshot_path), full_page=True)
        print(f"\n📸 Screenshot: {screenshot_path}")

        html_path = ARTIFACTS_DIR / f"{base_name}.html"
        html_path.write_text(page.content(), encoding="utf-8")
        print(f"📄 HTML dump: {html_path}")

        console_logs = getattr(page, "_console_logs", [])
        if console_logs:
            log_path = ARTIFACTS_DIR / f"{base_name}.log"
            log_path.write_text("\n".join(console_logs), encoding="utf-8")
            print(f"📋 Console log: {log_path}")
    except Exception as e:
        print(f"\n⚠️ Artifact capture failed: {e}")
