"""
Pytest fixtures for PDF generator tests.

Playwright is mocked here. Only tests marked e2e launch a real Chromium.
"""

import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

# IMPORTANT: Set environment variables BEFORE any imports from pdf_generator
# so the cached settings are built from test values.
os.environ["PLAYWRIGHT_HEADLESS"] = "true"
os.environ["PLAYWRIGHT_TIMEOUT"] = "30000"
os.environ["SETTLE_DELAY_MS"] = "50"

import pytest
from fastapi.testclient import TestClient

FAKE_PDF = b"%PDF-1.4 fake pdf content"


def pytest_configure(config):
    config.addinivalue_line("markers", "e2e: tests that launch a real Chromium")


def make_page(pdf_bytes: bytes = FAKE_PDF) -> MagicMock:
    """Mock Playwright page whose pdf() returns the given bytes."""
    page = MagicMock()
    page.set_content = AsyncMock()
    page.evaluate = AsyncMock(return_value=1)
    page.wait_for_timeout = AsyncMock()
    page.pdf = AsyncMock(return_value=pdf_bytes)
    page.close = AsyncMock()
    return page


def make_context(*pages: MagicMock) -> MagicMock:
    """Mock browsing context handing out the given pages in order."""
    context = MagicMock()
    if len(pages) == 1:
        context.new_page = AsyncMock(return_value=pages[0])
    else:
        context.new_page = AsyncMock(side_effect=list(pages))
    context.close = AsyncMock()
    return context


@pytest.fixture(autouse=True)
def reset_browser_manager():
    """Give every test a fresh process-wide browser manager."""
    import pdf_generator.browser as browser_module

    browser_module._manager = None
    yield
    browser_module._manager = None


@pytest.fixture
def playwright_mocks():
    """
    Patch async_playwright() with a mock chain:
    async_playwright().start() -> playwright -> chromium.launch() -> browser
    -> new_context() -> context -> new_page() -> page.
    """
    page = make_page()
    context = make_context(page)

    browser = MagicMock()
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock()

    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=browser)
    playwright.stop = AsyncMock()

    with patch("playwright.async_api.async_playwright") as mock_async_playwright:
        mock_async_playwright.return_value.start = AsyncMock(return_value=playwright)
        yield SimpleNamespace(
            async_playwright=mock_async_playwright,
            playwright=playwright,
            browser=browser,
            context=context,
            page=page,
        )


@pytest.fixture
def client():
    """Create test client for the PDF generator."""
    from pdf_generator.app import app
    return TestClient(app)
