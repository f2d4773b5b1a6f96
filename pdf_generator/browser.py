"""
Browser lifecycle management.

A single Chromium process and a single browsing context are shared by all
render requests. Both are created on first use and torn down on shutdown;
pages are created per request by the render pipeline. Callers depend on
the BrowserProvider interface so a pooled or per-request implementation
can be swapped in without touching them.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

from .config import get_settings

logger = logging.getLogger(__name__)

CHROMIUM_ARGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--font-render-hinting=none",
)

# A4 at 96 DPI
A4_VIEWPORT = {"width": 794, "height": 1123}
DEVICE_SCALE_FACTOR = 2


class BrowserProvider(ABC):
    """Source of browsing contexts for the render pipeline."""

    @abstractmethod
    async def get_context(self):
        """Return a browsing context that new pages can be opened in."""

    @abstractmethod
    async def close(self) -> None:
        """Release every browser resource held by the provider."""


class SharedBrowserManager(BrowserProvider):
    """
    Lazily-created, process-wide Chromium browser and context.

    At most one browser and one context exist at a time. Creation and
    teardown are serialized with an asyncio.Lock so concurrent first
    requests share a single launch. After close() the next get_context()
    launches a fresh browser.
    """

    def __init__(
        self,
        headless: bool = True,
        timeout_ms: int = 30000,
        launch_args: Sequence[str] = CHROMIUM_ARGS,
        viewport: Optional[Dict[str, int]] = None,
        device_scale_factor: float = DEVICE_SCALE_FACTOR,
    ):
        self.headless = headless
        self.timeout_ms = timeout_ms
        self.launch_args = list(launch_args)
        self.viewport = dict(viewport or A4_VIEWPORT)
        self.device_scale_factor = device_scale_factor

        self._playwright = None
        self._browser = None
        self._context = None
        self._lock = asyncio.Lock()

    @property
    def is_running(self) -> bool:
        return self._browser is not None

    async def _get_browser(self):
        if self._browser is None:
            # Import here to avoid loading Playwright on startup
            from playwright.async_api import async_playwright

            logger.info(f"Launching Chromium (headless={self.headless})")
            playwright = await async_playwright().start()
            try:
                self._browser = await playwright.chromium.launch(
                    headless=self.headless,
                    args=self.launch_args,
                )
            except Exception:
                await playwright.stop()
                raise
            self._playwright = playwright
        return self._browser

    async def get_context(self):
        async with self._lock:
            if self._context is None:
                browser = await self._get_browser()
                self._context = await browser.new_context(
                    viewport=self.viewport,
                    device_scale_factor=self.device_scale_factor,
                )
                self._context.set_default_timeout(self.timeout_ms)
                logger.info("Browser context created")
            return self._context

    async def close(self) -> None:
        """Close the context, then the browser, then stop Playwright."""
        async with self._lock:
            context, self._context = self._context, None
            browser, self._browser = self._browser, None
            playwright, self._playwright = self._playwright, None

            if context is not None:
                try:
                    await context.close()
                except Exception as e:
                    logger.warning(f"Failed to close browser context: {e}")
            if browser is not None:
                try:
                    await browser.close()
                except Exception as e:
                    logger.warning(f"Failed to close browser: {e}")
            if playwright is not None:
                try:
                    await playwright.stop()
                except Exception as e:
                    logger.warning(f"Failed to stop Playwright: {e}")

            if browser is not None:
                logger.info("Browser closed")


_manager: Optional[SharedBrowserManager] = None


def get_browser_manager() -> SharedBrowserManager:
    """Get the process-wide browser manager, creating it from settings on first use."""
    global _manager
    if _manager is None:
        settings = get_settings()
        _manager = SharedBrowserManager(
            headless=settings.playwright_headless,
            timeout_ms=settings.playwright_timeout,
        )
    return _manager


async def close_browser() -> None:
    """Close the process-wide browser, if one was ever created."""
    if _manager is not None:
        await _manager.close()
