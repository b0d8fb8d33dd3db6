# storefront_qa/browser.py
"""
Browser lifecycle helpers.

Usage:
    async with managed_browser(settings) as browser:
        context = await new_context(browser, settings)
        page = await context.new_page()
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional, Union

from playwright.async_api import Browser, BrowserContext, async_playwright

from storefront_qa.config import Settings

logger = logging.getLogger(__name__)

BROWSER_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
]


@asynccontextmanager
async def managed_browser(settings: Settings) -> AsyncIterator[Browser]:
    """Start Playwright, launch the configured engine and tear both down on exit."""
    async with async_playwright() as p:
        engine = getattr(p, settings.browser_name)
        launch_kwargs = {"headless": settings.headless, "slow_mo": settings.slow_mo_ms}
        if settings.browser_name == "chromium":
            launch_kwargs["args"] = BROWSER_ARGS
        browser = await engine.launch(**launch_kwargs)
        logger.info(f"🌐 Launched {settings.browser_name} (headless={settings.headless})")
        try:
            yield browser
        finally:
            await browser.close()


async def new_context(
    browser: Browser,
    settings: Settings,
    storage_state: Optional[Union[str, Path]] = None,
) -> BrowserContext:
    context = await browser.new_context(
        base_url=settings.base_url,
        ignore_https_errors=True,
        viewport={"width": settings.viewport_width, "height": settings.viewport_height},
        storage_state=str(storage_state) if storage_state else None,
    )
    context.set_default_timeout(settings.default_timeout_ms)
    context.set_default_navigation_timeout(settings.navigation_timeout_ms)
    return context
