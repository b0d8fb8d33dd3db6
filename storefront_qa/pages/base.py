# storefront_qa/pages/base.py
from __future__ import annotations

import logging
from typing import Any, Optional

from storefront_qa.config import Settings, get_settings

logger = logging.getLogger(__name__)


class BasePage:
    """Common behaviour for every storefront page object."""

    path = ""

    def __init__(self, page: Any, settings: Optional[Settings] = None):
        self.page = page
        self.settings = settings or get_settings()

    async def navigate_to(self, url: str) -> None:
        await self.page.goto(url)
        await self.page.wait_for_load_state(self.settings.load_state)

    async def open(self) -> None:
        """Navigate to this page's own path."""
        await self.navigate_to(self.settings.url(self.path))

    async def _is_visible(self, locator: Any) -> bool:
        """Visibility that treats a failing query as not visible."""
        try:
            return await locator.is_visible()
        except Exception as e:
            logger.debug(f"Visibility check failed: {e}")
            return False
