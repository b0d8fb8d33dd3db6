# storefront_qa/navigation.py
"""
Thin navigation wrapper over a Playwright async Page.

Every call is an await point: the caller is suspended until the page reports
the configured load state. Only one navigation is outstanding per page.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class PageNavigator:
    """goto / back / wait primitives used by the catalog search."""

    def __init__(self, page: Any, load_state: str = "load", timeout_ms: Optional[int] = None):
        self.page = page
        self.load_state = load_state
        self.timeout_ms = timeout_ms

    async def goto(self, target: str) -> None:
        logger.debug("➡️ goto %s", target)
        if self.timeout_ms is not None:
            await self.page.goto(target, timeout=self.timeout_ms)
        else:
            await self.page.goto(target)
        await self.wait_until_ready()

    async def back(self) -> None:
        await self.page.go_back()
        await self.wait_until_ready()

    async def wait_until_ready(self) -> None:
        await self.page.wait_for_load_state(self.load_state)

    def is_closed(self) -> bool:
        return self.page.is_closed()
