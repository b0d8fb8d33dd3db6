# storefront_qa/stock_prober.py
"""
Stock Prober

Resolution order on the product detail view currently open:
  1. out-of-stock marker visible -> OUT_OF_STOCK
  2. in-stock marker visible     -> IN_STOCK
  3. neither resolvable          -> INDETERMINATE, reported as IN_STOCK when fail_open

probe() never raises. The fail-open default keeps shopping flows going on
ambiguous pages.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from storefront_qa.storefront_types import StockStatus

logger = logging.getLogger(__name__)


class StockProber:
    def __init__(
        self,
        page: Any,
        out_of_stock_selector: str,
        in_stock_selector: str,
        fail_open: bool = True,
    ):
        self.page = page
        self.out_of_stock_selector = out_of_stock_selector
        self.in_stock_selector = in_stock_selector
        self.fail_open = fail_open

    async def probe(self) -> StockStatus:
        status = await self.probe_raw()
        if status is StockStatus.INDETERMINATE and self.fail_open:
            logger.debug("Stock markers inconclusive; assuming in stock")
            return StockStatus.IN_STOCK
        return status

    async def probe_raw(self) -> StockStatus:
        if await self._marker_visible(self.out_of_stock_selector):
            return StockStatus.OUT_OF_STOCK
        if await self._marker_visible(self.in_stock_selector):
            return StockStatus.IN_STOCK
        return StockStatus.INDETERMINATE

    async def _marker_visible(self, selector: str) -> Optional[bool]:
        """True/False when the query works, None when it fails."""
        try:
            return await self.page.locator(selector).first.is_visible()
        except Exception as e:
            logger.debug(f"Stock marker query failed for {selector!r}: {e}")
            return None
