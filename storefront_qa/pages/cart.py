# storefront_qa/pages/cart.py
from __future__ import annotations

import logging
import re
from typing import Any, Optional

from storefront_qa.config import Settings
from storefront_qa.pages.base import BasePage
from storefront_qa.storefront_types import CartSummary, PageStateError

logger = logging.getLogger(__name__)

_ITEM_COUNT = re.compile(r"(\d+)\s+Items?")
_PRICE = re.compile(r"\$\s*([\d,]+(?:\.\d+)?)")


def parse_cart_summary(text: Optional[str]) -> CartSummary:
    """Parse the header cart link, e.g. "2 Items - $57.50". Missing parts read as zero."""
    raw = " ".join((text or "").split())
    count = _ITEM_COUNT.search(raw)
    price = _PRICE.search(raw)
    return CartSummary(
        item_count=int(count.group(1)) if count else 0,
        total_price=float(price.group(1).replace(",", "")) if price else 0.0,
        raw_text=raw,
    )


class CartPage(BasePage):
    path = "/index.php?rt=checkout/cart"

    def __init__(self, page: Any, settings: Optional[Settings] = None):
        super().__init__(page, settings)
        self.empty_cart_message = page.locator("text=Your shopping cart is empty!")
        self.product_rows = page.locator(".container-fluid.cart-info.product-list table tbody tr:not(:first-child)")

    async def is_cart_empty(self) -> bool:
        return await self._is_visible(self.empty_cart_message)

    async def item_count(self) -> int:
        if await self.is_cart_empty():
            return 0
        return await self.product_rows.count()

    async def product_name_at(self, index: int = 0) -> str:
        row = self.product_rows.nth(index)
        name = await row.locator("td.align_left a").first.text_content()
        return " ".join((name or "").split())

    async def quantity_at(self, index: int = 0) -> int:
        row = self.product_rows.nth(index)
        return int(await row.locator("td.align_center input.form-control").first.input_value())

    async def remove_product(self, index: int = 0) -> None:
        row = self.product_rows.nth(index)
        await row.locator('a[href*="remove"]').first.click()
        await self.page.wait_for_load_state(self.settings.load_state)

    async def clear(self) -> None:
        for _ in range(await self.item_count()):
            await self.remove_product(0)

    async def find_product(self, product_name: str) -> Optional[int]:
        """Row index of the first line whose name contains `product_name`."""
        wanted = product_name.strip()
        for i in range(await self.item_count()):
            if wanted in await self.product_name_at(i):
                return i
        return None

    async def verify_product_in_cart(self, product_name: str, quantity: Optional[int] = None) -> None:
        if await self.is_cart_empty():
            raise PageStateError(f'Cart is empty, cannot verify product "{product_name}"')
        index = await self.find_product(product_name)
        if index is None:
            raise PageStateError(f'Product "{product_name}" is not in the cart')
        if quantity is not None:
            actual = await self.quantity_at(index)
            if actual != quantity:
                raise PageStateError(f'Expected quantity {quantity} for "{product_name}", cart shows {actual}')
