# storefront_qa/pages/product.py
"""
Product detail page.

Stock checks go through StockProber so the page object and the bounded
search read availability the same way.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from storefront_qa.config import Settings
from storefront_qa.pages.base import BasePage
from storefront_qa.stock_prober import StockProber
from storefront_qa.storefront_types import PageStateError, ProductStockReport, StockStatus

logger = logging.getLogger(__name__)

ADD_TO_CART_SELECTOR = '[href="#"]:has-text("Add to Cart")'


class ProductPage(BasePage):
    def __init__(self, page: Any, settings: Optional[Settings] = None):
        super().__init__(page, settings)
        self.product_title = page.locator("h1").first
        self.product_price = page.locator(".productprice").first
        self.quantity_input = page.locator("#product_quantity")
        self.add_to_cart_button = page.locator(ADD_TO_CART_SELECTOR).first
        self.product_options = page.locator(".product-options")
        self.prober = StockProber(
            page,
            out_of_stock_selector=self.settings.out_of_stock_selector,
            in_stock_selector=self.settings.in_stock_selector,
            fail_open=self.settings.stock_fail_open,
        )

    # ---------------- Navigation ----------------

    async def navigate_to_product(self, product_id: int) -> None:
        url = self.settings.url(f"/index.php?rt=product/product&product_id={product_id}")
        try:
            await self.page.goto(url, wait_until="domcontentloaded", timeout=self.settings.navigation_timeout_ms)
            await self.page.wait_for_selector("h1", timeout=10_000)
            await self.page.wait_for_selector(".productprice", timeout=10_000)
        except Exception as e:
            raise PageStateError(f"Navigation to product {product_id} failed: {e}") from e

    # ---------------- Details ----------------

    async def title_text(self) -> str:
        return " ".join((await self.product_title.text_content() or "").split())

    async def price_text(self) -> str:
        return (await self.product_price.text_content() or "").strip()

    async def set_quantity(self, quantity: int) -> None:
        await self.quantity_input.clear()
        await self.quantity_input.fill(str(quantity))
        logger.debug(f"Quantity set to {quantity}")

    async def has_product_options(self) -> bool:
        return await self._is_visible(self.product_options)

    async def select_option(self, value: str) -> None:
        """Pick an option (size, colour, ...) by its visible label."""
        label = self.page.locator(f'text="{value}"').first
        await label.click()

    # ---------------- Stock ----------------

    async def stock_status(self) -> StockStatus:
        return await self.prober.probe()

    async def is_out_of_stock(self) -> bool:
        return await self.stock_status() is StockStatus.OUT_OF_STOCK

    async def is_add_to_cart_enabled(self) -> bool:
        if await self.is_out_of_stock():
            return False
        return await self._is_visible(self.add_to_cart_button)

    async def stock_report(self) -> ProductStockReport:
        """Stock snapshot of the product currently shown; never raises."""
        try:
            status = await self.stock_status()
            report = ProductStockReport(
                product_name=await self.title_text(),
                status=status,
                add_to_cart_enabled=await self.is_add_to_cart_enabled(),
            )
        except Exception as e:
            logger.error(f"❌ Error checking product stock: {e}")
            return ProductStockReport(
                product_name=None,
                status=StockStatus.INDETERMINATE,
                add_to_cart_enabled=False,
                error=str(e),
            )
        logger.info(f"Product: {report.product_name}, status: {report.status.value}")
        return report

    # ---------------- Cart ----------------

    async def add_to_cart(self, quantity: int = 1) -> None:
        if quantity != 1:
            await self.set_quantity(quantity)
        if not await self.is_add_to_cart_enabled():
            raise PageStateError(f"Add to Cart is not available for '{await self.title_text()}'")
        await self.add_to_cart_button.click()
        await self.page.wait_for_load_state(self.settings.load_state)
