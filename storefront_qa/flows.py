# storefront_qa/flows.py
"""
Multi-page shopping flows used by the live specs.

Each flow wraps one Playwright page and the page objects it needs:

    LoginFlow              log in with configured or explicit credentials
    CartFlow               add products, verify and clear the cart
    CheckoutFlow           get a cart into the guest or logged-in checkout
    CategoryBrowsingFlow   random category/product picks and the bounded
                           out-of-stock search

Preconditions that do not hold raise PageStateError; cleanup steps log
and carry on.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from storefront_qa.catalog import choose_random
from storefront_qa.config import Settings, get_settings
from storefront_qa.datasets import CatalogProduct, CheckoutCase
from storefront_qa.pages import (
    AccountPage,
    CartPage,
    CheckoutPage,
    HomePage,
    LoginPage,
    ProductPage,
)
from storefront_qa.product_search import build_search_controller, is_out_of_stock
from storefront_qa.storefront_types import (
    CartSummary,
    CategoryHandle,
    PageStateError,
    ProductStockReport,
    SearchResult,
)

logger = logging.getLogger(__name__)


@dataclass
class AddedProduct:
    product_name: str
    quantity: int = 1
    options: Dict[str, str] = field(default_factory=dict)


class _Flow:
    def __init__(self, page: Any, settings: Optional[Settings] = None):
        self.page = page
        self.settings = settings or get_settings()


# ==================== Login ====================

class LoginFlow(_Flow):
    def __init__(self, page: Any, settings: Optional[Settings] = None):
        super().__init__(page, settings)
        self.home = HomePage(page, self.settings)
        self.login_page = LoginPage(page, self.settings)
        self.account = AccountPage(page, self.settings)

    async def login_as(self, username: Optional[str] = None, password: Optional[str] = None) -> None:
        """Log in through the home page link; defaults to the configured account."""
        username = username or self.settings.login_username
        password = password or self.settings.login_password
        if not (username and password):
            raise PageStateError("No login credentials configured (STOREFRONT_LOGIN_USERNAME/PASSWORD)")

        await self.home.open()
        await self.home.click_login_or_register()
        await self.login_page.login(username, password)
        if not await self.account.is_account_page_displayed():
            raise PageStateError(f"Login as {username} did not reach the account page")
        logger.info(f"✅ Logged in as {username}")

    async def as_guest(self) -> None:
        await self.home.open()
        if not await self.home.is_user_logged_out():
            raise PageStateError("Expected a guest session but a user is logged in")


# ==================== Cart ====================

class CartFlow(_Flow):
    def __init__(self, page: Any, settings: Optional[Settings] = None):
        super().__init__(page, settings)
        self.home = HomePage(page, self.settings)
        self.product_page = ProductPage(page, self.settings)
        self.cart = CartPage(page, self.settings)
        self.login = LoginFlow(page, self.settings)

    async def add_specific_product_to_cart(
        self,
        product: CatalogProduct,
        quantity: int = 1,
        options: Optional[Dict[str, str]] = None,
    ) -> AddedProduct:
        options = options or {}
        await self.product_page.navigate_to_product(product.id)

        title = await self.product_page.title_text()
        if product.name not in title:
            raise PageStateError(f"Expected product '{product.name}', page shows '{title}'")

        for value in options.values():
            await self.product_page.select_option(value)
        await self.product_page.add_to_cart(quantity)

        if "rt=checkout/cart" not in self.page.url:
            raise PageStateError(f"Adding '{product.name}' did not land on the cart: {self.page.url}")
        logger.info(f"🛒 Added {quantity} x {product.name}")
        return AddedProduct(product.name, quantity, options)

    async def add_product_to_cart_with_login(
        self,
        product: CatalogProduct,
        quantity: int = 1,
        options: Optional[Dict[str, str]] = None,
    ) -> AddedProduct:
        await self.login.login_as()
        return await self.add_specific_product_to_cart(product, quantity, options)

    async def verify_product_in_cart(self, product_name: str, quantity: Optional[int] = 1) -> None:
        await self.cart.open()
        await self.cart.verify_product_in_cart(product_name, quantity)

    async def clear_cart(self) -> None:
        """Best-effort cleanup; failures are logged, not raised."""
        try:
            await self.cart.open()
            if not await self.cart.is_cart_empty():
                await self.cart.clear()
        except Exception as e:
            logger.warning(f"Cart cleanup failed: {e}")

    async def cart_summary(self) -> CartSummary:
        return await self.home.cart_summary()


# ==================== Checkout ====================

class CheckoutFlow(_Flow):
    def __init__(self, page: Any, settings: Optional[Settings] = None):
        super().__init__(page, settings)
        self.cart_flow = CartFlow(page, self.settings)
        self.checkout = CheckoutPage(page, self.settings)

    async def start_guest_checkout(self, product: CatalogProduct, case: CheckoutCase) -> CheckoutPage:
        """Cart with one product, guest option chosen, step 1 filled in."""
        await self.cart_flow.add_specific_product_to_cart(product, case.quantity, case.options)
        await self.checkout.navigate_to_checkout()
        await self.checkout.select_guest_checkout()
        await self.checkout.fill_personal_details(case.guest)
        await self.checkout.fill_address(case.address)
        return self.checkout

    async def start_logged_in_checkout(self, product: CatalogProduct) -> CheckoutPage:
        if not self.settings.has_credentials:
            raise PageStateError("Logged-in checkout needs STOREFRONT_LOGIN_USERNAME/PASSWORD")
        await self.cart_flow.add_specific_product_to_cart(product)
        await self.checkout.navigate_to_checkout()
        if await self.checkout.login_name_field.count() > 0:
            await self.checkout.login_existing_user(self.settings.login_username, self.settings.login_password)
        return self.checkout


# ==================== Category browsing ====================

class CategoryBrowsingFlow(_Flow):
    def __init__(
        self,
        page: Any,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(page, settings)
        self.rng = rng or random.Random()
        self.home = HomePage(page, self.settings)
        self.product_page = ProductPage(page, self.settings)
        self.search = build_search_controller(page, self.settings, rng=self.rng)

    async def navigate_to_random_category(self) -> CategoryHandle:
        categories = await self.search.categories.list_categories()
        handle = self.search.categories.select_random(categories)
        await self.search.categories.open(handle)
        logger.info(f"Navigated to category: {handle.name}")
        return handle

    async def select_random_product(self) -> str:
        """Open a random product of the current listing; returns its name."""
        products = await self.search.products.list_products()
        handle = choose_random(products, self.rng, "product")
        await self.search.products.open(handle)
        return handle.name

    async def find_out_of_stock_product(self, max_attempts: Optional[int] = None) -> SearchResult:
        await self.home.open()
        return await self.search.find_matching_product(is_out_of_stock, max_attempts)

    async def find_out_of_stock_product_in_category(self, category_name: str) -> SearchResult:
        await self.home.open()
        return await self.search.find_matching_product_in_category(category_name, is_out_of_stock)

    async def check_current_product_stock(self) -> ProductStockReport:
        return await self.product_page.stock_report()
