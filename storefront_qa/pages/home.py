# storefront_qa/pages/home.py
from __future__ import annotations

import re
from typing import Any, Optional

from storefront_qa.config import Settings
from storefront_qa.pages.base import BasePage
from storefront_qa.pages.cart import parse_cart_summary
from storefront_qa.storefront_types import CartSummary

_CART_LINK_TEXT = re.compile(r"\d+\s+Items?\s+-\s+\$")


class HomePage(BasePage):
    def __init__(self, page: Any, settings: Optional[Settings] = None):
        super().__init__(page, settings)
        self.login_or_register_link = page.get_by_role("link", name="Login or register")
        self.welcome_link = page.get_by_role("link", name=re.compile("Welcome back"))
        self.cart_link = page.get_by_role("link", name=_CART_LINK_TEXT).first

    async def click_login_or_register(self) -> None:
        await self.login_or_register_link.click()
        await self.page.wait_for_load_state(self.settings.load_state)

    async def is_user_logged_in(self) -> bool:
        return await self._is_visible(self.welcome_link)

    async def is_user_logged_out(self) -> bool:
        return await self._is_visible(self.login_or_register_link)

    async def cart_summary(self) -> CartSummary:
        return parse_cart_summary(await self.cart_link.text_content())
