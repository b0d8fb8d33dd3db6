# storefront_qa/pages/account.py
from __future__ import annotations

from typing import Any, Optional

from storefront_qa.config import Settings
from storefront_qa.pages.base import BasePage


class AccountPage(BasePage):
    """Customer account dashboard."""

    path = "/index.php?rt=account/account"

    def __init__(self, page: Any, settings: Optional[Settings] = None):
        super().__init__(page, settings)
        self.account_heading = page.get_by_role("heading", name="My Account", exact=True)
        self.logoff_link = page.get_by_role("link", name="Logoff", exact=True)

    async def is_account_page_displayed(self) -> bool:
        return await self._is_visible(self.account_heading)

    async def click_logoff(self) -> None:
        await self.logoff_link.click()
        await self.page.wait_for_load_state(self.settings.load_state)
