# storefront_qa/pages/logout.py
from __future__ import annotations

from typing import Any, Optional

from storefront_qa.config import Settings
from storefront_qa.pages.base import BasePage

LOGGED_OFF_TEXT = "You have been logged off your account."


class LogoutPage(BasePage):
    def __init__(self, page: Any, settings: Optional[Settings] = None):
        super().__init__(page, settings)
        self.logout_heading = page.get_by_role("heading", name="Account Logout")
        self.logout_message = page.get_by_text(LOGGED_OFF_TEXT)

    async def is_logout_page_displayed(self) -> bool:
        return await self._is_visible(self.logout_heading)

    async def is_logout_message_displayed(self) -> bool:
        return await self._is_visible(self.logout_message.first)
