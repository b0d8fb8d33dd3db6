# storefront_qa/pages/login.py
from __future__ import annotations

from typing import Any, Optional

from storefront_qa.config import Settings
from storefront_qa.pages.base import BasePage


class LoginPage(BasePage):
    path = "/index.php?rt=account/login"

    def __init__(self, page: Any, settings: Optional[Settings] = None):
        super().__init__(page, settings)
        self.login_name_input = page.locator("#loginFrm_loginname")
        self.password_input = page.locator("#loginFrm_password")
        self.login_button = page.get_by_role("button", name="Login")
        self.account_login_heading = page.get_by_role("heading", name="Account Login").first
        self.returning_customer_heading = page.get_by_role("heading", name="Returning Customer", exact=True)
        self.new_customer_heading = page.get_by_role("heading", name="I am a new customer.")
        self.error_alert = page.locator(".alert-error, .alert-danger")

    async def login(self, username: str, password: str) -> None:
        await self.login_name_input.fill(username)
        await self.password_input.fill(password)
        await self.login_button.click()
        await self.page.wait_for_load_state(self.settings.load_state)

    async def clear_login_fields(self) -> None:
        await self.login_name_input.clear()
        await self.password_input.clear()

    async def is_login_page_displayed(self) -> bool:
        return await self._is_visible(self.account_login_heading)

    async def is_returning_customer_section_visible(self) -> bool:
        return await self._is_visible(self.returning_customer_heading)

    async def is_new_customer_section_visible(self) -> bool:
        return await self._is_visible(self.new_customer_heading)

    async def is_login_form_shown(self) -> bool:
        return await self.login_name_input.count() > 0

    async def error_text(self) -> str:
        """Text of the error alert, empty when none is shown."""
        if not await self._is_visible(self.error_alert.first):
            return ""
        return " ".join((await self.error_alert.first.text_content() or "").split())
