# storefront_qa/pages/checkout.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from storefront_qa.config import Settings
from storefront_qa.datasets import Address, GuestDetails
from storefront_qa.pages.base import BasePage

logger = logging.getLogger(__name__)


class CheckoutPage(BasePage):
    """Account choice, guest steps 1-2 and the confirmation view."""

    def __init__(self, page: Any, settings: Optional[Settings] = None):
        super().__init__(page, settings)
        # account choice
        self.guest_checkout_radio = page.locator('input[value="guest"]')
        self.continue_button = page.locator('button:has-text("Continue")').first
        self.login_button = page.locator('button:has-text("Login")').first
        self.login_name_field = page.locator('input[name="loginname"]')
        self.password_field = page.locator('input[name="password"]')

        # guest step 1
        self.first_name_field = page.locator("#guestFrm_firstname")
        self.last_name_field = page.locator("#guestFrm_lastname")
        self.email_field = page.locator("#guestFrm_email")
        self.telephone_field = page.locator("#guestFrm_telephone")
        self.fax_field = page.locator("#guestFrm_fax")
        self.company_field = page.locator("#guestFrm_company")
        self.address_1_field = page.locator("#guestFrm_address_1")
        self.address_2_field = page.locator("#guestFrm_address_2")
        self.city_field = page.locator("#guestFrm_city")
        self.region_dropdown = page.locator("#guestFrm_zone_id")
        self.zip_field = page.locator("#guestFrm_postcode")
        self.country_dropdown = page.locator("#guestFrm_country_id")

        # confirmation
        self.confirmation_title = page.locator('h1:has-text("Checkout Confirmation")')
        self.order_sub_total = page.locator('td:has-text("Sub-Total:") + td').first
        self.order_total = page.locator('td:has-text("Total:") + td').last

        self.validation_errors = page.locator(".has-error .help-block, .alert-danger")

    # ---------------- Account choice ----------------

    async def navigate_to_checkout(self) -> None:
        await self.navigate_to(self.settings.url("/index.php?rt=checkout/cart"))
        await self.page.locator("#cart_checkout2").click()
        await self.page.wait_for_load_state(self.settings.load_state)

    async def select_guest_checkout(self) -> None:
        await self.guest_checkout_radio.check()
        await self.proceed_to_next_step()

    async def login_existing_user(self, username: str, password: str) -> None:
        await self.login_name_field.fill(username)
        await self.password_field.fill(password)
        await self.login_button.click()
        await self.page.wait_for_load_state(self.settings.load_state)

    # ---------------- Guest details ----------------

    async def fill_personal_details(self, details: GuestDetails) -> None:
        fields = [
            (self.first_name_field, details.first_name),
            (self.last_name_field, details.last_name),
            (self.email_field, details.email),
            (self.telephone_field, details.telephone),
            (self.fax_field, details.fax),
        ]
        for locator, value in fields:
            if value:
                await locator.fill(value)

    async def fill_address(self, address: Address) -> None:
        for locator, value in [
            (self.company_field, address.company),
            (self.address_1_field, address.address_1),
            (self.address_2_field, address.address_2),
            (self.city_field, address.city),
            (self.zip_field, address.zip_code),
        ]:
            if value:
                await locator.fill(value)
        # country first; the region list is reloaded for the chosen country
        if address.country:
            await self.country_dropdown.select_option(label=address.country)
        if address.region:
            await self.region_dropdown.select_option(label=address.region)

    async def proceed_to_next_step(self) -> None:
        await self.continue_button.click()
        await self.page.wait_for_load_state(self.settings.load_state)

    async def validation_error_texts(self) -> List[str]:
        texts = await self.validation_errors.all_text_contents()
        return [t.strip() for t in texts if t.strip()]

    # ---------------- Confirmation ----------------

    async def is_confirmation_displayed(self) -> bool:
        return await self._is_visible(self.confirmation_title)

    async def order_summary(self) -> Dict[str, str]:
        return {
            "sub_total": (await self.order_sub_total.text_content() or "").strip(),
            "total": (await self.order_total.text_content() or "").strip(),
        }
