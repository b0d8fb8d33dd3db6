# storefront_qa/pages/search.py
from __future__ import annotations

import re
from typing import Any, List, Optional

from storefront_qa.config import Settings
from storefront_qa.pages.base import BasePage

NO_RESULTS_TEXT = "There is no product that"

_PRICE = re.compile(r"[\d.]+")


class SearchPage(BasePage):
    def __init__(self, page: Any, settings: Optional[Settings] = None):
        super().__init__(page, settings)
        self.search_box = page.get_by_placeholder("Search Keywords")
        self.search_button = page.get_by_title("Go")
        self.results = page.locator(".thumbnails .col-md-3")
        self.result_titles = page.locator(".thumbnails a.prdocutname")
        self.no_results_message = page.get_by_text(NO_RESULTS_TEXT)
        self.sort_dropdown = page.locator("#sort")
        self.server_error = page.locator(".error-500, .server-error")

    async def search(self, term: str) -> None:
        await self.search_box.fill(term)
        await self.search_button.click()
        await self.page.wait_for_load_state("networkidle")

    async def result_count(self) -> int:
        return await self.results.count()

    async def result_names(self) -> List[str]:
        return [" ".join(t.split()) for t in await self.result_titles.all_text_contents()]

    async def relevant_result_names(self, term: str) -> List[str]:
        needle = term.lower()
        return [name for name in await self.result_names() if needle in name.lower()]

    async def is_no_results_message_shown(self) -> bool:
        return await self._is_visible(self.no_results_message.first)

    async def has_server_error(self) -> bool:
        return await self.server_error.count() > 0

    async def sort_by(self, label: str) -> None:
        await self.sort_dropdown.select_option(label=label)
        await self.page.wait_for_load_state("networkidle")

    async def result_prices(self) -> List[float]:
        texts = await self.page.locator(".thumbnails .oneprice, .thumbnails .pricenew").all_text_contents()
        prices = []
        for text in texts:
            match = _PRICE.search(text.replace(",", ""))
            if match:
                prices.append(float(match.group()))
        return prices
