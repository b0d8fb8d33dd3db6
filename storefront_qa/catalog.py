# storefront_qa/catalog.py
"""
Category and product enumerators.

Both read the live page through Playwright locators and hand back immutable
handles. Enumeration and selection never navigate; `open()` is the explicit
navigation step. An empty scope is a normal result (empty list), not an error.
"""

from __future__ import annotations

import logging
import random
from typing import Any, List, Optional, Sequence, TypeVar

from storefront_qa.navigation import PageNavigator
from storefront_qa.storefront_types import (
    CategoryHandle,
    EmptySelectionError,
    ProductHandle,
)

logger = logging.getLogger(__name__)

H = TypeVar("H", CategoryHandle, ProductHandle)


def _norm_name(text: Optional[str]) -> str:
    return " ".join((text or "").split())


def choose_random(items: Sequence[H], rng: Any, what: str = "item") -> H:
    """Uniform choice; callers must check emptiness first."""
    if not items:
        raise EmptySelectionError(f"cannot select a random {what} from an empty sequence")
    return rng.choice(list(items))


# ==================== Categories ====================

class CategoryEnumerator:
    """
    Reads category links inside one navigation region.

    The scope selector keeps unrelated links (footer, breadcrumbs) out of
    the candidate set.
    """

    def __init__(
        self,
        page: Any,
        navigator: PageNavigator,
        scope_selector: str,
        rng: Optional[random.Random] = None,
    ):
        self.page = page
        self.navigator = navigator
        self.scope_selector = scope_selector
        self.rng = rng or random.Random()

    async def list_categories(self) -> List[CategoryHandle]:
        links = self.page.locator(self.scope_selector)
        count = await links.count()
        handles: List[CategoryHandle] = []
        for i in range(count):
            link = links.nth(i)
            try:
                name = _norm_name(await link.text_content())
                target = await link.get_attribute("href")
            except Exception as e:
                logger.warning(f"Skipping unreadable category link #{i}: {e}")
                continue
            if not name:
                logger.warning(f"Skipping category link #{i} with empty text")
                continue
            handles.append(CategoryHandle(name=name, target=target, position=i))
        logger.debug("Found %d categories in %s", len(handles), self.scope_selector)
        return handles

    def select_random(self, categories: Sequence[CategoryHandle]) -> CategoryHandle:
        return choose_random(categories, self.rng, "category")

    @staticmethod
    def select_by_name_contains(
        categories: Sequence[CategoryHandle], query: str
    ) -> Optional[CategoryHandle]:
        """Case-insensitive substring match; first hit wins, None when nothing matches."""
        needle = query.strip().lower()
        for handle in categories:
            if needle in handle.name.lower():
                return handle
        return None

    async def open(self, handle: CategoryHandle) -> None:
        if handle.target:
            await self.navigator.goto(handle.target)
            return
        await self.page.locator(self.scope_selector).nth(handle.position).click()
        await self.navigator.wait_until_ready()


# ==================== Products ====================

class ProductEnumerator:
    """
    Reads product entries of the category listing currently shown.

    One malformed entry (missing name node, blank text) is skipped with a
    warning; it never fails the whole enumeration.
    """

    def __init__(
        self,
        page: Any,
        navigator: PageNavigator,
        item_selector: str,
        name_selector: str,
        link_selector: str,
        rng: Optional[random.Random] = None,
    ):
        self.page = page
        self.navigator = navigator
        self.item_selector = item_selector
        self.name_selector = name_selector
        self.link_selector = link_selector
        self.rng = rng or random.Random()

    async def list_products(self) -> List[ProductHandle]:
        items = self.page.locator(self.item_selector)
        count = await items.count()
        handles: List[ProductHandle] = []
        for i in range(count):
            item = items.nth(i)
            try:
                name = _norm_name(await item.locator(self.name_selector).first.text_content())
            except Exception as e:
                logger.warning(f"Skipping product entry #{i}: name not readable ({e})")
                continue
            if not name:
                logger.warning(f"Skipping product entry #{i} with empty name")
                continue
            try:
                target = await item.locator(self.link_selector).first.get_attribute("href")
            except Exception as e:
                logger.debug(f"Product entry #{i} has no readable link ({e}); will click instead")
                target = None
            handles.append(ProductHandle(name=name, target=target, position=i))
        return handles

    def select_random(self, products: Sequence[ProductHandle]) -> ProductHandle:
        return choose_random(products, self.rng, "product")

    async def open(self, handle: ProductHandle) -> None:
        if handle.target:
            await self.navigator.goto(handle.target)
            return
        item = self.page.locator(self.item_selector).nth(handle.position)
        await item.locator(self.link_selector).first.click()
        await self.navigator.wait_until_ready()
