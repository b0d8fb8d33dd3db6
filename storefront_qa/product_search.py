# storefront_qa/product_search.py
"""
Bounded product search across storefront categories.

State machine:

    INIT -> SELECT_CATEGORY -> SCAN_PRODUCTS -> MATCHED
                 ^                  |
                 |                  v
                 +------------ NEXT_ATTEMPT
                 |
                 +--> EXHAUSTED (attempt counter > budget)

Each attempt picks a random category, snapshots its product listing and
probes every product in snapshot order until the predicate holds. A failure
inside an attempt is logged, recorded and followed by the next attempt. Only
terminal states produce a value; the public methods return a SearchResult
and do not raise for empty scopes, missing categories or an exhausted budget.

Attempts share one page and therefore run strictly one after the other.
Concurrent searches need their own browser context each.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from storefront_qa.catalog import CategoryEnumerator, ProductEnumerator
from storefront_qa.config import Settings
from storefront_qa.navigation import PageNavigator
from storefront_qa.stock_prober import StockProber
from storefront_qa.storefront_types import (
    AttemptOutcome,
    CategoryHandle,
    SearchAttempt,
    SearchResult,
    StockStatus,
)

logger = logging.getLogger(__name__)

StockPredicate = Callable[[StockStatus], bool]

DEFAULT_MAX_ATTEMPTS = 10


def is_out_of_stock(status: StockStatus) -> bool:
    return status is StockStatus.OUT_OF_STOCK


def is_in_stock(status: StockStatus) -> bool:
    return status is StockStatus.IN_STOCK


class SearchState(str, Enum):
    INIT = "init"
    SELECT_CATEGORY = "select_category"
    SCAN_PRODUCTS = "scan_products"
    NEXT_ATTEMPT = "next_attempt"
    MATCHED = "matched"
    EXHAUSTED = "exhausted"


TERMINAL_STATES = frozenset({SearchState.MATCHED, SearchState.EXHAUSTED})


class _SearchRun:
    """Mutable bookkeeping for one find_matching_product call."""

    def __init__(self, budget: int, predicate: StockPredicate):
        self.budget = budget
        self.predicate = predicate
        self.attempt_no = 0
        self.attempts: List[SearchAttempt] = []
        self.category: Optional[CategoryHandle] = None
        self.matched_product: Optional[str] = None

    @property
    def current(self) -> SearchAttempt:
        return self.attempts[-1]


# ==================== Controller ====================

class BoundedSearchController:
    """
    Finds one product whose stock status satisfies a predicate.

    Usage:
        controller = build_search_controller(page, settings)
        result = await controller.find_matching_product(is_out_of_stock)
        if result.matched:
            ...
    """

    def __init__(
        self,
        categories: CategoryEnumerator,
        products: ProductEnumerator,
        prober: StockProber,
        navigator: PageNavigator,
        *,
        rng: Optional[random.Random] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        home_url: Optional[str] = None,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self.categories = categories
        self.products = products
        self.prober = prober
        self.navigator = navigator
        self.max_attempts = max_attempts
        self.home_url = home_url
        if rng is not None:
            self.categories.rng = rng
            self.products.rng = rng

        self._handlers: Dict[SearchState, Callable[[_SearchRun], Any]] = {
            SearchState.INIT: self._on_init,
            SearchState.SELECT_CATEGORY: self._on_select_category,
            SearchState.SCAN_PRODUCTS: self._on_scan_products,
            SearchState.NEXT_ATTEMPT: self._on_next_attempt,
        }

    # ---------------- Random search ----------------

    async def find_matching_product(
        self,
        predicate: StockPredicate,
        max_attempts: Optional[int] = None,
    ) -> SearchResult:
        budget = self.max_attempts if max_attempts is None else max_attempts
        if budget < 1:
            raise ValueError("max_attempts must be >= 1")

        logger.info(f"🔍 Starting bounded product search (max_attempts={budget})")
        run = _SearchRun(budget, predicate)
        state = SearchState.INIT

        while state not in TERMINAL_STATES:
            handler = self._handlers[state]
            if state in (SearchState.SELECT_CATEGORY, SearchState.SCAN_PRODUCTS):
                state = await self._guarded(handler, run)
            else:
                state = await handler(run)

        if state is SearchState.MATCHED:
            logger.info(
                f"✅ Found product '{run.matched_product}' in category "
                f"'{run.category.name}' (attempt {run.attempt_no})"
            )
            return SearchResult.found(run.matched_product, run.category.name, attempts=run.attempt_no)

        used = run.attempt_no - 1
        message = f"No matching product found after {used} attempts"
        logger.warning(message)
        return SearchResult.not_found(message, attempts=used)

    async def _guarded(self, handler, run: _SearchRun) -> SearchState:
        """Attempt boundary: any failure inside becomes NEXT_ATTEMPT."""
        try:
            return await handler(run)
        except Exception as e:
            if self.navigator.is_closed():
                raise
            category = run.category.name if run.category else None
            logger.error(f"❌ Attempt {run.attempt_no} failed (category={category}): {e}")
            run.current.outcome = AttemptOutcome.ERROR
            run.current.error = str(e)
            await self._recover()
            return SearchState.NEXT_ATTEMPT

    async def _recover(self) -> None:
        # Failures here mean the page itself is unusable and propagate.
        if self.home_url:
            await self.navigator.goto(self.home_url)

    async def _on_init(self, run: _SearchRun) -> SearchState:
        run.attempt_no = 0
        run.attempts.clear()
        return SearchState.SELECT_CATEGORY

    async def _on_select_category(self, run: _SearchRun) -> SearchState:
        run.attempt_no += 1
        run.category = None
        if run.attempt_no > run.budget:
            return SearchState.EXHAUSTED

        run.attempts.append(SearchAttempt(number=run.attempt_no))
        logger.info(f"Attempt {run.attempt_no}/{run.budget}: choosing a category")

        categories = await self.categories.list_categories()
        if not categories:
            logger.info(f"Attempt {run.attempt_no}: no categories on the page, skipping")
            run.current.outcome = AttemptOutcome.EMPTY
            return SearchState.NEXT_ATTEMPT

        run.category = self.categories.select_random(categories)
        run.current.category_name = run.category.name
        await self.categories.open(run.category)
        logger.info(f"Searching in category: {run.category.name}")
        return SearchState.SCAN_PRODUCTS

    async def _on_scan_products(self, run: _SearchRun) -> SearchState:
        product = await self._scan_category(run.category, run.current, run.predicate)
        if product is None:
            return SearchState.NEXT_ATTEMPT
        run.matched_product = product
        return SearchState.MATCHED

    async def _on_next_attempt(self, run: _SearchRun) -> SearchState:
        return SearchState.SELECT_CATEGORY

    # ---------------- Shared scan ----------------

    async def _scan_category(
        self,
        category: CategoryHandle,
        attempt: SearchAttempt,
        predicate: StockPredicate,
    ) -> Optional[str]:
        """Probe every product of the open category; name of the first match or None."""
        snapshot = await self.products.list_products()
        if not snapshot:
            logger.info(f"No products found in category: {category.name}, trying another category")
            attempt.outcome = AttemptOutcome.EMPTY
            return None

        for handle in snapshot:
            await self.products.open(handle)
            status = await self.prober.probe()
            attempt.products_examined.append(handle.name)
            logger.debug(f"  {handle.name}: {status.value}")
            if predicate(status):
                attempt.outcome = AttemptOutcome.FOUND
                return handle.name
            await self.navigator.back()

        logger.info(f"No matching products in category: {category.name}")
        attempt.outcome = AttemptOutcome.NO_MATCH
        return None

    # ---------------- Targeted search ----------------

    async def find_matching_product_in_category(
        self,
        category_name: str,
        predicate: StockPredicate,
    ) -> SearchResult:
        """Single-category search; resolves the name once and never retries."""
        logger.info(f"🔍 Searching for a matching product in category: {category_name}")

        try:
            categories = await self.categories.list_categories()
            handle = self.categories.select_by_name_contains(categories, category_name)
        except Exception as e:
            if self.navigator.is_closed():
                raise
            logger.error(f"❌ Error searching in category {category_name}: {e}")
            return SearchResult.not_found(
                f"Error searching in category {category_name}: {e}",
                category_name=category_name,
                attempts=1,
            )
        if handle is None:
            message = f'Category "{category_name}" not found'
            logger.warning(message)
            return SearchResult.not_found(message, category_name=category_name, attempts=1)

        attempt = SearchAttempt(number=1, category_name=handle.name)
        try:
            await self.categories.open(handle)
            product = await self._scan_category(handle, attempt, predicate)
        except Exception as e:
            if self.navigator.is_closed():
                raise
            logger.error(f"❌ Error searching in category {handle.name}: {e}")
            return SearchResult.not_found(
                f"Error searching in category {handle.name}: {e}",
                category_name=handle.name,
                attempts=1,
            )

        if product is not None:
            logger.info(f"✅ Found product '{product}' in category '{handle.name}'")
            return SearchResult.found(product, handle.name, attempts=1)
        if attempt.outcome is AttemptOutcome.EMPTY:
            message = f"No products found in category: {handle.name}"
        else:
            message = f"No matching product found in category: {handle.name}"
        return SearchResult.not_found(message, category_name=handle.name, attempts=1)


# ==================== Factory ====================

def build_search_controller(
    page: Any,
    settings: Settings,
    rng: Optional[random.Random] = None,
) -> BoundedSearchController:
    """Wire enumerators, prober and navigator for one page from settings."""
    rng = rng or random.Random()
    navigator = PageNavigator(page, settings.load_state, settings.navigation_timeout_ms)
    categories = CategoryEnumerator(page, navigator, settings.category_selector, rng=rng)
    products = ProductEnumerator(
        page,
        navigator,
        item_selector=settings.product_item_selector,
        name_selector=settings.product_name_selector,
        link_selector=settings.product_link_selector,
        rng=rng,
    )
    prober = StockProber(
        page,
        out_of_stock_selector=settings.out_of_stock_selector,
        in_stock_selector=settings.in_stock_selector,
        fail_open=settings.stock_fail_open,
    )
    return BoundedSearchController(
        categories,
        products,
        prober,
        navigator,
        rng=rng,
        max_attempts=settings.max_search_attempts,
        home_url=settings.url(),
    )
