"""Shared pytest configuration and fixtures."""

import os

import pytest

from storefront_qa.catalog import CategoryEnumerator, ProductEnumerator
from storefront_qa.navigation import PageNavigator
from storefront_qa.product_search import BoundedSearchController
from storefront_qa.stock_prober import StockProber
from tests import fakes


def pytest_addoption(parser):
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="run live browser specs against the configured storefront",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "e2e: live browser spec against the storefront")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-e2e") or os.getenv("STOREFRONT_RUN_E2E") == "1":
        return
    skip_e2e = pytest.mark.skip(reason="live spec; pass --run-e2e to enable")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


# ==================== Fake storefront wiring ====================

def wire_controller(store, rng, max_attempts=10, home_url=fakes.HOME_URL, fail_open=True):
    navigator = PageNavigator(store)
    categories = CategoryEnumerator(store, navigator, fakes.CATEGORY_SELECTOR)
    products = ProductEnumerator(
        store,
        navigator,
        item_selector=fakes.ITEM_SELECTOR,
        name_selector=fakes.NAME_SELECTOR,
        link_selector=fakes.LINK_SELECTOR,
    )
    prober = StockProber(store, fakes.OUT_SELECTOR, fakes.IN_SELECTOR, fail_open=fail_open)
    return BoundedSearchController(
        categories,
        products,
        prober,
        navigator,
        rng=rng,
        max_attempts=max_attempts,
        home_url=home_url,
    )


@pytest.fixture
def four_by_three_store():
    """4 categories x 3 products; only category 3 product 2 is out of stock."""
    catalog = []
    for c in range(1, 5):
        products = [fakes.FakeProduct(f"product {c}.{p}") for p in range(1, 4)]
        catalog.append((f"category {c}", products))
    catalog[2][1][1].status = fakes.StockStatus.OUT_OF_STOCK
    return fakes.FakeStorefront(catalog)
