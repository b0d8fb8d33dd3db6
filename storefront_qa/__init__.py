"""Playwright-driven QA suite for the automationteststore.com storefront."""

from storefront_qa.product_search import (
    BoundedSearchController,
    build_search_controller,
    is_in_stock,
    is_out_of_stock,
)
from storefront_qa.storefront_types import SearchResult, StockStatus

__version__ = "1.0.0"

__all__ = [
    "BoundedSearchController",
    "SearchResult",
    "StockStatus",
    "build_search_controller",
    "is_in_stock",
    "is_out_of_stock",
]
