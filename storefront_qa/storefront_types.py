# storefront_qa/storefront_types.py
"""
Shared types, enums, dataclasses and exceptions for the storefront suite.

Handles (categories/products) are snapshots of what the live page showed at
enumeration time. They are never cached across navigations.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, Any, Optional, List


# ==================== Exceptions ====================

class StorefrontError(Exception):
    """Base exception for storefront suite errors"""
    pass


class EmptySelectionError(StorefrontError, ValueError):
    """Random selection was asked to choose from an empty sequence"""
    pass


class PageStateError(StorefrontError):
    """A page or flow precondition did not hold"""
    pass


class SessionError(StorefrontError):
    """A stored login session could not be created or loaded"""
    pass


# ==================== Enums ====================

class StockStatus(Enum):
    """Purchasability signal rendered on a product detail view."""
    IN_STOCK = "IN_STOCK"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    INDETERMINATE = "INDETERMINATE"


class AttemptOutcome(Enum):
    """How one bounded-search attempt ended."""
    FOUND = "FOUND"
    NO_MATCH = "NO_MATCH"
    EMPTY = "EMPTY"
    ERROR = "ERROR"


# ==================== Handles ====================

@dataclass(frozen=True)
class CategoryHandle:
    """A navigable category link as seen during one enumeration."""
    name: str
    target: Optional[str]  # href; None when the link carries none
    position: int  # index within the enumerated scope


@dataclass(frozen=True)
class ProductHandle:
    """A product entry of a category listing as seen during one enumeration."""
    name: str
    target: Optional[str]
    position: int


# ==================== Search records ====================

@dataclass
class SearchAttempt:
    """One iteration of a bounded search. Kept in memory for one call only."""
    number: int
    category_name: Optional[str] = None
    products_examined: List[str] = field(default_factory=list)
    outcome: Optional[AttemptOutcome] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class SearchResult:
    """Terminal value of a bounded search."""
    matched: bool
    product_name: Optional[str] = None
    category_name: Optional[str] = None
    diagnostic_message: Optional[str] = None
    attempts: int = 0

    def __post_init__(self):
        if self.matched:
            if not self.product_name or not self.category_name:
                raise ValueError("a matched SearchResult needs product_name and category_name")
        elif not self.diagnostic_message:
            raise ValueError("an unmatched SearchResult needs a diagnostic_message")

    @classmethod
    def found(cls, product_name: str, category_name: str, attempts: int = 1) -> "SearchResult":
        return cls(
            matched=True,
            product_name=product_name,
            category_name=category_name,
            attempts=attempts,
        )

    @classmethod
    def not_found(
        cls,
        message: str,
        category_name: Optional[str] = None,
        attempts: int = 0,
    ) -> "SearchResult":
        return cls(
            matched=False,
            category_name=category_name,
            diagnostic_message=message,
            attempts=attempts,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


# ==================== Page-level value objects ====================

@dataclass(frozen=True)
class CartSummary:
    """Header cart link, e.g. "2 Items - $57.50"."""
    item_count: int
    total_price: float
    raw_text: str


@dataclass(frozen=True)
class ProductStockReport:
    """Stock snapshot of the product detail view currently open."""
    product_name: Optional[str]
    status: StockStatus
    add_to_cart_enabled: bool
    error: Optional[str] = None

    @property
    def is_out_of_stock(self) -> bool:
        return self.status is StockStatus.OUT_OF_STOCK

    @property
    def is_in_stock(self) -> bool:
        return self.status is StockStatus.IN_STOCK
