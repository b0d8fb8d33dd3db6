# storefront_qa/datasets.py
"""
Test data tables for the live storefront specs.

Account credentials are never stored here; they come from Settings
(STOREFRONT_LOGIN_USERNAME / STOREFRONT_LOGIN_PASSWORD).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class CatalogProduct:
    id: int
    name: str
    price: float

    @property
    def price_text(self) -> str:
        return f"${self.price:.2f}"


@dataclass(frozen=True)
class LoginCase:
    name: str
    login_name: str
    password: str


@dataclass(frozen=True)
class GuestDetails:
    first_name: str
    last_name: str
    email: str
    telephone: str = ""
    fax: str = ""


@dataclass(frozen=True)
class Address:
    address_1: str
    city: str
    zip_code: str
    country: str
    region: str
    address_2: str = ""
    company: str = ""


@dataclass
class CheckoutCase:
    guest: GuestDetails
    address: Address
    quantity: int = 1
    options: Dict[str, str] = field(default_factory=dict)


# ==================== Catalog ====================

SPECIFIC_PRODUCTS: List[CatalogProduct] = [
    CatalogProduct(50, "Skinsheen Bronzer Stick", 29.50),
    CatalogProduct(52, "Benefit Bella Bamba", 28.00),
    CatalogProduct(49, "Giorgio Armani Acqua Di Gio Pour Homme", 58.00),
]

PRODUCTS_WITH_OPTIONS: List[CatalogProduct] = [
    CatalogProduct(116, "New Ladies High Wedge Heel Toe Thong Diamante Flip Flop Sandals", 26.00),
]


# ==================== Login ====================

INVALID_CREDENTIALS_MESSAGE = "Incorrect login or password provided"

INVALID_LOGIN_CASES: List[LoginCase] = [
    LoginCase("unknown user", "InvalidUser123", "TestPassword123!"),
    LoginCase("special characters", "test.user@domain", "Pass@Word#123!"),
]


def wrong_password_case(username: str) -> LoginCase:
    return LoginCase("wrong password", username, "InvalidPassword123!")


EMPTY_FIELD_CASES: List[LoginCase] = [
    LoginCase("empty login name", "", "TestPassword123!"),
    LoginCase("both empty", "", ""),
]

# ==================== Search ====================

VALID_SEARCH_TERM = "men"
NO_RESULTS_SEARCH_TERM = "xyznoproduct123"
SPECIAL_CHARACTERS_SEARCH_TERM = "@#$%^&*()"
CASE_INSENSITIVE_TERMS = ("MAKEUP", "makeup")
SORT_SEARCH = ("skincare", "Price Low > High")

# ==================== Checkout ====================

GUEST_USER = GuestDetails(
    first_name="John",
    last_name="Doe",
    email="john.doe@test.com",
    telephone="555-123-4567",
)

SHIPPING_ADDRESS = Address(
    address_1="456 Oak Avenue",
    city="Los Angeles",
    zip_code="90210",
    country="United States",
    region="California",
)

INVALID_SHIPPING_ADDRESS = Address(
    address_1="",
    city="",
    zip_code="00000",
    country="",
    region="",
)

INVALID_EMAILS: List[str] = ["invalid-email", "test@", "@domain.com", "test..test@domain.com"]

GUEST_CHECKOUT = CheckoutCase(guest=GUEST_USER, address=SHIPPING_ADDRESS)


def product_by_id(product_id: int) -> Optional[CatalogProduct]:
    for product in SPECIFIC_PRODUCTS + PRODUCTS_WITH_OPTIONS:
        if product.id == product_id:
            return product
    return None
