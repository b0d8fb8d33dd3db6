from storefront_qa.pages.account import AccountPage
from storefront_qa.pages.base import BasePage
from storefront_qa.pages.cart import CartPage, parse_cart_summary
from storefront_qa.pages.checkout import CheckoutPage
from storefront_qa.pages.home import HomePage
from storefront_qa.pages.login import LoginPage
from storefront_qa.pages.logout import LogoutPage
from storefront_qa.pages.product import ProductPage
from storefront_qa.pages.search import SearchPage

__all__ = [
    "AccountPage",
    "BasePage",
    "CartPage",
    "CheckoutPage",
    "HomePage",
    "LoginPage",
    "LogoutPage",
    "ProductPage",
    "SearchPage",
    "parse_cart_summary",
]
