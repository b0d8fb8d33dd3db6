import pytest

from storefront_qa.datasets import PRODUCTS_WITH_OPTIONS, SPECIFIC_PRODUCTS
from storefront_qa.pages import ProductPage
from storefront_qa.storefront_types import PageStateError

pytestmark = pytest.mark.e2e


async def test_guest_adds_single_product(login_flow, cart_flow):
    await login_flow.as_guest()
    product = SPECIFIC_PRODUCTS[0]

    added = await cart_flow.add_specific_product_to_cart(product)
    await cart_flow.verify_product_in_cart(added.product_name, quantity=1)

    summary = await cart_flow.cart_summary()
    assert summary.item_count >= 1


@pytest.mark.parametrize("quantity", [2, 3])
async def test_guest_adds_quantity(cart_flow, quantity):
    product = SPECIFIC_PRODUCTS[1]

    await cart_flow.add_specific_product_to_cart(product, quantity=quantity)
    await cart_flow.verify_product_in_cart(product.name, quantity=quantity)


async def test_logged_in_user_adds_product(cart_flow, credentials):
    product = SPECIFIC_PRODUCTS[2]

    await cart_flow.add_product_to_cart_with_login(product)
    await cart_flow.verify_product_in_cart(product.name)


async def test_product_with_options_opens(page, settings):
    product_page = ProductPage(page, settings)
    await product_page.navigate_to_product(PRODUCTS_WITH_OPTIONS[0].id)

    assert PRODUCTS_WITH_OPTIONS[0].name in await product_page.title_text()
    assert PRODUCTS_WITH_OPTIONS[0].price_text in await product_page.price_text()
    assert await product_page.has_product_options()


async def test_random_product_from_random_category(browsing_flow, cart_flow, page, settings):
    await browsing_flow.home.open()
    await browsing_flow.navigate_to_random_category()
    name = await browsing_flow.select_random_product()

    report = await browsing_flow.check_current_product_stock()
    if not report.add_to_cart_enabled:
        pytest.skip(f"'{name}' cannot be bought right now ({report.status.value})")

    await ProductPage(page, settings).add_to_cart()
    await cart_flow.verify_product_in_cart(name, quantity=None)


async def test_out_of_stock_product_cannot_be_added(browsing_flow, page, settings):
    result = await browsing_flow.find_out_of_stock_product()
    if not result.matched:
        pytest.skip(result.diagnostic_message)

    report = await browsing_flow.check_current_product_stock()
    assert report.is_out_of_stock
    assert report.add_to_cart_enabled is False

    with pytest.raises(PageStateError):
        await ProductPage(page, settings).add_to_cart()
