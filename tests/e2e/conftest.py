"""Live browser fixtures. Only used when the e2e specs are enabled."""

import pytest

from storefront_qa.auth_manager import AuthManager
from storefront_qa.browser import managed_browser, new_context
from storefront_qa.config import Settings, setup_logging
from storefront_qa.flows import CartFlow, CategoryBrowsingFlow, CheckoutFlow, LoginFlow
from storefront_qa.preflight import check_storefront


@pytest.fixture(scope="session")
def settings():
    s = Settings()
    setup_logging(s.log_level)
    return s


@pytest.fixture(scope="session")
def storefront_available(settings):
    result = check_storefront(settings.base_url)
    if not result.reachable:
        pytest.skip(f"storefront not reachable at {settings.base_url}: {result.error}")
    return result


@pytest.fixture(scope="session")
def credentials(settings):
    if not settings.has_credentials:
        pytest.skip("STOREFRONT_LOGIN_USERNAME / STOREFRONT_LOGIN_PASSWORD not set")
    return settings.login_username, settings.login_password


@pytest.fixture
async def browser(settings, storefront_available):
    async with managed_browser(settings) as b:
        yield b


@pytest.fixture
async def page(browser, settings):
    context = await new_context(browser, settings)
    p = await context.new_page()
    yield p
    await context.close()


@pytest.fixture
async def logged_in_page(browser, settings, credentials):
    state_path = await AuthManager(settings).ensure_session(browser)
    context = await new_context(browser, settings, storage_state=state_path)
    p = await context.new_page()
    yield p
    await context.close()


@pytest.fixture
def login_flow(page, settings):
    return LoginFlow(page, settings)


@pytest.fixture
async def cart_flow(page, settings):
    flow = CartFlow(page, settings)
    yield flow
    await flow.clear_cart()


@pytest.fixture
def checkout_flow(page, settings):
    return CheckoutFlow(page, settings)


@pytest.fixture
def browsing_flow(page, settings):
    return CategoryBrowsingFlow(page, settings)
