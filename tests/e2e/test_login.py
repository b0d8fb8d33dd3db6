import pytest

from storefront_qa.datasets import (
    EMPTY_FIELD_CASES,
    INVALID_CREDENTIALS_MESSAGE,
    INVALID_LOGIN_CASES,
    wrong_password_case,
)
from storefront_qa.pages import AccountPage, HomePage, LoginPage, LogoutPage

pytestmark = pytest.mark.e2e


async def test_login_page_elements(page, settings):
    login_page = LoginPage(page, settings)
    await login_page.open()

    assert await login_page.is_login_page_displayed()
    assert await login_page.is_returning_customer_section_visible()
    assert await login_page.is_new_customer_section_visible()
    assert await login_page.login_name_input.is_visible()
    assert await login_page.password_input.is_visible()


async def test_valid_login_and_logoff(login_flow, page, settings, credentials):
    await login_flow.login_as()

    account = AccountPage(page, settings)
    assert await account.is_account_page_displayed()

    await account.click_logoff()
    logout = LogoutPage(page, settings)
    assert await logout.is_logout_page_displayed()
    assert await logout.is_logout_message_displayed()
    assert await HomePage(page, settings).is_user_logged_out()


async def test_logged_in_session_is_reused(logged_in_page, settings):
    home = HomePage(logged_in_page, settings)
    await home.open()
    assert await home.is_user_logged_in()


@pytest.mark.parametrize("case", INVALID_LOGIN_CASES, ids=lambda c: c.name)
async def test_invalid_credentials_are_rejected(page, settings, case):
    login_page = LoginPage(page, settings)
    await login_page.open()
    await login_page.login(case.login_name, case.password)

    assert INVALID_CREDENTIALS_MESSAGE in await login_page.error_text()
    assert not await AccountPage(page, settings).is_account_page_displayed()


async def test_wrong_password_is_rejected(page, settings, credentials):
    case = wrong_password_case(credentials[0])
    login_page = LoginPage(page, settings)
    await login_page.open()
    await login_page.login(case.login_name, case.password)

    assert INVALID_CREDENTIALS_MESSAGE in await login_page.error_text()


@pytest.mark.parametrize("case", EMPTY_FIELD_CASES, ids=lambda c: c.name)
async def test_empty_fields_do_not_log_in(page, settings, case):
    login_page = LoginPage(page, settings)
    await login_page.open()
    await login_page.clear_login_fields()
    await login_page.login(case.login_name, case.password)

    assert await login_page.error_text()
    assert await login_page.is_login_page_displayed()
