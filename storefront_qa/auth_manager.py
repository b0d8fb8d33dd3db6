# storefront_qa/auth_manager.py
"""
Auth Manager

Logs the configured customer in once and keeps the resulting Playwright
storage state on disk so later browser contexts start authenticated.

FEATURES:
✅ Atomic session saves (tmp file + os.replace)
✅ Session reuse while younger than session_max_age_hours
✅ Session validation against the account page
✅ Credentials from STOREFRONT_* settings only

Usage:
    auth = AuthManager(settings)
    async with managed_browser(settings) as browser:
        state_path = await auth.ensure_session(browser)
        context = await new_context(browser, settings, storage_state=state_path)
"""

from __future__ import annotations

import json
import logging
import os
import time
from pathlib import Path
from typing import Any, Dict, Optional

from playwright.async_api import Browser

from storefront_qa.browser import new_context
from storefront_qa.config import Settings, get_settings
from storefront_qa.pages import AccountPage, LoginPage
from storefront_qa.storefront_types import SessionError

logger = logging.getLogger(__name__)


# ==================== Session file ====================

class SessionFile:
    """Age and metadata of a saved storage state."""

    def __init__(self, path: Path, max_age_hours: float):
        self.path = Path(path)
        self.max_age_seconds = max_age_hours * 3600

    def exists(self) -> bool:
        return self.path.is_file()

    def age_seconds(self) -> Optional[float]:
        if not self.exists():
            return None
        return time.time() - self.path.stat().st_mtime

    def is_fresh(self) -> bool:
        age = self.age_seconds()
        return age is not None and age < self.max_age_seconds

    def metadata(self) -> Dict[str, Any]:
        if not self.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.debug(f"Failed to read session metadata: {e}")
            return {}
        return {
            "cookie_count": len(data.get("cookies", [])),
            "age_seconds": self.age_seconds(),
        }


# ==================== Auth Manager ====================

class AuthManager:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.session = SessionFile(self.settings.storage_state_path, self.settings.session_max_age_hours)

    async def ensure_session(self, browser: Browser, force: bool = False) -> Path:
        """Path to a usable storage state, logging in again when needed."""
        if not force and self.session.is_fresh():
            if await self.is_session_valid(browser):
                logger.info(f"✅ Reusing valid session: {self.session.path}")
                return self.session.path
            logger.info("Saved session is no longer logged in; logging in again")
        return await self.login_and_save_session(browser)

    async def login_and_save_session(self, browser: Browser) -> Path:
        if not self.settings.has_credentials:
            raise SessionError("No login credentials configured (STOREFRONT_LOGIN_USERNAME/PASSWORD)")

        context = await new_context(browser, self.settings)
        try:
            page = await context.new_page()
            login_page = LoginPage(page, self.settings)
            await login_page.open()
            await login_page.login(self.settings.login_username, self.settings.login_password)

            if not await AccountPage(page, self.settings).is_account_page_displayed():
                error = await login_page.error_text()
                raise SessionError(f"Login failed for {self.settings.login_username}: {error or 'account page not shown'}")

            self.session.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.session.path.with_name(self.session.path.name + ".tmp")
            await context.storage_state(path=str(tmp_path))
            os.replace(tmp_path, self.session.path)
        finally:
            await context.close()

        logger.info(f"✅ Session saved: {self.session.path}")
        return self.session.path

    async def is_session_valid(self, browser: Browser) -> bool:
        """Open the account page with the saved state; valid unless the login form shows up."""
        if not self.session.exists():
            return False
        try:
            context = await new_context(browser, self.settings, storage_state=self.session.path)
        except Exception as e:
            logger.warning(f"Saved session could not be loaded: {e}")
            return False
        try:
            page = await context.new_page()
            account = AccountPage(page, self.settings)
            await account.open()
            if await account.is_account_page_displayed():
                return True
            return not await LoginPage(page, self.settings).is_login_form_shown()
        except Exception:
            logger.debug("Session validation failed", exc_info=True)
            return False
        finally:
            await context.close()
