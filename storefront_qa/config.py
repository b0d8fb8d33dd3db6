# storefront_qa/config.py
import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOAD_STATES = {"load", "domcontentloaded", "networkidle"}
_BROWSERS = {"chromium", "firefox", "webkit"}


class Settings(BaseSettings):
    """
    Centralized, env-driven configuration for the storefront suite.
    Override via STOREFRONT_* environment variables or a .env file at repo root.
    """
    # Application
    base_url: str = Field(default="https://automationteststore.com")
    login_username: Optional[str] = Field(default=None)
    login_password: Optional[str] = Field(default=None)

    # Browser
    browser_name: str = Field(default="chromium")
    headless: bool = Field(default=True)
    slow_mo_ms: int = Field(default=0)
    viewport_width: int = Field(default=1280)
    viewport_height: int = Field(default=720)
    default_timeout_ms: int = Field(default=30_000)
    navigation_timeout_ms: int = Field(default=60_000)
    load_state: str = Field(default="load")

    # Bounded product search
    max_search_attempts: int = Field(default=10)
    stock_fail_open: bool = Field(default=True)
    category_selector: str = Field(default="#categorymenu ul.categorymenu > li > a:not(.menu_home)")
    product_item_selector: str = Field(default=".thumbnails > .col-md-3")
    product_name_selector: str = Field(default=".prdocutname")
    product_link_selector: str = Field(default="a.prdocutname")
    out_of_stock_selector: str = Field(default="text=Out of Stock")
    in_stock_selector: str = Field(default='.product-stock:has-text("In Stock")')

    # Session storage
    storage_state_path: Path = Field(default=Path(".auth/storage_state.json"))
    session_max_age_hours: float = Field(default=12.0)

    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("max_search_attempts")
    @classmethod
    def _positive_attempts(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_search_attempts must be >= 1")
        return v

    @field_validator("load_state")
    @classmethod
    def _known_load_state(cls, v: str) -> str:
        if v not in _LOAD_STATES:
            raise ValueError(f"load_state must be one of {sorted(_LOAD_STATES)}")
        return v

    @field_validator("browser_name")
    @classmethod
    def _known_browser(cls, v: str) -> str:
        v = v.lower()
        if v not in _BROWSERS:
            raise ValueError(f"browser_name must be one of {sorted(_BROWSERS)}")
        return v

    @property
    def has_credentials(self) -> bool:
        return bool(self.login_username and self.login_password)

    def url(self, path: str = "") -> str:
        """Absolute storefront URL for a path such as '/index.php?rt=checkout/cart'."""
        if not path:
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def setup_logging(level: str = "INFO") -> None:
    """Root logging for scripts and live runs."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
