# storefront_qa/preflight.py
"""Reachability check run before live browser specs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreflightResult:
    reachable: bool
    status_code: Optional[int] = None
    error: Optional[str] = None


def check_storefront(
    base_url: str,
    timeout_s: float = 10.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> PreflightResult:
    """GET the storefront home page. Any answer below 500 counts as reachable; never raises."""
    try:
        with httpx.Client(timeout=timeout_s, follow_redirects=True, transport=transport) as client:
            resp = client.get(base_url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning(f"❌ Storefront unreachable at {base_url}: {e}")
        return PreflightResult(reachable=False, error=str(e))

    if resp.status_code >= 500:
        logger.warning(f"❌ Storefront answered {resp.status_code} at {base_url}")
        return PreflightResult(reachable=False, status_code=resp.status_code, error=f"HTTP {resp.status_code}")
    return PreflightResult(reachable=True, status_code=resp.status_code)
