#!/usr/bin/env python3
"""
Find an out-of-stock product on the live storefront.

Runs the bounded category search in a real browser and prints the result.

Usage:
    # random categories, default budget from STOREFRONT_MAX_SEARCH_ATTEMPTS
    python -m scripts.find_out_of_stock

    # one named category
    python -m scripts.find_out_of_stock --category makeup

    # headed, 5 attempts, JSON output
    python -m scripts.find_out_of_stock --headed --max-attempts 5 --json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import random
import sys
from typing import Optional

from dotenv import load_dotenv

from storefront_qa.browser import managed_browser, new_context
from storefront_qa.config import Settings, setup_logging
from storefront_qa.flows import CategoryBrowsingFlow
from storefront_qa.storefront_types import SearchResult

logger = logging.getLogger("find_out_of_stock")


async def run(settings: Settings, category: Optional[str], max_attempts: Optional[int], seed: Optional[int]) -> SearchResult:
    async with managed_browser(settings) as browser:
        context = await new_context(browser, settings)
        try:
            page = await context.new_page()
            flow = CategoryBrowsingFlow(page, settings, rng=random.Random(seed))
            if category:
                return await flow.find_out_of_stock_product_in_category(category)
            return await flow.find_out_of_stock_product(max_attempts)
        finally:
            await context.close()


def _print_result(result: SearchResult, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result.to_dict(), indent=2))
        return
    if result.matched:
        print(f"✅ {result.product_name}  (category: {result.category_name}, attempts: {result.attempts})")
    else:
        print(f"❌ {result.diagnostic_message}")


def _build_cli() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Find an out-of-stock product on the storefront")
    p.add_argument("--category", "-c", help="Search only the category whose name contains this text")
    p.add_argument("--max-attempts", type=int, help="Attempt budget for the random search")
    p.add_argument("--seed", type=int, help="Seed for category/product selection")
    p.add_argument("--headed", action="store_true", help="Show the browser window")
    p.add_argument("--json", action="store_true", help="Print the result as JSON")
    p.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return p


if __name__ == "__main__":
    load_dotenv()
    args = _build_cli().parse_args()

    overrides = {"headless": False} if args.headed else {}
    settings = Settings(**overrides)
    setup_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        result = asyncio.run(run(settings, args.category, args.max_attempts, args.seed))
    except KeyboardInterrupt:
        print("\n\n👋 Cancelled by user")
        sys.exit(130)
    except Exception as exc:
        logger.exception(f"Search failed: {exc}")
        sys.exit(1)

    _print_result(result, args.json)
    sys.exit(0 if result.matched else 2)
