"""In-memory storefront that mimics the Playwright async Page/Locator surface."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from storefront_qa.storefront_types import StockStatus

CATEGORY_SELECTOR = "nav.categories > a"
ITEM_SELECTOR = ".product-item"
NAME_SELECTOR = ".product-name"
LINK_SELECTOR = "a.product-link"
OUT_SELECTOR = ".stock-out"
IN_SELECTOR = ".stock-in"
HOME_URL = "/"

_CATEGORY_URL = re.compile(r"^/category/(\d+)$")
_PRODUCT_URL = re.compile(r"^/category/(\d+)/product/(\d+)$")


class FakeNavigationError(Exception):
    pass


class FakeLocatorError(Exception):
    pass


@dataclass
class FakeProduct:
    name: Optional[str]  # None = entry without a name node
    status: StockStatus = StockStatus.IN_STOCK  # INDETERMINATE = no markers rendered


@dataclass
class FakeElement:
    text: Optional[str] = None
    href: Optional[str] = None
    visible: bool = True
    children: Dict[str, List["FakeElement"]] = field(default_factory=dict)
    on_click: Optional[Callable[[], None]] = None


class FakeLocator:
    def __init__(self, resolve: Callable[[], List[FakeElement]], error: Optional[Exception] = None):
        self._resolve = resolve
        self._error = error

    def _elements(self) -> List[FakeElement]:
        if self._error is not None:
            raise self._error
        return self._resolve()

    def _single(self) -> FakeElement:
        elements = self._elements()
        if not elements:
            raise FakeLocatorError("locator resolved to no element")
        return elements[0]

    def nth(self, index: int) -> "FakeLocator":
        return FakeLocator(lambda: self._elements()[index:index + 1], self._error)

    @property
    def first(self) -> "FakeLocator":
        return self.nth(0)

    def locator(self, selector: str) -> "FakeLocator":
        def resolve() -> List[FakeElement]:
            found: List[FakeElement] = []
            for el in self._elements():
                found.extend(el.children.get(selector, []))
            return found
        return FakeLocator(resolve, self._error)

    async def count(self) -> int:
        return len(self._elements())

    async def text_content(self) -> Optional[str]:
        return self._single().text

    async def get_attribute(self, name: str) -> Optional[str]:
        el = self._single()
        return el.href if name == "href" else None

    async def is_visible(self) -> bool:
        elements = self._elements()
        return bool(elements) and elements[0].visible

    async def click(self) -> None:
        el = self._single()
        if el.on_click:
            el.on_click()


class FakeStorefront:
    """
    Catalog of categories -> products with home/category/product views.

    Category links are rendered on every view, product items only on a
    category view, stock markers only on a product view.
    """

    def __init__(self, catalog: Sequence[Tuple[str, Sequence[FakeProduct]]]):
        self.catalog: List[Tuple[str, List[FakeProduct]]] = [(name, list(p)) for name, p in catalog]
        self.view: Tuple = ("home",)
        self.history: List[Tuple] = []
        self.closed = False
        self.goto_log: List[str] = []
        self.back_count = 0
        self.broken_targets: set = set()
        self.marker_error: Optional[Exception] = None
        self.category_query_error: Optional[Exception] = None

    # ---------------- URLs ----------------

    @staticmethod
    def category_url(ci: int) -> str:
        return f"/category/{ci}"

    @staticmethod
    def product_url(ci: int, pi: int) -> str:
        return f"/category/{ci}/product/{pi}"

    def product_visits(self) -> List[str]:
        return [u for u in self.goto_log if _PRODUCT_URL.match(u)]

    def category_visits(self) -> List[str]:
        return [u for u in self.goto_log if _CATEGORY_URL.match(u)]

    # ---------------- Page API ----------------

    def locator(self, selector: str) -> FakeLocator:
        if selector == CATEGORY_SELECTOR:
            return FakeLocator(self._category_links, self.category_query_error)
        if selector == ITEM_SELECTOR:
            return FakeLocator(self._product_items)
        if selector in (OUT_SELECTOR, IN_SELECTOR):
            return FakeLocator(lambda: self._stock_markers(selector), self.marker_error)
        return FakeLocator(lambda: [])

    async def goto(self, url: str, timeout: Optional[int] = None, **kwargs) -> None:
        self._navigate(url)

    async def go_back(self, **kwargs) -> None:
        self.back_count += 1
        if self.history:
            self.view = self.history.pop()

    async def wait_for_load_state(self, state: Optional[str] = None, **kwargs) -> None:
        return None

    def is_closed(self) -> bool:
        return self.closed

    # ---------------- Internals ----------------

    def _navigate(self, url: str) -> None:
        if self.closed:
            raise FakeNavigationError("page has been closed")
        self.goto_log.append(url)
        if url in self.broken_targets:
            raise FakeNavigationError(f"net::ERR_CONNECTION_RESET at {url}")
        if url == HOME_URL:
            new_view: Tuple = ("home",)
        elif _PRODUCT_URL.match(url):
            ci, pi = (int(g) for g in _PRODUCT_URL.match(url).groups())
            new_view = ("product", ci, pi)
        elif _CATEGORY_URL.match(url):
            new_view = ("category", int(_CATEGORY_URL.match(url).group(1)))
        else:
            raise FakeNavigationError(f"404 for {url}")
        self.history.append(self.view)
        self.view = new_view

    def _category_links(self) -> List[FakeElement]:
        links = []
        for ci, (name, _) in enumerate(self.catalog):
            url = self.category_url(ci)
            links.append(FakeElement(text=f"  {name}\n", href=url, on_click=lambda u=url: self._navigate(u)))
        return links

    def _product_items(self) -> List[FakeElement]:
        if self.view[0] != "category":
            return []
        ci = self.view[1]
        items = []
        for pi, product in enumerate(self.catalog[ci][1]):
            url = self.product_url(ci, pi)
            children = {
                LINK_SELECTOR: [FakeElement(href=url, on_click=lambda u=url: self._navigate(u))],
            }
            if product.name is not None:
                children[NAME_SELECTOR] = [FakeElement(text=product.name)]
            items.append(FakeElement(children=children))
        return items

    def _stock_markers(self, selector: str) -> List[FakeElement]:
        if self.view[0] != "product":
            return []
        _, ci, pi = self.view
        status = self.catalog[ci][1][pi].status
        if selector == OUT_SELECTOR and status is StockStatus.OUT_OF_STOCK:
            return [FakeElement(text="Out of Stock")]
        if selector == IN_SELECTOR and status is StockStatus.IN_STOCK:
            return [FakeElement(text="In Stock")]
        return []


class ScriptedRandom:
    """Stands in for random.Random: choice() returns items by name in a fixed order."""

    def __init__(self, picks: Sequence[str]):
        self._picks = list(picks)
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        wanted = self._picks.pop(0)
        for item in seq:
            if item.name == wanted:
                return item
        raise AssertionError(f"{wanted!r} not among {[i.name for i in seq]}")
