from __future__ import annotations

import logging
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping, Protocol

from .booth import Booth, BoothRegistry
from .errors import EmptyStockError
from .participant import ParticipantType, Person
from .stock import StockItem
from .validation import require_positive, require_positive_quantity, require_text

logger = logging.getLogger(__name__)

ITEM_LISTED = "{name} has put up {item_type} for sale!"
ITEM_ALREADY_LISTED = "{name} already sells {item_type}.\nNo new items added."
RESTOCKED = "{name} successfully restocked!.\n{item_type} current qty: {qty}"
RESTOCK_UNKNOWN_ITEM = "{name} does not sell {item_type}.\nRestock invalid!"
SOLD = "{name} sold {item_type} for {price}!\nQty remaining: {qty}"
SALE_UNKNOWN_ITEM = "{name} does not sell {item_type}!\nSale invalid!"
SOLD_OUT = "{name} ran out of {item_type}!"
SALE_EXCEEDS_STOCK = "{name} only has {qty} {item_type} left!\nSale invalid!"


class NoticeSink(Protocol):
    """Receives the human-readable notices an artist emits about their table."""

    def __call__(self, message: str) -> None: ...


def log_notice(message: str) -> None:
    logger.info(message)


def _format_price(price: Decimal) -> str:
    # 5.0 -> "5", 1.50 -> "1.5", 10 -> "10" (not "1E+1")
    return format(price.normalize(), "f")


class Artist:
    """A seated artist: identity, booth, stock ledger and sales total.

    Business rejections (duplicate listing, unknown item, sold out, oversell)
    are reported through the sink and answered with ``None``. Malformed
    arguments raise ``ArgumentTypeError`` / ``ArgumentRangeError``.
    """

    def __init__(
        self,
        name: Any,
        uid: Any,
        booth_id: Any,
        *,
        registry: BoothRegistry | None = None,
        sink: NoticeSink | None = None,
    ) -> None:
        self.person = Person(name, uid)
        self.booth = Booth(booth_id)
        self._sink: NoticeSink = sink or log_notice
        self._stock: dict[str, StockItem] = {}
        self._gross_sales = Decimal(0)
        if registry is not None:
            registry.register(self)

    def __repr__(self) -> str:
        return f"Artist(name={self.name!r}, uid={self.uid!r}, booth_id={self.booth_id!r})"

    @property
    def name(self) -> str:
        return self.person.name

    @property
    def uid(self) -> str:
        return self.person.uid

    @property
    def booth_id(self) -> str:
        return self.booth.booth_id

    @property
    def stock(self) -> Mapping[str, StockItem]:
        return MappingProxyType(self._stock)

    def get_type(self) -> ParticipantType:
        return self.person.get_type()

    def new_item(self, item_type: Any, price: Any) -> StockItem | None:
        require_text("item_type", item_type)
        unit_price = require_positive("price", price)

        if item_type in self._stock:
            self._notify(ITEM_ALREADY_LISTED, item_type=item_type)
            return None

        item = StockItem(price=unit_price, qty=0)
        self._stock[item_type] = item
        self._notify(ITEM_LISTED, item_type=item_type)
        return item

    def restock_item(self, item_type: Any, qty: Any) -> StockItem | None:
        require_text("item_type", item_type)
        added = require_positive_quantity("qty", qty)

        current = self._stock.get(item_type)
        if current is None:
            self._notify(RESTOCK_UNKNOWN_ITEM, item_type=item_type)
            return None

        item = StockItem(price=current.price, qty=current.qty + added)
        self._stock[item_type] = item
        self._notify(RESTOCKED, item_type=item_type, qty=item.qty)
        return item

    def sell_item(self, item_type: Any, qty: Any = 1) -> StockItem | None:
        require_text("item_type", item_type)
        sold = require_positive_quantity("qty", qty)

        current = self._stock.get(item_type)
        if current is None:
            self._notify(SALE_UNKNOWN_ITEM, item_type=item_type)
            return None
        if current.qty == 0:
            self._notify(SOLD_OUT, item_type=item_type)
            return None
        if sold > current.qty:
            self._notify(SALE_EXCEEDS_STOCK, item_type=item_type, qty=current.qty)
            return None

        item = StockItem(price=current.price, qty=current.qty - sold)
        self._stock[item_type] = item
        self._gross_sales += current.price * sold
        self._notify(SOLD, item_type=item_type, price=_format_price(item.price), qty=item.qty)
        return item

    def get_net_sales(self) -> Decimal:
        return self._gross_sales * self.booth.net_rate

    def get_avg_price(self) -> Decimal:
        if not self._stock:
            raise EmptyStockError(artist_uid=self.uid)
        total = sum((item.price for item in self._stock.values()), start=Decimal(0))
        return total / len(self._stock)

    def get_stock_value(self) -> Decimal:
        return sum((item.value for item in self._stock.values()), start=Decimal(0))

    def _notify(self, template: str, **fields: Any) -> None:
        self._sink(template.format(name=self.name, **fields))
