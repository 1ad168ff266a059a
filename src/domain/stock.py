from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, model_validator


class StockItem(BaseModel):
    """Unit price and remaining quantity for one item type on a booth table."""

    model_config = ConfigDict(frozen=True)

    price: Decimal
    qty: int = 0

    @model_validator(mode="after")
    def _validate_fields(self) -> StockItem:
        if self.price <= 0:
            raise ValueError("price must be > 0")
        if self.qty < 0:
            raise ValueError("qty must be >= 0")
        return self

    @property
    def value(self) -> Decimal:
        return self.price * self.qty
