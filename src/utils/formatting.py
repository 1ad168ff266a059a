from __future__ import annotations

from decimal import Decimal


def format_currency(value: Decimal, symbol: str = "") -> str:
    cents = value.quantize(Decimal("0.01"))
    return f"{symbol}{cents:.2f}"
