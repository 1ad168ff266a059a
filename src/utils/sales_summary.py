from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from domain.artist import Artist
from domain.booth import BoothRegistry, BoothSize
from domain.errors import EmptyStockError

from .formatting import format_currency


@dataclass
class ArtistSalesSummary:
    name: str
    uid: str
    booth_id: str
    booth_size: BoothSize
    item_types: int
    units_in_stock: int
    stock_value: Decimal
    net_sales: Decimal
    avg_price: Decimal | None


@dataclass
class SalesSummary:
    artists: list[ArtistSalesSummary] = field(default_factory=list)
    big_booths: int = 0
    small_booths: int = 0
    net_sales_by_size: dict[BoothSize, Decimal] = field(default_factory=dict)

    @property
    def total_net_sales(self) -> Decimal:
        return sum(self.net_sales_by_size.values(), start=Decimal(0))


def summarize_artist(artist: Artist) -> ArtistSalesSummary:
    try:
        avg_price: Decimal | None = artist.get_avg_price()
    except EmptyStockError:
        avg_price = None

    return ArtistSalesSummary(
        name=artist.name,
        uid=artist.uid,
        booth_id=artist.booth_id,
        booth_size=artist.booth.size,
        item_types=len(artist.stock),
        units_in_stock=sum(item.qty for item in artist.stock.values()),
        stock_value=artist.get_stock_value(),
        net_sales=artist.get_net_sales(),
        avg_price=avg_price,
    )


def compute_sales_summary(registry: BoothRegistry) -> SalesSummary:
    net_sales_by_size = {size: Decimal(0) for size in BoothSize}
    rows: list[ArtistSalesSummary] = []
    for artist in registry.artists():
        row = summarize_artist(artist)
        net_sales_by_size[row.booth_size] += row.net_sales
        rows.append(row)

    rows.sort(key=lambda row: (row.booth_id, row.uid))

    return SalesSummary(
        artists=rows,
        big_booths=len(registry.get_big_booths()),
        small_booths=len(registry.get_small_booths()),
        net_sales_by_size=net_sales_by_size,
    )


def render_sales_summary(summary: SalesSummary, *, currency_symbol: str = "") -> None:
    print("Artist alley sales:")
    if not summary.artists:
        print("  (no artists seated)")
        return

    def money(value: Decimal) -> str:
        return format_currency(value, currency_symbol)

    rows: list[tuple[str, str, str, str, str, str, str]] = []
    for artist in summary.artists:
        rows.append(
            (
                artist.booth_id,
                artist.name,
                artist.booth_size.value.lower(),
                str(artist.units_in_stock),
                money(artist.stock_value),
                money(artist.avg_price) if artist.avg_price is not None else "-",
                money(artist.net_sales),
            )
        )

    labels = ("Booth", "Artist", "Size", "Units", "Stock value", "Avg price", "Net sales")
    widths = [max(len(label), max(len(row[idx]) for row in rows)) for idx, label in enumerate(labels)]

    def line(cells: tuple[str, ...]) -> str:
        left = [f"{cell:<{width}}" for cell, width in zip(cells[:3], widths[:3])]
        right = [f"{cell:>{width}}" for cell, width in zip(cells[3:], widths[3:])]
        return " ".join(left + right)

    header = line(labels)
    lines = [header, "-" * len(header)]
    lines.extend(line(row) for row in rows)
    lines.append("-" * len(header))
    lines.append(
        f"Big booths: {summary.big_booths} "
        f"(net {money(summary.net_sales_by_size.get(BoothSize.BIG, Decimal(0)))})"
    )
    lines.append(
        f"Small booths: {summary.small_booths} "
        f"(net {money(summary.net_sales_by_size.get(BoothSize.SMALL, Decimal(0)))})"
    )
    lines.append(f"Total net sales: {money(summary.total_net_sales)}")
    print("\n".join(lines))
