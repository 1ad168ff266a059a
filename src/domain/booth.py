from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import StrEnum
from typing import TYPE_CHECKING

from .errors import ArgumentRangeError
from .validation import require_digits, require_text

if TYPE_CHECKING:
    from .artist import Artist

MAX_BOOTH_ID_LENGTH = 4


class BoothSize(StrEnum):
    BIG = "BIG"
    SMALL = "SMALL"


BOOTH_SIZE_BY_PREFIX: dict[str, BoothSize] = {
    "1": BoothSize.BIG,
    "2": BoothSize.SMALL,
}

FEE_RATES: dict[BoothSize, Decimal] = {
    BoothSize.BIG: Decimal("0.35"),
    BoothSize.SMALL: Decimal("0.25"),
}


@dataclass(frozen=True)
class Booth:
    booth_id: str
    size: BoothSize = field(init=False)

    def __post_init__(self) -> None:
        require_text("booth_id", self.booth_id)
        if not self.booth_id or len(self.booth_id) > MAX_BOOTH_ID_LENGTH:
            raise ArgumentRangeError(
                f"booth_id must be 1-{MAX_BOOTH_ID_LENGTH} characters, got {self.booth_id!r}",
                argument="booth_id",
                value=self.booth_id,
            )
        size = BOOTH_SIZE_BY_PREFIX.get(self.booth_id[0])
        if size is None:
            raise ArgumentRangeError(
                f"booth_id must start with 1 (big) or 2 (small), got {self.booth_id!r}",
                argument="booth_id",
                value=self.booth_id,
            )
        require_digits("booth_id", self.booth_id)
        object.__setattr__(self, "size", size)

    @property
    def fee_rate(self) -> Decimal:
        return FEE_RATES[self.size]

    @property
    def net_rate(self) -> Decimal:
        return 1 - self.fee_rate


class BoothRegistry:
    """Append-only record of every artist seated at the convention, by booth size."""

    def __init__(self) -> None:
        self._by_size: dict[BoothSize, list[Artist]] = {size: [] for size in BoothSize}
        self._artists: list[Artist] = []

    def register(self, artist: Artist) -> None:
        self._by_size[artist.booth.size].append(artist)
        self._artists.append(artist)

    def get_big_booths(self) -> list[Artist]:
        return list(self._by_size[BoothSize.BIG])

    def get_small_booths(self) -> list[Artist]:
        return list(self._by_size[BoothSize.SMALL])

    def artists(self) -> list[Artist]:
        return list(self._artists)

    def find(self, uid: str) -> Artist | None:
        for artist in self._artists:
            if artist.uid == uid:
                return artist
        return None

    def __len__(self) -> int:
        return len(self._artists)
