from __future__ import annotations

import csv
import logging
from decimal import Decimal, InvalidOperation
from enum import StrEnum
from pathlib import Path
from typing import Iterable

from pydantic import BaseModel, model_validator

from domain.artist import Artist, NoticeSink
from domain.booth import BoothRegistry

logger = logging.getLogger(__name__)


class ActivityAction(StrEnum):
    NEW = "new"
    RESTOCK = "restock"
    SELL = "sell"


class RosterEntry(BaseModel):
    name: str
    uid: str
    booth_id: str


class BoothActivity(BaseModel):
    uid: str
    action: ActivityAction
    item_type: str
    amount: Decimal | None = None

    @model_validator(mode="after")
    def _validate_amount(self) -> BoothActivity:
        if self.amount is None and self.action != ActivityAction.SELL:
            raise ValueError(f"{self.action} activity requires an amount")
        return self


def load_roster(csv_path: Path) -> list[RosterEntry]:
    """Load the seating roster.

    Each row should contain: name,uid,booth_id
    """
    rows = _read_rows(csv_path, required={"name", "uid", "booth_id"})
    return [
        RosterEntry(name=row["name"].strip(), uid=row["uid"].strip(), booth_id=row["booth_id"].strip()) for row in rows
    ]


def load_activity(csv_path: Path) -> list[BoothActivity]:
    """Load booth activity in the order it happened.

    Each row should contain: uid,action,item_type[,amount]
    ``amount`` is the unit price for ``new``, the quantity for ``restock`` and
    ``sell``; a ``sell`` without an amount sells a single unit.
    """
    rows = _read_rows(csv_path, required={"uid", "action", "item_type"})
    activities: list[BoothActivity] = []
    for line_no, row in enumerate(rows, start=2):
        raw_action = row["action"].strip().lower()
        try:
            action = ActivityAction(raw_action)
        except ValueError:
            raise ValueError(f"Activity CSV {csv_path}:{line_no} has unknown action {raw_action!r}") from None
        activities.append(
            BoothActivity(
                uid=row["uid"].strip(),
                action=action,
                item_type=row["item_type"].strip(),
                amount=_parse_amount(row.get("amount"), csv_path=csv_path, line_no=line_no),
            )
        )
    return activities


def seat_artists(
    roster: Iterable[RosterEntry],
    registry: BoothRegistry,
    *,
    sink: NoticeSink | None = None,
) -> list[Artist]:
    artists = [Artist(entry.name, entry.uid, entry.booth_id, registry=registry, sink=sink) for entry in roster]
    logger.info(
        "Seated %d artists (%d big booths, %d small booths)",
        len(artists),
        len(registry.get_big_booths()),
        len(registry.get_small_booths()),
    )
    return artists


def apply_activity(activities: Iterable[BoothActivity], registry: BoothRegistry) -> int:
    """Replay activity against registered artists; returns how many operations were accepted."""
    accepted = 0
    for activity in activities:
        artist = registry.find(activity.uid)
        if artist is None:
            raise ValueError(f"No artist registered with uid={activity.uid}")

        if activity.action == ActivityAction.NEW:
            result = artist.new_item(activity.item_type, activity.amount)
        elif activity.action == ActivityAction.RESTOCK:
            result = artist.restock_item(activity.item_type, activity.amount)
        elif activity.amount is None:
            result = artist.sell_item(activity.item_type)
        else:
            result = artist.sell_item(activity.item_type, activity.amount)

        if result is not None:
            accepted += 1
    return accepted


def _read_rows(csv_path: Path, *, required: set[str]) -> list[dict[str, str]]:
    with csv_path.open(newline="") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None:
            raise ValueError(f"CSV {csv_path} is empty or missing headers")

        missing = required - set(reader.fieldnames)
        if missing:
            raise ValueError(f"CSV {csv_path} missing required columns: {', '.join(sorted(missing))}")

        rows: list[dict[str, str]] = []
        for row in reader:
            # DictReader pads short rows with None
            absent = sorted(column for column in required if row.get(column) is None)
            if absent:
                raise ValueError(f"CSV {csv_path}:{reader.line_num} missing value for {', '.join(absent)}")
            rows.append(row)
        return rows


def _parse_amount(raw: str | None, *, csv_path: Path, line_no: int) -> Decimal | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        return Decimal(raw.strip())
    except InvalidOperation:
        raise ValueError(f"Activity CSV {csv_path}:{line_no} has invalid amount {raw!r}") from None
