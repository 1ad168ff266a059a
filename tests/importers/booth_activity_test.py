from decimal import Decimal
from pathlib import Path

import pytest
from pydantic import ValidationError

from domain.booth import BoothRegistry
from domain.stock import StockItem
from importers.booth_activity import (
    ActivityAction,
    BoothActivity,
    RosterEntry,
    apply_activity,
    load_activity,
    load_roster,
    seat_artists,
)
from tests.helpers.recording_sink import RecordingSink


def _write(path: Path, content: str) -> Path:
    path.write_text(content)
    return path


def test_load_roster(tmp_path: Path) -> None:
    csv_path = _write(tmp_path / "roster.csv", "name,uid,booth_id\nMeodai,82222,1325\n GizemV ,85413,2222\n")

    assert load_roster(csv_path) == [
        RosterEntry(name="Meodai", uid="82222", booth_id="1325"),
        RosterEntry(name="GizemV", uid="85413", booth_id="2222"),
    ]


def test_load_roster_missing_columns(tmp_path: Path) -> None:
    csv_path = _write(tmp_path / "roster.csv", "name,uid\nMeodai,82222\n")

    with pytest.raises(ValueError, match="booth_id"):
        load_roster(csv_path)


def test_load_roster_empty_file(tmp_path: Path) -> None:
    csv_path = _write(tmp_path / "roster.csv", "")

    with pytest.raises(ValueError, match="missing headers"):
        load_roster(csv_path)


def test_load_activity(tmp_path: Path) -> None:
    csv_path = _write(
        tmp_path / "activity.csv",
        "uid,action,item_type,amount\n82222,new,shirt,5.50\n82222,RESTOCK,shirt,10\n82222,sell,shirt,\n",
    )

    assert load_activity(csv_path) == [
        BoothActivity(uid="82222", action=ActivityAction.NEW, item_type="shirt", amount=Decimal("5.50")),
        BoothActivity(uid="82222", action=ActivityAction.RESTOCK, item_type="shirt", amount=Decimal(10)),
        BoothActivity(uid="82222", action=ActivityAction.SELL, item_type="shirt", amount=None),
    ]


def test_load_activity_unknown_action(tmp_path: Path) -> None:
    csv_path = _write(tmp_path / "activity.csv", "uid,action,item_type,amount\n82222,refund,shirt,1\n")

    with pytest.raises(ValueError, match="unknown action 'refund'"):
        load_activity(csv_path)


def test_load_activity_invalid_amount(tmp_path: Path) -> None:
    csv_path = _write(tmp_path / "activity.csv", "uid,action,item_type,amount\n82222,new,shirt,five\n")

    with pytest.raises(ValueError, match=":2 has invalid amount"):
        load_activity(csv_path)


def test_load_roster_short_row(tmp_path: Path) -> None:
    csv_path = _write(tmp_path / "roster.csv", "name,uid,booth_id\nMeodai,82222\n")

    with pytest.raises(ValueError, match=":2 missing value for booth_id"):
        load_roster(csv_path)


def test_load_activity_short_row(tmp_path: Path) -> None:
    csv_path = _write(tmp_path / "activity.csv", "uid,action,item_type,amount\n82222,new\n")

    with pytest.raises(ValueError, match=":2 missing value for item_type"):
        load_activity(csv_path)


def test_activity_requires_amount_unless_selling() -> None:
    with pytest.raises(ValidationError):
        BoothActivity(uid="82222", action=ActivityAction.RESTOCK, item_type="shirt")


def test_seat_and_replay(registry: BoothRegistry, sink: RecordingSink) -> None:
    artists = seat_artists(
        [
            RosterEntry(name="Meodai", uid="82222", booth_id="1325"),
            RosterEntry(name="GizemV", uid="85413", booth_id="2222"),
        ],
        registry,
        sink=sink,
    )
    activities = [
        BoothActivity(uid="82222", action=ActivityAction.NEW, item_type="shirt", amount=Decimal(5)),
        BoothActivity(uid="82222", action=ActivityAction.NEW, item_type="shirt", amount=Decimal(5)),
        BoothActivity(uid="82222", action=ActivityAction.RESTOCK, item_type="shirt", amount=Decimal(10)),
        BoothActivity(uid="82222", action=ActivityAction.SELL, item_type="shirt", amount=None),
        BoothActivity(uid="82222", action=ActivityAction.SELL, item_type="shirt", amount=Decimal(4)),
        BoothActivity(uid="85413", action=ActivityAction.SELL, item_type="pin", amount=None),
    ]

    accepted = apply_activity(activities, registry)

    assert accepted == 4
    assert len(artists) == 2
    assert len(registry.get_big_booths()) == 1
    assert len(registry.get_small_booths()) == 1

    meodai = registry.find("82222")
    assert meodai is not None
    assert meodai.stock["shirt"] == StockItem(price=5, qty=5)
    assert meodai.get_net_sales() == 5 * 5 * Decimal("0.65")
    assert sink.last == "GizemV does not sell pin!\nSale invalid!"


def test_replay_unknown_uid(registry: BoothRegistry) -> None:
    activities = [BoothActivity(uid="80000", action=ActivityAction.SELL, item_type="shirt")]

    with pytest.raises(ValueError, match="uid=80000"):
        apply_activity(activities, registry)
