from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from config import config
from domain.booth import BoothRegistry
from importers.booth_activity import apply_activity, load_activity, load_roster, seat_artists
from utils.sales_summary import compute_sales_summary, render_sales_summary

logger = logging.getLogger(__name__)


def run(roster_csv: Path, activity_csv: Path | None) -> None:
    registry = BoothRegistry()
    seat_artists(load_roster(roster_csv), registry)

    if activity_csv is not None:
        activities = load_activity(activity_csv)
        accepted = apply_activity(activities, registry)
        logger.info("Replayed %d activity rows, %d accepted", len(activities), accepted)

    render_sales_summary(compute_sales_summary(registry), currency_symbol=config().currency_symbol)


def main(argv: Sequence[str] | None = None) -> None:
    settings = config()
    logging.basicConfig(level=settings.log_level.upper(), format=settings.log_format)
    parser = argparse.ArgumentParser(description="Replay artist alley booth activity and print a sales summary.")
    parser.add_argument("--roster", type=Path, default=Path("data/roster.csv"))
    parser.add_argument("--activity", type=Path, default=None)
    args = parser.parse_args(argv)
    run(args.roster, args.activity)


if __name__ == "__main__":
    main()
