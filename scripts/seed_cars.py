#!/usr/bin/env python3
"""
Seed the database with the sample seller and listings.

Features:
- Idempotent: safe to run multiple times (clears before seeding)
- Same data the in-memory store loads at startup

Usage:
    DATABASE_URL=... python scripts/seed_cars.py
    # keep messages, reviews and favorites:
    DATABASE_URL=... python scripts/seed_cars.py --keep-activity
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from autohaven.adapters.sql_record_store import SqlRecordStore
from autohaven.infra.db.models import CarRow, FavoriteRow, MessageRow, ReviewRow
from autohaven.infra.db.session import get_session
from autohaven.infra.sample_data import seed_sample_data


def seed_cars(keep_activity: bool = False) -> None:
    """
    Replace every listing with the sample listings.

    Args:
        keep_activity: Leave messages, reviews and favorites in place
    """
    with get_session() as session:
        # Step 1: Clear existing data (idempotent)
        tables = [CarRow] if keep_activity else [FavoriteRow, ReviewRow, MessageRow, CarRow]
        for row_type in tables:
            deleted_count = session.query(row_type).delete()
            print(f"🗑️  Deleted {deleted_count} rows from {row_type.__tablename__}")

        # Step 2: Seller plus listings through the same store the API uses
        store = SqlRecordStore(session)
        seller = seed_sample_data(store)
        cars = store.get_user_cars(seller.id)

        print(f"✅ Seeded {len(cars)} cars for seller '{seller.username}' (id={seller.id})")

        print("\n📊 Sample cars:")
        for i, car in enumerate(cars[:5], 1):
            print(f"   {i}. {car.title} - ${car.price:,} ({car.location})")

        if len(cars) > 5:
            print(f"   ... and {len(cars) - 5} more")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument(
        "--keep-activity",
        action="store_true",
        help="only replace listings; keep messages, reviews and favorites",
    )
    args = parser.parse_args(argv)

    try:
        seed_cars(keep_activity=args.keep_activity)
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
