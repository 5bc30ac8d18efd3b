#!/usr/bin/env python3
"""
Exercise every circulation repository operation against a live MongoDB.

This script:
1. Bulk loads the circulation corpus and checks the inserted count
2. Queries all records, by filter, with a limit and by ID
3. Adds, replaces and removes a record, checking each step
4. Drops the database and lists the remaining databases

Failures are logged and never change the exit code; teardown always runs.

Usage:
    python scripts/run_circulation_checks.py [--data PATH] [--keep-database]
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from circulation.common.config import Config
from circulation.common.database import DatabaseClient
from circulation.common.dataset import load_records
from circulation.common.logger import set_global_debug_mode, setup_logging
from circulation.common.repositories import (
    CirculationRepositoryInterface,
    RepositoryConfig,
    close_circulation_repository,
    get_circulation_repository,
)
from circulation.common.types import NEWSPAPER, CirculationRecord

logger = logging.getLogger(__name__)

NEW_ITEM: CirculationRecord = {
    "Newspaper": "New Newspaper Item",
    "Daily Circulation, 2004": 1000,
    "Daily Circulation, 2013": 2000,
    "Change in Daily Circulation, 2004-2013": 67,
    "Pulitzer Prize Winners and Finalists, 1990-2003": 0,
    "Pulitzer Prize Winners and Finalists, 2004-2014": 1,
    "Pulitzer Prize Winners and Finalists, 1990-2014": 2,
}

UPDATED_ITEM: CirculationRecord = {**NEW_ITEM, "Newspaper": "Updated Newspaper Item"}

SAMPLE_INDEX = 4
LIMIT = 3


async def run_checks(repo: CirculationRepositoryInterface, data: List[Dict[str, Any]]) -> None:
    """
    Run the CRUD scenario. Raises AssertionError on the first failed check.

    Needs at least SAMPLE_INDEX + 1 records with distinct Newspaper names.
    """
    logger.info("\n=== Step 1: Bulk load ===")
    results = await repo.load_data(data)
    assert results.inserted_count == len(data), (
        f"Expected {len(data)} inserted, got {results.inserted_count}"
    )
    assert len(set(results.inserted_ids)) == len(data), "Inserted IDs are not unique"
    logger.info(f"  ✓ Loaded {results.inserted_count} records")

    logger.info("\n=== Step 2: Query all ===")
    items = await repo.get()
    assert len(items) == len(data), f"Expected {len(data)} records, got {len(items)}"
    logger.info(f"  ✓ Fetched {len(items)} records")

    logger.info("\n=== Step 3: Query by filter ===")
    sample = items[SAMPLE_INDEX]
    filtered = await repo.get({NEWSPAPER: sample[NEWSPAPER]})
    assert filtered[0] == sample, f"Filter on {sample[NEWSPAPER]!r} returned {filtered[0]!r}"
    logger.info(f"  ✓ Found {sample[NEWSPAPER]!r}")

    logger.info("\n=== Step 4: Query with limit ===")
    limited = await repo.get({}, LIMIT)
    assert len(limited) == LIMIT, f"Expected {LIMIT} records, got {len(limited)}"
    logger.info(f"  ✓ Limit {LIMIT} returned {len(limited)} records")

    logger.info("\n=== Step 5: Get by ID ===")
    by_id = await repo.get_by_id(str(sample["_id"]))
    assert by_id == sample, f"get_by_id({sample['_id']}) returned {by_id!r}"
    logger.info(f"  ✓ Fetched {sample['_id']}")

    logger.info("\n=== Step 6: Add ===")
    added_id = await repo.add(NEW_ITEM)
    assert added_id, "add() returned no ID"
    added_item = await repo.get_by_id(added_id)
    assert added_item == {**NEW_ITEM, "_id": added_id}, f"Added record mismatch: {added_item!r}"
    logger.info(f"  ✓ Added {added_id}")

    logger.info("\n=== Step 7: Update ===")
    await repo.update(added_id, UPDATED_ITEM)
    updated_item = await repo.get_by_id(added_id)
    assert updated_item is not None, f"Record {added_id} disappeared after update"
    assert updated_item[NEWSPAPER] == UPDATED_ITEM[NEWSPAPER], (
        f"Expected {UPDATED_ITEM[NEWSPAPER]!r}, got {updated_item[NEWSPAPER]!r}"
    )
    logger.info(f"  ✓ Replaced {added_id}")

    logger.info("\n=== Step 8: Remove ===")
    removed = await repo.remove(added_id)
    assert removed, f"remove({added_id}) reported nothing removed"
    removed_item = await repo.get_by_id(added_id)
    assert removed_item is None, f"Record {added_id} still present after remove"
    assert await repo.remove(added_id) is False, "Second remove should report not found"
    logger.info(f"  ✓ Removed {added_id}")


async def teardown(config: RepositoryConfig) -> List[str]:
    """Drop the database and return the remaining database names."""
    async with DatabaseClient(config.mongodb_uri, config.database, config.timeout_ms) as client:
        await client.drop_database()
        names = await client.list_database_names()
    logger.info(f"Databases after teardown: {', '.join(names)}")
    return names


async def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Exercise the circulation repository against a live MongoDB"
    )
    parser.add_argument(
        "--data",
        default=Config.CIRCULATION_DATA_PATH,
        help="Path to the circulation JSON corpus"
    )
    parser.add_argument(
        "--keep-database",
        action="store_true",
        help="Skip dropping the database at the end"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    setup_logging(level="DEBUG" if args.debug else None)
    if args.debug:
        set_global_debug_mode(True)

    logger.info("=" * 60)
    logger.info("Circulation Repository Checks")
    logger.info("=" * 60)
    logger.info(Config.summary())

    config = None
    try:
        Config.validate()
        config = RepositoryConfig.from_env()
        data = load_records(args.data)
        repo = get_circulation_repository(config)
        await run_checks(repo, data)
        logger.info("\n✅ All checks passed")
    except Exception:
        logger.exception("\n❌ Circulation checks failed")
    finally:
        try:
            await close_circulation_repository()
            if config is not None and not args.keep_database:
                await teardown(config)
        except Exception:
            logger.exception("Teardown failed")

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
