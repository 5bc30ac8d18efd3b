#!/usr/bin/env python3
"""
Load the newspaper circulation corpus into MongoDB.

This script:
1. Reads the JSON corpus (data/circulation.json by default)
2. Optionally clears the collection
3. Bulk inserts all records and reports the collection size

Usage:
    python scripts/load_circulation_data.py [--data PATH] [--clear]

Options:
    --clear    Delete existing records before loading (destructive!)
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from circulation.common.config import Config
from circulation.common.dataset import load_records
from circulation.common.errors import StoreConnectionError, StoreOperationError
from circulation.common.logger import setup_logging
from circulation.common.repositories import (
    RepositoryConfig,
    close_circulation_repository,
    get_circulation_repository,
)

logger = logging.getLogger(__name__)


async def main(argv=None) -> int:
    """Load circulation records into MongoDB."""
    parser = argparse.ArgumentParser(
        description="Load newspaper circulation records into MongoDB"
    )
    parser.add_argument(
        "--data",
        default=Config.CIRCULATION_DATA_PATH,
        help="Path to the circulation JSON corpus"
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Delete existing records before loading (⚠️ destructive!)"
    )
    args = parser.parse_args(argv)

    try:
        Config.validate()
    except ValueError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging()

    # Step 1: Read corpus
    logger.info(f"📖 Reading {args.data}...")
    try:
        records = load_records(args.data)
    except (OSError, ValueError) as e:
        logger.error(f"❌ Failed to read corpus: {e}")
        return 1

    # Step 2: Connect
    try:
        config = RepositoryConfig.from_env()
    except ValueError as e:
        logger.error(f"❌ {e}")
        return 1

    repo = get_circulation_repository(config)
    try:
        if args.clear:
            cleared = await repo.clear()
            logger.info(f"🗑  Cleared {cleared} existing records")

        # Step 3: Insert
        result = await repo.load_data(records)
        total = await repo.count()
        logger.info(f"✓ Inserted {result.inserted_count} records ({total} in collection)")
    except StoreConnectionError as e:
        logger.error(f"❌ Failed to connect to MongoDB: {e}")
        logger.error("Check your MONGODB_URI in .env")
        return 1
    except StoreOperationError as e:
        logger.error(f"❌ MongoDB rejected the load: {e}")
        return 1
    finally:
        await close_circulation_repository()

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
