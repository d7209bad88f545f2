"""Seed the store catalog from the static JSON dataset.

Seeding only happens when the catalog is empty; a populated catalog is left
untouched.

Usage:
    python -m store_locator.tools.seed_db
    python -m store_locator.tools.seed_db --data-file store_locator/data/stores.json
    python -m store_locator.tools.seed_db --verify-only
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from store_locator.adapters.persistence.database import async_session_factory, engine
from store_locator.adapters.persistence.repositories import SqlStoreRepository
from store_locator.adapters.seed_loader.loader import JsonStoreSource
from store_locator.application.use_cases.bootstrap_catalog import (
    BootstrapReport,
    CatalogBootstrapper,
)
from store_locator.config import settings
from store_locator.domain.errors import DomainError
from store_locator.domain.value_objects.enums import BootstrapStatus

logger = logging.getLogger(__name__)


async def seed(data_file: Path) -> BootstrapReport:
    """Run the catalog bootstrapper against the configured database."""
    async with async_session_factory() as session:
        bootstrapper = CatalogBootstrapper(
            store_repo=SqlStoreRepository(session),
            source=JsonStoreSource(data_file),
        )
        return await bootstrapper.run()


async def _verify_data() -> None:
    """Print the catalog size after seeding."""
    async with async_session_factory() as session:
        count = await SqlStoreRepository(session).count()

    print(f"\n{'='*50}")
    print("SEED VERIFICATION")
    print(f"{'='*50}")
    if isinstance(count, DomainError):
        print(f"Stores:   unavailable ({count.message})")
    else:
        print(f"Stores:   {count}")
    print(f"{'='*50}\n")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")

    parser = argparse.ArgumentParser(description="Seed the store catalog from JSON")
    parser.add_argument(
        "--data-file", type=str, default=settings.stores_data_path,
        help=f"Path to the stores JSON file (default: {settings.stores_data_path})",
    )
    parser.add_argument(
        "--verify-only", action="store_true",
        help="Only run verification, don't seed",
    )
    args = parser.parse_args()

    data_file = Path(args.data_file)
    if not args.verify_only and not data_file.exists():
        logger.error("Data file not found: %s", data_file)
        sys.exit(1)

    async def run_all() -> BootstrapReport | None:
        try:
            report = None if args.verify_only else await seed(data_file)
            await _verify_data()
            return report
        finally:
            await engine.dispose()

    report = asyncio.run(run_all())
    if report is not None and report.status == BootstrapStatus.FAILED:
        sys.exit(1)


if __name__ == "__main__":
    main()
