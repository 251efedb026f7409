#!/usr/bin/env python3
"""Create the HR records schema and optionally load the sample data."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from hr_records.core.logger import get_logger, shutdown_logging  # noqa: E402
from hr_records.db.engine import create_sync_engine  # noqa: E402
from hr_records.db.seed import create_schema, seed_sample_data  # noqa: E402
from hr_records.db.session import session_scope  # noqa: E402

logger = get_logger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--url", default=None, help="SQLAlchemy URL overriding the configured database")
    parser.add_argument("--no-seed", action="store_true", help="Create tables without inserting sample data")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    try:
        engine = create_sync_engine(args.url)
        create_schema(engine)
        if args.no_seed:
            logger.info("Skipping sample data")
            return
        with session_scope(args.url) as session:
            inserted = seed_sample_data(session)
        logger.info("Database initialised (%d sample employee(s) added)", inserted)
    finally:
        shutdown_logging()


if __name__ == "__main__":
    main()
