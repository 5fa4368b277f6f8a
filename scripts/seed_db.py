"""seed_db.py

Run the dashboard seed outside the HTTP server.

Default: create the tables if needed, insert the placeholder data and commit.
--dry-run runs the whole seed and rolls it back; --check only reports the
current row count of each seed table.
"""

import argparse
import logging
import sys

from dashboard_seed.database import DATABASE_URL, build_engine, normalize_database_url
from dashboard_seed.errors import SeedError
from dashboard_seed.seed import count_rows, seed_database

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
logger = logging.getLogger('seed_db')


def run(database_url: str, dry_run: bool = False, check: bool = False) -> int:
    engine = build_engine(normalize_database_url(database_url))
    try:
        if check:
            for table, count in count_rows(engine).items():
                logger.info('%s: %d rows', table, count)
            return 0

        try:
            summary = seed_database(engine, commit=not dry_run)
        except SeedError as exc:
            logger.error('Seeding failed (%s): %s', exc.code, exc.message)
            logger.error('Details: %s', exc.details)
            return 1

        logger.info('%s: %s', 'Dry run finished' if dry_run else 'Database seeded successfully', summary)
        return 0
    finally:
        engine.dispose()


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--database-url', default=DATABASE_URL)
    parser.add_argument('--dry-run', action='store_true')
    parser.add_argument('--check', action='store_true')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    sys.exit(run(args.database_url, dry_run=args.dry_run, check=args.check))
