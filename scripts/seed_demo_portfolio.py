"""
Seed the database with the sample portfolio.

Writes the three sample properties and six renovations, replacing whatever
is stored unless the store already holds data and --force is not given.
"""
import argparse
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import get_settings
from app.db.database import get_db_context, init_db
from app.records.seed import sample_portfolio
from app.store import LoadStatus, RecordStore, SQLKeyValueBackend, StorageKeys


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--force", action="store_true", help="Overwrite stored data")
    args = parser.parse_args()

    init_db()

    with get_db_context() as db:
        store = RecordStore(
            SQLKeyValueBackend(db),
            seed=sample_portfolio,
            keys=StorageKeys.from_settings(get_settings()),
        )

        result = store.load_properties()
        if result.status == LoadStatus.loaded and not args.force:
            print(f"Store already holds {len(result.value)} properties, use --force to overwrite")
            return

        seed = sample_portfolio()
        if not (store.save_properties(seed.properties) and store.save_renovations(seed.renovations)):
            print("Error: failed to write sample portfolio")
            sys.exit(1)

        print(f"Seeded {len(seed.properties)} properties and {len(seed.renovations)} renovations")


if __name__ == "__main__":
    main()
