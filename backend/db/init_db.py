"""
Create the Eventmi schema and optionally seed a sample event.

Idempotent: tables are only created when missing, and the sample event is
only inserted into an empty table.

Usage:
    cd backend
    python -m db.init_db            # create tables
    python -m db.init_db --seed     # create tables + one sample event
"""

import argparse
import logging
import sys
from datetime import datetime

from db.database import SessionLocal, init_db
from db.store import EventStore

logging.basicConfig(level=logging.INFO, format="%(message)s")
log = logging.getLogger(__name__)

SAMPLE_EVENT = {
    "name": "Sample event",
    "place": "Sofia",
    "start": datetime(2024, 12, 12, 12, 0),
    "end": datetime(2024, 12, 12, 16, 0),
}


def seed(store: EventStore) -> int | None:
    """Insert SAMPLE_EVENT when the table is empty. Returns the new id, if any."""
    if store.list_all():
        log.info("  events table not empty — skipping seed")
        return None
    event_id = store.create(**SAMPLE_EVENT)
    log.info(f"  seeded sample event id={event_id}")
    return event_id


def parse_args():
    parser = argparse.ArgumentParser(
        description="Create the Eventmi database schema.",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Insert one sample event when the events table is empty.",
    )
    return parser.parse_args()


def main():
    args = parse_args()
    try:
        init_db()
        log.info("  schema ready")
        if args.seed:
            db = SessionLocal()
            try:
                seed(EventStore(db))
            finally:
                db.close()
    except Exception as exc:
        log.error(f"  database initialisation failed: {exc}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
