"""Load sample snippets into the store.

Usage:
    python -m app.seed            # insert samples if there are no snippets yet
    python -m app.seed --reset    # delete all reviews and snippets first
"""
import argparse
import logging

from sqlalchemy import delete, func, select

from app.core.logging import configure_logging
from app.db.session import SessionLocal
from app.models.review import Review
from app.models.snippet import Snippet
from app.seed.loader import load_sample_snippets
from app.services.snippets import add_snippets_bulk

logger = logging.getLogger("app.seed")


def seed(reset: bool = False) -> int:
    db = SessionLocal()
    try:
        if reset:
            db.execute(delete(Review))
            db.execute(delete(Snippet))
            db.commit()
            logger.info("Cleared existing reviews and snippets")
        existing = db.scalar(select(func.count()).select_from(Snippet))
        if existing:
            logger.info("Store already holds %d snippets, skipping seed", existing)
            return 0
        result = add_snippets_bulk(db, load_sample_snippets())
        logger.info("Inserted %d sample snippets", result["addedCount"])
        return result["addedCount"]
    finally:
        db.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the store with sample code snippets.")
    parser.add_argument("--reset", action="store_true", help="Delete all reviews and snippets first.")
    args = parser.parse_args()
    configure_logging()
    seed(reset=args.reset)


if __name__ == "__main__":
    main()
