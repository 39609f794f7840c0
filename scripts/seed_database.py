"""
Populate the relational store with the starter questions and challenges.

Each kind is only inserted when its table is empty, so the script is safe to
run repeatedly:

  python scripts/seed_database.py
  python scripts/seed_database.py --database-url postgresql://user:pw@host/db
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from studydeck.config import get_settings
from studydeck.db import PostgresDbClient, seed_challenges, seed_questions
from studydeck.errors import StorageError

logger = logging.getLogger(__name__)


def seed(db: PostgresDbClient, *, dry_run: bool) -> tuple[int, int]:
    """Return how many (questions, challenges) were added."""
    added_questions = 0
    existing = len(db.get_all_questions())
    if existing:
        logger.info("Skipping questions (%d already exist)", existing)
    else:
        questions = seed_questions()
        if not dry_run:
            for question in questions:
                db.create_question(question)
        added_questions = len(questions)
        logger.info("Added %d questions", added_questions)

    added_challenges = 0
    existing = len(db.get_all_challenges())
    if existing:
        logger.info("Skipping challenges (%d already exist)", existing)
    else:
        challenges = seed_challenges()
        if not dry_run:
            for challenge in challenges:
                db.create_challenge(challenge)
        added_challenges = len(challenges)
        logger.info("Added %d challenges", added_challenges)

    return added_questions, added_challenges


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Seed the StudyDeck database with starter content"
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL; defaults to the DATABASE_URL environment variable",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would be added without writing",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(message)s")
    database_url = args.database_url or get_settings().database_url
    if not database_url:
        logger.error("No database configured; set DATABASE_URL or pass --database-url")
        return 1

    try:
        db = PostgresDbClient(database_url)
        seed(db, dry_run=args.dry_run)
    except StorageError as exc:
        logger.error("Seed failed: %s", exc)
        return 1

    logger.info("Seed completed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
