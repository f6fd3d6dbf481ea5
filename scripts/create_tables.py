"""Create the calendar's tables in the configured database.

Reads DATABASE_URL (or PG* vars) from .env / environment. Pass --reset to
also write a fresh calendar under STORAGE_KEY.

Usage:
  python scripts/create_tables.py [--reset]
"""

from __future__ import annotations

import argparse
import logging
import os
import pathlib
import sys

from dotenv import find_dotenv, load_dotenv
from sqlalchemy.orm import Session

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from advent_roulette.config import resolve_database_url
from advent_roulette.db import create_app_engine
from advent_roulette.models.base import Base
from advent_roulette.services.draw_state import DEFAULT_TOTAL_NUMBERS
from advent_roulette.services.state_store import DEFAULT_STORAGE_KEY, StateStore

# Import models so they register with Base.metadata
from advent_roulette import models  # noqa: F401

logger = logging.getLogger("create_tables")


def main(argv: list[str] | None = None) -> int:
    """Create all ORM tables, optionally resetting the stored calendar."""

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--reset", action="store_true", help="write a fresh calendar state")
    args = parser.parse_args(argv)

    load_dotenv(find_dotenv(usecwd=True))
    env_local = PROJECT_ROOT / ".env.local"
    if env_local.exists():
        load_dotenv(dotenv_path=env_local, override=True)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    # Settings are read after the dotenv files; the config classes freeze env at import.
    database_url = resolve_database_url()
    storage_key = os.getenv("STORAGE_KEY") or DEFAULT_STORAGE_KEY
    total = int(os.getenv("TOTAL_NUMBERS") or DEFAULT_TOTAL_NUMBERS)

    engine = create_app_engine(database_url)
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created (or already exist).")

    if args.reset:
        with Session(engine) as session, session.begin():
            StateStore(session, key=storage_key, total=total).reset()
        logger.info("Calendar %r reset.", storage_key)

    engine.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
