"""Create the messagely tables directly, bypassing Alembic.

Handy for throwaway SQLite databases; use ``messagely.scripts.migrate``
for anything long-lived.
"""
import argparse
import logging

from messagely.db.session import create_tables, drop_tables, engine

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the messagely tables")
    parser.add_argument(
        "--drop-tables",
        action="store_true",
        help="Drop existing tables before creating them.",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    if args.drop_tables:
        drop_tables()
        logger.info("Dropped all tables on %s", engine.url.render_as_string(hide_password=True))
    create_tables()
    logger.info("Database initialized on %s", engine.url.render_as_string(hide_password=True))


if __name__ == "__main__":
    main()
