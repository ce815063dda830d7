"""
One-time database setup: create hsk1_vocabulary and seed the HSK1 list.

Run once after provisioning the database:
    python -m hsk.setup_database
Nothing happens if the table already exists.
"""

import asyncio
import logging

from hsk.config import DATABASE_URL
from hsk.data.vocabulary import HSK1_WORDS
from hsk.database import TABLE_NAME, close_pool, init_db, insert_words, table_exists

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO
)
logger = logging.getLogger(__name__)

CONNECTION_PROMPT = (
    "Paste your PostgreSQL connection string and press Enter.\n"
    "Hint: special characters in the password (@, :, /) must be URL-encoded, e.g. @ becomes %40\n> "
)


def get_connection_string(prompt=input) -> str:
    """Use DATABASE_URL, or ask for a connection string."""
    if DATABASE_URL:
        return DATABASE_URL
    return prompt(CONNECTION_PROMPT).strip()


async def setup_database(dsn: str, words: list = HSK1_WORDS) -> int:
    """Create and seed the table. Returns the number of words inserted (0 if it already existed)."""
    try:
        if await table_exists(dsn):
            logger.info(f'Table "{TABLE_NAME}" already exists, skipping setup.')
            return 0

        logger.info(f'Creating table "{TABLE_NAME}"...')
        await init_db(dsn)

        logger.info(f"Inserting {len(words)} words...")
        inserted = await insert_words(words, dsn)
        logger.info("Database setup complete")
        return inserted
    finally:
        await close_pool()
        logger.info("Database connection closed")


def main() -> int:
    dsn = get_connection_string()
    if not dsn:
        logger.error("No connection string given. Aborting.")
        return 1

    asyncio.run(setup_database(dsn))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
