"""
Vocabulary sources - where the word list comes from.

- static:   bundled HSK1 list, ids 1..N (offline / development)
- remote:   GET against the read endpoint (/api/vocabulary)
- database: read hsk1_vocabulary directly (web page next to the database)

Every source exposes `async load()` and raises FetchError on failure.
"""

import asyncio
import json
import logging
from typing import List

import aiohttp
import asyncpg

from hsk.data.vocabulary import get_all_words
from hsk.database import fetch_vocabulary
from hsk.models import VocabularyEntry

logger = logging.getLogger(__name__)

LOAD_ERROR_PREFIX = "Could not load vocabulary"

# Raw error bodies are cut to this many characters
ERROR_BODY_LIMIT = 200

SOURCE_KINDS = ("static", "remote", "database")


class FetchError(Exception):
    """The vocabulary list could not be loaded."""

    def __init__(self, reason: str):
        super().__init__(f"{LOAD_ERROR_PREFIX}: {reason}")
        self.reason = reason


def describe_error_response(status: int, body: str) -> str:
    """Turn a failed response into a readable message."""
    try:
        data = json.loads(body)
    except ValueError:
        # Not JSON, probably a proxy or platform error page
        snippet = body[:ERROR_BODY_LIMIT]
        if len(body) > ERROR_BODY_LIMIT:
            snippet += "..."
        return f"Server error ({status}): {snippet}"

    if isinstance(data, dict) and isinstance(data.get("error"), str) and data["error"]:
        return data["error"]
    return f"Server responded with status: {status}"


def parse_entries(records) -> List[VocabularyEntry]:
    """Build entries from a list of JSON objects / rows."""
    if not isinstance(records, list):
        raise FetchError("Invalid response: expected a list of words.")
    try:
        return [VocabularyEntry.from_dict(record) for record in records]
    except (KeyError, TypeError, ValueError) as e:
        raise FetchError(f"Invalid response: {e}") from e


class StaticVocabularySource:
    kind = "static"

    def __init__(self, words: list = None, delay: float = 0.0):
        self.words = words
        self.delay = delay

    async def load(self) -> List[VocabularyEntry]:
        logger.info("Static mode: serving bundled vocabulary")
        if self.delay:
            # Lets the loading state show up briefly
            await asyncio.sleep(self.delay)
        if self.words is None:
            return parse_entries(get_all_words())
        return parse_entries([{"id": i + 1, **word} for i, word in enumerate(self.words)])


class RemoteVocabularySource:
    kind = "remote"

    def __init__(self, url: str, timeout: float = 10, session_factory=aiohttp.ClientSession):
        self.url = url
        self.timeout = timeout
        self.session_factory = session_factory

    async def load(self) -> List[VocabularyEntry]:
        try:
            async with self.session_factory() as session:
                async with session.get(
                    self.url,
                    timeout=aiohttp.ClientTimeout(total=self.timeout)
                ) as response:
                    status = response.status
                    body = await response.text(errors="replace")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Failed to fetch vocabulary from {self.url}: {e}")
            raise FetchError("Network error, the server could not be reached.") from e

        if not 200 <= status < 300:
            reason = describe_error_response(status, body)
            logger.error(f"Failed to fetch vocabulary: {reason}")
            raise FetchError(reason)

        try:
            records = json.loads(body)
        except ValueError as e:
            raise FetchError("Invalid response: body is not JSON.") from e
        return parse_entries(records)


class DatabaseVocabularySource:
    kind = "database"

    def __init__(self, dsn: str = None):
        self.dsn = dsn

    async def load(self) -> List[VocabularyEntry]:
        try:
            rows = await fetch_vocabulary(self.dsn)
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Database Error: {e}")
            raise FetchError(f"Failed to fetch vocabulary from the database: {e}") from e
        return parse_entries(rows)


def create_source(kind: str, api_url: str = None, timeout: float = 10,
                  delay: float = 0.0, dsn: str = None):
    """Build the vocabulary source selected by configuration."""
    if kind == "static":
        return StaticVocabularySource(delay=delay)
    if kind == "remote":
        if not api_url:
            raise ValueError("Remote vocabulary source needs an API URL")
        return RemoteVocabularySource(api_url, timeout=timeout)
    if kind == "database":
        return DatabaseVocabularySource(dsn)
    raise ValueError(f"Unknown vocabulary source: {kind!r} (expected one of {', '.join(SOURCE_KINDS)})")
