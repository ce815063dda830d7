import asyncpg
import ssl
import threading
import asyncio
from hsk.config import DATABASE_URL

TABLE_NAME = "hsk1_vocabulary"

# Thread-local storage for connection pools
# Each thread (gunicorn worker) gets its own pool
_local = threading.local()


def get_ssl_context():
    """Create SSL context for Supabase/cloud PostgreSQL connections."""
    ctx = ssl.create_default_context()
    ctx.check_hostname = False
    ctx.verify_mode = ssl.CERT_NONE  # Supabase uses self-signed certs
    return ctx


async def get_pool(dsn: str = None):
    """Get or create connection pool for current thread and event loop."""
    dsn = dsn or DATABASE_URL

    try:
        current_loop = asyncio.get_running_loop()
    except RuntimeError:
        current_loop = None

    if not hasattr(_local, 'pools'):
        _local.pools = {}

    # Use loop id as key (or thread id if no loop)
    pool_key = id(current_loop) if current_loop else threading.get_ident()

    if pool_key in _local.pools:
        pool = _local.pools[pool_key]
        if not pool.is_closing():
            return pool
        del _local.pools[pool_key]

    if not dsn:
        raise ValueError("DATABASE_URL is not set! Please configure database connection.")

    # Determine if we need SSL (for cloud databases like Supabase, Neon, etc.)
    use_ssl = 'supabase' in dsn or 'neon' in dsn or 'render' in dsn

    pool = await asyncpg.create_pool(
        dsn,
        min_size=1,
        max_size=5,  # Reduced for free tier limits
        command_timeout=60,
        ssl=get_ssl_context() if use_ssl else None,
        # For PgBouncer/Supabase pooler - disable prepared statements
        statement_cache_size=0 if 'pooler.supabase' in dsn else 100
    )
    _local.pools[pool_key] = pool
    return pool


async def close_pool():
    """Close all connection pools for current thread."""
    if hasattr(_local, 'pools'):
        for pool in _local.pools.values():
            if not pool.is_closing():
                await pool.close()
        _local.pools = {}


async def table_exists(dsn: str = None) -> bool:
    """Check whether the vocabulary table has been created."""
    pool = await get_pool(dsn)

    async with pool.acquire() as conn:
        regclass = await conn.fetchval("SELECT to_regclass($1)", f"public.{TABLE_NAME}")
        return regclass is not None


async def init_db(dsn: str = None):
    """Create the vocabulary table."""
    pool = await get_pool(dsn)

    async with pool.acquire() as conn:
        await conn.execute(f"""
            CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
                id SERIAL PRIMARY KEY,
                character VARCHAR(255) NOT NULL,
                pinyin VARCHAR(255) NOT NULL,
                word_class VARCHAR(50),
                translation TEXT NOT NULL
            )
        """)


async def insert_words(words: list, dsn: str = None) -> int:
    """Insert words in list order, so ids follow the list. Returns the number inserted."""
    pool = await get_pool(dsn)

    async with pool.acquire() as conn:
        async with conn.transaction():
            await conn.executemany(
                f"INSERT INTO {TABLE_NAME} (character, pinyin, word_class, translation) VALUES ($1, $2, $3, $4)",
                [(w["character"], w["pinyin"], w["word_class"], w["translation"]) for w in words]
            )
    return len(words)


async def fetch_vocabulary(dsn: str = None) -> list:
    """Get every vocabulary row, ordered by id."""
    pool = await get_pool(dsn)

    async with pool.acquire() as conn:
        rows = await conn.fetch(f"SELECT * FROM {TABLE_NAME} ORDER BY id")
        return [dict(row) for row in rows]
