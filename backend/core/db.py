import logging

import psycopg2

from core.config import Settings

logger = logging.getLogger(__name__)

INVENTORY_TABLE_DDL = """
    CREATE TABLE IF NOT EXISTS inventory (
        id        SERIAL PRIMARY KEY,
        name      TEXT    NOT NULL,
        quantity  BIGINT  NOT NULL,
        price     NUMERIC NOT NULL DEFAULT 0,
        category  TEXT    NOT NULL DEFAULT '',
        supplier  TEXT    NOT NULL DEFAULT ''
    )
"""


def open_connection(settings: Settings):
    """Open a fresh psycopg2 connection; the caller owns closing it."""
    return psycopg2.connect(**settings.connect_kwargs())


def initialize_database(settings: Settings) -> bool:
    """Test database connection and make sure the inventory table exists"""
    logger.info("🔧 Testing database connection...")
    conn = None
    try:
        conn = open_connection(settings)
        with conn.cursor() as cur:
            cur.execute(INVENTORY_TABLE_DDL)
        conn.commit()
        logger.info("✅ Database connection successful, inventory table ready")
        return True
    except psycopg2.Error as e:
        logger.error(f"❌ Database initialization failed: {e}")
        logger.warning("⚠️  Application will continue but requests needing the DB will fail")
        return False
    finally:
        if conn is not None:
            conn.close()
