"""
PostgreSQL database connections

Centralizes every way the application talks to the database:
- psycopg2 connections returning dict rows (repositories, API handlers)
- connection retry with exponential backoff (health checks, startup)
- schema bootstrap for the storefront tables
"""
import time
import logging

import psycopg2
from psycopg2.extras import RealDictCursor

from .config import settings

logger = logging.getLogger(__name__)


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS products (
    id SERIAL PRIMARY KEY,
    name VARCHAR(255) NOT NULL,
    description TEXT NOT NULL,
    category VARCHAR(32) NOT NULL,
    size_options TEXT[] NOT NULL DEFAULT '{}',
    price NUMERIC(12, 2) NOT NULL,
    images TEXT[] NOT NULL DEFAULT '{}',
    colors TEXT[] NOT NULL DEFAULT '{}',
    stock INTEGER NOT NULL DEFAULT 0,
    featured BOOLEAN NOT NULL DEFAULT FALSE,
    created_at TIMESTAMP NOT NULL DEFAULT NOW(),
    updated_at TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_products_category ON products (category);
CREATE INDEX IF NOT EXISTS idx_products_created_at ON products (created_at DESC);

CREATE TABLE IF NOT EXISTS orders (
    id SERIAL PRIMARY KEY,
    product_id INTEGER NOT NULL,
    product_name VARCHAR(255) NOT NULL DEFAULT '',
    product_image TEXT NOT NULL DEFAULT '',
    customer_name VARCHAR(255) NOT NULL,
    phone_number VARCHAR(20) NOT NULL,
    customer_address TEXT,
    size VARCHAR(32) NOT NULL,
    color VARCHAR(64),
    quantity INTEGER NOT NULL DEFAULT 1,
    price NUMERIC(12, 2) NOT NULL DEFAULT 0,
    total_amount NUMERIC(12, 2) NOT NULL DEFAULT 0,
    status VARCHAR(16) NOT NULL DEFAULT 'Pending',
    notes TEXT,
    created_at TIMESTAMP NOT NULL DEFAULT NOW(),
    updated_at TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_orders_status ON orders (status);

CREATE TABLE IF NOT EXISTS banners (
    id SERIAL PRIMARY KEY,
    title VARCHAR(255) NOT NULL,
    subtitle TEXT,
    image_url TEXT NOT NULL,
    link_url TEXT,
    is_active BOOLEAN NOT NULL DEFAULT TRUE,
    display_order INTEGER NOT NULL DEFAULT 0,
    text_color VARCHAR(32) NOT NULL DEFAULT '#ffffff',
    font_size VARCHAR(32) NOT NULL DEFAULT 'text-2xl',
    font_weight VARCHAR(32) NOT NULL DEFAULT 'font-normal',
    font_style VARCHAR(32) NOT NULL DEFAULT 'not-italic',
    text_align VARCHAR(32) NOT NULL DEFAULT 'text-center',
    background_color VARCHAR(64) NOT NULL DEFAULT 'transparent',
    layout JSONB NOT NULL DEFAULT '[]'::jsonb,
    background_image TEXT,
    background_offset JSONB NOT NULL DEFAULT '{"x": 50, "y": 50}'::jsonb,
    created_at TIMESTAMP NOT NULL DEFAULT NOW(),
    updated_at TIMESTAMP
);
"""


def get_db_connection_dict():
    """
    Get a database connection with RealDictCursor (returns dictionaries)

    Use this for repositories and API responses.

    Example:
        conn = get_db_connection_dict()
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM products")
        results = cursor.fetchall()  # list of dicts
        cursor.close()
        conn.close()
    """
    database_url = settings.DATABASE_URL
    if not database_url:
        raise Exception("DATABASE_URL not configured")

    return psycopg2.connect(database_url, cursor_factory=RealDictCursor)


def get_db_connection_with_retry(max_retries=None, retry_delay=None):
    """
    Get a psycopg2 connection with automatic retry on connection failures

    Retries psycopg2.OperationalError with exponential backoff; any other
    error fails immediately.

    Args:
        max_retries: Maximum number of connection attempts (default: settings)
        retry_delay: Initial delay between retries in seconds (default: settings)

    Returns:
        psycopg2 connection with RealDictCursor

    Raises:
        psycopg2.OperationalError: If all retry attempts fail
    """
    max_retries = max_retries or settings.DB_CONNECT_RETRIES
    retry_delay = settings.DB_RETRY_DELAY if retry_delay is None else retry_delay

    database_url = settings.DATABASE_URL
    if not database_url:
        raise Exception("DATABASE_URL not configured")

    last_error = None

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            conn = psycopg2.connect(database_url, cursor_factory=RealDictCursor)

            cursor = conn.cursor()
            cursor.execute("SELECT 1")
            cursor.close()

            logger.debug(f"Database connection successful on attempt {attempt}")
            return conn

        except psycopg2.OperationalError as e:
            last_error = e
            logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {e}")

            if attempt < max_retries:
                delay = retry_delay * (2 ** (attempt - 1))
                logger.info(f"Retrying in {delay:.2f} seconds...")
                time.sleep(delay)
            else:
                logger.error(f"All {max_retries} connection attempts failed")
                raise

    raise last_error if last_error else Exception("Connection failed after all retries")


def init_schema():
    """Create storefront tables and indexes if they do not exist"""
    conn = get_db_connection_with_retry()
    cursor = conn.cursor()

    try:
        cursor.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema ready")
    except Exception:
        conn.rollback()
        raise
    finally:
        cursor.close()
        conn.close()
