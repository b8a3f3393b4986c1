#!/usr/bin/env python3
"""
Seed the StyleHub catalog with sample products

Inserts the sample products only when the products table is empty, so it
is safe to run more than once.

Usage:
    export DATABASE_URL="postgresql://..."
    python scripts/seed_database.py
"""
import os
import sys
import logging
from dotenv import load_dotenv

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

load_dotenv()

from stylehub.core.database import init_schema
from stylehub.services.seed_service import seed_products

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


def main():
    logger.info("=" * 60)
    logger.info("STYLEHUB CATALOG SEED")
    logger.info("=" * 60)

    try:
        init_schema()
        result = seed_products()
    except Exception as e:
        logger.error(f"❌ Seed failed: {e}")
        return 1

    if result["created"]:
        logger.info(f"✅ {result['message']}: {result['inserted_count']} products inserted")
    else:
        logger.info(f"ℹ️  {result['message']}, nothing to do")
    return 0


if __name__ == "__main__":
    sys.exit(main())
