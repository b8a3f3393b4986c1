#!/usr/bin/env python3
"""
Create the StyleHub tables (products, orders, banners) if missing

Usage:
    export DATABASE_URL="postgresql://..."
    python scripts/init_db.py
"""
import os
import sys
import logging
from dotenv import load_dotenv

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

load_dotenv()

from stylehub.core.database import init_schema

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


if __name__ == "__main__":
    try:
        init_schema()
        logger.info("✅ Schema created")
    except Exception as e:
        logger.error(f"❌ Schema creation failed: {e}")
        sys.exit(1)
