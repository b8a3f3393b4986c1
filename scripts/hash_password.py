#!/usr/bin/env python3
"""
Generate a bcrypt hash for ADMIN_PASSWORD_HASH

Usage:
    python scripts/hash_password.py 'my-admin-password'

Output:
    Prints the hash; put it in .env as ADMIN_PASSWORD_HASH
"""
import os
import sys
import logging

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from stylehub.core.auth import hash_password

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


if __name__ == "__main__":
    if len(sys.argv) != 2:
        logger.error("Usage: python scripts/hash_password.py <password>")
        sys.exit(1)

    logger.info(hash_password(sys.argv[1]))
