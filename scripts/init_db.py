#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the product and ingredient tables for the configured DATABASE_URL
"""

import sys
import os
import logging

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from domain.models import init_database

logger = logging.getLogger("products.scripts.init_db")


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    try:
        init_database()
    except SQLAlchemyError as e:
        logger.error(f"Database initialization failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print(f"{settings.app_name} Database Initialization")
    print("=" * 60)
    print("\nThis will create/update:")
    print("  • product table (unique product_reference)")
    print("  • ingredient table (indexed product_reference)")
    print("\n" + "=" * 60 + "\n")

    exit_code = main()

    if exit_code == 0:
        print("\n" + "=" * 60)
        print("SUCCESS! Your database is ready to use.")
        print("=" * 60 + "\n")
    else:
        print("\n" + "=" * 60)
        print("FAILED! Check the errors above.")
        print("=" * 60 + "\n")

    sys.exit(exit_code)
