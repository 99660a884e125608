"""Product reference generation."""

import uuid
from datetime import datetime
from typing import Optional

from app.config import settings


def generate_product_reference(now: Optional[datetime] = None) -> str:
    """
    Build a new product reference: ``<prefix>-<timestamp>-<random hex>``.

    The timestamp keeps references readable and roughly sortable by creation
    time; the 128-bit random suffix makes collisions negligible.

    Example:
        >>> generate_product_reference()
        'REF-2026-10-19T10:49:12.123456-9f1c2b8e0d6a4e33b8a1f2c3d4e5f607'
    """
    now = now or datetime.now()
    return f"{settings.reference_prefix}-{now.isoformat(timespec='microseconds')}-{uuid.uuid4().hex}"
