"""Key-value store module.

This module handles:
- ORM model for hash fields
- Hash-style reads (hgetall) and seeding writes (hset)
"""

from nopasswords.store.models import HashField
from nopasswords.store.service import hgetall, hset

__all__ = ["HashField", "hgetall", "hset"]
