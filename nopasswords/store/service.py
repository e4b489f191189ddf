"""Hash-style key-value operations over the database.

Values are strings on the way in and out, as with a Redis hash; callers
convert numeric fields themselves.
"""

from collections.abc import Mapping

from sqlalchemy import select
from sqlalchemy.orm import Session

from nopasswords.store.models import HashField


def hgetall(session: Session, key: str) -> dict[str, str] | None:
    """Read every field of a hash.

    Args:
        session: SQLAlchemy session.
        key: Hash key.

    Returns:
        Mapping of field to value, or None if the key has no fields.
    """
    stmt = select(HashField).where(HashField.key == key)
    rows = session.execute(stmt).scalars().all()
    if not rows:
        return None
    return {row.field: row.value for row in rows}


def hset(session: Session, key: str, mapping: Mapping[str, object]) -> int:
    """Set fields of a hash, creating it if needed.

    Args:
        session: SQLAlchemy session.
        key: Hash key.
        mapping: Fields to set. None values are skipped.

    Returns:
        Number of fields that were newly added.
    """
    added = 0
    for field, value in mapping.items():
        if value is None:
            continue
        row = session.get(HashField, (key, field))
        if row is None:
            session.add(HashField(key=key, field=field, value=str(value)))
            added += 1
        else:
            row.value = str(value)
    session.flush()
    return added


__all__ = ["hgetall", "hset"]
