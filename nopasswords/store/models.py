"""Key-value store ORM model.

Each stored hash is a set of rows sharing one key, one row per field,
mirroring the hash commands of a Redis-style store.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from nopasswords.db import Base


class HashField(Base):
    """ORM model for one field of a stored hash.

    Attributes:
        key: Hash key (the record identifier).
        field: Field name within the hash.
        value: Field value, always stored as a string.
    """

    __tablename__ = "kv_hash_fields"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    field: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        """Return string representation of HashField."""
        return f"<HashField(key='{self.key}', field='{self.field}')>"


__all__ = ["HashField"]
