"""Collection blob model: one JSON array per named collection."""
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func
from inventory_dashboard.database import Base


class CollectionBlob(Base):
    """Persisted payload of a whole record collection."""

    __tablename__ = 'record_collection'

    name = Column(String(64), primary_key=True)
    payload = Column(Text, nullable=False, default='[]')
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<CollectionBlob(name='{self.name}', bytes={len(self.payload or '')})>"
