import uuid
from sqlalchemy import Column, String, Text, Date, DateTime, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
from .base import Base, now_utc, today_utc


class Victim(Base):
    __tablename__ = 'victims'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    contact = Column(String(255), nullable=True)
    location = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    report_date = Column(Date, nullable=False, default=today_utc)
    description = Column(Text, nullable=True)
    created_by = Column(UUID(as_uuid=True), ForeignKey('users.id'), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    __table_args__ = (
        Index('idx_victims_created_at', 'created_at'),
        Index('idx_victims_name', 'name'),
    )
