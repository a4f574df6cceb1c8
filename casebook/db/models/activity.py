import uuid
from sqlalchemy import Column, Text, DateTime, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID, JSONB
from .base import Base, now_utc


class ActivityLog(Base):
    __tablename__ = 'activity_logs'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    action = Column(Text, nullable=False)
    entity_type = Column(Text, nullable=False)
    entity_id = Column(UUID(as_uuid=True), nullable=True)
    # Use a non-reserved Python attribute name while keeping DB column name 'details'
    details_json = Column('details', JSONB, nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)

    __table_args__ = (
        Index('ix_activity_logs_user_id_created_at', 'user_id', 'created_at'),
        Index('ix_activity_logs_entity', 'entity_type', 'entity_id'),
        Index('ix_activity_logs_action', 'action'),
    )

    @property
    def details(self):
        return self.details_json
