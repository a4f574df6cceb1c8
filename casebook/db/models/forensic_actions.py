import uuid
from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc
from casebook.utils.choices import ACTION_STATUSES, check_in


class ForensicAction(Base):
    __tablename__ = 'forensic_actions'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    case_id = Column(UUID(as_uuid=True), ForeignKey('cases.id', ondelete='CASCADE'), nullable=False)
    # Fixed template identifier; NULL for custom checklist items
    template_id = Column(String(20), nullable=True)
    action_type = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default='pending')
    is_completed = Column(Boolean, nullable=False, default=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    performed_by = Column(UUID(as_uuid=True), ForeignKey('users.id'), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    case = relationship("Case", back_populates="forensic_actions")

    __table_args__ = (
        Index('idx_forensic_actions_case_id', 'case_id'),
        Index('idx_forensic_actions_created_at', 'created_at'),
        CheckConstraint(check_in('status', ACTION_STATUSES), name='ck_forensic_actions_status'),
    )
