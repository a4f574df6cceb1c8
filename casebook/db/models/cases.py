import uuid
from sqlalchemy import Column, String, Text, Date, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc
from casebook.utils.choices import CASE_STATUSES, CASE_TYPES, check_in


class Case(Base):
    __tablename__ = 'cases'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    case_number = Column(String(64), nullable=False, unique=True)
    case_type = Column(String(40), nullable=False)
    status = Column(String(20), nullable=False, default='open')
    incident_date = Column(Date, nullable=False)
    summary = Column(Text, nullable=False)
    victim_id = Column(UUID(as_uuid=True), ForeignKey('victims.id', ondelete='SET NULL'), nullable=True)
    assigned_to = Column(UUID(as_uuid=True), ForeignKey('users.id'), nullable=True)
    created_by = Column(UUID(as_uuid=True), ForeignKey('users.id'), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    victim = relationship("Victim")
    suspect_links = relationship("CaseSuspect", back_populates="case", cascade="all, delete-orphan")
    evidence = relationship("Evidence", back_populates="case", cascade="all, delete-orphan")
    forensic_actions = relationship("ForensicAction", back_populates="case", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_cases_status', 'status'),
        Index('idx_cases_case_type', 'case_type'),
        Index('idx_cases_victim_id', 'victim_id'),
        Index('idx_cases_created_at', 'created_at'),
        CheckConstraint(check_in('status', CASE_STATUSES), name='ck_cases_status'),
        CheckConstraint(check_in('case_type', CASE_TYPES), name='ck_cases_case_type'),
    )
