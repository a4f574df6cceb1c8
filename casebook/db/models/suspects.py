import uuid
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc
from casebook.utils.choices import SUSPECT_STATUSES, INVOLVEMENT_LEVELS, check_in


class Suspect(Base):
    __tablename__ = 'suspects'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    contact = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    identification_number = Column(String(100), nullable=True)
    status = Column(String(30), nullable=False, default='suspect')
    notes = Column(Text, nullable=True)
    created_by = Column(UUID(as_uuid=True), ForeignKey('users.id'), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    case_links = relationship("CaseSuspect", back_populates="suspect", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_suspects_created_at', 'created_at'),
        Index('idx_suspects_name', 'name'),
        CheckConstraint(check_in('status', SUSPECT_STATUSES), name='ck_suspects_status'),
    )


class CaseSuspect(Base):
    __tablename__ = 'case_suspects'
    case_id = Column(UUID(as_uuid=True), ForeignKey('cases.id', ondelete='CASCADE'), primary_key=True)
    suspect_id = Column(UUID(as_uuid=True), ForeignKey('suspects.id', ondelete='CASCADE'), primary_key=True)
    involvement_level = Column(String(20), nullable=False, default='unknown')
    relationship_to_case = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)

    case = relationship("Case", back_populates="suspect_links")
    suspect = relationship("Suspect", back_populates="case_links")

    __table_args__ = (
        Index('idx_case_suspects_suspect_id', 'suspect_id'),
        CheckConstraint(check_in('involvement_level', INVOLVEMENT_LEVELS), name='ck_case_suspects_involvement_level'),
    )
