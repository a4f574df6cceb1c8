import uuid
from sqlalchemy import Column, String, Text, BigInteger, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc
from casebook.utils.choices import EVIDENCE_TYPES, check_in


class Evidence(Base):
    __tablename__ = 'evidence'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    case_id = Column(UUID(as_uuid=True), ForeignKey('cases.id', ondelete='CASCADE'), nullable=False)
    evidence_number = Column(String(80), nullable=False, unique=True)
    evidence_type = Column(String(30), nullable=False)
    file_name = Column(String(512), nullable=True)
    description = Column(Text, nullable=True)
    file_size = Column(BigInteger, nullable=True)
    file_hash_sha256 = Column(String(64), nullable=True)
    storage_location = Column(Text, nullable=True)
    collected_by = Column(UUID(as_uuid=True), ForeignKey('users.id'), nullable=True)
    collection_date = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    case = relationship("Case", back_populates="evidence")

    __table_args__ = (
        Index('idx_evidence_case_id', 'case_id'),
        Index('idx_evidence_created_at', 'created_at'),
        CheckConstraint(check_in('evidence_type', EVIDENCE_TYPES), name='ck_evidence_evidence_type'),
        CheckConstraint('file_size IS NULL OR file_size >= 0', name='ck_evidence_file_size'),
    )
