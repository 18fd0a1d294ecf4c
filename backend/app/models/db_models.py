"""
Caelex Compliance Engine - SQLAlchemy ORM Models

Persistent assessments and their per-requirement status rows.
The applicable-requirement set is never stored; it is recomputed from
profile_data on every scoring.
"""
from datetime import datetime, timezone

from sqlalchemy import (
    Column, String, Integer, DateTime, Text, JSON, ForeignKey,
    Enum as SQLEnum, UniqueConstraint,
)
from sqlalchemy.orm import relationship

from ..database import Base
from .domain import ComplianceStatus, RiskLevel


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class AssessmentDB(Base):
    """One operator profile assessed against a set of jurisdictions."""
    __tablename__ = "assessments"

    id = Column(String(36), primary_key=True)  # UUID
    organization_id = Column(String(36), nullable=True, index=True)
    name = Column(String(255), nullable=False)

    # Input
    jurisdictions = Column(JSON, nullable=False, default=list)  # ["eu_space_act", "nis2", ...]
    profile_data = Column(JSON, nullable=False, default=dict)   # OperatorProfile.to_dict()

    # ==========================================================================
    # DERIVED FIELDS - recomputed on every mutation
    # ==========================================================================
    overall_score = Column(Integer, nullable=True)
    mandatory_score = Column(Integer, nullable=True)
    category_scores = Column(JSON, nullable=True, default=dict)
    risk_level = Column(SQLEnum(RiskLevel, native_enum=False, length=20), nullable=True)
    gap_count = Column(Integer, nullable=True)
    catalog_version = Column(String(20), nullable=True)  # Catalog the scores were computed against
    scored_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    statuses = relationship(
        "RequirementStatusDB",
        back_populates="assessment",
        cascade="all, delete-orphan",
    )


class RequirementStatusDB(Base):
    """Status of one requirement within one assessment."""
    __tablename__ = "requirement_statuses"
    __table_args__ = (
        UniqueConstraint("assessment_id", "requirement_id", name="uq_assessment_requirement"),
    )

    id = Column(String(36), primary_key=True)  # UUID
    assessment_id = Column(
        String(36), ForeignKey("assessments.id", ondelete="CASCADE"), nullable=False, index=True
    )
    requirement_id = Column(String(100), nullable=False)
    status = Column(SQLEnum(ComplianceStatus, native_enum=False, length=20), nullable=False, default=ComplianceStatus.NOT_ASSESSED)
    notes = Column(Text, nullable=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    assessment = relationship("AssessmentDB", back_populates="statuses")
