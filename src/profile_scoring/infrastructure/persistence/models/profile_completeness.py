"""
ProfileCompleteness Model (Persistence)
Latest completeness and strength snapshot per user
"""
from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String
from sqlalchemy.sql import func

from profile_scoring.core.database import Base
from profile_scoring.domain.enums import ProfileQuality


class ProfileCompletenessModel(Base):
    __tablename__ = "profile_completeness"

    # Primary Key
    id = Column(Integer, primary_key=True, autoincrement=True)

    # Host user identifier, stored as text so any key type fits
    user_id = Column(String(64), unique=True, nullable=False, index=True)

    # Completeness
    completed_sections = Column(Integer, nullable=False, default=0)
    completion_percentage = Column(Integer, nullable=False, default=0)
    completeness_score = Column(Integer, nullable=False, default=0)
    profile_quality = Column(String(20), nullable=False, default=ProfileQuality.POOR.value)
    missing_section_names = Column(JSON, nullable=False, default=list)
    priority_sections = Column(JSON, nullable=False, default=list)
    estimated_completion_minutes = Column(Integer, nullable=False, default=0)

    # Strength metrics
    basic_info_score = Column(Integer, nullable=False, default=0)
    contact_info_score = Column(Integer, nullable=False, default=0)
    personal_details_score = Column(Integer, nullable=False, default=0)
    family_info_score = Column(Integer, nullable=False, default=0)
    professional_info_score = Column(Integer, nullable=False, default=0)
    preferences_score = Column(Integer, nullable=False, default=0)
    document_score = Column(Integer, nullable=False, default=0)

    # Verification flags
    has_profile_photo = Column(Boolean, nullable=False, default=False)
    mobile_verified = Column(Boolean, nullable=False, default=False)
    email_verified = Column(Boolean, nullable=False, default=False)
    identity_verified = Column(Boolean, nullable=False, default=False)

    # Timestamps
    calculated_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    def __repr__(self):
        return f"<ProfileCompletenessModel User:{self.user_id} {self.completion_percentage}%>"
