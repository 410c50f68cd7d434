from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from portal.database import Base

class ShortlistedCandidate(Base):
    """Snapshot of the applicant taken when the application was shortlisted."""
    __tablename__ = "shortlisted_candidates"

    id = Column(Integer, primary_key=True, index=True)
    application_id = Column(Integer, ForeignKey("applications.id"), unique=True, nullable=False)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    resume_url = Column(String, nullable=False)
    similarity_score = Column(Float, nullable=False)
    job_id = Column(Integer, ForeignKey("jobs.id"), nullable=False, index=True)
    shortlisted_at = Column(DateTime(timezone=True), server_default=func.now())

    application = relationship("Application", back_populates="shortlist_entry")
    job = relationship("Job", back_populates="shortlisted")
