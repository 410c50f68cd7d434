from sqlalchemy import Column, Integer, String, Text, JSON, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from portal.database import Base

class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, index=True, nullable=False)
    description = Column(Text, nullable=False)
    skills = Column(JSON, nullable=False, default=list)
    location = Column(String, nullable=True)
    salary = Column(String, nullable=True)
    experience = Column(String, nullable=True)
    posted_by = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    posted_at = Column(DateTime(timezone=True), server_default=func.now())

    poster = relationship("User", back_populates="jobs")
    applications = relationship("Application", back_populates="job", cascade="all, delete-orphan")
    shortlisted = relationship("ShortlistedCandidate", back_populates="job", cascade="all, delete-orphan")
