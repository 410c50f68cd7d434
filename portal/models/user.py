"""
User Model.
Two roles only: HR users post jobs, students upload resumes and apply.
"""
from sqlalchemy import Column, Integer, String, Enum, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum
from portal.database import Base


class UserRole(str, enum.Enum):
    HR = "hr"
    STUDENT = "student"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    role = Column(Enum(UserRole, values_callable=lambda e: [m.value for m in e]), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    jobs = relationship("Job", back_populates="poster")
    resumes = relationship("Resume", back_populates="owner")
    applications = relationship("Application", back_populates="applicant")
    notifications = relationship("Notification", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User {self.email} ({self.role.value})>"

    @property
    def is_hr(self) -> bool:
        return self.role == UserRole.HR

    @property
    def is_student(self) -> bool:
        return self.role == UserRole.STUDENT
