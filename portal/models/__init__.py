# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import user, job, resume, application, shortlisted_candidate, notification

# Explicit class exports for cleaner imports
from .user import User, UserRole
from .job import Job
from .resume import Resume
from .application import Application, ApplicationStatus
from .shortlisted_candidate import ShortlistedCandidate
from .notification import Notification

__all__ = [
    "User",
    "UserRole",
    "Job",
    "Resume",
    "Application",
    "ApplicationStatus",
    "ShortlistedCandidate",
    "Notification",
]
