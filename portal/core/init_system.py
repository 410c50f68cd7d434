import logging
from sqlalchemy.orm import Session
from portal.database import SessionLocal
from portal.models.job import Job
from portal.models.resume import Resume
from portal.models.user import User, UserRole
from portal.services.application_service import ApplicationService
from portal.services.text_extraction import FRONTEND_PROFILE_TEXT

logger = logging.getLogger(__name__)

DEFAULT_USERS = [
    {"email": "hr@example.com", "name": "HR Manager", "role": UserRole.HR},
    {"email": "student@example.com", "name": "Student User", "role": UserRole.STUDENT},
]

DEFAULT_JOBS = [
    {
        "title": "Frontend Developer",
        "description": (
            "We are looking for a skilled Frontend Developer to join our team. The ideal candidate "
            "should have experience with React, TypeScript, and modern CSS frameworks."
        ),
        "skills": ["React", "TypeScript", "CSS", "HTML"],
        "location": "Remote",
        "salary": "$80,000 - $100,000",
        "experience": "2+ years",
    },
    {
        "title": "Backend Engineer",
        "description": (
            "Seeking an experienced Backend Engineer with strong Python skills. Knowledge of Django "
            "or Flask is required. Experience with database design and RESTful API development is "
            "essential."
        ),
        "skills": ["Python", "Django", "API", "PostgreSQL"],
        "location": "San Francisco, CA",
        "salary": "$90,000 - $120,000",
        "experience": "3+ years",
    },
]


def seed_default_data(db: Session) -> bool:
    """
    Write the demo users, jobs, resume and application into an empty store.
    Returns False without touching anything when users already exist.
    """
    if db.query(User).count() > 0:
        return False

    hr_user, student = [User(**data) for data in DEFAULT_USERS]
    db.add_all([hr_user, student])
    db.flush()

    jobs = [Job(**data, posted_by=hr_user.id) for data in DEFAULT_JOBS]
    db.add_all(jobs)
    db.flush()

    resume = Resume(
        file_name="john_resume.pdf",
        file_url="/mock/resumes/john_resume.pdf",
        text=FRONTEND_PROFILE_TEXT,
        user_id=student.id,
    )
    db.add(resume)
    db.flush()

    # Scored like any other application so the shortlist stays consistent
    service = ApplicationService(db)
    score = service.scorer.score(resume.text, jobs[0].description)
    service.record_application_outcome(student, jobs[0], resume, score)
    return True


def init_system_data():
    """
    Seeds the demo records on first start.
    """
    db = SessionLocal()
    try:
        if seed_default_data(db):
            logger.info("Seeded default users, jobs and sample application.")
        else:
            logger.info("System initialization check: existing data found, skipping seed.")
    except Exception as e:
        db.rollback()
        logger.error(f"Error during system initialization: {str(e)}", exc_info=True)
    finally:
        db.close()
