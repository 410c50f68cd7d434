"""
Applying to jobs.

An application is scored once, when it is created. The application row and,
for shortlisted outcomes, its shortlist row and the student's notification are
written in one transaction so that either all exist or none do.
"""
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portal.core.exceptions import (
    AccessDeniedError,
    DuplicateApplicationError,
    JobNotFoundError,
    NotAuthenticatedError,
    ResumeNotFoundError,
)
from portal.models.application import Application, ApplicationStatus
from portal.models.job import Job
from portal.models.resume import Resume
from portal.models.shortlisted_candidate import ShortlistedCandidate
from portal.models.user import User
from portal.services.base import BaseService
from portal.services.notification import NotificationService
from portal.services.scoring import SimilarityScorer, decide_status, get_scorer


class ApplicationService(BaseService):
    def __init__(self, db: Session, scorer: Optional[SimilarityScorer] = None):
        super().__init__(db)
        self.scorer = scorer or get_scorer()

    def apply_to_job(self, user: Optional[User], job_id: int, resume_id: int) -> Application:
        if user is None:
            raise NotAuthenticatedError("User must be logged in to apply")
        if not user.is_student:
            raise AccessDeniedError("Only students can apply to jobs")

        if self._find_existing(user.id, job_id):
            raise DuplicateApplicationError()

        resume = self.db.get(Resume, resume_id)
        if not resume or resume.user_id != user.id:
            raise ResumeNotFoundError()

        job = self.db.get(Job, job_id)
        if not job:
            raise JobNotFoundError()

        similarity_score = self.scorer.score(resume.text, job.description)
        return self.record_application_outcome(user, job, resume, similarity_score)

    def record_application_outcome(
        self, user: User, job: Job, resume: Resume, similarity_score: float
    ) -> Application:
        """
        Write the application and, when shortlisted, its shortlist entry and the
        student's notification. All rows land in one commit or none do.
        """
        status = decide_status(similarity_score)
        application = Application(
            job_id=job.id,
            user_id=user.id,
            resume_id=resume.id,
            status=status,
            similarity_score=similarity_score,
        )
        self.db.add(application)
        try:
            self.db.flush()
            if status == ApplicationStatus.SHORTLISTED:
                self.db.add(ShortlistedCandidate(
                    application_id=application.id,
                    name=user.name,
                    email=user.email,
                    resume_url=resume.file_url,
                    similarity_score=similarity_score,
                    job_id=job.id,
                ))
                self.db.add(NotificationService.build_notification(
                    user_id=user.id,
                    title="Application shortlisted",
                    message=f"Your application for {job.title} has been shortlisted.",
                    type="success",
                    link=f"/jobs/{job.id}",
                ))
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # Lost a race with a concurrent apply for the same (user, job)
            if self._find_existing(user.id, job.id):
                raise DuplicateApplicationError() from e
            raise
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(application)
        self.log_info(
            f"Application {application.id} recorded as {status.value}",
            job_id=job.id,
            user_id=user.id,
            similarity_score=round(similarity_score, 4),
        )
        return application

    def list_applications_by_user(self, user_id: int) -> List[Application]:
        return self.db.query(Application).filter(Application.user_id == user_id).order_by(Application.id).all()

    def list_applications_by_job(self, job_id: int) -> List[Application]:
        return self.db.query(Application).filter(Application.job_id == job_id).order_by(Application.id).all()

    def _find_existing(self, user_id: int, job_id: int) -> Optional[Application]:
        return self.db.query(Application).filter(
            Application.user_id == user_id,
            Application.job_id == job_id,
        ).first()
