from typing import Any, Dict

from portal.models.application import Application
from portal.models.job import Job
from portal.models.resume import Resume
from portal.models.shortlisted_candidate import ShortlistedCandidate
from portal.models.user import User
from portal.services.base import BaseService


class DashboardService(BaseService):
    def hr_summary(self, user: User) -> Dict[str, Any]:
        jobs = self.db.query(Job).filter(Job.posted_by == user.id).order_by(Job.id).all()
        job_ids = [job.id for job in jobs]
        total_applications = 0
        total_shortlisted = 0
        if job_ids:
            total_applications = self.db.query(Application).filter(Application.job_id.in_(job_ids)).count()
            total_shortlisted = self.db.query(ShortlistedCandidate).filter(
                ShortlistedCandidate.job_id.in_(job_ids)
            ).count()
        return {
            "total_jobs": len(jobs),
            "total_applications": total_applications,
            "total_shortlisted": total_shortlisted,
            "jobs": jobs,
        }

    def student_summary(self, user: User) -> Dict[str, Any]:
        applications = self.db.query(Application, Job.title).outerjoin(
            Job, Application.job_id == Job.id
        ).filter(Application.user_id == user.id).order_by(Application.id).all()
        applied_job_ids = {app.job_id for app, _ in applications}
        # Jobs the student can still apply to
        available_jobs = [
            job for job in self.db.query(Job).order_by(Job.id).all() if job.id not in applied_job_ids
        ]
        return {
            "available_jobs": available_jobs,
            "resumes": self.db.query(Resume).filter(Resume.user_id == user.id).order_by(Resume.id).all(),
            "applications": [
                {
                    "id": app.id,
                    "job_id": app.job_id,
                    "user_id": app.user_id,
                    "resume_id": app.resume_id,
                    "status": app.status,
                    "similarity_score": app.similarity_score,
                    "applied_at": app.applied_at,
                    "job_title": title,
                }
                for app, title in applications
            ],
        }
