from typing import Any, Dict, List, Optional

from portal.core.exceptions import AccessDeniedError, JobNotFoundError, NotAuthenticatedError
from portal.models.job import Job
from portal.models.user import User
from portal.services.base import BaseService


class JobService(BaseService):
    def create_job(self, user: Optional[User], data: Dict[str, Any]) -> Job:
        self._require_hr(user)
        job = Job(**data, posted_by=user.id)
        self.db.add(job)
        self.commit()
        self.db.refresh(job)
        self.log_info(f"Job {job.id} posted", job_id=job.id, user_id=user.id)
        return job

    def update_job(self, user: Optional[User], job_id: int, changes: Dict[str, Any]) -> Job:
        job = self._owned_job(user, job_id)
        for field, value in changes.items():
            setattr(job, field, value)
        self.commit()
        self.db.refresh(job)
        return job

    def delete_job(self, user: Optional[User], job_id: int) -> None:
        job = self._owned_job(user, job_id)
        # Applications and shortlist entries go with the job
        self.db.delete(job)
        self.commit()
        self.log_info(f"Job {job_id} deleted", job_id=job_id, user_id=user.id)

    def get_job(self, job_id: int) -> Job:
        job = self.db.get(Job, job_id)
        if not job:
            raise JobNotFoundError()
        return job

    def list_jobs(self, posted_by: Optional[int] = None) -> List[Job]:
        query = self.db.query(Job)
        if posted_by is not None:
            query = query.filter(Job.posted_by == posted_by)
        return query.order_by(Job.id).all()

    def _owned_job(self, user: Optional[User], job_id: int) -> Job:
        self._require_hr(user)
        job = self.get_job(job_id)
        if job.posted_by != user.id:
            raise AccessDeniedError("Only the poster can change this job")
        return job

    @staticmethod
    def _require_hr(user: Optional[User]):
        if user is None:
            raise NotAuthenticatedError()
        if not user.is_hr:
            raise AccessDeniedError("Only HR users can manage jobs")
