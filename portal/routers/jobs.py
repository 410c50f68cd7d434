from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from portal.database import get_db
from portal.models.user import User
from portal.routers.auth_deps import get_current_user, require_hr
from portal.schemas.application import ApplicationResponse
from portal.schemas.job import JobCreate, JobUpdate, JobResponse
from portal.services.application_service import ApplicationService
from portal.services.job_service import JobService
from portal.services.notification import NotificationService

router = APIRouter(
    prefix="/jobs",
    tags=["Jobs"],
)

@router.post("/", response_model=JobResponse, status_code=201)
def create_job(
    job_in: JobCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_hr),
):
    """
    Create a new job posting.
    """
    job = JobService(db).create_job(current_user, job_in.model_dump())
    NotificationService.notify_user(
        db,
        user_id=current_user.id,
        title="Job created",
        message=f"'{job.title}' has been posted successfully.",
        type="success",
        link=f"/jobs/{job.id}"
    )
    return job

@router.get("/", response_model=List[JobResponse])
def list_jobs(
    posted_by: Optional[int] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return JobService(db).list_jobs(posted_by=posted_by)

@router.get("/{job_id}", response_model=JobResponse)
def get_job(
    job_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return JobService(db).get_job(job_id)

@router.put("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: int,
    job_in: JobUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_hr),
):
    changes = job_in.model_dump(exclude_unset=True)
    return JobService(db).update_job(current_user, job_id, changes)

@router.delete("/{job_id}")
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_hr),
):
    JobService(db).delete_job(current_user, job_id)
    return {"message": "Job deleted successfully"}

@router.get("/{job_id}/applications", response_model=List[ApplicationResponse])
def list_job_applications(
    job_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_hr),
):
    JobService(db).get_job(job_id)
    return ApplicationService(db).list_applications_by_job(job_id)
