from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from portal.database import get_db
from portal.models.user import User
from portal.routers.auth_deps import require_hr
from portal.schemas.application import (
    EmailTemplateResponse, SendEmailsRequest, SendEmailsResponse, ShortlistedCandidateResponse
)
from portal.services.job_service import JobService
from portal.services.shortlist_service import ShortlistService

router = APIRouter(
    prefix="/jobs/{job_id}/shortlisted",
    tags=["Shortlist"],
)

@router.get("/", response_model=List[ShortlistedCandidateResponse])
def list_shortlisted(
    job_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_hr),
):
    """Shortlisted candidates for a job, highest similarity first."""
    JobService(db).get_job(job_id)
    return ShortlistService(db).list_shortlisted_by_job(job_id)

@router.get("/email-template", response_model=EmailTemplateResponse)
def get_email_template(
    job_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_hr),
):
    job = JobService(db).get_job(job_id)
    return {"job_id": job.id, "template": ShortlistService.default_email_template(job)}

@router.post("/emails", response_model=SendEmailsResponse)
def send_emails(
    job_id: int,
    payload: SendEmailsRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_hr),
):
    job = JobService(db).get_job(job_id)
    recipients, failed = ShortlistService(db).send_emails(job, payload.template)
    return {"sent": len(recipients), "recipients": recipients, "failed": failed}
