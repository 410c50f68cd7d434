from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from portal.database import get_db
from portal.models.user import User
from portal.routers.auth_deps import require_student
from portal.schemas.application import ApplyRequest, ApplicationResponse
from portal.services.application_service import ApplicationService

router = APIRouter(
    prefix="/applications",
    tags=["Applications"],
)

@router.post("/", response_model=ApplicationResponse, status_code=201)
def apply_to_job(
    payload: ApplyRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_student),
):
    """
    Apply to a job with one of the caller's resumes.
    The application is scored immediately and shortlisted when the score clears the threshold.
    """
    return ApplicationService(db).apply_to_job(current_user, payload.job_id, payload.resume_id)

@router.get("/", response_model=List[ApplicationResponse])
def list_my_applications(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_student),
):
    return ApplicationService(db).list_applications_by_user(current_user.id)
