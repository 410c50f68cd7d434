from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session
from typing import List

from portal.core.config import settings
from portal.core.exceptions import AccessDeniedError
from portal.core.limiter import limiter
from portal.database import get_db
from portal.models.user import User
from portal.routers.auth_deps import get_current_user, require_student
from portal.schemas.resume import ResumeResponse
from portal.services.resume_service import ResumeService

router = APIRouter(
    prefix="/resumes",
    tags=["Resumes"],
)

@router.post("/", response_model=ResumeResponse, status_code=201)
@limiter.limit(settings.rate_limit_uploads)
def upload_resume(
    request: Request,
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_student),
):
    content = file.file.read()
    return ResumeService(db).upload_resume(current_user, file.filename or "resume", content)

@router.get("/", response_model=List[ResumeResponse])
def list_my_resumes(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_student),
):
    return ResumeService(db).list_resumes_by_user(current_user.id)

@router.get("/{resume_id}", response_model=ResumeResponse)
def get_resume(
    resume_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    resume = ResumeService(db).get_resume(resume_id)
    _check_can_view(current_user, resume.user_id)
    return resume

@router.get("/{resume_id}/file")
def download_resume(
    resume_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    service = ResumeService(db)
    resume = service.get_resume(resume_id)
    _check_can_view(current_user, resume.user_id)
    return FileResponse(service.stored_path(resume), filename=resume.file_name)

def _check_can_view(user: User, owner_id: int):
    # HR reviews every applicant's resume; students only see their own
    if not user.is_hr and user.id != owner_id:
        raise AccessDeniedError("You can only access your own resumes")
