from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime
from portal.models.application import ApplicationStatus
from portal.schemas.job import JobResponse
from portal.schemas.resume import ResumeResponse

class ApplyRequest(BaseModel):
    job_id: int
    resume_id: int

class ApplicationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    job_id: int
    user_id: int
    resume_id: int
    status: ApplicationStatus
    similarity_score: Optional[float] = None
    applied_at: Optional[datetime] = None

class ApplicationWithJob(ApplicationResponse):
    job_title: Optional[str] = None

class ShortlistedCandidateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    application_id: int
    name: str
    email: str
    resume_url: str
    similarity_score: float
    job_id: int
    shortlisted_at: Optional[datetime] = None

class EmailTemplateResponse(BaseModel):
    job_id: int
    template: str

class SendEmailsRequest(BaseModel):
    template: str

class SendEmailsResponse(BaseModel):
    sent: int
    recipients: List[str]
    failed: List[str] = []

class HRDashboard(BaseModel):
    total_jobs: int
    total_applications: int
    total_shortlisted: int
    jobs: List[JobResponse]

class StudentDashboard(BaseModel):
    available_jobs: List[JobResponse]
    resumes: List[ResumeResponse]
    applications: List[ApplicationWithJob]
