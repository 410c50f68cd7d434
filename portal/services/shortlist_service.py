from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from portal.core.exceptions import EmptyEmailTemplateError
from portal.models.job import Job
from portal.models.shortlisted_candidate import ShortlistedCandidate
from portal.services.base import BaseService
from portal.services.mailer import Mailer

EMAIL_TEMPLATE = (
    "Dear Candidate,\n\n"
    "Congratulations! Your application for the {job_title} position has been shortlisted "
    "for further consideration.\n\n"
    "We were impressed by your qualifications and would like to invite you for an interview. "
    "We'll be in touch shortly with more details.\n\n"
    "Best regards,\n"
    "Recruitment Team"
)


class ShortlistService(BaseService):
    def __init__(self, db: Session, mailer: Optional[Mailer] = None):
        super().__init__(db)
        self.mailer = mailer or Mailer()

    def list_shortlisted_by_job(self, job_id: int) -> List[ShortlistedCandidate]:
        """Shortlisted candidates for a job, best score first."""
        return self.db.query(ShortlistedCandidate).filter(
            ShortlistedCandidate.job_id == job_id
        ).order_by(
            ShortlistedCandidate.similarity_score.desc(),
            ShortlistedCandidate.id,
        ).all()

    @staticmethod
    def default_email_template(job: Job) -> str:
        return EMAIL_TEMPLATE.format(job_title=job.title)

    def send_emails(self, job: Job, template: str) -> Tuple[List[str], List[str]]:
        """
        Mail the template to every shortlisted candidate of a job.

        A delivery failure for one candidate does not stop the others.
        Returns the addresses that were sent to and those that failed.
        """
        if not template or not template.strip():
            raise EmptyEmailTemplateError()

        subject = f"Update regarding your application for {job.title}"
        sent, failed = [], []
        for candidate in self.list_shortlisted_by_job(job.id):
            try:
                self.mailer.send(candidate.email, subject, template)
            except OSError as e:
                # smtplib errors are OSError subclasses
                self.log_warning(f"Shortlist email to {candidate.email} failed: {e}", job_id=job.id)
                failed.append(candidate.email)
                continue
            sent.append(candidate.email)

        self.log_info(
            f"Sent shortlist emails for job {job.id}", job_id=job.id, count=len(sent), failed=len(failed)
        )
        return sent, failed
