import os
import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from portal.core.config import settings
from portal.core.exceptions import AccessDeniedError, NotAuthenticatedError, ResumeNotFoundError
from portal.models.resume import Resume
from portal.models.user import User
from portal.services.base import BaseService
from portal.services.text_extraction import TextExtractor, get_text_extractor


class ResumeService(BaseService):
    def __init__(self, db: Session, extractor: Optional[TextExtractor] = None, upload_dir: Optional[str] = None):
        super().__init__(db)
        self.extractor = extractor or get_text_extractor()
        self.upload_dir = upload_dir or settings.upload_dir

    def upload_resume(self, user: Optional[User], file_name: str, content: bytes) -> Resume:
        if user is None:
            raise NotAuthenticatedError("User must be logged in to upload a resume")
        if not user.is_student:
            raise AccessDeniedError("Only students can upload resumes")

        # Extract first so a bad file leaves nothing behind
        text = self.extractor.extract(file_name, content)
        stored_path = self._store_file(user.id, file_name, content)

        resume = Resume(
            file_name=file_name,
            file_url="",
            storage_path=stored_path,
            text=text,
            user_id=user.id,
        )
        self.db.add(resume)
        try:
            self.db.flush()
            resume.file_url = f"/api/resumes/{resume.id}/file"
            self.db.commit()
        except Exception:
            self.db.rollback()
            os.remove(stored_path)
            raise
        self.db.refresh(resume)
        self.log_info(f"Resume {resume.id} uploaded", user_id=user.id, chars=len(text))
        return resume

    def get_resume(self, resume_id: int) -> Resume:
        resume = self.db.get(Resume, resume_id)
        if not resume:
            raise ResumeNotFoundError()
        return resume

    def list_resumes_by_user(self, user_id: int) -> List[Resume]:
        return self.db.query(Resume).filter(Resume.user_id == user_id).order_by(Resume.id).all()

    def stored_path(self, resume: Resume) -> str:
        """Locate the uploaded file on disk for download."""
        if not resume.storage_path or not os.path.isfile(resume.storage_path):
            raise ResumeNotFoundError("Resume file not found")
        return resume.storage_path

    def _store_file(self, user_id: int, file_name: str, content: bytes) -> str:
        user_dir = os.path.join(self.upload_dir, str(user_id))
        os.makedirs(user_dir, exist_ok=True)
        path = os.path.join(user_dir, f"{uuid.uuid4().hex}_{os.path.basename(file_name)}")
        with open(path, "wb") as f:
            f.write(content)
        return path
