"""
Resume text extraction.

Two extractors share one interface. ``CannedTextExtractor`` picks one of
three fixed profile texts from the file name alone and never fails; it is
the default and the test fixture. ``DocumentTextExtractor`` reads the real
text layer of PDF, DOCX and plain-text uploads.
"""
import io
import logging
import os
from typing import Protocol

import PyPDF2
import docx

from portal.core.config import settings
from portal.core.exceptions import TextExtractionError

logger = logging.getLogger(__name__)

FRONTEND_PROFILE_TEXT = (
    "Frontend Developer with 3 years of experience in React, TypeScript, and modern web "
    "development. Proficient in HTML, CSS, JavaScript, and responsive design. Experience "
    "with RESTful APIs and state management libraries like Redux."
)
BACKEND_PROFILE_TEXT = (
    "Backend Engineer with 4 years of experience in Python, Django, and PostgreSQL. Strong "
    "understanding of RESTful API design and implementation. Experienced in cloud platforms "
    "like AWS."
)
GENERIC_PROFILE_TEXT = (
    "Experienced professional with skills in web development, programming, and software "
    "engineering. Proficient in multiple languages and frameworks. Strong problem-solving "
    "abilities and team collaboration."
)

SUPPORTED_EXTENSIONS = {".pdf", ".docx", ".txt"}


class TextExtractor(Protocol):
    def extract(self, file_name: str, content: bytes) -> str:
        ...


class CannedTextExtractor:
    def extract(self, file_name: str, content: bytes = b"") -> str:
        # Substring match is case-sensitive
        if "developer" in file_name or "frontend" in file_name:
            return FRONTEND_PROFILE_TEXT
        if "backend" in file_name or "python" in file_name:
            return BACKEND_PROFILE_TEXT
        return GENERIC_PROFILE_TEXT


class DocumentTextExtractor:
    def extract(self, file_name: str, content: bytes) -> str:
        file_ext = os.path.splitext(file_name)[1].lower()
        if file_ext not in SUPPORTED_EXTENSIONS:
            raise TextExtractionError(
                f"File type {file_ext or '(none)'} not supported. "
                f"Allowed: {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
            )

        try:
            if file_ext == ".pdf":
                reader = PyPDF2.PdfReader(io.BytesIO(content))
                text = "\n".join(page.extract_text() or "" for page in reader.pages)
            elif file_ext == ".docx":
                document = docx.Document(io.BytesIO(content))
                text = "\n".join(p.text for p in document.paragraphs)
            else:
                text = content.decode("utf-8", errors="ignore")
        except Exception as e:
            logger.warning(f"Text extraction failed for {file_name}: {e}")
            raise TextExtractionError(
                f"Could not read text from {file_name}", details={"reason": str(e)}
            ) from e

        return text.strip()


def get_text_extractor() -> TextExtractor:
    if settings.text_extractor == "document":
        return DocumentTextExtractor()
    return CannedTextExtractor()
