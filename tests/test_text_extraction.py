import io

import docx
import pytest

from portal.core.exceptions import TextExtractionError
from portal.services.text_extraction import (
    BACKEND_PROFILE_TEXT,
    FRONTEND_PROFILE_TEXT,
    GENERIC_PROFILE_TEXT,
    CannedTextExtractor,
    DocumentTextExtractor,
)

@pytest.mark.parametrize("file_name, expected", [
    ("senior_developer_cv.pdf", FRONTEND_PROFILE_TEXT),
    ("frontend.docx", FRONTEND_PROFILE_TEXT),
    ("backend_resume.pdf", BACKEND_PROFILE_TEXT),
    ("python-cv.txt", BACKEND_PROFILE_TEXT),
    ("jane_doe.pdf", GENERIC_PROFILE_TEXT),
])
def test_canned_extractor_picks_by_file_name(file_name, expected):
    assert CannedTextExtractor().extract(file_name, b"") == expected

def test_canned_extractor_checks_frontend_first():
    assert CannedTextExtractor().extract("python_developer.pdf") == FRONTEND_PROFILE_TEXT

def test_document_extractor_reads_plain_text():
    text = DocumentTextExtractor().extract("cv.txt", b"  Python engineer\nDjango  ")
    assert text == "Python engineer\nDjango"

def test_document_extractor_reads_docx():
    document = docx.Document()
    document.add_paragraph("Data analyst")
    document.add_paragraph("SQL and pandas")
    buffer = io.BytesIO()
    document.save(buffer)

    text = DocumentTextExtractor().extract("cv.docx", buffer.getvalue())
    assert text == "Data analyst\nSQL and pandas"

def test_document_extractor_rejects_unknown_type():
    with pytest.raises(TextExtractionError):
        DocumentTextExtractor().extract("cv.odt", b"whatever")

def test_document_extractor_wraps_parse_errors():
    with pytest.raises(TextExtractionError) as exc_info:
        DocumentTextExtractor().extract("cv.pdf", b"not a pdf")
    assert exc_info.value.status_code == 422
