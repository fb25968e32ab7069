"""
Plain-text extraction from stored resumes.
"""
import logging
import os
from pathlib import Path
from typing import Union

import fitz  # pymupdf

logger = logging.getLogger(__name__)


class ResumeParseError(Exception):
    """The resume could not be turned into text."""


def _pdf_text(file_path: Path) -> str:
    try:
        text = ""
        with fitz.open(file_path) as doc:
            for page in doc:
                text += page.get_text() + "\n"
        return text
    except Exception as e:
        logger.error(f"Error extracting text from PDF: {e}", exc_info=True)
        raise ResumeParseError("Could not extract text from PDF. Please ensure the file is a valid PDF.") from e


def parse_resume(file_path: Union[str, Path]) -> str:
    file_path = Path(file_path)
    if not file_path.exists():
        raise ResumeParseError("Resume file not found")

    extension = os.path.splitext(file_path.name)[1].lower()
    if extension == ".pdf":
        return _pdf_text(file_path)
    if extension == ".txt":
        return file_path.read_text(encoding="utf-8", errors="replace")

    raise ResumeParseError(f"File type {extension} is not supported. Please use PDF or TXT format.")
