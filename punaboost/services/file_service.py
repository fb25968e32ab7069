"""
Local disk storage for resumes and company logos.

Files are stored under UPLOAD_DIR and served by the API under /uploads;
callers only keep the returned URL string.
"""
import logging
import os
import uuid
from pathlib import Path
from typing import Iterable, Optional

from fastapi import HTTPException, UploadFile, status

from punaboost.core import config

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"
RESUME_FOLDER = "resumes"
LOGO_FOLDER = "logos"

RESUME_MIME_TYPES = ("application/pdf",)
RESUME_EXTENSIONS = (".pdf",)
LOGO_MIME_TYPES = (
    "image/png",
    "image/jpeg",
    "image/jpg",
    "image/webp",
)


def _folder(name: str) -> Path:
    folder = Path(config.UPLOAD_DIR) / name
    folder.mkdir(parents=True, exist_ok=True)
    return folder


def _save(file: UploadFile, folder_name: str, allowed_mime_types: Iterable[str]) -> str:
    if file.content_type not in allowed_mime_types:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid file type")

    content = file.file.read()
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="File is empty")
    if len(content) > config.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="File is too large")

    extension = os.path.splitext(file.filename or "")[1].lower()
    stored_name = f"{uuid.uuid4().hex}{extension}"
    path = _folder(folder_name) / stored_name
    path.write_bytes(content)

    logger.info(f"File stored: folder={folder_name}, name={stored_name}, bytes={len(content)}")
    return f"{UPLOAD_URL_PREFIX}/{folder_name}/{stored_name}"


def _delete(url: Optional[str], folder_name: str) -> None:
    if not url:
        return
    path = _folder(folder_name) / os.path.basename(url)
    if path.exists():
        path.unlink()
        logger.info(f"File deleted: folder={folder_name}, name={path.name}")


def save_resume(file: UploadFile) -> str:
    """Store a PDF resume and return its URL. Only PDFs are accepted."""
    extension = os.path.splitext(file.filename or "")[1].lower()
    if file.content_type not in RESUME_MIME_TYPES or extension not in RESUME_EXTENSIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF files are allowed for resumes."
        )
    return _save(file, RESUME_FOLDER, RESUME_MIME_TYPES)


def save_company_logo(file: UploadFile) -> str:
    return _save(file, LOGO_FOLDER, LOGO_MIME_TYPES)


def delete_resume(url: Optional[str]) -> None:
    _delete(url, RESUME_FOLDER)


def delete_company_logo(url: Optional[str]) -> None:
    _delete(url, LOGO_FOLDER)


def resume_path(url: str) -> Path:
    """Location on disk of a stored resume URL."""
    return _folder(RESUME_FOLDER) / os.path.basename(url)
