"""
Candidate resume library.

At most one resume per candidate is the default; marking one as default
clears the flag on the others.
"""
import logging
from datetime import datetime
from typing import List, Optional

from fastapi import HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from punaboost.db.models import JobApplication, Resume, User
from punaboost.services import file_service
from punaboost.services.candidate_service import get_candidate_for_user

logger = logging.getLogger(__name__)


def list_resumes(db: Session, user: User) -> List[Resume]:
    """Default resume first, then newest first."""
    candidate = get_candidate_for_user(user)
    return (
        db.query(Resume)
        .filter(Resume.candidate_id == candidate.id)
        .order_by(Resume.is_default.desc(), Resume.created_at.desc(), Resume.id.desc())
        .all()
    )


def get_resume(db: Session, user: User, resume_id: int) -> Resume:
    candidate = get_candidate_for_user(user)
    resume = (
        db.query(Resume)
        .filter(Resume.id == resume_id, Resume.candidate_id == candidate.id)
        .first()
    )
    if not resume:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resume not found")
    return resume


def _clear_default(db: Session, candidate_id: int, keep_id: Optional[int] = None) -> None:
    query = db.query(Resume).filter(Resume.candidate_id == candidate_id, Resume.is_default.is_(True))
    if keep_id is not None:
        query = query.filter(Resume.id != keep_id)
    for other in query.all():
        other.is_default = False


def create_resume(
    db: Session,
    user: User,
    file: Optional[UploadFile],
    name: Optional[str] = None,
    is_default: bool = False,
) -> Resume:
    if file is None or not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="File is required")

    candidate = get_candidate_for_user(user)
    file_url = file_service.save_resume(file)

    if is_default:
        _clear_default(db, candidate.id)

    resume = Resume(
        file_name=file.filename,
        file_url=file_url,
        name=(name or "").strip() or file.filename,
        candidate_id=candidate.id,
        is_default=is_default,
        created_at=datetime.utcnow(),
    )
    try:
        db.add(resume)
        db.commit()
        db.refresh(resume)
    except Exception:
        db.rollback()
        file_service.delete_resume(file_url)
        raise

    logger.info(f"Resume created: resume_id={resume.id}, candidate_id={candidate.id}, default={is_default}")
    return resume


def delete_resume(db: Session, user: User, resume_id: int) -> None:
    """Delete a resume; applications that used it keep existing without one."""
    resume = get_resume(db, user, resume_id)
    file_url = resume.file_url

    (
        db.query(JobApplication)
        .filter(JobApplication.resume_id == resume.id)
        .update({JobApplication.resume_id: None}, synchronize_session="fetch")
    )
    db.delete(resume)
    db.commit()
    file_service.delete_resume(file_url)

    logger.info(f"Resume deleted: resume_id={resume_id}")


def set_default(db: Session, user: User, resume_id: int) -> Resume:
    resume = get_resume(db, user, resume_id)
    _clear_default(db, resume.candidate_id, keep_id=resume.id)
    resume.is_default = True
    db.commit()
    db.refresh(resume)

    logger.info(f"Default resume set: resume_id={resume.id}, candidate_id={resume.candidate_id}")
    return resume
