"""
Account registration, e-mail confirmation and login.

Company and Candidate accounts are created together with their profile row;
a candidate's first resume becomes the default resume. New accounts get a
six digit confirmation code and cannot log in until it has been entered.
"""
import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional

from fastapi import HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from punaboost.core import config
from punaboost.core.security import create_access_token, hash_password, verify_password
from punaboost.db.models import Candidate, Company, Resume, Role, User
from punaboost.services import file_service

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials. Please check your email and password."
EMAIL_NOT_CONFIRMED = "Please verify your email before logging in."
VERIFICATION_FAILED = "Verification failed. The email or code may be incorrect."


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def _ensure_email_available(db: Session, email: str) -> None:
    if get_user_by_email(db, email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already exists.")


def generate_confirmation_code() -> str:
    return f"{secrets.randbelow(10 ** 6):06d}"


def _new_user(email: str, password: str, phone_number: Optional[str], role: str) -> User:
    return User(
        email=normalize_email(email),
        password_hash=hash_password(password),
        phone_number=phone_number,
        role=role,
    )


def _issue_confirmation_code(user: User) -> None:
    user.email_confirmed = False
    user.email_confirmation_code = generate_confirmation_code()
    user.email_confirmation_expires_at = datetime.utcnow() + timedelta(hours=config.EMAIL_CONFIRMATION_TTL_HOURS)


def register_company(
    db: Session,
    *,
    email: str,
    password: str,
    company_name: str,
    phone_number: Optional[str] = None,
    description: str = "",
    website: str = "",
    location: str = "",
    founded_year: int = 0,
    number_of_employees: int = 0,
    country_id: Optional[int] = None,
    city_id: Optional[int] = None,
    logo: Optional[UploadFile] = None,
) -> User:
    _ensure_email_available(db, email)

    logo_url = file_service.save_company_logo(logo) if logo is not None and logo.filename else None

    user = _new_user(email, password, phone_number, Role.COMPANY)
    _issue_confirmation_code(user)
    user.company_profile = Company(
        company_name=company_name,
        description=description,
        logo_url=logo_url,
        website=website,
        location=location,
        founded_year=founded_year,
        number_of_employees=number_of_employees,
        country_id=country_id,
        city_id=city_id,
    )

    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except Exception:
        db.rollback()
        file_service.delete_company_logo(logo_url)
        raise

    logger.info(f"Company registered: user_id={user.id}, company_id={user.company_profile.id}")
    return user


def register_candidate(
    db: Session,
    *,
    email: str,
    password: str,
    first_name: str,
    last_name: str,
    resume: UploadFile,
    phone_number: Optional[str] = None,
) -> User:
    if resume is None or not resume.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Resume file is required.")

    _ensure_email_available(db, email)

    file_url = file_service.save_resume(resume)

    user = _new_user(email, password, phone_number, Role.CANDIDATE)
    _issue_confirmation_code(user)
    candidate = Candidate(first_name=first_name, last_name=last_name)
    candidate.resumes.append(Resume(
        file_name=resume.filename,
        file_url=file_url,
        name=resume.filename,
        is_default=True,
        created_at=datetime.utcnow(),
    ))
    user.candidate_profile = candidate

    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except Exception:
        db.rollback()
        file_service.delete_resume(file_url)
        raise

    logger.info(f"Candidate registered: user_id={user.id}, candidate_id={candidate.id}")
    return user


def create_admin(db: Session, email: str, password: str, phone_number: Optional[str] = None) -> User:
    _ensure_email_available(db, email)
    user = _new_user(email, password, phone_number, Role.ADMIN)
    user.email_confirmed = True
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"Admin created: user_id={user.id}")
    return user


def _auth_payload(user: User) -> dict:
    token = create_access_token({"sub": user.email, "role": user.role})
    return {"email": user.email, "token": token, "role": user.role}


def verify_email(db: Session, email: Optional[str], code: Optional[str]) -> dict:
    """
    Confirm an account with its mailed code and sign it in.

    Returns {email, token, role}, the same shape as login. A wrong or expired
    code fails the same way so callers cannot tell the two apart.
    """
    if not email or not code:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid payload")

    user = get_user_by_email(db, email)
    if not user:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid email")

    # Codes are single use: a confirmed account has none left to match
    expected = user.email_confirmation_code
    expired = (
        user.email_confirmation_expires_at is None
        or user.email_confirmation_expires_at < datetime.utcnow()
    )
    if not expected or expired or not secrets.compare_digest(expected, code.strip()):
        logger.warning(f"Email verification failed: user_id={user.id}, expired={expired}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=VERIFICATION_FAILED)

    user.email_confirmed = True
    user.email_confirmation_code = None
    user.email_confirmation_expires_at = None
    db.commit()
    logger.info(f"Email confirmed: user_id={user.id}")

    return _auth_payload(user)


def login(db: Session, email: str, password: str) -> dict:
    """Check credentials and issue a token. Returns {email, token, role}."""
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        logger.warning("Login failed: invalid credentials")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    if not user.email_confirmed:
        logger.info(f"Login refused, email not confirmed: user_id={user.id}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EMAIL_NOT_CONFIRMED)

    logger.info(f"Login succeeded: user_id={user.id}, role={user.role}")
    return _auth_payload(user)


def update_company_logo(db: Session, user: User, logo: UploadFile) -> str:
    company = user.company_profile
    if company is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Company not found")

    new_url = file_service.save_company_logo(logo)
    old_url = company.logo_url
    company.logo_url = new_url
    db.commit()
    file_service.delete_company_logo(old_url)

    logger.info(f"Company logo updated: company_id={company.id}")
    return new_url
