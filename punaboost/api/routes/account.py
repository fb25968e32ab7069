"""
Account endpoints: registration, e-mail confirmation, login and company logo.
"""
import logging
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, File, Form, HTTPException, Query, UploadFile, status
from pydantic import EmailStr
from sqlalchemy.orm import Session

from punaboost.core.auth_dependency import get_db, require_role
from punaboost.core.rate_limit import login_rate_limit
from punaboost.db.models import Role, User
from punaboost.schemas.auth import AuthResponse, LoginRequest, LogoUpdateResponse, RegistrationResponse
from punaboost.services import account_service, email_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/account", tags=["Account"])


# ✅ COMPANY REGISTRATION (multipart, optional logo)
@router.post("/register/company", response_model=RegistrationResponse)
def register_company(
    background_tasks: BackgroundTasks,
    email: EmailStr = Form(...),
    password: str = Form(..., min_length=6),
    company_name: str = Form(..., min_length=1, alias="companyName"),
    phone_number: Optional[str] = Form(None, alias="phoneNumber"),
    description: str = Form(""),
    website: str = Form(""),
    location: str = Form(""),
    founded_year: int = Form(0, ge=0, alias="foundedYear"),
    number_of_employees: int = Form(0, ge=0, alias="numberOfEmployees"),
    country_id: Optional[int] = Form(None, alias="countryId"),
    city_id: Optional[int] = Form(None, alias="cityId"),
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
):
    try:
        user = account_service.register_company(
            db,
            email=email,
            password=password,
            company_name=company_name.strip(),
            phone_number=phone_number,
            description=description,
            website=website,
            location=location,
            founded_year=founded_year,
            number_of_employees=number_of_employees,
            country_id=country_id,
            city_id=city_id,
            logo=file,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Company registration failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to register company"
        )

    background_tasks.add_task(email_service.send_confirmation_email, user.email, user.email_confirmation_code)
    return RegistrationResponse(
        message="Company registered successfully. Please check your email for the confirmation code.",
        email=user.email,
    )


# ✅ CANDIDATE REGISTRATION (multipart, required PDF resume)
@router.post("/register/candidate", response_model=RegistrationResponse)
def register_candidate(
    background_tasks: BackgroundTasks,
    email: EmailStr = Form(...),
    password: str = Form(..., min_length=6),
    first_name: str = Form(..., min_length=1, alias="firstName"),
    last_name: str = Form(..., min_length=1, alias="lastName"),
    phone_number: Optional[str] = Form(None, alias="phoneNumber"),
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
):
    try:
        user = account_service.register_candidate(
            db,
            email=email,
            password=password,
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            phone_number=phone_number,
            resume=file,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Candidate registration failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to register candidate"
        )

    background_tasks.add_task(email_service.send_confirmation_email, user.email, user.email_confirmation_code)
    return RegistrationResponse(
        message="Candidate registered successfully. Please check your email for the confirmation code.",
        email=user.email,
    )


# ✅ EMAIL CONFIRMATION (query string, signs the account in)
@router.post("/email-verification", response_model=AuthResponse, dependencies=[Depends(login_rate_limit)])
def verify_email(
    email: Optional[str] = Query(None),
    code: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    return AuthResponse(**account_service.verify_email(db, email, code))


# ✅ LOGIN (JSON body, JWT with email + role)
@router.post("/login", response_model=AuthResponse, dependencies=[Depends(login_rate_limit)])
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    return AuthResponse(**account_service.login(db, credentials.email, credentials.password))


@router.put("/company/logo", response_model=LogoUpdateResponse)
def update_company_logo(
    file: UploadFile = File(...),
    user: User = Depends(require_role(Role.COMPANY)),
    db: Session = Depends(get_db),
):
    try:
        logo_url = account_service.update_company_logo(db, user, file)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Logo update failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update logo"
        )

    return LogoUpdateResponse(message="Logo updated successfully", logo_url=logo_url)
