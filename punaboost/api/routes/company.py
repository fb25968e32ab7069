import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from punaboost.core.auth_dependency import get_db, require_role
from punaboost.db.models import Role, User
from punaboost.schemas.company import CompanyDto, CompanyUpdate
from punaboost.schemas.job import JobDto
from punaboost.services import company_service
from punaboost.services.mapper import company_to_dto, job_to_dto

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/company", tags=["Company"])


@router.get("", response_model=List[CompanyDto])
def list_companies(db: Session = Depends(get_db)):
    return [company_to_dto(company) for company in company_service.list_companies(db)]


# Registered before /{company_id} so the literal path wins
@router.get("/my-company", response_model=CompanyDto)
def get_my_company(user: User = Depends(require_role(Role.COMPANY))):
    return company_to_dto(company_service.get_company_for_user(user))


@router.get("/{company_id}", response_model=CompanyDto)
def get_company(company_id: int, db: Session = Depends(get_db)):
    return company_to_dto(company_service.get_company(db, company_id))


@router.put("/{company_id}", response_model=CompanyDto)
def update_company(
    company_id: int,
    data: CompanyUpdate,
    user: User = Depends(require_role(Role.COMPANY)),
    db: Session = Depends(get_db),
):
    try:
        company = company_service.update_company(db, user, company_id, data)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update company {company_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update company"
        )
    return company_to_dto(company)


@router.get("/{company_id}/jobs", response_model=List[JobDto])
def list_company_jobs(company_id: int, db: Session = Depends(get_db)):
    """Public listing of a company's open (non-expired) jobs."""
    jobs = company_service.list_company_jobs(db, company_id)
    return [job_to_dto(job, include_applications=False) for job in jobs]
