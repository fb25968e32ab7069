import logging
from datetime import date, datetime, time
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from punaboost.db.models import Company, Job, User
from punaboost.schemas.company import CompanyUpdate
from punaboost.services import reference_service
from punaboost.services.mapper import apply_company_update

logger = logging.getLogger(__name__)


def list_companies(db: Session) -> List[Company]:
    return db.query(Company).order_by(Company.company_name).all()


def get_company(db: Session, company_id: int) -> Company:
    company = db.query(Company).filter(Company.id == company_id).first()
    if not company:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Company not found")
    return company


def get_company_for_user(user: User) -> Company:
    """Company profile of the authenticated Company account."""
    company = user.company_profile
    if company is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Company not found for this user")
    return company


def update_company(db: Session, user: User, company_id: int, data: CompanyUpdate) -> Company:
    company = get_company(db, company_id)
    if company.user_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only update your own company"
        )

    reference_service.validate_location(db, data.country_id, data.city_id)
    if data.industry_id is not None:
        reference_service.get_industry(db, data.industry_id)

    apply_company_update(company, data)
    db.commit()
    db.refresh(company)

    logger.info(f"Company updated: company_id={company.id}, user_id={user.id}")
    return company


def list_company_jobs(db: Session, company_id: int, today: Optional[date] = None) -> List[Job]:
    """
    Jobs of a company that are still open on the given calendar day, newest first.

    A job expiring at any time today stays listed until the day is over.
    """
    get_company(db, company_id)
    today = today or datetime.utcnow().date()
    start_of_day = datetime.combine(today, time.min)
    return (
        db.query(Job)
        .filter(Job.company_id == company_id, Job.expires_at >= start_of_day)
        .order_by(Job.posted_at.desc())
        .all()
    )
