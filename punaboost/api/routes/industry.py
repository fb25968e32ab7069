from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from punaboost.core.auth_dependency import get_db, require_role
from punaboost.db.models import Role
from punaboost.schemas.base import MessageResponse
from punaboost.schemas.reference import IndustryDto, NameCreate
from punaboost.services import reference_service

router = APIRouter(prefix="/industry", tags=["Reference Data"])

admin_only = require_role(Role.ADMIN)


@router.get("", response_model=List[IndustryDto])
def list_industries(db: Session = Depends(get_db)):
    return reference_service.list_industries(db)


@router.get("/{industry_id}", response_model=IndustryDto)
def get_industry(industry_id: int, db: Session = Depends(get_db)):
    return reference_service.get_industry(db, industry_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=IndustryDto, dependencies=[Depends(admin_only)])
def create_industry(data: NameCreate, db: Session = Depends(get_db)):
    return reference_service.create_industry(db, data)


@router.put("/{industry_id}", response_model=IndustryDto, dependencies=[Depends(admin_only)])
def update_industry(industry_id: int, data: NameCreate, db: Session = Depends(get_db)):
    return reference_service.update_industry(db, industry_id, data)


@router.delete("/{industry_id}", response_model=MessageResponse, dependencies=[Depends(admin_only)])
def delete_industry(industry_id: int, db: Session = Depends(get_db)):
    reference_service.delete_industry(db, industry_id)
    return MessageResponse(message="Industry deleted successfully")
