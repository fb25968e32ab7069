from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from punaboost.core.auth_dependency import get_db, require_role
from punaboost.db.models import Role
from punaboost.schemas.base import MessageResponse
from punaboost.schemas.reference import CountryCreate, CountryDto
from punaboost.services import reference_service

router = APIRouter(prefix="/country", tags=["Reference Data"])

admin_only = require_role(Role.ADMIN)


@router.get("", response_model=List[CountryDto])
def list_countries(db: Session = Depends(get_db)):
    return reference_service.list_countries(db)


@router.get("/{country_id}", response_model=CountryDto)
def get_country(country_id: int, db: Session = Depends(get_db)):
    return reference_service.get_country(db, country_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CountryDto, dependencies=[Depends(admin_only)])
def create_country(data: CountryCreate, db: Session = Depends(get_db)):
    return reference_service.create_country(db, data)


@router.put("/{country_id}", response_model=CountryDto, dependencies=[Depends(admin_only)])
def update_country(country_id: int, data: CountryCreate, db: Session = Depends(get_db)):
    return reference_service.update_country(db, country_id, data)


@router.delete("/{country_id}", response_model=MessageResponse, dependencies=[Depends(admin_only)])
def delete_country(country_id: int, db: Session = Depends(get_db)):
    reference_service.delete_country(db, country_id)
    return MessageResponse(message="Country deleted successfully")
