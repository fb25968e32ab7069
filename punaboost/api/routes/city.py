from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from punaboost.core.auth_dependency import get_db, require_role
from punaboost.db.models import City, Role
from punaboost.schemas.base import MessageResponse
from punaboost.schemas.reference import CityCreate, CityDto
from punaboost.services import reference_service
from punaboost.services.mapper import name_of

router = APIRouter(prefix="/city", tags=["Reference Data"])

admin_only = require_role(Role.ADMIN)


def city_to_dto(city: City) -> CityDto:
    return CityDto(id=city.id, name=city.name, country_id=city.country_id, country_name=name_of(city.country))


@router.get("", response_model=List[CityDto])
def list_cities(db: Session = Depends(get_db)):
    return [city_to_dto(city) for city in reference_service.list_cities(db)]


@router.get("/country/{country_id}", response_model=List[CityDto])
def list_cities_by_country(country_id: int, db: Session = Depends(get_db)):
    return [city_to_dto(city) for city in reference_service.list_cities_by_country(db, country_id)]


@router.get("/{city_id}", response_model=CityDto)
def get_city(city_id: int, db: Session = Depends(get_db)):
    return city_to_dto(reference_service.get_city(db, city_id))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CityDto, dependencies=[Depends(admin_only)])
def create_city(data: CityCreate, db: Session = Depends(get_db)):
    return city_to_dto(reference_service.create_city(db, data))


@router.put("/{city_id}", response_model=CityDto, dependencies=[Depends(admin_only)])
def update_city(city_id: int, data: CityCreate, db: Session = Depends(get_db)):
    return city_to_dto(reference_service.update_city(db, city_id, data))


@router.delete("/{city_id}", response_model=MessageResponse, dependencies=[Depends(admin_only)])
def delete_city(city_id: int, db: Session = Depends(get_db)):
    reference_service.delete_city(db, city_id)
    return MessageResponse(message="City deleted successfully")
