"""
Reference data: countries, cities, industries and skills.

Names are trimmed and must be non-empty (enforced by the request schemas);
uniqueness is checked case-insensitively before writing.
"""
import logging
from typing import Iterable, List, Optional

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from punaboost.db.models import City, Country, Industry, Skill
from punaboost.schemas.reference import CityCreate, CountryCreate, NameCreate

logger = logging.getLogger(__name__)


def _not_found(label: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")


def _get(db: Session, model, record_id: int, label: str):
    record = db.query(model).filter(model.id == record_id).first()
    if not record:
        raise _not_found(label)
    return record


def _name_taken(db: Session, model, name: str, exclude_id: Optional[int] = None, **filters) -> bool:
    query = db.query(model).filter(func.lower(model.name) == name.lower())
    for column, value in filters.items():
        query = query.filter(getattr(model, column) == value)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)
    return db.query(query.exists()).scalar()


def _delete(db: Session, record, label: str) -> None:
    record_id = record.id
    try:
        db.delete(record)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{label} is in use and cannot be deleted"
        )
    logger.info(f"{label} deleted: id={record_id}")


# ============================================
# Countries
# ============================================

def list_countries(db: Session) -> List[Country]:
    return db.query(Country).order_by(Country.name).all()


def get_country(db: Session, country_id: int) -> Country:
    return _get(db, Country, country_id, "Country")


def _check_country_code(db: Session, code: str, exclude_id: Optional[int] = None) -> None:
    query = db.query(Country).filter(func.lower(Country.code) == code.lower())
    if exclude_id is not None:
        query = query.filter(Country.id != exclude_id)
    if query.first():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Country with code '{code}' already exists"
        )


def create_country(db: Session, data: CountryCreate) -> Country:
    _check_country_code(db, data.code)
    country = Country(name=data.name, code=data.code.upper())
    db.add(country)
    db.commit()
    db.refresh(country)
    logger.info(f"Country created: country_id={country.id}, code={country.code}")
    return country


def update_country(db: Session, country_id: int, data: CountryCreate) -> Country:
    country = get_country(db, country_id)
    _check_country_code(db, data.code, exclude_id=country.id)
    country.name = data.name
    country.code = data.code.upper()
    db.commit()
    db.refresh(country)
    logger.info(f"Country updated: country_id={country.id}")
    return country


def delete_country(db: Session, country_id: int) -> None:
    _delete(db, get_country(db, country_id), "Country")


# ============================================
# Cities
# ============================================

def list_cities(db: Session) -> List[City]:
    return db.query(City).order_by(City.name).all()


def list_cities_by_country(db: Session, country_id: int) -> List[City]:
    get_country(db, country_id)
    return db.query(City).filter(City.country_id == country_id).order_by(City.name).all()


def get_city(db: Session, city_id: int) -> City:
    return _get(db, City, city_id, "City")


def _check_city(db: Session, data: CityCreate, exclude_id: Optional[int] = None) -> None:
    get_country(db, data.country_id)
    if _name_taken(db, City, data.name, exclude_id=exclude_id, country_id=data.country_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"City '{data.name}' already exists in this country"
        )


def create_city(db: Session, data: CityCreate) -> City:
    _check_city(db, data)
    city = City(name=data.name, country_id=data.country_id)
    db.add(city)
    db.commit()
    db.refresh(city)
    logger.info(f"City created: city_id={city.id}, country_id={city.country_id}")
    return city


def update_city(db: Session, city_id: int, data: CityCreate) -> City:
    city = get_city(db, city_id)
    _check_city(db, data, exclude_id=city.id)
    city.name = data.name
    city.country_id = data.country_id
    db.commit()
    db.refresh(city)
    logger.info(f"City updated: city_id={city.id}")
    return city


def delete_city(db: Session, city_id: int) -> None:
    _delete(db, get_city(db, city_id), "City")


def validate_location(db: Session, country_id: Optional[int], city_id: Optional[int]) -> None:
    """Country and city must exist, and the city must lie in the country when both are set."""
    country = get_country(db, country_id) if country_id is not None else None
    if city_id is None:
        return
    city = get_city(db, city_id)
    if country is not None and city.country_id != country.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="City does not belong to the selected country"
        )


# ============================================
# Industries and skills
# ============================================

def _create_named(db: Session, model, data: NameCreate, label: str):
    if _name_taken(db, model, data.name):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{label} '{data.name}' already exists"
        )
    record = model(name=data.name)
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info(f"{label} created: id={record.id}")
    return record


def _update_named(db: Session, record, data: NameCreate, label: str):
    if _name_taken(db, type(record), data.name, exclude_id=record.id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{label} '{data.name}' already exists"
        )
    record.name = data.name
    db.commit()
    db.refresh(record)
    logger.info(f"{label} updated: id={record.id}")
    return record


def list_industries(db: Session) -> List[Industry]:
    return db.query(Industry).order_by(Industry.name).all()


def get_industry(db: Session, industry_id: int) -> Industry:
    return _get(db, Industry, industry_id, "Industry")


def create_industry(db: Session, data: NameCreate) -> Industry:
    return _create_named(db, Industry, data, "Industry")


def update_industry(db: Session, industry_id: int, data: NameCreate) -> Industry:
    return _update_named(db, get_industry(db, industry_id), data, "Industry")


def delete_industry(db: Session, industry_id: int) -> None:
    _delete(db, get_industry(db, industry_id), "Industry")


def list_skills(db: Session) -> List[Skill]:
    return db.query(Skill).order_by(Skill.name).all()


def get_skill(db: Session, skill_id: int) -> Skill:
    return _get(db, Skill, skill_id, "Skill")


def create_skill(db: Session, data: NameCreate) -> Skill:
    return _create_named(db, Skill, data, "Skill")


def update_skill(db: Session, skill_id: int, data: NameCreate) -> Skill:
    return _update_named(db, get_skill(db, skill_id), data, "Skill")


def delete_skill(db: Session, skill_id: int) -> None:
    _delete(db, get_skill(db, skill_id), "Skill")


def existing_skill_ids(db: Session, skill_ids: Iterable[int]) -> List[int]:
    """Subset of skill_ids that exist, de-duplicated, in request order."""
    wanted = list(dict.fromkeys(skill_ids or []))
    if not wanted:
        return []
    found = {row.id for row in db.query(Skill.id).filter(Skill.id.in_(wanted)).all()}
    return [skill_id for skill_id in wanted if skill_id in found]
