"""
Pydantic schemas for reference data: countries, cities, industries and skills.
"""
from typing import Optional
from pydantic import Field, field_validator

from punaboost.schemas.base import CamelModel


def _strip_name(value: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError("Name cannot be empty")
    return value


class CountryCreate(CamelModel):
    name: str = Field(..., max_length=100)
    code: str = Field(..., max_length=10)

    @field_validator("name", "code")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _strip_name(v)


class CountryDto(CamelModel):
    id: int
    name: str
    code: str


class CityCreate(CamelModel):
    name: str = Field(..., max_length=100)
    country_id: int

    @field_validator("name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _strip_name(v)


class CityDto(CamelModel):
    id: int
    name: str
    country_id: int
    country_name: Optional[str] = None


class NameCreate(CamelModel):
    """Body for industries and skills, which only carry a name."""
    name: str = Field(..., max_length=100)

    @field_validator("name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _strip_name(v)


class IndustryDto(CamelModel):
    id: int
    name: str


class SkillDto(CamelModel):
    id: int = 0
    name: str = ""
