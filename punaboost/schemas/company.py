"""
Pydantic schemas for company endpoints.
"""
from typing import Optional
from pydantic import Field

from punaboost.schemas.base import CamelModel


class CompanyDto(CamelModel):
    """Company projection with related names flattened."""
    id: int
    company_name: str
    description: Optional[str] = None
    logo_url: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    founded_year: int = 0
    number_of_employees: int = 0
    industry_id: Optional[int] = None
    industry_name: Optional[str] = None
    linked_in: Optional[str] = None
    country_id: Optional[int] = None
    country_name: Optional[str] = None
    city_id: Optional[int] = None
    city_name: Optional[str] = None


class CompanyUpdate(CamelModel):
    company_name: str = Field("", max_length=200)
    description: str = ""
    website: str = ""
    location: str = ""
    founded_year: int = Field(0, ge=0)
    number_of_employees: int = Field(0, ge=0)
    industry_id: Optional[int] = None
    linked_in: str = ""
    country_id: Optional[int] = None
    city_id: Optional[int] = None
