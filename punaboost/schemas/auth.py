"""
Pydantic schemas for account endpoints.
"""
from typing import Optional
from pydantic import EmailStr, Field

from punaboost.schemas.base import CamelModel


class LoginRequest(CamelModel):
    """Request schema for user login."""
    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., min_length=1, description="Account password")
    
    class Config:
        json_schema_extra = {
            "example": {
                "email": "hr@acme.example",
                "password": "SecurePass123"
            }
        }


class AuthResponse(CamelModel):
    """Returned by login: the client stores token and email/role."""
    email: str
    token: str
    role: str


class RegistrationResponse(CamelModel):
    message: str
    email: str


class LogoUpdateResponse(CamelModel):
    message: str
    logo_url: str


class AdminCreate(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    phone_number: Optional[str] = None
