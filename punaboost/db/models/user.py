from sqlalchemy import Boolean, Column, Integer, String, DateTime, false
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from punaboost.db.base import Base


class Role:
    ADMIN = "Admin"
    CANDIDATE = "Candidate"
    COMPANY = "Company"

    ALL = (ADMIN, CANDIDATE, COMPANY)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    phone_number = Column(String, nullable=True)
    role = Column(String, nullable=False, index=True)  # Admin | Candidate | Company
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Login is refused until the mailed confirmation code has been entered
    email_confirmed = Column(Boolean, nullable=False, default=False, server_default=false())
    email_confirmation_code = Column(String, nullable=True)
    email_confirmation_expires_at = Column(DateTime, nullable=True)

    company_profile = relationship("Company", back_populates="user", uselist=False)
    candidate_profile = relationship("Candidate", back_populates="user", uselist=False)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
