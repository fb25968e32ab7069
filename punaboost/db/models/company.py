"""
Company profile owned by a Company account.
"""
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from punaboost.db.base import Base


class Company(Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    company_name = Column(String, nullable=False, default="", index=True)
    description = Column(Text, nullable=False, default="")
    logo_url = Column(String, nullable=True)
    website = Column(String, nullable=False, default="")
    location = Column(String, nullable=False, default="")
    founded_year = Column(Integer, nullable=False, default=0)
    number_of_employees = Column(Integer, nullable=False, default=0)
    linked_in = Column(String, nullable=False, default="")

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)
    industry_id = Column(Integer, ForeignKey("industries.id", ondelete="SET NULL"), nullable=True)
    country_id = Column(Integer, ForeignKey("countries.id"), nullable=True)
    city_id = Column(Integer, ForeignKey("cities.id"), nullable=True)

    # Relationships
    user = relationship("User", back_populates="company_profile")
    industry = relationship("Industry")
    country = relationship("Country")
    city = relationship("City")
    jobs = relationship("Job", back_populates="company", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Company(id={self.id}, company_name='{self.company_name}')>"
