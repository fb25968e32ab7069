from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from punaboost.db.base import Base


class Country(Base):
    __tablename__ = "countries"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    code = Column(String(10), nullable=False, unique=True, index=True)

    cities = relationship("City", back_populates="country", cascade="all, delete-orphan")
