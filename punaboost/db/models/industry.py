from sqlalchemy import Column, Integer, String
from punaboost.db.base import Base

DEFAULT_INDUSTRIES = [
    "Administratë",
    "Teknologji e Informacionit",
    "Burime Njerëzore",
    "Ekonomi, Financë, Kontabilitet",
    "Banka",
]


class Industry(Base):
    __tablename__ = "industries"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, unique=True)
