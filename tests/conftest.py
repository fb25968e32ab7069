"""
Shared fixtures: in-memory database, API client and account factories.
"""
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from punaboost.core import config
from punaboost.core.auth_dependency import get_db
from punaboost.core.rate_limit import rate_limit_store
from punaboost.db.base import Base
from punaboost.db.init_db import seed_industries
from punaboost.db.models import (
    Candidate,
    City,
    Company,
    Country,
    Industry,
    Job,
    Resume,
    Role,
    Skill,
    User,
)
from punaboost.main import app
from tests.helpers import make_user

# Setup in-memory SQLite database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    """Override get_db dependency for testing."""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function", autouse=True)
def setup_db():
    """Create and drop tables for each test."""
    Base.metadata.create_all(bind=test_engine)
    session = TestSessionLocal()
    seed_industries(session)
    session.close()
    rate_limit_store.clear()
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "UPLOAD_DIR", str(tmp_path / "uploads"))
    return tmp_path / "uploads"


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def admin_user(db):
    return make_user(db, "admin@punaboost.al", Role.ADMIN)


@pytest.fixture
def location(db):
    """Albania with Tirana and Durrës, plus Kosovo with Prishtina."""
    albania = Country(name="Albania", code="AL")
    kosovo = Country(name="Kosovo", code="XK")
    db.add_all([albania, kosovo])
    db.commit()
    tirana = City(name="Tirana", country_id=albania.id)
    durres = City(name="Durrës", country_id=albania.id)
    prishtina = City(name="Prishtina", country_id=kosovo.id)
    db.add_all([tirana, durres, prishtina])
    db.commit()
    return {"albania": albania, "kosovo": kosovo, "tirana": tirana, "durres": durres, "prishtina": prishtina}


@pytest.fixture
def industry(db):
    return db.query(Industry).filter(Industry.name == "Banka").first()


@pytest.fixture
def skills(db):
    python = Skill(name="Python")
    sql = Skill(name="SQL")
    db.add_all([python, sql])
    db.commit()
    return {"python": python, "sql": sql}


@pytest.fixture
def company_user(db, location, industry):
    user = make_user(db, "hr@acme.al", Role.COMPANY, phone_number="+355691111111")
    db.add(Company(
        user_id=user.id,
        company_name="Acme Shpk",
        description="Software house",
        website="https://acme.al",
        location="Tirana",
        founded_year=2010,
        number_of_employees=50,
        industry_id=industry.id,
        country_id=location["albania"].id,
        city_id=location["tirana"].id,
    ))
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def other_company_user(db):
    user = make_user(db, "jobs@globex.al", Role.COMPANY)
    db.add(Company(user_id=user.id, company_name="Globex"))
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def candidate_user(db):
    user = make_user(db, "ana.hoxha@mail.al", Role.CANDIDATE, phone_number="+355692222222")
    candidate = Candidate(user_id=user.id, first_name="Ana", last_name="Hoxha")
    db.add(candidate)
    db.commit()
    db.add(Resume(
        candidate_id=candidate.id,
        file_name="ana.pdf",
        file_url="/uploads/resumes/ana.pdf",
        name="Main CV",
        is_default=True,
    ))
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def make_job(db, location, industry):
    def _make_job(company_user: User, title: str = "Backend Developer", expires_in_days: int = 30, **fields):
        job = Job(
            title=title,
            description="Build APIs",
            location="Tirana",
            salary_from=1000,
            salary_to=2000,
            is_remote=False,
            company_id=company_user.company_profile.id,
            industry_id=industry.id,
            country_id=location["albania"].id,
            city_id=location["tirana"].id,
            posted_at=fields.pop("posted_at", datetime.utcnow()),
            expires_at=fields.pop("expires_at", datetime.utcnow() + timedelta(days=expires_in_days)),
            **fields,
        )
        db.add(job)
        db.commit()
        db.refresh(job)
        return job

    return _make_job
