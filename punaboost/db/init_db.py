"""
Table creation and reference-data seeding for fresh databases.
"""
import logging

from sqlalchemy.orm import Session

from punaboost.db.session import engine, SessionLocal
from punaboost.db.base import Base
from punaboost.db.models import Industry, DEFAULT_INDUSTRIES

logger = logging.getLogger(__name__)


def seed_industries(db: Session) -> int:
    """Insert the default industries when the table is empty. Returns the number inserted."""
    if db.query(Industry).count() > 0:
        return 0
    db.add_all([Industry(name=name) for name in DEFAULT_INDUSTRIES])
    db.commit()
    logger.info(f"Seeded {len(DEFAULT_INDUSTRIES)} default industries")
    return len(DEFAULT_INDUSTRIES)


def init_db(bind=None):
    """Create all tables on the given engine (defaults to the application engine) and seed reference data."""
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    db = SessionLocal(bind=bind)
    try:
        seed_industries(db)
    finally:
        db.close()
