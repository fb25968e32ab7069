"""
Create the administrator account.
Run: python -m scripts.create_admin admin@punaboost.al 'StrongPass123' [--phone +355...]

The password may also come from the ADMIN_PASSWORD environment variable.
"""
import argparse
import logging
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi import HTTPException
from pydantic import ValidationError

from punaboost.db.init_db import init_db
from punaboost.db.session import SessionLocal
from punaboost.schemas.auth import AdminCreate
from punaboost.services.account_service import create_admin

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_admin_account(email: str, password: str, phone_number: str = None) -> bool:
    try:
        data = AdminCreate(email=email, password=password, phone_number=phone_number)
    except ValidationError as e:
        logger.error(f"Invalid admin details: {e}")
        return False

    init_db()
    db = SessionLocal()
    try:
        user = create_admin(db, data.email, data.password, data.phone_number)
        logger.info(f"Admin account ready: {user.email} (ID: {user.id})")
        return True
    except HTTPException as e:
        logger.error(f"Cannot create admin {email}: {e.detail}")
        return False
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating admin: {e}", exc_info=True)
        return False
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the PunaBoost administrator account")
    parser.add_argument("email")
    parser.add_argument("password", nargs="?", default=os.getenv("ADMIN_PASSWORD"))
    parser.add_argument("--phone", default=None)
    args = parser.parse_args()

    if not args.password:
        parser.error("password is required (argument or ADMIN_PASSWORD)")

    if create_admin_account(args.email, args.password, args.phone):
        print(f"\n[SUCCESS] Admin {args.email} created")
    else:
        print(f"\n[ERROR] Failed to create admin {args.email}")
        sys.exit(1)
