"""
Test helpers shared by the API tests.
"""
import fitz  # pymupdf

from punaboost.core.security import create_access_token, hash_password
from punaboost.db.models import User

PDF_BYTES = b"%PDF-1.4\n% test resume\n"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


def auth_headers(user: User) -> dict:
    token = create_access_token({"sub": user.email, "role": user.role})
    return {"Authorization": f"Bearer {token}"}


def make_user(db, email: str, role: str, password: str = "testpass123", phone_number: str = None) -> User:
    user = User(
        email=email,
        password_hash=hash_password(password),
        role=role,
        phone_number=phone_number,
        email_confirmed=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def write_pdf(path, text: str = "") -> None:
    """Write a one-page PDF; an empty text leaves the page blank."""
    path.parent.mkdir(parents=True, exist_ok=True)
    doc = fitz.open()
    page = doc.new_page()
    if text:
        page.insert_text((72, 72), text)
    doc.save(str(path))
    doc.close()
