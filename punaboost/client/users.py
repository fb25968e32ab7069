"""
Display helpers for the signed-in user stored by the client.
"""
import logging
import re
from typing import Any, Dict, Optional

from punaboost.client.errors import ApiError

logger = logging.getLogger(__name__)


def enrich_user_with_name(user: Dict[str, Any], services) -> Dict[str, Any]:
    """
    Add display-name fields to a stored user.

    Candidates get firstName/lastName/name from their profile, companies get
    companyName/name. Admins are returned untouched. Lookup failures are
    logged and the user is returned as it was.
    """
    role = user.get("role")
    if role == "Admin":
        return user

    try:
        if role == "Candidate":
            candidate = services.candidates.get_my_profile()
            if candidate:
                return {
                    **user,
                    "firstName": candidate.get("firstName"),
                    "lastName": candidate.get("lastName"),
                    "name": f"{candidate.get('firstName')} {candidate.get('lastName')}",
                }
        elif role == "Company":
            company = services.companies.get_my_company()
            if company:
                return {
                    **user,
                    "companyName": company.get("companyName"),
                    "name": company.get("companyName"),
                }
    except ApiError as e:
        logger.error(f"Failed to enrich user with name: {e}")

    return user


def _initials_from_words(text: Optional[str], pattern: str = r"\s+", allow_single: bool = True) -> str:
    parts = [part for part in re.split(pattern, (text or "").strip()) if part]
    if len(parts) >= 2:
        return (parts[0][0] + parts[-1][0]).upper()
    if len(parts) == 1 and len(parts[0]) >= 2 and allow_single:
        return parts[0][:2].upper()
    return ""


def get_initials(user: Optional[Dict[str, Any]]) -> str:
    """Two-letter avatar text; falls back to the first letter of the email, then "?"."""
    if not user:
        return "?"

    first_name = (user.get("firstName") or "").strip()
    last_name = (user.get("lastName") or "").strip()
    if first_name and last_name:
        return (first_name[0] + last_name[0]).upper()

    for field in ("name", "companyName"):
        initials = _initials_from_words(user.get(field))
        if initials:
            return initials

    email = user.get("email") or ""
    if email:
        initials = _initials_from_words(email.split("@")[0], r"[._-]", allow_single=False)
        if initials:
            return initials
        return email[0].upper()

    return "?"
