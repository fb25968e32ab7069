from unittest.mock import Mock

import pytest

from punaboost.client.errors import HTTP_ERROR, ApiError
from punaboost.client.users import enrich_user_with_name, get_initials


@pytest.fixture
def services():
    services = Mock()
    services.candidates.get_my_profile.return_value = {"firstName": "Ana", "lastName": "Hoxha"}
    services.companies.get_my_company.return_value = {"companyName": "Acme Shpk"}
    return services


def test_candidate_gets_names(services):
    user = enrich_user_with_name({"email": "ana@mail.al", "role": "Candidate"}, services)

    assert user == {
        "email": "ana@mail.al",
        "role": "Candidate",
        "firstName": "Ana",
        "lastName": "Hoxha",
        "name": "Ana Hoxha",
    }


def test_company_gets_company_name(services):
    user = enrich_user_with_name({"email": "hr@acme.al", "role": "Company"}, services)

    assert user["companyName"] == "Acme Shpk"
    assert user["name"] == "Acme Shpk"


def test_admin_is_returned_untouched(services):
    admin = {"email": "admin@punaboost.al", "role": "Admin"}

    assert enrich_user_with_name(admin, services) is admin
    services.candidates.get_my_profile.assert_not_called()
    services.companies.get_my_company.assert_not_called()


def test_lookup_failure_returns_user_unchanged(services):
    services.companies.get_my_company.side_effect = ApiError(HTTP_ERROR, "/company/my-company", status=401)
    user = {"email": "hr@acme.al", "role": "Company"}

    assert enrich_user_with_name(user, services) == user


@pytest.mark.parametrize("user, expected", [
    (None, "?"),
    ({}, "?"),
    ({"firstName": "ana", "lastName": "hoxha"}, "AH"),
    ({"firstName": "Ana", "lastName": "  ", "name": "Ana Maria Hoxha"}, "AH"),
    ({"name": "Ana"}, "AN"),
    ({"companyName": "Acme Software Shpk"}, "AS"),
    ({"companyName": "Globex"}, "GL"),
    ({"email": "ana.hoxha@mail.al"}, "AH"),
    ({"email": "ana_maria-hoxha@mail.al"}, "AH"),
    ({"email": "ana@mail.al"}, "A"),
    ({"name": "A", "email": "x@mail.al"}, "X"),
])
def test_get_initials(user, expected):
    assert get_initials(user) == expected
