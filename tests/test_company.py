from datetime import datetime, time, timedelta

from punaboost.db.models import Company
from punaboost.services import company_service
from tests.helpers import auth_headers


def update_payload(**overrides):
    payload = {
        "companyName": "Acme Group",
        "description": "Software and consulting",
        "website": "https://acme.al",
        "location": "Tirana",
        "foundedYear": 2010,
        "numberOfEmployees": 120,
        "linkedIn": "https://linkedin.com/company/acme",
    }
    payload.update(overrides)
    return payload


def test_list_and_get_companies(client, company_user, other_company_user):
    listing = client.get("/api/company").json()

    assert [c["companyName"] for c in listing] == ["Acme Shpk", "Globex"]
    acme = client.get(f"/api/company/{listing[0]['id']}").json()
    assert acme["industryName"] == "Banka"
    assert acme["countryName"] == "Albania"
    assert acme["cityName"] == "Tirana"


def test_globex_without_location_has_null_names(client, other_company_user):
    company_id = other_company_user.company_profile.id

    body = client.get(f"/api/company/{company_id}").json()

    assert body["countryName"] is None
    assert body["industryName"] is None


def test_my_company(client, company_user):
    response = client.get("/api/company/my-company", headers=auth_headers(company_user))

    assert response.status_code == 200
    assert response.json()["companyName"] == "Acme Shpk"


def test_my_company_requires_company_role(client, candidate_user):
    response = client.get("/api/company/my-company", headers=auth_headers(candidate_user))

    assert response.status_code == 403


def test_update_own_company(client, db, company_user, location):
    company_id = company_user.company_profile.id
    payload = update_payload(countryId=location["albania"].id, cityId=location["durres"].id)

    response = client.put(f"/api/company/{company_id}", json=payload, headers=auth_headers(company_user))

    assert response.status_code == 200
    assert response.json()["companyName"] == "Acme Group"
    assert response.json()["cityName"] == "Durrës"
    db.expire_all()
    assert db.get(Company, company_id).number_of_employees == 120


def test_update_other_company_is_forbidden(client, company_user, other_company_user):
    company_id = company_user.company_profile.id

    response = client.put(f"/api/company/{company_id}", json=update_payload(), headers=auth_headers(other_company_user))

    assert response.status_code == 403
    assert response.json() == {"message": "You can only update your own company"}


def test_company_jobs_hide_expired(client, company_user, make_job):
    make_job(company_user, title="Open")
    make_job(company_user, title="Closed", expires_in_days=-2)

    response = client.get(f"/api/company/{company_user.company_profile.id}/jobs")

    assert [job["title"] for job in response.json()] == ["Open"]


def test_company_jobs_expiring_today_stay_listed(client, company_user, make_job):
    start_of_today = datetime.combine(datetime.utcnow().date(), time.min)
    make_job(company_user, title="Last day", expires_at=start_of_today + timedelta(seconds=1))
    make_job(company_user, title="Yesterday", expires_at=start_of_today - timedelta(seconds=1))

    response = client.get(f"/api/company/{company_user.company_profile.id}/jobs")

    assert [job["title"] for job in response.json()] == ["Last day"]


def test_company_jobs_compare_calendar_days(db, company_user, make_job):
    make_job(company_user, title="Ends at noon", expires_at=datetime(2025, 3, 7, 12, 0))
    company_id = company_user.company_profile.id

    same_day = company_service.list_company_jobs(db, company_id, today=datetime(2025, 3, 7).date())
    next_day = company_service.list_company_jobs(db, company_id, today=datetime(2025, 3, 8).date())

    assert [job.title for job in same_day] == ["Ends at noon"]
    assert next_day == []


def test_missing_company(client):
    response = client.get("/api/company/404")

    assert response.status_code == 404
    assert response.json() == {"message": "Company not found"}
