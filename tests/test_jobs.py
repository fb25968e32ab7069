"""
Job listing and company-owned job management.
"""
from datetime import datetime, timedelta, timezone

from punaboost.db.models import Job, JobApplication, JobSkill
from tests.helpers import auth_headers


def job_payload(location, industry, **overrides):
    payload = {
        "title": "Backend Developer",
        "description": "FastAPI and PostgreSQL",
        "location": "Tirana",
        "salaryFrom": 1200,
        "salaryTo": 1800,
        "isRemote": True,
        "industryId": industry.id,
        "countryId": location["albania"].id,
        "cityId": location["tirana"].id,
        "expiresAt": (datetime.utcnow() + timedelta(days=20)).isoformat(),
        "skillIds": [],
    }
    payload.update(overrides)
    return payload


def test_create_job(client, db, company_user, location, industry, skills):
    payload = job_payload(location, industry, skillIds=[skills["python"].id, skills["sql"].id, 999])

    response = client.post("/api/job", json=payload, headers=auth_headers(company_user))

    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "Backend Developer"
    assert body["companyName"] == "Acme Shpk"
    assert body["industryName"] == "Banka"
    assert body["cityName"] == "Tirana"
    assert body["companyCountryName"] == "Albania"
    assert sorted(s["skillName"] for s in body["skills"]) == ["Python", "SQL"]
    assert db.query(JobSkill).count() == 2


def test_create_job_normalizes_aware_expiry_to_utc(client, db, company_user, location, industry):
    expires = datetime(2030, 1, 10, 12, 0, tzinfo=timezone(timedelta(hours=2)))
    payload = job_payload(location, industry, expiresAt=expires.isoformat())

    response = client.post("/api/job", json=payload, headers=auth_headers(company_user))

    assert response.status_code == 201
    job = db.query(Job).one()
    assert job.expires_at == datetime(2030, 1, 10, 10, 0)


def test_create_job_requires_company_role(client, candidate_user, location, industry):
    response = client.post("/api/job", json=job_payload(location, industry), headers=auth_headers(candidate_user))

    assert response.status_code == 403


def test_create_job_validates_salary_range(client, company_user, location, industry):
    payload = job_payload(location, industry, salaryFrom=2000, salaryTo=1000)

    response = client.post("/api/job", json=payload, headers=auth_headers(company_user))

    assert response.status_code == 400
    assert response.json()["errors"] == {"body": ["salaryTo must be greater than or equal to salaryFrom"]}


def test_create_job_missing_title(client, company_user, location, industry):
    payload = job_payload(location, industry)
    del payload["title"]

    response = client.post("/api/job", json=payload, headers=auth_headers(company_user))

    assert response.status_code == 400
    assert "title" in response.json()["errors"]


def test_create_job_city_must_match_country(client, company_user, location, industry):
    payload = job_payload(location, industry, cityId=location["prishtina"].id)

    response = client.post("/api/job", json=payload, headers=auth_headers(company_user))

    assert response.status_code == 400
    assert response.json() == {"message": "City does not belong to the selected country"}


def test_create_job_unknown_industry(client, company_user, location, industry):
    payload = job_payload(location, industry, industryId=999)

    response = client.post("/api/job", json=payload, headers=auth_headers(company_user))

    assert response.status_code == 404
    assert response.json() == {"message": "Industry not found"}


def test_public_list_hides_expired_and_orders_newest_first(client, company_user, make_job):
    now = datetime.utcnow()
    make_job(company_user, title="Old", posted_at=now - timedelta(days=5))
    make_job(company_user, title="New", posted_at=now - timedelta(days=1))
    make_job(company_user, title="Expired", expires_in_days=-1)

    response = client.get("/api/job")

    assert response.status_code == 200
    assert [job["title"] for job in response.json()] == ["New", "Old"]
    assert all(job["applications"] == [] for job in response.json())


def test_get_job(client, company_user, make_job):
    job = make_job(company_user)

    response = client.get(f"/api/job/{job.id}")

    assert response.status_code == 200
    assert response.json()["id"] == job.id


def test_get_missing_job(client):
    response = client.get("/api/job/12345")

    assert response.status_code == 404
    assert response.json() == {"message": "Job not found"}


def test_my_jobs_include_expired_and_applications(client, db, company_user, other_company_user, candidate_user, make_job):
    expired = make_job(company_user, title="Expired", expires_in_days=-3)
    make_job(other_company_user, title="Not mine")
    db.add(JobApplication(job_id=expired.id, candidate_id=candidate_user.candidate_profile.id))
    db.commit()

    response = client.get("/api/job/my-jobs", headers=auth_headers(company_user))

    assert response.status_code == 200
    body = response.json()
    assert [job["title"] for job in body] == ["Expired"]
    application = body[0]["applications"][0]
    assert application["candidateName"] == "Ana Hoxha"
    assert application["candidateEmail"] == "ana.hoxha@mail.al"
    assert application["status"] == "Pending"


def test_update_job(client, db, company_user, make_job, location, industry, skills):
    job = make_job(company_user)
    payload = job_payload(location, industry, title="Senior Backend Developer", skillIds=[skills["sql"].id])

    response = client.put(f"/api/job/{job.id}", json=payload, headers=auth_headers(company_user))

    assert response.status_code == 200
    assert response.json() == {"message": "Job updated successfully"}
    db.expire_all()
    updated = db.get(Job, job.id)
    assert updated.title == "Senior Backend Developer"
    assert [link.skill.name for link in updated.skills] == ["SQL"]


def test_update_someone_elses_job_is_forbidden(client, company_user, other_company_user, make_job, location, industry):
    job = make_job(company_user)

    response = client.put(
        f"/api/job/{job.id}",
        json=job_payload(location, industry),
        headers=auth_headers(other_company_user),
    )

    assert response.status_code == 403
    assert response.json() == {"message": "You can only manage your own jobs"}


def test_delete_job_cascades_applications(client, db, company_user, candidate_user, make_job):
    job = make_job(company_user)
    db.add(JobApplication(job_id=job.id, candidate_id=candidate_user.candidate_profile.id))
    db.commit()

    response = client.delete(f"/api/job/{job.id}", headers=auth_headers(company_user))

    assert response.status_code == 200
    assert response.json() == {"message": "Job deleted successfully"}
    db.expire_all()
    assert db.query(Job).count() == 0
    assert db.query(JobApplication).count() == 0
