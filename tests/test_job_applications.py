"""
Applying to jobs and managing applications.
"""
import pytest

from punaboost.db.models import ApplicationStatus, Candidate, JobApplication, Resume, Role
from tests.helpers import auth_headers, make_user


@pytest.fixture
def job(company_user, make_job):
    return make_job(company_user)


@pytest.fixture
def default_resume(db, candidate_user):
    return db.query(Resume).filter(Resume.candidate_id == candidate_user.candidate_profile.id).one()


def apply(client, user, job_id, **extra):
    return client.post("/api/jobapplication/apply", json={"jobId": job_id, **extra}, headers=auth_headers(user))


def test_apply_with_resume(client, candidate_user, job, default_resume):
    response = apply(client, candidate_user, job.id, resumeId=default_resume.id, notes="Available immediately")

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "Pending"
    assert body["jobTitle"] == "Backend Developer"
    assert body["resumeName"] == "Main CV"
    assert body["notes"] == "Available immediately"
    assert body["candidateName"] == "Ana Hoxha"


def test_apply_without_resume(client, candidate_user, job):
    response = apply(client, candidate_user, job.id)

    assert response.status_code == 201
    assert response.json()["resumeId"] is None
    assert response.json()["resumeName"] == ""


def test_cannot_apply_twice(client, db, candidate_user, job):
    assert apply(client, candidate_user, job.id).status_code == 201

    response = apply(client, candidate_user, job.id)

    assert response.status_code == 400
    assert response.json() == {"message": "You have already applied for this job"}
    assert db.query(JobApplication).count() == 1


def test_apply_to_missing_job(client, candidate_user):
    response = apply(client, candidate_user, 9999)

    assert response.status_code == 404
    assert response.json() == {"message": "Job not found"}


def test_apply_with_someone_elses_resume(client, db, candidate_user, job):
    other = make_user(db, "besa@mail.al", Role.CANDIDATE)
    other_candidate = Candidate(user_id=other.id, first_name="Besa", last_name="Dervishi")
    db.add(other_candidate)
    db.commit()
    foreign = Resume(candidate_id=other_candidate.id, file_name="b.pdf", file_url="/uploads/resumes/b.pdf", name="B")
    db.add(foreign)
    db.commit()

    response = apply(client, candidate_user, job.id, resumeId=foreign.id)

    assert response.status_code == 400
    assert response.json() == {"message": "Resume not found or doesn't belong to you"}


def test_company_cannot_apply(client, company_user, job):
    assert apply(client, company_user, job.id).status_code == 403


def test_my_applications_include_job_details(client, candidate_user, job):
    apply(client, candidate_user, job.id)

    response = client.get("/api/jobapplication/my-applications", headers=auth_headers(candidate_user))

    assert response.status_code == 200
    [application] = response.json()
    assert application["companyName"] == "Acme Shpk"
    assert application["cityName"] == "Tirana"
    assert application["jobExpiresAt"] is not None


def test_company_lists_applications_for_its_job(client, company_user, other_company_user, candidate_user, job):
    apply(client, candidate_user, job.id)

    own = client.get(f"/api/jobapplication/job/{job.id}", headers=auth_headers(company_user))
    other = client.get(f"/api/jobapplication/job/{job.id}", headers=auth_headers(other_company_user))

    assert own.status_code == 200
    assert [a["candidateEmail"] for a in own.json()] == ["ana.hoxha@mail.al"]
    assert own.json()[0]["companyName"] == "Acme Shpk"
    assert own.json()[0]["jobExpiresAt"] is not None
    assert own.json()[0]["jobLocation"] == "Tirana"
    assert other.status_code == 403


def test_company_lists_all_applications(client, company_user, other_company_user, candidate_user, make_job, job):
    foreign_job = make_job(other_company_user, title="Elsewhere")
    apply(client, candidate_user, job.id)
    apply(client, candidate_user, foreign_job.id)

    response = client.get("/api/jobapplication/company/all", headers=auth_headers(company_user))

    assert [a["jobTitle"] for a in response.json()] == ["Backend Developer"]
    assert response.json()[0]["companyName"] == "Acme Shpk"
    assert response.json()[0]["jobExpiresAt"] is not None
    assert response.json()[0]["salaryFrom"] == 1000


def test_update_status(client, db, company_user, candidate_user, job):
    application_id = apply(client, candidate_user, job.id).json()["id"]

    response = client.put(
        f"/api/jobapplication/{application_id}/status",
        json={"status": "Shortlisted"},
        headers=auth_headers(company_user),
    )

    assert response.status_code == 200
    assert response.json()["status"] == "Shortlisted"
    db.expire_all()
    assert db.get(JobApplication, application_id).status == ApplicationStatus.SHORTLISTED


def test_update_status_rejects_unknown_value(client, company_user, candidate_user, job):
    application_id = apply(client, candidate_user, job.id).json()["id"]

    response = client.put(
        f"/api/jobapplication/{application_id}/status",
        json={"status": "Hired"},
        headers=auth_headers(company_user),
    )

    assert response.status_code == 400
    assert "status" in response.json()["errors"]


def test_update_status_by_other_company_is_forbidden(client, other_company_user, candidate_user, job):
    application_id = apply(client, candidate_user, job.id).json()["id"]

    response = client.put(
        f"/api/jobapplication/{application_id}/status",
        json={"status": "Rejected"},
        headers=auth_headers(other_company_user),
    )

    assert response.status_code == 403


def test_get_application_visibility(client, admin_user, company_user, other_company_user, candidate_user, job):
    application_id = apply(client, candidate_user, job.id).json()["id"]
    url = f"/api/jobapplication/{application_id}"

    assert client.get(url, headers=auth_headers(candidate_user)).status_code == 200
    assert client.get(url, headers=auth_headers(company_user)).status_code == 200
    assert client.get(url, headers=auth_headers(admin_user)).status_code == 200
    assert client.get(url, headers=auth_headers(other_company_user)).status_code == 403


def test_get_missing_application(client, candidate_user):
    response = client.get("/api/jobapplication/999", headers=auth_headers(candidate_user))

    assert response.status_code == 404
    assert response.json() == {"message": "Application not found"}
