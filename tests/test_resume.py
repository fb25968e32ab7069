"""
Candidate resume library.
"""
from punaboost.db.models import JobApplication, Resume
from tests.helpers import PDF_BYTES, auth_headers


def upload(client, user, name="Second CV", is_default=False):
    return client.post(
        "/api/resume",
        data={"name": name, "isDefault": "true" if is_default else "false"},
        files={"file": ("second.pdf", PDF_BYTES, "application/pdf")},
        headers=auth_headers(user),
    )


def test_upload_resume(client, candidate_user, upload_dir):
    response = upload(client, candidate_user)

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Second CV"
    assert body["fileName"] == "second.pdf"
    assert body["isDefault"] is False
    assert (upload_dir / "resumes" / body["fileUrl"].rsplit("/", 1)[1]).exists()


def test_upload_requires_file(client, candidate_user):
    response = client.post("/api/resume", data={"name": "Empty"}, headers=auth_headers(candidate_user))

    assert response.status_code == 400
    assert response.json() == {"message": "File is required"}


def test_default_resume_listed_first(client, candidate_user):
    upload(client, candidate_user, name="Newer")

    response = client.get("/api/resume/my-resumes", headers=auth_headers(candidate_user))

    assert [r["name"] for r in response.json()] == ["Main CV", "Newer"]


def test_new_default_clears_previous(client, db, candidate_user):
    new_id = upload(client, candidate_user, name="Fresh", is_default=True).json()["id"]

    db.expire_all()
    defaults = db.query(Resume).filter(Resume.is_default.is_(True)).all()
    assert [r.id for r in defaults] == [new_id]


def test_set_default(client, db, candidate_user):
    new_id = upload(client, candidate_user).json()["id"]

    response = client.put(f"/api/resume/{new_id}/set-default", headers=auth_headers(candidate_user))

    assert response.status_code == 200
    assert response.json()["isDefault"] is True
    db.expire_all()
    assert db.query(Resume).filter(Resume.is_default.is_(True)).count() == 1


def test_delete_resume_detaches_applications(client, db, candidate_user, company_user, make_job, upload_dir):
    created = upload(client, candidate_user).json()
    job = make_job(company_user)
    client.post(
        "/api/jobapplication/apply",
        json={"jobId": job.id, "resumeId": created["id"]},
        headers=auth_headers(candidate_user),
    )

    response = client.delete(f"/api/resume/{created['id']}", headers=auth_headers(candidate_user))

    assert response.status_code == 200
    assert response.json() == {"message": "Resume deleted successfully"}
    db.expire_all()
    application = db.query(JobApplication).one()
    assert application.resume_id is None
    assert db.get(Resume, created["id"]) is None
    assert not (upload_dir / "resumes" / created["fileUrl"].rsplit("/", 1)[1]).exists()


def test_resume_routes_are_candidate_only(client, db, candidate_user, admin_user):
    resume_id = db.query(Resume).one().id

    response = client.get(f"/api/resume/{resume_id}", headers=auth_headers(admin_user))

    assert response.status_code == 403


def test_missing_resume(client, candidate_user):
    response = client.delete("/api/resume/999", headers=auth_headers(candidate_user))

    assert response.status_code == 404
    assert response.json() == {"message": "Resume not found"}


def test_non_pdf_rejected(client, candidate_user):
    response = client.post(
        "/api/resume",
        data={"name": "Notes"},
        files={"file": ("notes.txt", b"plain text", "text/plain")},
        headers=auth_headers(candidate_user),
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Only PDF files are allowed for resumes."}
