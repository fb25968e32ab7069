"""
Thin wrappers around the API endpoints used by front-end tooling.

Each method returns the decoded JSON payload and raises the original
ApiError on failure, after the client's global handling has run.
"""
import logging
from typing import Any, BinaryIO, Dict, List, Optional, Tuple, Union

from punaboost.client.api import ApiClient
from punaboost.client.users import enrich_user_with_name

logger = logging.getLogger(__name__)

DASHBOARD_PATHS = {
    "Admin": "/admin/dashboard",
    "Company": "/company/dashboard",
    "Candidate": "/candidate/dashboard",
}

# (filename, content, content type), as accepted by requests' files=
Upload = Tuple[str, Union[bytes, BinaryIO], str]


def _without_empty_salary_to(data: Dict[str, Any]) -> Dict[str, Any]:
    """A missing or zero salaryTo means "no upper bound" and is left out of the payload."""
    payload = dict(data)
    if not payload.get("salaryTo"):
        payload.pop("salaryTo", None)
    return payload


class CandidateService:
    def __init__(self, client: ApiClient):
        self.client = client

    def get_all(self) -> List[Dict[str, Any]]:
        return self.client.get("/candidate").unwrap()

    def get_my_profile(self) -> Dict[str, Any]:
        return self.client.get("/candidate/my-profile").unwrap()

    def get_by_id(self, candidate_id: int) -> Dict[str, Any]:
        return self.client.get(f"/candidate/{candidate_id}").unwrap()

    def update_profile(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.put("/candidate/profile", json=data).unwrap()

    def update_skills(self, skill_ids: List[int]) -> Dict[str, Any]:
        return self.client.post("/candidate/skills", json={"skillIds": skill_ids}).unwrap()

    def get_skills(self, candidate_id: int) -> List[Dict[str, Any]]:
        return self.client.get(f"/candidate/skills/{candidate_id}").unwrap()

    def update_resume(self, file: Upload) -> Dict[str, Any]:
        return self.client.put("/candidate/resume", files={"file": file}).unwrap()


class CompanyService:
    def __init__(self, client: ApiClient):
        self.client = client

    def get_all(self) -> List[Dict[str, Any]]:
        return self.client.get("/company").unwrap()

    def get_by_id(self, company_id: int) -> Dict[str, Any]:
        return self.client.get(f"/company/{company_id}").unwrap()

    def get_my_company(self) -> Dict[str, Any]:
        return self.client.get("/company/my-company").unwrap()

    def update(self, company_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.put(f"/company/{company_id}", json=data).unwrap()

    def get_jobs(self, company_id: int) -> List[Dict[str, Any]]:
        return self.client.get(f"/company/{company_id}/jobs").unwrap()

    def update_logo(self, file: Upload) -> Dict[str, Any]:
        return self.client.put("/account/company/logo", files={"file": file}).unwrap()


class JobService:
    def __init__(self, client: ApiClient):
        self.client = client

    def get_all(self) -> List[Dict[str, Any]]:
        return self.client.get("/job").unwrap()

    def get_by_id(self, job_id: int) -> Dict[str, Any]:
        return self.client.get(f"/job/{job_id}").unwrap()

    def get_my_jobs(self) -> List[Dict[str, Any]]:
        return self.client.get("/job/my-jobs").unwrap()

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.post("/job", json=_without_empty_salary_to(data)).unwrap()

    def update(self, job_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.put(f"/job/{job_id}", json=_without_empty_salary_to(data)).unwrap()

    def delete(self, job_id: int) -> Dict[str, Any]:
        return self.client.delete(f"/job/{job_id}").unwrap()


class JobApplicationService:
    def __init__(self, client: ApiClient):
        self.client = client

    def apply(self, job_id: int, resume_id: Optional[int] = None, notes: Optional[str] = None) -> Dict[str, Any]:
        payload = {"jobId": job_id, "resumeId": resume_id, "notes": notes}
        return self.client.post("/jobapplication/apply", json=payload).unwrap()

    def get_my_applications(self) -> List[Dict[str, Any]]:
        return self.client.get("/jobapplication/my-applications").unwrap()

    def get_by_job(self, job_id: int) -> List[Dict[str, Any]]:
        return self.client.get(f"/jobapplication/job/{job_id}").unwrap()

    def get_all_for_company(self) -> List[Dict[str, Any]]:
        return self.client.get("/jobapplication/company/all").unwrap()

    def get_by_id(self, application_id: int) -> Dict[str, Any]:
        return self.client.get(f"/jobapplication/{application_id}").unwrap()

    def update_status(self, application_id: int, status: str) -> Dict[str, Any]:
        return self.client.put(f"/jobapplication/{application_id}/status", json={"status": status}).unwrap()


class ResumeService:
    def __init__(self, client: ApiClient):
        self.client = client

    def get_my_resumes(self) -> List[Dict[str, Any]]:
        return self.client.get("/resume/my-resumes").unwrap()

    def get_by_id(self, resume_id: int) -> Dict[str, Any]:
        return self.client.get(f"/resume/{resume_id}").unwrap()

    def create(self, file: Upload, name: str, is_default: bool = False) -> Dict[str, Any]:
        form = {"name": name, "isDefault": "true" if is_default else "false"}
        return self.client.post("/resume", data=form, files={"file": file}).unwrap()

    def delete(self, resume_id: int) -> Dict[str, Any]:
        return self.client.delete(f"/resume/{resume_id}").unwrap()

    def set_default(self, resume_id: int) -> Dict[str, Any]:
        return self.client.put(f"/resume/{resume_id}/set-default").unwrap()


class JobRecommendationService:
    def __init__(self, client: ApiClient):
        self.client = client

    def get_recommendations(self, resume_id: int) -> List[Dict[str, Any]]:
        return self.client.post("/jobrecommendation/recommend", json={"resumeId": resume_id}).unwrap()


class ReferenceService:
    """CRUD wrapper shared by the country, city, industry and skill endpoints."""

    def __init__(self, client: ApiClient, resource: str):
        self.client = client
        self.resource = resource

    def get_all(self) -> List[Dict[str, Any]]:
        return self.client.get(f"/{self.resource}").unwrap()

    def get_by_id(self, record_id: int) -> Dict[str, Any]:
        return self.client.get(f"/{self.resource}/{record_id}").unwrap()

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.post(f"/{self.resource}", json=data).unwrap()

    def update(self, record_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.put(f"/{self.resource}/{record_id}", json=data).unwrap()

    def delete(self, record_id: int) -> Dict[str, Any]:
        return self.client.delete(f"/{self.resource}/{record_id}").unwrap()


class CityService(ReferenceService):
    def __init__(self, client: ApiClient):
        super().__init__(client, "city")

    def get_by_country(self, country_id: int) -> List[Dict[str, Any]]:
        return self.client.get(f"/city/country/{country_id}").unwrap()


class AuthService:
    def __init__(self, client: ApiClient, services: "PunaBoostServices"):
        self.client = client
        self.services = services

    def _sign_in(self, response: Dict[str, Any]) -> Dict[str, Any]:
        token = response["token"]
        user = {"email": response["email"], "role": response["role"]}

        # Token must be stored before the enrichment calls go out
        self.client.session_state.set_credentials(token, user)
        if user["role"] != "Admin":
            user = enrich_user_with_name(user, self.services)
            self.client.session_state.set_credentials(token, user)

        self.client.navigator.redirect(DASHBOARD_PATHS.get(user["role"], "/"))
        logger.info(f"Signed in as {user['role']}")
        return user

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """
        Sign in, store the credentials, then add display names to the stored user.

        Returns the stored user. The caller is sent to the dashboard for its role.
        """
        response = self.client.post("/account/login", json={"email": email, "password": password}).unwrap()
        return self._sign_in(response)

    def register_candidate(self, form: Dict[str, Any], resume: Upload) -> Dict[str, Any]:
        return self.client.post("/account/register/candidate", data=form, files={"file": resume}).unwrap()

    def register_company(self, form: Dict[str, Any], logo: Optional[Upload] = None) -> Dict[str, Any]:
        files = {"file": logo} if logo is not None else None
        return self.client.post("/account/register/company", data=form, files=files).unwrap()

    def verify_email(self, email: str, code: str) -> Dict[str, Any]:
        """Confirm the e-mail address with the mailed code; signs in like login() on success."""
        response = self.client.post("/account/email-verification", params={"email": email, "code": code}).unwrap()
        return self._sign_in(response)

    def logout(self) -> None:
        self.client.session_state.clear()
        self.client.navigator.redirect_to_login()

    def current_user(self) -> Optional[Dict[str, Any]]:
        return self.client.session_state.user


class PunaBoostServices:
    """All endpoint wrappers sharing one ApiClient."""

    def __init__(self, client: ApiClient = None):
        self.client = client or ApiClient()
        self.candidates = CandidateService(self.client)
        self.companies = CompanyService(self.client)
        self.jobs = JobService(self.client)
        self.applications = JobApplicationService(self.client)
        self.resumes = ResumeService(self.client)
        self.recommendations = JobRecommendationService(self.client)
        self.countries = ReferenceService(self.client, "country")
        self.cities = CityService(self.client)
        self.industries = ReferenceService(self.client, "industry")
        self.skills = ReferenceService(self.client, "skill")
        self.auth = AuthService(self.client, self)
