"""
AI job recommendations for a candidate's resume.

The resume text and a summary of every open job go to the configured LLM,
which answers with a JSON array of {jobId, matchScore, reason}. Anything the
model gets wrong (bad JSON, unknown ids, a failed call) degrades to fewer or
no recommendations rather than an error.
"""
import json
import logging
from datetime import datetime
from typing import Dict, List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from punaboost.db.models import Job, User
from punaboost.llm.provider import LLMProvider
from punaboost.llm.router import get_model_for_feature
from punaboost.schemas.job import JobDto
from punaboost.schemas.job_recommendation import JobRecommendationDto
from punaboost.services import file_service, resume_service
from punaboost.services.mapper import job_to_dto
from punaboost.services.resume_parser import ResumeParseError, parse_resume

logger = logging.getLogger(__name__)

FEATURE = "job_recommendation"
TEMPERATURE = 0.2
MAX_TOKENS = 3000
MIN_MATCH_SCORE = 60

SYSTEM_PROMPT = (
    "You are an expert AI job matching assistant specializing in analyzing CVs/resumes in Albanian "
    "and English. Your task is to deeply analyze candidate qualifications, skills, experience, education, "
    "and preferences, then match them with available job positions. Provide accurate, professional "
    "recommendations with detailed explanations. Only recommend jobs with genuine compatibility "
    f"(minimum {MIN_MATCH_SCORE}% match). If no suitable matches exist, return an empty array. "
    "Always respond in the same language as the CV (Albanian or English)."
)

PROMPT_TEMPLATE = """You are an expert job matching AI. Analyze the candidate's CV/resume (which may be in Albanian or English) and find the best matching job opportunities.

CANDIDATE'S CV/RESUME:
{resume_text}

AVAILABLE JOB POSITIONS:
{jobs_json}

ANALYSIS INSTRUCTIONS:

1. From the CV extract skills, years of experience, education, certifications, languages, industry
   experience, career level (junior, mid-level, senior) and any preferred work type (remote, on-site).

2. For each job weigh skill overlap with RequiredSkills, experience level, education, industry fit,
   location (IsRemote jobs are open to anyone; otherwise consider Country and City), the salary range
   SalaryFrom-SalaryTo against the candidate's level, and the job description itself.

3. Score every job from 0 to 100:
   - 90-100: excellent match, candidate exceeds requirements
   - 75-89: very good match, candidate meets all key requirements
   - {min_score}-74: good match, candidate meets most requirements with some gaps
   - Below {min_score}: do NOT recommend

4. For each recommended job write a specific reason of 2-4 sentences naming actual skills, technologies
   and years of experience from the CV, plus any minor gaps. Write it in the language of the CV.

5. OUTPUT FORMAT:
   Return ONLY a valid JSON array. No markdown, no code blocks, no additional text.
   If no job scores {min_score} or more, return an empty array: []

[
  {{"jobId": "12", "matchScore": 88, "reason": "Excellent match: ..."}},
  {{"jobId": "7", "matchScore": 68, "reason": "Good match: ..."}}
]
"""


def job_summary(job: JobDto) -> dict:
    """Fields of a job the model sees."""
    return {
        "Id": str(job.id),
        "Title": job.title,
        "Description": job.description or "",
        "Location": job.location or "",
        "Country": job.country_name or "",
        "City": job.city_name or "",
        "Company": job.company_name or "",
        "Industry": job.industry_name or "",
        "RequiredSkills": [skill.skill_name for skill in job.skills],
        "IsRemote": job.is_remote,
        "SalaryFrom": job.salary_from,
        "SalaryTo": job.salary_to,
        "PostedAt": job.posted_at.strftime("%Y-%m-%d"),
        "ExpiresAt": job.expires_at.strftime("%Y-%m-%d") if job.expires_at else "",
    }


def build_prompt(resume_text: str, jobs: List[JobDto]) -> str:
    jobs_json = json.dumps([job_summary(job) for job in jobs], indent=2, ensure_ascii=False)
    return PROMPT_TEMPLATE.format(resume_text=resume_text, jobs_json=jobs_json, min_score=MIN_MATCH_SCORE)


def _strip_code_fence(content: str) -> str:
    content = content.strip()
    if content.startswith("```json"):
        content = content[len("```json"):]
    if content.startswith("```"):
        content = content[3:]
    if content.endswith("```"):
        content = content[:-3]
    return content.strip()


def parse_recommendations(content: Optional[str], jobs_by_id: Dict[int, JobDto]) -> List[JobRecommendationDto]:
    """
    Turn the model's answer into recommendations, best match first.

    Entries whose jobId is not one of the offered jobs are dropped; an answer
    that is not a JSON array yields no recommendations.
    """
    if not content or not content.strip():
        return []

    try:
        items = json.loads(_strip_code_fence(content))
    except ValueError as e:
        logger.error(f"Error parsing AI recommendations: {e}")
        return []
    if not isinstance(items, list):
        logger.error(f"AI recommendations are not a JSON array: {type(items).__name__}")
        return []

    recommendations = []
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            job_id = int(item.get("jobId"))
            match_score = int(item.get("matchScore") or 0)
        except (TypeError, ValueError):
            continue

        job = jobs_by_id.get(job_id)
        if job is None:
            continue
        recommendations.append(
            JobRecommendationDto(job=job, match_score=match_score, reason=str(item.get("reason") or ""))
        )

    return sorted(recommendations, key=lambda rec: rec.match_score, reverse=True)


def _open_jobs(db: Session, now: datetime) -> List[Job]:
    return db.query(Job).filter(Job.expires_at > now).order_by(Job.posted_at.desc()).all()


def recommend_jobs(
    db: Session,
    user: User,
    resume_id: int,
    provider: Optional[LLMProvider],
    now: Optional[datetime] = None,
) -> List[JobRecommendationDto]:
    resume = resume_service.get_resume(db, user, resume_id)

    try:
        resume_text = parse_resume(file_service.resume_path(resume.file_url))
    except ResumeParseError as e:
        logger.warning(f"Resume text extraction failed: resume_id={resume.id}, error={e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Could not extract text from resume: {e}"
        )

    if not resume_text.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Could not extract text from resume")

    jobs = [job_to_dto(job, include_applications=False) for job in _open_jobs(db, now or datetime.utcnow())]
    if not jobs:
        return []

    if provider is None:
        logger.warning("Job recommendations skipped: no LLM provider configured")
        return []

    messages = [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_prompt(resume_text, jobs)},
    ]
    try:
        response = provider.chat(
            messages,
            model=get_model_for_feature(FEATURE),
            temperature=TEMPERATURE,
            max_tokens=MAX_TOKENS,
        )
    except Exception as e:
        logger.error(f"Error getting job recommendations from LLM: {e}", exc_info=True)
        return []

    recommendations = parse_recommendations(response.content, {job.id: job for job in jobs})
    logger.info(
        f"Job recommendations: user_id={user.id}, resume_id={resume.id}, "
        f"offered={len(jobs)}, recommended={len(recommendations)}, tokens_out={response.tokens_out}"
    )
    return recommendations
