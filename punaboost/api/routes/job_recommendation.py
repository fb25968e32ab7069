"""
AI job recommendations (Candidate only).
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from punaboost.core.auth_dependency import get_db, require_role
from punaboost.db.models import Role, User
from punaboost.llm.provider import LLMProvider
from punaboost.llm.router import get_llm_provider
from punaboost.schemas.job_recommendation import JobRecommendationDto, JobRecommendationRequest
from punaboost.services import recommendation_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobrecommendation", tags=["Job Recommendation"])


@router.post("/recommend", response_model=List[JobRecommendationDto])
def recommend(
    request: JobRecommendationRequest,
    user: User = Depends(require_role(Role.CANDIDATE)),
    provider: Optional[LLMProvider] = Depends(get_llm_provider),
    db: Session = Depends(get_db),
):
    try:
        return recommendation_service.recommend_jobs(db, user, request.resume_id, provider)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error getting job recommendations: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while getting recommendations"
        )
