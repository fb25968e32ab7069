from punaboost.schemas.base import CamelModel
from punaboost.schemas.job import JobDto


class JobRecommendationRequest(CamelModel):
    resume_id: int


class JobRecommendationDto(CamelModel):
    job: JobDto
    match_score: int
    reason: str = ""
