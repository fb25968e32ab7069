from datetime import datetime

from punaboost.schemas.base import CamelModel


class ResumeDto(CamelModel):
    id: int
    file_name: str
    file_url: str
    name: str
    candidate_id: int
    created_at: datetime
    is_default: bool
