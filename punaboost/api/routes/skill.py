from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from punaboost.core.auth_dependency import get_db, require_role
from punaboost.db.models import Role
from punaboost.schemas.base import MessageResponse
from punaboost.schemas.reference import NameCreate, SkillDto
from punaboost.services import reference_service

router = APIRouter(prefix="/skill", tags=["Reference Data"])

admin_only = require_role(Role.ADMIN)


@router.get("", response_model=List[SkillDto])
def list_skills(db: Session = Depends(get_db)):
    return reference_service.list_skills(db)


@router.get("/{skill_id}", response_model=SkillDto)
def get_skill(skill_id: int, db: Session = Depends(get_db)):
    return reference_service.get_skill(db, skill_id)


# Companies may add skills they need for a posting
@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SkillDto,
    dependencies=[Depends(require_role(Role.ADMIN, Role.COMPANY))],
)
def create_skill(data: NameCreate, db: Session = Depends(get_db)):
    return reference_service.create_skill(db, data)


@router.put("/{skill_id}", response_model=SkillDto, dependencies=[Depends(admin_only)])
def update_skill(skill_id: int, data: NameCreate, db: Session = Depends(get_db)):
    return reference_service.update_skill(db, skill_id, data)


@router.delete("/{skill_id}", response_model=MessageResponse, dependencies=[Depends(admin_only)])
def delete_skill(skill_id: int, db: Session = Depends(get_db)):
    reference_service.delete_skill(db, skill_id)
    return MessageResponse(message="Skill deleted successfully")
