from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.crud import skill as skill_crud
from app.schemas.common import APIResponse
from app.schemas.skill import SkillResponse

router = APIRouter(prefix="/skills", tags=["Skills"])


@router.get("", response_model=APIResponse[List[SkillResponse]])
def list_skills(db: Session = Depends(get_db)):
    """Skill catalog, ordered by name. Public."""
    skills = skill_crud.list_all(db)
    return APIResponse(data=[SkillResponse.model_validate(s) for s in skills])
