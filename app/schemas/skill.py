from pydantic import UUID4

from app.schemas.common import CamelModel


class SkillResponse(CamelModel):
    """Catalog skill"""
    id: UUID4
    skill_name: str
    requires_certificate: bool
