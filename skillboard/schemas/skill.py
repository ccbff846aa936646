from datetime import datetime
from typing import List, Optional

from .base import CamelModel

# ======================
# SKILL POSTING SCHEMAS
# ======================


class SkillPostingCreate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = "General"
    skill_type: Optional[str] = None  # "teach" or "learn"


class SkillPostingUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None


class SkillPosting(CamelModel):
    id: int
    title: str
    description: str
    category: Optional[str] = "General"
    skill_type: str
    created_by: int
    user_name: str
    user_email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ======================
# RESPONSE MODELS
# ======================


class SkillPostingList(CamelModel):
    count: int
    skills: List[SkillPosting]


class SkillPostingEnvelope(CamelModel):
    message: Optional[str] = None
    skill: SkillPosting
