from typing import List, Optional

from pydantic import Field

from .base import CamelModel

# ======================
# SKILL BOARD (AGGREGATED BY SKILL NAME)
# ======================


class SkillMember(CamelModel):
    id: int
    name: str
    email: Optional[str] = None


class SkillAggregate(CamelModel):
    name: str
    teachers: List[SkillMember] = Field(default_factory=list)
    learners: List[SkillMember] = Field(default_factory=list)
    teachers_count: int = 0
    learners_count: int = 0

    @property
    def total_interest(self) -> int:
        return self.teachers_count + self.learners_count


# ======================
# PAGINATION CONTRACT
# ======================


class Pagination(CamelModel):
    current_page: int
    total_pages: int
    page_size: int
    total_items: int
    has_next_page: bool
    has_prev_page: bool


class PageResult(CamelModel):
    skills: List[SkillAggregate]
    pagination: Pagination


class CategoriesResponse(CamelModel):
    categories: List[str]


# ======================
# SAVED SKILLS
# ======================


class SavedSkillToggle(CamelModel):
    # Optional so a missing name reaches the service and fails as a 400.
    skill_name: Optional[str] = None


class SavedSkillsResponse(CamelModel):
    saved_skills: List[str]
