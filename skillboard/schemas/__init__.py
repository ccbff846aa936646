# skillboard/schemas/__init__.py

# User schemas
from .user import (
    AuthResponse,
    ProfileUpdate,
    ProfileUpdateResponse,
    SigninRequest,
    SignupRequest,
    TokenData,
    UserEnvelope,
    UserOut,
)

# Skill posting schemas
from .skill import (
    SkillPosting,
    SkillPostingCreate,
    SkillPostingEnvelope,
    SkillPostingList,
    SkillPostingUpdate,
)

# Skill board schemas
from .overview import (
    CategoriesResponse,
    PageResult,
    Pagination,
    SavedSkillToggle,
    SavedSkillsResponse,
    SkillAggregate,
    SkillMember,
)

__all__ = [
    "AuthResponse",
    "ProfileUpdate",
    "ProfileUpdateResponse",
    "SigninRequest",
    "SignupRequest",
    "TokenData",
    "UserEnvelope",
    "UserOut",
    "SkillPosting",
    "SkillPostingCreate",
    "SkillPostingEnvelope",
    "SkillPostingList",
    "SkillPostingUpdate",
    "CategoriesResponse",
    "PageResult",
    "Pagination",
    "SavedSkillToggle",
    "SavedSkillsResponse",
    "SkillAggregate",
    "SkillMember",
]
