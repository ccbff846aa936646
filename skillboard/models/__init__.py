# skillboard/models/__init__.py
# Import models in dependency order
from .user import SKILL_NAME_MAX_LENGTH, User, SavedSkill
from .skill import SkillPosting

__all__ = ["User", "SavedSkill", "SkillPosting", "SKILL_NAME_MAX_LENGTH"]
