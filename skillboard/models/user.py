from sqlalchemy import (
    ARRAY,
    JSON,
    TIMESTAMP,
    Boolean,
    Column,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from skillboard.database import Base


# ---------------- USER (AUTH + PROFILE) ----------------
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, default="User")
    email = Column(String(255), unique=True, index=True, nullable=True)
    mobile = Column(String(20), unique=True, index=True, nullable=True)
    password_hash = Column(String(255), nullable=False)
    bio = Column(Text, default="")
    # Free-text skill names, order as entered by the user.
    # SQLite (used by tests) does not support ARRAY; store as JSON there.
    skills_to_teach = Column(ARRAY(String).with_variant(JSON, "sqlite"), default=list)
    skills_to_learn = Column(ARRAY(String).with_variant(JSON, "sqlite"), default=list)
    is_profile_complete = Column(Boolean, default=False)
    is_active = Column(Boolean, default=True)
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    saved_skill_rows = relationship(
        "SavedSkill",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="SavedSkill.id",
    )
    skill_postings = relationship(
        "SkillPosting",
        back_populates="creator",
        cascade="all, delete-orphan",
    )

    @property
    def saved_skills(self):
        return [row.skill_name for row in self.saved_skill_rows]


# ---------------- SAVED SKILLS ----------------
SKILL_NAME_MAX_LENGTH = 255


class SavedSkill(Base):
    __tablename__ = "saved_skills"
    # One row per (user, name) keeps concurrent toggles from duplicating.
    __table_args__ = (
        UniqueConstraint("user_id", "skill_name", name="uq_saved_skills_user_skill"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    skill_name = Column(String(SKILL_NAME_MAX_LENGTH), nullable=False)
    created_at = Column(TIMESTAMP, server_default=func.now())

    user = relationship("User", back_populates="saved_skill_rows")
