from sqlalchemy import Column, ForeignKey, Integer, String, TIMESTAMP, func
from sqlalchemy.orm import relationship

from skillboard.database import Base


# skillboard/models/skill.py
# A titled posting advertising a skill to teach or learn. Not the same thing
# as the free-text skill names aggregated on the overview board.
class SkillPosting(Base):
    __tablename__ = "skill_postings"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(100), nullable=False, index=True)
    description = Column(String(500), nullable=False)
    category = Column(String(50), default="General", index=True)
    skill_type = Column(String(20), nullable=False)  # 'teach' or 'learn'
    created_by = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    # Denormalized at creation so listings don't need a join.
    user_name = Column(String(100), nullable=False)
    user_email = Column(String(255))
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    creator = relationship("User", back_populates="skill_postings")
