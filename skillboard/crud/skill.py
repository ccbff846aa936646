from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from skillboard import models

ALL_FILTER = "all"


# ============================
# SKILL POSTINGS
# ============================

def get_postings(
    db: Session,
    *,
    category: Optional[str] = None,
    skill_type: Optional[str] = None,
    search: Optional[str] = None,
) -> List[models.SkillPosting]:
    query = db.query(models.SkillPosting)

    if category and category != ALL_FILTER:
        query = query.filter(models.SkillPosting.category == category)
    if skill_type and skill_type != ALL_FILTER:
        query = query.filter(models.SkillPosting.skill_type == skill_type)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                models.SkillPosting.title.ilike(pattern),
                models.SkillPosting.description.ilike(pattern),
                models.SkillPosting.category.ilike(pattern),
            )
        )

    return query.order_by(
        models.SkillPosting.created_at.desc(),
        models.SkillPosting.id.desc(),
    ).all()


def get_posting(db: Session, posting_id: int):
    return db.query(models.SkillPosting).filter(models.SkillPosting.id == posting_id).first()


def get_user_postings(db: Session, user_id: int) -> List[models.SkillPosting]:
    return (
        db.query(models.SkillPosting)
        .filter(models.SkillPosting.created_by == user_id)
        .order_by(models.SkillPosting.created_at.desc(), models.SkillPosting.id.desc())
        .all()
    )


def create_posting(
    db: Session,
    *,
    user: models.User,
    title: str,
    description: str,
    category: str,
    skill_type: str,
) -> models.SkillPosting:
    posting = models.SkillPosting(
        title=title,
        description=description,
        category=category,
        skill_type=skill_type,
        created_by=user.id,
        user_name=user.name,
        user_email=user.email,
    )
    db.add(posting)
    db.commit()
    db.refresh(posting)
    return posting


def delete_posting(db: Session, posting: models.SkillPosting) -> None:
    db.delete(posting)
    db.commit()
