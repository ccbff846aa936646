from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from skillboard import models, schemas
from skillboard.utils.security import get_password_hash


def clean_skill_names(names: Optional[Iterable[str]]) -> List[str]:
    """Strip whitespace, drop blanks and repeats, keep entry order."""
    cleaned = []
    seen = set()
    for name in names or []:
        value = (name or "").strip()
        if not value or value in seen:
            continue
        seen.add(value)
        cleaned.append(value)
    return cleaned


def create_user(
    db: Session,
    *,
    name: Optional[str],
    email: Optional[str],
    mobile: Optional[str],
    password: str,
) -> models.User:
    db_user = models.User(
        name=(name or "").strip() or "User",
        email=email,
        mobile=mobile,
        password_hash=get_password_hash(password),
        skills_to_teach=[],
        skills_to_learn=[],
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def get_user(db: Session, user_id: int):
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_by_email(db: Session, email: str):
    return db.query(models.User).filter(models.User.email == email).first()


def get_user_by_mobile(db: Session, mobile: str):
    return db.query(models.User).filter(models.User.mobile == mobile).first()


def get_user_by_login(db: Session, email: Optional[str], mobile: Optional[str]):
    if email:
        user = get_user_by_email(db, email)
        if user:
            return user
    if mobile:
        return get_user_by_mobile(db, mobile)
    return None


def update_profile(db: Session, user: models.User, profile_update: schemas.ProfileUpdate):
    update_data = profile_update.model_dump(exclude_unset=True)

    if update_data.get("name"):
        user.name = update_data["name"].strip() or user.name
    if update_data.get("bio") is not None:
        user.bio = update_data["bio"]
    # Assign fresh lists; in-place edits of JSON columns are not tracked.
    if update_data.get("skills_to_teach") is not None:
        user.skills_to_teach = clean_skill_names(update_data["skills_to_teach"])
    if update_data.get("skills_to_learn") is not None:
        user.skills_to_learn = clean_skill_names(update_data["skills_to_learn"])

    if update_data.get("name") and (user.skills_to_teach or user.skills_to_learn):
        user.is_profile_complete = True

    db.commit()
    db.refresh(user)
    return user
