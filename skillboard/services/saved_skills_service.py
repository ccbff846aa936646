# skillboard/services/saved_skills_service.py
"""
Saved skills - bookmark toggle for skill names.

The toggle never reads-then-writes in application code. It issues a
conditional DELETE and only inserts when nothing was deleted; the
(user_id, skill_name) unique constraint turns a concurrent duplicate insert
into an IntegrityError, which resolves to "saved" without a second row.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from skillboard import models
from skillboard.errors import InvalidArgument, NotAuthenticated, UpstreamFailure

logger = logging.getLogger(__name__)


def list_saved_skills(db: Session, user_id: int) -> List[str]:
    rows = (
        db.query(models.SavedSkill.skill_name)
        .filter(models.SavedSkill.user_id == user_id)
        .order_by(models.SavedSkill.id.asc())
        .all()
    )
    return [name for (name,) in rows]


def toggle_saved_skill(
    db: Session,
    user: Optional[models.User],
    skill_name: Optional[str],
) -> List[str]:
    """
    Add ``skill_name`` to the user's saved list, or remove it if present.

    Returns:
        The full saved list after the toggle, in save order

    Raises:
        NotAuthenticated: no user session
        InvalidArgument: empty, missing or overlong skill name
        UpstreamFailure: the store rejected the write
    """
    if user is None:
        raise NotAuthenticated("Sign in to save skills")
    if skill_name is None or not str(skill_name).strip():
        raise InvalidArgument("skillName is required")
    if len(skill_name) > models.SKILL_NAME_MAX_LENGTH:
        raise InvalidArgument(
            f"skillName must be at most {models.SKILL_NAME_MAX_LENGTH} characters"
        )

    try:
        removed = (
            db.query(models.SavedSkill)
            .filter(
                models.SavedSkill.user_id == user.id,
                models.SavedSkill.skill_name == skill_name,
            )
            .delete(synchronize_session=False)
        )
        if not removed:
            db.add(models.SavedSkill(user_id=user.id, skill_name=skill_name))
        db.commit()
    except IntegrityError:
        # Lost the race against another toggle that saved the same name.
        db.rollback()
        logger.info("Concurrent save of '%s' for user %s", skill_name, user.id)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("Saved skill toggle failed for user %s: %s", user.id, exc)
        raise UpstreamFailure("Could not update saved skills") from exc
    else:
        logger.info(
            "User %s %s saved skill '%s'",
            user.id,
            "removed" if removed else "added",
            skill_name,
        )

    return list_saved_skills(db, user.id)
