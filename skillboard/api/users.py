from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from skillboard import models
from skillboard.crud import user as user_crud
from skillboard.database import get_db
from skillboard.errors import SkillBoardError
from skillboard.schemas import (
    ProfileUpdate,
    ProfileUpdateResponse,
    SavedSkillToggle,
    SavedSkillsResponse,
    UserEnvelope,
    UserOut,
)
from skillboard.services import saved_skills_service
from skillboard.utils.security import get_current_user

router = APIRouter(prefix="/users", tags=["Users"])


# ======================
# GET: Current user profile
# ======================
@router.get("/profile", response_model=UserEnvelope)
def get_profile(current_user: models.User = Depends(get_current_user)):
    return UserEnvelope(user=UserOut.model_validate(current_user))


# ======================
# PUT: Update profile (name, bio, skill lists)
# ======================
@router.put("/profile", response_model=ProfileUpdateResponse)
def update_profile(
    profile_update: ProfileUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    user = user_crud.update_profile(db, current_user, profile_update)
    return ProfileUpdateResponse(
        message="Profile updated successfully",
        user=UserOut.model_validate(user),
    )


# ======================
# SAVED SKILLS
# ======================
@router.get("/saved-skills", response_model=SavedSkillsResponse)
def get_saved_skills(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return SavedSkillsResponse(
        saved_skills=saved_skills_service.list_saved_skills(db, current_user.id)
    )


@router.post("/saved-skills", response_model=SavedSkillsResponse)
def toggle_saved_skill(
    payload: SavedSkillToggle,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Save the skill name, or unsave it if it is already saved."""
    try:
        saved = saved_skills_service.toggle_saved_skill(db, current_user, payload.skill_name)
    except SkillBoardError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return SavedSkillsResponse(saved_skills=saved)
