from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from skillboard import models
from skillboard.config import settings
from skillboard.crud import skill as skill_crud
from skillboard.database import get_db
from skillboard.errors import SkillBoardError
from skillboard.schemas import (
    CategoriesResponse,
    PageResult,
    SkillPosting,
    SkillPostingCreate,
    SkillPostingEnvelope,
    SkillPostingList,
    SkillPostingUpdate,
)
from skillboard.services import overview_service
from skillboard.utils.security import get_current_user

router = APIRouter(
    prefix="/skills",
    tags=["Skills"],
    dependencies=[Depends(get_current_user)],
)

VALID_SKILL_TYPES = {"teach", "learn"}


def normalize_skill_type(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    return (raw or "").strip().lower() or None


def _get_owned_posting(db: Session, posting_id: int, user: models.User) -> models.SkillPosting:
    posting = skill_crud.get_posting(db, posting_id)
    if not posting:
        raise HTTPException(status_code=404, detail="Skill not found")
    if posting.created_by != user.id:
        raise HTTPException(status_code=403, detail="Not authorized to modify this skill")
    return posting


# ======================
# GET: Skill board (aggregated by skill name)
# ======================
@router.get("/overview", response_model=PageResult)
def get_skills_overview(
    page: int = 1,
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
):
    page_size = settings.OVERVIEW_DEFAULT_PAGE_SIZE if limit is None else limit
    try:
        return overview_service.get_skills_overview(db, page=page, page_size=page_size)
    except SkillBoardError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


# ======================
# GET: Distinct skill names for the category filter
# ======================
@router.get("/categories", response_model=CategoriesResponse)
def get_skill_categories(db: Session = Depends(get_db)):
    try:
        categories = overview_service.get_skill_categories(db)
    except SkillBoardError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return CategoriesResponse(categories=categories)


# ======================
# GET: Skill postings with optional filtering
# ======================
@router.get("/", response_model=SkillPostingList)
def get_all_skills(
    category: Optional[str] = None,
    skillType: Optional[str] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    postings = skill_crud.get_postings(
        db,
        category=category,
        skill_type=normalize_skill_type(skillType),
        search=(search or "").strip() or None,
    )
    return SkillPostingList(
        count=len(postings),
        skills=[SkillPosting.model_validate(p) for p in postings],
    )


# ======================
# GET: My skill postings
# ======================
@router.get("/user/my-skills", response_model=SkillPostingList)
def get_my_skills(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    postings = skill_crud.get_user_postings(db, current_user.id)
    return SkillPostingList(
        count=len(postings),
        skills=[SkillPosting.model_validate(p) for p in postings],
    )


@router.get("/{skill_id}", response_model=SkillPostingEnvelope)
def get_skill(skill_id: int, db: Session = Depends(get_db)):
    posting = skill_crud.get_posting(db, skill_id)
    if not posting:
        raise HTTPException(status_code=404, detail="Skill not found")
    return SkillPostingEnvelope(skill=SkillPosting.model_validate(posting))


# ======================
# POST: Create a skill posting
# ======================
@router.post("/", response_model=SkillPostingEnvelope, status_code=status.HTTP_201_CREATED)
def create_skill(
    payload: SkillPostingCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    title = (payload.title or "").strip()
    description = (payload.description or "").strip()
    skill_type = normalize_skill_type(payload.skill_type)

    if not title or not description or not skill_type:
        raise HTTPException(400, "Please provide title, description, and skill type")
    if skill_type not in VALID_SKILL_TYPES:
        raise HTTPException(400, "skillType must be one of: teach, learn")
    if len(description) > 500:
        raise HTTPException(400, "Description must be 500 characters or less")

    posting = skill_crud.create_posting(
        db,
        user=current_user,
        title=title,
        description=description,
        category=(payload.category or "General").strip() or "General",
        skill_type=skill_type,
    )
    return SkillPostingEnvelope(
        message="Skill created successfully",
        skill=SkillPosting.model_validate(posting),
    )


# ======================
# PUT: Update own skill posting
# ======================
@router.put("/{skill_id}", response_model=SkillPostingEnvelope)
def update_skill(
    skill_id: int,
    payload: SkillPostingUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    posting = _get_owned_posting(db, skill_id, current_user)

    if payload.title and payload.title.strip():
        posting.title = payload.title.strip()
    if payload.description and payload.description.strip():
        if len(payload.description.strip()) > 500:
            raise HTTPException(400, "Description must be 500 characters or less")
        posting.description = payload.description.strip()
    if payload.category and payload.category.strip():
        posting.category = payload.category.strip()

    db.commit()
    db.refresh(posting)
    return SkillPostingEnvelope(
        message="Skill updated successfully",
        skill=SkillPosting.model_validate(posting),
    )


# ======================
# DELETE: Remove own skill posting
# ======================
@router.delete("/{skill_id}")
def delete_skill(
    skill_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    posting = _get_owned_posting(db, skill_id, current_user)
    skill_crud.delete_posting(db, posting)
    return {"message": "Skill deleted successfully"}
