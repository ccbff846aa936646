import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from skillboard import models
from skillboard.crud import user as user_crud
from skillboard.database import get_db
from skillboard.schemas import AuthResponse, SigninRequest, SignupRequest, UserEnvelope, UserOut
from skillboard.utils.security import create_user_token, get_current_user, verify_password

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


# ===== SIGN UP =====

@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(user_data: SignupRequest, db: Session = Depends(get_db)):
    """Register a new user by email and/or mobile number."""
    email = user_data.email.strip().lower() if user_data.email else None
    mobile = (user_data.mobile or "").strip() or None

    if not email and not mobile:
        raise HTTPException(status_code=400, detail="Please provide email or mobile number")
    if not user_data.password or len(user_data.password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
        )

    if user_crud.get_user_by_login(db, email, mobile):
        raise HTTPException(
            status_code=400,
            detail="User already exists with this email or mobile",
        )

    try:
        user = user_crud.create_user(
            db,
            name=user_data.name,
            email=email,
            mobile=mobile,
            password=user_data.password,
        )
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=400,
            detail="User already exists with this email or mobile",
        )

    logger.info("Registered user %s", user.id)
    return AuthResponse(
        message="User created successfully",
        token=create_user_token(user),
        user=UserOut.model_validate(user),
    )


# ===== SIGN IN =====

@router.post("/signin", response_model=AuthResponse)
def signin(credentials: SigninRequest, db: Session = Depends(get_db)):
    """Verify credentials and return an access token."""
    email = credentials.email.strip().lower() if credentials.email else None
    mobile = (credentials.mobile or "").strip() or None

    if not email and not mobile:
        raise HTTPException(status_code=400, detail="Please provide email or mobile number")
    if not credentials.password:
        raise HTTPException(status_code=400, detail="Please provide password")

    user = user_crud.get_user_by_login(db, email, mobile)
    if not user or not user.is_active or not verify_password(credentials.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return AuthResponse(
        message="Signed in successfully",
        token=create_user_token(user),
        user=UserOut.model_validate(user),
    )


# ===== CURRENT USER =====

@router.get("/me", response_model=UserEnvelope)
def get_me(current_user: models.User = Depends(get_current_user)):
    return UserEnvelope(user=UserOut.model_validate(current_user))
