"""
Authentication routes.
Handles user registration, login (JWT token generation) and the profile.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storyquest.shared.services.orm_service import get_db
from storyquest.shared.services.auth_service import get_current_user
from storyquest.business.schemas import UserRegister, UserLogin, ProfileUpdate
from storyquest.business.dtos import UserDTO, AuthResponseDTO
from storyquest.business.models import User

from storyquest.api.services.auth_service import (
    perform_register,
    perform_login,
    perform_get_profile,
    perform_update_profile
)

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=AuthResponseDTO, status_code=201)
async def register(user: UserRegister, db: Session = Depends(get_db)):
    """
    Register a new user account.

    Returns the new user together with an access token.
    Returns 400 if the email or username already exists.
    """
    return await perform_register(user, db)


@router.post("/login", response_model=AuthResponseDTO)
async def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """
    Login endpoint - authenticate by email and password and return a JWT access token.
    The token must be sent as a Bearer token in subsequent requests.
    """
    return await perform_login(credentials, db)


@router.get("/profile", response_model=UserDTO)
async def get_profile(current_user: User = Depends(get_current_user)):
    return await perform_get_profile(current_user)


@router.put("/profile", response_model=UserDTO)
async def update_profile(
    profile: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_update_profile(profile, db, current_user)
