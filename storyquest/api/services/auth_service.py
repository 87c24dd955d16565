"""
Account services: registration, login and profile management.
"""
import logging
from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from storyquest.business.schemas import UserRegister, UserLogin, ProfileUpdate
from storyquest.business.models import User
from storyquest.business.converters import user_to_dto, user_to_auth_dto
from storyquest.shared.services.orm_service import get_db
from storyquest.shared.services.auth_service import (
    authenticate_user,
    create_user_token,
    get_current_user,
    get_password_hash,
    get_user_by_email,
    get_user_by_username
)

logger = logging.getLogger(__name__)

async def perform_register(user: UserRegister, db: Session = Depends(get_db)):
    """
    Register a new user account and log it in.
    Returns 400 if the email or username is already taken.
    """
    if get_user_by_email(db, user.email):
        raise HTTPException(status_code=400, detail="User already exists")
    if get_user_by_username(db, user.username):
        raise HTTPException(status_code=400, detail="Username already registered")

    db_user = User(
        username=user.username,
        email=user.email,
        password_hash=get_password_hash(user.password)
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.info(f"[perform_register] Registered user {db_user.id} ({db_user.username})")
    return user_to_auth_dto(db_user, create_user_token(db_user))

async def perform_login(credentials: UserLogin, db: Session = Depends(get_db)):
    user = authenticate_user(db, credentials.email, credentials.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return user_to_auth_dto(user, create_user_token(user))

async def perform_get_profile(current_user: User = Depends(get_current_user)):
    return user_to_dto(current_user)

async def perform_update_profile(
    profile: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Update the current user's username, email or password.
    Returns 400 if the new username or email belongs to another account.
    """
    if profile.email and profile.email != current_user.email:
        if get_user_by_email(db, profile.email):
            raise HTTPException(status_code=400, detail="Email already in use")
        current_user.email = profile.email
    if profile.username and profile.username != current_user.username:
        if get_user_by_username(db, profile.username):
            raise HTTPException(status_code=400, detail="Username already registered")
        current_user.username = profile.username
    if profile.password:
        current_user.password_hash = get_password_hash(profile.password)

    db.commit()
    db.refresh(current_user)
    return user_to_dto(current_user)
