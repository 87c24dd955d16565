"""
Credentials and access control.
Argon2 password hashes, JWT bearer tokens, the current-user dependency
and ownership checks for campaign-scoped resources.
"""
from datetime import datetime, timedelta, timezone
from argon2 import PasswordHasher, exceptions
from sqlalchemy.orm import Session

import jwt
from jwt.exceptions import InvalidTokenError, ExpiredSignatureError
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from storyquest.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES
from storyquest.business.models import User, Campaign, Character, Item
from storyquest.shared.services.orm_service import get_db


ph = PasswordHasher()

# Bearer tokens are issued by the JSON login endpoint
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against its Argon2 hash. Malformed hashes never match."""
    try:
        return ph.verify(hashed_password, plain_password)
    except (exceptions.VerifyMismatchError, exceptions.VerificationError, exceptions.InvalidHashError):
        return False

def get_password_hash(password: str) -> str:
    return ph.hash(password)

def create_access_token(data: dict, expires_delta: timedelta = None) -> str:
    """Sign the given claims, adding an 'exp' claim (default lifetime from config)."""
    claims = dict(data)
    lifetime = expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    claims["exp"] = datetime.now(timezone.utc) + lifetime
    return jwt.encode(claims, SECRET_KEY, algorithm=ALGORITHM)

def create_user_token(user: User) -> str:
    """Issue an access token whose subject is the user id."""
    return create_access_token(data={"sub": str(user.id)})

def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()

def get_user_by_username(db: Session, username: str):
    return db.query(User).filter(User.username == username).first()

def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Return the user with this email if the password matches, else None."""
    user = get_user_by_email(db, email)
    if user and verify_password(password, user.password_hash):
        return user
    return None

def get_current_user(db: Session = Depends(get_db), token: str = Depends(oauth2_scheme)):
    """
    Resolve the bearer token to a User.
    401 when the token is expired, malformed, or names a user that no longer exists.
    """
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        claims = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        user_id = int(claims.get("sub"))
    except ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except (InvalidTokenError, TypeError, ValueError):
        raise unauthorized

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise unauthorized
    return user

def verify_campaign_ownership(campaign_id: int, user_id: int, db: Session) -> Campaign:
    """
    Load a campaign addressed in the URL and check who owns it.

    Args:
        campaign_id: campaign from the path
        user_id: the authenticated user

    Raises:
        HTTPException: 404 if the campaign does not exist, 403 if it belongs to someone else
    """
    campaign = db.query(Campaign).filter(Campaign.id == campaign_id).first()
    if not campaign:
        raise HTTPException(status_code=404, detail="Campaign not found")
    if campaign.player_id != user_id:
        raise HTTPException(status_code=403, detail="Not authorized to access this campaign")
    return campaign

def get_owned_campaign(campaign_id: int, user_id: int, db: Session) -> Campaign:
    """
    Fetch a campaign referenced from a request body.
    Missing and foreign campaigns are both reported as 404.
    """
    campaign = db.query(Campaign).filter(
        Campaign.id == campaign_id,
        Campaign.player_id == user_id
    ).first()
    if not campaign:
        raise HTTPException(status_code=404, detail="Campaign not found or not owned by user")
    return campaign

def verify_character_ownership(character_id: int, user_id: int, db: Session) -> Character:
    character = db.query(Character).filter(Character.id == character_id).first()
    if not character:
        raise HTTPException(status_code=404, detail="Character not found")
    if character.campaign.player_id != user_id:
        raise HTTPException(status_code=403, detail="Not authorized to access this character")
    return character

def verify_item_ownership(item_id: int, user_id: int, db: Session) -> Item:
    item = db.query(Item).filter(Item.id == item_id).first()
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    if item.campaign.player_id != user_id:
        raise HTTPException(status_code=403, detail="Not authorized to access this item")
    return item
