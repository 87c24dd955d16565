"""
Database models (SQLAlchemy ORM).
"""
from .models import (
    User,
    Campaign,
    Character,
    StoryPost,
    Item,
    CharacterItem,
    Base
)

__all__ = [
    "Base",
    "User",
    "Campaign",
    "Character",
    "StoryPost",
    "Item",
    "CharacterItem"
]
