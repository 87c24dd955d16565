"""
API request/response schemas (Pydantic models for validation).
"""
from .schemas_api import (
    UserRegister,
    UserLogin,
    ProfileUpdate,
    CampaignCreate,
    CampaignUpdate,
    CharacterStats,
    CharacterCreate,
    CharacterUpdate,
    StoryPostCreate,
    StoryPostUpdate,
    DMResponseRequest,
    ItemCreate,
    ItemUpdate,
    ItemAssign,
    ItemGenerate
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "ProfileUpdate",
    "CampaignCreate",
    "CampaignUpdate",
    "CharacterStats",
    "CharacterCreate",
    "CharacterUpdate",
    "StoryPostCreate",
    "StoryPostUpdate",
    "DMResponseRequest",
    "ItemCreate",
    "ItemUpdate",
    "ItemAssign",
    "ItemGenerate"
]
