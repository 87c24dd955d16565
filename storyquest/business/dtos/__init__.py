"""
Data Transfer Objects (Pydantic models for API responses).
"""
from .dtos import (
    UserDTO,
    AuthResponseDTO,
    StoryPostDTO,
    TurnDTO,
    CampaignDTO,
    CampaignDetailDTO,
    ItemDTO,
    InventoryEntryDTO,
    CharacterDTO
)

__all__ = [
    "UserDTO",
    "AuthResponseDTO",
    "StoryPostDTO",
    "TurnDTO",
    "CampaignDTO",
    "CampaignDetailDTO",
    "ItemDTO",
    "InventoryEntryDTO",
    "CharacterDTO"
]
