"""
Converters between ORM models and DTOs.
"""
from .converters import (
    user_to_dto,
    user_to_auth_dto,
    story_post_to_dto,
    campaign_to_dto,
    campaign_to_detail_dto,
    item_to_dto,
    inventory_entry_to_dto,
    character_to_dto
)

__all__ = [
    "user_to_dto",
    "user_to_auth_dto",
    "story_post_to_dto",
    "campaign_to_dto",
    "campaign_to_detail_dto",
    "item_to_dto",
    "inventory_entry_to_dto",
    "character_to_dto"
]
