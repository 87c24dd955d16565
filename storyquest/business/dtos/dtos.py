from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Any
from datetime import datetime

class UserDTO(BaseModel):
    id: int
    username: str
    email: str
    role: str
    class Config:
        from_attributes = True

class AuthResponseDTO(UserDTO):
    token: str

class StoryPostDTO(BaseModel):
    id: int
    campaign_id: int
    content: str
    author_type: str
    is_resolved: bool
    created_at: datetime
    updated_at: datetime
    class Config:
        from_attributes = True

class TurnDTO(BaseModel):
    player_post: StoryPostDTO
    dm_post: StoryPostDTO

class CampaignDTO(BaseModel):
    id: int
    name: str
    description: str
    player_id: int
    theme: str
    status: str
    created_at: datetime
    updated_at: datetime
    class Config:
        from_attributes = True

class CampaignDetailDTO(CampaignDTO):
    story_posts: List[StoryPostDTO] = []

class ItemDTO(BaseModel):
    id: int
    name: str
    description: str
    type: str
    properties: Dict[str, Any] = {}
    campaign_id: int
    created_at: datetime
    updated_at: datetime
    class Config:
        from_attributes = True

class InventoryEntryDTO(BaseModel):
    """An item as held by a character, with the holding details."""
    id: int
    character_id: int
    item_id: int
    quantity: int
    equipped: bool
    item: ItemDTO
    class Config:
        from_attributes = True

class CharacterDTO(BaseModel):
    id: int
    name: str
    race: str
    character_class: str = Field(..., alias="class")  # Model uses 'character_class', API uses 'class'
    backstory: str
    campaign_id: int
    stats: Dict[str, int]
    created_at: datetime
    updated_at: datetime
    items: Optional[List[InventoryEntryDTO]] = None

    class Config:
        from_attributes = True
        populate_by_name = True
