from pydantic import BaseModel, EmailStr, Field
from typing import Optional, Dict, Any, Literal

CampaignStatus = Literal["active", "completed", "paused"]
AuthorType = Literal["system", "player"]
ItemType = Literal["weapon", "armor", "potion", "artifact", "misc"]


class UserRegister(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6)

class UserLogin(BaseModel):
    email: EmailStr
    password: str

class ProfileUpdate(BaseModel):
    username: Optional[str] = Field(None, min_length=3, max_length=50)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6)


class CampaignCreate(BaseModel):
    name: str = Field(..., min_length=3, max_length=100)
    description: str = Field(..., min_length=1)
    theme: str = Field(..., min_length=3, max_length=50)

class CampaignUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=3, max_length=100)
    description: Optional[str] = Field(None, min_length=1)
    status: Optional[CampaignStatus] = None


class CharacterStats(BaseModel):
    strength: int = Field(10, ge=1, le=30)
    dexterity: int = Field(10, ge=1, le=30)
    constitution: int = Field(10, ge=1, le=30)
    intelligence: int = Field(10, ge=1, le=30)
    wisdom: int = Field(10, ge=1, le=30)
    charisma: int = Field(10, ge=1, le=30)

class CharacterCreate(BaseModel):
    """Payload for a new character. The client sends the class as 'class'."""
    name: str = Field(..., min_length=2, max_length=50)
    character_class: str = Field(..., alias="class", min_length=1, max_length=50)
    race: str = Field(..., min_length=1, max_length=50)
    campaign_id: int
    backstory: str = ""
    stats: Optional[CharacterStats] = None

    class Config:
        populate_by_name = True
        str_strip_whitespace = True

class CharacterUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=50)
    character_class: Optional[str] = Field(None, alias="class", min_length=1, max_length=50)
    race: Optional[str] = Field(None, min_length=1, max_length=50)
    backstory: Optional[str] = None
    stats: Optional[CharacterStats] = None

    class Config:
        populate_by_name = True
        str_strip_whitespace = True


class StoryPostCreate(BaseModel):
    content: str = Field(..., min_length=1)
    author_type: AuthorType = "player"
    is_resolved: bool = False

class StoryPostUpdate(BaseModel):
    content: Optional[str] = Field(None, min_length=1)
    author_type: Optional[AuthorType] = None
    is_resolved: Optional[bool] = None


class DMResponseRequest(BaseModel):
    character_id: int
    player_input: str = Field(..., min_length=1)

    class Config:
        str_strip_whitespace = True


class ItemCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    type: ItemType
    campaign_id: int
    properties: Dict[str, Any] = Field(default_factory=dict)

class ItemUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1)
    type: Optional[ItemType] = None
    properties: Optional[Dict[str, Any]] = None

class ItemAssign(BaseModel):
    quantity: int = Field(1, ge=1)
    equipped: bool = False

class ItemGenerate(BaseModel):
    campaign_id: int
    character_id: int
    type: ItemType = "misc"
