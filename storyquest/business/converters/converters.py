from storyquest.business.models import User, Campaign, Character, StoryPost, Item, CharacterItem
from storyquest.business.dtos import (
    UserDTO, AuthResponseDTO, StoryPostDTO, CampaignDTO, CampaignDetailDTO, ItemDTO, InventoryEntryDTO, CharacterDTO
)
from storyquest.constants import DEFAULT_STATS

def user_to_dto(user: User) -> UserDTO:
    return UserDTO.model_validate(user)

def user_to_auth_dto(user: User, token: str) -> AuthResponseDTO:
    return AuthResponseDTO(
        id=user.id,
        username=user.username,
        email=user.email,
        role=user.role,
        token=token
    )

def story_post_to_dto(post: StoryPost) -> StoryPostDTO:
    return StoryPostDTO.model_validate(post)

def campaign_to_dto(campaign: Campaign) -> CampaignDTO:
    return CampaignDTO.model_validate(campaign)

def campaign_to_detail_dto(campaign: Campaign) -> CampaignDetailDTO:
    dto = CampaignDetailDTO.model_validate(campaign)
    dto.story_posts = [story_post_to_dto(p) for p in campaign.story_posts]
    return dto

def item_to_dto(item: Item) -> ItemDTO:
    return ItemDTO(
        id=item.id,
        name=item.name,
        description=item.description,
        type=item.type,
        properties=item.properties or {},
        campaign_id=item.campaign_id,
        created_at=item.created_at,
        updated_at=item.updated_at
    )

def inventory_entry_to_dto(entry: CharacterItem) -> InventoryEntryDTO:
    return InventoryEntryDTO(
        id=entry.id,
        character_id=entry.character_id,
        item_id=entry.item_id,
        quantity=entry.quantity,
        equipped=bool(entry.equipped),
        item=item_to_dto(entry.item)
    )

def character_to_dto(character: Character, include_items: bool = False) -> CharacterDTO:
    # Older rows may be missing stats keys; fill them with the defaults
    stats = dict(DEFAULT_STATS)
    stats.update(character.stats or {})
    return CharacterDTO(
        id=character.id,
        name=character.name,
        race=character.race,
        character_class=character.character_class,
        backstory=character.backstory or "",
        campaign_id=character.campaign_id,
        stats=stats,
        created_at=character.created_at,
        updated_at=character.updated_at,
        items=[inventory_entry_to_dto(ci) for ci in character.character_items] if include_items else None
    )
