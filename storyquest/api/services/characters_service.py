"""
Character services.
Characters always live inside one of the current user's campaigns.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from storyquest.business.schemas import CharacterCreate, CharacterUpdate
from storyquest.business.models import User, Campaign, Character, CharacterItem
from storyquest.business.converters import character_to_dto, inventory_entry_to_dto
from storyquest.constants import DEFAULT_STATS
from storyquest.shared.services.orm_service import get_db
from storyquest.shared.services.auth_service import (
    get_owned_campaign,
    verify_character_ownership,
    get_current_user
)
from storyquest.api.services.campaigns_service import perform_list_campaign_characters

async def perform_list_characters(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    characters = db.query(Character).join(Campaign).filter(
        Campaign.player_id == current_user.id
    ).order_by(Character.created_at.desc(), Character.id.desc()).all()
    return [character_to_dto(c) for c in characters]

async def perform_create_character(
    character_data: CharacterCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    get_owned_campaign(character_data.campaign_id, current_user.id, db)

    stats = character_data.stats.model_dump() if character_data.stats else dict(DEFAULT_STATS)
    character = Character(
        name=character_data.name,
        character_class=character_data.character_class,
        race=character_data.race,
        backstory=character_data.backstory or "",
        campaign_id=character_data.campaign_id,
        stats=stats
    )
    db.add(character)
    db.commit()
    db.refresh(character)
    return character_to_dto(character)

async def perform_get_character(
    character_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    character = verify_character_ownership(character_id, current_user.id, db)
    return character_to_dto(character, include_items=True)

async def perform_update_character(
    character_id: int,
    character_data: CharacterUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    character = verify_character_ownership(character_id, current_user.id, db)

    updates = character_data.model_dump(exclude_unset=True, exclude_none=True)
    stats = updates.pop("stats", None)
    for field, value in updates.items():
        setattr(character, field, value)
    if stats is not None:
        # Reassign so the JSON column is marked dirty
        character.stats = dict(stats)

    db.commit()
    db.refresh(character)
    return character_to_dto(character)

async def perform_delete_character(
    character_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    character = verify_character_ownership(character_id, current_user.id, db)
    db.delete(character)
    db.commit()
    return {"message": "Character removed"}

async def perform_list_characters_by_campaign(
    campaign_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_list_campaign_characters(campaign_id, db, current_user)

async def perform_list_character_items(
    character_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    verify_character_ownership(character_id, current_user.id, db)
    entries = db.query(CharacterItem).filter(CharacterItem.character_id == character_id).order_by(
        CharacterItem.id
    ).all()
    return [inventory_entry_to_dto(e) for e in entries]
