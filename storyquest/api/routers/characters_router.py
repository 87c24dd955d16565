"""
Character routes.
Responses expose the character class under the 'class' key.
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storyquest.business.schemas import CharacterCreate, CharacterUpdate
from storyquest.business.dtos import CharacterDTO, InventoryEntryDTO
from storyquest.business.models import User
from storyquest.shared.services.orm_service import get_db
from storyquest.shared.services.auth_service import get_current_user

from storyquest.api.services.characters_service import (
    perform_list_characters,
    perform_create_character,
    perform_get_character,
    perform_update_character,
    perform_delete_character,
    perform_list_characters_by_campaign,
    perform_list_character_items
)

router = APIRouter(prefix="/characters", tags=["characters"])


@router.get("", response_model=List[CharacterDTO])
async def list_characters(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_list_characters(db, current_user)

@router.post("", response_model=CharacterDTO, status_code=201)
async def create_character(
    character_data: CharacterCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_create_character(character_data, db, current_user)

@router.get("/campaign/{campaign_id}", response_model=List[CharacterDTO])
async def list_characters_by_campaign(
    campaign_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_list_characters_by_campaign(campaign_id, db, current_user)

@router.get("/{character_id}", response_model=CharacterDTO)
async def get_character(
    character_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_get_character(character_id, db, current_user)

@router.put("/{character_id}", response_model=CharacterDTO)
async def update_character(
    character_id: int,
    character_data: CharacterUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_update_character(character_id, character_data, db, current_user)

@router.delete("/{character_id}", response_model=dict)
async def delete_character(
    character_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_delete_character(character_id, db, current_user)

@router.get("/{character_id}/items", response_model=List[InventoryEntryDTO])
async def list_character_items(
    character_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_list_character_items(character_id, db, current_user)
