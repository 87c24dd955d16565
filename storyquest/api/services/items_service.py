"""
Item services.
Items belong to a campaign and can be held by that campaign's characters.
"""
import logging
import re
from typing import Optional
from fastapi import Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from storyquest.business.schemas import ItemCreate, ItemUpdate, ItemAssign, ItemGenerate
from storyquest.business.models import User, Campaign, Character, Item, CharacterItem
from storyquest.business.converters import item_to_dto, inventory_entry_to_dto
from storyquest.constants import DEFAULT_ITEM_NAME
from storyquest.shared.services.orm_service import get_db
from storyquest.shared.services.auth_service import (
    get_owned_campaign,
    verify_item_ownership,
    get_current_user
)
from storyquest.shared.helpers.ai_settings import get_ai_settings
from storyquest.ai.services.ai_prompt_service import build_item_prompt
from storyquest.api.ai_client_requests import ai_generate_text, LLMServiceError

logger = logging.getLogger(__name__)

ITEM_NAME_MAX_LENGTH = 100


def extract_item_name(description: str) -> str:
    """Take the item name from the first line of a generated description."""
    lines = description.strip().splitlines()
    first_line = lines[0] if lines else ""
    name = re.sub(r"[^\w\s-]", "", first_line).strip()
    return (name or DEFAULT_ITEM_NAME)[:ITEM_NAME_MAX_LENGTH]


async def perform_create_item(
    item_data: ItemCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    get_owned_campaign(item_data.campaign_id, current_user.id, db)
    item = Item(
        name=item_data.name,
        description=item_data.description,
        type=item_data.type,
        properties=dict(item_data.properties),
        campaign_id=item_data.campaign_id
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item_to_dto(item)

async def perform_list_items(
    campaign_id: Optional[int] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    query = db.query(Item).join(Campaign).filter(Campaign.player_id == current_user.id)
    if campaign_id is not None:
        query = query.filter(Item.campaign_id == campaign_id)
    items = query.order_by(Item.created_at.desc(), Item.id.desc()).all()
    return [item_to_dto(i) for i in items]

async def perform_get_item(
    item_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return item_to_dto(verify_item_ownership(item_id, current_user.id, db))

async def perform_update_item(
    item_id: int,
    item_data: ItemUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    item = verify_item_ownership(item_id, current_user.id, db)
    for field, value in item_data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(item, field, value)
    db.commit()
    db.refresh(item)
    return item_to_dto(item)

async def perform_delete_item(
    item_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    item = verify_item_ownership(item_id, current_user.id, db)
    db.delete(item)
    db.commit()
    return {"message": "Item removed"}

def _find_inventory_entry(character_id: int, item_id: int, db: Session):
    return db.query(CharacterItem).filter(
        CharacterItem.character_id == character_id,
        CharacterItem.item_id == item_id
    ).first()

def _get_character_in_campaign(character_id: int, campaign_id: int, db: Session) -> Character:
    character = db.query(Character).filter(
        Character.id == character_id,
        Character.campaign_id == campaign_id
    ).first()
    if not character:
        raise HTTPException(status_code=404, detail="Character not found in this campaign")
    return character

async def perform_assign_item(
    item_id: int,
    character_id: int,
    assignment: ItemAssign,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Give an item to a character of the same campaign."""
    item = verify_item_ownership(item_id, current_user.id, db)
    _get_character_in_campaign(character_id, item.campaign_id, db)

    existing = _find_inventory_entry(character_id, item_id, db)
    if existing:
        raise HTTPException(status_code=400, detail="Character already has this item")

    entry = CharacterItem(
        character_id=character_id,
        item_id=item_id,
        quantity=assignment.quantity,
        equipped=assignment.equipped
    )
    db.add(entry)
    try:
        db.commit()
    except IntegrityError:
        # uq_character_item: another request assigned the same item first
        db.rollback()
        raise HTTPException(status_code=400, detail="Character already has this item")
    db.refresh(entry)
    return inventory_entry_to_dto(entry)

async def perform_unassign_item(
    item_id: int,
    character_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    verify_item_ownership(item_id, current_user.id, db)
    entry = _find_inventory_entry(character_id, item_id, db)
    if not entry:
        raise HTTPException(status_code=404, detail="Item not found on this character")
    db.delete(entry)
    db.commit()
    return {"message": "Item removed from character"}

async def perform_generate_item(
    request: ItemGenerate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Ask the DM to invent an item suited to a character and store it in the campaign.
    The first line of the generated text becomes the item name.
    """
    campaign = get_owned_campaign(request.campaign_id, current_user.id, db)
    character = _get_character_in_campaign(request.character_id, campaign.id, db)

    settings = get_ai_settings()
    prompt = build_item_prompt(campaign.theme, character)
    try:
        description = await run_in_threadpool(
            ai_generate_text,
            prompt,
            temperature=settings["TEMPERATURE"],
            max_tokens=settings["ITEM_MAX_TOKENS"],
            model=settings["MODEL"]
        )
    except LLMServiceError as e:
        logger.error(f"[perform_generate_item] Campaign {campaign.id}: {e}")
        raise HTTPException(status_code=502, detail="Failed to generate item")

    item = Item(
        name=extract_item_name(description),
        description=description,
        type=request.type,
        properties={},
        campaign_id=campaign.id
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item_to_dto(item)
