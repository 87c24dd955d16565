"""
Item routes.
Handles CRUD operations for items and giving them to characters.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storyquest.business.schemas import ItemCreate, ItemUpdate, ItemAssign, ItemGenerate
from storyquest.business.dtos import ItemDTO, InventoryEntryDTO
from storyquest.business.models import User
from storyquest.shared.services.orm_service import get_db
from storyquest.shared.services.auth_service import get_current_user

from storyquest.api.services.items_service import (
    perform_create_item,
    perform_list_items,
    perform_get_item,
    perform_update_item,
    perform_delete_item,
    perform_assign_item,
    perform_unassign_item,
    perform_generate_item
)

router = APIRouter(prefix="/items", tags=["items"])


@router.get("", response_model=List[ItemDTO])
async def list_items(
    campaign_id: Optional[int] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_list_items(campaign_id, db, current_user)

@router.post("", response_model=ItemDTO, status_code=201)
async def create_item(
    item_data: ItemCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_create_item(item_data, db, current_user)

@router.post("/generate", response_model=ItemDTO, status_code=201)
async def generate_item(
    request: ItemGenerate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_generate_item(request, db, current_user)

@router.get("/{item_id}", response_model=ItemDTO)
async def get_item(
    item_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_get_item(item_id, db, current_user)

@router.put("/{item_id}", response_model=ItemDTO)
async def update_item(
    item_id: int,
    item_data: ItemUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_update_item(item_id, item_data, db, current_user)

@router.delete("/{item_id}", response_model=dict)
async def delete_item(
    item_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_delete_item(item_id, db, current_user)

@router.post("/{item_id}/character/{character_id}", response_model=InventoryEntryDTO, status_code=201)
async def assign_item(
    item_id: int,
    character_id: int,
    assignment: Optional[ItemAssign] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_assign_item(item_id, character_id, assignment or ItemAssign(), db, current_user)

@router.delete("/{item_id}/character/{character_id}", response_model=dict)
async def unassign_item(
    item_id: int,
    character_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_unassign_item(item_id, character_id, db, current_user)
