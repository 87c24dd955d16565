"""
Dungeon Master routes.
Generate narration for a campaign and read back the DM's posts.
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storyquest.business.schemas import DMResponseRequest
from storyquest.business.dtos import StoryPostDTO, TurnDTO
from storyquest.business.models import User
from storyquest.shared.services.orm_service import get_db
from storyquest.shared.services.auth_service import get_current_user

from storyquest.api.services.dm_responses_service import (
    perform_create_dm_response,
    perform_take_turn,
    perform_create_introduction,
    perform_list_dm_responses,
    perform_get_dm_response
)

router = APIRouter(prefix="/campaigns/{campaign_id}", tags=["dm responses"])


@router.post("/dm-response", response_model=StoryPostDTO, status_code=201)
async def create_dm_response(
    campaign_id: int,
    request: DMResponseRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_create_dm_response(campaign_id, request, db, current_user)

@router.post("/turn", response_model=TurnDTO, status_code=201)
async def take_turn(
    campaign_id: int,
    request: DMResponseRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Store the player's input and the DM's reply in one step."""
    return await perform_take_turn(campaign_id, request, db, current_user)

@router.post("/introduction", response_model=StoryPostDTO, status_code=201)
async def create_introduction(
    campaign_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_create_introduction(campaign_id, db, current_user)

@router.get("/dm-response", response_model=List[StoryPostDTO])
async def list_dm_responses(
    campaign_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_list_dm_responses(campaign_id, db, current_user)

@router.get("/dm-response/{response_id}", response_model=StoryPostDTO)
async def get_dm_response(
    campaign_id: int,
    response_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_get_dm_response(campaign_id, response_id, db, current_user)
