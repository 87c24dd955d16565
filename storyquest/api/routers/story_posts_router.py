"""
Story post routes, nested under a campaign.
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storyquest.business.schemas import StoryPostCreate, StoryPostUpdate
from storyquest.business.dtos import StoryPostDTO
from storyquest.business.models import User
from storyquest.shared.services.orm_service import get_db
from storyquest.shared.services.auth_service import get_current_user

from storyquest.api.services.story_posts_service import (
    perform_create_story_post,
    perform_list_story_posts,
    perform_get_story_post,
    perform_update_story_post,
    perform_delete_story_post
)

router = APIRouter(prefix="/campaigns/{campaign_id}/story", tags=["story posts"])


@router.post("", response_model=StoryPostDTO, status_code=201)
async def create_story_post(
    campaign_id: int,
    post_data: StoryPostCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_create_story_post(campaign_id, post_data, db, current_user)

@router.get("", response_model=List[StoryPostDTO])
async def list_story_posts(
    campaign_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_list_story_posts(campaign_id, db, current_user)

@router.get("/{post_id}", response_model=StoryPostDTO)
async def get_story_post(
    campaign_id: int,
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_get_story_post(campaign_id, post_id, db, current_user)

@router.put("/{post_id}", response_model=StoryPostDTO)
async def update_story_post(
    campaign_id: int,
    post_id: int,
    post_data: StoryPostUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_update_story_post(campaign_id, post_id, post_data, db, current_user)

@router.delete("/{post_id}", response_model=dict)
async def delete_story_post(
    campaign_id: int,
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_delete_story_post(campaign_id, post_id, db, current_user)
