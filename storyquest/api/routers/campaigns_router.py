"""
Campaign routes.
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storyquest.business.schemas import CampaignCreate, CampaignUpdate
from storyquest.business.dtos import CampaignDTO, CampaignDetailDTO, CharacterDTO
from storyquest.business.models import User
from storyquest.shared.services.orm_service import get_db
from storyquest.shared.services.auth_service import get_current_user

from storyquest.api.services.campaigns_service import (
    perform_list_campaigns,
    perform_create_campaign,
    perform_get_campaign,
    perform_update_campaign,
    perform_delete_campaign,
    perform_list_campaign_characters
)

router = APIRouter(prefix="/campaigns", tags=["campaigns"])


@router.get("", response_model=List[CampaignDTO])
async def list_campaigns(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_list_campaigns(db, current_user)

@router.post("", response_model=CampaignDTO, status_code=201)
async def create_campaign(
    campaign_data: CampaignCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_create_campaign(campaign_data, db, current_user)

@router.get("/{campaign_id}", response_model=CampaignDetailDTO)
async def get_campaign(
    campaign_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_get_campaign(campaign_id, db, current_user)

@router.put("/{campaign_id}", response_model=CampaignDTO)
async def update_campaign(
    campaign_id: int,
    campaign_data: CampaignUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_update_campaign(campaign_id, campaign_data, db, current_user)

@router.delete("/{campaign_id}", response_model=dict)
async def delete_campaign(
    campaign_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_delete_campaign(campaign_id, db, current_user)

@router.get("/{campaign_id}/characters", response_model=List[CharacterDTO])
async def list_campaign_characters(
    campaign_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await perform_list_campaign_characters(campaign_id, db, current_user)
