"""
Campaign services.
Handles CRUD operations for a player's campaigns.
"""
import logging
from fastapi import Depends
from sqlalchemy.orm import Session

from storyquest.business.schemas import CampaignCreate, CampaignUpdate
from storyquest.business.models import User, Campaign, Character, StoryPost
from storyquest.business.converters import campaign_to_dto, campaign_to_detail_dto, character_to_dto
from storyquest.constants import THEME_INTROS, DEFAULT_INTRO
from storyquest.shared.services.orm_service import get_db
from storyquest.shared.services.auth_service import verify_campaign_ownership, get_owned_campaign, get_current_user
from storyquest.api.ai_client_requests import LLMServiceError
from storyquest.api.services.dm_responses_service import generate_campaign_introduction

logger = logging.getLogger(__name__)

async def perform_list_campaigns(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    campaigns = db.query(Campaign).filter(Campaign.player_id == current_user.id).order_by(
        Campaign.created_at.desc(), Campaign.id.desc()
    ).all()
    return [campaign_to_dto(c) for c in campaigns]

async def perform_create_campaign(
    campaign_data: CampaignCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Create a campaign and open it with an introduction post.
    Falls back to a fixed per-theme introduction when the LLM is unavailable.
    The introduction is generated before anything is written.
    """
    try:
        intro = await generate_campaign_introduction(
            campaign_data.theme, campaign_data.name, campaign_data.description
        )
    except LLMServiceError as e:
        logger.warning(f"[perform_create_campaign] Using fallback intro for '{campaign_data.name}': {e}")
        intro = THEME_INTROS.get(campaign_data.theme, DEFAULT_INTRO)

    campaign = Campaign(
        name=campaign_data.name,
        description=campaign_data.description,
        theme=campaign_data.theme,
        player_id=current_user.id,
        status="active"
    )
    campaign.story_posts.append(StoryPost(content=intro, author_type="system", is_resolved=True))
    db.add(campaign)
    db.commit()
    db.refresh(campaign)
    return campaign_to_dto(campaign)

async def perform_get_campaign(
    campaign_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get a campaign together with its story posts in log order."""
    campaign = verify_campaign_ownership(campaign_id, current_user.id, db)
    return campaign_to_detail_dto(campaign)

async def perform_update_campaign(
    campaign_id: int,
    campaign_data: CampaignUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    campaign = verify_campaign_ownership(campaign_id, current_user.id, db)

    for field, value in campaign_data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(campaign, field, value)
    db.commit()
    db.refresh(campaign)
    return campaign_to_dto(campaign)

async def perform_delete_campaign(
    campaign_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Delete a campaign along with its characters, story posts and items."""
    campaign = verify_campaign_ownership(campaign_id, current_user.id, db)
    db.delete(campaign)
    db.commit()
    logger.info(f"[perform_delete_campaign] Deleted campaign {campaign_id}")
    return {"message": "Campaign removed"}

async def perform_list_campaign_characters(
    campaign_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    get_owned_campaign(campaign_id, current_user.id, db)
    characters = db.query(Character).filter(Character.campaign_id == campaign_id).order_by(
        Character.created_at.desc(), Character.id.desc()
    ).all()
    return [character_to_dto(c, include_items=True) for c in characters]
