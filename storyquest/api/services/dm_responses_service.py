"""
Dungeon Master services.
Builds prompts from campaign state, calls the LLM and records the
narration as system story posts.
"""
import logging
from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from storyquest.business.schemas import DMResponseRequest
from storyquest.business.models import User, Character, StoryPost, CharacterItem
from storyquest.business.converters import story_post_to_dto
from storyquest.business.dtos import TurnDTO
from storyquest.shared.services.orm_service import get_db
from storyquest.shared.services.auth_service import verify_campaign_ownership, get_current_user
from storyquest.shared.helpers.ai_settings import get_ai_settings
from storyquest.ai.services.ai_prompt_service import (
    build_structured_context,
    flatten_dm_prompt,
    build_campaign_intro_prompt
)
from storyquest.api.ai_client_requests import ai_generate_text, LLMServiceError

logger = logging.getLogger(__name__)


async def generate_campaign_introduction(theme: str, name: str, description: str, settings: dict = None) -> str:
    """Ask the LLM for a campaign opening. Raises LLMServiceError on failure."""
    settings = settings or get_ai_settings()
    prompt = build_campaign_intro_prompt(theme, name, description)
    return await run_in_threadpool(
        ai_generate_text,
        prompt,
        temperature=settings["TEMPERATURE"],
        max_tokens=settings["INTRO_MAX_TOKENS"],
        model=settings["MODEL"]
    )


def _get_campaign_character(campaign_id: int, character_id: int, db: Session) -> Character:
    character = db.query(Character).filter(
        Character.id == character_id,
        Character.campaign_id == campaign_id
    ).first()
    if not character:
        raise HTTPException(status_code=404, detail="Character not found in this campaign")
    return character


def _get_context_posts(campaign_id: int, limit: int, db: Session):
    """Most recent posts of the campaign, returned in log order."""
    posts = db.query(StoryPost).filter(StoryPost.campaign_id == campaign_id).order_by(
        StoryPost.created_at.desc(), StoryPost.id.desc()
    ).limit(limit).all()
    return list(reversed(posts))


async def _generate_dm_text(campaign, character, player_input: str, db: Session) -> str:
    settings = get_ai_settings()
    story_posts = _get_context_posts(campaign.id, settings["CONTEXT_POST_LIMIT"], db)
    inventory = db.query(CharacterItem).filter(CharacterItem.character_id == character.id).all()

    context = build_structured_context(campaign, character, story_posts, player_input, inventory, settings)
    prompt = flatten_dm_prompt(context, settings)
    return await run_in_threadpool(
        ai_generate_text,
        prompt,
        temperature=settings["TEMPERATURE"],
        max_tokens=settings["MAX_TOKENS"],
        model=settings["MODEL"]
    )


async def perform_create_dm_response(
    campaign_id: int,
    request: DMResponseRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Generate the DM's answer to a player input and store it as a system post.
    Nothing is stored if the LLM call fails.
    """
    campaign = verify_campaign_ownership(campaign_id, current_user.id, db)
    character = _get_campaign_character(campaign_id, request.character_id, db)

    try:
        text = await _generate_dm_text(campaign, character, request.player_input, db)
    except LLMServiceError as e:
        logger.error(f"[perform_create_dm_response] Campaign {campaign_id}: {e}")
        raise HTTPException(status_code=502, detail="Failed to generate DM response")

    post = StoryPost(campaign_id=campaign_id, content=text, author_type="system", is_resolved=False)
    db.add(post)
    db.commit()
    db.refresh(post)
    return story_post_to_dto(post)


async def perform_take_turn(
    campaign_id: int,
    request: DMResponseRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Record the player's input as a player post together with the DM's reply.
    The reply is generated before anything is written, so a failed LLM call stores nothing.
    """
    campaign = verify_campaign_ownership(campaign_id, current_user.id, db)
    character = _get_campaign_character(campaign_id, request.character_id, db)

    try:
        text = await _generate_dm_text(campaign, character, request.player_input, db)
    except LLMServiceError as e:
        logger.error(f"[perform_take_turn] Campaign {campaign_id}: {e}")
        raise HTTPException(status_code=502, detail="Failed to generate DM response")

    player_post = StoryPost(
        campaign_id=campaign_id,
        content=request.player_input,
        author_type="player",
        is_resolved=True
    )
    dm_post = StoryPost(campaign_id=campaign_id, content=text, author_type="system", is_resolved=False)
    db.add(player_post)
    db.add(dm_post)
    db.commit()
    db.refresh(player_post)
    db.refresh(dm_post)
    return TurnDTO(player_post=story_post_to_dto(player_post), dm_post=story_post_to_dto(dm_post))


async def perform_create_introduction(
    campaign_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    campaign = verify_campaign_ownership(campaign_id, current_user.id, db)
    try:
        text = await generate_campaign_introduction(campaign.theme, campaign.name, campaign.description)
    except LLMServiceError as e:
        logger.error(f"[perform_create_introduction] Campaign {campaign_id}: {e}")
        raise HTTPException(status_code=502, detail="Failed to generate campaign introduction")

    post = StoryPost(campaign_id=campaign_id, content=text, author_type="system", is_resolved=True)
    db.add(post)
    db.commit()
    db.refresh(post)
    return story_post_to_dto(post)


async def perform_list_dm_responses(
    campaign_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    verify_campaign_ownership(campaign_id, current_user.id, db)
    posts = db.query(StoryPost).filter(
        StoryPost.campaign_id == campaign_id,
        StoryPost.author_type == "system"
    ).order_by(StoryPost.created_at, StoryPost.id).all()
    return [story_post_to_dto(p) for p in posts]


async def perform_get_dm_response(
    campaign_id: int,
    response_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    verify_campaign_ownership(campaign_id, current_user.id, db)
    post = db.query(StoryPost).filter(
        StoryPost.id == response_id,
        StoryPost.campaign_id == campaign_id,
        StoryPost.author_type == "system"
    ).first()
    if not post:
        raise HTTPException(status_code=404, detail="DM response not found")
    return story_post_to_dto(post)
