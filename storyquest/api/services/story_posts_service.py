"""
Story post services.
Story posts form the ordered log of a campaign.
"""
from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from storyquest.business.schemas import StoryPostCreate, StoryPostUpdate
from storyquest.business.models import User, StoryPost
from storyquest.business.converters import story_post_to_dto
from storyquest.shared.services.orm_service import get_db
from storyquest.shared.services.auth_service import verify_campaign_ownership, get_current_user


def _get_campaign_post(campaign_id: int, post_id: int, db: Session) -> StoryPost:
    post = db.query(StoryPost).filter(
        StoryPost.id == post_id,
        StoryPost.campaign_id == campaign_id
    ).first()
    if not post:
        raise HTTPException(status_code=404, detail="Story post not found")
    return post

async def perform_create_story_post(
    campaign_id: int,
    post_data: StoryPostCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    verify_campaign_ownership(campaign_id, current_user.id, db)
    post = StoryPost(
        campaign_id=campaign_id,
        content=post_data.content,
        author_type=post_data.author_type,
        is_resolved=post_data.is_resolved
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    return story_post_to_dto(post)

async def perform_list_story_posts(
    campaign_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    verify_campaign_ownership(campaign_id, current_user.id, db)
    posts = db.query(StoryPost).filter(StoryPost.campaign_id == campaign_id).order_by(
        StoryPost.created_at, StoryPost.id
    ).all()
    return [story_post_to_dto(p) for p in posts]

async def perform_get_story_post(
    campaign_id: int,
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    verify_campaign_ownership(campaign_id, current_user.id, db)
    return story_post_to_dto(_get_campaign_post(campaign_id, post_id, db))

async def perform_update_story_post(
    campaign_id: int,
    post_id: int,
    post_data: StoryPostUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    verify_campaign_ownership(campaign_id, current_user.id, db)
    post = _get_campaign_post(campaign_id, post_id, db)

    for field, value in post_data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(post, field, value)
    db.commit()
    db.refresh(post)
    return story_post_to_dto(post)

async def perform_delete_story_post(
    campaign_id: int,
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    verify_campaign_ownership(campaign_id, current_user.id, db)
    post = _get_campaign_post(campaign_id, post_id, db)
    db.delete(post)
    db.commit()
    return {"message": "Story post removed"}
