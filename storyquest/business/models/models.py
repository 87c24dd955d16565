from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, Boolean, Enum, JSON, UniqueConstraint
from sqlalchemy.orm import declarative_base, relationship
from datetime import datetime, timezone

from storyquest.constants import CAMPAIGN_STATUSES, AUTHOR_TYPES, USER_ROLES, ITEM_TYPES, DEFAULT_STATS

Base = declarative_base()


def utcnow():
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True)
    username = Column(String(50), unique=True, nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(Enum(*USER_ROLES, name="user_role"), nullable=False, default="player")
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
    campaigns = relationship("Campaign", back_populates="player", cascade="all, delete-orphan")

class Campaign(Base):
    __tablename__ = "campaigns"
    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    player_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    theme = Column(String(50), nullable=False)
    status = Column(Enum(*CAMPAIGN_STATUSES, name="campaign_status"), nullable=False, default="active")
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
    player = relationship("User", back_populates="campaigns")
    characters = relationship("Character", back_populates="campaign", cascade="all, delete-orphan")
    story_posts = relationship(
        "StoryPost",
        back_populates="campaign",
        cascade="all, delete-orphan",
        order_by="[StoryPost.created_at, StoryPost.id]"
    )
    items = relationship("Item", back_populates="campaign", cascade="all, delete-orphan")

class Character(Base):
    __tablename__ = "characters"
    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    race = Column(String(50), nullable=False)
    character_class = Column("class", String(50), nullable=False)  # 'class' is reserved in Python
    backstory = Column(Text, nullable=False, default="")
    campaign_id = Column(Integer, ForeignKey("campaigns.id"), nullable=False, index=True)
    stats = Column(JSON, nullable=False, default=lambda: dict(DEFAULT_STATS))
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
    campaign = relationship("Campaign", back_populates="characters")
    character_items = relationship("CharacterItem", back_populates="character", cascade="all, delete-orphan")

class StoryPost(Base):
    """
    One entry of a campaign's story log.
    author_type is 'player' for player input and 'system' for Dungeon Master narration.
    """
    __tablename__ = "story_posts"
    id = Column(Integer, primary_key=True)
    campaign_id = Column(Integer, ForeignKey("campaigns.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    author_type = Column(Enum(*AUTHOR_TYPES, name="story_post_author"), nullable=False)
    is_resolved = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
    campaign = relationship("Campaign", back_populates="story_posts")

class Item(Base):
    __tablename__ = "items"
    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    type = Column(Enum(*ITEM_TYPES, name="item_type"), nullable=False)
    properties = Column(JSON, nullable=False, default=dict)
    campaign_id = Column(Integer, ForeignKey("campaigns.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
    campaign = relationship("Campaign", back_populates="items")
    character_items = relationship("CharacterItem", back_populates="item", cascade="all, delete-orphan")

class CharacterItem(Base):
    """Inventory entry: an item held by a character."""
    __tablename__ = "character_items"
    __table_args__ = (UniqueConstraint("character_id", "item_id", name="uq_character_item"),)
    id = Column(Integer, primary_key=True)
    character_id = Column(Integer, ForeignKey("characters.id"), nullable=False, index=True)
    item_id = Column(Integer, ForeignKey("items.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False, default=1)
    equipped = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
    character = relationship("Character", back_populates="character_items")
    item = relationship("Item", back_populates="character_items")
