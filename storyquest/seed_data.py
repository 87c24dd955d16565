from sqlalchemy.orm import Session

from storyquest.shared.services.orm_service import SessionLocal
from storyquest.shared.services.auth_service import get_password_hash
from storyquest.business.models import User, Campaign, Character, StoryPost, Item, CharacterItem

DEMO_USERNAME = "testuser"
DEMO_EMAIL = "test@example.com"
DEMO_PASSWORD = "password123"


def seed_demo_user(db: Session) -> User:
    user = db.query(User).filter_by(email=DEMO_EMAIL).first()
    if user:
        print(f"User {DEMO_USERNAME} already exists. Skipping user seeding.")
        return user
    user = User(
        username=DEMO_USERNAME,
        email=DEMO_EMAIL,
        password_hash=get_password_hash(DEMO_PASSWORD),
        role="player"
    )
    db.add(user)
    db.flush()
    print(f"Created user: {user.username}")
    return user


def seed_demo_campaign(db: Session, user: User):
    """Seed the Phandelver campaign with a character, opening posts and an equipped item."""
    if db.query(Campaign).filter_by(player_id=user.id, name="The Lost Mines of Phandelver").count() > 0:
        print("Demo campaign already exists. Skipping campaign seeding.")
        return

    campaign = Campaign(
        name="The Lost Mines of Phandelver",
        theme="medieval-fantasy",
        description="A classic D&D adventure for beginners",
        status="active",
        player_id=user.id
    )
    db.add(campaign)
    db.flush()
    print(f"Created campaign: {campaign.name}")

    character = Character(
        name="Thorin Oakenshield",
        race="Dwarf",
        character_class="Fighter",
        backstory="A dwarf warrior seeking to reclaim his homeland",
        campaign_id=campaign.id,
        stats={
            "strength": 16,
            "dexterity": 12,
            "constitution": 14,
            "intelligence": 10,
            "wisdom": 12,
            "charisma": 8
        }
    )
    db.add(character)
    print(f"Created character: {character.name}")

    db.add(StoryPost(
        campaign_id=campaign.id,
        content=(
            "Welcome to the Lost Mines of Phandelver! Your adventure begins in the small town of Phandalin, "
            "where rumors of a lost mine filled with riches have been circulating..."
        ),
        author_type="system",
        is_resolved=True
    ))
    db.add(StoryPost(
        campaign_id=campaign.id,
        content="Thorin approaches the tavern keeper and asks about the rumors of the lost mine.",
        author_type="player"
    ))
    print("Created opening story posts")

    item = Item(
        name="Dwarven Warhammer",
        description="A finely crafted warhammer with dwarven runes etched into the handle",
        type="weapon",
        properties={"damage": "1d10", "weight": 10, "value": 25},
        campaign_id=campaign.id
    )
    db.add(item)
    db.flush()
    db.add(CharacterItem(character_id=character.id, item_id=item.id, quantity=1, equipped=True))
    print(f"Created item: {item.name} (equipped by {character.name})")


def seed_all(db: Session = None):
    need_close = db is None
    db = db or SessionLocal()
    try:
        user = seed_demo_user(db)
        seed_demo_campaign(db, user)
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        if need_close:
            db.close()
