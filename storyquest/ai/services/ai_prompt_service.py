"""
Prompt construction for the Dungeon Master.
Collects campaign, character and story state into a structured dict and
flattens it into the text prompt sent to the LLM.
"""
import json
import logging

from storyquest.constants import (
    DEFAULT_STATS,
    THEME_CONTEXTS,
    DEFAULT_THEME_CONTEXT,
    DM_PROMPT_HEADER,
    DM_GUIDELINES,
    EMPTY_STORY_CONTEXT,
    CAMPAIGN_INTRO_PROMPT,
    ITEM_INTRODUCTION_PROMPT,
)
from storyquest.shared.helpers.memory_helper import get_recent_memories, fit_to_budget

logger = logging.getLogger(__name__)


def estimate_tokens(text: str) -> int:
    """Rough token estimate, four characters per token."""
    return len(text) // 4


def get_theme_context(theme: str) -> str:
    return THEME_CONTEXTS.get(theme, DEFAULT_THEME_CONTEXT)


def format_story_post(post) -> str:
    speaker = "Player" if post.author_type == "player" else "DM"
    return f"{speaker}: {post.content}"


def format_inventory(inventory) -> list[str]:
    """Render inventory entries as short labels, e.g. 'Rope (x2)' or 'Sword (equipped)'."""
    labels = []
    for entry in inventory or []:
        label = entry.item.name
        if entry.quantity and entry.quantity > 1:
            label += f" (x{entry.quantity})"
        if entry.equipped:
            label += " (equipped)"
        labels.append(label)
    return labels


def build_structured_context(campaign, character, story_posts, player_input, inventory, settings) -> dict:
    """
    Build the structured context the DM prompt is rendered from.

    story_posts must be in log order; only the most recent
    RECENT_POST_LIMIT of them are kept.
    """
    stats = dict(DEFAULT_STATS)
    stats.update(character.stats or {})

    recent_posts = get_recent_memories(list(story_posts), settings.get("RECENT_POST_LIMIT", 5))

    world_context = get_theme_context(campaign.theme)
    if campaign.description:
        world_context = f"{world_context} {campaign.description}"

    return {
        "Campaign": {
            "Name": campaign.name,
            "Description": campaign.description,
            "Theme": campaign.theme,
            "Status": campaign.status,
        },
        "WorldContext": world_context,
        "Character": {
            "Name": character.name,
            "Class": character.character_class,
            "Race": character.race,
            "Backstory": character.backstory or "",
            "Stats": stats,
            "Inventory": format_inventory(inventory),
        },
        "RecentStory": [format_story_post(p) for p in recent_posts],
        "PlayerInput": player_input.strip(),
    }


def flatten_dm_prompt(context: dict, settings: dict) -> str:
    """Render the structured context into the DM prompt, trimming story history to the token budget."""
    campaign = context["Campaign"]
    character = context["Character"]
    inventory = ", ".join(character["Inventory"]) if character["Inventory"] else "No items"

    story_lines = fit_to_budget(
        context.get("RecentStory", []),
        settings.get("STORY_TOKEN_BUDGET", 1000),
        estimate_tokens
    )
    dropped = len(context.get("RecentStory", [])) - len(story_lines)
    if dropped:
        logger.info(f"[flatten_dm_prompt] Dropped {dropped} older post(s) to fit the story budget")
    story_context = "\n".join(story_lines) if story_lines else EMPTY_STORY_CONTEXT

    return (
        f"{DM_PROMPT_HEADER}\n\n"
        f"Campaign: {campaign['Name']}\n"
        f"Campaign Description: {campaign['Description']}\n"
        f"Campaign Theme: {campaign['Theme']}\n"
        f"World Context: {context['WorldContext']}\n\n"
        f"Player Character: {character['Name']}\n"
        f"Character Class: {character['Class']}\n"
        f"Character Race: {character['Race']}\n"
        f"Character Backstory: {character['Backstory']}\n"
        f"Character Stats: {json.dumps(character['Stats'])}\n"
        f"Character Inventory: {inventory}\n\n"
        f"Recent Story Context:\n{story_context}\n\n"
        f"Player Input: {context['PlayerInput']}\n\n"
        f"{DM_GUIDELINES}\n"
    )


def build_campaign_intro_prompt(theme: str, name: str, description: str) -> str:
    return CAMPAIGN_INTRO_PROMPT.format(theme=theme, name=name, description=description)


def build_item_prompt(theme: str, character) -> str:
    return ITEM_INTRODUCTION_PROMPT.format(
        theme=theme,
        character_name=character.name,
        race=character.race,
        character_class=character.character_class
    )
