"""
Dungeon Master tuning settings.
Values come from the environment (see config.py) and are handed to the
prompt builder as a plain dict so callers and tests can override them.
"""
from storyquest.config import (
    LLM_MODEL,
    DM_TEMPERATURE,
    DM_MAX_TOKENS,
    DM_INTRO_MAX_TOKENS,
    DM_ITEM_MAX_TOKENS,
    DM_CONTEXT_POST_LIMIT,
    DM_RECENT_POST_LIMIT,
    DM_STORY_TOKEN_BUDGET,
)


def get_ai_settings(overrides: dict = None) -> dict:
    settings = {
        'MODEL': LLM_MODEL,
        'TEMPERATURE': DM_TEMPERATURE,
        'MAX_TOKENS': DM_MAX_TOKENS,
        'INTRO_MAX_TOKENS': DM_INTRO_MAX_TOKENS,
        'ITEM_MAX_TOKENS': DM_ITEM_MAX_TOKENS,
        'CONTEXT_POST_LIMIT': DM_CONTEXT_POST_LIMIT,
        'RECENT_POST_LIMIT': DM_RECENT_POST_LIMIT,
        'STORY_TOKEN_BUDGET': DM_STORY_TOKEN_BUDGET,
    }
    if overrides:
        settings.update(overrides)
    return settings
