"""Tests for DM prompt construction."""

from types import SimpleNamespace

import pytest

from storyquest.ai.services.ai_prompt_service import (
    build_campaign_intro_prompt,
    build_item_prompt,
    build_structured_context,
    estimate_tokens,
    flatten_dm_prompt,
    format_inventory,
    get_theme_context,
)
from storyquest.shared.helpers.ai_settings import get_ai_settings
from storyquest.shared.helpers.memory_helper import fit_to_budget, get_recent_memories


def _campaign(**overrides):
    data = dict(name="Starfall", description="Adrift near a dying star", theme="sci-fi", status="active")
    data.update(overrides)
    return SimpleNamespace(**data)


def _character(**overrides):
    data = dict(name="Vex", character_class="Engineer", race="Human", backstory="", stats={"intelligence": 16})
    data.update(overrides)
    return SimpleNamespace(**data)


def _post(author_type, content):
    return SimpleNamespace(author_type=author_type, content=content)


def _entry(name, quantity=1, equipped=False):
    return SimpleNamespace(item=SimpleNamespace(name=name), quantity=quantity, equipped=equipped)


@pytest.fixture
def settings():
    return get_ai_settings({"RECENT_POST_LIMIT": 5, "STORY_TOKEN_BUDGET": 1000})


class TestHelpers:
    def test_estimate_tokens(self) -> None:
        assert estimate_tokens("abcdefgh") == 2
        assert estimate_tokens("") == 0

    def test_theme_context(self) -> None:
        assert "space travel" in get_theme_context("sci-fi")
        assert get_theme_context("unknown") == "A world of adventure and mystery."

    def test_recent_memories(self) -> None:
        assert get_recent_memories([1, 2, 3, 4], 2) == [3, 4]
        assert get_recent_memories([1, 2], None) == [1, 2]
        assert get_recent_memories([1, 2], 0) == []

    def test_fit_to_budget_keeps_newest_in_order(self) -> None:
        entries = ["a" * 40, "b" * 40, "c" * 40]
        assert fit_to_budget(entries, 20, estimate_tokens) == ["b" * 40, "c" * 40]

    def test_fit_to_budget_stops_at_first_overflow(self) -> None:
        entries = ["a", "b" * 400, "c"]
        assert fit_to_budget(entries, 10, estimate_tokens) == ["c"]

    def test_format_inventory(self) -> None:
        labels = format_inventory([_entry("Rope", quantity=2), _entry("Sword", equipped=True)])
        assert labels == ["Rope (x2)", "Sword (equipped)"]


class TestStructuredContext:
    def test_fields(self, settings) -> None:
        context = build_structured_context(
            _campaign(), _character(), [_post("system", "Welcome"), _post("player", "Hi")],
            "  I repair the engine.  ", [_entry("Wrench")], settings
        )
        assert context["Campaign"]["Name"] == "Starfall"
        assert context["WorldContext"].endswith("Adrift near a dying star")
        assert context["Character"]["Class"] == "Engineer"
        assert context["Character"]["Stats"]["intelligence"] == 16
        assert context["Character"]["Stats"]["strength"] == 10
        assert context["Character"]["Inventory"] == ["Wrench"]
        assert context["RecentStory"] == ["DM: Welcome", "Player: Hi"]
        assert context["PlayerInput"] == "I repair the engine."

    def test_only_recent_posts(self, settings) -> None:
        posts = [_post("player", f"post {i}") for i in range(8)]
        context = build_structured_context(_campaign(), _character(), posts, "go", [], settings)
        assert context["RecentStory"] == [f"Player: post {i}" for i in range(3, 8)]


class TestFlattenPrompt:
    def test_sections_in_order(self, settings) -> None:
        context = build_structured_context(
            _campaign(), _character(backstory="Exiled"), [_post("system", "The hull groans.")],
            "I check the reactor.", [], settings
        )
        prompt = flatten_dm_prompt(context, settings)
        assert prompt.startswith("You are the Dungeon Master for a D&D-inspired RPG game called StoryQuest.")
        markers = [
            "Campaign: Starfall",
            "Campaign Description:",
            "Campaign Theme: sci-fi",
            "World Context:",
            "Player Character: Vex",
            "Character Class: Engineer",
            "Character Race: Human",
            "Character Backstory: Exiled",
            "Character Stats: {",
            "Character Inventory: No items",
            "Recent Story Context:\nDM: The hull groans.",
            "Player Input: I check the reactor.",
            "Limit your response to 300-500 words.",
        ]
        positions = [prompt.index(m) for m in markers]
        assert positions == sorted(positions)

    def test_empty_story(self, settings) -> None:
        context = build_structured_context(_campaign(), _character(), [], "Hello", [], settings)
        assert "Recent Story Context:\nThis is the beginning of the adventure." in flatten_dm_prompt(context, settings)

    def test_story_trimmed_to_budget(self) -> None:
        settings = get_ai_settings({"RECENT_POST_LIMIT": 5, "STORY_TOKEN_BUDGET": 30})
        posts = [_post("player", "x" * 200), _post("system", "short and recent")]
        context = build_structured_context(_campaign(), _character(), posts, "Hello", [], settings)
        prompt = flatten_dm_prompt(context, settings)
        assert "DM: short and recent" in prompt
        assert "x" * 200 not in prompt

    def test_inventory_listed(self, settings) -> None:
        context = build_structured_context(
            _campaign(), _character(), [], "Hello", [_entry("Wrench"), _entry("Medkit", quantity=2)], settings
        )
        assert "Character Inventory: Wrench, Medkit (x2)" in flatten_dm_prompt(context, settings)


class TestTemplates:
    def test_campaign_intro(self) -> None:
        prompt = build_campaign_intro_prompt("horror", "Hollow Hill", "A cursed village")
        assert "horror" in prompt
        assert "Campaign: Hollow Hill" in prompt
        assert "A cursed village" in prompt

    def test_item_prompt(self) -> None:
        prompt = build_item_prompt("steampunk", _character())
        assert "steampunk campaign" in prompt
        assert "Vex, a Human Engineer" in prompt
