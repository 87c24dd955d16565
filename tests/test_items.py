"""Tests for items, inventory assignment and item generation."""

from unittest.mock import patch

from storyquest.api.ai_client_requests import LLMServiceError
from storyquest.api.services.items_service import extract_item_name

LLM_TARGET = "storyquest.api.services.items_service.ai_generate_text"


class TestExtractItemName:
    def test_first_line_cleaned(self) -> None:
        assert extract_item_name("**Frost-Touched Blade!**\nA cold sword.") == "Frost-Touched Blade"

    def test_empty_falls_back(self) -> None:
        assert extract_item_name("") == "Mysterious Item"
        assert extract_item_name("***\nsomething") == "Mysterious Item"

    def test_truncated(self) -> None:
        assert len(extract_item_name("A" * 300)) == 100


class TestItemCrud:
    def test_create(self, client, item, campaign) -> None:
        assert item["type"] == "weapon"
        assert item["properties"] == {"damage": "1d8"}
        assert item["campaign_id"] == campaign["id"]

    def test_properties_default_empty(self, client, auth_headers, campaign) -> None:
        resp = client.post("/api/items", headers=auth_headers, json={
            "name": "Rope", "description": "Fifty feet of hemp", "type": "misc", "campaign_id": campaign["id"],
        })
        assert resp.status_code == 201
        assert resp.json()["properties"] == {}

    def test_invalid_type(self, client, auth_headers, campaign) -> None:
        resp = client.post("/api/items", headers=auth_headers, json={
            "name": "Rope", "description": "Hemp", "type": "food", "campaign_id": campaign["id"],
        })
        assert resp.status_code == 422

    def test_create_in_foreign_campaign(self, client, campaign, other_headers) -> None:
        resp = client.post("/api/items", headers=other_headers, json={
            "name": "Rope", "description": "Hemp", "type": "misc", "campaign_id": campaign["id"],
        })
        assert resp.status_code == 404

    def test_list_and_filter(self, client, auth_headers, campaign, item, other_headers) -> None:
        other = client.post("/api/campaigns", headers=auth_headers, json={
            "name": "Second Run", "description": "Another tale", "theme": "sci-fi",
        }).json()
        client.post("/api/items", headers=auth_headers, json={
            "name": "Blaster", "description": "Pew", "type": "weapon", "campaign_id": other["id"],
        })

        assert len(client.get("/api/items", headers=auth_headers).json()) == 2
        filtered = client.get("/api/items", headers=auth_headers, params={"campaign_id": campaign["id"]}).json()
        assert [i["id"] for i in filtered] == [item["id"]]
        assert client.get("/api/items", headers=other_headers).json() == []

    def test_get_update_delete(self, client, auth_headers, item) -> None:
        assert client.get(f"/api/items/{item['id']}", headers=auth_headers).json()["name"] == "Elven Bow"

        resp = client.put(f"/api/items/{item['id']}", headers=auth_headers,
                          json={"name": "Moonlit Bow", "properties": {"damage": "1d10"}})
        assert resp.json()["name"] == "Moonlit Bow"
        assert resp.json()["properties"] == {"damage": "1d10"}

        assert client.delete(f"/api/items/{item['id']}", headers=auth_headers).json() == {"message": "Item removed"}
        assert client.get(f"/api/items/{item['id']}", headers=auth_headers).status_code == 404

    def test_foreign_item(self, client, item, other_headers) -> None:
        assert client.get(f"/api/items/{item['id']}", headers=other_headers).status_code == 403
        assert client.delete(f"/api/items/{item['id']}", headers=other_headers).status_code == 403


class TestAssignment:
    def test_assign_and_unassign(self, client, auth_headers, character, item) -> None:
        url = f"/api/items/{item['id']}/character/{character['id']}"
        resp = client.post(url, headers=auth_headers, json={"quantity": 3})
        assert resp.status_code == 201
        assert resp.json()["quantity"] == 3
        assert resp.json()["equipped"] is False

        again = client.post(url, headers=auth_headers, json={})
        assert again.status_code == 400
        assert again.json()["detail"] == "Character already has this item"

        removed = client.delete(url, headers=auth_headers)
        assert removed.json() == {"message": "Item removed from character"}
        assert client.delete(url, headers=auth_headers).status_code == 404

    def test_concurrent_duplicate_assign(self, client, auth_headers, character, item) -> None:
        url = f"/api/items/{item['id']}/character/{character['id']}"
        assert client.post(url, headers=auth_headers, json={}).status_code == 201
        # Another request already holds the item, but this one missed it in its lookup
        with patch("storyquest.api.services.items_service._find_inventory_entry", return_value=None):
            resp = client.post(url, headers=auth_headers, json={})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Character already has this item"
        assert len(client.get(f"/api/characters/{character['id']}/items", headers=auth_headers).json()) == 1

    def test_assign_without_body(self, client, auth_headers, character, item) -> None:
        resp = client.post(f"/api/items/{item['id']}/character/{character['id']}", headers=auth_headers)
        assert resp.status_code == 201
        assert resp.json()["quantity"] == 1

    def test_character_from_other_campaign(self, client, auth_headers, item) -> None:
        other = client.post("/api/campaigns", headers=auth_headers, json={
            "name": "Other Tale", "description": "Elsewhere", "theme": "horror",
        }).json()
        stranger = client.post("/api/characters", headers=auth_headers, json={
            "name": "Mira", "class": "Rogue", "race": "Human", "campaign_id": other["id"],
        }).json()
        resp = client.post(f"/api/items/{item['id']}/character/{stranger['id']}", headers=auth_headers, json={})
        assert resp.status_code == 404

    def test_zero_quantity_rejected(self, client, auth_headers, character, item) -> None:
        resp = client.post(f"/api/items/{item['id']}/character/{character['id']}",
                           headers=auth_headers, json={"quantity": 0})
        assert resp.status_code == 422

    def test_deleting_item_clears_inventory(self, client, auth_headers, character, item) -> None:
        client.post(f"/api/items/{item['id']}/character/{character['id']}", headers=auth_headers, json={})
        client.delete(f"/api/items/{item['id']}", headers=auth_headers)
        assert client.get(f"/api/characters/{character['id']}/items", headers=auth_headers).json() == []


class TestGenerateItem:
    def test_generates_named_item(self, client, auth_headers, campaign, character) -> None:
        text = "Whisperleaf Cloak\nA cloak woven from leaves that never wilt."
        with patch(LLM_TARGET, return_value=text) as mock_generate:
            resp = client.post("/api/items/generate", headers=auth_headers, json={
                "campaign_id": campaign["id"], "character_id": character["id"], "type": "armor",
            })
        assert resp.status_code == 201
        body = resp.json()
        assert body["name"] == "Whisperleaf Cloak"
        assert body["description"] == text
        assert body["type"] == "armor"
        prompt = mock_generate.call_args[0][0]
        assert "Lyra" in prompt and "Elf Ranger" in prompt

    def test_default_type_is_misc(self, client, auth_headers, campaign, character) -> None:
        resp = client.post("/api/items/generate", headers=auth_headers, json={
            "campaign_id": campaign["id"], "character_id": character["id"],
        })
        assert resp.status_code == 201
        assert resp.json()["type"] == "misc"

    def test_llm_failure(self, client, auth_headers, campaign, character) -> None:
        with patch(LLM_TARGET, side_effect=LLMServiceError("boom")):
            resp = client.post("/api/items/generate", headers=auth_headers, json={
                "campaign_id": campaign["id"], "character_id": character["id"],
            })
        assert resp.status_code == 502
        assert client.get("/api/items", headers=auth_headers).json() == []
