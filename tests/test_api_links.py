"""
Tests for the link bundle API endpoints.

Tests FastAPI routes with mocked ports injected through dependency
overrides. Validates status codes, response schemas and error mapping.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.domain.links.errors import DuplicateLinkBundleError, LinkBundleStoreError
from app.interfaces.links.dependencies import (
    get_identity_resolver,
    get_link_bundle_repository,
)
from app.main import app
from tests.factories import make_bundle

client = TestClient(app)

LINKS_URL = "/api/v1/links"


@pytest.fixture(autouse=True)
def overrides(repo: AsyncMock, identity: AsyncMock):
    """Wire the mocked store and identity into every route."""
    app.dependency_overrides[get_link_bundle_repository] = lambda: repo
    app.dependency_overrides[get_identity_resolver] = lambda: identity
    yield
    app.dependency_overrides.clear()


def _payload(**overrides) -> dict:
    body = {
        "vanityUrl": "samplelink",
        "description": "Sample bundle",
        "links": [{"id": "sample", "url": "https://example.com"}],
    }
    body.update(overrides)
    return body


class TestListAllEndpoint:
    """Tests for GET /api/v1/links."""

    def test_returns_every_bundle_without_identity(self, repo, identity) -> None:
        identity.resolve.return_value = None
        repo.list_all.return_value = [make_bundle("a"), make_bundle("b", bundle_id="2")]

        response = client.get(LINKS_URL)

        assert response.status_code == 200
        assert [b["vanityUrl"] for b in response.json()] == ["a", "b"]


class TestGetEndpoint:
    """Tests for GET /api/v1/links/{vanityUrl}."""

    def test_missing_bundle_returns_404(self) -> None:
        response = client.get(f"{LINKS_URL}/missing")

        assert response.status_code == 404
        assert response.json()["error"] == "Link bundle not found"

    def test_returns_bundle_in_camel_case(self, repo) -> None:
        repo.find_by_vanity_url.return_value = make_bundle()

        response = client.get(f"{LINKS_URL}/samplelink")

        assert response.status_code == 200
        body = response.json()
        assert body["vanityUrl"] == "samplelink"
        assert body["userId"] == "userhash"
        assert body["links"][0]["url"] == "https://example.com"

    def test_vanity_url_may_contain_slashes(self, repo) -> None:
        repo.find_by_vanity_url.return_value = make_bundle("team/links")

        response = client.get(f"{LINKS_URL}/team/links")

        assert response.status_code == 200
        repo.find_by_vanity_url.assert_awaited_once_with("team/links")


class TestUserEndpoint:
    """Tests for GET /api/v1/links/user/{userId}."""

    def test_anonymous_returns_401(self, identity) -> None:
        identity.resolve.return_value = None

        assert client.get(f"{LINKS_URL}/user/userhash").status_code == 401

    def test_other_user_returns_401(self) -> None:
        assert client.get(f"{LINKS_URL}/user/someoneelse").status_code == 401

    def test_no_bundles_returns_404(self) -> None:
        assert client.get(f"{LINKS_URL}/user/userhash").status_code == 404

    def test_returns_projection_without_links(self, repo) -> None:
        repo.find_by_user.return_value = [make_bundle()]

        response = client.get(f"{LINKS_URL}/user/userhash")

        assert response.status_code == 200
        assert response.json() == [
            {
                "userId": "userhash",
                "vanityUrl": "samplelink",
                "description": "Sample bundle",
                "linkCount": 1,
            }
        ]


class TestCreateEndpoint:
    """Tests for POST /api/v1/links."""

    def test_created_bundle_returns_201_with_location(self, repo) -> None:
        response = client.post(LINKS_URL, json=_payload(vanityUrl="Sample-Link"))

        assert response.status_code == 201
        assert response.json()["vanityUrl"] == "sample-link"
        assert response.headers["location"].endswith("/api/v1/links/sample-link")
        repo.create.assert_awaited_once()

    def test_unicode_vanity_url_gets_encoded_location(self, repo) -> None:
        repo.find_by_vanity_url.side_effect = lambda key: make_bundle(key)

        response = client.post(LINKS_URL, json=_payload(vanityUrl="日本/Reading"))

        assert response.status_code == 201
        location = response.headers["location"]
        assert location.endswith("/api/v1/links/%E6%97%A5%E6%9C%AC/reading")
        followed = client.get(location)
        assert followed.status_code == 200
        assert followed.json()["vanityUrl"] == "日本/reading"

    def test_reserved_user_prefix_returns_400(self, repo) -> None:
        response = client.post(LINKS_URL, json=_payload(vanityUrl="User/reading"))

        assert response.status_code == 400
        repo.create.assert_not_awaited()

    def test_caller_supplied_owner_is_ignored(self) -> None:
        response = client.post(LINKS_URL, json=_payload(userId="mallory"))

        assert response.json()["userId"] == "userhash"

    def test_generated_vanity_url(self) -> None:
        response = client.post(LINKS_URL, json=_payload(vanityUrl=""))

        vanity_url = response.json()["vanityUrl"]
        assert len(vanity_url) == 7
        assert vanity_url.isalnum()

    def test_empty_links_returns_400(self, repo) -> None:
        response = client.post(LINKS_URL, json=_payload(links=[]))

        assert response.status_code == 400
        repo.create.assert_not_awaited()

    def test_vanity_url_with_space_returns_400(self) -> None:
        assert client.post(LINKS_URL, json=_payload(vanityUrl="a b")).status_code == 400

    def test_duplicate_id_returns_409(self, repo) -> None:
        repo.create.side_effect = DuplicateLinkBundleError("dup1")
        repo.exists_by_id.return_value = True

        response = client.post(LINKS_URL, json=_payload(id="dup1"))

        assert response.status_code == 409

    def test_other_uniqueness_violation_returns_500(self, repo) -> None:
        repo.create.side_effect = DuplicateLinkBundleError("fresh", "vanity_url")

        response = client.post(LINKS_URL, json=_payload(id="fresh"))

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_store_failure_returns_500(self, repo) -> None:
        repo.create.side_effect = LinkBundleStoreError("create", "down")

        assert client.post(LINKS_URL, json=_payload()).status_code == 500


class TestDeleteEndpoint:
    """Tests for DELETE /api/v1/links/{vanityUrl}."""

    def test_owner_delete_returns_204(self, repo) -> None:
        repo.find_by_vanity_url.return_value = make_bundle()

        response = client.delete(f"{LINKS_URL}/samplelink")

        assert response.status_code == 204
        assert response.content == b""

    def test_anonymous_returns_401(self, repo, identity) -> None:
        identity.resolve.return_value = None
        repo.find_by_vanity_url.return_value = make_bundle()

        assert client.delete(f"{LINKS_URL}/samplelink").status_code == 401

    def test_missing_returns_404(self) -> None:
        assert client.delete(f"{LINKS_URL}/missing").status_code == 404

    def test_non_owner_returns_403(self, repo, identity) -> None:
        identity.resolve.return_value = "alice"
        repo.find_by_vanity_url.return_value = make_bundle("x", user_id="bob")

        assert client.delete(f"{LINKS_URL}/x").status_code == 403
        repo.delete.assert_not_awaited()

    def test_store_failure_returns_500(self, repo) -> None:
        repo.find_by_vanity_url.return_value = make_bundle()
        repo.delete.side_effect = LinkBundleStoreError("delete", "down")

        assert client.delete(f"{LINKS_URL}/samplelink").status_code == 500


class TestPatchEndpoint:
    """Tests for PATCH /api/v1/links/{vanityUrl}."""

    def test_owner_patch_returns_204(self, repo) -> None:
        repo.find_by_vanity_url.return_value = make_bundle()

        response = client.patch(
            f"{LINKS_URL}/samplelink",
            json=[{"op": "replace", "path": "/description", "value": "Updated"}],
        )

        assert response.status_code == 204
        assert repo.update.await_args.args[0].description == "Updated"

    def test_invalid_result_returns_400_with_details(self, repo) -> None:
        repo.find_by_vanity_url.return_value = make_bundle()

        response = client.patch(
            f"{LINKS_URL}/samplelink",
            json=[{"op": "replace", "path": "/userId", "value": "mallory"}],
        )

        assert response.status_code == 400
        assert response.json()["detail"] == [{"field": "user_id", "message": "Field is read-only"}]
        repo.update.assert_not_awaited()

    def test_move_without_source_returns_400(self, repo) -> None:
        repo.find_by_vanity_url.return_value = make_bundle()

        response = client.patch(
            f"{LINKS_URL}/samplelink",
            json=[{"op": "move", "from": None, "path": "/description"}],
        )

        assert response.status_code == 400
        repo.update.assert_not_awaited()

    def test_rename_into_reserved_user_prefix_returns_400(self, repo) -> None:
        repo.find_by_vanity_url.return_value = make_bundle()

        response = client.patch(
            f"{LINKS_URL}/samplelink",
            json=[{"op": "replace", "path": "/vanityUrl", "value": "user/samplelink"}],
        )

        assert response.status_code == 400
        assert response.json()["detail"] == [
            {"field": "vanity_url", "message": "Malformed vanity URL"}
        ]
        repo.update.assert_not_awaited()

    def test_anonymous_returns_401(self, repo, identity) -> None:
        identity.resolve.return_value = None
        repo.find_by_vanity_url.return_value = make_bundle()

        assert client.patch(f"{LINKS_URL}/samplelink", json=[]).status_code == 401

    def test_non_owner_returns_403(self, repo, identity) -> None:
        identity.resolve.return_value = "alice"
        repo.find_by_vanity_url.return_value = make_bundle("x", user_id="bob")

        assert client.patch(f"{LINKS_URL}/x", json=[]).status_code == 403

    def test_missing_returns_404(self) -> None:
        assert client.patch(f"{LINKS_URL}/missing", json=[]).status_code == 404

    def test_store_failure_returns_500(self, repo) -> None:
        repo.find_by_vanity_url.return_value = make_bundle()
        repo.update.side_effect = LinkBundleStoreError("update", "down")

        assert client.patch(f"{LINKS_URL}/samplelink", json=[]).status_code == 500


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self) -> None:
        response = client.get(f"{LINKS_URL}/missing")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["Cache-Control"] == "no-store"

    def test_oversized_body_returns_413(self) -> None:
        body = b"x" * (settings.max_request_size_bytes + 1)

        response = client.post(
            LINKS_URL, content=body, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 413


class TestLinkBundleLifecycle:
    """End-to-end flow against a real SQLite store, through the app lifespan."""

    def test_create_read_patch_delete(self, tmp_path, monkeypatch) -> None:
        app.dependency_overrides.clear()
        monkeypatch.setattr(
            settings, "database_url", f"sqlite+aiosqlite:///{tmp_path / 'api.db'}"
        )
        alice = {settings.identity_header: "alice@example.com"}
        bob = {settings.identity_header: "bob@example.com"}

        with TestClient(app) as live:
            created = live.post(LINKS_URL, json=_payload(vanityUrl="Alice/Reading"), headers=alice)
            assert created.status_code == 201
            owner = created.json()["userId"]

            assert live.get(f"{LINKS_URL}/alice/reading").status_code == 200
            assert live.get(f"{LINKS_URL}/user/{owner}", headers=alice).json()[0]["linkCount"] == 1
            assert live.get(f"{LINKS_URL}/user/{owner}", headers=bob).status_code == 401

            again = live.post(LINKS_URL, json=_payload(id=created.json()["id"]), headers=alice)
            assert again.status_code == 409

            edit = [{"op": "replace", "path": "/description", "value": "Updated"}]
            assert live.patch(f"{LINKS_URL}/alice/reading", json=edit, headers=bob).status_code == 403
            assert live.patch(f"{LINKS_URL}/alice/reading", json=edit, headers=alice).status_code == 204
            assert live.get(f"{LINKS_URL}/alice/reading").json()["description"] == "Updated"

            assert live.delete(f"{LINKS_URL}/alice/reading").status_code == 401
            assert live.delete(f"{LINKS_URL}/alice/reading", headers=alice).status_code == 204
            assert live.get(f"{LINKS_URL}/alice/reading").status_code == 404

    def test_unicode_vanity_url_round_trips_through_store(self, tmp_path, monkeypatch) -> None:
        app.dependency_overrides.clear()
        monkeypatch.setattr(
            settings, "database_url", f"sqlite+aiosqlite:///{tmp_path / 'unicode.db'}"
        )
        alice = {settings.identity_header: "alice@example.com"}

        with TestClient(app) as live:
            created = live.post(LINKS_URL, json=_payload(vanityUrl="日本"), headers=alice)
            assert created.status_code == 201

            followed = live.get(created.headers["location"])
            assert followed.status_code == 200
            assert followed.json()["id"] == created.json()["id"]
