"""API tests for the read-side users endpoints (me, rating, listing)."""

from uuid import uuid4

import pytest

from tests.shared.fixtures.database import TEST_UNRATED_VIDEO_ID, TEST_VIDEO_ID
from tests.shared.fixtures.users import (
    ADMIN_USERNAME,
    USER_EMAIL,
    USER_PASSWORD,
    USER_USERNAME,
    bearer,
    obtain_tokens,
)


class TestGetUserInformation:
    """Tests for GET /users/me."""

    def test_requires_authentication(self, test_client, users_url):
        response = test_client.get(f"{users_url}/me")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["code"] == "AUTHENTICATION_REQUIRED"

    def test_rejects_malformed_token(self, test_client, users_url):
        response = test_client.get(
            f"{users_url}/me",
            headers=bearer("not-a-jwt"),
        )

        assert response.status_code == 401

    def test_rejects_refresh_token(self, test_client, users_url):
        tokens = obtain_tokens(test_client, users_url, USER_USERNAME, USER_PASSWORD)

        response = test_client.get(
            f"{users_url}/me",
            headers=bearer(tokens["refresh_token"]),
        )

        assert response.status_code == 401

    def test_returns_caller(self, test_client, users_url, user_headers, seeded):
        response = test_client.get(f"{users_url}/me", headers=user_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == seeded.user_id
        assert data["username"] == USER_USERNAME
        assert data["email"] == USER_EMAIL
        assert data["displayNSFW"] is False
        assert data["role"] == "user"
        assert data["createdAt"] == "2024-01-02T00:00:00Z"

    def test_never_exposes_password(self, test_client, users_url, user_headers):
        response = test_client.get(f"{users_url}/me", headers=user_headers)

        data = response.json()
        assert "password" not in data
        assert "passwordHash" not in data
        assert "password_hash" not in data


class TestGetUserVideoRating:
    """Tests for GET /users/me/videos/{videoId}/rating."""

    def test_requires_authentication(self, test_client, users_url):
        response = test_client.get(
            f"{users_url}/me/videos/{TEST_VIDEO_ID}/rating",
        )

        assert response.status_code == 401

    def test_returns_existing_rating(self, test_client, users_url, user_headers):
        response = test_client.get(
            f"{users_url}/me/videos/{TEST_VIDEO_ID}/rating",
            headers=user_headers,
        )

        assert response.status_code == 200
        assert response.json() == {
            "videoId": str(TEST_VIDEO_ID),
            "rating": "like",
        }

    def test_unrated_video_is_none(self, test_client, users_url, user_headers):
        response = test_client.get(
            f"{users_url}/me/videos/{TEST_UNRATED_VIDEO_ID}/rating",
            headers=user_headers,
        )

        assert response.status_code == 200
        assert response.json()["rating"] == "none"

    def test_rating_is_per_user(self, test_client, users_url, admin_headers):
        """The admin never rated the video the regular user liked."""
        response = test_client.get(
            f"{users_url}/me/videos/{TEST_VIDEO_ID}/rating",
            headers=admin_headers,
        )

        assert response.json()["rating"] == "none"

    def test_invalid_video_id(self, test_client, users_url, user_headers):
        response = test_client.get(
            f"{users_url}/me/videos/not-a-uuid/rating",
            headers=user_headers,
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["errors"][0]["field"] == "videoId"

    def test_unknown_video(self, test_client, users_url, user_headers):
        response = test_client.get(
            f"{users_url}/me/videos/{uuid4()}/rating",
            headers=user_headers,
        )

        assert response.status_code == 404
        assert response.json()["code"] == "VIDEO_NOT_FOUND"


class TestListUsers:
    """Tests for GET /users."""

    def test_envelope_contains_total_and_data(self, test_client, users_url, seeded):
        response = test_client.get(users_url)

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == seeded.user_count
        assert len(body["data"]) == seeded.user_count

    def test_default_sort_is_newest_first(self, test_client, users_url):
        response = test_client.get(users_url)

        usernames = [user["username"] for user in response.json()["data"]]
        assert usernames == [USER_USERNAME, ADMIN_USERNAME]

    def test_sort_ascending_by_username(self, test_client, users_url):
        response = test_client.get(users_url, params={"sort": "username"})

        usernames = [user["username"] for user in response.json()["data"]]
        assert usernames == sorted(usernames)

    def test_pagination_window(self, test_client, users_url, seeded):
        response = test_client.get(
            users_url,
            params={"start": 1, "count": 1, "sort": "id"},
        )

        body = response.json()
        assert body["total"] == seeded.user_count
        assert [user["id"] for user in body["data"]] == [seeded.user_id]

    def test_items_do_not_expose_passwords(self, test_client, users_url):
        response = test_client.get(users_url)

        for user in response.json()["data"]:
            assert "password" not in user
            assert "passwordHash" not in user

    def test_invalid_sort(self, test_client, users_url):
        response = test_client.get(users_url, params={"sort": "email"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "sort"

    def test_count_above_maximum(self, test_client, users_url):
        response = test_client.get(users_url, params={"count": 101})

        assert response.status_code == 400

    def test_count_zero(self, test_client, users_url):
        response = test_client.get(users_url, params={"count": 0})

        assert response.status_code == 400

    def test_negative_start(self, test_client, users_url):
        response = test_client.get(users_url, params={"start": -1})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "start"

    def test_non_numeric_count(self, test_client, users_url):
        response = test_client.get(users_url, params={"count": "many"})

        assert response.status_code == 400

    @pytest.mark.parametrize(
        ("field", "value"),
        [("start", "1.0"), ("count", "2.0"), ("start", "1e2"), ("count", " 5")],
    )
    def test_fractional_or_padded_numbers_rejected(
        self,
        test_client,
        users_url,
        field,
        value,
    ):
        response = test_client.get(users_url, params={field: value})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == field

    def test_start_beyond_integer_range(self, test_client, users_url):
        response = test_client.get(
            users_url,
            params={"start": "99999999999999999999"},
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "start"

    def test_largest_start_returns_empty_page(self, test_client, users_url, seeded):
        response = test_client.get(users_url, params={"start": 2**31 - 1})

        assert response.status_code == 200
        assert response.json() == {"total": seeded.user_count, "data": []}


class TestHealth:
    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
