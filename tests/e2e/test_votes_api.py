"""End-to-end tests for the votes API."""

from uuid import uuid4

import pytest
from dishka import make_async_container
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient

from voteledger.config import Settings
from voteledger.interface.api.app import create_app
from voteledger.util.di import (
    ProdApplicationProvider,
    ProdConfigProvider,
    ProdDomainProvider,
)
from voteledger.util.jwt import create_token
from tests.di import FailingCommitPersistenceProvider, build_test_container
from tests.harness import create_client_fixture

# In-memory persistence behind the real app
client = create_client_fixture()


def auth_headers(user_id=None) -> dict[str, str]:
    """Authorization header for a fresh (or given) user."""
    token = create_token(str(user_id or uuid4()), Settings().auth)
    return {"Authorization": f"Bearer {token}"}


def cast(client, headers, content_type="post", content_id=7, vote_type=1):
    return client.post(
        "/votes",
        json={
            "content_type": content_type,
            "content_id": content_id,
            "vote_type": vote_type,
        },
        headers=headers,
    )


class TestCastVote:
    """POST /votes."""

    def test_cast_requires_authentication(self, client):
        # Act
        response = client.post(
            "/votes", json={"content_type": "post", "content_id": 7, "vote_type": 1}
        )

        # Assert
        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication required to vote"

    def test_invalid_token_is_rejected(self, client):
        response = cast(client, {"Authorization": "Bearer not-a-token"})

        assert response.status_code == 401

    def test_cast_returns_counts_and_user_vote(self, client):
        # Act
        response = cast(client, auth_headers())

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "upvotes": 1,
            "downvotes": 0,
            "score": 1,
            "userVote": 1,
        }

    def test_toggle_and_flip(self, client):
        # Arrange
        headers = auth_headers()

        # Act & Assert
        assert cast(client, headers, vote_type=-1).json()["userVote"] == -1
        flipped = cast(client, headers, vote_type=1).json()
        assert flipped == {"upvotes": 1, "downvotes": 0, "score": 1, "userVote": 1}
        retracted = cast(client, headers, vote_type=1).json()
        assert retracted == {"upvotes": 0, "downvotes": 0, "score": 0, "userVote": 0}

    def test_token_in_cookie(self, client):
        # Arrange
        token = create_token(str(uuid4()), Settings().auth)
        client.cookies.set("auth_token", token)

        # Act
        response = cast(client, {}, content_type="article", content_id=3)

        # Assert
        assert response.status_code == 200
        assert response.json()["userVote"] == 1

    @pytest.mark.parametrize(
        "content_type, content_id, vote_type",
        [
            ("listing", 7, 1),
            ("post", 7, 0),
            ("post", 7, 2),
            ("post", 0, 1),
            ("post", -7, -1),
        ],
    )
    def test_invalid_input_is_bad_request(
        self, client, content_type, content_id, vote_type
    ):
        # Arrange
        headers = auth_headers()

        # Act
        response = cast(client, headers, content_type, content_id, vote_type)

        # Assert
        assert response.status_code == 400
        assert "detail" in response.json()
        assert client.get("/votes/post/7").json()["score"] == 0

    def test_malformed_body_is_rejected(self, client):
        response = client.post(
            "/votes", json={"content_type": "post"}, headers=auth_headers()
        )

        assert response.status_code == 422

    @pytest.mark.parametrize("vote_type", [True, False, "1", "-1", 1.0])
    def test_vote_type_must_be_a_json_integer(self, client, vote_type):
        # Act
        response = cast(client, auth_headers(), vote_type=vote_type)

        # Assert
        assert response.status_code == 422
        assert client.get("/votes/post/7").json() == {
            "upvotes": 0,
            "downvotes": 0,
            "score": 0,
        }


class TestGetTally:
    """GET /votes/{kind}/{id}."""

    def test_unvoted_item_has_zero_counts(self, client):
        response = client.get("/votes/comment/12345")

        assert response.status_code == 200
        assert response.json() == {"upvotes": 0, "downvotes": 0, "score": 0}

    def test_tally_is_public(self, client):
        # Arrange
        cast(client, auth_headers(), vote_type=1)
        cast(client, auth_headers(), vote_type=-1)
        cast(client, auth_headers(), vote_type=-1)

        # Act
        response = client.get("/votes/post/7")

        # Assert
        assert response.json() == {"upvotes": 1, "downvotes": 2, "score": -1}

    def test_unknown_kind_is_bad_request(self, client):
        response = client.get("/votes/listing/7")

        assert response.status_code == 400


class TestUserVote:
    """GET /votes/{kind}/{id}/user and GET /votes/{kind}/user."""

    def test_requires_authentication(self, client):
        response = client.get("/votes/post/7/user")

        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication required to read votes"

    def test_not_voted_is_zero(self, client):
        response = client.get("/votes/post/7/user", headers=auth_headers())

        assert response.status_code == 200
        assert response.json() == {"userVote": 0}

    def test_reports_own_vote_only(self, client):
        # Arrange
        alice, bob = uuid4(), uuid4()
        cast(client, auth_headers(alice), vote_type=-1)

        # Act & Assert
        assert client.get(
            "/votes/post/7/user", headers=auth_headers(alice)
        ).json() == {"userVote": -1}
        assert client.get("/votes/post/7/user", headers=auth_headers(bob)).json() == {
            "userVote": 0
        }

    def test_batch_lookup(self, client):
        # Arrange
        headers = auth_headers()
        cast(client, headers, content_type="comment", content_id=1, vote_type=1)
        cast(client, headers, content_type="comment", content_id=3, vote_type=-1)

        # Act
        response = client.get(
            "/votes/comment/user", params=[("ids", 1), ("ids", 2), ("ids", 3)],
            headers=headers,
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {"votes": {"1": 1, "2": 0, "3": -1}}


class TestWithdrawVote:
    """DELETE /votes/{kind}/{id}."""

    def test_requires_authentication(self, client):
        response = client.delete("/votes/post/7")

        assert response.status_code == 401

    def test_withdraw_removes_vote(self, client):
        # Arrange
        headers = auth_headers()
        cast(client, headers, vote_type=1)
        cast(client, auth_headers(), vote_type=1)

        # Act
        response = client.delete("/votes/post/7", headers=headers)

        # Assert
        assert response.status_code == 200
        assert response.json() == {"upvotes": 1, "downvotes": 0, "score": 1}
        assert client.get("/votes/post/7/user", headers=headers).json() == {
            "userVote": 0
        }

    def test_withdraw_without_vote_succeeds(self, client):
        response = client.delete("/votes/article/1", headers=auth_headers())

        assert response.status_code == 200
        assert response.json() == {"upvotes": 0, "downvotes": 0, "score": 0}


class TestReputation:
    """POST /votes/reputation/{user_id}."""

    def test_temperature_from_owned_content(self, client):
        # Arrange
        for _ in range(50):
            cast(client, auth_headers(), content_type="post", content_id=21)
        owner = uuid4()

        # Act
        response = client.post(
            f"/votes/reputation/{owner}",
            json={"content": [{"content_type": "post", "content_id": 21}]},
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "upvotes_received": 50,
            "downvotes_received": 0,
            "net_score": 50,
            "temperature": 37.0,
        }

    def test_no_content_is_baseline(self, client):
        response = client.post(f"/votes/reputation/{uuid4()}", json={"content": []})

        assert response.json()["temperature"] == 36.5


class TestHealth:
    """GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200


class TestAuthCookieName:
    """The session cookie is looked up under AUTH__COOKIE_NAME."""

    @pytest.fixture
    def renamed_cookie_client(self, monkeypatch):
        monkeypatch.setenv("AUTH__COOKIE_NAME", "ledger_session")
        with TestClient(create_app(build_test_container(with_fastapi=True))) as c:
            yield c

    def test_configured_cookie_authenticates(self, renamed_cookie_client):
        # Arrange
        token = create_token(str(uuid4()), Settings().auth)
        renamed_cookie_client.cookies.set("ledger_session", token)

        # Act
        response = cast(renamed_cookie_client, {})

        # Assert
        assert response.status_code == 200
        assert response.json()["userVote"] == 1

    def test_default_cookie_name_is_ignored(self, renamed_cookie_client):
        token = create_token(str(uuid4()), Settings().auth)
        renamed_cookie_client.cookies.set("auth_token", token)

        response = cast(renamed_cookie_client, {})

        assert response.status_code == 401


class TestStorageFailure:
    """A write that cannot be committed is never reported as a success."""

    @pytest.fixture
    def failing_client(self):
        container = make_async_container(
            ProdConfigProvider(),
            ProdDomainProvider(),
            ProdApplicationProvider(),
            FailingCommitPersistenceProvider(),
            FastapiProvider(),
        )
        with TestClient(create_app(container)) as c:
            yield c

    def test_cast_with_failed_commit_is_server_error(self, failing_client):
        # Act
        response = cast(failing_client, auth_headers())

        # Assert
        assert response.status_code == 500
        assert response.json() == {"detail": "Server error"}

    def test_withdraw_with_failed_commit_is_server_error(self, failing_client):
        response = failing_client.delete("/votes/post/7", headers=auth_headers())

        assert response.status_code == 500
        assert response.json() == {"detail": "Server error"}

    def test_reads_do_not_commit(self, failing_client):
        response = failing_client.get("/votes/post/7")

        assert response.status_code == 200
