"""Unit tests for request span attributes."""

from voteledger.interface.api.routes.votes import CastVoteBody
from voteledger.util.observability import _vote_request_attributes


class TestVoteRequestAttributes:
    """Tests for the FastAPI request attributes mapper."""

    def test_keeps_target_and_drops_credentials(self):
        # Arrange
        attributes = {
            "values": {
                "kind": "post",
                "content_id": 7,
                "auth_token": "secret-cookie",
                "authorization": "Bearer secret-header",
            },
            "errors": [],
        }

        # Act
        result = _vote_request_attributes(None, attributes)

        # Assert
        assert result == {"kind": "post", "content_id": 7}

    def test_reads_target_from_cast_body(self):
        body = CastVoteBody(content_type="comment", content_id=3, vote_type=-1)

        result = _vote_request_attributes(None, {"values": {"body": body}})

        assert result == {"content_type": "comment", "content_id": 3}

    def test_keeps_validation_errors(self):
        errors = [{"loc": ["path", "content_id"], "msg": "not an int"}]

        result = _vote_request_attributes(None, {"values": {}, "errors": errors})

        assert result == {"errors": errors}
