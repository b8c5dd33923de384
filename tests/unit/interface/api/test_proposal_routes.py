"""Unit tests for the proposal HTTP routes."""

from council.config import AuthSettings
from council.domain.service import JWTService
from council.domain.value import MAX_RECORD_KEY, Principal
from tests.conftest import auth_headers
from tests.harness import create_client_fixture

client = create_client_fixture()

ALICE = auth_headers("alice")
BOB = auth_headers("bob")
CAROL = auth_headers("carol")


def _create(client, proposal_id=1, headers=ALICE, description="D", is_active=True):
    return client.put(
        f"/proposals/{proposal_id}",
        json={"description": description, "is_active": is_active},
        headers=headers,
    )


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestProposalRoutes:
    """Tests for proposal routes."""

    def test_create_returns_proposal(self, client):
        response = _create(client)

        assert response.status_code == 200
        body = response.json()
        assert body == {
            "proposal_id": 1,
            "description": "D",
            "approve": 0,
            "reject": 0,
            "pass": 0,
            "is_active": True,
            "voted": [],
            "owner": "alice",
        }

    def test_mutations_require_authentication(self, client):
        assert _create(client, headers={}).status_code == 401
        assert client.post("/proposals/1/close").status_code == 401
        assert (
            client.post("/proposals/1/votes", json={"choice": "Approve"}).status_code
            == 401
        )

    def test_invalid_token_is_unauthenticated(self, client):
        response = _create(client, headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401

    def test_cookie_token_identifies_caller(self, client):
        token = JWTService(AuthSettings()).create_token(Principal("dave"))
        response = _create(client, headers={"Cookie": f"auth_token={token}"})

        assert response.status_code == 200
        assert response.json()["owner"] == "dave"

    def test_vote_flow_and_error_kinds(self, client):
        _create(client)

        assert (
            client.post(
                "/proposals/1/votes", json={"choice": "Approve"}, headers=BOB
            ).status_code
            == 204
        )

        repeat = client.post(
            "/proposals/1/votes", json={"choice": "Approve"}, headers=BOB
        )
        assert repeat.status_code == 409
        assert repeat.json()["error"] == "AlreadyVoted"

        stranger = client.post("/proposals/1/close", headers=CAROL)
        assert stranger.status_code == 403
        assert stranger.json()["error"] == "AccessRejected"

        assert client.post("/proposals/1/close", headers=ALICE).status_code == 204

        late = client.post(
            "/proposals/1/votes", json={"choice": "Reject"}, headers=CAROL
        )
        assert late.status_code == 409
        assert late.json()["error"] == "ProposalIsNotActive"

        body = client.get("/proposals/1").json()
        assert (body["approve"], body["reject"], body["pass"]) == (1, 0, 0)
        assert body["voted"] == ["bob"]
        assert body["is_active"] is False

    def test_edit_by_owner(self, client):
        _create(client)

        response = client.patch(
            "/proposals/1",
            json={"description": "Updated", "is_active": False},
            headers=ALICE,
        )

        assert response.status_code == 204
        assert client.get("/proposals/1").json()["description"] == "Updated"

    def test_unknown_proposal(self, client):
        response = client.get("/proposals/42")

        assert response.status_code == 404
        assert response.json() == {
            "error": "NoSuchProposal",
            "detail": "Proposal not found: 42",
        }

    def test_unknown_choice_is_rejected_at_boundary(self, client):
        _create(client)

        response = client.post(
            "/proposals/1/votes", json={"choice": "Maybe"}, headers=BOB
        )

        assert response.status_code == 422

    def test_ids_cover_full_u64_range(self, client):
        assert _create(client, proposal_id=MAX_RECORD_KEY).status_code == 200
        assert client.get(f"/proposals/{MAX_RECORD_KEY}").status_code == 200
        assert _create(client, proposal_id=MAX_RECORD_KEY + 1).status_code == 422
        assert _create(client, proposal_id=-1).status_code == 422

    def test_oversized_proposal(self, client):
        response = _create(client, description="x" * 6000)

        assert response.status_code == 413
        assert response.json()["error"] == "RecordTooLarge"
        assert client.get("/proposals/count").json() == {"count": 0}

    def test_count_and_list(self, client):
        for proposal_id in (5, 2, 9):
            _create(client, proposal_id=proposal_id)
        _create(client, proposal_id=2, headers=BOB)

        assert client.get("/proposals/count").json() == {"count": 3}

        page = client.get("/proposals", params={"offset": 0, "limit": 2}).json()
        assert [p["proposal_id"] for p in page["proposals"]] == [2, 5]
        assert page["proposals"][0]["owner"] == "bob"
        assert page["total"] == 3
