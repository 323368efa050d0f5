"""
Tests for the HTTP surface.
"""

from sqlalchemy.exc import OperationalError

from festival_scores.app import app
from festival_scores.core import get_session

ADMIN_AUTH = ("admin", "changeme")


class _UnreachableStore:
    """Session stand-in whose every query fails as if the database were down."""

    def exec(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("unable to open database file"))

    execute = exec


def _score_body(teams, **overrides):
    body = {
        "eventId": 1,
        "category": "junior",
        "isGroupEvent": False,
        "positions": [
            {"teamId": teams["A"], "participantName": "Ann", "position": 1, "points": 5},
            {"teamId": teams["B"], "participantName": "Bo", "position": 2, "points": 3},
            {"teamId": "oops", "position": 3, "points": 1},
        ],
        "remarks": "heats",
    }
    body.update(overrides)
    return body


class TestSystemAndAuth:
    """Tests for health and the admin gate."""

    def test_health(self, client):
        assert client.get("/health").json() == {"ok": True}

    def test_writes_require_admin(self, client, teams):
        assert client.post("/scores", json=_score_body(teams)).status_code == 401
        assert client.delete("/scores/1").status_code == 401
        assert client.post("/scores/publish", json={}).status_code == 401

    def test_bad_login(self, client):
        response = client.post("/auth/login", json={"username": "admin", "password": "nope"})
        assert response.status_code == 401

    def test_session_login_and_logout(self, client):
        client.post("/auth/login", json={"username": "admin", "password": "changeme"})
        assert client.get("/auth/me").json()["user"]["role"] == "admin"
        client.post("/auth/logout")
        assert client.get("/auth/me").json() == {"user": None}

    def test_basic_auth(self, client, teams):
        response = client.post("/scores", json=_score_body(teams), auth=ADMIN_AUTH)
        assert response.status_code == 201


class TestScoreEndpoints:
    """Tests for score CRUD and publishing."""

    def test_create(self, admin_client, teams):
        response = admin_client.post("/scores", json=_score_body(teams))
        assert response.status_code == 201
        data = response.json()
        assert data["category"] == "Junior"
        assert data["totalPoints"] == 8
        assert data["published"] is False
        assert len(data["positions"]) == 2
        assert data["positions"][0] == {
            "teamId": teams["A"],
            "participantName": "Ann",
            "position": 1,
            "points": 5,
        }
        assert data["createdAt"].endswith("Z")

    def test_create_ignores_client_total(self, admin_client, teams):
        data = admin_client.post("/scores", json=_score_body(teams, totalPoints=999)).json()
        assert data["totalPoints"] == 8

    def test_missing_event_id(self, admin_client, teams):
        body = _score_body(teams)
        del body["eventId"]
        response = admin_client.post("/scores", json=body)
        assert response.status_code == 422
        assert response.json()["detail"][0]["loc"][-1] == "eventId"

    def test_zero_rank_is_client_error(self, admin_client, teams):
        body = _score_body(teams, positions=[{"teamId": teams["A"], "position": 0, "points": 1}])
        response = admin_client.post("/scores", json=body)
        assert response.status_code == 400
        assert response.json()["detail"]["field"] == "positions[0].position"

    def test_group_clears_category(self, admin_client, teams):
        data = admin_client.post(
            "/scores", json=_score_body(teams, isGroupEvent=True, teamId=teams["A"])
        ).json()
        assert data["category"] is None
        assert data["teamId"] == teams["A"]

    def test_get_one(self, admin_client, teams):
        created = admin_client.post("/scores", json=_score_body(teams)).json()
        assert admin_client.get(f"/scores/{created['id']}").json()["id"] == created["id"]
        assert admin_client.get("/scores/9999").status_code == 404

    def test_update(self, admin_client, teams):
        created = admin_client.post("/scores", json=_score_body(teams)).json()
        response = admin_client.put(
            f"/scores/{created['id']}",
            json={
                "category": "senior",
                "positions": [{"teamId": teams["C"], "position": 1, "points": 7}],
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["totalPoints"] == 7
        assert data["category"] == "Senior"
        assert data["remarks"] == "heats"

    def test_update_missing(self, admin_client):
        assert admin_client.put("/scores/9999", json={"positions": []}).status_code == 404

    def test_delete_is_idempotent(self, admin_client, teams):
        created = admin_client.post("/scores", json=_score_body(teams)).json()
        assert admin_client.delete(f"/scores/{created['id']}").json() == {"ok": True}
        assert admin_client.delete(f"/scores/{created['id']}").json() == {"ok": True}
        assert admin_client.delete("/scores/9999").status_code == 200

    def test_list_filters(self, admin_client, teams):
        junior = admin_client.post("/scores", json=_score_body(teams)).json()
        senior = admin_client.post(
            "/scores", json=_score_body(teams, category="Senior", published=True)
        ).json()

        ids = [s["id"] for s in admin_client.get("/scores").json()]
        assert ids == [senior["id"], junior["id"]]
        assert [s["id"] for s in admin_client.get("/scores?category=Junior").json()] == [junior["id"]]
        assert len(admin_client.get("/scores?category=All").json()) == 2
        assert [s["id"] for s in admin_client.get("/scores?published=true").json()] == [senior["id"]]
        assert [s["id"] for s in admin_client.get("/scores?published=false").json()] == [junior["id"]]

    def test_publish_all_drafts(self, admin_client, teams):
        admin_client.post("/scores", json=_score_body(teams))
        admin_client.post("/scores", json=_score_body(teams))
        admin_client.post("/scores", json=_score_body(teams, published=True))

        response = admin_client.post("/scores/publish", json={})
        assert response.json() == {"ok": True, "matched": 2, "modified": 2, "published": True}
        assert admin_client.get("/scores?published=false").json() == []

    def test_publish_selected(self, admin_client, teams):
        first = admin_client.post("/scores", json=_score_body(teams, published=True)).json()
        second = admin_client.post("/scores", json=_score_body(teams)).json()
        other = admin_client.post("/scores", json=_score_body(teams, published=True)).json()

        response = admin_client.post(
            "/scores/publish",
            json={"scoreIds": [first["id"], second["id"]], "published": False},
        )
        assert response.json() == {"ok": True, "matched": 2, "modified": 1, "published": False}
        published_ids = [s["id"] for s in admin_client.get("/scores?published=true").json()]
        assert published_ids == [other["id"]]


class TestLeaderboardEndpoints:
    """Tests for the standings endpoints."""

    def test_team_totals(self, admin_client, teams):
        admin_client.post("/scores", json=_score_body(teams))
        rows = admin_client.get("/scores/totals/teams").json()
        assert [(r["teamName"], r["totalPoints"], r["entries"]) for r in rows] == [
            ("Team A", 5, 1),
            ("Team B", 3, 1),
        ]
        assert admin_client.get("/scores/totals/teams?category=Senior").json() == []

    def test_group_totals(self, admin_client, teams):
        admin_client.post(
            "/scores",
            json=_score_body(
                teams,
                isGroupEvent=True,
                teamId=teams["A"],
                positions=[{"teamId": teams["A"], "position": 1, "points": 10}],
            ),
        )
        admin_client.post("/scores", json=_score_body(teams))
        rows = admin_client.get("/scores/totals/teams-group").json()
        assert rows == [
            {"teamId": teams["A"], "teamName": "Team A", "totalPoints": 10, "entries": 1}
        ]


class TestTeamEndpoints:
    """Tests for the team directory endpoints."""

    def test_create_and_participants(self, admin_client):
        response = admin_client.post(
            "/teams",
            json={
                "name": "Blue House",
                "captainName": "Dee",
                "participants": [
                    {"name": "Ann", "category": "junior", "chestNumber": "101"},
                    {"name": "Bo", "category": "Super Senior"},
                    {"name": "  "},
                ],
            },
        )
        assert response.status_code == 201
        team = response.json()
        assert [p["category"] for p in team["participants"]] == ["Junior", "Super-Senior"]

        juniors = admin_client.get(f"/teams/{team['id']}/participants?category=Junior").json()
        assert juniors == [{"name": "Ann", "category": "Junior", "chestNumber": "101"}]
        assert len(admin_client.get(f"/teams/{team['id']}/participants?category=All").json()) == 2

    def test_list_and_delete(self, admin_client, teams):
        names = [t["name"] for t in admin_client.get("/teams").json()]
        assert names == ["Team C", "Team B", "Team A"]
        assert admin_client.delete(f"/teams/{teams['C']}").json() == {"ok": True}
        assert admin_client.get(f"/teams/{teams['C']}").status_code == 404
        assert admin_client.delete(f"/teams/{teams['C']}").json() == {"ok": True}

    def test_missing_team(self, client):
        assert client.get("/teams/999/participants").status_code == 404


class TestStoreUnavailable:
    """Tests for the response when the database cannot be reached."""

    def test_read_returns_503(self, client):
        def _unreachable_session():
            yield _UnreachableStore()

        app.dependency_overrides[get_session] = _unreachable_session
        try:
            response = client.get("/scores")
            leaderboard = client.get("/scores/totals/teams-group")
        finally:
            app.dependency_overrides.pop(get_session, None)

        assert response.status_code == 503
        assert response.json() == {"detail": "Score store unavailable"}
        assert leaderboard.status_code == 503
