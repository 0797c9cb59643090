"""Integration tests for project listing endpoints."""
import pytest

from tests.utils import auth_headers, create_bootcamp, create_project, visitor_headers


@pytest.mark.integration
class TestListProjectsEndpoint:

    def test_ranked_listing_with_vote_state(self, client, database, author_id):
        popular = create_project(database, author_id, title="Popular")
        quiet = create_project(database, author_id, title="Quiet")
        for visitor in ("a", "b"):
            client.post(f"/api/v1/projects/{popular}/vote", headers=visitor_headers(visitor))
        client.post(f"/api/v1/projects/{quiet}/vote", headers=visitor_headers("c"))

        response = client.get("/api/v1/projects", headers=visitor_headers("c"))

        assert response.status_code == 200
        data = response.json()
        assert [(p["title"], p["voteCount"], p["hasVoted"]) for p in data] == [
            ("Popular", 2, False),
            ("Quiet", 1, True),
        ]

    def test_camel_case_fields(self, client, project_id):
        project = client.get("/api/v1/projects", headers=visitor_headers("v1")).json()[0]

        assert {"id", "title", "isApproved", "voteCount", "hasVoted", "createdAt", "author"} <= set(project)
        assert project["author"] == {"id": "author1", "nickname": "Author"}

    def test_listing_mints_visitor_cookie(self, client, project_id):
        response = client.get("/api/v1/projects")

        assert response.status_code == 200
        assert response.cookies.get("visitorId")

    def test_unapproved_projects_hidden(self, client, project_id, pending_project_id):
        ids = [p["id"] for p in client.get("/api/v1/projects", headers=visitor_headers("v1")).json()]
        assert ids == [project_id]

    def test_bootcamp_filter(self, client, database, author_id):
        camp = create_bootcamp(database, "Autumn Camp")
        in_camp = create_project(database, author_id, title="In camp", bootcamp_id=camp)
        create_project(database, author_id, title="Elsewhere")

        response = client.get(f"/api/v1/projects?bootcampId={camp}", headers=visitor_headers("v1"))

        assert [p["id"] for p in response.json()] == [in_camp]

    def test_user_vote_seen_on_any_browser(self, client, project_id, voter_id):
        client.post(f"/api/v1/projects/{project_id}/vote", headers=auth_headers(voter_id, visitor_id="laptop"))

        data = client.get("/api/v1/projects", headers=auth_headers(voter_id, visitor_id="phone")).json()
        assert data[0]["hasVoted"] is True


@pytest.mark.integration
class TestGetProjectEndpoint:

    def test_get_project(self, client, project_id):
        response = client.get(f"/api/v1/projects/{project_id}", headers=visitor_headers("v1"))

        assert response.status_code == 200
        assert response.json()["id"] == project_id
        assert response.json()["hasVoted"] is False

    def test_missing_project(self, client):
        response = client.get("/api/v1/projects/missing", headers=visitor_headers("v1"))
        assert response.status_code == 404

    def test_unapproved_project_not_public(self, client, pending_project_id):
        response = client.get(f"/api/v1/projects/{pending_project_id}", headers=visitor_headers("v1"))
        assert response.status_code == 404


@pytest.mark.integration
class TestDeadlineAndHealth:

    def test_deadline_unset(self, client, monkeypatch):
        from showcase.core import config
        monkeypatch.setattr(config.settings, "VOTING_DEADLINE", None)

        response = client.get("/api/v1/deadline")

        assert response.status_code == 200
        assert response.json() == {
            "hasDeadline": False,
            "deadline": None,
            "isExpired": False,
            "timeRemainingMs": None,
        }

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["database"]["status"] == "connected"

    def test_response_headers(self, client):
        response = client.get("/health")

        assert response.headers["X-Request-ID"]
        assert response.headers["X-API-Version"]
