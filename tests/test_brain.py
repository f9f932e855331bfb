from unittest.mock import patch

from api import brain
from conftest import TestConstants
from models.share_link import ShareLink


def share(client, headers, enabled):
    return client.post("/api/v1/brain/share", json={"share": enabled}, headers=headers)


def test_status_without_link(client, auth_headers):
    response = client.get("/api/v1/brain/share", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"share": False}


def test_enable_share_creates_hash(client, auth_headers):
    response = share(client, auth_headers, True)

    assert response.status_code == 200
    body = response.json()
    assert len(body["hash"]) == 10
    assert body["hash"].isalnum()
    assert body["shareLink"] == f"{TestConstants.FRONTEND_URL}/?share={body['hash']}"


def test_enable_share_twice_returns_same_hash(client, auth_headers, db_session):
    first = share(client, auth_headers, True).json()
    second = share(client, auth_headers, True).json()

    assert first["hash"] == second["hash"]
    assert second["message"] == "Share link already exists"
    assert db_session.query(ShareLink).count() == 1


def test_status_reports_active_link(client, auth_headers):
    created = share(client, auth_headers, True).json()

    response = client.get("/api/v1/brain/share", headers=auth_headers)

    assert response.json()["share"] is True
    assert response.json()["hash"] == created["hash"]


def test_share_endpoints_require_token(client):
    assert client.get("/api/v1/brain/share").status_code == 401
    assert client.post("/api/v1/brain/share", json={"share": True}).status_code == 401


def test_shared_brain_is_public(client, make_user):
    alice = make_user("alice")
    client.post("/api/v1/content", json={"title": "Note", "type": "text", "body": "hi"}, headers=alice)
    hash = share(client, alice, True).json()["hash"]

    response = client.get(f"/api/v1/brain/{hash}")

    assert response.status_code == 200
    body = response.json()
    assert body["owner"] == "alice"
    assert [c["title"] for c in body["contents"]] == ["Note"]


def test_shared_brain_reports_owner_when_empty(client, auth_headers):
    hash = share(client, auth_headers, True).json()["hash"]

    response = client.get(f"/api/v1/brain/{hash}")

    assert response.json()["contents"] == []
    assert response.json()["owner"] == "alice"


def test_shared_brain_only_shows_owners_content(client, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    client.post("/api/v1/content", json={"title": "A", "type": "text", "body": "a"}, headers=alice)
    client.post("/api/v1/content", json={"title": "B", "type": "text", "body": "b"}, headers=bob)
    hash = share(client, alice, True).json()["hash"]

    contents = client.get(f"/api/v1/brain/{hash}").json()["contents"]

    assert [c["title"] for c in contents] == ["A"]


def test_users_get_distinct_hashes(client, make_user):
    alice_hash = share(client, make_user("alice"), True).json()["hash"]
    bob_hash = share(client, make_user("bob"), True).json()["hash"]

    assert alice_hash != bob_hash


def test_unknown_hash_is_not_found(client):
    response = client.get("/api/v1/brain/doesnotexist")

    assert response.status_code == 404
    assert response.json()["message"] == "Share link not found or expired"


def test_disable_share_revokes_hash(client, auth_headers):
    hash = share(client, auth_headers, True).json()["hash"]

    response = share(client, auth_headers, False)

    assert response.status_code == 200
    assert response.json()["message"] == "Share link removed successfully"
    assert client.get(f"/api/v1/brain/{hash}").status_code == 404
    assert client.get("/api/v1/brain/share", headers=auth_headers).json() == {"share": False}


def test_disable_share_without_link_is_noop(client, auth_headers):
    response = share(client, auth_headers, False)

    assert response.status_code == 200


def test_reenable_after_disable_issues_new_hash(client, auth_headers):
    old = share(client, auth_headers, True).json()["hash"]
    share(client, auth_headers, False)

    new = share(client, auth_headers, True).json()["hash"]

    assert new != old
    assert client.get(f"/api/v1/brain/{old}").status_code == 404
    assert client.get(f"/api/v1/brain/{new}").status_code == 200


def test_share_request_requires_flag(client, auth_headers):
    response = client.post("/api/v1/brain/share", json={}, headers=auth_headers)

    assert response.status_code == 400


def test_concurrent_enable_returns_winning_hash(app, client, auth_headers, db_session):
    user_id = client.get("/api/v1/me", headers=auth_headers).json()["id"]
    real_find_link = brain.find_link
    calls = []

    def find_link_after_competing_insert(db, uid):
        calls.append(uid)
        if len(calls) == 1:
            # another request commits its link between our lookup and our insert
            competitor = app.state.database.session()
            competitor.add(ShareLink(user_id=uid, hash="WINNERHASH"))
            competitor.commit()
            competitor.close()
            return None
        return real_find_link(db, uid)

    with patch("api.brain.find_link", side_effect=find_link_after_competing_insert):
        response = share(client, auth_headers, True)

    assert response.status_code == 200
    assert response.json()["hash"] == "WINNERHASH"
    assert response.json()["message"] == "Share link already exists"
    assert calls == [user_id, user_id]
    assert db_session.query(ShareLink).count() == 1
