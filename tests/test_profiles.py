"""Profile create/update, reads and account deletion."""

import uuid

import pytest

from devconnect.modules.profiles.schemas import ProfileUpsert
from devconnect.modules.profiles.service import build_profile_fields, split_skills

PROFILE = {
    "status": "Developer",
    "skills": "node, react , css",
    "company": "Acme",
    "location": "Berlin",
    "twitter": "https://twitter.com/jane",
}


def test_split_skills_trims_and_keeps_order():
    assert split_skills("node, react , css") == ["node", "react", "css"]
    assert split_skills(" python,, fastapi ,") == ["python", "fastapi"]


def test_build_profile_fields_skips_empty_values():
    fields = build_profile_fields(ProfileUpsert(status="Dev", skills="go", company="", bio=None))
    assert fields == {"status": "Dev", "skills": ["go"]}


def test_build_profile_fields_collects_social_links():
    fields = build_profile_fields(ProfileUpsert(status="Dev", skills="go", youtube="yt", linkedin="li"))
    assert fields["social"] == {"youtube": "yt", "linkedin": "li"}


@pytest.mark.asyncio
async def test_me_without_profile(client, auth_headers):
    r = await client.get("/api/profile/me", headers=auth_headers)
    assert r.status_code == 400
    assert r.json() == {"msg": "There is no profile for this user"}


@pytest.mark.asyncio
async def test_create_profile(client, db, auth_headers):
    r = await client.post("/api/profile", json=PROFILE, headers=auth_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["skills"] == ["node", "react", "css"]
    assert body["status"] == "Developer"
    assert body["social"] == {"twitter": "https://twitter.com/jane"}
    assert body["experience"] == [] and body["education"] == []

    user = db.tables["users"][0]
    assert body["user"] == {"id": user["id"], "name": "Jane Doe", "avatar": user["avatar"]}
    assert db.tables["profiles"][0]["user_id"] == user["id"]


@pytest.mark.asyncio
async def test_create_profile_requires_status_and_skills(client, auth_headers):
    r = await client.post("/api/profile", json={"status": "", "company": "Acme"}, headers=auth_headers)
    assert r.status_code == 400
    assert {e["param"]: e["msg"] for e in r.json()["errors"]} == {
        "status": "Status is required",
        "skills": "Skills is required",
    }


@pytest.mark.asyncio
async def test_create_profile_requires_token(client):
    r = await client.post("/api/profile", json=PROFILE)
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_partial_update_keeps_other_fields(client, db, auth_headers):
    await client.post("/api/profile", json=PROFILE, headers=auth_headers)
    r = await client.post(
        "/api/profile",
        json={"status": "Senior Developer", "skills": "python", "bio": "hello"},
        headers=auth_headers,
    )
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "Senior Developer"
    assert body["skills"] == ["python"]
    assert body["bio"] == "hello"
    assert body["company"] == "Acme"
    assert body["location"] == "Berlin"
    assert body["social"] == {"twitter": "https://twitter.com/jane"}
    assert len(db.tables["profiles"]) == 1


@pytest.mark.asyncio
async def test_me_returns_profile_with_owner(client, auth_headers):
    await client.post("/api/profile", json=PROFILE, headers=auth_headers)
    r = await client.get("/api/profile/me", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["user"]["name"] == "Jane Doe"
    assert r.json()["company"] == "Acme"


@pytest.mark.asyncio
async def test_list_profiles(client, register_user):
    jane = {"x-auth-token": await register_user()}
    john = {"x-auth-token": await register_user(name="John", email="john@example.com")}
    await client.post("/api/profile", json=PROFILE, headers=jane)
    await client.post("/api/profile", json={"status": "Student", "skills": "c"}, headers=john)

    r = await client.get("/api/profile")
    assert r.status_code == 200
    names = sorted(p["user"]["name"] for p in r.json())
    assert names == ["Jane Doe", "John"]


@pytest.mark.asyncio
async def test_list_profiles_empty(client):
    r = await client.get("/api/profile")
    assert r.status_code == 200
    assert r.json() == []


@pytest.mark.asyncio
async def test_get_profile_by_user_id(client, db, auth_headers):
    await client.post("/api/profile", json=PROFILE, headers=auth_headers)
    user_id = db.tables["users"][0]["id"]
    r = await client.get(f"/api/profile/user/{user_id}")
    assert r.status_code == 200
    assert r.json()["user"]["id"] == user_id


@pytest.mark.asyncio
async def test_get_profile_by_unknown_user_id(client):
    r = await client.get(f"/api/profile/user/{uuid.uuid4()}")
    assert r.status_code == 400
    assert r.json() == {"msg": "Profile not found"}


@pytest.mark.asyncio
async def test_get_profile_by_malformed_id_is_not_found(client, db):
    r = await client.get("/api/profile/user/not-a-valid-id")
    assert r.status_code == 400
    assert r.json() == {"msg": "Profile not found"}
    assert ("profiles", "select") not in db.calls


@pytest.mark.asyncio
async def test_delete_profile_removes_user_too(client, db, auth_headers):
    await client.post("/api/profile", json=PROFILE, headers=auth_headers)
    r = await client.delete("/api/profile", headers=auth_headers)
    assert r.status_code == 200
    assert r.json() == {"msg": "User deleted"}
    assert db.tables["profiles"] == []
    assert db.tables["users"] == []


@pytest.mark.asyncio
async def test_delete_leaves_other_accounts(client, db, auth_headers, register_user):
    await register_user(name="John", email="john@example.com")
    await client.delete("/api/profile", headers=auth_headers)
    assert [u["email"] for u in db.tables["users"]] == ["john@example.com"]


@pytest.mark.asyncio
async def test_blank_skill_list_is_rejected(client, db, auth_headers):
    r = await client.post("/api/profile", json={"status": "Dev", "skills": " , "}, headers=auth_headers)
    assert r.status_code == 400
    assert r.json()["errors"] == [{"param": "skills", "msg": "Skills is required", "location": "body"}]
    assert not db.tables.get("profiles")
