import pytest

pytestmark = pytest.mark.anyio

async def test_create_and_get_user(client):
    payload = {"name": "Alice", "email": "alice@example.com"}
    res = await client.post("/api/users", json=payload)
    assert res.status_code == 201
    data = res.json()
    assert data["name"] == "Alice"
    uid = data["id"]

    # get
    res = await client.get(f"/api/users/{uid}")
    assert res.status_code == 200
    assert res.json()["email"] == "alice@example.com"

    res = await client.get("/api/users")
    assert [u["id"] for u in res.json()] == [uid]

async def test_duplicate_email_is_rejected(client):
    payload = {"name": "Alice", "email": "alice@example.com"}
    assert (await client.post("/api/users", json=payload)).status_code == 201
    res = await client.post("/api/users", json=payload)
    assert res.status_code == 400
    assert res.json()["detail"] == "Email already registered"

async def test_invalid_user_body_is_bad_request(client):
    res = await client.post("/api/users", json={"name": "", "email": "not-an-email"})
    assert res.status_code == 400

async def test_get_missing_user(client):
    res = await client.get("/api/users/404")
    assert res.status_code == 404
    assert res.json()["detail"] == "User not found"

async def test_non_integer_user_id_is_bad_request(client):
    res = await client.get("/api/users/abc")
    assert res.status_code == 400

async def test_delete_user_cascades_to_projects_and_tasks(client):
    uid = (await client.post("/api/users", json={"name": "Bob", "email": "bob@example.com"})).json()["id"]
    pid = (await client.post(f"/api/users/{uid}/projects", json={"title": "Garden"})).json()["id"]
    tids = []
    for title in ("Dig", "Plant"):
        res = await client.post(f"/api/projects/{pid}/tasks", json={"title": title})
        tids.append(res.json()["id"])

    res = await client.delete(f"/api/users/{uid}")
    assert res.status_code == 204

    assert (await client.get(f"/api/users/{uid}")).status_code == 404
    assert (await client.get(f"/api/projects/{pid}")).status_code == 404
    for tid in tids:
        assert (await client.get(f"/api/tasks/{tid}")).status_code == 404
    assert (await client.get(f"/api/users/{uid}/projects")).json() == []

async def test_delete_missing_user(client):
    res = await client.delete("/api/users/999")
    assert res.status_code == 404

async def test_out_of_range_user_id_is_bad_request(client):
    assert (await client.get("/api/users/99999999999999999999")).status_code == 400
    assert (await client.delete("/api/users/99999999999999999999")).status_code == 400
    assert (await client.post("/api/users/0/projects", json={"title": "x"})).status_code == 400
