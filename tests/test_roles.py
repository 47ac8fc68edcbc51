"""
Tests for the role endpoints.

Roles are stored upper-case and must be unique regardless of case.
"""

from httpx import AsyncClient

from tests.factories import RoleFactory


class TestCreateRole:
    """POST /api/v1/roles"""

    async def test_create_role_uppercases_name(self, client: AsyncClient):
        resp = await client.post("/api/v1/roles", json={"name": "  doctor "})
        assert resp.status_code == 201
        body = resp.json()
        assert body["name"] == "DOCTOR"
        assert "id" in body

    async def test_duplicate_name_is_rejected(self, client: AsyncClient):
        await client.post("/api/v1/roles", json={"name": "admin"})
        resp = await client.post("/api/v1/roles", json={"name": "ADMIN"})
        assert resp.status_code == 400

    async def test_empty_name_is_invalid(self, client: AsyncClient):
        resp = await client.post("/api/v1/roles", json={"name": ""})
        assert resp.status_code == 422


class TestListRoles:
    """GET /api/v1/roles"""

    async def test_list_defaults(self, client: AsyncClient):
        for _ in range(3):
            await client.post("/api/v1/roles", json=RoleFactory())
        resp = await client.get("/api/v1/roles")
        assert resp.status_code == 200
        body = resp.json()
        assert body["currentPage"] == 1
        assert body["pageSize"] == 20
        assert body["totalItems"] == 3
        assert body["totalPages"] == 1
        ids = [item["id"] for item in body["items"]]
        assert ids == sorted(ids)

    async def test_filter_by_name(self, client: AsyncClient):
        await client.post("/api/v1/roles", json={"name": "patient"})
        await client.post("/api/v1/roles", json={"name": "doctor"})
        resp = await client.get("/api/v1/roles", params={"name": " PATI "})
        body = resp.json()
        assert body["totalItems"] == 1
        assert body["items"][0]["name"] == "PATIENT"


class TestGetRole:
    """GET /api/v1/roles/{role_id}"""

    async def test_get_role(self, client: AsyncClient):
        created = (await client.post("/api/v1/roles", json=RoleFactory())).json()
        resp = await client.get(f"/api/v1/roles/{created['id']}")
        assert resp.status_code == 200
        assert resp.json() == created

    async def test_get_missing_role(self, client: AsyncClient):
        resp = await client.get("/api/v1/roles/999")
        assert resp.status_code == 404


class TestUpdateRole:
    """PUT /api/v1/roles/{role_id}"""

    async def test_rename_role(self, client: AsyncClient):
        created = (await client.post("/api/v1/roles", json={"name": "nurse"})).json()
        resp = await client.put(f"/api/v1/roles/{created['id']}", json={"id": created["id"], "name": "staff"})
        assert resp.status_code == 200
        assert resp.json()["name"] == "STAFF"

    async def test_id_mismatch(self, client: AsyncClient):
        created = (await client.post("/api/v1/roles", json={"name": "nurse"})).json()
        resp = await client.put(f"/api/v1/roles/{created['id']}", json={"id": created["id"] + 1, "name": "x"})
        assert resp.status_code == 400

    async def test_rename_to_existing_name(self, client: AsyncClient):
        await client.post("/api/v1/roles", json={"name": "admin"})
        created = (await client.post("/api/v1/roles", json={"name": "nurse"})).json()
        resp = await client.put(f"/api/v1/roles/{created['id']}", json={"id": created["id"], "name": "Admin"})
        assert resp.status_code == 400

    async def test_keeping_own_name_is_allowed(self, client: AsyncClient):
        created = (await client.post("/api/v1/roles", json={"name": "nurse"})).json()
        resp = await client.put(f"/api/v1/roles/{created['id']}", json={"id": created["id"], "name": "Nurse"})
        assert resp.status_code == 200

    async def test_update_missing_role(self, client: AsyncClient):
        resp = await client.put("/api/v1/roles/999", json={"id": 999, "name": "x"})
        assert resp.status_code == 404


class TestDeleteRole:
    """DELETE /api/v1/roles/{role_id}"""

    async def test_delete_role(self, client: AsyncClient):
        created = (await client.post("/api/v1/roles", json=RoleFactory())).json()
        resp = await client.delete(f"/api/v1/roles/{created['id']}")
        assert resp.status_code == 200
        assert resp.json() == {"message": "Success"}
        assert (await client.get(f"/api/v1/roles/{created['id']}")).status_code == 404

    async def test_delete_missing_role_is_bad_request(self, client: AsyncClient):
        resp = await client.delete("/api/v1/roles/999")
        assert resp.status_code == 400
