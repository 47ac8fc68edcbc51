"""
Tests for the major endpoints.
"""

from httpx import AsyncClient

from tests.factories import MajorFactory


class TestMajors:
    """/api/v1/majors"""

    async def test_create_and_list(self, client: AsyncClient):
        for name in ("Cardiology", "Dermatology", "Neurology"):
            resp = await client.post("/api/v1/majors", json=MajorFactory(name=name))
            assert resp.status_code == 201

        body = (await client.get("/api/v1/majors", params={"limit": 2, "offset": 2})).json()
        assert body["totalItems"] == 3
        assert body["totalPages"] == 2
        assert [m["name"] for m in body["items"]] == ["Neurology"]

    async def test_duplicate_name_ignores_case(self, client: AsyncClient):
        await client.post("/api/v1/majors", json=MajorFactory(name="Cardiology"))
        resp = await client.post("/api/v1/majors", json=MajorFactory(name="cardiology"))
        assert resp.status_code == 400

    async def test_update_and_soft_delete(self, client: AsyncClient, sample_major: dict):
        resp = await client.put(f"/api/v1/majors/{sample_major['id']}", json={"description": "Heart"})
        assert resp.status_code == 200
        assert resp.json()["description"] == "Heart"

        assert (await client.delete(f"/api/v1/majors/{sample_major['id']}")).status_code == 200
        inactive = (await client.get("/api/v1/majors", params={"is-active": "false"})).json()
        assert [m["id"] for m in inactive["items"]] == [sample_major["id"]]

    async def test_null_name_is_rejected(self, client: AsyncClient, sample_major: dict):
        resp = await client.put(f"/api/v1/majors/{sample_major['id']}", json={"name": None})
        assert resp.status_code == 422

    async def test_missing_major(self, client: AsyncClient):
        assert (await client.get("/api/v1/majors/999")).status_code == 404
        assert (await client.delete("/api/v1/majors/999")).status_code == 404
