"""
Tests for the certification endpoints.
"""

from httpx import AsyncClient

from tests.factories import CertificationFactory


class TestCertifications:
    """/api/v1/certifications"""

    async def test_create_and_get(self, client: AsyncClient):
        data = CertificationFactory(name="Advanced Cardiac Life Support")
        created = await client.post("/api/v1/certifications", json=data)
        assert created.status_code == 201
        body = created.json()
        assert body["isActive"] is True

        resp = await client.get(f"/api/v1/certifications/{body['id']}")
        assert resp.json()["name"] == "Advanced Cardiac Life Support"

    async def test_filter_by_name(self, client: AsyncClient):
        await client.post("/api/v1/certifications", json=CertificationFactory(name="Basic Life Support"))
        await client.post("/api/v1/certifications", json=CertificationFactory(name="Pediatric Care"))
        body = (await client.get("/api/v1/certifications", params={"name": "life"})).json()
        assert [c["name"] for c in body["items"]] == ["Basic Life Support"]

    async def test_rename_to_taken_name(self, client: AsyncClient, sample_certification: dict):
        await client.post("/api/v1/certifications", json=CertificationFactory(name="Taken"))
        resp = await client.put(f"/api/v1/certifications/{sample_certification['id']}", json={"name": "TAKEN"})
        assert resp.status_code == 400

    async def test_soft_delete(self, client: AsyncClient, sample_certification: dict):
        assert (await client.delete(f"/api/v1/certifications/{sample_certification['id']}")).status_code == 200
        detail = (await client.get(f"/api/v1/certifications/{sample_certification['id']}")).json()
        assert detail["isActive"] is False

    async def test_null_active_flag_is_rejected(self, client: AsyncClient, sample_certification: dict):
        resp = await client.put(f"/api/v1/certifications/{sample_certification['id']}", json={"isActive": None})
        assert resp.status_code == 422
