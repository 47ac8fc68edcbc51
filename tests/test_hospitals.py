"""
Tests for the hospital endpoints.

Covers create with code normalization, duplicate codes, filtered listing,
partial update and soft delete.
"""

from httpx import AsyncClient

from tests.factories import HospitalFactory


class TestCreateHospital:
    """POST /api/v1/hospitals"""

    async def test_create_hospital(self, client: AsyncClient):
        data = HospitalFactory(hospital_code=" hcm-01 ")
        resp = await client.post("/api/v1/hospitals", json=data)
        assert resp.status_code == 201
        body = resp.json()
        assert body["hospitalCode"] == "HCM-01"
        assert body["name"] == data["name"]
        assert body["isActive"] is True

    async def test_accepts_camel_case_body(self, client: AsyncClient):
        resp = await client.post("/api/v1/hospitals", json={"hospitalCode": "cm-1", "name": "Cho Ray"})
        assert resp.status_code == 201
        assert resp.json()["hospitalCode"] == "CM-1"

    async def test_duplicate_code(self, client: AsyncClient):
        await client.post("/api/v1/hospitals", json=HospitalFactory(hospital_code="DUP"))
        resp = await client.post("/api/v1/hospitals", json=HospitalFactory(hospital_code="dup"))
        assert resp.status_code == 400


class TestListHospitals:
    """GET /api/v1/hospitals"""

    async def test_filters(self, client: AsyncClient):
        await client.post("/api/v1/hospitals", json=HospitalFactory(name="Cho Ray", address="201B Nguyen Chi Thanh"))
        await client.post("/api/v1/hospitals", json=HospitalFactory(name="Bach Mai", address="78 Giai Phong"))

        by_name = (await client.get("/api/v1/hospitals", params={"name": "cho"})).json()
        assert [h["name"] for h in by_name["items"]] == ["Cho Ray"]

        by_address = (await client.get("/api/v1/hospitals", params={"address": "giai phong"})).json()
        assert [h["name"] for h in by_address["items"]] == ["Bach Mai"]

    async def test_filter_by_active_flag(self, client: AsyncClient, sample_hospital: dict):
        await client.post("/api/v1/hospitals", json=HospitalFactory())
        await client.delete(f"/api/v1/hospitals/{sample_hospital['id']}")

        inactive = (await client.get("/api/v1/hospitals", params={"is-active": "false"})).json()
        assert [h["id"] for h in inactive["items"]] == [sample_hospital["id"]]

        active = (await client.get("/api/v1/hospitals", params={"is-active": "true"})).json()
        assert active["totalItems"] == 1


class TestUpdateHospital:
    """PUT /api/v1/hospitals/{hospital_id}"""

    async def test_partial_update(self, client: AsyncClient, sample_hospital: dict):
        resp = await client.put(f"/api/v1/hospitals/{sample_hospital['id']}", json={"address": "New address"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["address"] == "New address"
        assert body["name"] == sample_hospital["name"]

    async def test_null_for_required_field_is_rejected(self, client: AsyncClient, sample_hospital: dict):
        url = f"/api/v1/hospitals/{sample_hospital['id']}"
        for field in ("name", "hospitalCode", "isActive"):
            resp = await client.put(url, json={field: None})
            assert resp.status_code == 422, field
        assert (await client.get(url)).json()["name"] == sample_hospital["name"]

    async def test_null_for_optional_field_clears_it(self, client: AsyncClient, sample_hospital: dict):
        resp = await client.put(f"/api/v1/hospitals/{sample_hospital['id']}", json={"address": None})
        assert resp.status_code == 200
        assert resp.json()["address"] is None

    async def test_change_to_taken_code(self, client: AsyncClient, sample_hospital: dict):
        await client.post("/api/v1/hospitals", json=HospitalFactory(hospital_code="TAKEN"))
        resp = await client.put(f"/api/v1/hospitals/{sample_hospital['id']}", json={"hospitalCode": "taken"})
        assert resp.status_code == 400

    async def test_update_missing(self, client: AsyncClient):
        assert (await client.put("/api/v1/hospitals/999", json={"name": "x"})).status_code == 404


class TestDeleteHospital:
    """DELETE /api/v1/hospitals/{hospital_id}"""

    async def test_delete_deactivates(self, client: AsyncClient, sample_hospital: dict):
        resp = await client.delete(f"/api/v1/hospitals/{sample_hospital['id']}")
        assert resp.status_code == 200
        detail = (await client.get(f"/api/v1/hospitals/{sample_hospital['id']}")).json()
        assert detail["isActive"] is False

    async def test_delete_missing(self, client: AsyncClient):
        assert (await client.delete("/api/v1/hospitals/999")).status_code == 404
