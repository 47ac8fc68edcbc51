"""
Tests for the patient endpoints.
"""

from httpx import AsyncClient

from tests.factories import PatientFactory


class TestPatients:
    """/api/v1/patients"""

    async def test_create_patient(self, client: AsyncClient):
        data = PatientFactory(allergy="Penicillin")
        resp = await client.post("/api/v1/patients", json=data)
        assert resp.status_code == 201
        body = resp.json()
        assert body["name"] == data["name"]
        assert body["allergy"] == "Penicillin"
        assert body["bloodGroup"] == "O+"
        assert body["isActive"] is True

    async def test_duplicate_email(self, client: AsyncClient):
        data = PatientFactory()
        await client.post("/api/v1/patients", json=data)
        resp = await client.post("/api/v1/patients", json=PatientFactory(email=data["email"]))
        assert resp.status_code == 400

    async def test_list_filters(self, client: AsyncClient):
        await client.post("/api/v1/patients", json=PatientFactory(name="Nguyen Van A", blood_group="A+"))
        await client.post("/api/v1/patients", json=PatientFactory(name="Tran Thi B", blood_group="B-"))

        body = (await client.get("/api/v1/patients", params={"name": "nguyen"})).json()
        assert [p["name"] for p in body["items"]] == ["Nguyen Van A"]

        body = (await client.get("/api/v1/patients", params={"blood-group": "b-"})).json()
        assert [p["name"] for p in body["items"]] == ["Tran Thi B"]

    async def test_update_and_soft_delete(self, client: AsyncClient):
        created = (await client.post("/api/v1/patients", json=PatientFactory())).json()
        resp = await client.put(f"/api/v1/patients/{created['id']}", json={"backgroundDisease": "Asthma"})
        assert resp.status_code == 200
        assert resp.json()["backgroundDisease"] == "Asthma"

        assert (await client.delete(f"/api/v1/patients/{created['id']}")).status_code == 200
        body = (await client.get("/api/v1/patients", params={"is-active": "true"})).json()
        assert body["totalItems"] == 0
        assert (await client.get(f"/api/v1/patients/{created['id']}")).json()["isActive"] is False

    async def test_null_for_required_field_is_rejected(self, client: AsyncClient):
        created = (await client.post("/api/v1/patients", json=PatientFactory())).json()
        for field in ("name", "isActive"):
            resp = await client.put(f"/api/v1/patients/{created['id']}", json={field: None})
            assert resp.status_code == 422, field

    async def test_missing_patient(self, client: AsyncClient):
        assert (await client.get("/api/v1/patients/999")).status_code == 404
        assert (await client.put("/api/v1/patients/999", json={"name": "x"})).status_code == 404
        assert (await client.delete("/api/v1/patients/999")).status_code == 404
