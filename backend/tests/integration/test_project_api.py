"""
Integration tests for the project endpoints (import, snapshot, migrate).
"""

from fastapi.testclient import TestClient

ROOM = {"kind": "room", "id": "r1", "length": 12, "width": 10, "height": 8, "door_count": 1, "window_count": 1}


def _legacy_export() -> dict:
    return {
        "id": "proj-legacy",
        "client_name": "Sam Homeowner",
        "floor_heights": [9],
        "rooms": [
            {"id": "r1", "length": 16, "width": 14, "ceiling_type": "cathhedral", "cathedral_peak_height": 13},
            {"id": "r2", "length": 10, "width": 10, "height": 8},
        ],
        "quote_builder": {"includeAllRooms": False, "roomsIncluded": ["r2"]},
    }


class TestImportEndpoint:
    def test_imports_and_prices_project(self, client: TestClient):
        response = client.post("/api/v1/projects/import", json=_legacy_export())
        assert response.status_code == 200
        data = response.json()
        assert data["quote_builder"] is None
        assert len(data["quotes"]) == 1
        assert data["quotes"][0]["quote_builder"]["included_entity_ids"] == ["r2"]
        assert data["rooms"][0]["height"] == 9
        assert data["rooms"][0]["ceiling_type"] == "cathedral"
        assert data["rooms"][1]["grand_total"] > 0
        assert data["quotes"][0]["totals"]["grand_total"] == data["rooms"][1]["grand_total"]

    def test_imports_app_export_format(self, client: TestClient):
        payload = {
            "clientInfo": {"name": "Pat Client"},
            "pricing": {"wallLaborPerSqFt": 0},
            "rooms": [
                {"name": "Den", "length": 12, "width": 10, "height": 8, "ceilingType": "flat",
                 "windowCount": 1, "doorCount": 1},
            ],
        }
        response = client.post("/api/v1/projects/import", json=payload)
        assert response.status_code == 200
        data = response.json()
        assert data["client_name"] == "Pat Client"
        assert data["id"]
        room = data["rooms"][0]
        assert room["door_count"] == 1
        assert 0 < room["grand_total"] < 1869

    def test_rejects_invalid_pricing(self, client: TestClient):
        payload = {"client_name": "x", "pricing": {"wallPaintPerGallon": -5}}
        response = client.post("/api/v1/projects/import", json=payload)
        assert response.status_code == 422
        assert response.json()["detail"].startswith("Invalid pricing data")

    def test_rejects_non_object(self, client: TestClient):
        response = client.post("/api/v1/projects/import", json=[1, 2, 3])
        assert response.status_code == 422
        assert isinstance(response.json()["detail"], str)

    def test_rejects_missing_client_name(self, client: TestClient):
        payload = _legacy_export()
        del payload["client_name"]
        response = client.post("/api/v1/projects/import", json=payload)
        assert response.status_code == 422
        assert "client name" in response.json()["detail"]

    def test_rejects_invalid_project(self, client: TestClient):
        response = client.post("/api/v1/projects/import", json={"client_name": "x", "rooms": "nope"})
        assert response.status_code == 422
        assert response.json()["detail"].startswith("Invalid project data")


class TestSnapshotEndpoint:
    def test_snapshot_freezes_prices(self, client: TestClient):
        project = {"id": "p", "client_name": "Jane", "rooms": [ROOM], "quotes": [{"id": "q"}], "active_quote_id": "q"}
        response = client.post("/api/v1/projects/snapshot", json=project)
        assert response.status_code == 200
        data = response.json()
        room = data["rooms"][0]
        assert room["grand_total"] == 1869
        assert room["gallon_usage"]["wall"] > 0
        assert data["quotes"][0]["totals"]["grand_total"] == 1869

    def test_snapshot_matches_preview(self, client: TestClient):
        preview = client.post("/api/v1/estimates/entity", json={"entity": ROOM}).json()
        saved = client.post(
            "/api/v1/projects/snapshot", json={"id": "p", "rooms": [ROOM]}
        ).json()["rooms"][0]
        assert saved["grand_total"] == preview["total_displayed"]
        assert saved["labor_total"] == preview["labor_displayed"]
        assert saved["materials_total"] == preview["materials_displayed"]

    def test_preview_uses_active_quote_like_snapshot(self, client: TestClient):
        project = {
            "id": "p",
            "rooms": [ROOM],
            "quotes": [
                {"id": "q0"},
                {"id": "q1", "quote_builder": {"include_walls": False}},
            ],
            "active_quote_id": "q1",
        }
        preview = client.post(
            "/api/v1/estimates/entity", json={"entity": ROOM, "project": project}
        ).json()
        saved = client.post("/api/v1/projects/snapshot", json=project).json()["rooms"][0]
        assert preview["wall_area"] == 0
        assert saved["grand_total"] == preview["total_displayed"]
        assert saved["grand_total"] < 1869

    def test_preview_uses_legacy_builder_like_snapshot(self, client: TestClient):
        project = {"id": "p", "rooms": [ROOM], "quote_builder": {"include_ceilings": False}}
        preview = client.post(
            "/api/v1/estimates/entity", json={"entity": ROOM, "project": project}
        ).json()
        saved = client.post("/api/v1/projects/snapshot", json=project).json()["rooms"][0]
        assert preview["ceiling_area"] == 0
        assert saved["grand_total"] == preview["total_displayed"]


class TestMigrateEndpoint:
    def test_wraps_legacy_builder(self, client: TestClient):
        project = {"id": "p", "quote_builder": {"include_trim": False}}
        response = client.post("/api/v1/projects/migrate", json=project)
        assert response.status_code == 200
        data = response.json()
        assert data["quote_builder"] is None
        assert data["quotes"][0]["quote_builder"]["include_trim"] is False
        assert data["active_quote_id"] == data["quotes"][0]["id"]

    def test_idempotent(self, client: TestClient):
        once = client.post("/api/v1/projects/migrate", json={"id": "p", "quote_builder": {}}).json()
        twice = client.post("/api/v1/projects/migrate", json=once).json()
        assert twice == once
