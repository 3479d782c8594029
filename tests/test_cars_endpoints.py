"""Integration tests for the /api/cars endpoints."""

from fastapi.testclient import TestClient

from tests.conftest import VALID_CAR


class TestListCars:
    """Tests for GET /api/cars."""

    def test_list_seeded_cars(self, client: TestClient):
        response = client.get("/api/cars")

        assert response.status_code == 200
        plates = {car["licensePlate"] for car in response.json()}
        assert plates == {"ABC-123", "XYZ-456", "DEF-789"}


class TestCreateCar:
    """Tests for POST /api/cars."""

    def test_create_car_echoes_fields(self, client: TestClient):
        """The created car carries a new id, a createdAt and every field sent."""
        response = client.post("/api/cars", json=VALID_CAR)

        assert response.status_code == 201
        data = response.json()
        assert data["id"]
        assert data["createdAt"]
        for key, value in VALID_CAR.items():
            assert data[key] == value

    def test_ids_are_unique_and_server_assigned(self, empty_client: TestClient):
        ids = set()
        for _ in range(5):
            response = empty_client.post("/api/cars", json={**VALID_CAR, "id": "client-id"})
            assert response.status_code == 201
            ids.add(response.json()["id"])

        assert len(ids) == 5
        assert "client-id" not in ids

    def test_optional_fields(self, empty_client: TestClient):
        body = {
            **VALID_CAR,
            "location": "New York, NY",
            "latitude": "40.7128",
            "longitude": "-74.0060",
            "image": "https://example.com/camry.png",
        }
        response = empty_client.post("/api/cars", json=body)

        assert response.status_code == 201
        assert response.json()["longitude"] == "-74.0060"

    def test_blank_coordinates_are_treated_as_unset(self, client: TestClient):
        """The console sends empty strings for coordinates left blank."""
        body = {**VALID_CAR, "location": "", "latitude": "", "longitude": " "}
        response = client.post("/api/cars", json=body)

        assert response.status_code == 201
        data = response.json()
        assert data["latitude"] is None
        assert data["longitude"] is None
        assert data["location"] == ""

    def test_missing_required_field(self, client: TestClient):
        for field in VALID_CAR:
            body = {key: value for key, value in VALID_CAR.items() if key != field}
            response = client.post("/api/cars", json=body)
            assert response.status_code == 400
            assert response.json() == {"message": "Invalid car data"}

    def test_wrong_types_and_values(self, client: TestClient):
        for body in (
            {**VALID_CAR, "year": "2024"},
            {**VALID_CAR, "status": "stolen"},
            {**VALID_CAR, "make": 42},
            {**VALID_CAR, "latitude": "north"},
        ):
            response = client.post("/api/cars", json=body)
            assert response.status_code == 400
            assert response.json() == {"message": "Invalid car data"}

    def test_body_must_be_an_object(self, client: TestClient):
        response = client.post("/api/cars", json=[VALID_CAR])
        assert response.status_code == 400


class TestUpdateCar:
    """Tests for PUT /api/cars/{id}."""

    def test_update_status_only(self, client: TestClient):
        car = client.post("/api/cars", json=VALID_CAR).json()

        response = client.put(f"/api/cars/{car['id']}", json={"status": "maintenance"})

        assert response.status_code == 200
        updated = response.json()
        assert updated["status"] == "maintenance"
        assert {k: v for k, v in updated.items() if k != "status"} == {
            k: v for k, v in car.items() if k != "status"
        }

    def test_update_unknown_car(self, empty_client: TestClient):
        response = empty_client.put("/api/cars/nope", json={"owner": "Someone"})

        assert response.status_code == 404
        assert response.json() == {"message": "Car not found"}
        assert empty_client.get("/api/cars").json() == []

    def test_blank_latitude_clears_coordinates(self, client: TestClient):
        car = client.post("/api/cars", json={**VALID_CAR, "latitude": "40.7128"}).json()

        response = client.put(f"/api/cars/{car['id']}", json={"latitude": ""})

        assert response.status_code == 200
        assert response.json()["latitude"] is None

    def test_non_numeric_latitude_rejected(self, client: TestClient):
        car = client.post("/api/cars", json=VALID_CAR).json()
        response = client.put(f"/api/cars/{car['id']}", json={"latitude": "north"})
        assert response.status_code == 400

    def test_created_at_is_read_only(self, client: TestClient):
        car = client.post("/api/cars", json=VALID_CAR).json()
        response = client.put(f"/api/cars/{car['id']}", json={"createdAt": "2020-01-01T00:00:00Z"})
        assert response.status_code == 400


class TestDeleteCar:
    """Tests for DELETE /api/cars/{id}."""

    def test_delete_car(self, client: TestClient):
        car = client.post("/api/cars", json=VALID_CAR).json()

        response = client.delete(f"/api/cars/{car['id']}")
        assert response.status_code == 200
        assert response.json() == {"message": "Car deleted successfully"}

        assert client.get(f"/api/cars/{car['id']}").status_code == 404
        assert client.delete(f"/api/cars/{car['id']}").status_code == 404
