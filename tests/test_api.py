"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from woodblock.api.main import app


class TestPatternEndpoints:
    """Test the pattern catalog endpoints."""

    def setup_method(self):
        """Set up test client."""
        self.client = TestClient(app)

    def test_root(self):
        """Test the root endpoint."""
        response = self.client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self):
        """Test the health endpoint."""
        response = self.client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_list_patterns(self):
        """Test listing the catalog."""
        response = self.client.get("/patterns")
        assert response.status_code == 200
        data = response.json()
        assert [p["id"] for p in data] == list(range(1, 11))
        assert data[9]["kind"] == "checkerboard"
        assert {p["id"] for p in data if p["tiling"] == "periodic"} == {2, 3, 7, 9}

    @pytest.mark.parametrize("pattern_id,expected", [(1, 1), (12, 2), (0, 10), (-3, 7)])
    def test_get_pattern_wraps(self, pattern_id, expected):
        """Test that any integer id is accepted and normalized."""
        response = self.client.get(f"/patterns/{pattern_id}")
        assert response.status_code == 200
        assert response.json()["id"] == expected

    def test_get_pattern_rejects_non_integer(self):
        """Test path validation."""
        response = self.client.get("/patterns/abc")
        assert response.status_code == 422


class TestFieldEndpoints:
    """Test base field, grid and board endpoints."""

    def setup_method(self):
        """Set up test client."""
        self.client = TestClient(app)

    def test_base_field(self):
        """Test the checkerboard base field."""
        response = self.client.get("/patterns/10/base-field")
        assert response.status_code == 200
        data = response.json()
        assert data["base_size"] == 10
        cells = data["cells"]
        assert cells[0][0] == 6
        assert cells[0][1] == 0
        assert data["legend"]["0"] == "#8B4513"
        assert data["legend"]["6"] == "#DAA520"

    def test_grid_mirrors_second_tile(self):
        """Test that pattern 1 reflects the second tile row."""
        field = self.client.get("/patterns/1/base-field").json()["cells"]
        response = self.client.get("/patterns/1/grid", params={"grid_size": 20})
        assert response.status_code == 200
        data = response.json()
        assert data["grid_size"] == 20
        assert len(data["heights"]) == 20
        assert all(len(row) == 20 for row in data["heights"])
        assert data["heights"][10][0] == field[9][0]
        assert sum(data["histogram"].values()) == 400

    def test_grid_default_size(self):
        """Test the configured default grid size."""
        from woodblock.config import settings

        response = self.client.get("/patterns/5/grid")
        assert response.status_code == 200
        assert response.json()["grid_size"] == settings.default_grid_size

    @pytest.mark.parametrize("grid_size", [0, 4, 31])
    def test_grid_size_out_of_range(self, grid_size):
        """Test that out-of-range board sizes are rejected."""
        response = self.client.get("/patterns/1/grid", params={"grid_size": grid_size})
        assert response.status_code == 422

    def test_board(self):
        """Test board layout."""
        response = self.client.get("/patterns/13/board", params={"grid_size": 5})
        assert response.status_code == 200
        data = response.json()
        assert data["pattern"]["id"] == 3
        assert data["extent"] == pytest.approx(7.5)
        assert len(data["blocks"]) == 25
        block = data["blocks"][0]
        for key in ("i", "j", "height", "level", "color", "position"):
            assert key in block
        assert len(block["position"]) == 3
