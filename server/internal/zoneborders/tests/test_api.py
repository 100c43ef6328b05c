"""
Tests for zone border service API endpoints.
"""

import sys
from pathlib import Path

# Add server directory to path
server_dir = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(server_dir))

import pytest
from fastapi.testclient import TestClient
from internal.zoneborders import main
from internal.zoneborders.main import app

client = TestClient(app)

SQUARE_ZONE = {
    "shape": "Rectangle",
    "min_x": 0.0,
    "max_x": 10.0,
    "min_z": 0.0,
    "max_z": 10.0,
}


def test_health_check():
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["service"] == "zone-border-service"
    assert data["version"] == "0.1.0"


def test_generate_border_nodes():
    """Test border node generation endpoint"""
    response = client.post(
        "/api/v1/zones/border-nodes", json={"zone": SQUARE_ZONE, "spacing": 1.0}
    )
    assert response.status_code == 200

    data = response.json()
    assert data["success"] is True
    assert data["shape"] == "Rectangle"
    assert data["spacing"] == 1.0
    assert data["node_count"] == 40
    assert len(data["nodes"]) == 40
    assert data["corner_counts"]["inside_corner"] == 4
    assert data["corner_counts"]["straight"] == 36

    first = data["nodes"][0]
    assert first["position"] == [0.0, 0.0]
    assert first["corner_type"] == "inside_corner"
    assert first["rotation_degrees"] == 0
    for node in data["nodes"]:
        assert node["rotation_degrees"] in [0, 90, 180, 270]


def test_generate_border_nodes_default_spacing():
    """Test spacing falls back to the configured default"""
    response = client.post(
        "/api/v1/zones/border-nodes", json={"zone": {"shape": "Circle", "radius": 5.0}}
    )
    assert response.status_code == 200

    data = response.json()
    assert data["spacing"] == main.cfg.default_spacing
    assert data["node_count"] >= 8


def test_generate_border_nodes_non_positive_spacing():
    """Test non-positive spacing returns an empty border, not an error"""
    response = client.post(
        "/api/v1/zones/border-nodes", json={"zone": SQUARE_ZONE, "spacing": 0.0}
    )
    assert response.status_code == 200

    data = response.json()
    assert data["success"] is True
    assert data["node_count"] == 0
    assert data["nodes"] == []


def test_generate_border_nodes_validation():
    """Test border node endpoint validation"""
    # Missing zone
    response = client.post("/api/v1/zones/border-nodes", json={"spacing": 1.0})
    assert response.status_code == 422

    # Non-numeric radius
    response = client.post(
        "/api/v1/zones/border-nodes",
        json={"zone": {"shape": "Circle", "radius": "wide"}, "spacing": 1.0},
    )
    assert response.status_code == 422


def test_generate_border_points():
    """Test border point generation endpoint"""
    response = client.post(
        "/api/v1/zones/border-points", json={"zone": SQUARE_ZONE, "spacing": 2.0}
    )
    assert response.status_code == 200

    data = response.json()
    assert data["success"] is True
    assert len(data["points"]) == 20
    assert data["points"][0] == [0.0, 0.0]
    assert data["points"][5] == [10.0, 0.0]


def test_generate_border_outline():
    """Test border outline endpoint returns GeoJSON"""
    response = client.post(
        "/api/v1/zones/border-outline",
        json={"zone": {"shape": "Circle", "radius": 5.0}, "spacing": 1.0},
    )
    assert response.status_code == 200

    data = response.json()
    assert data["success"] is True
    assert data["outline"]["type"] == "Polygon"
    # 31 sampled points plus the closing point
    assert len(data["outline"]["coordinates"][0]) == 32


def test_generate_ring_points():
    """Test legacy ring point endpoint"""
    response = client.post(
        "/api/v1/rings/points",
        json={"center_y": 3.0, "radius": 2.0, "spacing": 1.0, "start_angle_degrees": 0.0},
    )
    assert response.status_code == 200

    data = response.json()
    assert data["success"] is True
    assert len(data["points"]) == 12
    for point in data["points"]:
        assert len(point) == 3
        assert point[1] == 3.0


def test_generate_ring_points_invalid_radius():
    """Test non-positive ring radius yields no points"""
    response = client.post("/api/v1/rings/points", json={"radius": 0.0, "spacing": 1.0})
    assert response.status_code == 200
    assert response.json()["points"] == []

    # Missing radius
    response = client.post("/api/v1/rings/points", json={"spacing": 1.0})
    assert response.status_code == 422


def test_generate_border_nodes_non_finite_spacing():
    """Test NaN spacing returns an empty border, not an error"""
    body = '{"zone": {"shape": "Circle", "radius": 5.0}, "spacing": NaN}'
    response = client.post(
        "/api/v1/zones/border-nodes",
        content=body,
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 200

    data = response.json()
    assert data["success"] is True
    assert data["spacing"] is None
    assert data["node_count"] == 0


def test_generate_border_nodes_infinite_radius():
    """Test an infinite radius returns an empty border"""
    body = '{"zone": {"shape": "Circle", "radius": Infinity}, "spacing": 1.0}'
    response = client.post(
        "/api/v1/zones/border-nodes",
        content=body,
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 200
    assert response.json()["node_count"] == 0


def test_generate_ring_points_infinite_radius():
    """Test an infinite ring radius yields no points"""
    body = '{"radius": Infinity, "spacing": 1.0}'
    response = client.post(
        "/api/v1/rings/points",
        content=body,
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 200
    assert response.json()["points"] == []
