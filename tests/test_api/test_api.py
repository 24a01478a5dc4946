"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from fukuda.main import app
from tests.conftest import png_base64

client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["schemes_registered"] == 2


def test_schemes():
    response = client.get("/api/schemes")
    assert response.status_code == 200
    data = response.json()
    assert {s["id"] for s in data["schemes"]} == {"rectangular", "fan"}
    assert {s["name"] for s in data["sweeps"]} == {"evolve", "breathe", "unfurl", "pulse"}


def test_tile_rectangular():
    response = client.post("/api/tile", json={
        "image": png_base64(20, 20),
        "layout": {"scheme": "rectangular", "strip_width": 10},
    })
    assert response.status_code == 200
    data = response.json()
    assert (data["width"], data["height"]) == (20, 20)
    assert data["scheme"] == "rectangular"
    assert data["segment_count"] == 40
    assert len(data["segments"]) == 40
    assert data["svg"].count("<line") == 40


def test_tile_fan_svg_only():
    response = client.post("/api/tile", json={
        "image": png_base64(31, 31),
        "layout": {"scheme": "fan", "num_strips": 6},
        "output": "svg",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["segment_count"] > 0
    assert data["segments"] == []
    assert "<svg" in data["svg"]


def test_tile_image_colours():
    response = client.post("/api/tile", json={
        "image": png_base64(10, 4, (200, 10, 20)),
        "layout": {"scheme": "rectangular", "solid_color": False},
        "output": "segments",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["svg"] is None
    assert data["segments"][0]["color"] == [200, 10, 20]


def test_tile_invalid_layout():
    response = client.post("/api/tile", json={
        "image": png_base64(10, 10),
        "layout": {"pct_min": 80, "pct_max": 20},
    })
    assert response.status_code == 422
    assert "pct_max" in response.json()["detail"]


def test_tile_unknown_scheme():
    response = client.post("/api/tile", json={
        "image": png_base64(10, 10),
        "layout": {"scheme": "spiral"},
    })
    assert response.status_code == 422


def test_tile_bad_image():
    response = client.post("/api/tile", json={"image": "aGVsbG8="})
    assert response.status_code == 400


def test_animate():
    response = client.post("/api/animate", json={
        "image": png_base64(31, 31),
        "layout": {"scheme": "fan", "num_strips": 10},
        "sweeps": ["evolve"],
        "frames": 3,
    })
    assert response.status_code == 200
    frames = response.json()["frames"]
    assert [f["index"] for f in frames] == [0, 1, 2]
    assert [f["params"]["num_strips"] for f in frames] == [11, 12, 13]
    assert all("<line" in f["svg"] for f in frames)


def test_animate_unknown_sweep():
    response = client.post("/api/animate", json={
        "image": png_base64(10, 10),
        "sweeps": ["wobble"],
    })
    assert response.status_code == 422


def test_animate_too_many_frames():
    response = client.post("/api/animate", json={
        "image": png_base64(10, 10),
        "frames": 10_000,
    })
    assert response.status_code == 422


def test_animate_stream():
    response = client.post("/api/animate/stream", json={
        "image": png_base64(20, 12),
        "layout": {"scheme": "rectangular", "strip_width": 5},
        "sweeps": ["pulse"],
        "frames": 2,
    })
    assert response.status_code == 200
    assert response.text.count("event: frame") == 2
    assert "event: done" in response.text


def test_animate_stream_rejects_closed_fan_before_streaming():
    response = client.post("/api/animate/stream", json={
        "image": png_base64(10, 10),
        "layout": {"angle_start": 88, "angle_end": 90},
        "sweeps": ["unfurl"],
        "frames": 3,
    })
    assert response.status_code == 422
    assert "unfurl" in response.json()["detail"]


def test_animate_narrow_breathe_range():
    response = client.post("/api/animate", json={
        "image": png_base64(10, 10),
        "layout": {"scheme": "rectangular", "pct_min": 86, "pct_max": 100},
        "sweeps": ["breathe"],
        "frames": 4,
    })
    assert response.status_code == 200
    assert [f["params"]["pct_max"] for f in response.json()["frames"]] == [95, 90, 90, 90]
