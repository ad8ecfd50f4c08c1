"""API endpoint tests."""

from collections.abc import AsyncIterator

import pytest
from litestar.status_codes import HTTP_200_OK, HTTP_303_SEE_OTHER, HTTP_400_BAD_REQUEST
from litestar.testing import AsyncTestClient

from sleep_monitor_server.app import create_app
from tests.fixtures.samples import night_payloads


@pytest.fixture
async def client(async_engine) -> AsyncIterator[AsyncTestClient]:
    """Create test client backed by the in-memory database."""
    async with AsyncTestClient(app=create_app(async_engine)) as client:
        yield client


async def test_health_check(client: AsyncTestClient) -> None:
    """Test health check endpoint."""
    response = await client.get("/health")

    assert response.status_code == HTTP_200_OK
    data = response.json()
    assert data["status"] == "ok"
    assert "version" in data


async def test_root_redirects_to_dashboard(client: AsyncTestClient) -> None:
    """Test root redirects to the dashboard analytics."""
    response = await client.get("/", follow_redirects=False)

    assert response.status_code == HTTP_303_SEE_OTHER
    assert response.headers["location"] == "/api/dashboard"


async def test_post_and_get_audio_movement(client: AsyncTestClient) -> None:
    """Test a stored batch is returned newest first."""
    audio, _ = night_payloads()

    response = await client.post("/api/sleepdata1", json=audio)

    assert response.status_code == HTTP_200_OK
    stored = response.json()
    assert len(stored) == 8
    assert stored[0]["mic_rms"] == 15.0
    assert stored[0]["state"] == 0

    response = await client.get("/api/sleepdata1")

    assert response.status_code == HTTP_200_OK
    rows = response.json()
    assert [row["state"] for row in rows] == [0, 3, 2, 2, 1, 1, 1, 0]
    assert rows[1]["mic_rms"] == 120.0
    assert set(rows[0]) == {"id", "mic_rms", "piezo_peak", "state", "timestamp", "created_at"}


async def test_post_and_get_vitals(client: AsyncTestClient) -> None:
    """Test vitals are parsed and returned newest first."""
    _, vitals = night_payloads()

    response = await client.post("/api/sleepdata2", json=vitals)
    assert response.status_code == HTTP_200_OK

    response = await client.get("/api/sleepdata2", params={"range": "24h"})

    assert response.status_code == HTTP_200_OK
    rows = response.json()
    assert rows[0]["heart_rate"] == 65.0
    assert rows[-1]["heart_rate"] == 58.0


async def test_post_non_array_rejected(client: AsyncTestClient) -> None:
    """Test an object body is rejected with 400."""
    response = await client.post("/api/sleepdata1", json={"mic": "1", "pz": "1"})

    assert response.status_code == HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Body must be an array"


async def test_post_bad_item_stores_nothing(client: AsyncTestClient) -> None:
    """Test a batch with an unusable item is rejected as a whole."""
    _, vitals = night_payloads()
    del vitals[5]["timestamp"]

    response = await client.post("/api/sleepdata2", json=vitals)

    assert response.status_code == HTTP_400_BAD_REQUEST
    assert (await client.get("/api/sleepdata2")).json() == []


async def test_invalid_range_rejected(client: AsyncTestClient) -> None:
    """Test an unknown range value is a validation error."""
    response = await client.get("/api/sleepdata1", params={"range": "3d"})

    assert response.status_code == HTTP_400_BAD_REQUEST


async def test_dashboard(client: AsyncTestClient) -> None:
    """Test dashboard analytics over posted samples."""
    audio, vitals = night_payloads()
    await client.post("/api/sleepdata1", json=audio)
    await client.post("/api/sleepdata2", json=vitals)

    response = await client.get("/api/dashboard")

    assert response.status_code == HTTP_200_OK
    data = response.json()
    assert data["audio_sample_count"] == 8
    assert data["refresh_interval_seconds"] == 30
    metrics = data["analytics"]["metrics"]
    assert metrics["sleep_duration_hours"] == 3.5
    assert metrics["snore_event_count"] == 2
    assert metrics["quality_score"] == 100
    assert metrics["quality_category"] == "Excellent"
    assert data["analytics"]["quality"]["spo2_points"] == 25


async def test_dashboard_empty(client: AsyncTestClient) -> None:
    """Test the dashboard works before any sample arrives."""
    response = await client.get("/api/dashboard", params={"range": "1h"})

    assert response.status_code == HTTP_200_OK
    data = response.json()
    assert data["time_range"] == "1h"
    assert data["analytics"]["metrics"]["quality_category"] == "Fair"
    assert data["analytics"]["quality"] is None
