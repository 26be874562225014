from __future__ import annotations

from fastapi.testclient import TestClient

from wrapped.service import ERR_INVALID_SAVE, ERR_NO_SAVE_DATA, WrappedService
from wrapped.store import MemoryAggregateStore, MemoryBlobStore, MemoryRecordStore
from wrapped.web import create_app


def _client(secret: str | None = "hunter2") -> TestClient:
    service = WrappedService(
        MemoryRecordStore(),
        MemoryAggregateStore(),
        blobs=MemoryBlobStore(),
        refresh_secret=secret,
    )
    return TestClient(create_app(service))


def test_get_stats_on_empty_corpus() -> None:
    response = _client().get("/choku-wrapped/")

    assert response.status_code == 200
    body = response.json()
    assert body["numSubmissions"] == 0
    assert "chokuretsu-wrapped-unknown" in body["endingChart"]
    assert body["saveData"] is None


def test_upload_then_fetch_personal_stats(sample_save: bytes) -> None:
    client = _client()

    response = client.post("/choku-wrapped/", files={"save": ("chokuretsu.sav", sample_save)})
    assert response.status_code == 200
    sha = response.text
    assert len(sha) == 64

    personal = client.get(f"/choku-wrapped/{sha}").json()
    assert personal["numSubmissions"] == 1
    assert personal["saveData"]["sha256Hash"] == sha
    assert personal["saveData"]["routesTaken"][0]["flag"] == 1025

    assert client.get(f"/choku-wrapped/{sha.lower()}").status_code == 200
    assert client.get("/choku-wrapped/" + "0" * 64).status_code == 404


def test_upload_without_file_or_with_bad_file() -> None:
    client = _client()

    assert client.post("/choku-wrapped/", data={"note": "nothing"}).text == ERR_NO_SAVE_DATA
    bad = client.post("/choku-wrapped/", files={"save": ("bad.sav", b"nope")})
    assert bad.status_code == 200
    assert bad.text == ERR_INVALID_SAVE


def test_refresh_endpoint(sample_save: bytes) -> None:
    client = _client()
    client.post("/choku-wrapped/", files={"save": ("chokuretsu.sav", sample_save)})

    assert client.post("/choku-wrapped/refresh", content=b"wrong").status_code == 401
    response = client.post("/choku-wrapped/refresh", content=b"hunter2")
    assert response.status_code == 200
    assert response.json() == {"rebuilt": 1}

    assert _client(secret=None).post("/choku-wrapped/refresh", content=b"x").status_code == 500


def test_cors_allows_haroohie_subdomains() -> None:
    client = _client()

    allowed = client.get("/choku-wrapped/", headers={"Origin": "https://chokuretsu.haroohie.club"})
    assert allowed.headers["access-control-allow-origin"] == "https://chokuretsu.haroohie.club"
    local = client.get("/choku-wrapped/", headers={"Origin": "http://localhost:3000"})
    assert local.headers["access-control-allow-origin"] == "http://localhost:3000"
    denied = client.get("/choku-wrapped/", headers={"Origin": "https://evil.example"})
    assert "access-control-allow-origin" not in denied.headers


def test_cors_origins_come_from_config(tmp_path) -> None:
    from wrapped.config import WrappedConfig

    service = WrappedService(MemoryRecordStore(), MemoryAggregateStore())
    client = TestClient(create_app(service, WrappedConfig(data_dir=tmp_path, cors_origins=("https://a.example",))))

    allowed = client.get("/choku-wrapped/", headers={"Origin": "https://a.example"})
    assert allowed.headers["access-control-allow-origin"] == "https://a.example"
    denied = client.get("/choku-wrapped/", headers={"Origin": "http://localhost:3000"})
    assert "access-control-allow-origin" not in denied.headers
