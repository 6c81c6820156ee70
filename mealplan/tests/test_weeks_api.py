import pytest
from fastapi.testclient import TestClient

from mealplan.api.api_run import app
from mealplan.infra import paths
from mealplan.tests.workbook_builder import MAIN_WEEK_ROWS, build_workbook
from mealplan.utilities import config

XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@pytest.fixture
def client(tmp_path, monkeypatch):
    # Use a temporary store and a known token (don't touch the real data dir)
    monkeypatch.setattr(paths, "WEEK_MENUS_FILE", tmp_path / "week_menus.json")
    monkeypatch.setattr(config, "ADMIN_TOKEN", "s3cret")
    return TestClient(app)


def _upload(client, data, filename="260112_mealplan.xlsx", site="main", headers=None, token=None):
    form = {"site": site}
    if token is not None:
        form["token"] = token
    return client.post(
        "/api/upload",
        files={"file": (filename, data, XLSX)},
        data=form,
        headers=headers or {},
    )


def test_upload_then_read_back(client):
    data = build_workbook({"게시메뉴": MAIN_WEEK_ROWS})
    resp = _upload(client, data, headers={"x-admin-token": "s3cret"})
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"ok": True, "site": "main", "weekStart": "2026-01-12", "days": 2}

    latest = client.get("/api/latest", params={"site": "main"})
    assert latest.status_code == 200
    assert latest.json()["days"]["2026-01-13"]["lunch"] == ["김치찌개", "밥"]

    assert client.get("/api/weeks/latest").json() == {"weekStart": "2026-01-12"}
    assert client.get("/api/weeks/2026-01-12").json()["source"]["sheet"] == "게시메뉴"
    assert client.get("/api/week", params={"weekStart": "2026-01-12"}).json()["weekStart"] == "2026-01-12"

    listing = client.get("/api/weeks").json()
    assert listing["site"] == "main"
    assert [w["weekStart"] for w in listing["weeks"]] == ["2026-01-12"]


def test_token_can_come_from_form_field(client):
    data = build_workbook({"게시메뉴": MAIN_WEEK_ROWS})
    resp = _upload(client, data, site="cancer", token="s3cret")
    assert resp.status_code == 200, resp.text
    assert resp.json()["site"] == "cancer"
    assert client.get("/api/weeks/latest", params={"site": "main"}).status_code == 404


def test_upload_requires_token(client):
    data = build_workbook({"게시메뉴": MAIN_WEEK_ROWS})
    assert _upload(client, data).status_code == 401
    resp = _upload(client, data, headers={"x-admin-token": "wrong"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Unauthorized"}


def test_upload_without_server_token_is_misconfigured(client, monkeypatch):
    monkeypatch.setattr(config, "ADMIN_TOKEN", "")
    data = build_workbook({"게시메뉴": MAIN_WEEK_ROWS})
    resp = _upload(client, data, headers={"x-admin-token": ""})
    assert resp.status_code == 500
    assert "ADMIN_TOKEN" in resp.json()["error"]


def test_upload_missing_file(client):
    resp = client.post("/api/upload", data={"site": "main", "token": "s3cret"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "file is required"}


def test_upload_corrupt_file_is_server_error(client):
    resp = _upload(client, b"not a spreadsheet", headers={"x-admin-token": "s3cret"})
    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Upload/parse failed"
    assert body["detail"]


def test_upload_without_dates_is_bad_request(client):
    data = build_workbook({"게시메뉴": [["조식", "중식"], ["토스트", "라면"]]})
    resp = _upload(client, data, headers={"x-admin-token": "s3cret"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Could not determine weekStart from the file"}
    assert client.get("/api/weeks").json()["weeks"] == []


def test_upload_too_large(client, monkeypatch):
    monkeypatch.setattr(config, "MAX_UPLOAD_BYTES", 16)
    data = build_workbook({"게시메뉴": MAIN_WEEK_ROWS})
    resp = _upload(client, data, headers={"x-admin-token": "s3cret"})
    assert resp.status_code == 413


def test_reads_for_unknown_data(client):
    assert client.get("/api/latest").status_code == 404
    assert client.get("/api/weeks/latest").json() == {"error": "No data for this site yet"}
    assert client.get("/api/weeks/2026-01-12").status_code == 404
    assert client.get("/api/week").status_code == 400
    assert client.get("/api/week", params={"weekStart": "2026-01-12"}).json() == {"error": "No such week"}


def test_malformed_week_start(client):
    assert client.get("/api/weeks/2026-02-30").status_code == 400
    assert client.get("/api/week", params={"weekStart": "last-week"}).status_code == 400


def test_healthz(client, tmp_path):
    assert client.get("/healthz").json() == {"ok": True}
    (tmp_path / "week_menus.json").write_text("{broken", encoding="utf-8")
    resp = client.get("/healthz")
    assert resp.status_code == 500
    assert resp.json() == {"ok": False}
    assert client.get("/api/weeks").status_code == 500
