from __future__ import annotations

import pytest
import requests
from django.test import Client

from notices.client import NoticesClient

from .fakes import FEED_URL, FakeResponse, FakeSession, feed_body


@pytest.fixture
def feed(monkeypatch):
    """Route the views' client through a fake session; returns a setter."""
    state = {}

    def _set(session: FakeSession) -> FakeSession:
        state["session"] = session
        monkeypatch.setattr(
            "notices.views.get_notices_client",
            lambda: NoticesClient(session, FEED_URL, verify=False, timeout=5),
        )
        return session

    return _set


def test_page_renders_table_and_pagination(feed, sample_entries):
    session = feed(FakeSession(FakeResponse(feed_body(sample_entries, feed={"f:total": 25}))))

    r = Client().get("/gazette-notices/info/")
    assert r.status_code == 200
    body = r.content.decode()
    assert "<table" in body
    assert "4701234" in body and "Petitions to Wind Up" in body
    assert "Page 1 of 3" in body
    assert 'href="/gazette-notices/info/?results-page=2"' in body
    assert "Previous" not in body
    assert "messages--error" not in body
    assert session.closed


def test_page_is_not_cacheable(feed):
    feed(FakeSession(FakeResponse(feed_body())))
    r = Client().get("/gazette-notices/info/")
    cache_control = r["Cache-Control"]
    assert "no-cache" in cache_control and "max-age=0" in cache_control


def test_query_page_is_forwarded(feed):
    session = feed(FakeSession(FakeResponse(feed_body(feed={"f:total": 50}))))
    r = Client().get("/gazette-notices/info/", {"results-page": "3"})
    assert session.calls[0][1]["params"] == {"results-page": 3}
    body = r.content.decode()
    assert "Page 3 of 5" in body
    assert 'href="/gazette-notices/info/?results-page=2"' in body
    assert 'href="/gazette-notices/info/?results-page=4"' in body


def test_empty_feed_shows_placeholder_row(feed):
    feed(FakeSession(FakeResponse(feed_body())))
    body = Client().get("/gazette-notices/info/").content.decode()
    assert "No notices found." in body
    assert "Page 1 of 1" in body


def test_connection_refused_renders_error_block_only(feed):
    feed(FakeSession(exc=requests.ConnectionError("Connection refused")))
    r = Client().get("/gazette-notices/info/")
    assert r.status_code == 200
    body = r.content.decode()
    assert 'class="messages messages--error"' in body
    assert "Error fetching data from API" in body
    assert "<table" not in body
    assert "pagination-container" not in body


def test_bad_json_renders_error_block_only(feed):
    feed(FakeSession(FakeResponse("not json")))
    body = Client().get("/gazette-notices/info/").content.decode()
    assert "An error occurred: Error decoding JSON response." in body
    assert "<table" not in body


def test_json_api_returns_view_model(feed, sample_entries):
    feed(FakeSession(FakeResponse(feed_body(sample_entries, feed={"f:total": 25}))))
    r = Client().get("/api/v1/notices/", {"results-page": "0"})
    assert r.status_code == 200
    assert "no-cache" in r["Cache-Control"]
    data = r.json()
    assert data["table"]["rows"][0] == {"id": "4701234", "title": "Deceased Estates", "status": "published"}
    assert data["pagination"]["current_page"] == 1
    assert data["pagination"]["prev"] is None
    assert data["pagination"]["next"]["url"] == "/gazette-notices/info/?results-page=2"


def test_json_api_reports_upstream_failure_as_bad_gateway(feed):
    feed(FakeSession(FakeResponse("{}", status_code=500)))
    r = Client().get("/api/v1/notices/")
    assert r.status_code == 502
    assert r.json()["detail"].startswith("Error fetching data from API:")
