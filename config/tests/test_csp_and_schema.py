from __future__ import annotations

from django.test import Client


def test_index_redirects_to_notices():
    r = Client().get("/")
    assert r.status_code == 302
    assert r["Location"] == "/gazette-notices/info/"


def test_openapi_schema_describes_notices_endpoint():
    r = Client().get("/api/schema/")
    assert r.status_code == 200
    body = r.content.decode("utf-8", errors="ignore")
    assert "openapi" in body.lower()
    assert "/api/v1/notices/" in body
    assert "results-page" in body
