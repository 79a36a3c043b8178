from __future__ import annotations

import pytest

from notices.client import NoticesClient

from .fakes import FEED_URL


@pytest.fixture
def make_client():
    def _make(session) -> NoticesClient:
        return NoticesClient(session, FEED_URL, verify=False, timeout=5)

    return _make


@pytest.fixture
def sample_entries():
    return [
        {"id": "https://www.thegazette.co.uk/notice/4701234", "title": "Deceased Estates", "f:status": "published"},
        {"id": "https://www.thegazette.co.uk/notice/4701235", "title": "Petitions to Wind Up", "f:status": "withdrawn"},
    ]
