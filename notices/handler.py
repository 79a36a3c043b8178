"""Request lifecycle for the notices page.

`build_notices_page` is the single entry point used by both the HTML
view and the JSON API: parse the page number, fetch once, build the
table and pagination, or fold any failure into an error message.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from django.utils.translation import gettext as _

from .client import NoticesClient
from .errors import GenericError, NoticesError, TransportError
from .viewmodels import PaginationView, TableView, build_pagination, build_table, coerce_int

logger = logging.getLogger(__name__)


def parse_page(raw: Any) -> int:
    """Return the requested page; missing, non-numeric or < 1 gives 1."""
    return max(1, coerce_int(raw))


@dataclass(frozen=True)
class NoticesPage:
    page: int
    table: TableView | None = None
    pagination: PaginationView | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_dict(self) -> dict[str, Any]:
        if not self.ok:
            return {"detail": self.error}
        return {"table": self.table.as_dict(), "pagination": self.pagination.as_dict()}


def error_message(error: NoticesError) -> str:
    if isinstance(error, TransportError):
        return _("Error fetching data from API: %(error)s") % {"error": error}
    return _("An error occurred: %(error)s") % {"error": error}


def build_notices_page(raw_page: Any, client: NoticesClient, base_url: str) -> NoticesPage:
    page = parse_page(raw_page)
    try:
        result = client.fetch(page)
        if not result.ok:
            return NoticesPage(page=page, error=error_message(result.error))
        table = build_table(result.data)
        pagination = build_pagination(result.data, page, base_url)
    except Exception as exc:
        logger.exception("Failed to build notices page %s", page)
        return NoticesPage(page=page, error=error_message(GenericError(str(exc))))

    return NoticesPage(page=page, table=table, pagination=pagination)
