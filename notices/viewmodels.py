"""View-models for the notices page.

The builders here turn a decoded feed into plain structures
(`TableView`, `PaginationView`) that the HTML template and the JSON API
render independently.
"""
from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass, field
from typing import Any, Mapping, NamedTuple

from django.utils.http import urlencode
from django.utils.translation import gettext as _

from .client import PAGE_PARAM

DEFAULT_PAGE_SIZE = 10

_LEADING_INT = re.compile(r"[+-]?\d+")


def coerce_int(value: Any) -> int:
    """Read an int leniently: numeric strings keep their integer prefix,
    floats truncate, anything unreadable becomes 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        m = _LEADING_INT.match(value.strip())
        return int(m.group()) if m else 0
    return 0


def _present(data: Mapping[str, Any], key: str) -> bool:
    return data.get(key) is not None


def _text(value: Any) -> str:
    return "" if value is None else str(value)


class NoticeRow(NamedTuple):
    id: str
    title: str
    status: str


@dataclass(frozen=True)
class TableView:
    headers: tuple[str, str, str]
    rows: list[NoticeRow] = field(default_factory=list)
    empty_message: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def as_dict(self) -> dict[str, Any]:
        return {
            "headers": list(self.headers),
            "rows": [row._asdict() for row in self.rows],
            "empty_message": self.empty_message,
        }


@dataclass(frozen=True)
class PageLink:
    label: str
    page: int
    url: str


@dataclass(frozen=True)
class PaginationView:
    current_page: int
    total_pages: int
    total_results: int
    items_per_page: int
    current: str
    prev: PageLink | None = None
    next: PageLink | None = None

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def short_id(notice_id: Any) -> str:
    """Return the last path segment of a notice URI."""
    return _text(notice_id).split("/")[-1]


def build_table(api_data: Mapping[str, Any]) -> TableView:
    entries = api_data.get("entry") or []
    rows = [
        NoticeRow(
            id=short_id(entry.get("id")),
            title=_text(entry.get("title")),
            status=_text(entry.get("f:status")),
        )
        for entry in entries
    ]
    return TableView(
        headers=(_("ID"), _("Title"), _("Status")),
        rows=rows,
        empty_message=_("No notices found."),
    )


def page_url(base_url: str, page: int) -> str:
    return f"{base_url}?{urlencode({PAGE_PARAM: page})}"


def build_pagination(api_data: Mapping[str, Any], current_page: int, base_url: str) -> PaginationView:
    """Work out page counts and the Previous/Next controls.

    Counts are read from the `feed` block first, then from the top level.
    A page size of exactly 10 is treated as unset and may be replaced by
    the top-level value. A `f:page-number` in the feed replaces
    `current_page`.
    """
    total_results = 0
    items_per_page = DEFAULT_PAGE_SIZE
    total_pages = 1

    feed = api_data.get("feed")
    if isinstance(feed, Mapping):
        if _present(feed, "f:total"):
            total_results = coerce_int(feed["f:total"])
        if _present(feed, "f:page-size"):
            items_per_page = coerce_int(feed["f:page-size"])
        if _present(feed, "f:page-number"):
            current_page = max(1, coerce_int(feed["f:page-number"]))

    if total_results == 0 and _present(api_data, "f:total"):
        total_results = coerce_int(api_data["f:total"])

    if items_per_page == DEFAULT_PAGE_SIZE and _present(api_data, "f:page-size"):
        items_per_page = coerce_int(api_data["f:page-size"])

    if items_per_page > 0:
        total_pages = max(1, math.ceil(total_results / items_per_page))

    prev_link = None
    if current_page > 1:
        prev_link = PageLink(_("Previous"), current_page - 1, page_url(base_url, current_page - 1))

    next_link = None
    if current_page < total_pages:
        next_link = PageLink(_("Next"), current_page + 1, page_url(base_url, current_page + 1))

    return PaginationView(
        current_page=current_page,
        total_pages=total_pages,
        total_results=total_results,
        items_per_page=items_per_page,
        current=_("Page %(page)s of %(total)s") % {"page": current_page, "total": total_pages},
        prev=prev_link,
        next=next_link,
    )
