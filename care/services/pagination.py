"""Page/limit/search handling shared by every list endpoint."""
from __future__ import annotations

import math
from dataclasses import dataclass
from functools import reduce
from operator import or_
from typing import Any, Iterable, Optional

from django.conf import settings
from django.db.models import Q, QuerySet


@dataclass
class Page:
    rows: list
    total_records: int
    total_pages: int
    current_page: int
    limit: int

    def as_payload(self, data: list) -> dict:
        return {
            'ok': True,
            'data': data,
            'totalRecords': self.total_records,
            'totalPages': self.total_pages,
            'currentPage': self.current_page,
            'pagination': {'total': self.total_records, 'page': self.current_page, 'pageSize': self.limit},
        }


def _to_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def page_window(page: Any, limit: Any = None) -> tuple[int, int, int]:
    """Return ``(page_number, limit, offset)``.

    Pages below 1 (or unreadable) become 1; a missing or zero limit falls
    back to ``PAGE_SIZE_DEFAULT`` and is capped at ``PAGE_SIZE_MAX``.
    """
    default = getattr(settings, 'PAGE_SIZE_DEFAULT', 10)
    cap = getattr(settings, 'PAGE_SIZE_MAX', 100)
    page_number = _to_int(page) or 1
    if page_number <= 0:
        page_number = 1
    size = _to_int(limit) or default
    size = max(1, min(size, cap))
    return page_number, size, (page_number - 1) * size


def search_filter(search: Optional[str], fields: Iterable[str]) -> Q:
    """OR together case-insensitive ``icontains`` lookups over ``fields``."""
    term = (search or '').strip()
    if not term:
        return Q()
    return reduce(or_, (Q(**{f"{name}__icontains": term}) for name in fields))


def paginate(qs: QuerySet, page: Any, limit: Any = None) -> Page:
    page_number, size, offset = page_window(page, limit)
    total = qs.count()
    rows = list(qs[offset:offset + size])
    return Page(
        rows=rows,
        total_records=total,
        total_pages=math.ceil(total / size),
        current_page=page_number,
        limit=size,
    )
