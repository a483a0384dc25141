"""
Pagination block mapper

Page metadata is informational, so nothing in it is required: unreadable
numbers fall back the same way line quantities do.
"""

import math

from backoffice.models import Pagination
from .base import WireSchema
from .fields import Count


class PaginationSchema(WireSchema):
    page = Count(fallback=1)
    limit = Count()
    total = Count(fallback=0)
    total_pages = Count(data_key='totalPages')


_schema = PaginationSchema()


def to_domain(payload, item_count: int) -> Pagination:
    """Map a `pagination` object; `item_count` stands in for a missing limit"""
    data = _schema.load(payload)
    limit = data['limit'] or item_count
    total_pages = data['total_pages']
    if total_pages is None:
        total_pages = math.ceil(data['total'] / limit) if limit else 0
    return Pagination(
        page=data['page'] or 1,
        limit=limit,
        total=data['total'],
        total_pages=total_pages
    )
