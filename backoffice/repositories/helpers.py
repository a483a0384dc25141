"""
Helpers shared by the API-backed repositories
"""

from dataclasses import fields
from enum import Enum
from typing import Any, Callable, Dict, Optional, TypeVar

from backoffice.exceptions import ApiError
from backoffice.mappers import pagination as pagination_mapper
from backoffice.models import PaginatedResult, Pagination
from backoffice.utils.formatting import to_camel_case

T = TypeVar('T')


def unwrap_envelope(payload: Any) -> Any:
    """Peel one `{_tag, _value}` result envelope; anything else passes through"""
    if isinstance(payload, dict) and '_tag' in payload and '_value' in payload:
        return payload['_value']
    return payload


def unwrap_data(payload: Any) -> Any:
    """Unwrap the envelope, then a `{data: ...}` response wrapper if present"""
    payload = unwrap_envelope(payload)
    if isinstance(payload, dict) and 'data' in payload:
        return payload['data']
    return payload


def build_query_params(filters: Optional[Any]) -> Dict[str, str]:
    """Flatten a filter dataclass into query params, skipping unset fields"""
    params = {}
    if filters is None:
        return params

    for item in fields(filters):
        value = getattr(filters, item.name)
        if value is None:
            continue
        if isinstance(value, bool):
            value = 'true' if value else 'false'
        elif isinstance(value, Enum):
            value = value.value
        params[to_camel_case(item.name)] = str(value)
    return params


def map_paginated(body: Any, mapper: Callable[[Any], T]) -> PaginatedResult[T]:
    """
    Map a list response into a PaginatedResult.

    Accepts `{data: [...], pagination: {...}}` or a bare list; when the server
    sends no pagination block a single page covering the whole list is assumed.
    """
    body = unwrap_envelope(body)
    if isinstance(body, dict):
        items = body.get('data') or []
        raw_pagination = body.get('pagination')
    else:
        items = body or []
        raw_pagination = None

    data = tuple(mapper(item) for item in items)

    if isinstance(raw_pagination, dict):
        pagination = pagination_mapper.to_domain(raw_pagination, len(data))
    else:
        pagination = Pagination(page=1, limit=len(data), total=len(data), total_pages=1 if data else 0)

    return PaginatedResult(data=data, pagination=pagination)


def is_not_found(error: Exception) -> bool:
    return isinstance(error, ApiError) and error.status_code == 404
