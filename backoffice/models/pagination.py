"""
Paginated list result shared by every document kind
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Tuple, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class Pagination:
    """Page metadata returned alongside list results"""
    page: int = 1
    limit: int = 0
    total: int = 0
    total_pages: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            'page': self.page,
            'limit': self.limit,
            'total': self.total,
            'totalPages': self.total_pages
        }


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """One page of domain entities"""
    data: Tuple[T, ...] = ()
    pagination: Pagination = field(default_factory=Pagination)

    def __len__(self):
        return len(self.data)

    def __iter__(self):
        return iter(self.data)

    def to_dict(self, serialize: Callable[[T], Any] = None) -> Dict[str, Any]:
        serialize = serialize or (lambda item: item.to_dict())
        return {
            'data': [serialize(item) for item in self.data],
            'pagination': self.pagination.to_dict()
        }
