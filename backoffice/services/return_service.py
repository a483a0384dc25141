"""
Return Service
"""

import logging
from typing import Optional

from backoffice.cache import InvalidationDispatcher, Mutation, QueryCache, return_keys, run_mutation
from backoffice.models import (
    CreateReturnDto, CreateReturnLineDto, PaginatedResult, ReturnFilters, SalesReturn, UpdateReturnDto
)
from backoffice.repositories import ReturnRepositoryInterface

logger = logging.getLogger(__name__)


class ReturnService:
    """Customer and supplier returns, same lifecycle as sales"""

    def __init__(
        self,
        repository: ReturnRepositoryInterface,
        cache: QueryCache,
        dispatcher: Optional[InvalidationDispatcher] = None
    ):
        self.repository = repository
        self.cache = cache
        self.dispatcher = dispatcher or InvalidationDispatcher(cache)

    async def list(self, filters: Optional[ReturnFilters] = None) -> PaginatedResult[SalesReturn]:
        filters = filters or ReturnFilters()
        return await self.cache.fetch(return_keys.list(filters), lambda: self.repository.find_all(filters))

    async def get(self, id: str) -> Optional[SalesReturn]:
        return await self.cache.fetch(return_keys.detail(id), lambda: self.repository.find_by_id(id))

    async def create(self, dto: CreateReturnDto) -> SalesReturn:
        sales_return = await run_mutation(
            self.dispatcher, Mutation.RETURN_CREATED, lambda: self.repository.create(dto)
        )
        logger.info(f"Created {sales_return.type.value} {sales_return.id}")
        return sales_return

    async def update(self, id: str, dto: UpdateReturnDto) -> SalesReturn:
        return await run_mutation(
            self.dispatcher, Mutation.RETURN_UPDATED, lambda: self.repository.update(id, dto), document_id=id
        )

    async def confirm(self, id: str) -> SalesReturn:
        sales_return = await run_mutation(
            self.dispatcher, Mutation.RETURN_CONFIRMED, lambda: self.repository.confirm(id), document_id=id
        )
        logger.info(f"Confirmed return {id}")
        return sales_return

    async def cancel(self, id: str) -> SalesReturn:
        sales_return = await run_mutation(
            self.dispatcher, Mutation.RETURN_CANCELLED, lambda: self.repository.cancel(id), document_id=id
        )
        logger.info(f"Cancelled return {id}")
        return sales_return

    async def add_line(self, id: str, line: CreateReturnLineDto) -> SalesReturn:
        return await run_mutation(
            self.dispatcher, Mutation.RETURN_LINE_ADDED, lambda: self.repository.add_line(id, line),
            document_id=id
        )

    async def remove_line(self, id: str, line_id: str) -> SalesReturn:
        return await run_mutation(
            self.dispatcher, Mutation.RETURN_LINE_REMOVED, lambda: self.repository.remove_line(id, line_id),
            document_id=id
        )
