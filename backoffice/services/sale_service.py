"""
Sale Service
"""

import logging
from typing import Optional

from backoffice.cache import InvalidationDispatcher, Mutation, QueryCache, run_mutation, sale_keys
from backoffice.models import (
    CreateSaleDto, CreateSaleLineDto, PaginatedResult, Sale, SaleFilters, UpdateSaleDto
)
from backoffice.repositories import SaleRepositoryInterface

logger = logging.getLogger(__name__)


class SaleService:
    """Sales: DRAFT -> CONFIRMED | CANCELLED, lines editable while DRAFT"""

    def __init__(
        self,
        repository: SaleRepositoryInterface,
        cache: QueryCache,
        dispatcher: Optional[InvalidationDispatcher] = None
    ):
        self.repository = repository
        self.cache = cache
        self.dispatcher = dispatcher or InvalidationDispatcher(cache)

    async def list(self, filters: Optional[SaleFilters] = None) -> PaginatedResult[Sale]:
        filters = filters or SaleFilters()
        return await self.cache.fetch(sale_keys.list(filters), lambda: self.repository.find_all(filters))

    async def get(self, id: str) -> Optional[Sale]:
        return await self.cache.fetch(sale_keys.detail(id), lambda: self.repository.find_by_id(id))

    async def create(self, dto: CreateSaleDto) -> Sale:
        sale = await run_mutation(self.dispatcher, Mutation.SALE_CREATED, lambda: self.repository.create(dto))
        logger.info(f"Created sale {sale.id}")
        return sale

    async def update(self, id: str, dto: UpdateSaleDto) -> Sale:
        return await run_mutation(
            self.dispatcher, Mutation.SALE_UPDATED, lambda: self.repository.update(id, dto), document_id=id
        )

    async def confirm(self, id: str) -> Sale:
        sale = await run_mutation(
            self.dispatcher, Mutation.SALE_CONFIRMED, lambda: self.repository.confirm(id), document_id=id
        )
        logger.info(f"Confirmed sale {id}")
        return sale

    async def cancel(self, id: str) -> Sale:
        sale = await run_mutation(
            self.dispatcher, Mutation.SALE_CANCELLED, lambda: self.repository.cancel(id), document_id=id
        )
        logger.info(f"Cancelled sale {id}")
        return sale

    async def add_line(self, id: str, line: CreateSaleLineDto) -> Sale:
        return await run_mutation(
            self.dispatcher, Mutation.SALE_LINE_ADDED, lambda: self.repository.add_line(id, line), document_id=id
        )

    async def remove_line(self, id: str, line_id: str) -> Sale:
        return await run_mutation(
            self.dispatcher, Mutation.SALE_LINE_REMOVED, lambda: self.repository.remove_line(id, line_id),
            document_id=id
        )
