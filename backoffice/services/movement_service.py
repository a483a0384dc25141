"""
Movement Service - cached queries and lifecycle mutations for stock movements
"""

import logging
from typing import Optional

from backoffice.cache import InvalidationDispatcher, Mutation, QueryCache, movement_keys, run_mutation
from backoffice.models import CreateMovementDto, MovementFilters, PaginatedResult, StockMovement
from backoffice.repositories import StockMovementRepositoryInterface

logger = logging.getLogger(__name__)


class MovementService:
    """Stock movements: DRAFT -> POSTED -> VOID"""

    def __init__(
        self,
        repository: StockMovementRepositoryInterface,
        cache: QueryCache,
        dispatcher: Optional[InvalidationDispatcher] = None
    ):
        self.repository = repository
        self.cache = cache
        self.dispatcher = dispatcher or InvalidationDispatcher(cache)

    async def list(self, filters: Optional[MovementFilters] = None) -> PaginatedResult[StockMovement]:
        filters = filters or MovementFilters()
        return await self.cache.fetch(movement_keys.list(filters), lambda: self.repository.find_all(filters))

    async def get(self, id: str) -> Optional[StockMovement]:
        return await self.cache.fetch(movement_keys.detail(id), lambda: self.repository.find_by_id(id))

    async def create(self, dto: CreateMovementDto) -> StockMovement:
        movement = await run_mutation(
            self.dispatcher, Mutation.MOVEMENT_CREATED, lambda: self.repository.create(dto)
        )
        logger.info(f"Created stock movement {movement.id} ({movement.type.value})")
        return movement

    async def post(self, id: str) -> StockMovement:
        movement = await run_mutation(
            self.dispatcher, Mutation.MOVEMENT_POSTED, lambda: self.repository.post(id), document_id=id
        )
        logger.info(f"Posted stock movement {id}")
        return movement

    async def void(self, id: str) -> StockMovement:
        movement = await run_mutation(
            self.dispatcher, Mutation.MOVEMENT_VOIDED, lambda: self.repository.void(id), document_id=id
        )
        logger.info(f"Voided stock movement {id}")
        return movement
