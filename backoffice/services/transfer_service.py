"""
Transfer Service - cached queries and status changes for warehouse transfers
"""

import logging
from typing import Optional

from backoffice.cache import InvalidationDispatcher, Mutation, QueryCache, run_mutation, transfer_keys
from backoffice.models import CreateTransferDto, PaginatedResult, Transfer, TransferFilters, TransferStatus
from backoffice.exceptions import InvalidRequestError
from backoffice.repositories import TransferRepositoryInterface

logger = logging.getLogger(__name__)

# Only completion moves stock on the receiving side; dispatch and cancel do not
STATUS_MUTATIONS = {
    TransferStatus.IN_TRANSIT: Mutation.TRANSFER_DISPATCHED,
    TransferStatus.COMPLETED: Mutation.TRANSFER_COMPLETED,
    TransferStatus.CANCELLED: Mutation.TRANSFER_CANCELLED,
}


class TransferService:
    """Warehouse transfers: PENDING -> IN_TRANSIT -> COMPLETED, or CANCELLED"""

    def __init__(
        self,
        repository: TransferRepositoryInterface,
        cache: QueryCache,
        dispatcher: Optional[InvalidationDispatcher] = None
    ):
        self.repository = repository
        self.cache = cache
        self.dispatcher = dispatcher or InvalidationDispatcher(cache)

    async def list(self, filters: Optional[TransferFilters] = None) -> PaginatedResult[Transfer]:
        filters = filters or TransferFilters()
        return await self.cache.fetch(transfer_keys.list(filters), lambda: self.repository.find_all(filters))

    async def get(self, id: str) -> Optional[Transfer]:
        return await self.cache.fetch(transfer_keys.detail(id), lambda: self.repository.find_by_id(id))

    async def create(self, dto: CreateTransferDto) -> Transfer:
        transfer = await run_mutation(
            self.dispatcher, Mutation.TRANSFER_CREATED, lambda: self.repository.create(dto)
        )
        logger.info(f"Created transfer {transfer.id} from {dto.from_warehouse_id} to {dto.to_warehouse_id}")
        return transfer

    async def update_status(self, id: str, status: TransferStatus) -> Transfer:
        """
        Move a transfer to `status`.

        The transition is not checked locally; the server rejects invalid
        ones and that ApiError propagates to the caller.
        """
        mutation = STATUS_MUTATIONS.get(status)
        if mutation is None:
            raise InvalidRequestError(f"Transfers cannot be moved to {status.value}")

        transfer = await run_mutation(
            self.dispatcher, mutation, lambda: self.repository.update_status(id, status), document_id=id
        )
        logger.info(f"Transfer {id} is now {transfer.status.value}")
        return transfer
