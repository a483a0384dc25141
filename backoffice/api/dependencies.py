"""
Per-request wiring of clients, caches and services

Services are cheap to build, so a fresh set is assembled for each request
from the caller's headers and the tenant's cache.
"""

from dataclasses import replace

from flask import current_app, request

from backoffice.api.middlewares.correlation_id import create_forward_headers, tenant_scope
from backoffice.cache import QueryCache, get_query_cache, get_redis
from backoffice.clients import ApiClient
from backoffice.repositories import (
    ReturnApiRepository, RoleApiRepository, SaleApiRepository, StockApiRepository,
    StockMovementApiRepository, TransferApiRepository, UserApiRepository, UserRoleApiRepository
)
from backoffice.services import (
    MovementService, ReturnService, RoleService, SaleService, StockService, TransferService,
    UserRoleService, UserService
)


def get_api_client() -> ApiClient:
    return ApiClient(
        current_app.config['API_BASE_URL'],
        timeout=current_app.config['API_TIMEOUT'],
        headers=create_forward_headers(),
        transport=current_app.config.get('API_TRANSPORT')
    )


def get_cache() -> QueryCache:
    """Cache of the caller's organization, partitioned by the credentials it sent"""
    return get_query_cache(
        get_redis(),
        tenant_scope(),
        credentials=request.headers.get('Authorization'),
        stale_times=current_app.config.get('QUERY_STALE_TIMES'),
        ttl=current_app.config['QUERY_CACHE_TTL']
    )


def movement_service() -> MovementService:
    return MovementService(StockMovementApiRepository(get_api_client()), get_cache())


def transfer_service() -> TransferService:
    return TransferService(TransferApiRepository(get_api_client()), get_cache())


def sale_service() -> SaleService:
    return SaleService(SaleApiRepository(get_api_client()), get_cache())


def return_service() -> ReturnService:
    return ReturnService(ReturnApiRepository(get_api_client()), get_cache())


def stock_service() -> StockService:
    return StockService(StockApiRepository(get_api_client()), get_cache())


def user_service() -> UserService:
    return UserService(UserApiRepository(get_api_client()), get_cache())


def role_service() -> RoleService:
    return RoleService(RoleApiRepository(get_api_client()), get_cache())


def user_role_service() -> UserRoleService:
    return UserRoleService(UserRoleApiRepository(get_api_client()), get_cache())


def load_filters(schema):
    """Load query args through a filter schema and apply the page size limits"""
    filters = schema.load(request.args.to_dict())
    limit = filters.limit or current_app.config['DEFAULT_PAGE_SIZE']
    return replace(filters, limit=min(limit, current_app.config['MAX_PAGE_SIZE']))


def load_body(schema):
    """Load the JSON body through a request schema"""
    return schema.load(request.get_json(silent=True) or {})
