import json
import os

import fakeredis
import httpx
import pytest

# Set test environment variables before importing the app
os.environ['FLASK_ENV'] = 'testing'

from backoffice.api.main import create_app
from backoffice.cache import QueryCache, principal_for
from backoffice.clients import ApiClient

API_BASE_URL = 'http://api.test'


class FakeClock:
    """Manually advanced replacement for time.time"""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeApi:
    """
    In-memory stand-in for the remote business API.

    Responses are registered per (method, path); a registered value may be a
    callable taking the httpx.Request. Unregistered routes answer 404.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []
        self.transport = httpx.MockTransport(self.handle)

    def route(self, method, path, json=None, status=200):
        self.routes[(method.upper(), path)] = (status, json)

    def fail(self, method, path, status, message='Request rejected', code=None):
        body = {'message': message}
        if code:
            body['code'] = code
        self.route(method, path, json=body, status=status)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(
            (request.method, request.url.path),
            (404, {'message': f'{request.url.path} not found', 'code': 'NOT_FOUND'})
        )
        if callable(body):
            body = body(request)
        if isinstance(body, Exception):
            raise body
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    def calls(self, method, path):
        return [r for r in self.requests if r.method == method and r.url.path == path]

    @staticmethod
    def body_of(request):
        return json.loads(request.content) if request.content else None


@pytest.fixture
def fake_api():
    return FakeApi()


@pytest.fixture
def api_client(fake_api):
    """ApiClient wired to the fake API."""
    return ApiClient(API_BASE_URL, transport=fake_api.transport, headers={'Authorization': 'Bearer test-token'})


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def redis_client():
    """Isolated in-memory Redis server per test."""
    return fakeredis.FakeRedis(server=fakeredis.FakeServer())


@pytest.fixture
def cache(redis_client, clock):
    return QueryCache(redis_client, tenant='org-1', principal=principal_for('Bearer test-token'), clock=clock)


@pytest.fixture
def app(fake_api, redis_client):
    """Create application for the tests."""
    app = create_app('testing')
    app.config['API_BASE_URL'] = API_BASE_URL
    app.config['API_TRANSPORT'] = fake_api.transport
    app.extensions['redis'] = redis_client
    return app


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def auth_headers():
    """Caller identity headers as sent by the back-office UI."""
    return {
        'Authorization': 'Bearer test-token',
        'X-Organization-ID': 'org-1',
        'X-Organization-Slug': 'acme',
        'X-User-ID': 'user-1',
        'Content-Type': 'application/json'
    }


# Payload generators: wire-shaped dicts as the remote API returns them

def generate_movement_line_data(**kwargs):
    data = {
        'id': 'ml-1',
        'productId': 'prod-1',
        'productName': 'Widget',
        'productSku': 'WID-001',
        'quantity': 5,
        'unitCost': 12.5
    }
    data.update(kwargs)
    return data


def generate_movement_data(**kwargs):
    data = {
        'id': 'mov-1',
        'movementNumber': 'MOV-0001',
        'warehouseId': 'wh-1',
        'warehouseName': 'Main warehouse',
        'type': 'IN',
        'status': 'DRAFT',
        'reference': 'PO-77',
        'reason': 'Restock',
        'note': None,
        'lines': [generate_movement_line_data()],
        'totalAmount': 62.5,
        'currency': 'USD',
        'createdBy': 'user-1',
        'createdAt': '2024-01-15T10:30:00Z',
        'postedAt': None,
        'voidedAt': None
    }
    data.update(kwargs)
    return data


def generate_transfer_line_data(**kwargs):
    data = {
        'id': 'tl-1',
        'productId': 'prod-1',
        'productName': 'Widget',
        'productSku': 'WID-001',
        'quantity': 3,
        'receivedQuantity': None
    }
    data.update(kwargs)
    return data


def generate_transfer_data(**kwargs):
    data = {
        'id': 'tr-1',
        'transferNumber': 'TRF-0001',
        'fromWarehouseId': 'wh-1',
        'fromWarehouseName': 'Main warehouse',
        'toWarehouseId': 'wh-2',
        'toWarehouseName': 'Store',
        'status': 'PENDING',
        'note': 'Weekly replenishment',
        'lines': [generate_transfer_line_data()],
        'totalAmount': 37.5,
        'currency': 'USD',
        'createdBy': 'user-1',
        'createdAt': '2024-01-16T08:00:00Z'
    }
    data.update(kwargs)
    return data


def generate_sale_line_data(**kwargs):
    data = {
        'id': 'sl-1',
        'productId': 'prod-1',
        'productName': 'Widget',
        'productSku': 'WID-001',
        'quantity': 2,
        'salePrice': 19.99,
        'currency': 'USD',
        'totalPrice': 39.98
    }
    data.update(kwargs)
    return data


def generate_sale_data(**kwargs):
    data = {
        'id': 'sale-1',
        'saleNumber': 'SALE-0001',
        'status': 'DRAFT',
        'warehouseId': 'wh-1',
        'warehouseName': 'Main warehouse',
        'customerReference': 'CUST-9',
        'externalReference': None,
        'note': None,
        'totalAmount': 39.98,
        'currency': 'USD',
        'lines': [generate_sale_line_data()],
        'movementId': None,
        'createdBy': 'user-1',
        'createdAt': '2024-01-17T09:00:00Z'
    }
    data.update(kwargs)
    return data


def generate_return_line_data(**kwargs):
    data = {
        'id': 'rl-1',
        'productId': 'prod-1',
        'productName': 'Widget',
        'productSku': 'WID-001',
        'quantity': 1,
        'originalSalePrice': 19.99,
        'originalUnitCost': 12.5,
        'currency': 'USD',
        'totalPrice': 19.99
    }
    data.update(kwargs)
    return data


def generate_return_data(**kwargs):
    data = {
        'id': 'ret-1',
        'returnNumber': 'RET-0001',
        'status': 'DRAFT',
        'type': 'RETURN_CUSTOMER',
        'reason': 'Damaged',
        'warehouseId': 'wh-1',
        'warehouseName': 'Main warehouse',
        'saleId': 'sale-1',
        'saleNumber': 'SALE-0001',
        'note': None,
        'totalAmount': 19.99,
        'currency': 'USD',
        'lines': [generate_return_line_data()],
        'createdBy': 'user-1',
        'createdAt': '2024-01-18T11:00:00Z'
    }
    data.update(kwargs)
    return data


def generate_stock_data(**kwargs):
    data = {
        'id': 'stock-1',
        'productId': 'prod-1',
        'productName': 'Widget',
        'productSku': 'WID-001',
        'warehouseId': 'wh-1',
        'warehouseName': 'Main warehouse',
        'quantity': 40,
        'reservedQuantity': 5,
        'availableQuantity': 35,
        'averageCost': 12.5,
        'totalValue': 500,
        'currency': 'USD',
        'lastMovementAt': '2024-01-15T10:30:00Z'
    }
    data.update(kwargs)
    return data


def generate_user_data(**kwargs):
    data = {
        'id': 'user-7',
        'email': 'jane@example.com',
        'username': 'jane',
        'firstName': 'Jane',
        'lastName': 'Doe',
        'status': 'ACTIVE',
        'roles': ['Cashier'],
        'lastLoginAt': '2024-01-19T07:45:00Z',
        'createdAt': '2023-11-02T12:00:00Z',
        'updatedAt': None
    }
    data.update(kwargs)
    return data


def generate_role_data(**kwargs):
    data = {
        'id': 'role-1',
        'name': 'Cashier',
        'description': 'Point of sale staff',
        'isActive': True,
        'isSystem': False,
        'permissions': [
            {'id': 'perm-1', 'name': 'sales.create', 'description': None, 'module': 'sales', 'action': 'create'}
        ],
        'createdAt': '2023-10-01T00:00:00Z',
        'updatedAt': None
    }
    data.update(kwargs)
    return data


def paginated(*items, page=1, limit=20, total=None):
    """Wrap items in the API's list response shape."""
    total = len(items) if total is None else total
    return {
        'data': list(items),
        'pagination': {
            'page': page,
            'limit': limit,
            'total': total,
            'totalPages': (total + limit - 1) // limit
        }
    }
