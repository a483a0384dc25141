import httpx
import pytest

from backoffice.clients import ApiClient
from backoffice.exceptions import ApiError
from tests.conftest import API_BASE_URL


class TestApiClient:
    """Round trips against the fake API transport."""

    async def test_returns_decoded_json(self, api_client, fake_api):
        fake_api.route('GET', '/things', json={'data': [1, 2]})

        assert await api_client.get('/things') == {'data': [1, 2]}

    async def test_empty_body_returns_none(self, api_client, fake_api):
        fake_api.route('DELETE', '/things/1', json=None, status=204)

        assert await api_client.delete('/things/1') is None

    async def test_sends_json_and_headers(self, fake_api):
        fake_api.route('POST', '/things', json={'ok': True}, status=201)
        client = ApiClient(
            API_BASE_URL,
            transport=fake_api.transport,
            headers={'Authorization': 'Bearer abc', 'X-Organization-ID': 'org-1', 'X-User-ID': None}
        )

        await client.post('/things', json={'name': 'x'})

        request = fake_api.requests[0]
        assert request.headers['Authorization'] == 'Bearer abc'
        assert request.headers['X-Organization-ID'] == 'org-1'
        assert request.headers['Content-Type'] == 'application/json'
        assert 'X-User-ID' not in request.headers
        assert fake_api.body_of(request) == {'name': 'x'}

    async def test_error_body_becomes_api_error(self, api_client, fake_api):
        fake_api.fail('POST', '/things/1/confirm', 409, message='Sale has no lines', code='SALE_EMPTY')

        with pytest.raises(ApiError) as exc_info:
            await api_client.post('/things/1/confirm')

        error = exc_info.value
        assert error.status_code == 409
        assert error.message == 'Sale has no lines'
        assert error.code == 'SALE_EMPTY'
        assert not error.is_not_found

    async def test_error_without_json_body(self, fake_api):
        fake_api.route('GET', '/broken', json=None, status=503)
        client = ApiClient(API_BASE_URL, transport=fake_api.transport)

        with pytest.raises(ApiError) as exc_info:
            await client.get('/broken')

        assert exc_info.value.status_code == 503
        assert '503' in exc_info.value.message

    async def test_nested_error_description(self, api_client, fake_api):
        fake_api.route('GET', '/nested', json={'error': {'code': 'E1', 'message': 'Nope'}}, status=400)

        with pytest.raises(ApiError) as exc_info:
            await api_client.get('/nested')

        assert exc_info.value.message == 'Nope'
        assert exc_info.value.code == 'E1'

    async def test_transport_failure_propagates(self, api_client, fake_api):
        fake_api.route('GET', '/down', json=lambda request: httpx.ConnectError('refused', request=request))

        with pytest.raises(httpx.ConnectError):
            await api_client.get('/down')

    async def test_query_params_are_sent(self, api_client, fake_api):
        fake_api.route('GET', '/things', json=[])

        await api_client.get('/things', params={'page': '2'})

        assert fake_api.requests[0].url.params['page'] == '2'
