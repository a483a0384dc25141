"""
Remote API Client - async HTTP client for the business API
"""

import logging
from typing import Any, Dict, Optional

import httpx

from backoffice.exceptions import ApiError

logger = logging.getLogger(__name__)


class ApiClient:
    """
    Thin JSON client over httpx.

    A new AsyncClient is opened for every call so the client can be used from
    any event loop (Flask runs each async view in its own loop).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.headers = {'Content-Type': 'application/json'}
        self.headers.update({k: v for k, v in (headers or {}).items() if v})
        self.transport = transport

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request('GET', path, params=params)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request('POST', path, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request('PUT', path, json=json)

    async def patch(self, path: str, json: Any = None) -> Any:
        return await self.request('PATCH', path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request('DELETE', path)

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None
    ) -> Any:
        """
        Perform one round trip and return the decoded JSON body.

        Raises:
            ApiError: the server answered with a non-2xx status
            httpx.HTTPError: the request never got an answer
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url} params={params}")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.request(method, url, params=params, json=json, headers=self.headers)

        logger.debug(f"{method} {url} -> {response.status_code}")

        if response.is_success:
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError as e:
                raise ApiError('Invalid JSON in response', 502, code='INVALID_RESPONSE') from e

        raise self._to_api_error(response)

    @staticmethod
    def _to_api_error(response: httpx.Response) -> ApiError:
        try:
            body = response.json()
        except ValueError:
            body = None

        message = f"Request failed with status {response.status_code}"
        code = None
        details = None
        if isinstance(body, dict):
            message = body.get('message') or body.get('error') or message
            code = body.get('code')
            details = body.get('details')
            # some endpoints nest the description under `error`
            if isinstance(message, dict):
                code = code or message.get('code')
                message = message.get('message') or str(message)

        return ApiError(str(message), response.status_code, code=code, details=details)
