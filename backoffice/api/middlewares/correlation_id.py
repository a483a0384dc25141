"""
Correlation ID middleware

Every request gets a correlation id (taken from X-Correlation-ID or
generated). The id is echoed on the response and forwarded, together with the
caller's identity headers, on every call made to the remote API.
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Dict

from flask import Response, current_app, g, request

# Context variable to store correlation ID for the current request
correlation_id_context: ContextVar[str] = ContextVar('correlation_id', default='')

# Caller headers relayed unchanged to the remote API
FORWARDED_HEADERS = (
    'Authorization',
    'X-Organization-Slug',
    'X-Organization-ID',
    'X-User-ID',
)


class CorrelationIdMiddleware:
    """Flask middleware for handling correlation IDs"""

    def __init__(self, app=None):
        self.app = app
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.before_request(self.before_request)
        app.after_request(self.after_request)

    def before_request(self):
        correlation_id = request.headers.get('X-Correlation-ID') or str(uuid.uuid4())

        g.correlation_id = correlation_id
        correlation_id_context.set(correlation_id)

        current_app.logger.info(f"[{correlation_id}] {request.method} {request.path} - Processing request")

    def after_request(self, response: Response) -> Response:
        correlation_id = getattr(g, 'correlation_id', 'unknown')
        response.headers['X-Correlation-ID'] = correlation_id

        current_app.logger.info(
            f"[{correlation_id}] {request.method} {request.path} - Response: {response.status_code}"
        )
        return response


def get_correlation_id() -> str:
    """Current correlation id from the request, or the context variable outside one"""
    if hasattr(g, 'correlation_id'):
        return g.correlation_id
    return correlation_id_context.get() or 'unknown'


def create_forward_headers() -> Dict[str, str]:
    """Headers to send upstream on behalf of the current caller"""
    headers = {'X-Correlation-ID': get_correlation_id()}
    for name in FORWARDED_HEADERS:
        value = request.headers.get(name)
        if value:
            headers[name] = value
    return headers


def tenant_scope() -> str:
    """Cache scope of the current caller (its organization)"""
    return (
        request.headers.get('X-Organization-ID')
        or request.headers.get('X-Organization-Slug')
        or 'default'
    )


def init_correlation_id_logging(app):
    """Prefix app log records with the correlation id"""

    class CorrelationIdFormatter(logging.Formatter):
        def format(self, record):
            record.correlation_id = correlation_id_context.get() or 'unknown'
            return super().format(record)

    formatter = CorrelationIdFormatter('[%(correlation_id)s] %(levelname)s in %(module)s: %(message)s')
    for handler in app.logger.handlers:
        handler.setFormatter(formatter)
