"""
Health check endpoints
These endpoints are used by monitoring systems, load balancers, and Kubernetes
"""

import logging
import os
import time
from datetime import datetime, timezone

import httpx
from flask import Blueprint, current_app, jsonify

from backoffice.clients import ApiClient
from backoffice.exceptions import ApiError

logger = logging.getLogger(__name__)

# Create blueprint for health endpoints
health_bp = Blueprint('health', __name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


async def check_api_health():
    """Ping the remote API health endpoint"""
    client = ApiClient(
        current_app.config['API_BASE_URL'],
        timeout=current_app.config['API_TIMEOUT'],
        transport=current_app.config.get('API_TRANSPORT')
    )
    start_time = time.monotonic()
    try:
        await client.get('/health')
        status, message = 'healthy', 'Remote API is reachable'
    except (ApiError, httpx.HTTPError) as e:
        status, message = 'unhealthy', f'Remote API check failed: {e}'

    return {
        'status': status,
        'message': message,
        'response_time': round((time.monotonic() - start_time) * 1000, 2),
    }


@health_bp.route('/health', methods=['GET'])
def health():
    """Main health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': os.environ.get('NAME', 'backoffice-gateway'),
        'timestamp': _timestamp(),
        'version': os.environ.get('VERSION', '1.0.0'),
        'environment': os.environ.get('FLASK_ENV', 'development'),
    }), 200


@health_bp.route('/health/ready', methods=['GET'])
async def readiness():
    """Readiness probe - ready once the remote API answers"""
    api_check = await check_api_health()
    ready = api_check['status'] == 'healthy'
    if not ready:
        logger.warning(f"Readiness check failed: {api_check['message']}")

    return jsonify({
        'status': 'ready' if ready else 'not ready',
        'service': os.environ.get('NAME', 'backoffice-gateway'),
        'timestamp': _timestamp(),
        'checks': {'api': api_check},
    }), 200 if ready else 503
