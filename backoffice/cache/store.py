"""
Redis connection shared by every worker's query cache
"""

from typing import Optional

import redis
from flask import current_app


def init_redis(app) -> Optional[redis.Redis]:
    """
    Connect to Redis and keep the client on the app.

    When Redis is not configured or cannot be reached, query caching is
    disabled and every read goes to the remote API.
    """
    client = None
    if not app.config.get('REDIS_HOST'):
        app.logger.info("Redis not configured. Query caching is disabled.")
    else:
        try:
            client = redis.Redis(
                host=app.config['REDIS_HOST'],
                port=app.config['REDIS_PORT'],
                db=app.config['REDIS_DB'],
                password=app.config['REDIS_PASSWORD'],
                socket_connect_timeout=5,
                socket_timeout=5
            )
            client.ping()
            app.logger.info("Redis connection established")
        except redis.RedisError as e:
            app.logger.warning(f"Redis connection failed: {e}. Query caching is disabled.")
            client = None

    app.extensions['redis'] = client
    return client


def get_redis() -> Optional[redis.Redis]:
    """Redis client of the current app"""
    return current_app.extensions.get('redis')
