import os


def parse_stale_times(value):
    """
    Parse QUERY_STALE_TIMES overrides, e.g. "stock=60,users=600".

    Kinds not listed keep their default staleness window.
    """
    overrides = {}
    if not value:
        return overrides
    for item in value.split(','):
        kind, _, seconds = item.partition('=')
        if kind.strip() and seconds.strip():
            overrides[kind.strip()] = float(seconds)
    return overrides


class Config:
    """Base configuration"""

    # Flask
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Remote business API
    API_BASE_URL = os.environ.get('API_BASE_URL', 'http://localhost:3000/api')
    API_TIMEOUT = float(os.environ.get('API_TIMEOUT', 10))
    # httpx transport override; tests plug an httpx.MockTransport in here
    API_TRANSPORT = None

    # Query cache staleness windows in seconds, per entity kind
    QUERY_STALE_TIMES = parse_stale_times(os.environ.get('QUERY_STALE_TIMES'))
    # Redis expiry of cached queries; stale entries are kept until then
    QUERY_CACHE_TTL = int(os.environ.get('QUERY_CACHE_TTL', 3600))

    # Redis holding the query cache; caching is disabled without a host
    REDIS_HOST = os.environ.get('REDIS_HOST', 'localhost')
    REDIS_PORT = int(os.environ.get('REDIS_PORT', 6379))
    REDIS_DB = int(os.environ.get('REDIS_DB', 0))
    REDIS_PASSWORD = os.environ.get('REDIS_PASSWORD') or None

    # Pagination
    DEFAULT_PAGE_SIZE = int(os.environ.get('DEFAULT_PAGE_SIZE', 20))
    MAX_PAGE_SIZE = int(os.environ.get('MAX_PAGE_SIZE', 100))

    # CORS
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*').split(',')

    # Tracing
    ENABLE_TRACING = os.environ.get('ENABLE_TRACING', 'false').lower() == 'true'

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    API_BASE_URL = 'http://api.test'
    ENABLE_TRACING = False
    # tests install a fakeredis client instead of connecting
    REDIS_HOST = None


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
