"""
Configuration Validator
Checks the environment at startup and fails fast on invalid values

Runs before logging is configured, so results are printed to the console.
"""

import os
import sys
from urllib.parse import urlparse

from backoffice.utils.colored_print import (
    print_error, print_failure, print_step, print_success, print_warning
)


def is_valid_url(url: str) -> bool:
    """Validates a URL format"""
    try:
        result = urlparse(url)
        return result.scheme in ('http', 'https') and bool(result.netloc)
    except ValueError:
        return False


def is_positive_number(value: str) -> bool:
    try:
        return float(value) > 0
    except (TypeError, ValueError):
        return False


def is_valid_log_level(level: str) -> bool:
    return level.upper() in ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def is_valid_environment(env: str) -> bool:
    return env.lower() in ['development', 'production', 'testing', 'staging']


def is_valid_boolean(value: str) -> bool:
    return value.lower() in ['true', 'false']


# Configuration validation rules
VALIDATION_RULES = {
    'FLASK_ENV': {
        'required': False,
        'validator': is_valid_environment,
        'error_message': 'FLASK_ENV must be one of: development, production, testing, staging',
        'default': 'development',
    },
    'API_BASE_URL': {
        'required': True,
        'validator': is_valid_url,
        'error_message': 'API_BASE_URL must be a valid http(s) URL',
    },
    'API_TIMEOUT': {
        'required': False,
        'validator': is_positive_number,
        'error_message': 'API_TIMEOUT must be a positive number of seconds',
        'default': '10',
    },
    'SECRET_KEY': {
        'required': True,
        'validator': lambda v: v and len(v) >= 32,
        'error_message': 'SECRET_KEY must be at least 32 characters long',
    },
    'CORS_ORIGINS': {
        'required': False,
        'validator': lambda v: all(
            origin.strip() == '*' or is_valid_url(origin.strip())
            for origin in v.split(',')
        ),
        'error_message': 'CORS_ORIGINS must be a comma-separated list of valid URLs or *',
        'default': '*',
    },
    'LOG_LEVEL': {
        'required': False,
        'validator': is_valid_log_level,
        'error_message': 'LOG_LEVEL must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL',
        'default': 'INFO',
    },
    'ENABLE_TRACING': {
        'required': False,
        'validator': is_valid_boolean,
        'error_message': 'ENABLE_TRACING must be true or false',
        'default': 'false',
    },
    'DEFAULT_PAGE_SIZE': {
        'required': False,
        'validator': lambda v: v.isdigit() and int(v) > 0,
        'error_message': 'DEFAULT_PAGE_SIZE must be a positive integer',
        'default': '20',
    },
    'MAX_PAGE_SIZE': {
        'required': False,
        'validator': lambda v: v.isdigit() and int(v) > 0,
        'error_message': 'MAX_PAGE_SIZE must be a positive integer',
        'default': '100',
    },
    'QUERY_CACHE_TTL': {
        'required': False,
        'validator': lambda v: v.isdigit() and int(v) > 0,
        'error_message': 'QUERY_CACHE_TTL must be a positive integer number of seconds',
        'default': '3600',
    },
    'REDIS_PORT': {
        'required': False,
        'validator': lambda v: v.isdigit() and 0 < int(v) < 65536,
        'error_message': 'REDIS_PORT must be a valid port number',
        'default': '6379',
    },
}


def collect_errors(environ=None):
    """
    Check `environ` against VALIDATION_RULES.

    Returns:
        (errors, warnings) as lists of messages; defaults are written back
        into `environ` for unset optional keys
    """
    environ = os.environ if environ is None else environ
    errors = []
    warnings = []

    for key, rule in VALIDATION_RULES.items():
        value = environ.get(key)

        if not value:
            if rule['required']:
                errors.append(f"❌ {key} is required but not set")
            elif 'default' in rule:
                warnings.append(f"⚠️  {key} not set, using default: {rule['default']}")
                environ[key] = rule['default']
            continue

        if not rule['validator'](value):
            errors.append(f"❌ {key}: {rule['error_message']}")
            # Don't expose sensitive values
            if 'SECRET' in key:
                errors.append("   Current value: ***")
            else:
                errors.append(f"   Current value: {value[:100]}")

    return errors, warnings


def validate_config():
    """Validate os.environ; exits the process when a rule fails"""
    print_step('[CONFIG] Validating environment configuration...')

    errors, warnings = collect_errors()
    for warning in warnings:
        print_warning(warning)

    if errors:
        print_failure('[CONFIG] Configuration validation failed:')
        for error in errors:
            print_error(error)
        print_error('\n💡 Please check your .env file and ensure all required variables are set correctly.')
        sys.exit(1)

    print_success('[CONFIG] All required environment variables are valid')
