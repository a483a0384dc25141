import io

from backoffice.utils.colored_print import colored_print, print_error, print_warning
from backoffice.validators.config_validator import collect_errors, is_valid_url
from config import parse_stale_times


def valid_environ(**overrides):
    environ = {
        'FLASK_ENV': 'production',
        'API_BASE_URL': 'https://api.example.com/api',
        'SECRET_KEY': 'x' * 32,
    }
    environ.update(overrides)
    return environ


def test_valid_environment_fills_defaults():
    environ = valid_environ()

    errors, warnings = collect_errors(environ)

    assert errors == []
    assert environ['API_TIMEOUT'] == '10'
    assert environ['MAX_PAGE_SIZE'] == '100'
    assert any('LOG_LEVEL' in warning for warning in warnings)


def test_missing_api_base_url():
    environ = valid_environ()
    del environ['API_BASE_URL']

    errors, _ = collect_errors(environ)

    assert any('API_BASE_URL is required' in error for error in errors)


def test_short_secret_is_masked():
    errors, _ = collect_errors(valid_environ(SECRET_KEY='short'))

    assert any('SECRET_KEY' in error for error in errors)
    assert '   Current value: ***' in errors
    assert not any('short' in error for error in errors)


def test_invalid_values():
    errors, _ = collect_errors(valid_environ(API_TIMEOUT='-1', MAX_PAGE_SIZE='lots', ENABLE_TRACING='maybe'))

    joined = '\n'.join(errors)
    assert 'API_TIMEOUT' in joined
    assert 'MAX_PAGE_SIZE' in joined
    assert 'ENABLE_TRACING' in joined


def test_url_validation():
    assert is_valid_url('http://localhost:3000/api')
    assert not is_valid_url('localhost:3000')
    assert not is_valid_url('ftp://files.example.com')


def test_parse_stale_times():
    assert parse_stale_times('stock=60, users=600') == {'stock': 60.0, 'users': 600.0}
    assert parse_stale_times('') == {}
    assert parse_stale_times('stock') == {}


def test_cache_settings_are_validated():
    errors, _ = collect_errors(valid_environ(QUERY_CACHE_TTL='0', REDIS_PORT='70000'))

    joined = '\n'.join(errors)
    assert 'QUERY_CACHE_TTL' in joined
    assert 'REDIS_PORT' in joined


def test_console_output_follows_redirected_streams(capsys):
    print_warning('check the cache host')
    print_error('redis unreachable')

    captured = capsys.readouterr()
    assert captured.out == 'check the cache host\n'
    assert captured.err == 'redis unreachable\n'


def test_colored_print_writes_to_given_stream():
    stream = io.StringIO()

    colored_print('ready', bold=True, file=stream)

    assert stream.getvalue() == 'ready\n'
