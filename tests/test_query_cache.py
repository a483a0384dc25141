from concurrent.futures import ThreadPoolExecutor

import pytest
from flask import Flask

from backoffice.cache import (
    QueryCache, get_query_cache, get_redis, init_redis, movement_keys, principal_for, stock_keys
)
from backoffice.models import MovementFilters
from tests.conftest import generate_movement_data


class CountingFetcher:
    def __init__(self, value='value'):
        self.value = value
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        return self.value


class TestQueryCache:

    async def test_fresh_entry_is_served_from_cache(self, cache):
        fetcher = CountingFetcher()
        key = movement_keys.detail('mov-1')

        assert await cache.fetch(key, fetcher) == 'value'
        assert await cache.fetch(key, fetcher) == 'value'
        assert fetcher.calls == 1

    async def test_entry_goes_stale_after_its_window(self, cache, clock):
        fetcher = CountingFetcher()
        key = movement_keys.detail('mov-1')

        await cache.fetch(key, fetcher)
        clock.advance(119)
        await cache.fetch(key, fetcher)
        assert fetcher.calls == 1

        clock.advance(1)
        await cache.fetch(key, fetcher)
        assert fetcher.calls == 2

    async def test_explicit_stale_time_overrides_default(self, cache, clock):
        fetcher = CountingFetcher()
        key = ('products', 'list', None)

        await cache.fetch(key, fetcher, stale_time=10)
        clock.advance(10)
        await cache.fetch(key, fetcher, stale_time=10)

        assert fetcher.calls == 2

    def test_default_stale_times(self, cache):
        assert cache.stale_time_for(stock_keys.lists()) == 120
        assert cache.stale_time_for(('users', 'list', None)) == 300

    def test_configured_stale_times(self, redis_client):
        cache = QueryCache(redis_client, stale_times={'stock': 30})

        assert cache.stale_time_for(stock_keys.lists()) == 30
        assert cache.stale_time_for(movement_keys.lists()) == 120

    async def test_values_survive_the_round_trip(self, cache):
        filters = MovementFilters(page=2, search='widget')
        key = movement_keys.list(filters)

        await cache.fetch(key, CountingFetcher({'items': ('a', 'b'), 'filters': filters}))

        assert cache.peek(key) == {'items': ('a', 'b'), 'filters': filters}
        assert cache.keys() == [key]

    async def test_invalidate_marks_prefix_stale(self, cache):
        fetcher = CountingFetcher()
        list_key = movement_keys.list(MovementFilters(page=1))
        detail_key = movement_keys.detail('mov-1')
        await cache.fetch(list_key, fetcher)
        await cache.fetch(detail_key, fetcher)

        count = cache.invalidate(movement_keys.lists())

        assert count == 1
        assert cache.is_stale(list_key)
        assert not cache.is_stale(detail_key)
        # the value is kept until the next read refetches it
        assert cache.peek(list_key) == 'value'

        await cache.fetch(list_key, fetcher)
        assert fetcher.calls == 3

    async def test_invalidate_all_of_a_kind(self, cache):
        fetcher = CountingFetcher()
        await cache.fetch(movement_keys.detail('a'), fetcher)
        await cache.fetch(stock_keys.location('p', 'w'), fetcher)

        cache.invalidate(movement_keys.all)

        assert cache.is_stale(movement_keys.detail('a'))
        assert not cache.is_stale(stock_keys.location('p', 'w'))

    async def test_invalidate_does_not_touch_sibling_ids_sharing_a_prefix(self, cache):
        await cache.fetch(movement_keys.detail('mov-1'), CountingFetcher())
        await cache.fetch(movement_keys.detail('mov-10'), CountingFetcher())

        cache.invalidate(movement_keys.detail('mov-1'))

        assert cache.is_stale(movement_keys.detail('mov-1'))
        assert not cache.is_stale(movement_keys.detail('mov-10'))

    async def test_fetch_error_is_not_cached(self, cache):
        async def failing():
            raise RuntimeError('upstream down')

        key = movement_keys.detail('mov-1')
        with pytest.raises(RuntimeError):
            await cache.fetch(key, failing)

        assert key not in cache
        assert await cache.fetch(key, CountingFetcher('recovered')) == 'recovered'

    async def test_none_result_is_cached(self, cache):
        fetcher = CountingFetcher(value=None)
        key = movement_keys.detail('missing')

        await cache.fetch(key, fetcher)
        await cache.fetch(key, fetcher)

        assert fetcher.calls == 1

    def test_invalidation_log_is_bounded(self, redis_client):
        cache = QueryCache(redis_client, log_size=3)
        for index in range(5):
            cache.invalidate(movement_keys.detail(str(index)))

        assert list(cache.invalidation_log) == [
            movement_keys.detail('2'), movement_keys.detail('3'), movement_keys.detail('4')
        ]

    async def test_every_redis_key_expires(self, cache, redis_client):
        await cache.fetch(stock_keys.list(None), CountingFetcher())
        cache.invalidate(stock_keys.lists())

        names = list(redis_client.scan_iter(match='backoffice:query:*'))
        assert len(names) == 2
        assert all(0 < redis_client.ttl(name) <= cache.ttl for name in names)

    def test_clear_drops_the_tenant(self, cache, redis_client):
        cache.set(movement_keys.detail('mov-1'), 'value')
        cache.invalidate(movement_keys.all)

        cache.clear()

        assert len(cache) == 0
        assert list(cache.invalidation_log) == []
        assert list(redis_client.scan_iter(match='backoffice:query:*')) == []


class TestInFlightInvalidation:

    async def test_read_overlapping_an_invalidation_is_stored_stale(self, cache):
        key = stock_keys.list(None)

        async def fetch_while_stock_changes():
            # a mutation lands while the list request is on the wire
            cache.invalidate(stock_keys.lists())
            return 'old stock'

        assert await cache.fetch(key, fetch_while_stock_changes) == 'old stock'

        assert cache.is_stale(key)
        assert await cache.fetch(key, CountingFetcher('new stock')) == 'new stock'
        assert not cache.is_stale(key)

    async def test_unrelated_invalidation_keeps_the_read_fresh(self, cache):
        key = stock_keys.list(None)

        async def fetch_while_movements_change():
            cache.invalidate(movement_keys.all)
            return 'stock'

        await cache.fetch(key, fetch_while_movements_change)

        assert not cache.is_stale(key)

    async def test_invalidation_of_the_whole_kind_overlapping_a_detail_read(self, cache):
        key = movement_keys.detail('mov-1')

        async def fetch_while_kind_resets():
            cache.invalidate(movement_keys.all)
            return 'movement'

        await cache.fetch(key, fetch_while_kind_resets)

        assert cache.is_stale(key)


class TestSharedCaches:

    async def test_workers_sharing_redis_see_each_others_invalidations(self, redis_client, clock):
        principal = principal_for('Bearer test-token')
        first = QueryCache(redis_client, tenant='org-1', principal=principal, clock=clock)
        second = QueryCache(redis_client, tenant='org-1', principal=principal, clock=clock)
        fetcher = CountingFetcher()
        key = movement_keys.detail('mov-1')

        await first.fetch(key, fetcher)
        await second.fetch(key, fetcher)
        assert fetcher.calls == 1

        second.invalidate(movement_keys.detail('mov-1'))

        assert first.is_stale(key)

    async def test_tenants_do_not_share_entries(self, redis_client):
        key = movement_keys.detail('mov-1')
        await get_query_cache(redis_client, 'org-1', 'Bearer a').fetch(key, CountingFetcher('org-1 data'))

        assert key not in get_query_cache(redis_client, 'org-2', 'Bearer a')

    async def test_credentials_partition_entries(self, redis_client):
        key = movement_keys.detail('mov-1')
        fetcher = CountingFetcher()
        await get_query_cache(redis_client, 'org-1', 'Bearer a').fetch(key, fetcher)

        assert key not in get_query_cache(redis_client, 'org-1', None)
        assert key not in get_query_cache(redis_client, 'org-1', 'Bearer b')

        await get_query_cache(redis_client, 'org-1', None).fetch(key, fetcher)
        assert fetcher.calls == 2

    async def test_invalidation_reaches_every_principal_of_the_tenant(self, redis_client):
        key = movement_keys.detail('mov-1')
        alice = get_query_cache(redis_client, 'org-1', 'Bearer alice')
        bob = get_query_cache(redis_client, 'org-1', 'Bearer bob')
        other_org = get_query_cache(redis_client, 'org-2', 'Bearer alice')
        for cache in (alice, bob, other_org):
            await cache.fetch(key, CountingFetcher())

        assert alice.invalidate(movement_keys.details()) == 2

        assert alice.is_stale(key)
        assert bob.is_stale(key)
        assert not other_org.is_stale(key)

    def test_concurrent_writes_and_invalidations(self, cache):
        def write(index):
            cache.set(movement_keys.detail(str(index)), index)

        def invalidate(_):
            cache.invalidate(movement_keys.details())

        with ThreadPoolExecutor(max_workers=4) as pool:
            futures = [pool.submit(write, index) for index in range(20)]
            futures += [pool.submit(invalidate, index) for index in range(20)]
            for future in futures:
                future.result()

        assert len(cache) == 20


class TestDisabledCache:

    async def test_without_redis_every_read_goes_to_the_server(self, clock):
        cache = QueryCache(None, clock=clock)
        fetcher = CountingFetcher()
        key = movement_keys.detail('mov-1')

        await cache.fetch(key, fetcher)
        await cache.fetch(key, fetcher)

        assert fetcher.calls == 2
        assert key not in cache
        assert cache.is_stale(key)
        assert cache.invalidate(movement_keys.all) == 0
        assert list(cache.invalidation_log) == [movement_keys.all]


class TestRedisSetup:

    def test_unconfigured_redis_disables_caching(self):
        app = Flask(__name__)
        app.config['REDIS_HOST'] = None

        assert init_redis(app) is None
        with app.app_context():
            assert get_redis() is None

    def test_app_without_redis_reads_through(self, app, fake_api, auth_headers):
        app.extensions['redis'] = None
        fake_api.route('GET', '/inventory/movements/mov-1', json=generate_movement_data())
        client = app.test_client()

        client.get('/api/v1/inventory/movements/mov-1', headers=auth_headers)
        response = client.get('/api/v1/inventory/movements/mov-1', headers=auth_headers)

        assert response.status_code == 200
        assert len(fake_api.calls('GET', '/inventory/movements/mov-1')) == 2
