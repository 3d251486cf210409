# nosec B101


from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest

from application.services.rate_refresher import RateRefresher
from domain.exceptions.currency import CacheError, UpstreamError
from domain.models.currency import RateEntry


def make_provider(rates=None, error=None) -> Mock:
    provider = Mock()
    provider.name = 'coingecko'
    provider.fetch_rates = AsyncMock(return_value=rates, side_effect=error)
    return provider


@pytest.fixture
def upstream_rates():
    return {
        'BTC': RateEntry(name='Bitcoin', unit='BTC', value=Decimal('20000'), kind='crypto'),
        'USD': RateEntry(name='US Dollar', unit='$', value=Decimal('1'), kind='fiat'),
    }


@pytest.mark.asyncio
async def test_refresh_normalizes_keys_and_caches_snapshot(upstream_rates):
    cache = AsyncMock()
    refresher = RateRefresher(provider=make_provider(upstream_rates), cache=cache)

    snapshot = await refresher.refresh()

    assert set(snapshot) == {'btc', 'usd'}
    assert snapshot['btc'] == upstream_rates['BTC']
    cache.set_snapshot.assert_awaited_once_with(snapshot)


@pytest.mark.asyncio
async def test_refresh_is_idempotent_for_stable_upstream(upstream_rates):
    cache = AsyncMock()
    refresher = RateRefresher(provider=make_provider(upstream_rates), cache=cache)

    first = await refresher.refresh()
    second = await refresher.refresh()

    assert first == second
    assert cache.set_snapshot.await_count == 2


@pytest.mark.asyncio
@pytest.mark.parametrize('rates', [{}, None])
async def test_refresh_empty_rates_raises_and_does_not_write(rates):
    cache = AsyncMock()
    refresher = RateRefresher(provider=make_provider(rates), cache=cache)

    with pytest.raises(UpstreamError) as exc_info:
        await refresher.refresh()

    assert 'empty or null' in str(exc_info.value)
    cache.set_snapshot.assert_not_awaited()


@pytest.mark.asyncio
async def test_refresh_provider_failure_propagates_without_write():
    cache = AsyncMock()
    provider = make_provider(error=UpstreamError('CoinGecko request failed: ConnectError'))
    refresher = RateRefresher(provider=provider, cache=cache)

    with pytest.raises(UpstreamError) as exc_info:
        await refresher.refresh()

    assert 'ConnectError' in str(exc_info.value)
    cache.set_snapshot.assert_not_awaited()


@pytest.mark.asyncio
async def test_refresh_cache_write_failure_propagates(upstream_rates):
    cache = AsyncMock()
    cache.set_snapshot.side_effect = CacheError('Failed to write cryptoRates to cache')
    refresher = RateRefresher(provider=make_provider(upstream_rates), cache=cache)

    with pytest.raises(CacheError):
        await refresher.refresh()
