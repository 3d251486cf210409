"""
Shared fixtures: a small rate table in the shape CoinGecko returns it.
"""

from decimal import Decimal

import pytest

from domain.models.currency import RateEntry


@pytest.fixture
def btc_usd_snapshot():
    return {
        'btc': RateEntry(name='Bitcoin', unit='BTC', value=Decimal('20000'), kind='crypto'),
        'usd': RateEntry(name='US Dollar', unit='$', value=Decimal('1'), kind='fiat'),
    }


@pytest.fixture
def snapshot(btc_usd_snapshot):
    return {
        **btc_usd_snapshot,
        'eth': RateEntry(name='Ether', unit='ETH', value=Decimal('1500'), kind='crypto'),
        'eur': RateEntry(name='Euro', unit='€', value=Decimal('0.9'), kind='fiat'),
    }


@pytest.fixture
def coingecko_payload():
    return {
        'rates': {
            'BTC': {'name': 'Bitcoin', 'unit': 'BTC', 'value': 1.0, 'type': 'crypto'},
            'eth': {'name': 'Ether', 'unit': 'ETH', 'value': 13.333, 'type': 'crypto'},
            'Usd': {'name': 'US Dollar', 'unit': '$', 'value': 20000.0, 'type': 'fiat'},
        }
    }
