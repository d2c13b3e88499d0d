"""
Shared fixtures for comparison tests.
"""

from decimal import Decimal

import pytest

from domain.models.comparison import RawComparisonPayload, RawOffer, ReconciledOffer


def _raw_offer(name='Wise', receive='950', fee='5', fastest=False, link=None, **overrides):
    fields = {
        'name': name,
        'rate': Decimal('0.95'),
        'transfer_fee': Decimal(str(fee)),
        'total_receive_amount': Decimal(str(receive)),
        'currency': 'INR',
        'estimated_delivery': 'Within 24 hours',
        'pros': ('Low fees',),
        'referral_bonus': None,
        'link': link,
        'marked_fastest': fastest,
    }
    fields.update(overrides)
    return RawOffer(**fields)


def _reconciled_offer(name='Wise', receive='950', fee='5', fastest=False, **overrides):
    fields = {
        'name': name,
        'rate': Decimal('0.95'),
        'transfer_fee': Decimal(str(fee)),
        'total_receive_amount': Decimal(str(receive)),
        'currency': 'INR',
        'estimated_delivery': 'Within 24 hours',
        'link': 'https://wise.com',
        'marked_fastest': fastest,
    }
    fields.update(overrides)
    return ReconciledOffer(**fields)


def _payload(platforms, market_rate='83.12'):
    return RawComparisonPayload(
        market_rate=Decimal(market_rate),
        timestamp='2025-11-05 10:30 UTC',
        analysis='INR is steady against USD this week.',
        grounding_urls=('https://www.xe.com/currencyconverter', 'https://wise.com/gb/currency-converter'),
        platforms=tuple(platforms),
    )


@pytest.fixture
def make_raw_offer():
    return _raw_offer


@pytest.fixture
def make_offer():
    return _reconciled_offer


@pytest.fixture
def make_payload():
    return _payload
