# nosec B101


from decimal import Decimal

import pytest

from application.services.provider_registry import DEFAULT_REGISTRY
from application.services.reconciler import reconcile, reconcile_payload
from domain.exceptions.comparison import NoSupportedProvidersError
from domain.models.comparison import ComparisonResult, Corridor, RawOffer


def test_reconcile_renames_and_overrides_link(make_raw_offer):
    raw = make_raw_offer(name='wise (transferwise)', link='https://tracking.example/wise?ref=ai')

    [offer] = reconcile([raw])

    assert offer.name == 'Wise'
    assert offer.link == 'https://wise.com'


def test_reconcile_sets_canonical_link_when_raw_offer_has_none(make_raw_offer):
    [offer] = reconcile([make_raw_offer(name='MONEYGRAM', link=None)])

    assert offer.name == 'MoneyGram'
    assert offer.link == 'https://moneygram.com'


def test_reconcile_copies_other_fields_unchanged(make_raw_offer):
    raw = make_raw_offer(
        name='Remitly',
        receive='980.50',
        fee='2.99',
        fastest=True,
        pros=('Instant to UPI', 'No fee on first transfer'),
        referral_bonus='Get $20 on first transfer',
        estimated_delivery='Minutes',
    )

    [offer] = reconcile([raw])

    assert offer.rate == raw.rate
    assert offer.transfer_fee == Decimal('2.99')
    assert offer.total_receive_amount == Decimal('980.50')
    assert offer.currency == 'INR'
    assert offer.estimated_delivery == 'Minutes'
    assert offer.pros == ('Instant to UPI', 'No fee on first transfer')
    assert offer.referral_bonus == 'Get $20 on first transfer'
    assert offer.marked_fastest is True


def test_reconcile_never_sets_ranking_flags(make_raw_offer):
    [offer] = reconcile([make_raw_offer(fastest=True)])

    assert offer.is_best_value is None
    assert offer.is_fastest is None


def test_reconcile_drops_unsupported_and_keeps_order(make_raw_offer):
    raw_offers = [
        make_raw_offer(name='Bank of Ceylon'),
        make_raw_offer(name='Western Union'),
        make_raw_offer(name='Ria Money Transfer'),
        make_raw_offer(name='Wise'),
        make_raw_offer(name='Revolut'),
    ]

    offers = reconcile(raw_offers)

    assert [o.name for o in offers] == ['Western Union', 'Wise', 'Revolut']


def test_reconcile_empty_input_returns_empty_list():
    assert reconcile([]) == []


def test_reconcile_is_deterministic(make_raw_offer):
    raw_offers = [make_raw_offer(name='xe.com'), make_raw_offer(name='instarem')]

    assert reconcile(raw_offers) == reconcile(raw_offers)


def test_reconcile_is_idempotent_on_its_own_output(make_raw_offer):
    offers = reconcile([make_raw_offer(name='TransferWise'), make_raw_offer(name='WorldRemit Ltd')])
    as_raw = [
        RawOffer(
            name=o.name,
            rate=o.rate,
            transfer_fee=o.transfer_fee,
            total_receive_amount=o.total_receive_amount,
            currency=o.currency,
            estimated_delivery=o.estimated_delivery,
            pros=o.pros,
            referral_bonus=o.referral_bonus,
            link=o.link,
            marked_fastest=o.marked_fastest,
        )
        for o in offers
    ]

    assert reconcile(as_raw, DEFAULT_REGISTRY) == offers


def test_reconcile_payload_builds_result(make_raw_offer, make_payload):
    payload = make_payload([make_raw_offer(name='Wise'), make_raw_offer(name='Unknown Bank')])

    result = reconcile_payload(payload, Corridor('USD', 'INR'))

    assert isinstance(result, ComparisonResult)
    assert result.market_rate == Decimal('83.12')
    assert result.timestamp == payload.timestamp
    assert result.analysis == payload.analysis
    assert result.grounding_urls == payload.grounding_urls
    assert [o.name for o in result.offers] == ['Wise']


def test_reconcile_payload_with_no_supported_offers_raises(make_raw_offer, make_payload):
    payload = make_payload([make_raw_offer(name='Bank of Maldives')])

    with pytest.raises(NoSupportedProvidersError) as exc_info:
        reconcile_payload(payload, Corridor('MVR', 'LKR'))

    assert exc_info.value.source == 'MVR'
    assert exc_info.value.target == 'LKR'
    assert 'MVR to LKR' in str(exc_info.value)
    assert 'USD to INR' in str(exc_info.value)
