# nosec B101


import pytest

from application.services.ranker import flag_offers, rank
from domain.models.comparison import SortStrategy


def test_rank_by_value_descending_and_stable(make_offer):
    offers = [
        make_offer(name='A', receive='950'),
        make_offer(name='B', receive='980'),
        make_offer(name='C', receive='980'),
    ]

    ranked = rank(offers, 'value')

    assert [o.name for o in ranked] == ['B', 'C', 'A']


def test_rank_by_fee_ascending_and_stable(make_offer):
    offers = [
        make_offer(name='A', fee='5'),
        make_offer(name='B', fee='2'),
        make_offer(name='C', fee='2'),
    ]

    ranked = rank(offers, SortStrategy.FEE)

    assert [o.name for o in ranked] == ['B', 'C', 'A']


def test_rank_by_speed_puts_fastest_first(make_offer):
    offers = [
        make_offer(name='A'),
        make_offer(name='B', fastest=True),
        make_offer(name='C'),
        make_offer(name='D', fastest=True),
    ]

    ranked = rank(offers, 'speed')

    assert [o.name for o in ranked] == ['B', 'D', 'A', 'C']


def test_rank_by_speed_without_fastest_keeps_input_order(make_offer):
    offers = [make_offer(name='A', receive='1'), make_offer(name='B', receive='3')]

    ranked = rank(offers, 'speed')

    assert [o.name for o in ranked] == ['A', 'B']
    assert not any(o.is_fastest for o in ranked)


def test_best_value_flags_first_tied_offer_only(make_offer):
    offers = [
        make_offer(name='A', receive='950'),
        make_offer(name='B', receive='980'),
        make_offer(name='C', receive='980'),
    ]

    flagged = flag_offers(offers)

    assert [o.is_best_value for o in flagged] == [False, True, False]


@pytest.mark.parametrize('strategy', list(SortStrategy))
def test_flags_do_not_depend_on_strategy(make_offer, strategy):
    offers = [
        make_offer(name='A', receive='990', fee='9'),
        make_offer(name='B', receive='970', fee='1', fastest=True),
    ]

    ranked = {o.name: o for o in rank(offers, strategy)}

    assert ranked['A'].is_best_value is True
    assert ranked['A'].is_fastest is False
    assert ranked['B'].is_best_value is False
    assert ranked['B'].is_fastest is True


def test_rank_does_not_mutate_input(make_offer):
    offers = [make_offer(name='A', receive='1'), make_offer(name='B', receive='2')]
    before = list(offers)

    ranked = rank(offers, 'value')

    assert offers == before
    assert ranked is not offers
    assert offers[0].is_best_value is None


@pytest.mark.parametrize('strategy', ['value', 'fee', 'speed'])
def test_rank_empty_input(strategy):
    assert rank([], strategy) == []


def test_rank_unknown_strategy_raises(make_offer):
    with pytest.raises(ValueError):
        rank([make_offer()], 'cheapest')
