from collections.abc import Sequence
from dataclasses import replace

from domain.models.comparison import ReconciledOffer, SortStrategy


def flag_offers(offers: Sequence[ReconciledOffer]) -> list[ReconciledOffer]:
	"""Copy ``offers`` with ``is_best_value`` and ``is_fastest`` filled in.

	Best value goes to the first offer holding the maximum receive amount.
	Fastest mirrors the upstream hint; delivery text is never parsed.
	"""
	best_index = None
	best_amount = None
	for index, offer in enumerate(offers):
		if best_amount is None or offer.total_receive_amount > best_amount:
			best_index, best_amount = index, offer.total_receive_amount

	return [
		replace(offer, is_best_value=index == best_index, is_fastest=offer.marked_fastest)
		for index, offer in enumerate(offers)
	]


def rank(
	offers: Sequence[ReconciledOffer], strategy: SortStrategy | str = SortStrategy.VALUE
) -> list[ReconciledOffer]:
	strategy = SortStrategy(strategy)
	flagged = flag_offers(offers)

	# sorted() is stable, so ties keep their input order.
	if strategy is SortStrategy.VALUE:
		return sorted(flagged, key=lambda o: o.total_receive_amount, reverse=True)
	if strategy is SortStrategy.FEE:
		return sorted(flagged, key=lambda o: o.transfer_fee)
	return sorted(flagged, key=lambda o: not o.is_fastest)
