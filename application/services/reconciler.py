import logging
from collections.abc import Iterable

from application.services.provider_registry import DEFAULT_REGISTRY, ProviderRegistry
from domain.exceptions.comparison import NoSupportedProvidersError
from domain.models.comparison import (
	ComparisonResult,
	Corridor,
	RawComparisonPayload,
	RawOffer,
	ReconciledOffer,
)

logger = logging.getLogger(__name__)


def reconcile(
	raw_offers: Iterable[RawOffer], registry: ProviderRegistry = DEFAULT_REGISTRY
) -> list[ReconciledOffer]:
	"""Keep whitelisted offers, renamed and relinked to their canonical provider.

	Offers matching no registry entry are dropped. Survivors keep their input
	order. The canonical link always replaces whatever link the offer carried.
	"""
	reconciled: list[ReconciledOffer] = []
	for offer in raw_offers:
		descriptor = registry.lookup(offer.name)
		if descriptor is None:
			logger.debug(f'Dropping unsupported provider {offer.name!r}')
			continue

		reconciled.append(
			ReconciledOffer(
				name=descriptor.name,
				rate=offer.rate,
				transfer_fee=offer.transfer_fee,
				total_receive_amount=offer.total_receive_amount,
				currency=offer.currency,
				estimated_delivery=offer.estimated_delivery,
				link=descriptor.url,
				pros=tuple(offer.pros),
				referral_bonus=offer.referral_bonus,
				marked_fastest=offer.marked_fastest,
			)
		)
	return reconciled


def reconcile_payload(
	payload: RawComparisonPayload,
	corridor: Corridor,
	registry: ProviderRegistry = DEFAULT_REGISTRY,
) -> ComparisonResult:
	offers = reconcile(payload.platforms, registry)
	if not offers:
		raise NoSupportedProvidersError(corridor.source, corridor.target)

	logger.info(
		f'Reconciled {len(offers)}/{len(payload.platforms)} offers for {corridor}'
	)
	return ComparisonResult(
		market_rate=payload.market_rate,
		timestamp=payload.timestamp,
		analysis=payload.analysis,
		grounding_urls=tuple(payload.grounding_urls),
		offers=tuple(offers),
	)
