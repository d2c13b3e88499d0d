import asyncio
import itertools
import logging
import uuid
from decimal import Decimal, InvalidOperation

from application.services.provider_registry import DEFAULT_REGISTRY, ProviderRegistry
from application.services.ranker import rank
from application.services.reconciler import reconcile_payload
from domain.exceptions.comparison import ComparisonException, ValidationError
from domain.models.comparison import (
	ComparisonResult,
	Corridor,
	ReconciledOffer,
	SessionSnapshot,
	SessionState,
	SortStrategy,
)
from domain.models.currency import SampleCorridor
from infrastructure.providers.base import ClickTracker, ComparisonDataProvider

logger = logging.getLogger(__name__)

DEFAULT_CORRIDOR = Corridor(source='MVR', target='INR')
DEFAULT_AMOUNT = Decimal('1000')
FALLBACK_ERROR_MESSAGE = (
	'Failed to fetch comparison data. Please check your connection and try again.'
)


def parse_amount(amount) -> Decimal:
	if isinstance(amount, bool):
		raise ValidationError('Please enter a valid amount.')
	try:
		value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
	except (InvalidOperation, ValueError):
		raise ValidationError('Please enter a valid amount.') from None
	if not value.is_finite() or value <= 0:
		raise ValidationError('Please enter a valid amount.')
	return value


def parse_currency_code(code: str | None) -> str:
	normalized = (code or '').strip().upper()
	if not normalized:
		raise ValidationError('Please choose both a source and a target currency.')
	return normalized


class ComparisonSession:
	"""One user's comparison workflow: idle -> searching -> complete | error.

	The session holds a single immutable ``SessionSnapshot``; each transition
	swaps it for a new one. Every request into ``searching`` takes a fresh
	generation number, and a collaborator response is applied only while its
	generation is still the latest, so a slow earlier request can never
	overwrite a newer one.
	"""

	def __init__(
		self,
		data_provider: ComparisonDataProvider,
		registry: ProviderRegistry = DEFAULT_REGISTRY,
		click_tracker: ClickTracker | None = None,
		session_id: str | None = None,
	):
		self.id = session_id or uuid.uuid4().hex
		self.data_provider = data_provider
		self.registry = registry
		self.click_tracker = click_tracker
		self.sort_strategy = SortStrategy.VALUE
		self._generations = itertools.count(1)
		self._generation = 0
		self._snapshot = SessionSnapshot.idle(DEFAULT_CORRIDOR, DEFAULT_AMOUNT)

	@property
	def snapshot(self) -> SessionSnapshot:
		return self._snapshot

	@property
	def state(self) -> SessionState:
		return self._snapshot.state

	@property
	def result(self) -> ComparisonResult | None:
		return self._snapshot.result if self.state is SessionState.COMPLETE else None

	@property
	def error(self) -> str | None:
		return self._snapshot.error

	def _log_extra(self) -> dict:
		return {'session_id': self.id, 'corridor': str(self._snapshot.corridor)}

	def _supersede(self) -> int:
		self._generation = next(self._generations)
		return self._generation

	async def request_comparison(
		self, amount, source_currency: str, target_currency: str
	) -> SessionSnapshot:
		value = parse_amount(amount)
		corridor = Corridor(
			source=parse_currency_code(source_currency),
			target=parse_currency_code(target_currency),
		)

		generation = self._supersede()
		self._snapshot = SessionSnapshot.searching(corridor, value)
		logger.info(
			f'Session {self.id}: comparing {value} {corridor} (request {generation})',
			extra=self._log_extra(),
		)

		try:
			payload = await self.data_provider.fetch_comparison_data(
				value, corridor.source, corridor.target
			)
			result = reconcile_payload(payload, corridor, self.registry)
		except asyncio.CancelledError:
			# A cancelled fetch must not leave the session stuck in searching.
			if generation == self._generation:
				self._snapshot = SessionSnapshot.idle(corridor, value)
				logger.info(
					f'Session {self.id}: request {generation} cancelled', extra=self._log_extra()
				)
			raise
		except ComparisonException as e:
			outcome = SessionSnapshot.failed(corridor, value, str(e) or FALLBACK_ERROR_MESSAGE)
		except Exception as e:
			logger.error(
				f'Session {self.id}: comparison for {corridor} failed: {e}',
				exc_info=True,
				extra=self._log_extra(),
			)
			outcome = SessionSnapshot.failed(corridor, value, str(e) or FALLBACK_ERROR_MESSAGE)
		else:
			outcome = SessionSnapshot.complete(corridor, value, result)

		if generation != self._generation:
			logger.info(
				f'Session {self.id}: discarding stale response for request {generation}',
				extra=self._log_extra(),
			)
			return self._snapshot

		self._snapshot = outcome
		if outcome.state is SessionState.ERROR:
			logger.warning(f'Session {self.id}: {outcome.error}', extra=self._log_extra())
		return outcome

	def set_sort_strategy(self, strategy: SortStrategy | str) -> SortStrategy:
		self.sort_strategy = SortStrategy(strategy)
		return self.sort_strategy

	def ranked_offers(self) -> list[ReconciledOffer]:
		result = self.result
		if result is None:
			return []
		return rank(result.offers, self.sort_strategy)

	def swap(self, source_currency: str, target_currency: str) -> Corridor:
		corridor = Corridor(
			source=parse_currency_code(source_currency),
			target=parse_currency_code(target_currency),
		).swapped()
		self._supersede()
		self._snapshot = SessionSnapshot.idle(corridor, self._snapshot.amount)
		return corridor

	def apply_sample(self, sample: SampleCorridor) -> SessionSnapshot:
		self._supersede()
		self._snapshot = SessionSnapshot.idle(
			Corridor(source=sample.source, target=sample.target), sample.amount
		)
		return self._snapshot

	async def track_click(self, provider_name: str) -> None:
		if self.click_tracker is None:
			return
		try:
			await self.click_tracker.track_click(provider_name)
		except Exception as e:
			logger.warning(
				f'Session {self.id}: failed to track click for {provider_name}: {e}',
				extra=self._log_extra(),
			)
