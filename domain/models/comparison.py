from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class SortStrategy(str, Enum):
	VALUE = 'value'
	FEE = 'fee'
	SPEED = 'speed'


class SessionState(str, Enum):
	IDLE = 'idle'
	SEARCHING = 'searching'
	COMPLETE = 'complete'
	ERROR = 'error'


@dataclass(frozen=True)
class Corridor:
	source: str
	target: str

	def swapped(self) -> 'Corridor':
		return Corridor(source=self.target, target=self.source)

	def __str__(self) -> str:
		return f'{self.source} -> {self.target}'


@dataclass(frozen=True)
class RawOffer:
	"""A provider offer exactly as the market-data collaborator reported it."""

	name: str
	rate: Decimal
	transfer_fee: Decimal
	total_receive_amount: Decimal
	currency: str
	estimated_delivery: str
	pros: tuple[str, ...] = ()
	referral_bonus: str | None = None
	link: str | None = None
	marked_fastest: bool = False  # upstream hint, not derived from estimated_delivery


@dataclass(frozen=True)
class ReconciledOffer:
	name: str
	rate: Decimal
	transfer_fee: Decimal
	total_receive_amount: Decimal
	currency: str
	estimated_delivery: str
	link: str
	pros: tuple[str, ...] = ()
	referral_bonus: str | None = None
	marked_fastest: bool = False
	is_best_value: bool | None = None
	is_fastest: bool | None = None


@dataclass(frozen=True)
class RawComparisonPayload:
	market_rate: Decimal
	timestamp: str
	analysis: str
	grounding_urls: tuple[str, ...]
	platforms: tuple[RawOffer, ...]


@dataclass(frozen=True)
class ComparisonResult:
	market_rate: Decimal
	timestamp: str
	analysis: str
	grounding_urls: tuple[str, ...]
	offers: tuple[ReconciledOffer, ...]

	@property
	def best_offer(self) -> ReconciledOffer | None:
		best = None
		for offer in self.offers:
			if best is None or offer.total_receive_amount > best.total_receive_amount:
				best = offer
		return best

	@property
	def best_receive_amount(self) -> Decimal:
		best = self.best_offer
		return best.total_receive_amount if best is not None else Decimal('0')


@dataclass(frozen=True)
class SessionSnapshot:
	"""Everything the presentation layer may read about a session at one instant.

	A snapshot is never mutated; every transition builds a new one.
	"""

	state: SessionState
	corridor: Corridor
	amount: Decimal
	result: ComparisonResult | None = None
	error: str | None = None

	@classmethod
	def idle(cls, corridor: Corridor, amount: Decimal) -> 'SessionSnapshot':
		return cls(state=SessionState.IDLE, corridor=corridor, amount=amount)

	@classmethod
	def searching(cls, corridor: Corridor, amount: Decimal) -> 'SessionSnapshot':
		return cls(state=SessionState.SEARCHING, corridor=corridor, amount=amount)

	@classmethod
	def complete(
		cls, corridor: Corridor, amount: Decimal, result: ComparisonResult
	) -> 'SessionSnapshot':
		return cls(state=SessionState.COMPLETE, corridor=corridor, amount=amount, result=result)

	@classmethod
	def failed(cls, corridor: Corridor, amount: Decimal, error: str) -> 'SessionSnapshot':
		return cls(state=SessionState.ERROR, corridor=corridor, amount=amount, error=error)


@dataclass(frozen=True)
class ClickStat:
	provider_name: str
	timestamp: int


@dataclass(frozen=True)
class ProviderClicks:
	provider_name: str
	clicks: int
