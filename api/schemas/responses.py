from decimal import Decimal
from urllib.parse import urlparse

from pydantic import BaseModel, Field

from domain.models.comparison import (
	ClickStat,
	ComparisonResult,
	ReconciledOffer,
	SessionState,
	SortStrategy,
)
from domain.models.currency import Currency, SampleCorridor
from domain.models.provider import ProviderDescriptor


class OfferResponse(BaseModel):
	name: str = Field(..., description='Canonical provider name')
	rate: Decimal
	transfer_fee: Decimal
	total_receive_amount: Decimal
	currency: str
	estimated_delivery: str
	pros: list[str]
	referral_bonus: str | None = None
	link: str = Field(..., description='Canonical referral link')
	is_best_value: bool = False
	is_fastest: bool = False

	@classmethod
	def from_domain(cls, offer: ReconciledOffer) -> 'OfferResponse':
		return cls(
			name=offer.name,
			rate=offer.rate,
			transfer_fee=offer.transfer_fee,
			total_receive_amount=offer.total_receive_amount,
			currency=offer.currency,
			estimated_delivery=offer.estimated_delivery,
			pros=list(offer.pros),
			referral_bonus=offer.referral_bonus,
			link=offer.link,
			is_best_value=bool(offer.is_best_value),
			is_fastest=bool(offer.is_fastest),
		)


class ComparisonResultResponse(BaseModel):
	market_rate: Decimal = Field(..., description='Mid-market rate')
	timestamp: str
	analysis: str
	grounding_urls: list[str]
	source_hosts: list[str] = Field(..., description='Hostnames of the first three sources')
	offers: list[OfferResponse]

	@classmethod
	def from_domain(
		cls, result: ComparisonResult, ranked: list[ReconciledOffer]
	) -> 'ComparisonResultResponse':
		hosts = [urlparse(url).hostname or url for url in result.grounding_urls[:3]]
		return cls(
			market_rate=result.market_rate,
			timestamp=result.timestamp,
			analysis=result.analysis,
			grounding_urls=list(result.grounding_urls),
			source_hosts=hosts,
			offers=[OfferResponse.from_domain(o) for o in ranked],
		)


class SessionResponse(BaseModel):
	id: str
	state: SessionState
	sort: SortStrategy
	source_currency: str
	target_currency: str
	amount: Decimal
	best_receive_amount: Decimal = Field(..., description='Receiver gets (estimated)')
	result: ComparisonResultResponse | None = None
	error: str | None = None


class CurrencyResponse(BaseModel):
	code: str
	name: str
	flag: str

	@classmethod
	def from_domain(cls, currency: Currency) -> 'CurrencyResponse':
		return cls(code=currency.code, name=currency.name, flag=currency.flag)


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[CurrencyResponse] = Field(description='Currencies offered for comparison')


class SampleCorridorResponse(BaseModel):
	index: int
	source_currency: str
	target_currency: str
	amount: Decimal

	@classmethod
	def from_domain(cls, index: int, sample: SampleCorridor) -> 'SampleCorridorResponse':
		return cls(
			index=index,
			source_currency=sample.source,
			target_currency=sample.target,
			amount=sample.amount,
		)


class ProviderResponse(BaseModel):
	id: str
	name: str
	url: str

	@classmethod
	def from_domain(cls, descriptor: ProviderDescriptor) -> 'ProviderResponse':
		return cls(id=descriptor.id, name=descriptor.name, url=descriptor.url)


class ClickStatsResponse(BaseModel):
	clicks: dict[str, int] = Field(description='Outbound clicks per provider')


class ClickStatResponse(BaseModel):
	provider_name: str
	timestamp: int = Field(..., description='Click time in epoch milliseconds')

	@classmethod
	def from_domain(cls, stat: ClickStat) -> 'ClickStatResponse':
		return cls(provider_name=stat.provider_name, timestamp=stat.timestamp)
