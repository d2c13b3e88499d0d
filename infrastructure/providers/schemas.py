from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.models.comparison import RawComparisonPayload, RawOffer


class PlatformSchema(BaseModel):
	model_config = ConfigDict(populate_by_name=True, extra='ignore')

	name: str
	rate: Decimal
	transfer_fee: Decimal = Field(alias='transferFee')
	total_receive_amount: Decimal = Field(alias='totalReceiveAmount')
	currency: str = ''
	estimated_delivery: str = Field(default='', alias='estimatedDelivery')
	pros: list[str] = Field(default_factory=list)
	referral_bonus: str | None = Field(default=None, alias='referralBonus')
	is_fastest: bool = Field(default=False, alias='isFastest')
	link: str | None = None

	@field_validator('pros', mode='before')
	@classmethod
	def none_pros_is_empty(cls, v):
		return [] if v is None else v

	def to_domain(self) -> RawOffer:
		return RawOffer(
			name=self.name,
			rate=self.rate,
			transfer_fee=self.transfer_fee,
			total_receive_amount=self.total_receive_amount,
			currency=self.currency,
			estimated_delivery=self.estimated_delivery,
			pros=tuple(self.pros),
			referral_bonus=self.referral_bonus,
			link=self.link,
			marked_fastest=self.is_fastest,
		)


class ComparisonPayloadSchema(BaseModel):
	model_config = ConfigDict(populate_by_name=True, extra='ignore')

	market_rate: Decimal = Field(alias='marketRate', gt=0)
	timestamp: str = ''
	analysis: str = ''
	grounding_urls: list[str] = Field(default_factory=list, alias='groundingUrls')
	platforms: list[PlatformSchema] = Field(default_factory=list)

	@field_validator('timestamp', mode='before')
	@classmethod
	def timestamp_as_label(cls, v):
		return '' if v is None else str(v)

	@field_validator('grounding_urls', 'platforms', mode='before')
	@classmethod
	def none_is_empty(cls, v):
		return [] if v is None else v

	def to_domain(self) -> RawComparisonPayload:
		return RawComparisonPayload(
			market_rate=self.market_rate,
			timestamp=self.timestamp,
			analysis=self.analysis,
			grounding_urls=tuple(self.grounding_urls),
			platforms=tuple(p.to_domain() for p in self.platforms),
		)
