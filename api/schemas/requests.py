from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.models.comparison import SortStrategy


class ComparisonRequest(BaseModel):
	model_config = ConfigDict(
		json_schema_extra={
			'example': {'amount': 1000, 'source_currency': 'USD', 'target_currency': 'INR'}
		}
	)

	amount: Decimal = Field(..., description='Amount to send')
	source_currency: str = Field(..., min_length=3, max_length=5)
	target_currency: str = Field(..., min_length=3, max_length=5)

	@field_validator('source_currency', 'target_currency')
	@classmethod
	def uppercase_currency(cls, v: str):
		return v.upper()


class SwapRequest(BaseModel):
	source_currency: str = Field(..., min_length=3, max_length=5)
	target_currency: str = Field(..., min_length=3, max_length=5)


class SortRequest(BaseModel):
	strategy: SortStrategy


class ClickRequest(BaseModel):
	provider_name: str = Field(..., min_length=1, max_length=100)
