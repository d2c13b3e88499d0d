from .requests import ClickRequest, ComparisonRequest, SortRequest, SwapRequest
from .responses import (
	ClickStatResponse,
	ClickStatsResponse,
	ComparisonResultResponse,
	CurrencyResponse,
	OfferResponse,
	ProviderResponse,
	SampleCorridorResponse,
	SessionResponse,
	SupportedCurrenciesResponse,
)

__all__ = [
	'ClickRequest',
	'ClickStatResponse',
	'ClickStatsResponse',
	'ComparisonRequest',
	'ComparisonResultResponse',
	'CurrencyResponse',
	'OfferResponse',
	'ProviderResponse',
	'SampleCorridorResponse',
	'SessionResponse',
	'SortRequest',
	'SupportedCurrenciesResponse',
	'SwapRequest',
]
