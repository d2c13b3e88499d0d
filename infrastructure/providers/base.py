from decimal import Decimal
from typing import Protocol, runtime_checkable

from domain.models.comparison import RawComparisonPayload


@runtime_checkable
class ComparisonDataProvider(Protocol):
	@property
	def name(self) -> str: ...

	async def fetch_comparison_data(
		self, amount: Decimal, source_currency: str, target_currency: str
	) -> RawComparisonPayload: ...

	async def close(self) -> None: ...


@runtime_checkable
class ClickTracker(Protocol):
	async def track_click(self, provider_name: str) -> None: ...
