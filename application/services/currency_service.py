from domain.exceptions.comparison import ValidationError
from domain.models.currency import POPULAR_CURRENCIES, SAMPLE_CORRIDORS, Currency, SampleCorridor


class CurrencyService:
	def __init__(
		self,
		currencies: tuple[Currency, ...] = POPULAR_CURRENCIES,
		samples: tuple[SampleCorridor, ...] = SAMPLE_CORRIDORS,
	):
		self.currencies = currencies
		self.samples = samples

	def get_supported_currencies(self) -> list[Currency]:
		return list(self.currencies)

	def get_sample_corridors(self) -> list[SampleCorridor]:
		return list(self.samples)

	def get_sample(self, index: int) -> SampleCorridor:
		if not 0 <= index < len(self.samples):
			raise ValidationError(f'Unknown sample corridor {index}')
		return self.samples[index]
