from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Currency:
	code: str
	name: str
	flag: str


@dataclass(frozen=True)
class SampleCorridor:
	source: str
	target: str
	amount: Decimal


POPULAR_CURRENCIES: tuple[Currency, ...] = (
	Currency(code='MVR', name='Maldivian Rufiyaa', flag='🇲🇻'),
	Currency(code='INR', name='Indian Rupee', flag='🇮🇳'),
	Currency(code='USD', name='US Dollar', flag='🇺🇸'),
	Currency(code='EUR', name='Euro', flag='🇪🇺'),
	Currency(code='GBP', name='British Pound', flag='🇬🇧'),
	Currency(code='AED', name='UAE Dirham', flag='🇦🇪'),
	Currency(code='LKR', name='Sri Lankan Rupee', flag='🇱🇰'),
	Currency(code='SGD', name='Singapore Dollar', flag='🇸🇬'),
	Currency(code='MYR', name='Malaysian Ringgit', flag='🇲🇾'),
	Currency(code='THB', name='Thai Baht', flag='🇹🇭'),
)

# Samples may name currencies outside POPULAR_CURRENCIES.
SAMPLE_CORRIDORS: tuple[SampleCorridor, ...] = (
	SampleCorridor(source='MVR', target='INR', amount=Decimal('5000')),
	SampleCorridor(source='USD', target='INR', amount=Decimal('1000')),
	SampleCorridor(source='AED', target='PHP', amount=Decimal('2000')),
)
