from dataclasses import dataclass


@dataclass(frozen=True)
class ProviderDescriptor:
	id: str
	name: str
	keywords: tuple[str, ...]
	url: str

	def __post_init__(self):
		if not self.keywords:
			raise ValueError(f'Provider {self.id} needs at least one keyword')
		object.__setattr__(self, 'keywords', tuple(k.lower() for k in self.keywords))


# Registry order matters: the first descriptor whose keyword matches wins.
SUPPORTED_PROVIDERS: tuple[ProviderDescriptor, ...] = (
	ProviderDescriptor(
		id='wise', name='Wise', keywords=('wise', 'transferwise'), url='https://wise.com'
	),
	ProviderDescriptor(
		id='remitly', name='Remitly', keywords=('remitly',), url='https://remitly.com'
	),
	ProviderDescriptor(
		id='western_union',
		name='Western Union',
		keywords=('western union', 'wu'),
		url='https://westernunion.com',
	),
	ProviderDescriptor(
		id='revolut', name='Revolut', keywords=('revolut',), url='https://revolut.com'
	),
	ProviderDescriptor(
		id='moneygram', name='MoneyGram', keywords=('moneygram',), url='https://moneygram.com'
	),
	ProviderDescriptor(
		id='xe', name='XE', keywords=('xe', 'xe money transfer'), url='https://xe.com'
	),
	ProviderDescriptor(
		id='instarem', name='Instarem', keywords=('instarem',), url='https://instarem.com'
	),
	ProviderDescriptor(
		id='worldremit', name='WorldRemit', keywords=('worldremit',), url='https://worldremit.com'
	),
)
