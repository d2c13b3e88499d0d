from collections.abc import Callable, Iterable

from domain.models.provider import SUPPORTED_PROVIDERS, ProviderDescriptor

Matcher = Callable[[str], bool]


def keyword_matcher(keywords: Iterable[str]) -> Matcher:
	"""Match a lowercased provider name containing any of ``keywords``."""
	needles = tuple(k.lower() for k in keywords)

	def matches(normalized_name: str) -> bool:
		return any(needle in normalized_name for needle in needles)

	return matches


class ProviderRegistry:
	"""Ordered whitelist of supported providers, evaluated first-match-wins.

	Entries are ``(descriptor, matcher)`` pairs. The matcher receives the raw
	provider name already lowercased. Lookups never mutate the registry, so a
	single instance can be shared by any number of concurrent reconciliations.
	"""

	def __init__(self, entries: Iterable[tuple[ProviderDescriptor, Matcher]]):
		self._entries = tuple(entries)

	@classmethod
	def from_descriptors(cls, descriptors: Iterable[ProviderDescriptor]) -> 'ProviderRegistry':
		return cls((d, keyword_matcher(d.keywords)) for d in descriptors)

	@property
	def descriptors(self) -> list[ProviderDescriptor]:
		return [descriptor for descriptor, _ in self._entries]

	def lookup(self, raw_name: str) -> ProviderDescriptor | None:
		normalized = (raw_name or '').lower()
		for descriptor, matches in self._entries:
			if matches(normalized):
				return descriptor
		return None

	def __len__(self) -> int:
		return len(self._entries)


DEFAULT_REGISTRY = ProviderRegistry.from_descriptors(SUPPORTED_PROVIDERS)
