from .comparison_session import ComparisonSession
from .currency_service import CurrencyService
from .provider_registry import DEFAULT_REGISTRY, ProviderRegistry
from .ranker import rank
from .reconciler import reconcile, reconcile_payload
from .session_store import SessionStore

__all__ = [
	'ComparisonSession',
	'CurrencyService',
	'DEFAULT_REGISTRY',
	'ProviderRegistry',
	'SessionStore',
	'rank',
	'reconcile',
	'reconcile_payload',
]
