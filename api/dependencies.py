import logging

from redis.asyncio import Redis

from application.services import CurrencyService, SessionStore
from application.services.provider_registry import DEFAULT_REGISTRY, ProviderRegistry
from config.settings import get_settings
from infrastructure.cache.click_tracker import RedisClickTracker
from infrastructure.providers import ComparisonDataProvider, MarketDataProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	redis_client: Redis | None = None
	click_tracker: RedisClickTracker | None = None
	data_provider: ComparisonDataProvider | None = None
	session_store: SessionStore | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.redis_client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
	deps.click_tracker = RedisClickTracker(
		deps.redis_client, history_limit=settings.CLICK_HISTORY_LIMIT
	)
	deps.data_provider = MarketDataProvider(
		settings.COMPARISON_API_URL,
		api_key=settings.COMPARISON_API_KEY,
		timeout=settings.COMPARISON_TIMEOUT,
		max_attempts=settings.COMPARISON_MAX_ATTEMPTS,
	)
	deps.session_store = SessionStore(
		data_provider=deps.data_provider,
		click_tracker=deps.click_tracker,
		max_sessions=settings.MAX_SESSIONS,
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.redis_client:
		await deps.redis_client.aclose()
	if deps.data_provider:
		await deps.data_provider.close()

	logger.info('Cleanup complete')


def get_session_store() -> SessionStore:
	if deps.session_store is None:
		raise RuntimeError('Session store not initialized')
	return deps.session_store


def get_click_tracker() -> RedisClickTracker:
	if deps.click_tracker is None:
		raise RuntimeError('Click tracker not initialized')
	return deps.click_tracker


def get_currency_service() -> CurrencyService:
	return CurrencyService()


def get_provider_registry() -> ProviderRegistry:
	return DEFAULT_REGISTRY
