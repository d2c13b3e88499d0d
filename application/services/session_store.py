import logging
from collections import OrderedDict

from application.services.comparison_session import ComparisonSession
from application.services.provider_registry import DEFAULT_REGISTRY, ProviderRegistry
from domain.exceptions.comparison import SessionNotFoundError
from infrastructure.providers.base import ClickTracker, ComparisonDataProvider

logger = logging.getLogger(__name__)


class SessionStore:
	"""In-process registry of live comparison sessions.

	Oldest sessions are evicted once ``max_sessions`` is exceeded.
	"""

	def __init__(
		self,
		data_provider: ComparisonDataProvider,
		click_tracker: ClickTracker | None = None,
		registry: ProviderRegistry = DEFAULT_REGISTRY,
		max_sessions: int = 1000,
	):
		self.data_provider = data_provider
		self.click_tracker = click_tracker
		self.registry = registry
		self.max_sessions = max_sessions
		self._sessions: OrderedDict[str, ComparisonSession] = OrderedDict()

	def create(self) -> ComparisonSession:
		session = ComparisonSession(
			data_provider=self.data_provider,
			registry=self.registry,
			click_tracker=self.click_tracker,
		)
		self._sessions[session.id] = session
		while len(self._sessions) > self.max_sessions:
			evicted, _ = self._sessions.popitem(last=False)
			logger.info(f'Evicted comparison session {evicted}')
		return session

	def get(self, session_id: str) -> ComparisonSession:
		session = self._sessions.get(session_id)
		if session is None:
			raise SessionNotFoundError(f'Comparison session {session_id} not found')
		self._sessions.move_to_end(session_id)
		return session

	def __len__(self) -> int:
		return len(self._sessions)
