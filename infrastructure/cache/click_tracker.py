import json
import logging
import time

from redis import asyncio as redis
from redis.exceptions import RedisError

from domain.exceptions.comparison import CacheError
from domain.models.comparison import ClickStat, ProviderClicks

logger = logging.getLogger(__name__)


class RedisClickTracker:
	"""Counts outbound provider clicks in Redis.

	``track_click`` is fire-and-forget: storage failures are logged, never
	raised. The read methods raise ``CacheError``.
	"""

	COUNTS_KEY = 'clicks:counts'
	RECENT_KEY = 'clicks:recent'

	def __init__(self, redis_client: redis.Redis, history_limit: int = 500):
		self.redis = redis_client
		self.history_limit = history_limit

	async def track_click(self, provider_name: str) -> None:
		stat = ClickStat(provider_name=provider_name, timestamp=int(time.time() * 1000))
		try:
			await self.redis.hincrby(self.COUNTS_KEY, provider_name, 1)
			await self.redis.lpush(
				self.RECENT_KEY,
				json.dumps({'provider_name': stat.provider_name, 'timestamp': stat.timestamp}),
			)
			await self.redis.ltrim(self.RECENT_KEY, 0, self.history_limit - 1)
		except RedisError as e:
			logger.warning(f'Failed to track click for {provider_name}: {e}')

	async def get_click_stats(self) -> list[ProviderClicks]:
		try:
			counts = await self.redis.hgetall(self.COUNTS_KEY)
		except RedisError as e:
			raise CacheError(f'Failed to read click stats: {e}') from e

		stats = [ProviderClicks(provider_name=name, clicks=int(count)) for name, count in counts.items()]
		return sorted(stats, key=lambda s: (-s.clicks, s.provider_name))

	async def get_recent_clicks(self, limit: int = 50) -> list[ClickStat]:
		try:
			entries = await self.redis.lrange(self.RECENT_KEY, 0, limit - 1)
		except RedisError as e:
			raise CacheError(f'Failed to read recent clicks: {e}') from e

		try:
			return [ClickStat(**json.loads(entry)) for entry in entries]
		except (json.JSONDecodeError, TypeError) as e:
			raise CacheError(f'Invalid json data in click history: {e}') from e
