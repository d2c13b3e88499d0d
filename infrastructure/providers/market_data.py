import logging
from decimal import Decimal

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from domain.exceptions.comparison import CollaboratorError
from domain.models.comparison import RawComparisonPayload
from infrastructure.providers.schemas import ComparisonPayloadSchema

logger = logging.getLogger(__name__)


class MarketDataProvider:
	"""Client for the external market-data service that gathers transfer offers.

	Transport failures are retried with exponential backoff; everything else
	surfaces as ``CollaboratorError`` on the first failure.
	"""

	def __init__(
		self,
		base_url: str,
		api_key: str = '',
		client: httpx.AsyncClient | None = None,
		timeout: float = 30,
		max_attempts: int = 3,
		backoff_multiplier: float = 1,
	):
		self.base_url = base_url.rstrip('/')
		self.api_key = api_key
		self.max_attempts = max_attempts
		self.backoff_multiplier = backoff_multiplier
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'market-data'

	def _headers(self) -> dict:
		headers = {'Accept': 'application/json'}
		if self.api_key:
			headers['Authorization'] = f'Bearer {self.api_key}'
		return headers

	async def _post(self, body: dict) -> httpx.Response:
		url = f'{self.base_url}/comparisons'
		async for attempt in AsyncRetrying(
			stop=stop_after_attempt(self.max_attempts),
			wait=wait_exponential(multiplier=self.backoff_multiplier, max=10),
			retry=retry_if_exception_type(httpx.TransportError),
			reraise=True,
		):
			with attempt:
				if attempt.retry_state.attempt_number > 1:
					logger.warning(
						f'Retrying market data request (attempt {attempt.retry_state.attempt_number})'
					)
				response = await self._client.post(url, json=body, headers=self._headers())
				response.raise_for_status()
				return response
		raise CollaboratorError('Market data request was not attempted')

	async def _request(self, body: dict) -> dict:
		try:
			response = await self._post(body)
			data = response.json()
		except httpx.HTTPStatusError as e:
			raise CollaboratorError(
				f'Market data HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise CollaboratorError(f'Market data request failed: {e.__class__.__name__}') from e
		except ValueError as e:
			raise CollaboratorError(f'Market data response parsing error: {str(e)}') from e

		if not isinstance(data, dict):
			raise CollaboratorError('Market data response parsing error: expected a JSON object')

		if data.get('error'):
			error = data['error']
			message = error.get('message') if isinstance(error, dict) else error
			raise CollaboratorError(str(message or 'Unknown error'))

		return data

	async def fetch_comparison_data(
		self, amount: Decimal, source_currency: str, target_currency: str
	) -> RawComparisonPayload:
		data = await self._request(
			{
				'amount': str(amount),
				'sourceCurrency': source_currency,
				'targetCurrency': target_currency,
			}
		)
		try:
			payload = ComparisonPayloadSchema.model_validate(data)
		except ValueError as e:
			raise CollaboratorError(f'Market data response parsing error: {str(e)}') from e

		logger.info(
			f'Market data returned {len(payload.platforms)} offers for '
			f'{source_currency} -> {target_currency}'
		)
		return payload.to_domain()

	async def close(self) -> None:
		await self._client.aclose()
