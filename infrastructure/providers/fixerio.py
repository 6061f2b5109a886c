from decimal import Decimal, InvalidOperation

import httpx

from domain.exceptions.country import ProviderError


class FixerIOProvider:
	BASE_URL = 'http://data.fixer.io/api'

	def __init__(
		self,
		api_key: str,
		client: httpx.AsyncClient | None = None,
		timeout: float = 10,
		base_url: str | None = None,
	):
		self.api_key = api_key
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'fixerio'

	async def _request(self, endpoint: str, params: dict) -> dict:
		params['access_key'] = self.api_key
		url = f'{self.base_url}/{endpoint}'

		try:
			response = await self._client.get(url, params=params)
			response.raise_for_status()
			data = response.json()

			if not data.get('success', False):
				info = data.get('error', {}).get('info', 'Unknown error')
				raise ProviderError(f'Fixer.io API error: {info}')

			return data

		except ProviderError:
			raise
		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'Fixer.io HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'Fixer.io request failed: {e.__class__.__name__}') from e
		except Exception as e:
			raise ProviderError(f'Fixer.io response parsing error: {str(e)}') from e

	async def fetch_rates(self, symbols: list[str]) -> dict[str, Decimal]:
		"""Latest rates of ``symbols`` against the account's base currency."""
		data = await self._request('latest', {'symbols': ','.join(symbols)})
		rates = data.get('rates') or {}
		if not isinstance(rates, dict):
			raise ProviderError('Fixer.io response parsing error: rates is not an object')

		result: dict[str, Decimal] = {}
		for symbol in symbols:
			if rates.get(symbol) is None:
				raise ProviderError(f'Missing rate for {symbol}')
			try:
				rate = Decimal(str(rates[symbol]))
			except (InvalidOperation, TypeError, ValueError) as e:
				raise ProviderError(f'Malformed rate for {symbol}') from e
			if not rate.is_finite() or rate <= 0:
				raise ProviderError(f'Malformed rate for {symbol}')
			result[symbol] = rate
		return result

	async def close(self) -> None:
		await self._client.aclose()
