from urllib.parse import quote

import httpx

from domain.exceptions.country import CountryNotFoundError, ProviderError


class RestCountriesProvider:
    BASE_URL = "https://restcountries.com/v3.1"
    FIELDS = "name,currencies,population"

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10,
        base_url: str | None = None,
    ):
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def name(self) -> str:
        return "restcountries"

    async def fetch_by_name(self, name: str) -> list[dict]:
        url = f"{self.base_url}/name/{quote(name, safe='')}"

        try:
            response = await self._client.get(url, params={"fields": self.FIELDS})
            if response.status_code == httpx.codes.NOT_FOUND:
                raise CountryNotFoundError(f"No country matches {name!r}")
            response.raise_for_status()
            data = response.json()
        except CountryNotFoundError:
            raise
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"REST Countries HTTP error {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.RequestError as e:
            raise ProviderError(f"REST Countries request failed: {e.__class__.__name__}") from e
        except Exception as e:
            raise ProviderError(f"REST Countries response parsing error: {str(e)}") from e

        if not isinstance(data, list):
            raise ProviderError("REST Countries returned an unexpected payload")
        return data

    async def close(self) -> None:
        await self._client.aclose()
