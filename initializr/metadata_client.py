"""Fetch the capability schema from the Initializr metadata endpoint."""

import logging

import httpx

from initializr.constants import DEFAULT_ACCEPT, REQUIRED_KEYS
from initializr.errors import FetchError
from initializr.schema import SchemaDocument

logger = logging.getLogger(__name__)


class MetadataClient:
    """One-shot GET of the metadata document. No retry, no cache."""

    def __init__(
        self,
        url: str,
        *,
        accept: str = DEFAULT_ACCEPT,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._accept = accept
        self._client = client

    @property
    def url(self) -> str:
        return self._url

    def fetch(self) -> SchemaDocument:
        """GET the document and check its top-level keys. Raises FetchError."""
        headers = {"Accept": f"{self._accept}, application/json"}
        logger.debug("Fetching metadata from %s", self._url)
        try:
            if self._client is not None:
                resp = self._client.get(self._url, headers=headers)
            else:
                with httpx.Client() as client:
                    resp = client.get(self._url, headers=headers)
        except httpx.InvalidURL as e:
            raise FetchError(f"Invalid metadata URL {self._url}: {e}") from e
        except httpx.TimeoutException as e:
            raise FetchError(f"Connection timeout fetching {self._url}") from e
        except httpx.HTTPError as e:
            raise FetchError(f"Could not reach {self._url}: {e}") from e

        if not resp.is_success:
            raise FetchError(f"HTTP {resp.status_code} from {self._url}")

        try:
            data = resp.json()
        except ValueError as e:
            raise FetchError(f"Response from {self._url} is not JSON") from e

        if not isinstance(data, dict):
            raise FetchError(f"Response from {self._url} is not a JSON object")
        missing = [k for k in REQUIRED_KEYS if k not in data]
        if missing:
            raise FetchError(f"Metadata is missing keys: {', '.join(missing)}")

        logger.debug("Fetched metadata with %d top-level keys", len(data))
        return SchemaDocument(data)


def fetch_metadata(url: str, *, accept: str = DEFAULT_ACCEPT) -> SchemaDocument:
    """Fetch the metadata document at url. Raises FetchError."""
    return MetadataClient(url, accept=accept).fetch()
