# ABOUTME: Google Books search provider implementation.
# ABOUTME: Runs free-text volume searches and returns parsed candidates as a SearchOutcome.

import logging

from shelfscan.metadata.googlebooks_parser import parse_search_results
from shelfscan.metadata.http import HttpClient, MetadataFetchError
from shelfscan.metadata.provider import SearchOutcome

logger = logging.getLogger(__name__)

_GB_VOLUMES_URL = "https://www.googleapis.com/books/v1/volumes"


class GoogleBooksProvider:
    """Book search provider backed by the Google Books volumes API.

    Uses dependency-injected HttpClient for testability. The API key is
    optional; unauthenticated requests are accepted at a lower quota.
    """

    def __init__(self, http_client: HttpClient, api_key: str | None = None) -> None:
        self._http = http_client
        self._api_key = api_key

    @property
    def name(self) -> str:
        return "googlebooks"

    def search(self, query: str, max_results: int = 3) -> SearchOutcome:
        """Search volumes by free text.

        Fetch errors and malformed payloads are returned as a failed
        SearchOutcome rather than raised.
        """
        params: dict[str, str] = {
            "q": query,
            "maxResults": str(max_results),
        }
        if self._api_key:
            params["key"] = self._api_key

        try:
            data = self._http.get(_GB_VOLUMES_URL, params=params)
        except MetadataFetchError as exc:
            logger.warning("Google Books search failed for %r: %s", query, exc)
            return SearchOutcome.failure(self.name, str(exc))

        try:
            candidates = parse_search_results(data)
        except ValueError as exc:
            logger.warning("Malformed Google Books response for %r: %s", query, exc)
            return SearchOutcome.failure(self.name, f"malformed response: {exc}")

        return SearchOutcome.success(candidates)
