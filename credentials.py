import logging
import threading

import requests

import settings
from errors import CredentialFetchError

logger = logging.getLogger(__name__)


class CredentialProvider:
    """
    Fetches the bearer credential for the vision API once and keeps it in memory
    for the lifetime of the provider. Concurrent first callers share one fetch.
    """

    def __init__(self, url=None, session=None, timeout=None):
        self.url = settings.CREDENTIAL_URL if url is None else url
        self.session = session or requests.Session()
        self.timeout = settings.REQUEST_TIMEOUT if timeout is None else timeout
        self._credential = None
        self._lock = threading.Lock()

    @property
    def cached(self):
        return self._credential

    def get_credential(self):
        if self._credential is not None:
            logger.debug("credential cache hit")
            return self._credential

        with self._lock:
            # another thread may have finished the fetch while we waited
            if self._credential is None:
                self._credential = self._fetch()
            return self._credential

    def _fetch(self):
        try:
            requests.Request("GET", self.url).prepare()
        except (requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL) as e:
            raise CredentialFetchError(CredentialFetchError.INVALID_ENDPOINT, str(e)) from e

        logger.info("fetching API credential")
        try:
            resp = self.session.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise CredentialFetchError(CredentialFetchError.TRANSPORT_FAILURE, str(e)) from e

        try:
            data = resp.json()
        except ValueError as e:
            raise CredentialFetchError(CredentialFetchError.MALFORMED_RESPONSE, str(e)) from e

        api_key = data.get("apiKey") if isinstance(data, dict) else None
        if not isinstance(api_key, str) or not api_key:
            raise CredentialFetchError(CredentialFetchError.MALFORMED_RESPONSE, "missing apiKey")
        return api_key
