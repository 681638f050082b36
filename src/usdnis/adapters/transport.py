# src/usdnis/adapters/transport.py
"""
HTTP Transport - Fetch with Retry

This module implements the low-level fetch primitive used by every provider.
A request is retried on connection errors, timeouts, 408/429 and 5xx
responses with a fixed backoff between attempts (or the server's Retry-After,
when it asks for longer). Any other response is handed back as text,
leaving "is there data in it" to the provider.

Files that USE this module:
- usdnis.adapters.providers.boi_daily (BoiDailyProvider fetches through HttpFetcher)
- usdnis.adapters.providers.boi_sdmx (BoiSdmxProvider fetches through HttpFetcher)
- usdnis.application.rates_service (RateResolver owns the fetcher lifecycle)
- tests.test_transport (unit tests)

Files that this module USES:
- usdnis.config (settings for timeout and retry budget)
- usdnis.domain.errors (TransportError when retries are exhausted)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages
import time  # Blocking sleep between retry attempts
from typing import Mapping, Optional  # Type hints for query parameters

import requests  # HTTP library for making web requests

from usdnis.config import settings
from usdnis.domain.errors import TransportError

log = logging.getLogger(__name__)

USER_AGENT = "usdnis/1.0 (+https://www.boi.org.il)"

# Request Timeout and Too Many Requests are retried like 5xx responses
RETRYABLE_STATUS_CODES = frozenset({408, 429})
MAX_RETRY_AFTER_SECONDS = 10.0


class HttpFetcher:
    """
    Synchronous GET client with a fixed retry budget.

    Holds one requests.Session for the lifetime of the fetcher; call close()
    or use it as a context manager to release the connection pool.
    """

    def __init__(
        self,
        timeout: Optional[int] = None,
        attempts: Optional[int] = None,
        backoff_seconds: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            timeout: HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
            attempts: Total attempts per request (defaults to settings.http_retry_attempts)
            backoff_seconds: Sleep between attempts (defaults to settings.http_retry_backoff_seconds)
            session: Optional pre-built session (tests inject a mock here)
        """
        self.timeout = timeout or settings.http_timeout_seconds
        self.attempts = attempts or settings.http_retry_attempts
        self.backoff_seconds = (
            settings.http_retry_backoff_seconds if backoff_seconds is None else backoff_seconds
        )
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = USER_AGENT
        self.session = session

    def __enter__(self) -> "HttpFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    @staticmethod
    def describe(url: str, params: Optional[Mapping[str, str]] = None) -> str:
        """Return the full request URL including the encoded query string."""
        return requests.Request("GET", url, params=dict(params or {})).prepare().url

    def get_text(self, url: str, params: Optional[Mapping[str, str]] = None) -> str:
        """
        GET a URL and return the response body as text.

        Args:
            url: Endpoint URL without query string
            params: Query parameters

        Returns:
            Response body (also for non-retryable 4xx responses)

        Raises:
            TransportError: If every attempt failed with a network error or a retryable status
        """
        request_url = self.describe(url, params)
        last_error: Optional[Exception] = None

        for attempt in range(1, self.attempts + 1):
            delay = self.backoff_seconds
            try:
                log.debug("GET %s (attempt %d/%d)", request_url, attempt, self.attempts)
                resp = self.session.get(url, params=params, timeout=self.timeout)
                if resp.status_code >= 500 or resp.status_code in RETRYABLE_STATUS_CODES:
                    # Throttling and server errors are transient, other 4xx bodies are interpreted by the provider
                    retry_after = _retry_after_seconds(resp)
                    if retry_after is not None:
                        delay = max(delay, retry_after)
                    raise requests.exceptions.HTTPError(
                        f"{resp.status_code} response for {request_url}", response=resp
                    )
                return resp.text
            except requests.exceptions.Timeout as e:
                log.warning("Timeout after %ds for %s (attempt %d/%d)", self.timeout, request_url, attempt, self.attempts)
                last_error = e
            except requests.exceptions.HTTPError as e:
                log.warning("Retryable HTTP status for %s (attempt %d/%d): %s", request_url, attempt, self.attempts, e)
                last_error = e
            except requests.exceptions.RequestException as e:
                log.warning("Request failed for %s (attempt %d/%d): %s", request_url, attempt, self.attempts, e)
                last_error = e

            if attempt < self.attempts and delay > 0:
                time.sleep(delay)

        log.error("Giving up on %s after %d attempt(s): %s", request_url, self.attempts, last_error)
        raise TransportError(request_url, self.attempts, str(last_error)) from last_error


def _retry_after_seconds(resp) -> Optional[float]:
    """
    Read a Retry-After header given in seconds, capped at MAX_RETRY_AFTER_SECONDS.

    Returns:
        Delay in seconds, or None if the header is missing or not a number
    """
    value = resp.headers.get("Retry-After")
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        return None
    if seconds < 0:
        return None
    return min(seconds, MAX_RETRY_AFTER_SECONDS)
