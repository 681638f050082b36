# tests/test_transport.py
"""
Transport Tests - Unit Tests for the Retrying HTTP Fetcher

This module contains unit tests for HttpFetcher: retry on network errors,
timeouts, throttling (408/429) and 5xx responses, fixed or Retry-After
backoff between attempts, and the TransportError raised once the retry
budget is spent.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- usdnis.adapters.transport (HttpFetcher for testing)
- unittest.mock (Mock for the requests session)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock, call, patch  # Mock objects and patching
import requests  # HTTP library (used for mocking exceptions)

from usdnis.adapters.transport import USER_AGENT, HttpFetcher  # Fetcher to test
from usdnis.domain.errors import TransportError  # Error raised after retries

URL = "https://example.test/rates"
PARAMS = {"rdate": "20211220", "curr": "01"}


def _response(status_code: int = 200, text: str = "<RATE>3.152</RATE>", headers=None) -> Mock:
    resp = Mock()
    resp.status_code = status_code
    resp.text = text
    resp.headers = headers or {}
    return resp


def _fetcher(*side_effect) -> HttpFetcher:
    session = Mock()
    session.headers = {}
    session.get.side_effect = list(side_effect)
    return HttpFetcher(timeout=5, attempts=3, backoff_seconds=0.5, session=session)


class TestHttpFetcher:
    def test_init_with_defaults(self):
        with HttpFetcher() as fetcher:
            assert fetcher.timeout == 10
            assert fetcher.attempts == 3
            assert fetcher.backoff_seconds == 0.5
            assert fetcher.session.headers["User-Agent"] == USER_AGENT

    def test_injected_session_headers_untouched(self):
        session = Mock()
        session.headers = {"User-Agent": "caller/2.0"}
        HttpFetcher(session=session)
        assert session.headers == {"User-Agent": "caller/2.0"}

    @patch("usdnis.adapters.transport.time.sleep")
    def test_success_first_attempt(self, mock_sleep):
        fetcher = _fetcher(_response())

        assert fetcher.get_text(URL, PARAMS) == "<RATE>3.152</RATE>"
        fetcher.session.get.assert_called_once_with(URL, params=PARAMS, timeout=5)
        mock_sleep.assert_not_called()

    @patch("usdnis.adapters.transport.time.sleep")
    def test_retries_connection_error_then_succeeds(self, mock_sleep):
        fetcher = _fetcher(
            requests.exceptions.ConnectionError("reset"),
            requests.exceptions.Timeout(),
            _response(),
        )

        assert fetcher.get_text(URL, PARAMS) == "<RATE>3.152</RATE>"
        assert fetcher.session.get.call_count == 3
        assert mock_sleep.call_args_list == [call(0.5), call(0.5)]

    @patch("usdnis.adapters.transport.time.sleep")
    def test_retries_server_error(self, mock_sleep):
        fetcher = _fetcher(_response(503), _response())

        assert fetcher.get_text(URL, PARAMS) == "<RATE>3.152</RATE>"
        assert fetcher.session.get.call_count == 2
        mock_sleep.assert_called_once_with(0.5)

    @patch("usdnis.adapters.transport.time.sleep")
    def test_client_error_body_is_returned_without_retry(self, mock_sleep):
        fetcher = _fetcher(_response(404, "<ERROR>not found</ERROR>"))

        assert fetcher.get_text(URL, PARAMS) == "<ERROR>not found</ERROR>"
        fetcher.session.get.assert_called_once()
        mock_sleep.assert_not_called()

    @patch("usdnis.adapters.transport.time.sleep")
    def test_gives_up_after_attempts(self, mock_sleep):
        fetcher = _fetcher(*[requests.exceptions.ConnectionError("down")] * 3)

        with pytest.raises(TransportError) as exc_info:
            fetcher.get_text(URL, PARAMS)

        err = exc_info.value
        assert err.url == "https://example.test/rates?rdate=20211220&curr=01"
        assert err.attempts == 3
        assert "Failed to retrieve https://example.test/rates?rdate=20211220&curr=01" in str(err)
        assert isinstance(err.__cause__, requests.exceptions.ConnectionError)
        assert fetcher.session.get.call_count == 3
        assert mock_sleep.call_count == 2

    @patch("usdnis.adapters.transport.time.sleep")
    def test_zero_backoff_does_not_sleep(self, mock_sleep):
        session = Mock()
        session.headers = {}
        session.get.side_effect = [requests.exceptions.ConnectionError("down"), _response()]
        fetcher = HttpFetcher(attempts=2, backoff_seconds=0, session=session)

        assert fetcher.get_text(URL) == "<RATE>3.152</RATE>"
        mock_sleep.assert_not_called()

    def test_describe(self):
        assert HttpFetcher.describe(URL, {"startperiod": "2021-11-19"}) == URL + "?startperiod=2021-11-19"
        assert HttpFetcher.describe(URL) == URL

    def test_context_manager_closes_session(self):
        session = Mock()
        session.headers = {}
        with HttpFetcher(session=session):
            pass
        session.close.assert_called_once()


class TestHttpFetcherThrottling:
    @pytest.mark.parametrize("status_code", [408, 429])
    @patch("usdnis.adapters.transport.time.sleep")
    def test_throttling_status_is_retried(self, mock_sleep, status_code):
        fetcher = _fetcher(_response(status_code, "<html>slow down</html>"), _response())

        assert fetcher.get_text(URL, PARAMS) == "<RATE>3.152</RATE>"
        assert fetcher.session.get.call_count == 2
        mock_sleep.assert_called_once_with(0.5)

    @patch("usdnis.adapters.transport.time.sleep")
    def test_throttling_exhausted_raises(self, mock_sleep):
        fetcher = _fetcher(*[_response(429, "<html>slow down</html>") for _ in range(3)])

        with pytest.raises(TransportError) as exc_info:
            fetcher.get_text(URL, PARAMS)

        assert exc_info.value.attempts == 3
        assert "429" in str(exc_info.value)
        assert mock_sleep.call_count == 2

    @patch("usdnis.adapters.transport.time.sleep")
    def test_honors_retry_after(self, mock_sleep):
        fetcher = _fetcher(_response(429, headers={"Retry-After": "2"}), _response())

        fetcher.get_text(URL, PARAMS)

        mock_sleep.assert_called_once_with(2.0)

    @patch("usdnis.adapters.transport.time.sleep")
    def test_retry_after_is_capped(self, mock_sleep):
        fetcher = _fetcher(_response(503, headers={"Retry-After": "3600"}), _response())

        fetcher.get_text(URL, PARAMS)

        mock_sleep.assert_called_once_with(10.0)

    @patch("usdnis.adapters.transport.time.sleep")
    def test_shorter_retry_after_keeps_backoff(self, mock_sleep):
        fetcher = _fetcher(
            _response(429, headers={"Retry-After": "0"}),
            _response(429, headers={"Retry-After": "soon"}),
            _response(),
        )

        fetcher.get_text(URL, PARAMS)

        assert mock_sleep.call_args_list == [call(0.5), call(0.5)]
