# src/usdnis/adapters/providers/boi_daily.py
"""
Bank of Israel Daily Rate Provider (currency.xml)

Queries the legacy Bank of Israel endpoint for the representative rate of a
single day: https://www.boi.org.il/currency.xml?rdate=YYYYMMDD&curr=01

The payload looks like:
  <CURRENCIES>
    <LAST_UPDATE>2021-12-20</LAST_UPDATE>
    <CURRENCY>
      <NAME>Dollar</NAME><UNIT>1</UNIT><CURRENCYCODE>USD</CURRENCYCODE>
      <COUNTRY>USA</COUNTRY><RATE>3.152</RATE><CHANGE>1.188</CHANGE>
    </CURRENCY>
  </CURRENCIES>
Days without a publication are answered with an error document instead.

Files that USE this module:
- usdnis.application.rates_service (daily probing strategy)
- tests.test_providers (unit tests)

Files that this module USES:
- usdnis.adapters.providers.base (RateProvider base class)
- usdnis.config (settings for URL and currency code)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages
from datetime import date  # Calendar dates for query construction
from typing import Dict, List, Optional  # Type hints

from bs4 import BeautifulSoup  # XML parsing (lxml backend) for extracting the RATE element

from usdnis.adapters.providers.base import RateProvider
from usdnis.adapters.transport import HttpFetcher
from usdnis.config import settings
from usdnis.domain.models import Observation

log = logging.getLogger(__name__)


class BoiDailyProvider(RateProvider):
    """Single-day query against currency.xml."""

    def __init__(
        self,
        fetcher: HttpFetcher,
        base_url: Optional[str] = None,
        currency_code: Optional[str] = None,
    ):
        """
        Initialize provider.

        Args:
            fetcher: Retrying HTTP fetcher
            base_url: Optional custom URL (defaults to settings.daily_url)
            currency_code: Optional BOI currency code (defaults to settings.daily_currency_code, "01" = USD)
        """
        super().__init__(base_url or settings.daily_url, fetcher)
        self.currency_code = currency_code or settings.daily_currency_code

    def build_params(self, day: date) -> Dict[str, str]:
        """Query parameters for a single day."""
        return {"rdate": day.isoformat().replace("-", ""), "curr": self.currency_code}

    def observation_on(self, day: date) -> Optional[Observation]:
        """
        Get the rate published for exactly this day.

        Args:
            day: Date to query

        Returns:
            Observation for the day, or None if nothing was published

        Raises:
            TransportError: If the endpoint is unreachable after all retries
        """
        body = self._fetch(self.build_params(day))
        observations = self._parse(body, day, day)
        if not observations:
            log.debug("No rate published for %s", day)
            return None
        return observations[0]

    def _parse(self, body: str, start: date, end: date) -> List[Observation]:
        """
        Extract the first well-formed RATE of a USD record.

        The payload carries no per-record date, so the observation is dated
        with the queried day.
        """
        soup = BeautifulSoup(body, "xml")

        for rate_tag in soup.find_all("RATE"):
            currency = rate_tag.find_parent("CURRENCY")
            if currency is not None:
                code_tag = currency.find("CURRENCYCODE")
                if code_tag is not None and code_tag.get_text(strip=True).upper() != "USD":
                    continue

            rate = self._parse_rate(rate_tag.get_text(strip=True))
            if rate is not None:
                log.debug("Found USD rate %s for %s", rate, start)
                return [Observation(date=start, rate=rate)]

        return []
