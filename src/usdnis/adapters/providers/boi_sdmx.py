# src/usdnis/adapters/providers/boi_sdmx.py
"""
Bank of Israel SDMX Rate Provider

Queries the Bank of Israel SDMX service for every USD/ILS representative
rate published in a date range:
  .../BOI.STATISTICS/EXR/1.0/RER_USD_ILS?startperiod=YYYY-MM-DD&endperiod=YYYY-MM-DD

Structure-specific responses carry one element per observation:
  <Obs TIME_PERIOD="2021-12-17" OBS_VALUE="3.115" UNIT_MULT="0" />
Generic responses nest the same data:
  <generic:Obs>
    <generic:ObsDimension value="2021-12-17"/>
    <generic:ObsValue value="3.115"/>
  </generic:Obs>

Files that USE this module:
- usdnis.application.rates_service (ranged query strategy)
- tests.test_providers (unit tests)

Files that this module USES:
- usdnis.adapters.providers.base (RateProvider base class)
- usdnis.config (settings for URL)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages
from datetime import date, datetime  # Calendar dates for query construction and parsing
from typing import Dict, List, Optional  # Type hints

from bs4 import BeautifulSoup  # XML parsing (lxml backend) for extracting Obs elements

from usdnis.adapters.providers.base import RateProvider
from usdnis.adapters.transport import HttpFetcher
from usdnis.config import settings
from usdnis.domain.models import Observation

log = logging.getLogger(__name__)


class BoiSdmxProvider(RateProvider):
    """Ranged query against the SDMX data endpoint."""

    def __init__(self, fetcher: HttpFetcher, base_url: Optional[str] = None):
        """
        Initialize provider.

        Args:
            fetcher: Retrying HTTP fetcher
            base_url: Optional custom URL (defaults to settings.sdmx_url)
        """
        super().__init__(base_url or settings.sdmx_url, fetcher)

    def build_params(self, start: date, end: date) -> Dict[str, str]:
        """Query parameters for an inclusive date range."""
        return {"startperiod": start.isoformat(), "endperiod": end.isoformat()}

    def observations_between(self, start: date, end: date) -> List[Observation]:
        """
        Get all observations published in [start, end].

        Returns:
            Observations sorted by date ascending (possibly empty)

        Raises:
            TransportError: If the endpoint is unreachable after all retries
        """
        body = self._fetch(self.build_params(start, end))
        observations = self._parse(body, start, end)
        log.debug("SDMX returned %d observation(s) for %s..%s", len(observations), start, end)
        return observations

    @staticmethod
    def _parse_period(text: Optional[str]) -> Optional[date]:
        """Parse a TIME_PERIOD value (YYYY-MM-DD), None if malformed."""
        if not text:
            return None
        try:
            return datetime.strptime(text.strip(), "%Y-%m-%d").date()
        except ValueError:
            return None

    def _parse(self, body: str, start: date, end: date) -> List[Observation]:
        """Extract well-formed observations inside [start, end]."""
        soup = BeautifulSoup(body, "xml")
        observations: Dict[date, Observation] = {}

        for obs in soup.find_all("Obs"):
            period_text = obs.get("TIME_PERIOD")
            value_text = obs.get("OBS_VALUE")

            if period_text is None:
                dimension = obs.find("ObsDimension")
                period_text = dimension.get("value") if dimension is not None else None
            if value_text is None:
                value = obs.find("ObsValue")
                value_text = value.get("value") if value is not None else None

            day = self._parse_period(period_text)
            rate = self._parse_rate(value_text)
            if day is None or rate is None:
                log.debug("Skipping malformed observation: period=%r value=%r", period_text, value_text)
                continue
            if not start <= day <= end:
                log.debug("Skipping observation %s outside %s..%s", day, start, end)
                continue

            observations[day] = Observation(date=day, rate=rate)

        return [observations[d] for d in sorted(observations)]
