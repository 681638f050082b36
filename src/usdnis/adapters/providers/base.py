# src/usdnis/adapters/providers/base.py
"""
Base Provider for Bank of Israel Rate Endpoints

This module provides the base class shared by the Bank of Israel providers:
query execution through the retrying fetcher and tolerant parsing of
published decimal values.

Files that USE this module:
- usdnis.adapters.providers.boi_daily (BoiDailyProvider extends RateProvider)
- usdnis.adapters.providers.boi_sdmx (BoiSdmxProvider extends RateProvider)
- usdnis.application.rates_service (type of the injected provider)

Files that this module USES:
- usdnis.adapters.transport (HttpFetcher for network access)
- usdnis.domain.models (validate_rate, Observation)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages
from abc import ABC, abstractmethod  # Abstract base classes for defining interfaces
from datetime import date  # Calendar dates for query construction
from typing import Dict, List, Optional  # Type hints

from usdnis.adapters.transport import HttpFetcher
from usdnis.domain.errors import InvalidRateError
from usdnis.domain.models import Observation, validate_rate

log = logging.getLogger(__name__)


class RateProvider(ABC):
    """
    Base class for providers that turn a dated query into observations.

    Subclasses build the query parameters and parse the returned payload.
    A payload without usable records yields an empty list, never an error.
    """

    def __init__(self, url: str, fetcher: HttpFetcher):
        """
        Initialize provider.

        Args:
            url: Endpoint URL without query string
            fetcher: Retrying HTTP fetcher
        """
        self.url = url
        self.fetcher = fetcher

    def _fetch(self, params: Dict[str, str]) -> str:
        """
        Fetch the payload for the given query.

        Raises:
            TransportError: If the endpoint is unreachable after all retries
        """
        return self.fetcher.get_text(self.url, params)

    @staticmethod
    def _parse_rate(text: Optional[str]) -> Optional[float]:
        """
        Parse a published rate value.

        Args:
            text: Text containing the rate, e.g. "3.152"

        Returns:
            Positive float rate or None if the text is not a usable rate
        """
        if not text:
            return None
        try:
            return validate_rate(text.replace(",", ""))
        except InvalidRateError as e:
            log.debug("Ignoring malformed rate value %r: %s", text, e)
            return None

    @abstractmethod
    def _parse(self, body: str, start: date, end: date) -> List[Observation]:
        """
        Parse a payload into observations.

        Args:
            body: Response text
            start: First date covered by the query
            end: Last date covered by the query

        Returns:
            Observations found in the payload (possibly empty)
        """
        raise NotImplementedError
