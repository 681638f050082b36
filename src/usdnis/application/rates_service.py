# src/usdnis/application/rates_service.py
"""
Rates Service - Exchange Rate Resolution

This module contains the date-fallback search that finds the USD/NIS rate
published on or before a requested date. Two strategies are available:

- "daily": query one day at a time, walking backwards from the requested
  date until a day with a publication is found.
- "range": fetch every observation in [date - lookback, date] with one
  query and keep the latest one that is not after the requested date.

Transient network failures are retried underneath by HttpFetcher; here a
missing publication only means "look at an earlier date".

Files that USE this module:
- usdnis.app (CLI resolves the rate through RateResolver)
- tests.test_rates_service (unit tests)

Files that this module USES:
- usdnis.adapters.providers.boi_daily (BoiDailyProvider for daily probing)
- usdnis.adapters.providers.boi_sdmx (BoiSdmxProvider for ranged queries)
- usdnis.adapters.transport (HttpFetcher)
- usdnis.domain.models (Resolution, Observation)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages
from datetime import date, timedelta  # Calendar arithmetic for the lookback window
from typing import Iterable, Optional  # Type hints

from usdnis.adapters.providers.boi_daily import BoiDailyProvider
from usdnis.adapters.providers.boi_sdmx import BoiSdmxProvider
from usdnis.adapters.transport import HttpFetcher
from usdnis.config import settings
from usdnis.config.settings import MAX_LOOKBACK_DAYS, STRATEGY_DAILY, STRATEGY_RANGE
from usdnis.domain.errors import RateNotFoundError
from usdnis.domain.models import Observation, Resolution

log = logging.getLogger(__name__)

STRATEGIES = (STRATEGY_RANGE, STRATEGY_DAILY)


def latest_on_or_before(observations: Iterable[Observation], target: date) -> Optional[Observation]:
    """
    Pick the most recent observation dated on or before target.

    Selection is by date, so the result does not depend on the order in
    which the source listed its records.

    Args:
        observations: Candidate observations
        target: Requested date

    Returns:
        Closest observation not after target, or None
    """
    best: Optional[Observation] = None
    for obs in observations:
        if obs.date > target:
            continue
        if best is None or obs.date > best.date:
            best = obs
    return best


class RateResolver:
    """
    Resolve the USD/NIS rate in effect on a given date.

    Owns one HttpFetcher (and so one HTTP session); use as a context manager
    or call close() when done.
    """

    def __init__(
        self,
        strategy: Optional[str] = None,
        lookback_days: Optional[int] = None,
        fetcher: Optional[HttpFetcher] = None,
        daily_provider: Optional[BoiDailyProvider] = None,
        range_provider: Optional[BoiSdmxProvider] = None,
    ):
        """
        Initialize resolver.

        Args:
            strategy: "range" or "daily" (defaults to settings.strategy)
            lookback_days: Size of the backward search window (defaults to settings.lookback_days)
            fetcher: Optional HttpFetcher shared by the providers
            daily_provider: Optional provider for the daily strategy
            range_provider: Optional provider for the range strategy

        Raises:
            ValueError: If the strategy is unknown or the lookback window is out of range
        """
        self.strategy = strategy or settings.strategy
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy {self.strategy!r}, expected one of {', '.join(STRATEGIES)}")
        self.lookback_days = settings.lookback_days if lookback_days is None else lookback_days
        if not 1 <= self.lookback_days <= MAX_LOOKBACK_DAYS:
            raise ValueError(f"lookback_days must be between 1 and {MAX_LOOKBACK_DAYS}")

        self.fetcher = fetcher or HttpFetcher()
        self.daily_provider = daily_provider or BoiDailyProvider(self.fetcher)
        self.range_provider = range_provider or BoiSdmxProvider(self.fetcher)

    def __enter__(self) -> "RateResolver":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Release the HTTP session."""
        self.fetcher.close()

    def resolve(self, target: date) -> Resolution:
        """
        Get the rate last published on or before target.

        Args:
            target: Requested date

        Returns:
            Resolution with the rate and the date it was published for

        Raises:
            RateNotFoundError: If nothing was published in the lookback window
            TransportError: If the source stayed unreachable after retries
        """
        log.info("Resolving USD/NIS rate for %s (strategy=%s, lookback=%dd)", target, self.strategy, self.lookback_days)
        if self.strategy == STRATEGY_DAILY:
            obs = self._walk_daily(target)
        else:
            obs = self._query_range(target)

        if obs is None:
            log.warning("No rate found for %s within %d days", target, self.lookback_days)
            raise RateNotFoundError(target, self.lookback_days)

        resolution = Resolution(rate=obs.rate, effective_date=obs.date, requested_date=target)
        if resolution.fallback_days:
            log.info("No publication on %s, using %s (%d day(s) earlier)", target, obs.date, resolution.fallback_days)
        return resolution

    def _walk_daily(self, target: date) -> Optional[Observation]:
        """Walk backwards one day per query, up to lookback_days queries."""
        for offset in range(self.lookback_days):
            if (target - date.min).days < offset:
                break
            day = target - timedelta(days=offset)
            obs = self.daily_provider.observation_on(day)
            if obs is not None:
                return obs
        return None

    def _query_range(self, target: date) -> Optional[Observation]:
        """Fetch the whole window once and keep the latest observation."""
        start = target - timedelta(days=min(self.lookback_days, (target - date.min).days))
        observations = self.range_provider.observations_between(start, target)
        return latest_on_or_before(observations, target)
