import logging
from typing import Any, Dict, Optional

from vedic_charts.cache.ephemeris_cache import EphemerisCache
from vedic_charts.config import Settings, settings as default_settings
from vedic_charts.domain.charts.converters import vedic_charts_to_payload
from vedic_charts.domain.charts.engine import VedicChartEngine
from vedic_charts.domain.charts.schemas import BirthInput
from vedic_charts.providers.base import EphemerisProvider
from vedic_charts.providers.cached_provider import CachedProvider
from vedic_charts.providers.http_provider import HttpEphemerisProvider
from vedic_charts.providers.swisseph_provider import SwissEphemerisProvider

logger = logging.getLogger(__name__)


def build_provider(config: Settings) -> EphemerisProvider:
    """
    Create the configured ephemeris provider, optionally behind the cache.
    """
    provider: EphemerisProvider
    if config.EPHEMERIS_PROVIDER == "http":
        provider = HttpEphemerisProvider(
            base_url=config.EPHEMERIS_API_URL,
            api_key=config.EPHEMERIS_API_KEY,
            timeout=config.EPHEMERIS_TIMEOUT,
            fetch_house_cusps=config.EPHEMERIS_FETCH_HOUSE_CUSPS,
        )
    else:
        provider = SwissEphemerisProvider(ephe_path=config.EPHEMERIS_PATH)

    if config.CACHE_ENABLED:
        provider = CachedProvider(
            provider,
            EphemerisCache(),
            source=config.EPHEMERIS_PROVIDER,
        )

    return provider


class ChartService:
    """
    Entry point for callers holding a raw birth payload.
    """

    def __init__(
        self,
        provider: Optional[EphemerisProvider] = None,
        config: Optional[Settings] = None,
    ):
        self.config = config or default_settings
        self.provider = provider or build_provider(self.config)
        self.engine = VedicChartEngine(self.provider, locale=self.config.NAME_LOCALE)

    async def create_charts(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Payload → BirthInput → VedicCharts → JSON payload.

        Raises InvalidBirthDataError, ProviderError or MissingAscendantError.
        """
        birth = BirthInput.from_payload(payload)

        logger.info(
            "Building charts for %s %s (tz %+g)",
            birth.birth_date, birth.birth_time, birth.tz_offset,
        )

        charts = await self.engine.generate(birth)
        return vedic_charts_to_payload(charts)
