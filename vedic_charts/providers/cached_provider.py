import logging

from redis.exceptions import RedisError

from vedic_charts.cache.ephemeris_cache import EphemerisCache
from vedic_charts.domain.charts.schemas import BirthInput, CoreApiResponse
from vedic_charts.providers.base import EphemerisProvider

logger = logging.getLogger(__name__)


class CachedProvider:
    """
    Wraps another provider with a Redis-backed response cache.

    Cache failures are logged and the wrapped provider is used instead;
    provider failures are never cached and propagate unchanged.
    """

    def __init__(
        self,
        provider: EphemerisProvider,
        cache: EphemerisCache,
        source: str,
    ):
        self.provider = provider
        self.cache = cache
        self.source = source

    async def get_core(self, birth: BirthInput) -> CoreApiResponse:
        try:
            cached = await self.cache.get_core(source=self.source, birth=birth)
        except RedisError as exc:
            logger.warning("Ephemeris cache read failed: %s", exc)
            cached = None

        if cached is not None:
            logger.debug("Ephemeris cache hit (%s)", self.source)
            return cached

        core = await self.provider.get_core(birth)

        try:
            await self.cache.set_core(source=self.source, birth=birth, core=core)
        except RedisError as exc:
            logger.warning("Ephemeris cache write failed: %s", exc)

        return core
