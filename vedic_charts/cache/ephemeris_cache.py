from typing import Optional

from vedic_charts.cache.base import BaseCache
from vedic_charts.cache.keys import CacheKeys
from vedic_charts.cache.ttl import CacheTTL
from vedic_charts.domain.charts.schemas import BirthInput, CoreApiResponse


class EphemerisCache(BaseCache):
    """
    Cache for provider responses keyed by birth input.

    Used by:
    - CachedProvider
    """

    async def get_core(
        self,
        *,
        source: str,
        birth: BirthInput,
    ) -> Optional[CoreApiResponse]:
        data = await self.get(CacheKeys.ephemeris(source, birth))
        if data is None:
            return None
        return CoreApiResponse.model_validate(data)

    async def set_core(
        self,
        *,
        source: str,
        birth: BirthInput,
        core: CoreApiResponse,
    ) -> None:
        await self.set(
            key=CacheKeys.ephemeris(source, birth),
            value=core,
            ttl=CacheTTL.EPHEMERIS,
        )
