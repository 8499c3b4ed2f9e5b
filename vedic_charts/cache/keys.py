import hashlib

from vedic_charts.domain.charts.schemas import BirthInput


class CacheKeys:
    """
    Centralized cache key builders.
    """

    @staticmethod
    def birth_hash(birth: BirthInput) -> str:
        raw = "|".join(
            str(part)
            for part in (
                birth.birth_date.isoformat(),
                birth.birth_time.isoformat(),
                birth.tz_offset,
                birth.latitude,
                birth.longitude,
                birth.node_type or "true",
            )
        )
        return hashlib.sha256(raw.encode()).hexdigest()

    @staticmethod
    def ephemeris(source: str, birth: BirthInput) -> str:
        return f"ephemeris:{source}:{CacheKeys.birth_hash(birth)}"
