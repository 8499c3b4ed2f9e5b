import logging
from datetime import datetime
from typing import Dict, List, Optional, Tuple

import swisseph as swe

from vedic_charts.domain.charts.angles import normalize
from vedic_charts.domain.charts.errors import ProviderError
from vedic_charts.domain.charts.schemas import BirthInput, CoreApiResponse, Planet, PlanetRaw

logger = logging.getLogger(__name__)

# Defined at every latitude
FALLBACK_HOUSE_SYSTEM = b"W"


class SwissEphemerisProvider:
    """
    Local provider computing sidereal positions with Swiss Ephemeris.

    This class:
    - Uses the Lahiri ayanamsa
    - Returns Rahu only; Ketu is derived by the chart engine
    - Converts the tropical ascendant and house cusps to sidereal
    - Omits house cusps where the house system fails (polar latitudes)
    """

    PLANET_MAPPING: Dict[Planet, int] = {
        Planet.SUN: swe.SUN,
        Planet.MOON: swe.MOON,
        Planet.MARS: swe.MARS,
        Planet.MERCURY: swe.MERCURY,
        Planet.JUPITER: swe.JUPITER,
        Planet.VENUS: swe.VENUS,
        Planet.SATURN: swe.SATURN,
    }

    def __init__(self, ephe_path: Optional[str] = None, house_system: bytes = b"P"):
        # Without ephemeris files Swiss Ephemeris falls back to Moshier
        if ephe_path:
            swe.set_ephe_path(ephe_path)
        self.house_system = house_system

    # ─────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────

    async def get_core(self, birth: BirthInput) -> CoreApiResponse:
        try:
            return self.calculate(birth)
        except swe.Error as exc:
            raise ProviderError(f"Swiss Ephemeris calculation failed: {exc}") from exc

    def calculate(self, birth: BirthInput) -> CoreApiResponse:
        swe.set_sid_mode(swe.SIDM_LAHIRI, 0, 0)

        julian_day = self._julian_day(birth)
        ayanamsa = swe.get_ayanamsa_ut(julian_day)

        planets = self._planets(julian_day, birth.node_type or "true")

        asc_tropical, cusps = self._houses(julian_day, birth)
        planets.append(
            PlanetRaw(key=Planet.ASCENDANT, lon=normalize(asc_tropical - ayanamsa))
        )

        house_cusps = None
        if cusps is not None and len(cusps) >= 12:
            house_cusps = tuple(normalize(c - ayanamsa) for c in cusps[:12])

        logger.debug("Computed %d bodies for JD %.5f", len(planets), julian_day)

        return CoreApiResponse(
            planets=tuple(planets),
            ayanamsha=round(ayanamsa, 6),
            house_cusps=house_cusps,
        )

    # ─────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────

    @staticmethod
    def _julian_day(birth: BirthInput) -> float:
        """
        Julian Day (UT) from local birth date, time and offset in hours.
        """
        local_dt = datetime.combine(birth.birth_date, birth.birth_time)
        hour_decimal = local_dt.hour + local_dt.minute / 60.0 + local_dt.second / 3600.0
        jd_local = swe.julday(local_dt.year, local_dt.month, local_dt.day, hour_decimal)
        return jd_local - birth.tz_offset / 24.0

    def _houses(self, julian_day: float, birth: BirthInput) -> Tuple[float, Optional[Tuple[float, ...]]]:
        """
        Tropical ascendant and house cusps for the configured system.

        Quadrant systems such as Placidus are undefined inside the polar
        circles. The ascendant is then taken from whole-sign houses and
        no cusps are returned.
        """
        try:
            cusps, ascmc = swe.houses(
                julian_day, birth.latitude, birth.longitude, self.house_system
            )
            return ascmc[0], tuple(cusps)
        except swe.Error as exc:
            if self.house_system == FALLBACK_HOUSE_SYSTEM:
                raise
            logger.warning(
                "House system %r failed at latitude %.4f, using whole-sign ascendant: %s",
                self.house_system, birth.latitude, exc,
            )

        _cusps, ascmc = swe.houses(
            julian_day, birth.latitude, birth.longitude, FALLBACK_HOUSE_SYSTEM
        )
        return ascmc[0], None

    def _planets(self, julian_day: float, node_type: str) -> List[PlanetRaw]:
        flags = swe.FLG_SWIEPH | swe.FLG_SIDEREAL

        mapping = dict(self.PLANET_MAPPING)
        mapping[Planet.RAHU] = swe.TRUE_NODE if node_type == "true" else swe.MEAN_NODE

        planets = []
        for key, body in mapping.items():
            xx, _ret = swe.calc_ut(julian_day, body, flags)
            planets.append(PlanetRaw(key=key, lon=normalize(xx[0])))
        return planets
