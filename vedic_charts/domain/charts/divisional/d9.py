import math

from vedic_charts.domain.charts.divisional.base import BaseChartCalculator
from vedic_charts.domain.charts.placement import (
    BOUNDARY_EPSILON,
    SIGN_SPAN,
    degree_in_sign,
    planet_to_placement,
    sign_of_longitude,
)
from vedic_charts.domain.charts.schemas import ChartSlice, CoreApiResponse, Planet
from vedic_charts.domain.charts.tables import FIXED_SIGNS, MOVABLE_SIGNS

NAVAMSHA_SPAN = SIGN_SPAN / 9  # 3.333333...


def navamsa_start(sign: int) -> int:
    """
    First sign of the Navamsha sequence for a D1 sign.

    - Movable signs start from the sign itself
    - Fixed signs start from the 9th sign from it
    - Dual signs start from the 5th sign from it
    """
    if sign in MOVABLE_SIGNS:
        return sign
    if sign in FIXED_SIGNS:
        return (sign + 8) % 12
    return (sign + 4) % 12


def navamsa_sign_of_longitude(lon: float) -> int:
    sign = sign_of_longitude(lon)

    # Which Navamsha within the sign (0–8)
    nav_index = min(math.floor(degree_in_sign(lon) * 9 / SIGN_SPAN + BOUNDARY_EPSILON), 8)

    return (navamsa_start(sign) + nav_index) % 12


def navamsa_display_longitude(lon: float) -> float:
    """
    Synthetic D9 longitude used only to render a placement.

    The sign part is the true Navamsha sign; the degrees are the D1
    remainder inside its Navamsha and carry no astrological meaning.
    Do not subdivide this value further.
    """
    d9_sign = navamsa_sign_of_longitude(lon)
    return d9_sign * SIGN_SPAN + (degree_in_sign(lon) % NAVAMSHA_SPAN)


class D9Calculator(BaseChartCalculator):
    """
    Calculates the Navamsha (D9) chart from provider longitudes.
    """

    chart_type = "D9"

    def calculate(
        self,
        core: CoreApiResponse
    ) -> ChartSlice:
        asc = self._require_ascendant(core)

        # ─────────────────────────────────────────────
        # Ascendant (D9): sign only
        # ─────────────────────────────────────────────

        d9_asc_sign = navamsa_sign_of_longitude(asc.lon)
        ascendant = planet_to_placement(
            Planet.ASCENDANT,
            d9_asc_sign * SIGN_SPAN,
            d9_asc_sign,
            self.locale,
        )

        # ─────────────────────────────────────────────
        # Planets (D9)
        # ─────────────────────────────────────────────

        planets = [
            planet_to_placement(
                p.key,
                navamsa_display_longitude(p.lon),
                d9_asc_sign,
                self.locale,
            )
            for p in self._bodies(core)
        ]

        return self._build_slice(ascendant, d9_asc_sign, planets)
