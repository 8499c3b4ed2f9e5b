from abc import ABC, abstractmethod
from typing import List, Tuple

from vedic_charts.domain.charts.errors import MissingAscendantError
from vedic_charts.domain.charts.schemas import (
    ChartSlice,
    CoreApiResponse,
    HouseSign,
    Planet,
    PlanetPlacement,
    PlanetRaw,
)
from vedic_charts.domain.charts.tables import DEFAULT_LOCALE, sign_name


class BaseChartCalculator(ABC):
    """
    Abstract base class for chart slice calculators.

    Each chart (D1, D9) must:
    - Implement `chart_type`
    - Implement `calculate`
    """

    chart_type: str

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self.locale = locale

    @abstractmethod
    def calculate(
        self,
        core: CoreApiResponse
    ) -> ChartSlice:
        """
        Calculate the chart slice from a provider response.
        """
        raise NotImplementedError

    # ─────────────────────────────────────────────
    # Shared helpers
    # ─────────────────────────────────────────────

    def _require_ascendant(self, core: CoreApiResponse) -> PlanetRaw:
        asc = core.find(Planet.ASCENDANT)
        if asc is None:
            raise MissingAscendantError(
                f"{self.chart_type}: provider response has no ascendant"
            )
        return asc

    @staticmethod
    def _bodies(core: CoreApiResponse) -> List[PlanetRaw]:
        return [p for p in core.planets if p.key != Planet.ASCENDANT]

    def _house_table(self, asc_sign: int) -> Tuple[HouseSign, ...]:
        """
        Whole-sign houses 1–12 starting at the ascendant sign.
        """
        houses = []
        for i in range(12):
            sign = (asc_sign + i) % 12
            houses.append(
                HouseSign(house=i + 1, sign=sign, sign_name=sign_name(sign, self.locale))
            )
        return tuple(houses)

    def _build_slice(
        self,
        asc: PlanetPlacement,
        asc_sign: int,
        planets: List[PlanetPlacement],
    ) -> ChartSlice:
        """
        Helper to assemble a ChartSlice object.
        """
        return ChartSlice(
            asc=asc,
            houses=self._house_table(asc_sign),
            planets=tuple(planets),
        )
