from vedic_charts.domain.charts.divisional.base import BaseChartCalculator
from vedic_charts.domain.charts.placement import planet_to_placement, sign_of_longitude
from vedic_charts.domain.charts.schemas import ChartSlice, CoreApiResponse, Planet


class D1Calculator(BaseChartCalculator):
    """
    Calculates the Rāśi (D1) chart from provider longitudes.
    """

    chart_type = "D1"

    def calculate(
        self,
        core: CoreApiResponse
    ) -> ChartSlice:
        asc = self._require_ascendant(core)
        asc_sign = sign_of_longitude(asc.lon)

        ascendant = planet_to_placement(Planet.ASCENDANT, asc.lon, asc_sign, self.locale)

        planets = [
            planet_to_placement(p.key, p.lon, asc_sign, self.locale)
            for p in self._bodies(core)
        ]

        return self._build_slice(ascendant, asc_sign, planets)
