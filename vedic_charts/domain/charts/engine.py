import dataclasses
import logging

from vedic_charts.domain.charts.divisional.d1 import D1Calculator
from vedic_charts.domain.charts.divisional.d9 import D9Calculator
from vedic_charts.domain.charts.nodes import derive_ketu
from vedic_charts.domain.charts.schemas import BirthInput, ChartMeta, VedicCharts
from vedic_charts.domain.charts.tables import DEFAULT_LOCALE
from vedic_charts.providers.base import EphemerisProvider

logger = logging.getLogger(__name__)

DEFAULT_NODE_TYPE = "true"


class VedicChartEngine:
    """
    Orchestrates Vedic chart construction.

    This class:
    - Fetches sidereal longitudes from a provider
    - Derives Ketu when only Rahu is supplied
    - Returns D1 and D9 slices packaged as VedicCharts
    """

    def __init__(self, provider: EphemerisProvider, locale: str = DEFAULT_LOCALE):
        self.provider = provider
        self.d1 = D1Calculator(locale)
        self.d9 = D9Calculator(locale)

    async def generate(self, birth: BirthInput) -> VedicCharts:
        """
        Build both charts for a birth moment.

        Any error aborts the whole build; no partial result is returned.
        """

        # ─────────────────────────────────────────────
        # Step 1: Provider fetch
        # ─────────────────────────────────────────────

        node_type = birth.node_type or DEFAULT_NODE_TYPE
        core = await self.provider.get_core(
            dataclasses.replace(birth, node_type=node_type)
        )

        # ─────────────────────────────────────────────
        # Step 2: Lunar nodes
        # ─────────────────────────────────────────────

        core = derive_ketu(core)

        # ─────────────────────────────────────────────
        # Step 3: Charts
        # ─────────────────────────────────────────────

        d1 = self.d1.calculate(core)
        d9 = self.d9.calculate(core)

        logger.debug(
            "Built charts: D1 asc sign %s, D9 asc sign %s, %d bodies",
            d1.asc.sign, d9.asc.sign, len(d1.planets),
        )

        return VedicCharts(
            meta=ChartMeta(
                ayanamsha=core.ayanamsha,
                node_type=node_type,
                house_cusps=core.house_cusps,
            ),
            d1=d1,
            d9=d9,
        )


async def build_vedic_charts(
    birth: BirthInput,
    provider: EphemerisProvider,
    locale: str = DEFAULT_LOCALE,
) -> VedicCharts:
    return await VedicChartEngine(provider, locale).generate(birth)
