from vedic_charts.domain.charts.engine import VedicChartEngine, build_vedic_charts
from vedic_charts.domain.charts.errors import (
    ChartError,
    InvalidBirthDataError,
    MissingAscendantError,
    ProviderError,
)
from vedic_charts.domain.charts.schemas import (
    BirthInput,
    ChartSlice,
    CoreApiResponse,
    Planet,
    PlanetPlacement,
    PlanetRaw,
    VedicCharts,
)

__all__ = [
    "BirthInput",
    "ChartError",
    "ChartSlice",
    "CoreApiResponse",
    "InvalidBirthDataError",
    "MissingAscendantError",
    "Planet",
    "PlanetPlacement",
    "PlanetRaw",
    "ProviderError",
    "VedicChartEngine",
    "VedicCharts",
    "build_vedic_charts",
]
