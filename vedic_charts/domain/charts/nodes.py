from vedic_charts.domain.charts.angles import normalize
from vedic_charts.domain.charts.schemas import CoreApiResponse, Planet, PlanetRaw


def derive_ketu(core: CoreApiResponse) -> CoreApiResponse:
    """
    Return a response that carries Ketu opposite Rahu.

    Only applies when Rahu is present and Ketu is not; provider values
    always win, and a response without nodes is returned as is.
    """
    rahu = core.find(Planet.RAHU)
    if rahu is None or core.has(Planet.KETU):
        return core

    ketu = PlanetRaw(key=Planet.KETU, lon=normalize(rahu.lon + 180.0))
    return core.model_copy(update={"planets": core.planets + (ketu,)})
