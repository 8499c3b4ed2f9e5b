from typing import Protocol, runtime_checkable

from vedic_charts.domain.charts.schemas import BirthInput, CoreApiResponse


@runtime_checkable
class EphemerisProvider(Protocol):
    """
    Source of sidereal (Lahiri) longitudes for a birth moment.

    Implementations:
    - MUST return sidereal longitudes (subtract the ayanamsha themselves
      if the underlying source is tropical)
    - MUST include the ascendant
    - SHOULD include Rahu and/or Ketu
    - MAY include the ayanamsha and 12 house cusps
    - Raise ProviderError on failure
    """

    async def get_core(self, birth: BirthInput) -> CoreApiResponse:
        ...
