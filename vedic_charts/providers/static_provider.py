from typing import List

from vedic_charts.domain.charts.schemas import BirthInput, CoreApiResponse


class StaticProvider:
    """
    Test double returning a fixed response.

    Every received input is appended to ``calls``, so keep instances
    short-lived.
    """

    def __init__(self, core: CoreApiResponse):
        self.core = core
        self.calls: List[BirthInput] = []

    async def get_core(self, birth: BirthInput) -> CoreApiResponse:
        self.calls.append(birth)
        return self.core
