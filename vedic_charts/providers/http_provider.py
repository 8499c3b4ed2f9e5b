import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from vedic_charts.domain.charts.angles import normalize
from vedic_charts.domain.charts.errors import ProviderError
from vedic_charts.domain.charts.schemas import BirthInput, CoreApiResponse, Planet, PlanetRaw

logger = logging.getLogger(__name__)

# Substring → planet, checked in order
NAME_MATCHERS: Tuple[Tuple[Tuple[str, ...], Planet], ...] = (
    (("sun",), Planet.SUN),
    (("moon",), Planet.MOON),
    (("mars",), Planet.MARS),
    (("mercury",), Planet.MERCURY),
    (("jupiter",), Planet.JUPITER),
    (("venus",), Planet.VENUS),
    (("saturn",), Planet.SATURN),
    (("rahu", "north"), Planet.RAHU),
    (("ketu", "south"), Planet.KETU),
)


def planet_from_name(name: str) -> Optional[Planet]:
    """
    Map a provider body name ("Sun", "True North Node", ...) to a Planet.
    """
    lowered = name.lower()
    for needles, planet in NAME_MATCHERS:
        if any(n in lowered for n in needles):
            return planet
    return None


class HttpEphemerisProvider:
    """
    Provider backed by a remote Vedic astrology API.

    The API is expected to return sidereal (Lahiri) longitudes.
    """

    POSITIONS_PATH = "/astrology/vedic/positions"
    HOUSE_CUSPS_PATH = "/astrology/vedic/house-cusps"

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        fetch_house_cusps: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.fetch_house_cusps = fetch_house_cusps
        self.transport = transport

    # ─────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────

    async def get_core(self, birth: BirthInput) -> CoreApiResponse:
        payload = self._payload(birth)

        async with httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._headers(),
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            body = await self._call(client, self.POSITIONS_PATH, payload)
            planets, ayanamsha = self._parse_positions(body)

            house_cusps = None
            if self.fetch_house_cusps:
                house_cusps = await self._house_cusps(client, payload)

        return CoreApiResponse(
            planets=tuple(planets),
            ayanamsha=ayanamsha,
            house_cusps=house_cusps,
        )

    # ─────────────────────────────────────────────
    # Request helpers
    # ─────────────────────────────────────────────

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    @staticmethod
    def _payload(birth: BirthInput) -> Dict[str, Any]:
        local_dt = f"{birth.birth_date.isoformat()}T{birth.birth_time.strftime('%H:%M')}:00"
        return {
            "datetime": local_dt,
            "latitude": birth.latitude,
            "longitude": birth.longitude,
            "timezone": birth.tz_offset,
            "node_type": birth.node_type or "true",
            "ayanamsha": "lahiri",
        }

    async def _call(
        self,
        client: httpx.AsyncClient,
        path: str,
        payload: Dict[str, Any],
    ) -> Dict[str, Any]:
        try:
            response = await client.post(path, json=payload)
        except httpx.HTTPError as exc:
            raise ProviderError(f"Ephemeris request to {path} failed: {exc}") from exc

        if response.is_error:
            raise ProviderError(f"API error {response.status_code}: {response.text}")

        try:
            return response.json()
        except ValueError as exc:
            raise ProviderError(f"Ephemeris response from {path} is not JSON") from exc

    async def _house_cusps(
        self,
        client: httpx.AsyncClient,
        payload: Dict[str, Any],
    ) -> Optional[Tuple[float, ...]]:
        """
        Optional call; a failure here never fails the chart.
        """
        try:
            body = await self._call(client, self.HOUSE_CUSPS_PATH, payload)
        except ProviderError as exc:
            logger.warning("House cusps unavailable: %s", exc)
            return None

        cusps = body.get("cusps")
        if not isinstance(cusps, list) or len(cusps) < 12:
            return None
        return tuple(normalize(float(c)) for c in cusps[:12])

    # ─────────────────────────────────────────────
    # Response mapping
    # ─────────────────────────────────────────────

    @staticmethod
    def _parse_positions(body: Dict[str, Any]) -> Tuple[List[PlanetRaw], Optional[float]]:
        try:
            planets: List[PlanetRaw] = []
            for item in body["planets"]:
                key = planet_from_name(item["name"])
                if key is None:
                    logger.debug("Skipping unknown body %r", item["name"])
                    continue
                planets.append(PlanetRaw(key=key, lon=normalize(float(item["longitude"]))))

            asc_lon = float(body["ascendant"]["ascendant"])
            planets.append(PlanetRaw(key=Planet.ASCENDANT, lon=normalize(asc_lon)))
        except (KeyError, TypeError, ValueError) as exc:
            raise ProviderError(f"Malformed positions response: {exc!r}") from exc

        ayanamsha = body.get("ayanamsha")
        if isinstance(ayanamsha, dict):
            ayanamsha = ayanamsha.get("ayanamsha")
        return planets, ayanamsha
