from dataclasses import dataclass
from datetime import date, time
from enum import Enum
from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vedic_charts.domain.charts.errors import InvalidBirthDataError

NodeType = Literal["true", "mean"]

NODE_TYPES = ("true", "mean")


class Planet(str, Enum):
    """
    Bodies understood by the chart core. The ascendant travels as a planet.
    """
    SUN = "Sun"
    MOON = "Moon"
    MARS = "Mars"
    MERCURY = "Mercury"
    JUPITER = "Jupiter"
    VENUS = "Venus"
    SATURN = "Saturn"
    RAHU = "Rahu"
    KETU = "Ketu"
    ASCENDANT = "Asc"


class ChartModel(BaseModel):
    """
    Immutable value object serialised with camelCase field names.
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ─────────────────────────────────────────────
# Input
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class BirthInput:
    """
    Immutable birth input forwarded to the ephemeris provider.
    """
    birth_date: date
    birth_time: time
    tz_offset: float
    latitude: float
    longitude: float
    node_type: Optional[NodeType] = None

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidBirthDataError(f"Latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidBirthDataError(f"Longitude out of range: {self.longitude}")
        if not -12.0 <= self.tz_offset <= 14.0:
            raise InvalidBirthDataError(f"Timezone offset out of range: {self.tz_offset}")
        if self.node_type is not None and self.node_type not in NODE_TYPES:
            raise InvalidBirthDataError(f"Unknown node type: {self.node_type}")

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "BirthInput":
        """
        Build from a request payload such as
        {"date": "1985-06-09", "time": "14:45", "tz": 3, "lat": 55.75, "lon": 37.61}.
        """
        try:
            return cls(
                birth_date=date.fromisoformat(payload["date"]),
                birth_time=time.fromisoformat(payload["time"]),
                tz_offset=float(payload["tz"]),
                latitude=float(payload["lat"]),
                longitude=float(payload["lon"]),
                node_type=payload.get("nodeType"),
            )
        except KeyError as exc:
            raise InvalidBirthDataError(f"Missing birth field: {exc.args[0]}") from exc
        except (TypeError, ValueError) as exc:
            raise InvalidBirthDataError(f"Malformed birth data: {exc}") from exc


# ─────────────────────────────────────────────
# Provider data
# ─────────────────────────────────────────────

class PlanetRaw(ChartModel):
    """
    Sidereal longitude of a single body as delivered by a provider.
    """
    key: Planet
    lon: float


class CoreApiResponse(ChartModel):
    """
    Everything the chart core needs from an ephemeris provider.
    """
    planets: Tuple[PlanetRaw, ...]
    ayanamsha: Optional[float] = None
    house_cusps: Optional[Tuple[float, ...]] = None

    def find(self, key: Planet) -> Optional[PlanetRaw]:
        return next((p for p in self.planets if p.key == key), None)

    def has(self, key: Planet) -> bool:
        return self.find(key) is not None


# ─────────────────────────────────────────────
# Placements
# ─────────────────────────────────────────────

class DMS(ChartModel):
    deg: int
    min: int
    sec: int


class NakshatraInfo(ChartModel):
    index: int = Field(ge=0, le=26)
    name: str
    pada: int = Field(ge=1, le=4)


class PlanetPlacement(ChartModel):
    """
    Represents a single body's position in a chart slice.
    """
    key: Planet
    lon: float = Field(ge=0.0, lt=360.0)
    sign: int = Field(ge=0, le=11)
    sign_name: str
    deg_in_sign: float
    dms_in_sign: DMS
    house: int = Field(ge=1, le=12)
    nakshatra: NakshatraInfo


class HouseSign(ChartModel):
    house: int = Field(ge=1, le=12)
    sign: int = Field(ge=0, le=11)
    sign_name: str


class ChartSlice(ChartModel):
    """
    One chart (D1 or D9): ascendant, house table and planet placements.
    """
    asc: PlanetPlacement
    houses: Tuple[HouseSign, ...]
    planets: Tuple[PlanetPlacement, ...]

    def planet(self, key: Planet) -> Optional[PlanetPlacement]:
        return next((p for p in self.planets if p.key == key), None)


# ─────────────────────────────────────────────
# Result
# ─────────────────────────────────────────────

class ChartMeta(ChartModel):
    system: Literal["sidereal-lahiri"] = "sidereal-lahiri"
    ayanamsha: Optional[float] = None
    node_type: NodeType = "true"
    house_cusps: Optional[Tuple[float, ...]] = None


class VedicCharts(ChartModel):
    """
    Rāśi (D1) and Navāṁśa (D9) charts built from one provider response.
    """
    meta: ChartMeta
    d1: ChartSlice = Field(alias="D1")
    d9: ChartSlice = Field(alias="D9")
