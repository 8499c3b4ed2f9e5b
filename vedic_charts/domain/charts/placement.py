import math

from vedic_charts.domain.charts.angles import normalize, to_dms
from vedic_charts.domain.charts.schemas import NakshatraInfo, Planet, PlanetPlacement
from vedic_charts.domain.charts.tables import DEFAULT_LOCALE, nakshatra_name, sign_name

SIGN_SPAN = 30.0
NAKSHATRA_SPAN = 13 + 20 / 60  # 13°20'

# Division counts within this of the next integer belong to the next division
BOUNDARY_EPSILON = 1e-9


def sign_of_longitude(lon: float) -> int:
    return math.floor(normalize(lon) / SIGN_SPAN)


def degree_in_sign(lon: float) -> float:
    return normalize(lon) % SIGN_SPAN


def house_of(sign: int, asc_sign: int) -> int:
    """
    Whole-sign house number (1–12) of a sign counted from the ascendant sign.
    """
    return ((sign - asc_sign + 12) % 12) + 1


def nakshatra_of(lon: float, locale: str = DEFAULT_LOCALE) -> NakshatraInfo:
    """
    Nakshatra index (0–26), name and pada (1–4) for a sidereal longitude.
    """
    # 108 padas of 3°20' each
    pada_count = min(math.floor(normalize(lon) * 3 / 10 + BOUNDARY_EPSILON), 107)

    index = pada_count // 4
    pada = pada_count % 4 + 1

    return NakshatraInfo(
        index=index,
        name=nakshatra_name(index, locale),
        pada=pada,
    )


def planet_to_placement(
    key: Planet,
    lon: float,
    asc_sign: int,
    locale: str = DEFAULT_LOCALE,
) -> PlanetPlacement:
    """
    Full placement of a body relative to the given ascendant sign.
    """
    sign = sign_of_longitude(lon)
    deg = degree_in_sign(lon)

    return PlanetPlacement(
        key=key,
        lon=normalize(lon),
        sign=sign,
        sign_name=sign_name(sign, locale),
        deg_in_sign=deg,
        dms_in_sign=to_dms(deg),
        house=house_of(sign, asc_sign),
        nakshatra=nakshatra_of(lon, locale),
    )
