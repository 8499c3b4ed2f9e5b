import math

from vedic_charts.domain.charts.schemas import DMS

FULL_CIRCLE = 360.0


def normalize(angle: float) -> float:
    """
    Reduce any angle to the [0, 360) degree range.
    """
    result = angle % FULL_CIRCLE
    # Tiny negatives round up to exactly 360.0
    return 0.0 if result >= FULL_CIRCLE else result


def to_dms(value: float) -> DMS:
    """
    Split decimal degrees into whole degrees, minutes and seconds.

    Seconds are rounded; a rounded 60 carries into the minutes and a
    resulting 60 minutes carries into the degrees.
    """
    deg = math.floor(value)
    min_float = (value - deg) * 60
    minutes = math.floor(min_float)
    sec = round((min_float - minutes) * 60)

    if sec == 60:
        sec = 0
        minutes += 1
    if minutes == 60:
        minutes = 0
        deg += 1

    return DMS(deg=deg, min=minutes, sec=sec)
