import math
from typing import Sequence

from metro_routing.core.config import EARTH_RADIUS_M


def haversine(a: Sequence[float], b: Sequence[float]) -> float:
    """하버사인 공식으로 두 좌표 (lat, lon) 간 대원 거리 계산(meter)"""
    lat1, lon1 = a
    lat2, lon2 = b

    # radian convertion
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    # haversine formula
    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_M * c
