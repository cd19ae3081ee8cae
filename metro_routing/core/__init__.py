"""
Core 설정 및 utilities, 커스텀 예외
"""

from metro_routing.core.config import settings, UNKNOWN_LINE

from metro_routing.core.exceptions import (
    MetroRoutingException,
    RouteNotFoundException,
    StationNotFoundException,
    InvalidRequestException,
    EmptyRouteException,
    SearchTimeoutException,
    InvalidLocationException,
    InvalidNetworkDataException,
)

__all__ = [
    "settings",
    "UNKNOWN_LINE",
    "MetroRoutingException",
    "RouteNotFoundException",
    "StationNotFoundException",
    "InvalidRequestException",
    "EmptyRouteException",
    "SearchTimeoutException",
    "InvalidLocationException",
    "InvalidNetworkDataException",
]
