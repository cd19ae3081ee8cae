"""
pydantic models for 요청, 응답, 도메인 객체
"""


from metro_routing.models.requests import RouteRequest
from metro_routing.models.responses import (
    RouteResponse,
    ItineraryStepResponse,
    StationResponse,
    StationSearchResponse,
    NearestStationResponse,
    NetworkSummaryResponse,
    ErrorResponse,
)
from metro_routing.models.domain import (
    Station,
    Line,
    Edge,
    Graph,
    GraphBuildReport,
    GraphBuildResult,
    ShortestPath,
    ItineraryStep,
)

__all__ = [
    "RouteRequest",
    "RouteResponse",
    "ItineraryStepResponse",
    "StationResponse",
    "StationSearchResponse",
    "NearestStationResponse",
    "NetworkSummaryResponse",
    "ErrorResponse",
    "Station",
    "Line",
    "Edge",
    "Graph",
    "GraphBuildReport",
    "GraphBuildResult",
    "ShortestPath",
    "ItineraryStep",
]
