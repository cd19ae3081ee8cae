"""
Business logic services
"""

from metro_routing.services.routing_service import RoutingService

__all__ = [
    "RoutingService",
]
