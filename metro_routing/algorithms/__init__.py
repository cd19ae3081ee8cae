"""
그래프 생성 + Dijkstra 알고리즘 및 유틸리티 함수
"""

from metro_routing.algorithms.distance_calculator import haversine
from metro_routing.algorithms.graph_builder import build_graph
from metro_routing.algorithms.priority_queue import MinPriorityQueue
from metro_routing.algorithms.dijkstra import dijkstra, path_distance
from metro_routing.algorithms.itinerary import (
    build_itinerary,
    count_transfers,
    label_hops,
    transfer_points,
)

__all__ = [
    "haversine",
    "build_graph",
    "MinPriorityQueue",
    "dijkstra",
    "path_distance",
    "build_itinerary",
    "count_transfers",
    "label_hops",
    "transfer_points",
]
