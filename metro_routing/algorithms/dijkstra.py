import math
import time
from typing import Dict, Optional

from metro_routing.algorithms.priority_queue import MinPriorityQueue
from metro_routing.core.exceptions import SearchTimeoutException
from metro_routing.models.domain import Graph, ShortestPath


def dijkstra(
    graph: Graph,
    start: str,
    target: str,
    max_iterations: Optional[int] = None,
    deadline: Optional[float] = None,
) -> Optional[ShortestPath]:
    """
    Dijkstra 알고리즘으로 최단경로 계산 (가중치 = 거리, meter)

    그래프에 출발/도착역이 존재하는지는 호출자가 먼저 확인해야 함

    Args:
        graph: {station_id: [Edge, ...]}
        start: 출발역 ID
        target: 도착역 ID
        max_iterations: pop 횟수 상한 (None => 제한 없음)
        deadline: time.monotonic() 기준 종료 시각 (None => 제한 없음)

    Returns:
        ShortestPath 또는 경로가 없으면 None

    Raises:
        SearchTimeoutException: 탐색 제한 초과
    """
    dist: Dict[str, float] = {start: 0.0}
    prev: Dict[str, str] = {}
    # 선행 역으로 들어온 간선의 노선 => 역추적 시 노선 복원용
    prev_line: Dict[str, str] = {}
    visited = set()
    pq = MinPriorityQueue()

    pq.push(start, 0.0)
    iterations = 0

    while not pq.is_empty():
        iterations += 1
        if max_iterations is not None and iterations > max_iterations:
            raise SearchTimeoutException(
                f"탐색 반복 횟수 초과: {max_iterations}회"
            )
        if deadline is not None and time.monotonic() > deadline:
            raise SearchTimeoutException("탐색 시간 초과")

        u = pq.pop()
        if u in visited:
            continue
        visited.add(u)

        # 음수 가중치가 없으므로 처음 방문한 시점이 최적
        if u == target:
            break

        for edge in graph.get(u, []):
            v = edge.to
            alt = dist[u] + edge.weight
            if alt < dist.get(v, math.inf):
                dist[v] = alt
                prev[v] = u
                prev_line[v] = edge.line_id
                pq.push(v, alt)

    # reconstruct path
    if target not in prev and start != target:
        return None

    path = [target]
    lines = []
    node = target
    while node != start:
        lines.append(prev_line[node])
        node = prev[node]
        path.append(node)

    path.reverse()
    lines.reverse()
    return ShortestPath(stations=path, distance=dist[target], edge_lines=lines)


def path_distance(graph: Graph, path) -> float:
    """경로상 연속 역 간 간선 가중치 합 (최소 가중치 간선 기준)"""
    total = 0.0
    for a, b in zip(path, path[1:]):
        weights = [e.weight for e in graph.get(a, []) if e.to == b]
        if not weights:
            return math.inf
        total += min(weights)
    return total
