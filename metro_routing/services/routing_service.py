# 경로 찾기 서비스

import logging
import time
import json
from dataclasses import asdict
from typing import Optional, Dict, Any

from metro_routing.algorithms.dijkstra import dijkstra
from metro_routing.algorithms.itinerary import (
    build_itinerary,
    count_transfers,
    label_hops,
    transfer_points,
)
from metro_routing.core.config import settings
from metro_routing.core.exceptions import (
    InvalidRequestException,
    RouteNotFoundException,
    StationNotFoundException,
)
from metro_routing.store.cache import NetworkSnapshot, get_snapshot

logger = logging.getLogger(__name__)


class RoutingService:

    def __init__(self, snapshot: Optional[NetworkSnapshot] = None):
        # None => 요청마다 현재 캐시 snapshot 사용 (재로딩 반영)
        self._snapshot = snapshot
        logger.info("RoutingService 초기화 완료")

    @property
    def snapshot(self) -> NetworkSnapshot:
        return self._snapshot if self._snapshot is not None else get_snapshot()

    def calculate_route(
        self, origin_id: str, destination_id: str, use_edge_lines: bool = False
    ) -> Dict[str, Any]:
        """
        최단 경로 계산 및 노선별 구간 반환

        Args:
            origin_id: 출발역 ID
            destination_id: 도착역 ID
            use_edge_lines: True => 그래프 간선의 노선으로 구간 분할

        Returns:
            경로 데이터 딕셔너리

        Raises:
            InvalidRequestException: 빈 역 ID
            StationNotFoundException: 역 데이터에 없는 ID
            RouteNotFoundException: 그래프에 연결되지 않았거나 경로가 없을 때
            SearchTimeoutException: 탐색 제한 초과
        """
        start_time = time.time()

        # 요청 시점의 snapshot 고정 => 탐색 중 재로딩되어도 일관성 유지
        snapshot = self.snapshot

        try:
            origin_id = self._validate_station_id(snapshot, origin_id, "출발")
            destination_id = self._validate_station_id(
                snapshot, destination_id, "도착"
            )

            origin = snapshot.stations[origin_id]
            destination = snapshot.stations[destination_id]

            logger.info(
                f"경로 계산 요청: {origin.name}({origin_id}) → "
                f"{destination.name}({destination_id})"
            )

            if not snapshot.is_routable(origin_id) or not snapshot.is_routable(
                destination_id
            ):
                raise RouteNotFoundException(
                    "출발지 또는 목적지가 로드된 노선망에 연결되어 있지 않습니다"
                )

            calculation_start = time.time()
            result = dijkstra(
                snapshot.graph,
                origin_id,
                destination_id,
                max_iterations=settings.SEARCH_MAX_ITERATIONS or None,
                deadline=self._deadline(),
            )
            calculation_time = time.time() - calculation_start

            if result is None:
                raise RouteNotFoundException(
                    f"{origin.name}에서 {destination.name}까지 경로를 찾을 수 없습니다"
                )

            path = result.stations
            edge_lines = result.edge_lines if use_edge_lines else None

            hop_lines = label_hops(path, snapshot.stations, edge_lines)
            steps = build_itinerary(
                path, snapshot.stations, snapshot.lines, edge_lines=hop_lines
            )
            transfer_info = transfer_points(path, hop_lines)

            route = {
                "origin": origin_id,
                "origin_name": origin.name,
                "destination": destination_id,
                "destination_name": destination.name,
                "path": path,
                "path_names": [snapshot.stations[s].name for s in path],
                "total_distance_m": round(result.distance, 1),
                "steps": [asdict(step) for step in steps],
                "transfers": count_transfers(steps),
                "transfer_stations": [t[0] for t in transfer_info],
                "transfer_info": transfer_info,
                "line_attribution": "edge" if use_edge_lines else "membership",
            }

            elapsed_time = time.time() - start_time
            logger.info(
                f"경로 계산 완료: {origin.name} → {destination.name}, "
                f"{len(path)}개 역, {len(steps)}개 구간, "
                f"총 응답시간={elapsed_time * 1000:.1f}ms"
            )

            self._log_route_metrics(
                response_time_ms=elapsed_time * 1000,
                calculation_time_ms=calculation_time * 1000,
                origin=origin_id,
                destination=destination_id,
                path_length=len(path),
                transfers=route["transfers"],
            )

            return route

        except (InvalidRequestException, RouteNotFoundException) as e:
            logger.warning(f"경로 계산 실패: {e.message}")
            raise

    def _validate_station_id(
        self, snapshot: NetworkSnapshot, station_id: Optional[str], label: str
    ) -> str:
        """탐색 전에 요청 검증 => 탐색 도중 발견하지 않도록"""
        station_id = (station_id or "").strip()
        if not station_id:
            raise InvalidRequestException(f"{label}역 ID가 비어 있습니다")

        if station_id not in snapshot.stations:
            raise StationNotFoundException(
                f"{label}역을 찾을 수 없습니다: {station_id}"
            )
        return station_id

    def _deadline(self) -> Optional[float]:
        if not settings.SEARCH_TIMEOUT_MS:
            return None
        return time.monotonic() + settings.SEARCH_TIMEOUT_MS / 1000

    def _log_route_metrics(
        self,
        response_time_ms: float,
        calculation_time_ms: float,
        origin: str,
        destination: str,
        path_length: int,
        transfers: int,
    ) -> None:
        """
        경로 계산 메트릭 로깅 => 로그 수집기에서 분석하기
        """
        if not settings.ENABLE_ROUTE_METRICS:
            return

        metrics = {
            "event": "route_calculation",
            "response_time_ms": round(response_time_ms, 2),
            "calculation_time_ms": round(calculation_time_ms, 2),
            "origin": origin,
            "destination": destination,
            "path_length": path_length,
            "transfers": transfers,
        }

        logger.info(f"METRICS: {json.dumps(metrics, ensure_ascii=False)}")
