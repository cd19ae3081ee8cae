"""
singleton caching 전략 사용
Thread Lock으로 서버 시작 시 한 번만 로드하여 메모리에 유지

노선망 전체(역, 노선, 그래프)를 하나의 불변 snapshot으로 보관
=> 재로딩 시 새 snapshot을 만든 뒤 참조만 교체
=> 진행 중인 탐색은 이전 snapshot을 그대로 사용
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List, Optional, Tuple

# NNS => KD-TREE 사용하기
from scipy.spatial import KDTree
import numpy as np

from metro_routing.algorithms.distance_calculator import haversine
from metro_routing.algorithms.graph_builder import build_graph
from metro_routing.core.config import MAP_BOUNDS, settings
from metro_routing.core.exceptions import InvalidLocationException
from metro_routing.models.domain import Graph, GraphBuildReport, Line, Station
from metro_routing.store.loader import load_network, parse_lines, parse_stations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NetworkSnapshot:
    stations: Dict[str, Station]
    lines: Dict[str, Line]  # 입력 순서 유지
    graph: Graph
    report: GraphBuildReport
    source: str
    loaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    kdtree: Optional[KDTree] = None
    kdtree_ids: Tuple[str, ...] = ()
    # 경도 1도의 실제 거리 = 위도 1도 * cos(위도) => 경도에 곱해 등방성 좌표로 변환
    kdtree_lon_scale: float = 1.0

    def is_routable(self, station_id: str) -> bool:
        return station_id in self.graph


_cache_lock = Lock()
_snapshot: Optional[NetworkSnapshot] = None


def build_snapshot(
    stations: Dict[str, Station], lines: List[Line], source: str
) -> NetworkSnapshot:
    """역/노선으로 그래프와 KD-Tree를 만들어 snapshot 생성"""
    result = build_graph(lines, stations)

    coord_ids = [sid for sid, s in stations.items() if s.has_coords]
    kdtree = None
    lon_scale = 1.0
    if coord_ids:
        coords = np.array([stations[sid].coords for sid in coord_ids])
        lon_scale = float(np.cos(np.radians(coords[:, 0].mean())))
        kdtree = KDTree(np.column_stack([coords[:, 0], coords[:, 1] * lon_scale]))

    return NetworkSnapshot(
        stations=stations,
        lines={line.id: line for line in lines},
        graph=result.graph,
        report=result.report,
        source=source,
        kdtree=kdtree,
        kdtree_ids=tuple(coord_ids),
        kdtree_lon_scale=lon_scale,
    )


def _load_snapshot(
    stations: Optional[List[Dict[str, Any]]] = None,
    lines: Optional[List[Dict[str, Any]]] = None,
) -> NetworkSnapshot:
    if stations is not None and lines is not None:
        return build_snapshot(parse_stations(stations), parse_lines(lines), "memory")

    station_map, line_list, source = load_network(
        settings.STATIONS_FILE,
        settings.LINES_FILE,
        use_fallback=settings.USE_SAMPLE_NETWORK_FALLBACK,
    )
    return build_snapshot(station_map, line_list, source)


def initialize_cache(
    stations: Optional[List[Dict[str, Any]]] = None,
    lines: Optional[List[Dict[str, Any]]] = None,
) -> NetworkSnapshot:
    """
    서버 시작 시 노선망 데이터를 메모리에 로드
    Thread-safe singleton pattern

    Args:
        stations, lines: 원본 레코드 (둘 다 주어지면 파일 대신 사용)
    """
    global _snapshot

    with _cache_lock:
        if _snapshot is not None:
            logger.info("캐시가 이미 초기화되었습니다.")
            return _snapshot

        logger.info("노선망 캐시 초기화 시작")
        _snapshot = _load_snapshot(stations, lines)
        logger.info(
            f"✓ 노선망 캐시 초기화 완료: 역 {len(_snapshot.stations)}개, "
            f"노선 {len(_snapshot.lines)}개, 그래프 노드 {len(_snapshot.graph)}개"
        )
        return _snapshot


def reload_cache(
    stations: Optional[List[Dict[str, Any]]] = None,
    lines: Optional[List[Dict[str, Any]]] = None,
) -> NetworkSnapshot:
    """
    새 snapshot을 먼저 만든 뒤 교체 (실패 시 기존 snapshot 유지)

    레코드가 주어지지 않으면 설정된 STATIONS_FILE / LINES_FILE에서 로드
    """
    global _snapshot

    new_snapshot = _load_snapshot(stations, lines)

    with _cache_lock:
        _snapshot = new_snapshot

    logger.info(
        f"노선망 재로딩 완료: 역 {len(new_snapshot.stations)}개, "
        f"그래프 노드 {len(new_snapshot.graph)}개 (source={new_snapshot.source})"
    )
    return new_snapshot


def clear_cache():
    global _snapshot

    with _cache_lock:
        _snapshot = None
        logger.info("캐시 초기화됨")


def get_snapshot() -> NetworkSnapshot:
    snapshot = _snapshot
    if snapshot is None:
        snapshot = initialize_cache()
    return snapshot


def get_lines_dict() -> Dict[str, Line]:
    return get_snapshot().lines


def get_station_by_id(station_id: str) -> Optional[Station]:
    return get_snapshot().stations.get(station_id)


def list_routable_stations() -> List[Station]:
    """좌표가 있는 역 목록 (이름순) => 출발/도착 선택 목록용"""
    stations = [s for s in get_snapshot().stations.values() if s.has_coords]
    stations.sort(key=lambda s: s.name.lower())
    return stations


def search_stations_by_name(keyword: str, limit: int = 10) -> List[Station]:
    keyword = keyword.strip().lower()
    if not keyword:
        return []

    results = []
    for station in get_snapshot().stations.values():
        if not station.has_coords:
            continue

        name_lower = station.name.lower()
        if keyword in name_lower:
            if name_lower == keyword:
                priority = 1
            elif name_lower.startswith(keyword):
                priority = 2
            else:
                priority = 3
            results.append((priority, station))

    results.sort(key=lambda x: (x[0], len(x[1].name), x[1].name))
    return [station for _, station in results[:limit]]


def find_nearest_station(lat: float, lon: float) -> Tuple[Station, float]:
    """
    현재 위치에서 가장 가까운 역 찾기 => KD-Tree 사용 : O(log N)

    Args:
        lat: 위도
        lon: 경도

    Returns:
        (가장 가까운 역, 하버사인 거리(m))

    Raises:
        InvalidLocationException: 지도 범위 밖 좌표이거나 좌표가 있는 역이 없음
    """
    if not _is_valid_location(lat, lon):
        raise InvalidLocationException(f"유효하지 않은 좌표: {lat}, {lon}")

    snapshot = get_snapshot()
    if snapshot.kdtree is None:
        raise InvalidLocationException("좌표가 있는 역이 없습니다")

    _, index = snapshot.kdtree.query([lat, lon * snapshot.kdtree_lon_scale])
    station = snapshot.stations[snapshot.kdtree_ids[int(index)]]
    return station, haversine((lat, lon), station.coords)


def _is_valid_location(lat: float, lon: float) -> bool:
    # 기본적인 GPS 범위 검증
    if not (-90 <= lat <= 90 and -180 <= lon <= 180):
        return False

    if not (
        MAP_BOUNDS["lat_min"] <= lat <= MAP_BOUNDS["lat_max"]
        and MAP_BOUNDS["lon_min"] <= lon <= MAP_BOUNDS["lon_max"]
    ):
        logger.warning(f"현재 지원하지 않는 지역입니다: lat={lat}, lon={lon}")
        return False
    return True
