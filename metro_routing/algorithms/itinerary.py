"""
경로(역 ID 순서) => 노선별 구간(step) 변환

연속된 동일 노선 구간은 하나의 step으로 합치고,
노선이 바뀌는 지점이 곧 환승 지점
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from metro_routing.core.config import UNKNOWN_LINE
from metro_routing.core.exceptions import EmptyRouteException
from metro_routing.models.domain import ItineraryStep, Line, Station

logger = logging.getLogger(__name__)


def common_line(a: Station, b: Station) -> str:
    """a의 노선 순서 기준으로 b와 공유하는 첫 노선, 없으면 UNKNOWN_LINE"""
    b_lines = set(b.lines)
    for line_id in a.lines:
        if line_id in b_lines:
            return line_id
    return UNKNOWN_LINE


def label_hops(
    path: Sequence[str],
    stations: Dict[str, Station],
    edge_lines: Optional[Sequence[str]] = None,
) -> List[str]:
    """
    경로의 각 구간(hop)에 사용된 노선 결정

    edge_lines가 주어지면 그래프 간선의 노선을 그대로 사용하고,
    없으면 두 역의 소속 노선 교집합으로 추정
    """
    if edge_lines is not None:
        if len(edge_lines) != len(path) - 1:
            raise ValueError(
                f"edge_lines 길이 불일치: {len(edge_lines)} != {len(path) - 1}"
            )
        return list(edge_lines)

    return [common_line(stations[a], stations[b]) for a, b in zip(path, path[1:])]


def build_itinerary(
    path: Sequence[str],
    stations: Dict[str, Station],
    lines: Optional[Dict[str, Line]] = None,
    edge_lines: Optional[Sequence[str]] = None,
) -> List[ItineraryStep]:
    """
    경로를 노선별 step 목록으로 변환

    Args:
        path: 역 ID 순서 (출발 ~ 도착)
        stations: {station_id: Station}
        lines: {line_id: Line} => step에 노선 이름 표시용 (선택)
        edge_lines: 탐색 결과의 간선 노선 (주어지면 교집합 추정 대신 사용)

    Returns:
        ItineraryStep 리스트 (출발역 == 도착역이면 빈 리스트)

    Raises:
        EmptyRouteException: 빈 경로
    """
    if not path:
        raise EmptyRouteException()

    hop_lines = label_hops(path, stations, edge_lines)

    steps: List[ItineraryStep] = []
    current: Optional[ItineraryStep] = None

    for i, line_id in enumerate(hop_lines):
        to_name = stations[path[i + 1]].name

        if current is not None and current.line_id == line_id:
            current.to_name = to_name
            current.station_count += 1
            continue

        if current is not None:
            steps.append(current)

        current = ItineraryStep(
            line_id=line_id,
            from_name=stations[path[i]].name,
            to_name=to_name,
            station_count=2,
            line_name=_line_name(line_id, lines),
        )

    if current is not None:
        steps.append(current)

    logger.debug(f"경로 {len(path)}개 역 => {len(steps)}개 구간")
    return steps


def count_transfers(steps: Sequence[ItineraryStep]) -> int:
    """step 경계 수 = 노선 전환 횟수 (unknown 구간 경계 포함)"""
    return max(len(steps) - 1, 0)


def transfer_points(
    path: Sequence[str], hop_lines: Sequence[str]
) -> List[Tuple[str, str, str]]:
    """노선이 바뀌는 역 목록 => [(station_id, from_line, to_line), ...]"""
    points = []
    for i in range(1, len(hop_lines)):
        if hop_lines[i] != hop_lines[i - 1]:
            points.append((path[i], hop_lines[i - 1], hop_lines[i]))
    return points


def _line_name(line_id: str, lines: Optional[Dict[str, Line]]) -> Optional[str]:
    if line_id == UNKNOWN_LINE:
        return "노선 정보 없음"
    if lines and line_id in lines:
        return lines[line_id].name
    return line_id
