# 노선 데이터 => 거리 가중치 무방향 그래프

import logging
from typing import Dict, Iterable

from metro_routing.algorithms.distance_calculator import haversine
from metro_routing.models.domain import (
    Edge,
    Graph,
    GraphBuildReport,
    GraphBuildResult,
    Line,
    SkippedPair,
    Station,
)

logger = logging.getLogger(__name__)


def build_graph(lines: Iterable[Line], stations: Dict[str, Station]) -> GraphBuildResult:
    """
    노선별 연속된 역 쌍마다 양방향 간선 생성

    역 정보가 없거나 좌표가 없는 역이 포함된 쌍은 에러 없이 건너뛰고
    report에 집계만 함 (부분/불완전 데이터 허용 정책)

    Args:
        lines: 노선 목록 (stations 순서 = 정차 순서)
        stations: {station_id: Station}

    Returns:
        GraphBuildResult(graph, report)
    """
    graph: Graph = {}
    report = GraphBuildReport()

    for line in lines:
        report.lines_processed += 1
        seq = line.stations

        for a, b in zip(seq, seq[1:]):
            sa = stations.get(a)
            sb = stations.get(b)

            if sa is None or sb is None:
                report.skipped_missing_station += 1
                report.skipped_pairs.append(
                    SkippedPair(line.id, a, b, "missing_station")
                )
                logger.debug(f"구간 건너뜀 (역 없음): {line.id} {a} → {b}")
                continue

            if not sa.has_coords or not sb.has_coords:
                report.skipped_missing_coords += 1
                report.skipped_pairs.append(
                    SkippedPair(line.id, a, b, "missing_coords")
                )
                logger.debug(f"구간 건너뜀 (좌표 없음): {line.id} {a} → {b}")
                continue

            dist = haversine(sa.coords, sb.coords)

            # undirected
            graph.setdefault(a, []).append(Edge(to=b, weight=dist, line_id=line.id))
            graph.setdefault(b, []).append(Edge(to=a, weight=dist, line_id=line.id))
            report.edges_created += 2

    if report.skipped_total:
        logger.warning(
            f"그래프 생성 중 {report.skipped_total}개 구간 제외 "
            f"(역 없음={report.skipped_missing_station}, "
            f"좌표 없음={report.skipped_missing_coords})"
        )

    logger.info(
        f"그래프 생성 완료: 노선 {report.lines_processed}개, "
        f"역 {len(graph)}개, 간선 {report.edges_created}개"
    )
    return GraphBuildResult(graph=graph, report=report)
