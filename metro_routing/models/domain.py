from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, field

# domain 정의
# 로드 이후 라우팅 세션 동안 불변 => frozen


@dataclass(frozen=True)
class Station:
    id: str  # 내부 연산은 id로 통일
    name: str
    coords: Optional[Tuple[float, float]] = None  # (lat, lon)
    lines: Tuple[str, ...] = ()

    @property
    def has_coords(self) -> bool:
        """좌표가 없는 역은 경로 탐색에 사용할 수 없음"""
        return self.coords is not None


@dataclass(frozen=True)
class Line:
    id: str
    name: str
    stations: Tuple[str, ...] = ()
    color: Optional[str] = None  # 표시용, 엔진에서는 사용하지 않음


@dataclass(frozen=True, slots=True)
class Edge:
    to: str
    weight: float  # meters
    line_id: str


# {station_id: [Edge, ...]}
Graph = Dict[str, List[Edge]]


@dataclass
class SkippedPair:
    line_id: str
    from_id: str
    to_id: str
    reason: str  # "missing_station" | "missing_coords"


@dataclass
class GraphBuildReport:
    lines_processed: int = 0
    edges_created: int = 0  # 방향 간선 기준 (A→B, B→A 각각 1)
    skipped_missing_station: int = 0
    skipped_missing_coords: int = 0
    skipped_pairs: List[SkippedPair] = field(default_factory=list)

    @property
    def skipped_total(self) -> int:
        return self.skipped_missing_station + self.skipped_missing_coords

    def to_dict(self) -> Dict:
        return {
            "lines_processed": self.lines_processed,
            "edges_created": self.edges_created,
            "skipped_missing_station": self.skipped_missing_station,
            "skipped_missing_coords": self.skipped_missing_coords,
            "skipped_total": self.skipped_total,
        }


@dataclass
class GraphBuildResult:
    graph: Graph
    report: GraphBuildReport


@dataclass
class ShortestPath:
    stations: List[str]
    distance: float  # meters
    # edge_lines[i] => stations[i] -> stations[i+1] 간선의 노선
    edge_lines: List[str] = field(default_factory=list)


@dataclass
class ItineraryStep:
    line_id: str  # 공통 노선이 없으면 UNKNOWN_LINE
    from_name: str
    to_name: str
    station_count: int
    line_name: Optional[str] = None
