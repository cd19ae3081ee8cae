from typing import List, Optional, Tuple, Dict
from pydantic import BaseModel, Field

# service 별 응답 구조 정의


# 노선별 구간
class ItineraryStepResponse(BaseModel):
    line_id: str = Field(..., description="노선 ID (공통 노선이 없으면 unknown)")
    line_name: Optional[str] = Field(None, description="노선 이름")
    from_name: str = Field(..., description="구간 첫 역 이름")
    to_name: str = Field(..., description="구간 마지막 역 이름")
    station_count: int = Field(..., description="구간 내 역 수")


# 경로 계산 응답
class RouteResponse(BaseModel):
    origin: str = Field(..., description="출발역 ID")
    origin_name: str = Field(..., description="출발역 이름")
    destination: str = Field(..., description="도착역 ID")
    destination_name: str = Field(..., description="도착역 이름")
    path: List[str] = Field(..., description="역 ID 순서")
    path_names: List[str] = Field(..., description="역 이름 순서")
    total_distance_m: float = Field(..., description="총 거리 (미터)")
    steps: List[ItineraryStepResponse] = Field(..., description="노선별 구간")
    transfers: int = Field(..., description="환승 횟수")
    transfer_stations: List[str] = Field(..., description="환승역 ID 리스트")
    transfer_info: List[Tuple[str, str, str]] = Field(
        ..., description="환승 상세 정보 (역, 이전 노선, 다음 노선)"
    )
    line_attribution: str = Field(..., description="구간 노선 결정 방식 (membership/edge)")


# 에러 응답 (HTTPException detail)
class ErrorResponse(BaseModel):
    message: str = Field(..., description="에러 메시지")
    code: Optional[str] = Field(None, description="에러 코드")


class StationResponse(BaseModel):
    id: str = Field(..., description="역 ID")
    name: str = Field(..., description="역 이름")
    coords: Optional[Tuple[float, float]] = Field(None, description="(위도, 경도)")
    lines: List[str] = Field(default_factory=list, description="소속 노선 ID")
    routable: bool = Field(..., description="그래프에 연결된 역 여부")


# 역 검색 응답
class StationSearchResponse(BaseModel):
    keyword: str = Field(..., description="검색 키워드")
    count: int = Field(..., description="검색 결과 수")
    results: List[StationResponse] = Field(default_factory=list, description="역 정보 리스트")


class NearestStationResponse(BaseModel):
    station: StationResponse
    distance_m: float = Field(..., description="현재 위치에서 역까지 거리 (미터)")


class NetworkSummaryResponse(BaseModel):
    stations: int = Field(..., description="역 수")
    lines: int = Field(..., description="노선 수")
    graph_nodes: int = Field(..., description="그래프에 포함된 역 수")
    source: str = Field(..., description="데이터 출처 (file/sample/memory)")
    loaded_at: str = Field(..., description="로드 시각 (ISO 8601)")
    build_report: Dict = Field(..., description="그래프 생성 리포트")
