from pydantic import BaseModel, Field

# service별 requests 구조 정의


# 경로 계산 요청
class RouteRequest(BaseModel):
    origin: str = Field(..., description="출발역 ID")
    destination: str = Field(..., description="도착역 ID")
    use_edge_lines: bool = Field(
        default=False,
        description="True => 그래프 간선의 노선으로 구간 분할 (기본: 역 소속 노선 교집합)",
    )
