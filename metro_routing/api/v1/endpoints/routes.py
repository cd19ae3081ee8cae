"""
REST API 경로 계산 엔드포인트
"""

from fastapi import APIRouter, HTTPException, Depends
import logging

from metro_routing.api.deps import get_routing_service
from metro_routing.core.exceptions import (
    MetroRoutingException,
    RouteNotFoundException,
    SearchTimeoutException,
)
from metro_routing.models.requests import RouteRequest
from metro_routing.models.responses import ErrorResponse, RouteResponse
from metro_routing.services.routing_service import RoutingService


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/calculate", response_model=RouteResponse)
async def calculate_route(
    request: RouteRequest,
    service: RoutingService = Depends(get_routing_service),
):
    """
    최단 경로 계산 (REST API)

    - **origin**: 출발역 ID
    - **destination**: 도착역 ID
    - **use_edge_lines**: 그래프 간선 노선 기준 구간 분할 여부

    응답 코드:
    - 400: 잘못된 요청 (빈 ID, 존재하지 않는 역)
    - 404: 경로 없음 (연결되지 않은 역)
    - 504: 탐색 시간 초과

    Example:
        POST /v1/routes/calculate
        {
            "origin": "jabaquara",
            "destination": "tucuruvi"
        }
    """
    try:
        logger.info(f"REST 경로 계산: {request.origin} → {request.destination}")

        return service.calculate_route(
            origin_id=request.origin,
            destination_id=request.destination,
            use_edge_lines=request.use_edge_lines,
        )

    except RouteNotFoundException as e:
        # 경로 없음은 오류가 아닌 경로 정보
        raise HTTPException(
            status_code=404,
            detail=ErrorResponse(message=e.message, code=e.code).model_dump(),
        )
    except SearchTimeoutException as e:
        logger.error(f"경로 탐색 시간 초과: {e.message}")
        raise HTTPException(
            status_code=504,
            detail=ErrorResponse(message=e.message, code=e.code).model_dump(),
        )
    except MetroRoutingException as e:
        logger.error(f"경로 계산 실패: {e.message}")
        raise HTTPException(
            status_code=400,
            detail=ErrorResponse(message=e.message, code=e.code).model_dump(),
        )
