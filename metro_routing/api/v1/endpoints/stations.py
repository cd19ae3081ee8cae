"""
역 조회/검색 REST API 엔드포인트
"""

from fastapi import APIRouter, Query, HTTPException
import logging

from metro_routing.core.exceptions import InvalidLocationException
from metro_routing.models.domain import Station
from metro_routing.models.responses import (
    ErrorResponse,
    NearestStationResponse,
    StationResponse,
    StationSearchResponse,
)
from metro_routing.store.cache import (
    find_nearest_station,
    get_lines_dict,
    get_snapshot,
    get_station_by_id,
    list_routable_stations,
    search_stations_by_name,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_response(station: Station) -> StationResponse:
    return StationResponse(
        id=station.id,
        name=station.name,
        coords=station.coords,
        lines=list(station.lines),
        routable=get_snapshot().is_routable(station.id),
    )


@router.get("", response_model=list[StationResponse])
async def list_stations():
    """좌표가 있는 전체 역 목록 (이름순)"""
    return [_to_response(s) for s in list_routable_stations()]


@router.get("/search", response_model=StationSearchResponse)
async def search_stations(
    q: str = Query(..., description="검색 키워드", min_length=1, max_length=50),
    limit: int = Query(10, ge=1, le=50, description="최대 결과 수"),
):
    """
    역 이름 검색 (대소문자 무시, 정확 일치 > 접두사 > 부분 일치)

    Example:
        GET /v1/stations/search?q=luz&limit=5
    """
    logger.info(f"역 검색: keyword={q}, limit={limit}")
    results = search_stations_by_name(q, limit)

    return {
        "keyword": q,
        "count": len(results),
        "results": [_to_response(s) for s in results],
    }


@router.get("/nearest", response_model=NearestStationResponse)
async def nearest_station(
    lat: float = Query(..., ge=-90, le=90, description="위도"),
    lon: float = Query(..., ge=-180, le=180, description="경도"),
):
    """현재 좌표에서 가장 가까운 역"""
    try:
        station, distance = find_nearest_station(lat, lon)
    except InvalidLocationException as e:
        raise HTTPException(
            status_code=400,
            detail=ErrorResponse(message=e.message, code=e.code).model_dump(),
        )

    return {"station": _to_response(station), "distance_m": round(distance, 1)}


@router.get("/lines")
async def get_all_lines():
    """
    전체 노선 목록 조회

    Returns:
        {
            "lines": {"linha-1-azul": {"name": ..., "color": ..., "stations": [...]}, ...},
            "total_lines": 5
        }
    """
    lines = get_lines_dict()
    return {
        "lines": {
            line_id: {
                "name": line.name,
                "color": line.color,
                "stations": list(line.stations),
            }
            for line_id, line in lines.items()
        },
        "total_lines": len(lines),
    }


@router.get("/{station_id}", response_model=StationResponse)
async def get_station(station_id: str):
    station = get_station_by_id(station_id)
    if station is None:
        raise HTTPException(
            status_code=404,
            detail=ErrorResponse(
                message=f"역을 찾을 수 없습니다: {station_id}",
                code="STATION_NOT_FOUND",
            ).model_dump(),
        )
    return _to_response(station)
