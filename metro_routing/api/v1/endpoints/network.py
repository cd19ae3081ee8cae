"""
노선망 상태 조회 및 재로딩 엔드포인트
"""

from fastapi import APIRouter, HTTPException
import logging

from metro_routing.core.exceptions import InvalidNetworkDataException
from metro_routing.models.responses import ErrorResponse, NetworkSummaryResponse
from metro_routing.store.cache import NetworkSnapshot, get_snapshot, reload_cache

router = APIRouter()
logger = logging.getLogger(__name__)


def _summary(snapshot: NetworkSnapshot) -> dict:
    return {
        "stations": len(snapshot.stations),
        "lines": len(snapshot.lines),
        "graph_nodes": len(snapshot.graph),
        "source": snapshot.source,
        "loaded_at": snapshot.loaded_at.isoformat(),
        "build_report": snapshot.report.to_dict(),
    }


@router.get("/summary", response_model=NetworkSummaryResponse)
async def network_summary():
    """현재 노선망 snapshot 요약 + 그래프 생성 리포트 (제외된 구간 수)"""
    return _summary(get_snapshot())


@router.post("/reload", response_model=NetworkSummaryResponse)
async def reload_network():
    """
    노선망 재로딩 (설정된 STATIONS_FILE / LINES_FILE만 사용)

    새 그래프를 만든 뒤 교체하므로 진행 중인 탐색에는 영향 없음
    """
    try:
        snapshot = reload_cache()
    except FileNotFoundError as e:
        logger.error(f"노선망 재로딩 실패: {e}")
        raise HTTPException(
            status_code=404,
            detail=ErrorResponse(
                message="노선 데이터 파일을 찾을 수 없습니다", code="DATA_NOT_FOUND"
            ).model_dump(),
        )
    except InvalidNetworkDataException as e:
        logger.error(f"노선망 재로딩 실패: {e.message}")
        raise HTTPException(
            status_code=400,
            detail=ErrorResponse(message=e.message, code=e.code).model_dump(),
        )

    return _summary(snapshot)
