"""
Metro Routing Backend - FastAPI Application

역/노선 데이터로 거리 가중치 그래프를 만들고
최단 경로와 노선별 구간(환승 지점)을 제공
"""

import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from metro_routing.core.config import DEFAULT_CENTER, MAP_BOUNDS, settings
from metro_routing.store.cache import initialize_cache, get_snapshot
from metro_routing.api.v1.router import api_router

# 성능 모니터링
from metro_routing.middleware.performance_monitoring import (
    PerformanceMonitoringMiddleware,
)

# 로깅 설정
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 생명주기 관리

    서버 시작 시 실행:
    - 역/노선 데이터 로드 및 그래프 생성 (파일이 없으면 샘플 노선망)
    """
    logger.info("=" * 60)
    logger.info("Metro Routing Backend 시작 중...")
    logger.info("=" * 60)

    try:
        snapshot = initialize_cache()
        if snapshot.report.skipped_total:
            logger.warning(
                f"데이터 품질: 그래프에서 제외된 구간 {snapshot.report.skipped_total}개"
            )
        logger.info("Metro Routing Backend 시작 완료!")

    except Exception as e:
        logger.error(f"❌ 초기화 실패: {e}", exc_info=True)
        raise

    # application 실행 <- yield로 제어 반환
    yield

    logger.info("Metro Routing Backend 종료")


# FastAPI 애플리케이션 생성
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    ## 노선망 최단 경로 탐색

    ### 주요 기능
    - 역 간 최단 거리 경로 (Dijkstra, 하버사인 거리 가중치)
    - 노선별 구간 분할 및 환승역 안내
    - 역 이름 검색 / 가장 가까운 역 조회
    - 노선망 재로딩 (진행 중인 탐색에 영향 없음)
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 성능 모니터링 미들웨어 추가
if settings.ENABLE_PERFORMANCE_MONITORING:
    app.add_middleware(PerformanceMonitoringMiddleware)
    logger.info("✓ 성능 모니터링 미들웨어 활성화")

# API 라우터 등록
app.include_router(api_router, prefix="/v1")


# ========== Health Check Endpoints ==========


@app.get("/")
async def root():
    """
    루트 엔드포인트

    서비스 기본 정보 반환
    """
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "docs": "/docs",
        "map": {"center": DEFAULT_CENTER, "bounds": MAP_BOUNDS},
        "endpoints": {
            "calculate_route": "POST /v1/routes/calculate",
            "list_stations": "GET /v1/stations",
            "search_stations": "GET /v1/stations/search",
            "nearest_station": "GET /v1/stations/nearest",
            "get_lines": "GET /v1/stations/lines",
            "network_summary": "GET /v1/network/summary",
            "reload_network": "POST /v1/network/reload",
        },
    }


@app.get("/health")
async def health_check():
    """
    헬스 체크 엔드포인트

    노선망 snapshot 로드 여부 및 그래프 크기 확인
    """
    try:
        snapshot = get_snapshot()
        graph_status = "healthy" if snapshot.graph else "unhealthy"
        network = {
            "stations": len(snapshot.stations),
            "graph_nodes": len(snapshot.graph),
            "source": snapshot.source,
        }
    except Exception as e:
        logger.error(f"노선망 헬스 체크 실패: {e}")
        graph_status = "unhealthy"
        network = {"error": str(e)}

    status_code = 200 if graph_status == "healthy" else 503

    return JSONResponse(
        status_code=status_code,
        content={
            "status": graph_status,
            "version": settings.VERSION,
            "timestamp": time.time(),
            "network": network,
        },
    )


# ========== Exception Handlers ==========


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """
    전역 예외 핸들러

    예상치 못한 오류 처리
    """
    logger.error(f"예상치 못한 오류: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "message": "서버 내부 오류가 발생했습니다",
            "detail": str(exc) if settings.DEBUG else "Internal Server Error",
        },
    )


# ========== Development Server ==========

if __name__ == "__main__":
    import uvicorn

    logger.info("개발 서버 시작...")

    uvicorn.run(
        "metro_routing.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
        access_log=True,
    )
