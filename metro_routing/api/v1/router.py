"""API v1 main router
모든 엔드포인트를 통합하여 하나의 API 라우터로 제공
"""

from fastapi import APIRouter
from metro_routing.api.v1.endpoints import network, routes, stations

# API v1 main router
api_router = APIRouter()

# 각 엔드 포인트 라우터 통합
api_router.include_router(routes.router, prefix="/routes", tags=["routes"])

api_router.include_router(stations.router, prefix="/stations", tags=["stations"])

api_router.include_router(network.router, prefix="/network", tags=["network"])
