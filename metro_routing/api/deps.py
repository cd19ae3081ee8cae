from functools import lru_cache

from metro_routing.services.routing_service import RoutingService


# lru_cache 사용하여 싱글톤 패턴과 유사한 효과, 의존성 주입
# snapshot은 요청마다 캐시에서 가져오므로 재로딩 후에도 재생성 불필요
@lru_cache()
def get_routing_service() -> RoutingService:
    return RoutingService()
