"""
RoutingService 테스트
"""

import pytest

from metro_routing.core.config import settings
from metro_routing.core.exceptions import (
    InvalidRequestException,
    RouteNotFoundException,
    SearchTimeoutException,
    StationNotFoundException,
)
from metro_routing.services.routing_service import RoutingService
from metro_routing.store.cache import build_snapshot, reload_cache


class TestRoutingService:
    """RoutingService 테스트 클래스"""

    @pytest.fixture
    def service(self, loaded_cache):
        """캐시 snapshot을 사용하는 RoutingService 인스턴스"""
        return RoutingService()

    def test_single_line_route(self, service):
        """jabaquara → tucuruvi => L1 한 구간, 환승 없음"""
        result = service.calculate_route("jabaquara", "tucuruvi")

        assert result["path"] == ["jabaquara", "se", "luz", "tucuruvi"]
        assert result["path_names"] == ["Jabaquara", "Sé", "Luz", "Tucuruvi"]
        assert len(result["steps"]) == 1
        assert result["steps"][0]["line_id"] == "L1"
        assert result["steps"][0]["station_count"] == 4
        assert result["transfers"] == 0
        assert result["transfer_stations"] == []
        assert result["total_distance_m"] > 0

    def test_transfer_route(self, service):
        """L1 → L11 => luz에서 환승 1회"""
        result = service.calculate_route("jabaquara", "tatuape")

        assert "luz" in result["path"]
        assert [s["line_id"] for s in result["steps"]] == ["L1", "L11"]
        assert result["transfers"] == 1
        assert result["transfer_stations"] == ["luz"]
        assert result["transfer_info"] == [("luz", "L1", "L11")]
        assert result["line_attribution"] == "membership"

    def test_same_origin_and_destination(self, service):
        result = service.calculate_route("luz", "luz")

        assert result["path"] == ["luz"]
        assert result["total_distance_m"] == 0.0
        assert result["steps"] == []
        assert result["transfers"] == 0

    def test_unknown_destination_is_invalid_request(self, service):
        """데이터에 없는 ID => 경로 없음이 아닌 요청 오류"""
        with pytest.raises(InvalidRequestException) as exc_info:
            service.calculate_route("se", "nowhere")

        assert exc_info.value.code == "STATION_NOT_FOUND"
        assert "도착역" in exc_info.value.message
        assert isinstance(exc_info.value, StationNotFoundException)

    def test_unknown_origin(self, service):
        with pytest.raises(StationNotFoundException) as exc_info:
            service.calculate_route("nowhere", "se")

        assert "출발역" in exc_info.value.message

    @pytest.mark.parametrize("origin", ["", "   ", None])
    def test_blank_origin(self, service, origin):
        with pytest.raises(InvalidRequestException) as exc_info:
            service.calculate_route(origin, "se")

        assert exc_info.value.code == "INVALID_REQUEST"

    def test_disconnected_components(self, service):
        """다른 연결 요소 => RouteNotFoundException"""
        with pytest.raises(RouteNotFoundException) as exc_info:
            service.calculate_route("se", "x1")

        assert exc_info.value.code == "ROUTE_NOT_FOUND"

    def test_station_not_in_graph(self, service):
        """역 데이터에는 있지만 좌표가 없어 그래프에 없는 역"""
        with pytest.raises(RouteNotFoundException) as exc_info:
            service.calculate_route("se", "sem-coords")

        assert "연결되어 있지 않습니다" in exc_info.value.message

    def test_use_edge_lines(self, service):
        result = service.calculate_route("jabaquara", "tatuape", use_edge_lines=True)

        assert [s["line_id"] for s in result["steps"]] == ["L1", "L11"]
        assert result["line_attribution"] == "edge"

    def test_edge_lines_differ_from_membership(self, sp_station_records):
        """간선은 L3로 태깅됐지만 두 역 모두 L1 소속 => 방식에 따라 결과가 다름"""
        from metro_routing.store.loader import parse_lines, parse_stations

        snapshot = build_snapshot(
            parse_stations(sp_station_records),
            parse_lines([{"id": "L3", "stations": ["se", "luz"]}]),
            "memory",
        )
        service = RoutingService(snapshot=snapshot)

        membership = service.calculate_route("se", "luz")
        edge = service.calculate_route("se", "luz", use_edge_lines=True)

        assert membership["steps"][0]["line_id"] == "L1"
        assert edge["steps"][0]["line_id"] == "L3"

    def test_search_bound_exceeded(self, service, mocker):
        mocker.patch.object(settings, "SEARCH_MAX_ITERATIONS", 1)

        with pytest.raises(SearchTimeoutException):
            service.calculate_route("jabaquara", "tatuape")

    def test_uses_reloaded_snapshot(self, service, sp_station_records, sp_line_records):
        """재로딩 이후 요청은 새 snapshot 사용"""
        reload_cache(stations=sp_station_records, lines=sp_line_records)

        with pytest.raises(StationNotFoundException):
            service.calculate_route("jabaquara", "tatuape")

    def test_metrics_logged(self, service, caplog):
        with caplog.at_level("INFO"):
            service.calculate_route("jabaquara", "tucuruvi")

        assert any("METRICS:" in r.message for r in caplog.records)

    def test_metrics_disabled(self, service, caplog, mocker):
        mocker.patch.object(settings, "ENABLE_ROUTE_METRICS", False)

        with caplog.at_level("INFO"):
            service.calculate_route("jabaquara", "tucuruvi")

        assert not any("METRICS:" in r.message for r in caplog.records)
