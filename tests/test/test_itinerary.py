"""
노선별 구간(itinerary) 변환 테스트
"""

import pytest

from metro_routing.algorithms.dijkstra import dijkstra
from metro_routing.algorithms.itinerary import (
    build_itinerary,
    common_line,
    count_transfers,
    label_hops,
    transfer_points,
)
from metro_routing.core.config import UNKNOWN_LINE
from metro_routing.core.exceptions import EmptyRouteException
from metro_routing.models.domain import Station


class TestCommonLine:

    def test_order_follows_first_station(self):
        """교집합 순서 = 앞 역의 노선 순서"""
        a = Station("a", "A", (0.0, 0.0), ("L3", "L1"))
        b = Station("b", "B", (0.0, 0.0), ("L1", "L3"))

        assert common_line(a, b) == "L3"
        assert common_line(b, a) == "L1"

    def test_no_common_line(self):
        a = Station("a", "A", (0.0, 0.0), ("L1",))
        b = Station("b", "B", (0.0, 0.0), ("L2",))

        assert common_line(a, b) == UNKNOWN_LINE


class TestBuildItinerary:

    def test_single_line_single_step(self, sp_stations, sp_lines):
        """jabaquara → tucuruvi => L1 한 구간, 4개 역, 환승 없음"""
        path = ["jabaquara", "se", "luz", "tucuruvi"]
        lines = {line.id: line for line in sp_lines}

        steps = build_itinerary(path, sp_stations, lines)

        assert len(steps) == 1
        assert steps[0].line_id == "L1"
        assert steps[0].line_name == "Linha 1 - Azul"
        assert steps[0].from_name == "Jabaquara"
        assert steps[0].to_name == "Tucuruvi"
        assert steps[0].station_count == 4
        assert count_transfers(steps) == 0

    def test_transfer_at_shared_station(self, transfer_stations, transfer_graph):
        """L1 ↔ L11 환승 => luz에서 step 경계 1개"""
        path = dijkstra(transfer_graph, "jabaquara", "tatuape").stations

        steps = build_itinerary(path, transfer_stations)

        assert [s.line_id for s in steps] == ["L1", "L11"]
        assert steps[0].to_name == "Luz"
        assert steps[1].from_name == "Luz"
        assert [s.station_count for s in steps] == [3, 3]
        assert count_transfers(steps) == 1

    def test_empty_path_raises(self, sp_stations):
        with pytest.raises(EmptyRouteException) as exc_info:
            build_itinerary([], sp_stations)

        assert exc_info.value.code == "EMPTY_ROUTE"

    def test_single_station_path_has_no_steps(self, sp_stations):
        assert build_itinerary(["se"], sp_stations) == []

    def test_unknown_line_starts_new_step(self):
        """공통 노선이 없는 구간 => unknown step, 전후로 step 분리"""
        stations = {
            "a": Station("a", "A", (0.0, 0.0), ("L1",)),
            "b": Station("b", "B", (0.0, 0.0), ("L1",)),
            "c": Station("c", "C", (0.0, 0.0), ("L2",)),
            "d": Station("d", "D", (0.0, 0.0), ("L2",)),
        }

        steps = build_itinerary(["a", "b", "c", "d"], stations)

        assert [s.line_id for s in steps] == ["L1", UNKNOWN_LINE, "L2"]
        assert [s.station_count for s in steps] == [2, 2, 2]
        assert steps[1].from_name == "B"
        assert steps[1].to_name == "C"
        assert count_transfers(steps) == 2

    def test_edge_lines_override_membership(self, sp_stations):
        """간선 노선이 주어지면 소속 노선 교집합 대신 사용"""
        path = ["jabaquara", "se", "luz"]

        steps = build_itinerary(path, sp_stations, edge_lines=["L1", "L3"])

        assert [s.line_id for s in steps] == ["L1", "L3"]

    def test_edge_lines_length_mismatch(self, sp_stations):
        with pytest.raises(ValueError):
            build_itinerary(["jabaquara", "se"], sp_stations, edge_lines=["L1", "L1"])

    def test_step_invariants_on_mesh(self, mesh_station_records, mesh_graph):
        """step 수 <= 경로 길이 - 1, 연속 step의 노선은 항상 다름"""
        from metro_routing.store.loader import parse_stations

        stations = parse_stations(mesh_station_records)
        for start in mesh_graph:
            for target in mesh_graph:
                if start == target:
                    continue
                path = dijkstra(mesh_graph, start, target).stations
                steps = build_itinerary(path, stations)

                assert len(steps) <= len(path) - 1
                assert all(a.line_id != b.line_id for a, b in zip(steps, steps[1:]))
                assert sum(s.station_count - 1 for s in steps) == len(path) - 1

    def test_unknown_line_name(self):
        stations = {
            "a": Station("a", "A", (0.0, 0.0), ("L1",)),
            "b": Station("b", "B", (0.0, 0.0), ("L2",)),
        }

        steps = build_itinerary(["a", "b"], stations)

        assert steps[0].line_name == "노선 정보 없음"

    def test_line_name_defaults_to_id(self, sp_stations):
        steps = build_itinerary(["se", "luz"], sp_stations)

        assert steps[0].line_name == "L1"


class TestTransferPoints:

    def test_transfer_points(self):
        path = ["jabaquara", "se", "luz", "bras", "tatuape"]
        hop_lines = ["L1", "L1", "L11", "L11"]

        assert transfer_points(path, hop_lines) == [("luz", "L1", "L11")]

    def test_no_transfer(self):
        assert transfer_points(["a", "b", "c"], ["L1", "L1"]) == []

    def test_label_hops_from_membership(self, sp_stations):
        assert label_hops(["jabaquara", "se", "luz"], sp_stations) == ["L1", "L1"]
