"""
Pytest 설정 및 공통 Fixture
"""

import os
import pytest
import sys
from pathlib import Path

# 테스트 모드 환경 변수 설정 (모듈 임포트 전에 설정해야 함)
os.environ['TESTING'] = 'true'
# 로컬 data/ 파일 대신 항상 내장 샘플 노선망 사용
os.environ.setdefault('STATIONS_FILE', '__missing__/stations.json')
os.environ.setdefault('LINES_FILE', '__missing__/lines.json')

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from metro_routing.store import cache as cache_module  # noqa: E402
from metro_routing.store.loader import parse_lines, parse_stations  # noqa: E402
from metro_routing.algorithms.graph_builder import build_graph  # noqa: E402


@pytest.fixture(autouse=True)
def reset_cache():
    """테스트마다 싱글톤 캐시 초기화"""
    cache_module.clear_cache()
    yield
    cache_module.clear_cache()


@pytest.fixture
def sp_station_records():
    """테스트용 샘플 역 데이터 (상파울루)"""
    return [
        {"id": "se", "name": "Sé", "coords": [-23.55, -46.63], "lines": ["L1", "L3"]},
        {"id": "luz", "name": "Luz", "coords": [-23.5343, -46.6345], "lines": ["L1", "L7", "L11", "L4"]},
        {"id": "jabaquara", "name": "Jabaquara", "coords": [-23.65, -46.64], "lines": ["L1"]},
        {"id": "tucuruvi", "name": "Tucuruvi", "coords": [-23.48, -46.60], "lines": ["L1"]},
    ]


@pytest.fixture
def sp_line_records():
    return [
        {"id": "L1", "name": "Linha 1 - Azul", "color": "#0056d6", "stations": ["jabaquara", "se", "luz", "tucuruvi"]},
    ]


@pytest.fixture
def transfer_station_records(sp_station_records):
    """L1 + L11 => luz에서만 만나는 노선망, 별도 연결 요소(x1, x2) 포함"""
    return sp_station_records + [
        {"id": "bras", "name": "Brás", "coords": [-23.5452, -46.6161], "lines": ["L11"]},
        {"id": "tatuape", "name": "Tatuapé", "coords": [-23.5402, -46.5764], "lines": ["L11"]},
        {"id": "x1", "name": "Ilha 1", "coords": [-23.60, -46.70], "lines": ["LX"]},
        {"id": "x2", "name": "Ilha 2", "coords": [-23.61, -46.71], "lines": ["LX"]},
        {"id": "sem-coords", "name": "Sem Coordenadas", "lines": ["L11"]},
    ]


@pytest.fixture
def transfer_line_records(sp_line_records):
    return sp_line_records + [
        {"id": "L11", "name": "Linha 11 - Coral", "color": "#ff7f00", "stations": ["luz", "bras", "tatuape", "sem-coords"]},
        {"id": "LX", "name": "Linha X", "stations": ["x1", "x2"]},
    ]


@pytest.fixture
def sp_stations(sp_station_records):
    return parse_stations(sp_station_records)


@pytest.fixture
def sp_lines(sp_line_records):
    return parse_lines(sp_line_records)


@pytest.fixture
def transfer_stations(transfer_station_records):
    return parse_stations(transfer_station_records)


@pytest.fixture
def transfer_lines(transfer_line_records):
    return parse_lines(transfer_line_records)


@pytest.fixture
def transfer_graph(transfer_stations, transfer_lines):
    return build_graph(transfer_lines, transfer_stations).graph


@pytest.fixture
def mesh_station_records():
    """여러 대안 경로가 있는 격자형 노선망 (최적성 검증용)"""
    return [
        {"id": "a", "name": "A", "coords": [-23.50, -46.60], "lines": ["M1", "M2"]},
        {"id": "b", "name": "B", "coords": [-23.52, -46.62], "lines": ["M1", "M3"]},
        {"id": "c", "name": "C", "coords": [-23.54, -46.60], "lines": ["M2", "M3"]},
        {"id": "d", "name": "D", "coords": [-23.52, -46.58], "lines": ["M2", "M4"]},
        {"id": "e", "name": "E", "coords": [-23.56, -46.62], "lines": ["M1", "M4"]},
        {"id": "f", "name": "F", "coords": [-23.58, -46.60], "lines": ["M1", "M2"]},
    ]


@pytest.fixture
def mesh_line_records():
    return [
        {"id": "M1", "name": "Mesh 1", "stations": ["a", "b", "e", "f"]},
        {"id": "M2", "name": "Mesh 2", "stations": ["a", "d", "c", "f"]},
        {"id": "M3", "name": "Mesh 3", "stations": ["b", "c"]},
        {"id": "M4", "name": "Mesh 4", "stations": ["d", "e"]},
    ]


@pytest.fixture
def mesh_graph(mesh_station_records, mesh_line_records):
    return build_graph(
        parse_lines(mesh_line_records), parse_stations(mesh_station_records)
    ).graph


@pytest.fixture
def loaded_cache(transfer_station_records, transfer_line_records):
    """L1 + L11 노선망으로 캐시 초기화"""
    return cache_module.initialize_cache(
        stations=transfer_station_records, lines=transfer_line_records
    )
