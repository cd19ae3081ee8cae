"""
stations.json / lines.json 로드 및 정규화

기대 형식:
    stations.json -> [{"id": "se", "name": "Sé", "coords": [-23.55, -46.63], "lines": ["linha-1-azul", ...]}, ...]
    lines.json    -> [{"id": "linha-1-azul", "name": "Linha 1 - Azul", "color": "#0056d6", "stations": ["jabaquara", ...]}, ...]
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

from metro_routing.core.exceptions import InvalidNetworkDataException
from metro_routing.models.domain import Line, Station
from metro_routing.store.sample_data import SAMPLE_LINES, SAMPLE_STATIONS

logger = logging.getLogger(__name__)


def parse_stations(records: Any) -> Dict[str, Station]:
    """역 레코드 정규화 => {station_id: Station} (구조 검증만 수행)"""
    if not isinstance(records, list):
        raise InvalidNetworkDataException("역 데이터는 배열이어야 합니다")

    stations: Dict[str, Station] = {}
    for index, record in enumerate(records):
        if not isinstance(record, dict) or not record.get("id"):
            raise InvalidNetworkDataException(f"id가 없는 역 레코드: index={index}")

        line_ids = record.get("lines") or []
        if not isinstance(line_ids, list):
            raise InvalidNetworkDataException(
                f"역 소속 노선은 배열이어야 합니다: index={index}"
            )

        station_id = str(record["id"])
        if station_id in stations:
            logger.warning(f"중복 역 ID, 마지막 레코드 사용: {station_id}")

        stations[station_id] = Station(
            id=station_id,
            name=record.get("name") or station_id,
            coords=_parse_coords(record.get("coords"), station_id),
            lines=tuple(str(line_id) for line_id in line_ids),
        )

    return stations


def parse_lines(records: Any) -> List[Line]:
    """노선 레코드 정규화 => [Line, ...] (입력 순서 유지)"""
    if not isinstance(records, list):
        raise InvalidNetworkDataException("노선 데이터는 배열이어야 합니다")

    lines: List[Line] = []
    for index, record in enumerate(records):
        if not isinstance(record, dict) or not record.get("id"):
            raise InvalidNetworkDataException(f"id가 없는 노선 레코드: index={index}")

        seq = record.get("stations") or []
        if not isinstance(seq, list):
            raise InvalidNetworkDataException(
                f"노선 역 목록은 배열이어야 합니다: index={index}"
            )

        line_id = str(record["id"])
        lines.append(
            Line(
                id=line_id,
                name=record.get("name") or line_id,
                stations=tuple(str(s) for s in seq),
                color=record.get("color"),
            )
        )

    return lines


def load_json(path: Path, fallback: Any = None) -> Tuple[Any, bool]:
    """
    JSON 파일 로드, 파일이 없으면 fallback 반환

    Returns:
        (data, fallback 사용 여부)
    """
    if not path.exists():
        if fallback is None:
            raise FileNotFoundError(f"데이터 파일 없음: {path}")
        logger.warning(f"데이터 파일 없음, 샘플 데이터 사용: {path}")
        return fallback, True

    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f), False
    except json.JSONDecodeError as e:
        raise InvalidNetworkDataException(f"JSON 파싱 실패: {path} ({e})")


def load_network(
    stations_path: str, lines_path: str, use_fallback: bool = True
) -> Tuple[Dict[str, Station], List[Line], str]:
    """
    역/노선 데이터 로드

    Args:
        stations_path: stations.json 경로
        lines_path: lines.json 경로
        use_fallback: 파일이 없을 때 내장 샘플 노선망 사용 여부

    Returns:
        (stations, lines, source) => source: "file" | "sample"

    Raises:
        FileNotFoundError: 파일이 없고 fallback 비활성화
        InvalidNetworkDataException: 구조가 올바르지 않음
    """
    raw_stations, stations_fallback = load_json(
        Path(stations_path), SAMPLE_STATIONS if use_fallback else None
    )
    raw_lines, lines_fallback = load_json(
        Path(lines_path), SAMPLE_LINES if use_fallback else None
    )

    stations = parse_stations(raw_stations)
    lines = parse_lines(raw_lines)

    source = "sample" if (stations_fallback or lines_fallback) else "file"
    logger.info(
        f"역 {len(stations)}개, 노선 {len(lines)}개 로드 완료 (source={source})"
    )
    return stations, lines, source


def _parse_coords(value: Any, station_id: str):
    if value is None:
        return None
    try:
        lat, lon = value
        return (float(lat), float(lon))
    except (TypeError, ValueError):
        raise InvalidNetworkDataException(
            f"좌표 형식이 올바르지 않습니다: {station_id}"
        )
