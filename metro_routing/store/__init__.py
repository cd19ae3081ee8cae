"""
노선망 데이터 로드 및 메모리 캐시
"""

from metro_routing.store.cache import (
    NetworkSnapshot,
    initialize_cache,
    reload_cache,
    clear_cache,
    get_snapshot,
)
from metro_routing.store.loader import load_network, parse_stations, parse_lines

__all__ = [
    "NetworkSnapshot",
    "initialize_cache",
    "reload_cache",
    "clear_cache",
    "get_snapshot",
    "load_network",
    "parse_stations",
    "parse_lines",
]
