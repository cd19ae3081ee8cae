"""
metro_routing - 지하철/철도 노선망 최단 경로 탐색 엔진
"""

__version__ = "1.0.0"
