import os
from dotenv import load_dotenv

load_dotenv()  # 환경변수 읽어오기


class Settings:
    PROJECT_NAME: str = "Metro Routing Backend"
    VERSION: str = "1.0.0"

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    PORT: int = int(os.getenv("PORT", 8000))

    # 역/노선 원본 데이터 (JSON 배열)
    STATIONS_FILE: str = os.getenv("STATIONS_FILE", "data/stations.json")
    LINES_FILE: str = os.getenv("LINES_FILE", "data/lines.json")

    # 파일이 없을 경우 내장 샘플 노선망 사용 여부
    USE_SAMPLE_NETWORK_FALLBACK: bool = (
        os.getenv("USE_SAMPLE_NETWORK_FALLBACK", "true").lower() == "true"
    )

    # 탐색 제한 (0 => 제한 없음)
    SEARCH_MAX_ITERATIONS: int = int(os.getenv("SEARCH_MAX_ITERATIONS", 0))
    SEARCH_TIMEOUT_MS: int = int(os.getenv("SEARCH_TIMEOUT_MS", 0))

    # 경로 계산 메트릭 로깅 활성화 플래그
    ENABLE_ROUTE_METRICS: bool = (
        os.getenv("ENABLE_ROUTE_METRICS", "true").lower() == "true"
    )

    ENABLE_PERFORMANCE_MONITORING: bool = (
        os.getenv("ENABLE_PERFORMANCE_MONITORING", "true").lower() == "true"
    )
    SLOW_REQUEST_THRESHOLD_MS: int = int(os.getenv("SLOW_REQUEST_THRESHOLD_MS", 500))

    # CORS 설정
    ALLOWED_ORIGINS: list[str] = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000",
    ).split(",")


settings = Settings()  # 모듈화


# 공통 선분이 없는 구간의 노선 표기
UNKNOWN_LINE = "unknown"

EARTH_RADIUS_M = 6371000  # meters

# 지도 범위 (상파울루 광역권 대략)
MAP_BOUNDS = {
    "lat_min": -23.9,
    "lat_max": -23.15,
    "lon_min": -46.95,
    "lon_max": -46.2,
}
DEFAULT_CENTER = (-23.5505, -46.6333)
