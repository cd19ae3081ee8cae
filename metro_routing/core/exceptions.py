# custom exception 정의 및 관리


class MetroRoutingException(Exception):  # 예외 구조 정의
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# 경로 없음 => 실패가 아닌 "경로 정보"로 취급 (연결되지 않은 구간)
class RouteNotFoundException(MetroRoutingException):
    def __init__(self, message: str = "경로를 찾을 수 없습니다"):
        super().__init__(message, code="ROUTE_NOT_FOUND")


# 호출자 오용 (빈 ID, 데이터에 없는 ID 등) => 경로 없음과 구분
class InvalidRequestException(MetroRoutingException):
    def __init__(
        self, message: str = "유효하지 않은 요청입니다", code: str = "INVALID_REQUEST"
    ):
        super().__init__(message, code=code)


class StationNotFoundException(InvalidRequestException):
    def __init__(self, message: str = "역을 찾을 수 없습니다"):
        super().__init__(message, code="STATION_NOT_FOUND")


class EmptyRouteException(MetroRoutingException):
    def __init__(self, message: str = "빈 경로입니다"):
        super().__init__(message, code="EMPTY_ROUTE")


class SearchTimeoutException(MetroRoutingException):
    def __init__(self, message: str = "경로 탐색 시간이 초과되었습니다"):
        super().__init__(message, code="SEARCH_TIMEOUT")


class InvalidLocationException(MetroRoutingException):
    def __init__(self, message: str = "유효하지 않은 위치입니다"):
        super().__init__(message, code="INVALID_LOCATION")


class InvalidNetworkDataException(MetroRoutingException):
    def __init__(self, message: str = "노선 데이터 형식이 올바르지 않습니다"):
        super().__init__(message, code="INVALID_NETWORK_DATA")
