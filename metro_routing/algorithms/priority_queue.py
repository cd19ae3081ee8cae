import heapq
import itertools
from typing import Any, List, Optional, Tuple


class MinPriorityQueue:
    """
    binary heap 기반 최소 우선순위 큐

    decrease-key를 지원하지 않음 => 더 작은 우선순위로 재삽입하고
    pop 시점에 visited set으로 오래된 항목을 버리는 방식(lazy deletion)
    """

    def __init__(self):
        # (priority, seq, value) => seq로 동일 우선순위 비교 시 value 비교 방지
        self._heap: List[Tuple[float, int, Any]] = []
        self._counter = itertools.count()

    def push(self, value: Any, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), value))

    def pop(self) -> Optional[Any]:
        """최소 우선순위 값 반환, 비어 있으면 None"""
        if not self._heap:
            return None
        _, _, value = heapq.heappop(self._heap)
        return value

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
