"""생성 일시 발급 유틸리티.

Creation timestamp utility.
List endpoints order rows by ``created_at``; two rows inserted within the
same clock tick would otherwise tie. ``creation_timestamp`` hands out UTC
timestamps that strictly increase within the process, so creation order
is also timestamp order.
"""

import threading
from datetime import datetime, timedelta, timezone

_lock = threading.Lock()
_last_issued: datetime | None = None

# DB 타임스탬프 정밀도 (PostgreSQL/SQLite 모두 마이크로초)
_RESOLUTION = timedelta(microseconds=1)


def creation_timestamp() -> datetime:
    """직전 발급값보다 항상 큰 UTC 현재 시각을 반환합니다.

    Return the current UTC time, bumped by one microsecond past the
    previously issued value if the clock has not moved (or went backwards).

    Returns:
        datetime: 시간대 정보가 있는 UTC 시각 (Timezone-aware UTC timestamp)
    """
    global _last_issued
    with _lock:
        now = datetime.now(timezone.utc)
        if _last_issued is not None and now <= _last_issued:
            now = _last_issued + _RESOLUTION
        _last_issued = now
        return now
