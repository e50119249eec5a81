"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Pre-configured HTTPException subclasses so services can raise the
not-found and integrity failures without repeating status codes.

Usage:
    from campus_api.utils.exceptions import NotFoundError, IntegrityViolationError
    raise NotFoundError("Department not found")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when an identifier does not resolve to an existing record.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class IntegrityViolationError(HTTPException):
    """409 Conflict 예외 — 외래 키 제약 위반 시 사용.

    409 Conflict exception.
    Raised when the database rejects a write because of a foreign-key
    constraint: a child pointing at a missing parent, or deleting a parent
    that still has children.

    Args:
        detail: 오류 메시지 (Error message, default: "Referential integrity violation")
    """

    def __init__(self, detail: str = "Referential integrity violation") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)
