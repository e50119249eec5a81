"""FastAPI 예외 핸들러 등록 모듈.

Centralized error handlers for FastAPI.
Request validation failures (body, path id, skip/take) are answered with
400 rather than FastAPI's default 422; foreign-key violations are logged
and answered with 409.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from campus_api.utils.exceptions import IntegrityViolationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """애플리케이션에 예외 핸들러를 등록합니다.

    Register the error handlers on the FastAPI application.

    Args:
        app: FastAPI 애플리케이션 인스턴스 (The FastAPI application instance)
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """입력 검증 실패 — Invalid body, path or query input."""
        errors = exc.errors()
        logger.warning(
            "Invalid input on %s %s: %d error(s)",
            request.method, request.url.path, len(errors),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(errors)},
        )

    @app.exception_handler(IntegrityViolationError)
    async def handle_integrity_violation(
        request: Request, exc: IntegrityViolationError
    ) -> Response:
        """외래 키 제약 위반 — Foreign-key constraint rejected the write."""
        logger.warning(
            "Integrity violation on %s %s: %s",
            request.method, request.url.path, exc.detail,
        )
        return await http_exception_handler(request, exc)
