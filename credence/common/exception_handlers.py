# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""全局错误处理：任何失败到 HTTP 响应的唯一出口

- AppError 体系：status_code / code / message 原样返回，details 有则带上
- 其它异常：一律 500 + INTERNAL_ERROR + 固定文案，原始信息只进日志
- 响应体里 requestId 有则带上
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Dict, Optional, Protocol

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from credence.common.errors import AppError, ValidationError, is_app_error
from credence.common.trace import get_request_id

logger = logging.getLogger(__name__)

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"
GENERIC_MESSAGE = "An unexpected error occurred."


class ErrorLogger(Protocol):
    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


def _err_payload(
    code: str,
    message: str,
    details: Any = None,
    request_id: Optional[str] = None,
) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "code": code,
        "message": message,
    }
    if details is not None:
        data["details"] = details
    if request_id:
        data["requestId"] = request_id
    return data


def _request_id_of(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None) or get_request_id()


def _safe_str(value: object) -> str:
    try:
        return str(value)
    except Exception:  # noqa: BLE001
        return f"<unprintable {type(value).__name__}>"


def _validation_details(exc: RequestValidationError) -> Any:
    try:
        return jsonable_encoder(exc.errors())
    except Exception:  # noqa: BLE001
        return None


def to_app_error(exc: BaseException) -> Optional[AppError]:
    """框架自身抛出的已知异常转成 AppError；未知异常返回 None"""
    if is_app_error(exc):
        return exc  # type: ignore[return-value]

    if isinstance(exc, RequestValidationError):
        return ValidationError("Invalid request", details=_validation_details(exc))

    if isinstance(exc, StarletteHTTPException):
        try:
            status = HTTPStatus(exc.status_code)
            code, default_message = status.name, status.phrase
        except ValueError:
            code, default_message = "HTTP_ERROR", "HTTP error"

        if isinstance(exc.detail, str):
            return AppError(message=exc.detail or default_message, code=code, status_code=exc.status_code)
        return AppError(message=default_message, code=code, status_code=exc.status_code, details=exc.detail)

    return None


class ErrorHandler:
    """把异常转成标准错误响应，日志器可注入（单测用）

    handle() 不向外抛异常：转换过程本身出错时退回固定的 500 响应。
    """

    def __init__(self, log: Optional[ErrorLogger] = None) -> None:
        self._log: ErrorLogger = log if log is not None else logger

    async def __call__(self, request: Request, exc: Exception) -> JSONResponse:
        return self.handle(request, exc)

    def handle(self, request: Request, exc: BaseException) -> JSONResponse:
        request_id = _request_id_of(request)
        try:
            app_error = to_app_error(exc)
            if app_error is not None:
                response = self._handle_app_error(app_error, request_id)
                # 框架异常自带的响应头（如 405 的 Allow）保留
                if isinstance(exc, StarletteHTTPException) and exc.headers:
                    response.headers.update(exc.headers)
                return response
            return self._handle_unexpected(exc, request_id)
        except Exception:  # noqa: BLE001
            logger.exception("error handler failed: request_id=%s", request_id)
            return JSONResponse(
                status_code=500,
                content=_err_payload(INTERNAL_ERROR_CODE, GENERIC_MESSAGE, request_id=request_id),
            )

    def _handle_app_error(self, exc: AppError, request_id: Optional[str]) -> JSONResponse:
        status = exc.status_code
        message = _safe_str(exc.message)
        if status >= 500:
            self._log.error(
                "app error: request_id=%s code=%s message=%s",
                request_id,
                exc.code,
                message,
                exc_info=(type(exc), exc, exc.__traceback__),
                extra={"request_id": request_id},
            )
        else:
            self._log.warning(
                "app error: request_id=%s code=%s message=%s",
                request_id,
                exc.code,
                message,
                extra={"request_id": request_id},
            )

        payload = _err_payload(exc.code, exc.message, exc.details, request_id)
        try:
            content = jsonable_encoder(payload)
        except Exception:  # noqa: BLE001
            # details 无法序列化时丢掉 details，保证响应能发出去
            self._log.warning(
                "unserializable error details: request_id=%s code=%s",
                request_id,
                exc.code,
                extra={"request_id": request_id},
            )
            content = _err_payload(exc.code, exc.message, request_id=request_id)
        return JSONResponse(status_code=status, content=content)

    def _handle_unexpected(self, exc: BaseException, request_id: Optional[str]) -> JSONResponse:
        self._log.error(
            "unexpected error: request_id=%s type=%s message=%s",
            request_id,
            type(exc).__name__,
            _safe_str(exc),
            exc_info=(type(exc), exc, exc.__traceback__),
            extra={"request_id": request_id},
        )
        return JSONResponse(
            status_code=500,
            content=_err_payload(INTERNAL_ERROR_CODE, GENERIC_MESSAGE, request_id=request_id),
        )
