# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from credence.common.exception_handlers import ErrorHandler
from credence.common.trace import REQUEST_ID_HEADER, resolve_request_id, set_request_id


class RequestIdMiddleware(BaseHTTPMiddleware):
    """最外层：在任何 handler 之前确定 request id"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        set_request_id(request_id)
        response: Response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """兜底：路由里逃出来的未知异常在这里转成标准错误响应，不再往外抛"""

    def __init__(self, app: ASGIApp, handler: Optional[ErrorHandler] = None) -> None:
        super().__init__(app)
        self.handler = handler if handler is not None else ErrorHandler()

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:  # noqa: BLE001
            return self.handler.handle(request, exc)
